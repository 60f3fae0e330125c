"""Application services shared by the admin table views."""

from .event_bus import AdminEvent, Event, EventBus, Subscription
from .service_locator import ServiceLocator, ServiceNotFoundError, services
from .settings_service import ListViewSettings, SettingsValidationError

__all__ = [
    "AdminEvent",
    "Event",
    "EventBus",
    "ListViewSettings",
    "ServiceLocator",
    "ServiceNotFoundError",
    "SettingsValidationError",
    "Subscription",
    "services",
]
