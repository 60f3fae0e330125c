"""List view settings (page sizes, search debounce, pager width).

A single ``ListViewSettings.instance`` is shared by the admin tables. Hosts
may replace it at startup, e.g. with ``ListViewSettings.from_env()``, and
tests may swap in their own instance.

Environment overrides:
    PROPADMIN_PAGE_SIZE            default rows per page
    PROPADMIN_SEARCH_DEBOUNCE_MS   search quiet period in milliseconds
    PROPADMIN_MAX_VISIBLE_PAGES    pager button window width
Malformed values are ignored with a warning.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from typing import ClassVar, Mapping, Tuple

_logger = logging.getLogger(__name__)

__all__ = ["ListViewSettings", "SettingsValidationError"]

_ENV_KEYS = {
    "default_page_size": "PROPADMIN_PAGE_SIZE",
    "search_debounce_ms": "PROPADMIN_SEARCH_DEBOUNCE_MS",
    "max_visible_pages": "PROPADMIN_MAX_VISIBLE_PAGES",
}


class SettingsValidationError(ValueError):
    """Raised when list view settings are out of range."""


@dataclass
class ListViewSettings:
    """Runtime knobs for table views.

    Attributes:
        default_page_size: Rows per page for a freshly opened table.
        page_size_options: Choices offered by the page-size dropdown.
        search_debounce_ms: Quiet period before a typed term is committed.
            Zero commits on every keystroke.
        max_visible_pages: Number of numbered pager buttons.
        search_case_sensitive: Default case handling for table search.
    """

    instance: ClassVar["ListViewSettings"]

    default_page_size: int = 10
    page_size_options: Tuple[int, ...] = field(default=(10, 20, 30, 40, 50))
    search_debounce_ms: int = 300
    max_visible_pages: int = 5
    search_case_sensitive: bool = False

    def validate(self) -> "ListViewSettings":
        if self.default_page_size < 1:
            raise SettingsValidationError("default_page_size must be >= 1")
        if not self.page_size_options or any(size < 1 for size in self.page_size_options):
            raise SettingsValidationError("page_size_options must hold sizes >= 1")
        if self.search_debounce_ms < 0:
            raise SettingsValidationError("search_debounce_ms must be >= 0")
        if self.max_visible_pages < 1:
            raise SettingsValidationError("max_visible_pages must be >= 1")
        return self

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ListViewSettings":
        env = os.environ if environ is None else environ
        values = {}
        for attr, var in _ENV_KEYS.items():
            raw = env.get(var)
            if raw is None:
                continue
            try:
                values[attr] = int(raw)
            except ValueError:
                _logger.warning("ignoring %s=%r (not an integer)", var, raw)
        settings = cls(**values)
        try:
            return settings.validate()
        except SettingsValidationError as exc:
            _logger.warning("invalid list view settings from environment (%s); using defaults", exc)
            return cls()

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


ListViewSettings.instance = ListViewSettings()
