import pytest

from admin_gui.services.settings_service import ListViewSettings, SettingsValidationError


def test_settings_defaults():
    settings = ListViewSettings()
    assert settings.default_page_size == 10
    assert settings.page_size_options == (10, 20, 30, 40, 50)
    assert settings.search_debounce_ms == 300
    assert settings.max_visible_pages == 5
    assert settings.search_case_sensitive is False
    assert isinstance(ListViewSettings.instance, ListViewSettings)


def test_from_env_overrides():
    env = {"PROPADMIN_PAGE_SIZE": "25", "PROPADMIN_SEARCH_DEBOUNCE_MS": "0"}
    settings = ListViewSettings.from_env(env)
    assert settings.default_page_size == 25
    assert settings.search_debounce_ms == 0
    assert settings.max_visible_pages == 5


def test_from_env_malformed_value_ignored(caplog):
    settings = ListViewSettings.from_env({"PROPADMIN_PAGE_SIZE": "many"})
    assert settings.default_page_size == 10
    assert "PROPADMIN_PAGE_SIZE" in caplog.text


def test_from_env_out_of_range_falls_back():
    settings = ListViewSettings.from_env({"PROPADMIN_MAX_VISIBLE_PAGES": "0"})
    assert settings.max_visible_pages == 5


@pytest.mark.parametrize(
    "kwargs",
    [
        {"default_page_size": 0},
        {"page_size_options": ()},
        {"page_size_options": (10, -1)},
        {"search_debounce_ms": -5},
        {"max_visible_pages": 0},
    ],
)
def test_validate_rejects(kwargs):
    with pytest.raises(SettingsValidationError):
        ListViewSettings(**kwargs).validate()
