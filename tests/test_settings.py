# tests/test_settings.py

import pytest

from ethcal.core.errors import ConfigurationError
from ethcal.settings import Settings, SettingsRegistry


def test_defaults():
    s = Settings()
    assert s.calendar_language == "amharic"
    assert s.status_bar_format == "full"
    assert s.format_string == "dday dd mnam year hh:mm tp"

def test_custom_format_string():
    s = Settings(status_bar_format="custom", status_bar_custom_format="mnam dd")
    assert s.format_string == "mnam dd"

def test_geez_only_with_amharic():
    assert Settings(calendar_language="english", use_geez_numerals=True).use_geez_numerals is False
    assert Settings(calendar_language="amharic", use_geez_numerals=True).use_geez_numerals is True

@pytest.mark.parametrize("kwargs", [
    {"status_bar_position": "top"},
    {"status_bar_format": "tiny"},
    {"calendar_language": "oromo"},
    {"week_start": 9},
    {"week_start": True},
    {"week_start": "1"},
])
def test_invalid_settings(kwargs):
    with pytest.raises(ConfigurationError):
        Settings(**kwargs)

def test_from_mapping_accepts_dashed_keys():
    s = Settings.from_mapping({"status-bar-position": "right", "use-geez-numerals": True})
    assert s.status_bar_position == "right"
    assert s.use_geez_numerals
    with pytest.raises(ConfigurationError):
        Settings.from_mapping({"panel-color": "red"})

def test_load_toml(tmp_path):
    path = tmp_path / "ethcal.toml"
    path.write_text('[ethcal]\ncalendar-language = "english"\nweek-start = 0\n', encoding="utf-8")
    s = Settings.load(path)
    assert s.calendar_language == "english"
    assert s.week_start == 0

def test_dispatch_by_key_and_priority():
    reg = SettingsRegistry()
    calls = []
    reg.subscribe("calendar_language", lambda s, k: calls.append(("late", k)), priority=10)
    reg.subscribe(("calendar_language", "use_geez_numerals"), lambda s, k: calls.append(("early", k)), priority=-1)
    reg.subscribe("status_bar_position", lambda s, k: calls.append(("position", k)))

    changed = reg.update(calendar_language="english")
    assert changed == ("calendar_language",)
    assert calls == [("early", ("calendar_language",)), ("late", ("calendar_language",))]

def test_subscriber_runs_once_per_update():
    reg = SettingsRegistry()
    seen = []
    reg.subscribe(("calendar_language", "use_geez_numerals"), lambda s, k: seen.append(k))
    reg.update(use_geez_numerals=True, status_bar_position="center")
    reg.update(calendar_language="english")
    assert seen == [("use_geez_numerals",), ("calendar_language", "use_geez_numerals")]
    assert reg.settings.use_geez_numerals is False

def test_no_change_no_dispatch_and_unsubscribe():
    reg = SettingsRegistry()
    seen = []
    unsubscribe = reg.subscribe("week_start", lambda s, k: seen.append(s.week_start))
    assert reg.update(week_start=1) == ()
    reg.update(week_start=0)
    unsubscribe()
    reg.update(week_start=2)
    assert seen == [0]

def test_subscribe_unknown_key():
    with pytest.raises(ConfigurationError):
        SettingsRegistry().subscribe("colour", lambda s, k: None)

def test_update_unknown_key_leaves_settings_alone():
    reg = SettingsRegistry()
    seen = []
    reg.subscribe("calendar_language", lambda s, k: seen.append(k))
    with pytest.raises(ConfigurationError):
        reg.update(colour="red", calendar_language="english")
    assert reg.settings == Settings()
    assert seen == []

def test_update_invalid_value():
    reg = SettingsRegistry()
    with pytest.raises(ConfigurationError):
        reg.update(week_start=False)
    assert reg.settings.week_start == 1
