import importlib

from context_map import config


def test_defaults_when_env_unset(monkeypatch):
    for key in (
        "CONTEXT_MAP_LOG_LEVEL",
        "CONTEXT_MAP_LOG_FORMAT",
        "CONTEXT_MAP_APP_NAME",
        "CONTEXT_MAP_APP_VERSION",
    ):
        monkeypatch.delenv(key, raising=False)
    assert config._str("CONTEXT_MAP_APP_NAME", "RecordExampleApp") == "RecordExampleApp"
    assert config._str("CONTEXT_MAP_LOG_LEVEL") == ""


def test_blank_env_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("CONTEXT_MAP_APP_VERSION", "   ")
    assert config._str("CONTEXT_MAP_APP_VERSION", "1.0.0") == "1.0.0"


def test_settings_read_from_env(monkeypatch):
    monkeypatch.setenv("CONTEXT_MAP_APP_NAME", "  BillingApp ")
    monkeypatch.setenv("CONTEXT_MAP_LOG_FORMAT", "json")
    try:
        reloaded = importlib.reload(config)
        assert reloaded.APP_NAME == "BillingApp"
        assert reloaded.LOG_FORMAT == "json"
    finally:
        monkeypatch.undo()
        importlib.reload(config)
