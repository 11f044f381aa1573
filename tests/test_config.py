import pytest

from http_executor.config import Config


def test_bundled_defaults(monkeypatch):
    for var in ("HTTP_USER_AGENT", "HTTP_FOLLOW_REDIRECTS", "HTTP_VERIFY_SSL", "LOG_LEVEL", "LOG_FORMAT", "LOG_JSON"):
        monkeypatch.delenv(var, raising=False)

    cfg = Config()

    assert cfg.http == {"user_agent": "http-executor/0.1", "follow_redirects": True, "verify_ssl": True}
    assert cfg.logging["level"] == "INFO"
    assert cfg.logging["json"] is False


def test_env_overrides_are_typed(monkeypatch):
    monkeypatch.setenv("HTTP_USER_AGENT", "probe/2.0")
    monkeypatch.setenv("HTTP_VERIFY_SSL", "false")
    monkeypatch.setenv("LOG_JSON", "TRUE")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    cfg = Config()

    assert cfg.get("http", "user_agent") == "probe/2.0"
    assert cfg.get("http", "verify_ssl") is False
    assert cfg.get("logging", "json") is True
    assert cfg.get("logging", "level") == "DEBUG"


def test_env_override_creates_missing_section(monkeypatch, tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("logging:\n  level: WARNING\n")
    monkeypatch.setenv("HTTP_FOLLOW_REDIRECTS", "false")

    cfg = Config(str(path))

    assert cfg.http == {"follow_redirects": False}
    assert cfg.get("http", "user_agent", default="fallback") == "fallback"


def test_get_returns_default_for_missing_keys():
    cfg = Config()

    assert cfg.get("nope", default=3) == 3
    assert cfg.get("http", "user_agent", "deeper", default=None) is None


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config(str(tmp_path / "absent.yaml"))


def test_invalid_yaml_raises(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("http: [unclosed\n")

    with pytest.raises(ValueError):
        Config(str(path))


def test_non_boolean_env_values_stay_strings(monkeypatch):
    monkeypatch.setenv("HTTP_USER_AGENT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "warning")

    cfg = Config()

    assert cfg.get("http", "user_agent") == "8080"
    assert cfg.get("logging", "level") == "warning"
