from __future__ import annotations

from pathlib import Path

import pytest

from feedback_compare.config.ini_config import DEFAULT_API_KEY_ENV, DEFAULT_MODEL, IniConfig


def _write_ini(tmp_path: Path, text: str) -> Path:
    p = tmp_path / "app.ini"
    p.write_text(text, encoding="utf-8")
    return p


def test_defaults_when_sections_missing(tmp_path: Path):
    settings = IniConfig(_write_ini(tmp_path, "[other]\nx = 1\n")).load_settings()

    assert settings.model == DEFAULT_MODEL
    assert settings.api_key_env == DEFAULT_API_KEY_ENV
    assert settings.temperature is None
    assert settings.max_upload_bytes == 16 * 1024 * 1024
    assert settings.max_sessions == 200
    assert settings.session_idle_seconds == 3600
    assert settings.flask_host == "127.0.0.1"
    assert settings.flask_port == 5000
    assert settings.flask_debug is False
    assert settings.secret_key == ""
    assert settings.log_level == "INFO"


def test_values_are_read_and_normalized(tmp_path: Path):
    ini = _write_ini(
        tmp_path,
        "[gemini]\n"
        "model = gemini-2.0-flash\n"
        "api_key_env = MY_KEY , OTHER_KEY,\n"
        "temperature = 0.3\n"
        "[upload]\n"
        "max_upload_mb = 2\n"
        "[sessions]\n"
        "max_sessions = 5\n"
        "idle_minutes = 10\n"
        "[flask]\n"
        "host = 0.0.0.0\n"
        "port = 8080\n"
        "debug = yes\n"
        "secret_key = abc\n"
        "[logging]\n"
        "level = debug\n",
    )

    settings = IniConfig(ini).load_settings()

    assert settings.model == "gemini-2.0-flash"
    assert settings.api_key_env == ("MY_KEY", "OTHER_KEY")
    assert settings.temperature == 0.3
    assert settings.max_upload_bytes == 2 * 1024 * 1024
    assert settings.max_sessions == 5
    assert settings.session_idle_seconds == 600
    assert settings.flask_host == "0.0.0.0"
    assert settings.flask_port == 8080
    assert settings.flask_debug is True
    assert settings.secret_key == "abc"
    assert settings.log_level == "DEBUG"


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        IniConfig(tmp_path / "nope.ini")


@pytest.mark.parametrize(
    "text",
    [
        "[gemini]\nmodel =\n",
        "[gemini]\ntemperature = warm\n",
        "[upload]\nmax_upload_mb = 0\n",
        "[sessions]\nmax_sessions = 0\n",
        "[sessions]\nidle_minutes = -1\n",
    ],
)
def test_invalid_values_raise(tmp_path: Path, text: str):
    with pytest.raises(ValueError):
        IniConfig(_write_ini(tmp_path, text)).load_settings()


def test_from_env_uses_app_ini(tmp_path: Path, monkeypatch):
    ini = _write_ini(tmp_path, "[gemini]\nmodel = from-env\n")
    monkeypatch.setenv("APP_INI", str(ini))

    assert IniConfig.from_env_or_default().load_settings().model == "from-env"


def test_shipped_ini_loads(monkeypatch):
    monkeypatch.delenv("APP_INI", raising=False)

    settings = IniConfig.from_env_or_default().load_settings()

    assert settings.model == DEFAULT_MODEL
