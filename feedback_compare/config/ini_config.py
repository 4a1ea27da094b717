########## ini_config.py

import os
from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

INI_DEFAULT_NAME = "feedback_compare.ini"

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_API_KEY_ENV = ("API_KEY", "GEMINI_API_KEY")


@dataclass(frozen=True)
class AppSettings:
    model: str
    api_key_env: tuple[str, ...]
    temperature: Optional[float]

    max_upload_bytes: int

    max_sessions: int
    session_idle_seconds: int

    flask_host: str
    flask_port: int
    flask_debug: bool
    secret_key: str

    log_level: str


class IniConfig:
    """
    Adapter around ConfigParser.
    Keeps INI handling out of your app/service code.
    """

    def __init__(self, ini_path: Path):
        self._ini_path = ini_path
        self._cfg = ConfigParser()
        read_ok = self._cfg.read(str(ini_path), encoding="utf-8-sig")
        if not read_ok:
            raise FileNotFoundError(f"INI file not found or unreadable: {ini_path}")

    @staticmethod
    def from_env_or_default() -> "IniConfig":
        ini_raw = (os.getenv("APP_INI") or "").strip()
        # If APP_INI is not set, default to repo-root-relative ini location
        ini_path = Path(ini_raw) if ini_raw else (Path(__file__).resolve().parents[2] / INI_DEFAULT_NAME)
        return IniConfig(ini_path)

    def _cfg_str(self, section: str, key: str, default: str) -> str:
        return (self._cfg.get(section, key, fallback=default) or "").strip() or default

    def _cfg_optional_float(self, section: str, key: str) -> Optional[float]:
        raw = (self._cfg.get(section, key, fallback="") or "").strip()
        if not raw:
            return None
        try:
            return float(raw)
        except ValueError as e:
            raise ValueError(f"{section}.{key} must be a number, got {raw!r}") from e

    def load_settings(self) -> AppSettings:
        # Gemini
        model = (self._cfg.get("gemini", "model", fallback=DEFAULT_MODEL) or "").strip()
        api_key_env = tuple(
            name.strip()
            for name in (self._cfg.get("gemini", "api_key_env", fallback=",".join(DEFAULT_API_KEY_ENV)) or "").split(",")
            if name.strip()
        ) or DEFAULT_API_KEY_ENV
        temperature = self._cfg_optional_float("gemini", "temperature")

        # Uploads
        max_upload_mb = self._cfg.getint("upload", "max_upload_mb", fallback=16)

        # Sessions
        max_sessions = self._cfg.getint("sessions", "max_sessions", fallback=200)
        session_idle_minutes = self._cfg.getint("sessions", "idle_minutes", fallback=60)

        # Flask
        flask_host = self._cfg_str("flask", "host", "127.0.0.1")
        flask_port = self._cfg.getint("flask", "port", fallback=5000)
        flask_debug = self._cfg.getboolean("flask", "debug", fallback=False)
        secret_key = (self._cfg.get("flask", "secret_key", fallback="") or "").strip()

        # Logging
        log_level = self._cfg_str("logging", "level", "INFO").upper()

        # Validate
        if not model:
            raise ValueError("gemini.model is empty in INI")
        if max_upload_mb <= 0:
            raise ValueError(f"upload.max_upload_mb must be positive, got {max_upload_mb}")
        if max_sessions <= 0:
            raise ValueError(f"sessions.max_sessions must be positive, got {max_sessions}")
        if session_idle_minutes <= 0:
            raise ValueError(f"sessions.idle_minutes must be positive, got {session_idle_minutes}")

        return AppSettings(
            model=model,
            api_key_env=api_key_env,
            temperature=temperature,
            max_upload_bytes=max_upload_mb * 1024 * 1024,
            max_sessions=max_sessions,
            session_idle_seconds=session_idle_minutes * 60,
            flask_host=flask_host,
            flask_port=flask_port,
            flask_debug=flask_debug,
            secret_key=secret_key,
            log_level=log_level,
        )
