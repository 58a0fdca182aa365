"""Simple JSON-based config store."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

APP_DIR = Path.home() / ".config" / "clipglot"
API_KEY_ENV = "GEMINI_API_KEY"

DEFAULT_HOTKEY = "<cmd>+<shift>+<space>"
DEFAULT_MODEL = "gemini-flash-latest"
DEFAULT_REQUEST_TIMEOUT_S = 60.0


class JsonConfigStore:
    def __init__(self, path: Path | None = None) -> None:
        self._path = path or APP_DIR / "config.json"
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def get_hotkey(self) -> str:
        data = self._read_all()
        return str(data.get("hotkey") or DEFAULT_HOTKEY)

    def get_model(self) -> str:
        data = self._read_all()
        return str(data.get("model") or DEFAULT_MODEL)

    def get_endpoint(self) -> str:
        """Full generateContent URL; empty means derive it from the model."""
        data = self._read_all()
        return str(data.get("endpoint", ""))

    def get_request_timeout_s(self) -> float:
        data = self._read_all()
        try:
            value = float(data.get("request_timeout_s", DEFAULT_REQUEST_TIMEOUT_S))
        except (TypeError, ValueError):
            return DEFAULT_REQUEST_TIMEOUT_S
        return value if value > 0 else DEFAULT_REQUEST_TIMEOUT_S

    def _read_all(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning("Ignoring unreadable config %s: %s", self._path, exc)
            return {}
        return data if isinstance(data, dict) else {}


def read_api_key(env_var: str = API_KEY_ENV) -> str:
    """Read the API key once at startup. Missing is not fatal."""
    key = os.getenv(env_var, "").strip()
    if key:
        logger.info("%s loaded", env_var)
    else:
        logger.warning("%s not found in environment variables", env_var)
    return key
