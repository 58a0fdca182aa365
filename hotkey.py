"""Global hotkey adapter based on pynput."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from config import DEFAULT_HOTKEY
from errors import ERROR_MESSAGES, PERMISSION_DENIED, HotkeyRegistrationError

try:
    from pynput import keyboard
except Exception:  # pragma: no cover
    keyboard = None  # type: ignore

logger = logging.getLogger(__name__)


def describe_hotkey(combination: str) -> str:
    """'<cmd>+<shift>+<space>' -> 'Cmd+Shift+Space'."""
    parts = [part.strip().strip("<>") for part in combination.split("+") if part.strip()]
    return "+".join(part.upper() if len(part) == 1 else part.capitalize() for part in parts)


class HotkeySubscription:
    def __init__(self, adapter: GlobalHotkeyAdapter) -> None:
        self._adapter = adapter

    def cancel(self) -> None:
        self._adapter.stop()


class GlobalHotkeyAdapter:
    def __init__(self, combination: str = DEFAULT_HOTKEY) -> None:
        self._combination = combination
        self._listener: Optional[object] = None
        self._keys: set = set()
        self._held: set = set()
        self._active = False
        self._lock = threading.Lock()

    @property
    def combination(self) -> str:
        return self._combination

    def register(self, on_trigger: Callable[[], None]) -> HotkeySubscription:
        if keyboard is None:
            raise HotkeyRegistrationError("pynput is not installed")
        if self._listener is not None:
            raise HotkeyRegistrationError("a hotkey callback is already registered")

        try:
            self._keys = set(keyboard.HotKey.parse(self._combination))
        except ValueError as exc:
            raise HotkeyRegistrationError(f"invalid hotkey {self._combination!r}: {exc}") from exc

        def _on_press(key: object) -> None:
            if self._press(self._canonical(key)):
                on_trigger()

        def _on_release(key: object) -> None:
            self._release(self._canonical(key))

        listener = keyboard.Listener(on_press=_on_press, on_release=_on_release)
        self._listener = listener
        try:
            listener.start()
            listener.wait()
        except Exception as exc:
            self.stop()
            raise HotkeyRegistrationError(f"keyboard listener failed: {exc}") from exc
        if not getattr(listener, "IS_TRUSTED", True):
            self.stop()
            raise HotkeyRegistrationError(ERROR_MESSAGES[PERMISSION_DENIED])

        logger.info("Registered hotkey: %s", describe_hotkey(self._combination))
        return HotkeySubscription(self)

    def stop(self) -> None:
        listener = self._listener
        if listener is not None:
            listener.stop()
            self._listener = None
            logger.info("Hotkey listener stopped")

    def _canonical(self, key: object) -> object:
        listener = self._listener
        if listener is None:
            return key
        return listener.canonical(key)

    def _press(self, key: object) -> bool:
        """Track held keys; True once when the full combination goes down."""
        with self._lock:
            if key not in self._keys:
                return False
            self._held.add(key)
            if self._active or self._held != self._keys:
                return False
            self._active = True
            return True

    def _release(self, key: object) -> None:
        with self._lock:
            if key not in self._keys:
                return
            self._held.discard(key)
            self._active = False
