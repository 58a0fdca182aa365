"""Transient status indicator with auto-revert to idle."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from interfaces import Scheduler
from models import StatusKind, StatusState

logger = logging.getLogger(__name__)

DONE_REVERT_S = 3.0
ERROR_REVERT_S = 5.0

RenderCallback = Callable[[StatusState], None]


def status_label(state: StatusState, hotkey_label: str = "Cmd+Shift+Space") -> tuple[str, str]:
    """Return (glyph, tooltip) for the tray surface."""
    if state.kind == StatusKind.PROCESSING:
        return "⏳", "Processing...\nTranslating your text with AI"
    if state.kind == StatusKind.DONE:
        return "✅", "Done!\nTranslation copied to clipboard"
    if state.kind == StatusKind.ERROR:
        return "❌", f"Error: {state.message}\nCheck logs for details"
    return "", f"clipglot - Ready\nPress {hotkey_label} to translate clipboard"


def status_tooltip(state: StatusState, hotkey_label: str = "Cmd+Shift+Space") -> str:
    glyph, tooltip = status_label(state, hotkey_label)
    return f"{glyph} {tooltip}" if glyph else tooltip


class StatusIndicator:
    def __init__(
        self,
        render: RenderCallback,
        scheduler: Scheduler,
        done_revert_s: float = DONE_REVERT_S,
        error_revert_s: float = ERROR_REVERT_S,
    ) -> None:
        self._render = render
        self._scheduler = scheduler
        self._done_revert_s = done_revert_s
        self._error_revert_s = error_revert_s

        self._lock = threading.RLock()
        self._state = StatusState.idle()
        # Bumped on every transition; a revert only applies to its own generation.
        self._generation = 0

    @property
    def state(self) -> StatusState:
        return self._state

    def set_state(self, state: StatusState) -> None:
        with self._lock:
            self._generation += 1
            generation = self._generation
            self._state = state
            logger.info("Status -> %s%s", state.kind.value, f" ({state.message})" if state.message else "")
            self._render(state)

            delay = self._revert_delay(state)
            if delay is not None:
                self._scheduler.call_later(delay, lambda: self._revert(generation))

    def _revert_delay(self, state: StatusState) -> Optional[float]:
        if state.kind == StatusKind.DONE:
            return self._done_revert_s
        if state.kind == StatusKind.ERROR:
            return self._error_revert_s
        return None

    def _revert(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                logger.debug("Discarding stale revert (generation %d)", generation)
                return
            self.set_state(StatusState.idle())
