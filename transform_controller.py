"""State-machine based orchestration of one clipboard transform cycle.

IDLE -> PROCESSING -> {DONE, ERROR} -> IDLE.  At most one cycle is in flight;
a trigger arriving while a transform call is outstanding is dropped.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from clipboard import preview
from errors import (
    CLIPBOARD_READ_FAILED,
    CLIPBOARD_WRITE_FAILED,
    EMPTY_CLIPBOARD,
    ERROR_MESSAGES,
    INTERNAL_ERROR,
)
from interfaces import Clipboard, StatusSink, TransformClient
from models import StatusState, TransformFailure, TransformResult, TransformSuccess

logger = logging.getLogger(__name__)

Task = Callable[[], None]
TaskRunner = Callable[[Task], None]


def run_in_thread(task: Task) -> None:
    threading.Thread(target=task, name="transform", daemon=True).start()


def run_inline(task: Task) -> None:
    task()


class TransformController:
    def __init__(
        self,
        clipboard: Clipboard,
        client: TransformClient,
        status: StatusSink,
        run_in_background: TaskRunner = run_in_thread,
        post_to_ui: TaskRunner = run_inline,
    ) -> None:
        self._clipboard = clipboard
        self._client = client
        self._status = status
        self._run_in_background = run_in_background
        self._post_to_ui = post_to_ui

        self._lock = threading.RLock()
        self._in_flight = False
        self._closed = False
        self._cycle_id = 0
        self._dropped_triggers = 0

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    @property
    def dropped_triggers(self) -> int:
        return self._dropped_triggers

    def handle_trigger(self) -> None:
        with self._lock:
            if self._closed:
                return
            if self._in_flight:
                self._dropped_triggers += 1
                logger.info("Hotkey ignored: cycle %d still in flight", self._cycle_id)
                return

            try:
                text = self._clipboard.read()
            except Exception as exc:
                logger.error("Clipboard read failed: %s", exc)
                self._status.set_state(StatusState.error(ERROR_MESSAGES[CLIPBOARD_READ_FAILED]))
                return
            if not text:
                logger.warning("Clipboard is empty, nothing to transform")
                self._status.set_state(StatusState.error(ERROR_MESSAGES[EMPTY_CLIPBOARD]))
                return

            self._cycle_id += 1
            cycle_id = self._cycle_id
            self._in_flight = True
            logger.info("Cycle %d: processing %s", cycle_id, preview(text))
            self._status.set_state(StatusState.processing())

        self._run_in_background(lambda: self._run_transform(cycle_id, text))

    def close(self) -> None:
        """Ignore further triggers and any result still on its way."""
        with self._lock:
            self._closed = True

    def _run_transform(self, cycle_id: int, text: str) -> None:
        try:
            result = self._client.transform(text)
        except Exception:
            logger.exception("Cycle %d: transform raised", cycle_id)
            result = TransformFailure(kind=INTERNAL_ERROR, detail=ERROR_MESSAGES[INTERNAL_ERROR])
        self._post_to_ui(lambda: self._complete(cycle_id, result))

    def _complete(self, cycle_id: int, result: TransformResult) -> None:
        with self._lock:
            if cycle_id != self._cycle_id or not self._in_flight:
                logger.warning("Cycle %d: late completion ignored", cycle_id)
                return
            self._in_flight = False
            if self._closed:
                logger.info("Cycle %d: result discarded after close", cycle_id)
                return

            if isinstance(result, TransformSuccess):
                self._publish(cycle_id, result.text)
                return
            logger.error("Cycle %d failed: %s: %s", cycle_id, result.kind, result.detail)
            self._status.set_state(StatusState.error(result.detail))

    def _publish(self, cycle_id: int, text: str) -> None:
        try:
            self._clipboard.write(text)
        except Exception as exc:
            logger.error("Cycle %d: clipboard write failed: %s", cycle_id, exc)
            self._status.set_state(StatusState.error(ERROR_MESSAGES[CLIPBOARD_WRITE_FAILED]))
            return
        logger.info("Cycle %d: result copied to clipboard", cycle_id)
        self._status.set_state(StatusState.done())

