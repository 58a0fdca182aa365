"""Protocol interfaces between the pipeline components."""

from __future__ import annotations

from typing import Callable, Optional, Protocol

from models import StatusState, TransformResult


class Clipboard(Protocol):
    def read(self) -> Optional[str]: ...

    def write(self, text: str) -> None: ...


class TransformClient(Protocol):
    def transform(self, text: str) -> TransformResult: ...


class StatusSink(Protocol):
    def set_state(self, state: StatusState) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay_s: float, callback: Callable[[], None]) -> None: ...
