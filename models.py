"""Core data models for the app."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class StatusKind(str, Enum):
    IDLE = "IDLE"
    PROCESSING = "PROCESSING"
    DONE = "DONE"
    ERROR = "ERROR"


@dataclass(frozen=True)
class StatusState:
    kind: StatusKind
    message: str = ""

    @classmethod
    def idle(cls) -> StatusState:
        return cls(StatusKind.IDLE)

    @classmethod
    def processing(cls) -> StatusState:
        return cls(StatusKind.PROCESSING)

    @classmethod
    def done(cls) -> StatusState:
        return cls(StatusKind.DONE)

    @classmethod
    def error(cls, message: str) -> StatusState:
        return cls(StatusKind.ERROR, message)


@dataclass(frozen=True)
class TransformSuccess:
    text: str


@dataclass(frozen=True)
class TransformFailure:
    kind: str
    detail: str


TransformResult = Union[TransformSuccess, TransformFailure]
