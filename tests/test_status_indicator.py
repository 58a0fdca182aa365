from __future__ import annotations

from typing import Callable

from models import StatusKind, StatusState
from status_indicator import DONE_REVERT_S, ERROR_REVERT_S, StatusIndicator, status_label, status_tooltip


class FakeScheduler:
    def __init__(self) -> None:
        self.calls: list[tuple[float, Callable[[], None]]] = []

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> None:
        self.calls.append((delay_s, callback))

    def fire(self, index: int = -1) -> None:
        self.calls[index][1]()


def _make() -> tuple[StatusIndicator, FakeScheduler, list[StatusState]]:
    rendered: list[StatusState] = []
    scheduler = FakeScheduler()
    return StatusIndicator(render=rendered.append, scheduler=scheduler), scheduler, rendered


def test_starts_idle_without_rendering() -> None:
    indicator, scheduler, rendered = _make()
    assert indicator.state == StatusState.idle()
    assert rendered == []
    assert scheduler.calls == []


def test_processing_and_idle_schedule_nothing() -> None:
    indicator, scheduler, rendered = _make()

    indicator.set_state(StatusState.processing())
    indicator.set_state(StatusState.idle())

    assert scheduler.calls == []
    assert rendered == [StatusState.processing(), StatusState.idle()]


def test_done_reverts_after_three_seconds() -> None:
    indicator, scheduler, rendered = _make()

    indicator.set_state(StatusState.done())

    assert [delay for delay, _ in scheduler.calls] == [DONE_REVERT_S]
    assert DONE_REVERT_S == 3.0
    assert indicator.state == StatusState.done()

    scheduler.fire()

    assert indicator.state == StatusState.idle()
    assert rendered[-1] == StatusState.idle()


def test_error_reverts_after_five_seconds() -> None:
    indicator, scheduler, _ = _make()

    indicator.set_state(StatusState.error("Empty clipboard"))

    assert [delay for delay, _ in scheduler.calls] == [ERROR_REVERT_S]
    assert ERROR_REVERT_S == 5.0
    scheduler.fire()
    assert indicator.state == StatusState.idle()


def test_superseded_revert_is_discarded() -> None:
    indicator, scheduler, rendered = _make()

    indicator.set_state(StatusState.done())
    indicator.set_state(StatusState.processing())
    scheduler.fire(0)

    assert indicator.state == StatusState.processing()
    assert rendered[-1] == StatusState.processing()


def test_only_latest_of_two_reverts_applies() -> None:
    indicator, scheduler, rendered = _make()

    indicator.set_state(StatusState.error("first"))
    indicator.set_state(StatusState.done())
    scheduler.fire(0)
    assert indicator.state == StatusState.done()

    scheduler.fire(1)
    assert indicator.state == StatusState.idle()
    assert rendered.count(StatusState.idle()) == 1


def test_custom_delays() -> None:
    rendered: list[StatusState] = []
    scheduler = FakeScheduler()
    indicator = StatusIndicator(rendered.append, scheduler, done_revert_s=0.5, error_revert_s=1.5)

    indicator.set_state(StatusState.done())
    indicator.set_state(StatusState.error("x"))

    assert [delay for delay, _ in scheduler.calls] == [0.5, 1.5]


def test_status_labels() -> None:
    glyph, tooltip = status_label(StatusState.idle(), "Ctrl+Alt+T")
    assert glyph == ""
    assert "Ready" in tooltip and "Ctrl+Alt+T" in tooltip

    assert status_label(StatusState.processing())[0] == "⏳"
    assert status_label(StatusState.done())[0] == "✅"

    glyph, tooltip = status_label(StatusState.error("API error (500): boom"))
    assert glyph == "❌"
    assert "API error (500): boom" in tooltip


def test_status_kind_values() -> None:
    assert StatusState.error("x").kind is StatusKind.ERROR
    assert StatusState.error("x").message == "x"


def test_tooltip_carries_glyph() -> None:
    assert status_tooltip(StatusState.processing()).startswith("⏳ Processing...")
    assert status_tooltip(StatusState.done()).startswith("✅ Done!")
    assert status_tooltip(StatusState.error("boom")).startswith("❌ Error: boom")
    assert status_tooltip(StatusState.idle(), "Ctrl+Alt+T").startswith("clipglot - Ready")
