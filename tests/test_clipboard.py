from __future__ import annotations

import pytest

import clipboard
from clipboard import PyperclipClipboard, preview


class FakePyperclip:
    def __init__(self, value: object = "") -> None:
        self.value = value
        self.copies: list[str] = []

    def paste(self) -> object:
        return self.value

    def copy(self, text: str) -> None:
        self.copies.append(text)
        self.value = text


def test_read_returns_text(monkeypatch) -> None:  # noqa: ANN001
    monkeypatch.setattr(clipboard, "pyperclip", FakePyperclip("Hello"))
    assert PyperclipClipboard().read() == "Hello"


def test_read_keeps_whitespace_only_text(monkeypatch) -> None:  # noqa: ANN001
    monkeypatch.setattr(clipboard, "pyperclip", FakePyperclip("  \n"))
    assert PyperclipClipboard().read() == "  \n"


@pytest.mark.parametrize("value", ["", None, b"\x89PNG"])
def test_read_empty_or_non_text_is_none(monkeypatch, value) -> None:  # noqa: ANN001
    monkeypatch.setattr(clipboard, "pyperclip", FakePyperclip(value))
    assert PyperclipClipboard().read() is None


def test_write_replaces_contents(monkeypatch) -> None:  # noqa: ANN001
    fake = FakePyperclip("old")
    monkeypatch.setattr(clipboard, "pyperclip", fake)

    gateway = PyperclipClipboard()
    gateway.write("new")

    assert fake.copies == ["new"]
    assert gateway.read() == "new"


def test_missing_dependency_raises(monkeypatch) -> None:  # noqa: ANN001
    monkeypatch.setattr(clipboard, "pyperclip", None)
    gateway = PyperclipClipboard()
    with pytest.raises(RuntimeError):
        gateway.read()
    with pytest.raises(RuntimeError):
        gateway.write("x")


def test_preview_truncates_long_text() -> None:
    assert preview("short") == "short"
    assert preview("x" * 50) == "x" * 50
    assert preview("x" * 60) == "x" * 50 + "..."
