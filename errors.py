"""Shared error codes and user-facing messages."""

from __future__ import annotations

MISSING_CREDENTIAL = "MISSING_CREDENTIAL"
INVALID_REQUEST = "INVALID_REQUEST"
TRANSPORT_FAILURE = "TRANSPORT_FAILURE"
REMOTE_REJECTED = "REMOTE_REJECTED"
MALFORMED_RESPONSE = "MALFORMED_RESPONSE"
EMPTY_CLIPBOARD = "EMPTY_CLIPBOARD"
CLIPBOARD_READ_FAILED = "CLIPBOARD_READ_FAILED"
CLIPBOARD_WRITE_FAILED = "CLIPBOARD_WRITE_FAILED"
INTERNAL_ERROR = "INTERNAL_ERROR"
PERMISSION_DENIED = "PERMISSION_DENIED"

ERROR_MESSAGES = {
    MISSING_CREDENTIAL: "missing credential",
    INVALID_REQUEST: "Could not build the request",
    TRANSPORT_FAILURE: "Network request failed",
    MALFORMED_RESPONSE: "Invalid response from API",
    EMPTY_CLIPBOARD: "Empty clipboard",
    CLIPBOARD_READ_FAILED: "Could not read the clipboard",
    CLIPBOARD_WRITE_FAILED: "Could not write to clipboard",
    INTERNAL_ERROR: "Unexpected error",
    PERMISSION_DENIED: "Accessibility permission is required in macOS settings.",
}


def remote_rejected_message(status_code: int, body: str) -> str:
    return f"API error ({status_code}): {body}"


class HotkeyRegistrationError(RuntimeError):
    """The global hotkey could not be installed."""
