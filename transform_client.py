"""Remote text transform client for the Gemini generateContent API.

``transform`` blocks for the duration of one HTTPS round trip and is meant to
run on a worker thread.  It never raises for expected failures: every outcome
is returned as a ``TransformSuccess`` or ``TransformFailure``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import httpx

from config import DEFAULT_MODEL, DEFAULT_REQUEST_TIMEOUT_S
from errors import (
    ERROR_MESSAGES,
    INVALID_REQUEST,
    MALFORMED_RESPONSE,
    MISSING_CREDENTIAL,
    REMOTE_REJECTED,
    TRANSPORT_FAILURE,
    remote_rejected_message,
)
from models import TransformFailure, TransformResult, TransformSuccess
from prompt import build_prompt

logger = logging.getLogger(__name__)

GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"


def endpoint_for_model(model: str) -> str:
    return f"{GEMINI_API_BASE}/{model}:generateContent"


def build_request_body(text: str) -> bytes:
    payload = {
        "contents": [
            {
                "role": "user",
                "parts": [{"text": build_prompt(text)}],
            }
        ]
    }
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


def _failure(kind: str, detail: Optional[str] = None) -> TransformFailure:
    return TransformFailure(kind=kind, detail=detail or ERROR_MESSAGES[kind])


def _first(value: Any) -> Optional[dict]:
    if not isinstance(value, list) or not value:
        return None
    head = value[0]
    return head if isinstance(head, dict) else None


def _extract_text(payload: Any) -> Optional[str]:
    """Walk candidates[0].content.parts[0].text; None on any deviation."""
    if not isinstance(payload, dict):
        return None
    candidate = _first(payload.get("candidates"))
    if candidate is None:
        return None
    content = candidate.get("content")
    if not isinstance(content, dict):
        return None
    part = _first(content.get("parts"))
    if part is None:
        return None
    text = part.get("text")
    return text if isinstance(text, str) else None


def parse_response(raw: str | bytes) -> TransformResult:
    try:
        payload = json.loads(raw)
    except ValueError:
        payload = None
    text = _extract_text(payload)
    if text is None:
        body = raw.decode("utf-8", "replace") if isinstance(raw, bytes) else raw
        logger.warning("Unexpected response shape: %s", body[:300])
        return _failure(MALFORMED_RESPONSE)
    return TransformSuccess(text=text)


class GeminiTransformClient:
    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        endpoint: str = "",
        request_timeout_s: float = DEFAULT_REQUEST_TIMEOUT_S,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self._api_key = api_key
        self._endpoint = endpoint or endpoint_for_model(model)
        self._timeout = httpx.Timeout(request_timeout_s, connect=10.0)
        self._http_client = http_client

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def transform(self, text: str) -> TransformResult:
        if not self._api_key:
            logger.error("Transform skipped: no API key configured")
            return _failure(MISSING_CREDENTIAL)

        try:
            body = build_request_body(text)
        except (TypeError, ValueError) as exc:
            logger.error("Could not serialize request: %s", exc)
            return _failure(INVALID_REQUEST)

        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self._api_key,
        }
        logger.info("POST %s (%d bytes)", self._endpoint, len(body))
        try:
            response = self._post(body, headers)
        except httpx.HTTPError as exc:
            logger.warning("Transform request failed: %s - %s", type(exc).__name__, exc)
            return _failure(TRANSPORT_FAILURE)

        logger.info("HTTP status %d", response.status_code)
        if response.status_code != 200:
            logger.error("API error %d: %s", response.status_code, response.text[:300])
            return _failure(
                REMOTE_REJECTED,
                remote_rejected_message(response.status_code, response.text),
            )
        return parse_response(response.content)

    def _post(self, body: bytes, headers: dict) -> httpx.Response:
        if self._http_client is not None:
            return self._http_client.post(
                self._endpoint, content=body, headers=headers, timeout=self._timeout
            )
        with httpx.Client(timeout=self._timeout) as client:
            return client.post(self._endpoint, content=body, headers=headers)
