"""LLM Base Classes and Shared Code"""

from typing import Any, Optional, Protocol, runtime_checkable

from committer.errors import OverloadError, UnknownError

OVERLOADED_ERROR = "overloaded_error"


@runtime_checkable
class LLMClient(Protocol):
    """Anything that can send a prompt and hand back a raw reply."""

    def send(self, prompt: str, timeout: Optional[float] = None) -> dict:
        ...


def error_payload(kind: str, message: Any) -> dict:
    """Build a payload in the provider's error shape."""
    return {"type": "error", "error": {"type": kind, "message": str(message)}}


def normalize_error_body(body: Any) -> dict:
    """Coerce an error body into the provider's error shape.

    Bodies that did not decode to a JSON object (HTML error pages, empty
    responses) become an ``unknown_error`` carrying the raw text.
    """
    if isinstance(body, dict):
        if body.get("type") == "error" and isinstance(body.get("error"), dict):
            return body
        return {"type": "error", "error": body}
    return error_payload("unknown_error", body if body is not None else "")


def classify_reply(payload: dict) -> dict:
    """Raise the matching error for an error reply, otherwise return it."""
    if payload.get("type") != "error":
        return payload

    error = payload.get("error") or {}
    if isinstance(error, dict) and error.get("type") == OVERLOADED_ERROR:
        raise OverloadError(payload)
    raise UnknownError(payload)
