"""Failure modes of a solar resource fetch. Every one is fatal to the call."""

from __future__ import annotations

from typing import Optional


class SolarResourceError(RuntimeError):
    """Base class for fetch/normalize failures."""


class HTTPFailure(SolarResourceError):
    def __init__(self, status_code: int, reason: Optional[str], url: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason or ""
        self.url = url
        msg = f"[nrel] HTTP request failed: status={status_code} reason={self.reason!r}"
        if url:
            msg += f" url={url}"
        super().__init__(msg)


class ContentTypeMismatch(SolarResourceError):
    def __init__(self, content_type: Optional[str]):
        self.content_type = content_type or ""
        super().__init__(
            f"[nrel] Response is not JSON. content_type={self.content_type or '(missing)'!r}"
        )


class MalformedPayload(SolarResourceError, ValueError):
    """Decoded JSON does not have the outputs.<metric>.monthly shape."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        prefix = f"[nrel] Malformed payload at {path!r}: " if path else "[nrel] Malformed payload: "
        super().__init__(prefix + message)
