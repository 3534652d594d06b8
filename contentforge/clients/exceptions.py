"""Errors raised by the remote content clients."""

from __future__ import annotations

from typing import Any, Optional


class ContentClientError(Exception):
    """Raised when a call to the CMS or photo backend fails."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UnexpectedResponseError(ContentClientError):
    """Raised when a backend answers with a body of the wrong shape."""

    def __init__(self, message: str, raw: Any = None) -> None:
        super().__init__(message)
        self.raw = raw
