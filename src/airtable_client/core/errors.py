# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Structured errors raised by the Airtable client.

Every failure surfaces as :class:`AirtableError`. Two concrete kinds exist:

- :class:`ConfigurationError`: raised before any request is sent when the
  client configuration is incomplete. Carries no status code.
- :class:`HttpError`: raised after the service answered with a non-2xx status.
  Carries the status code and the raw response text as ``payload``.
"""

from __future__ import annotations

import datetime as _dt
import json
from typing import Any, Dict, Optional


class AirtableError(Exception):
    """Base structured error for the Airtable client."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "airtable_error",
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        payload: Optional[Any] = None,
        source: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.status_code = status_code
        self.payload = payload
        self.source = source or "client"
        self.timestamp = _dt.datetime.now(_dt.timezone.utc).isoformat()

    @property
    def status(self) -> Optional[int]:
        """HTTP status code, or ``None`` for errors raised before a request was sent."""
        return self.status_code

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "status_code": self.status_code,
            "payload": self.payload,
            "source": self.source,
            "timestamp": self.timestamp,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:  # pragma: no cover
        return (
            f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, "
            f"status_code={self.status_code!r}, message={self.message!r})"
        )


class ConfigurationError(AirtableError):
    def __init__(self, message: str, *, subcode: Optional[str] = None) -> None:
        super().__init__(message, code="configuration_error", subcode=subcode, source="client")


class HttpError(AirtableError):
    def __init__(
        self,
        message: str,
        status_code: int,
        *,
        payload: Optional[str] = None,
        subcode: Optional[str] = None,
        is_transient: bool = False,
    ) -> None:
        super().__init__(
            message,
            code="http_error",
            subcode=subcode,
            status_code=status_code,
            payload=payload,
            source="server",
        )
        self.is_transient = is_transient

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["is_transient"] = self.is_transient
        return d


__all__ = ["AirtableError", "ConfigurationError", "HttpError"]
