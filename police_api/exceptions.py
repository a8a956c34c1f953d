"""Exception hierarchy for the police_api client.

Every failing operation raises exactly one of the three disjoint kinds:
``TransportError`` (no HTTP response at all), ``APIError`` (non-2xx status)
or ``DecodeError`` (2xx body that does not match the declared schema).
"""

from typing import Any


class PoliceAPIError(Exception):
    """Base exception for police_api client errors."""

    pass


class TransportError(PoliceAPIError):
    """The request never produced an HTTP response (DNS, connect, TLS, timeout)."""

    def __init__(self, url: str, detail: str):
        self.url = url
        self.detail = detail
        super().__init__(f"HTTP request failed for {url}: {detail}")


class APIError(PoliceAPIError):
    """The service answered with a non-2xx status."""

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"API error (HTTP {status}): {body}")


class DecodeError(PoliceAPIError):
    """A 2xx response body did not satisfy the declared schema."""

    def __init__(
        self,
        operation: str,
        detail: str,
        errors: list[dict[str, Any]] | None = None,
    ):
        self.operation = operation
        self.detail = detail
        self.errors = errors or []
        super().__init__(f"Could not decode {operation} response: {detail}")


class UnknownCategory(DecodeError, ValueError):
    """A string matched neither spelling of any known outcome category."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__("outcome category", f"unknown outcome category {raw!r}")
