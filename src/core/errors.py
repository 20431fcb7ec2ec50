"""
Exceptions raised by the API clients.

Every failure surfaces as a subclass of ApiClientError. A 404 on a lookup by
id or slug is not an error and never reaches this module.
"""
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from .envelope import GammaErrorPayload


class ApiClientError(Exception):
    """Base API client exception"""
    def __init__(self, message: str, operation: Optional[str] = None):
        self.operation = operation
        prefix = f"[{operation}] " if operation else ""
        super().__init__(f"{prefix}{message}")


class TransportError(ApiClientError):
    """DNS, connection or timeout failure before an HTTP status was received"""
    def __init__(self, url: str, reason: str, operation: Optional[str] = None):
        self.url = url
        self.reason = reason
        super().__init__(f"request to {url} failed: {reason}", operation)


class MalformedEndpoint(ApiClientError):
    """A base URL or path could not be composed into a request URL"""
    def __init__(self, endpoint: str, reason: str):
        self.endpoint = endpoint
        super().__init__(f"cannot build URL for {endpoint!r}: {reason}")


class UpstreamError(ApiClientError):
    """Non-2xx response, with a structured or opaque error payload"""
    def __init__(self, status: int, payload: Union["GammaErrorPayload", str, None], operation: Optional[str] = None):
        self.status = status
        self.payload = payload
        super().__init__(f"failed with status {status}: {self._describe(payload)}", operation)

    @property
    def structured(self) -> Optional["GammaErrorPayload"]:
        if self.payload is None or isinstance(self.payload, str):
            return None
        return self.payload

    @property
    def raw_body(self) -> Optional[str]:
        return self.payload if isinstance(self.payload, str) else None

    @staticmethod
    def _describe(payload) -> str:
        if payload is None:
            return "<empty body>"
        if isinstance(payload, str):
            return payload[:200]
        return payload.message


class EmptyResponse(ApiClientError):
    """Successful status but no payload where one was expected"""
    def __init__(self, status: int, operation: Optional[str] = None):
        self.status = status
        super().__init__(f"returned no data despite status {status}", operation)


class DecodeError(ApiClientError):
    """Body present but not the expected JSON shape"""
    def __init__(self, reason: str, operation: Optional[str] = None):
        self.reason = reason
        super().__init__(f"could not decode response: {reason}", operation)
