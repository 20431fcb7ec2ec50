"""
Response envelope and error discrimination.

One ResponseEnvelope is built per HTTP exchange. Non-2xx bodies are decoded
into a GammaErrorPayload when possible, otherwise kept as raw text.
"""
import json
from dataclasses import dataclass
from typing import Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from .errors import EmptyResponse, UpstreamError
from .interfaces import HttpResult, IHttpExecutor

NO_CONTENT = 204
NOT_FOUND = 404


class GammaErrorPayload(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    # Gamma answers {"message": ...}; the Data API answers {"error": ...}
    message: str = Field(validation_alias=AliasChoices("message", "error"))
    code: int = 0
    timestamp: str = ""
    path: str = ""


ErrorPayload = Union[GammaErrorPayload, str]


def discriminate_error(body: bytes) -> Optional[ErrorPayload]:
    if not body:
        return None
    text = body.decode("utf-8", errors="replace")
    try:
        decoded = json.loads(text)
    except json.JSONDecodeError:
        return text
    if not isinstance(decoded, dict):
        return text
    try:
        return GammaErrorPayload.model_validate(decoded)
    except ValidationError:
        return text


@dataclass(frozen=True)
class ResponseEnvelope:
    status: int
    body: bytes = b""
    error_payload: Optional[ErrorPayload] = None

    @classmethod
    def from_http(cls, status: int, body: bytes) -> "ResponseEnvelope":
        if status == NO_CONTENT:
            return cls(status=status)
        if 200 <= status < 300:
            return cls(status=status, body=body)
        return cls(status=status, body=body, error_payload=discriminate_error(body))

    @property
    def success(self) -> bool:
        return 200 <= self.status < 300

    @property
    def not_found(self) -> bool:
        return self.status == NOT_FOUND

    def unwrap(self, operation: str) -> bytes:
        """Return the body of a successful response that must carry data."""
        if not self.success:
            raise UpstreamError(self.status, self.error_payload, operation)
        if not self.body or not self.body.strip():
            raise EmptyResponse(self.status, operation)
        return self.body


async def execute(
    executor: IHttpExecutor,
    method: str,
    url: str,
    headers: dict[str, str],
) -> ResponseEnvelope:
    result: HttpResult = await executor.execute(method, url, headers)
    return ResponseEnvelope.from_http(result.status, result.body)
