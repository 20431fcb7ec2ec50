import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from core.envelope import GammaErrorPayload, ResponseEnvelope, discriminate_error
from core.errors import ApiClientError, EmptyResponse, UpstreamError


def test_success_keeps_body():
    envelope = ResponseEnvelope.from_http(200, b'[{"id": "1"}]')
    assert envelope.success
    assert envelope.error_payload is None
    assert envelope.unwrap("Get events") == b'[{"id": "1"}]'


def test_no_content_has_empty_body():
    envelope = ResponseEnvelope.from_http(204, b"ignored")
    assert envelope.success
    assert envelope.body == b""
    with pytest.raises(EmptyResponse) as exc_info:
        envelope.unwrap("Get health")
    assert exc_info.value.status == 204


@pytest.mark.parametrize("body", [b"", b"   \n"])
def test_success_without_body_is_empty_response(body):
    envelope = ResponseEnvelope.from_http(200, body)
    with pytest.raises(EmptyResponse) as exc_info:
        envelope.unwrap("Get event by ID")
    assert "[Get event by ID]" in str(exc_info.value)


def test_structured_error_payload():
    body = b'{"message": "invalid limit", "code": 400, "timestamp": "2024-01-01T00:00:00Z", "path": "/events"}'
    envelope = ResponseEnvelope.from_http(400, body)
    assert not envelope.success
    assert isinstance(envelope.error_payload, GammaErrorPayload)
    assert envelope.error_payload.message == "invalid limit"
    assert envelope.error_payload.code == 400
    assert envelope.error_payload.path == "/events"

    with pytest.raises(UpstreamError) as exc_info:
        envelope.unwrap("Get events")
    error = exc_info.value
    assert error.status == 400
    assert error.structured.message == "invalid limit"
    assert error.raw_body is None
    assert str(error) == "[Get events] failed with status 400: invalid limit"


def test_data_api_error_key_is_structured():
    payload = discriminate_error(b'{"error": "user is required"}')
    assert isinstance(payload, GammaErrorPayload)
    assert payload.message == "user is required"
    assert payload.code == 0


@pytest.mark.parametrize(
    "body",
    [b"<html>Bad Gateway</html>", b'["not", "an", "object"]', b'{"detail": "nope"}'],
)
def test_unstructured_error_is_raw_text(body):
    payload = discriminate_error(body)
    assert payload == body.decode()


def test_empty_error_body():
    envelope = ResponseEnvelope.from_http(503, b"")
    assert envelope.error_payload is None
    with pytest.raises(UpstreamError) as exc_info:
        envelope.unwrap("Get markets")
    assert exc_info.value.structured is None
    assert exc_info.value.raw_body is None
    assert "<empty body>" in str(exc_info.value)


def test_raw_error_body_is_exposed():
    envelope = ResponseEnvelope.from_http(502, b"upstream down")
    with pytest.raises(ApiClientError) as exc_info:
        envelope.unwrap("Get trades")
    assert exc_info.value.raw_body == "upstream down"


def test_not_found():
    assert ResponseEnvelope.from_http(404, b"").not_found
    assert not ResponseEnvelope.from_http(200, b"{}").not_found
