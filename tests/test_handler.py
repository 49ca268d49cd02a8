"""Lambda adapter."""

import base64

import httpx
import pytest

import lambda_fetch.handler as handler_module
from lambda_fetch.config import Settings
from lambda_fetch.handler import FailureResponse, FetchHandler, LocalContext
from lambda_fetch.models.envelope import FailureEnvelope


def ok_transport() -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, headers={"Content-Type": "text/plain"}, stream=httpx.ByteStream(b"hello"))

    return httpx.MockTransport(handler)


@pytest.fixture
def fetch_handler() -> FetchHandler:
    return FetchHandler(Settings(), transport=ok_transport())


def test_success_envelope(fetch_handler):
    event = {"uri": "https://example.org", "headers": {"User-Agent": "test"}}
    envelope = fetch_handler(event, LocalContext(aws_request_id="req-1"))

    assert envelope["req_id"] == "req-1"
    assert envelope["status"] == 200
    assert envelope["headers"]["content-type"] == "text/plain"
    assert base64.b64decode(envelope["body"]) == b"hello"
    assert set(envelope) == {"req_id", "status", "headers", "body"}


def test_headers_default_to_empty(fetch_handler):
    envelope = fetch_handler({"uri": "https://example.org"}, LocalContext(aws_request_id="req-2"))
    assert envelope["status"] == 200


def test_validation_failure_carries_request_id(fetch_handler):
    with pytest.raises(FailureResponse) as exc_info:
        fetch_handler({"uri": "example.org", "headers": {}}, LocalContext(aws_request_id="req-3"))

    failure = exc_info.value
    assert failure.req_id == "req-3"
    assert str(failure) == "empty scheme"
    assert failure.to_envelope() == FailureEnvelope(req_id="req-3", message="empty scheme")


def test_malformed_event(fetch_handler):
    with pytest.raises(FailureResponse, match="invalid request event") as exc_info:
        fetch_handler({"headers": {"a": "b"}}, LocalContext(aws_request_id="req-4"))
    assert exc_info.value.req_id == "req-4"


def test_non_string_header_value_is_malformed_event(fetch_handler):
    with pytest.raises(FailureResponse, match="invalid request event"):
        fetch_handler({"uri": "https://example.org", "headers": {"X-Count": ["1", "2"]}}, LocalContext())


def test_transport_failure():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    fetch_handler = FetchHandler(Settings(), transport=httpx.MockTransport(refuse))
    with pytest.raises(FailureResponse, match="Connection refused"):
        fetch_handler({"uri": "http://127.0.0.1:1/"}, LocalContext(aws_request_id="req-5"))


def test_deadline_from_context():
    fetch_handler = FetchHandler(Settings(deadline_margin=0.5))
    assert fetch_handler._deadline(object()) is None
    assert 9.0 < fetch_handler._deadline(LocalContext(timeout=10.0)) <= 9.5
    assert fetch_handler._deadline(LocalContext(timeout=0.1)) == 0.0


def test_context_without_request_id(fetch_handler):
    envelope = fetch_handler({"uri": "https://example.org"}, object())
    assert envelope["req_id"] == ""


def test_module_entry_point_reuses_handler(monkeypatch, fetch_handler):
    monkeypatch.setattr(handler_module, "_handler", fetch_handler)
    envelope = handler_module.handler({"uri": "https://example.org"}, LocalContext(aws_request_id="req-6"))
    assert envelope["req_id"] == "req-6"
    assert handler_module._handler is fetch_handler


def test_local_context_request_id_generated():
    assert LocalContext().aws_request_id != LocalContext().aws_request_id


def test_encoded_control_character_in_fragment(fetch_handler):
    envelope = fetch_handler({"uri": "http://example.org/#%00"}, LocalContext(aws_request_id="req-7"))
    assert envelope["status"] == 200


def test_illegal_uri_character_is_failure_response(fetch_handler):
    with pytest.raises(FailureResponse, match="illegal character") as exc_info:
        fetch_handler({"uri": "http://example.org/a b"}, LocalContext(aws_request_id="req-8"))
    assert exc_info.value.req_id == "req-8"
