from unittest.mock import patch

import pytest

from edge_functions import client as client_module
from edge_functions import (
    Credentials,
    FunctionsClient,
    InvalidArgumentError,
    InvocationResult,
    InvokeOptions,
    TransportError,
    TransportTimeoutError,
    invoke,
    update_auth,
)
from edge_functions.tests.fakes import RecordingTransport


def test_update_auth_returns_new_credentials(credentials):
    updated = update_auth(credentials, "new-token")

    assert updated.access_token == "new-token"
    assert credentials.access_token == "user-token"
    assert updated.access_token != credentials.access_token
    assert updated.base_url == credentials.base_url


def test_update_auth_rejects_empty_token(credentials):
    with pytest.raises(InvalidArgumentError):
        update_auth(credentials, "")


def test_credentials_default_access_token_to_api_key():
    creds = Credentials(base_url="https://project.supabase.co", api_key="anon-key")

    assert creds.access_token == "anon-key"


def test_auth_override_applies_to_single_call(credentials, transport):
    invoke(credentials, "fn", auth="override", transport=transport)
    invoke(credentials, "fn", transport=transport)

    assert transport.calls[0]["request"].headers["authorization"] == "Bearer override"
    assert transport.calls[1]["request"].headers["authorization"] == "Bearer user-token"


def test_default_timeout_bounds(credentials, transport):
    invoke(credentials, "fn", transport=transport)

    assert transport.calls[0]["receive_timeout"] == 15_000
    assert transport.calls[0]["request_timeout"] == 15_000


def test_explicit_timeout_bounds(credentials, transport):
    invoke(credentials, "fn", {"timeout": 5_000}, transport=transport)

    assert transport.calls[0]["receive_timeout"] == 5_000
    assert transport.calls[0]["request_timeout"] == 5_000


def test_json_response_is_decoded(credentials):
    transport = RecordingTransport(
        headers={"content-type": "application/json"}, body=b'{"message":"success"}'
    )

    result = invoke(credentials, "fn", body={"name": "Functions"}, transport=transport)

    assert result.success
    assert result.value.status == 200
    assert result.value.body == {"message": "success"}
    assert transport.last_request.headers["content-type"] == "application/json"


def test_text_response_is_passed_through(credentials):
    transport = RecordingTransport(headers={"content-type": "text/plain"}, body=b"Hello, World!")

    response = invoke(credentials, "fn", transport=transport).unwrap()

    assert response.body == b"Hello, World!"
    assert response.text == "Hello, World!"


def test_relay_error_regardless_of_body(credentials):
    transport = RecordingTransport(
        status=200, headers={"x-relay-error": "true", "content-type": "text/plain"}, body=b"fine"
    )

    result = invoke(credentials, "fn", transport=transport)

    assert not result.success
    assert result.error_code == "relay_error"
    assert result.error.metadata.body == b"fine"


def test_transport_error_is_returned_not_raised(credentials):
    transport = RecordingTransport(error=TransportTimeoutError("Request timed out after 5000 ms"))

    result = invoke(credentials, "fn", transport=transport)

    assert not result.success
    assert isinstance(result.error, TransportError)
    assert result.error_code == "timeout"
    with pytest.raises(TransportTimeoutError):
        result.unwrap()


def test_invalid_function_name_fails_before_sending(credentials, transport):
    result = invoke(credentials, "", transport=transport)

    assert result.error_code == "invalid_argument"
    assert transport.calls == []


@pytest.mark.parametrize(
    "options",
    [{"timeout": 0}, {"timeout": -5}, {"region": "mars-1"}, {"method": "FETCH"}, {"unknown": 1}],
)
def test_malformed_options_fail_before_sending(credentials, transport, options):
    result = invoke(credentials, "fn", options, transport=transport)

    assert isinstance(result.error, InvalidArgumentError)
    assert transport.calls == []


def test_unsupported_body_fails_before_sending(credentials, transport):
    result = invoke(credentials, "fn", body=3.14, transport=transport)

    assert result.error_code == "invalid_argument"
    assert transport.calls == []


def test_options_model_and_kwargs_are_merged(credentials, transport):
    options = InvokeOptions(method="PUT", timeout=1_000)

    invoke(credentials, "fn", options, timeout=2_000, transport=transport)

    assert transport.last_request.method == "PUT"
    assert transport.calls[0]["request_timeout"] == 2_000


def test_per_call_transport_option_wins(credentials, transport):
    other = RecordingTransport()

    invoke(credentials, "fn", transport=transport)
    invoke(credentials, "fn", {"transport": other}, transport=transport)

    assert len(transport.calls) == 1
    assert len(other.calls) == 1


def test_streaming_returns_handler_result_without_decoding(credentials):
    transport = RecordingTransport(
        headers={"content-type": "application/json"}, chunks=[b"a", b"b", b"c"]
    )

    def on_response(status, headers, chunks):
        return b"".join(chunks).decode()

    result = invoke(credentials, "fn", on_response=on_response, transport=transport)

    assert result.success
    assert result.value == "abc"
    assert transport.calls[0]["mode"] == "streaming"


def test_streaming_skips_relay_error_check(credentials):
    transport = RecordingTransport(headers={"x-relay-error": "true"}, chunks=[b"x"])

    result = invoke(
        credentials, "fn", on_response=lambda status, headers, chunks: status, transport=transport
    )

    # The handler sees the raw headers and owns the interpretation.
    assert result.success
    assert result.value == 200


def test_streaming_handler_may_return_a_failure(credentials):
    transport = RecordingTransport(headers={"x-relay-error": "true"}, chunks=[])

    def on_response(status, headers, chunks):
        if headers.get("x-relay-error") == "true":
            return InvocationResult.fail(InvalidArgumentError("handler rejected"))
        return InvocationResult.ok(status)

    result = invoke(credentials, "fn", on_response=on_response, transport=transport)

    assert not result.success
    assert result.error.message == "handler rejected"


def test_streaming_handler_returning_none_is_ok_without_payload(credentials):
    transport = RecordingTransport(chunks=[b"ignored"])

    result = invoke(
        credentials, "fn", on_response=lambda *args: None, transport=transport
    )

    assert result.success
    assert result.value is None


def test_functions_client_binds_credentials_and_transport(credentials, transport):
    client = FunctionsClient(credentials, transport=transport)

    client.set_auth("other-token").invoke("fn", method="DELETE")

    assert transport.last_request.headers["authorization"] == "Bearer other-token"
    assert transport.last_request.method == "DELETE"
    assert client.credentials.access_token == "user-token"


@patch("httpx.Client")
def test_default_transport_is_built_from_config(mock_client, monkeypatch, credentials):
    monkeypatch.setattr(client_module, "_default_transport", None)
    monkeypatch.setenv("VERIFY_SSL", "false")
    monkeypatch.setenv("HTTP_TRUST_ENV", "false")

    first = client_module._get_default_transport()
    second = client_module._get_default_transport()

    assert first is second
    mock_client.assert_called_once()
    _, kwargs = mock_client.call_args
    assert kwargs["verify"] is False
    assert kwargs["trust_env"] is False
