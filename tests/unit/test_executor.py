# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx
import pytest

from httpbridge.config import HttpSettings
from httpbridge.errors import ErrorCategory, InvalidRequest, NetworkError
from httpbridge.executor import RequestExecutor
from httpbridge.http.adapters import StubHttpClient
from httpbridge.http.httpx_client import HttpxClient
from httpbridge.http.models import HttpResponse, RequestDescriptor


@pytest.fixture
def executor(http_client, settings):
    return RequestExecutor(http_client, settings)


def test_post_to_json_echo_returns_flattened_object(executor, transport):
    response = executor.execute(
        RequestDescriptor(url="https://example.com/echo", method="POST", headers={}, body={"a": 1})
    )
    assert response.status == 200
    assert response.data == {"a": 1}
    sent = transport.requests[0]
    assert sent.content == b'{"a":1}'
    assert sent.headers["content-type"] == "application/json"


@pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
def test_non_get_without_content_type_gets_json_default(executor, transport, method):
    executor.execute(RequestDescriptor(url="https://example.com/anything", method=method))
    assert transport.requests[-1].headers["Content-Type"] == "application/json"


def test_caller_content_type_is_kept(executor, transport):
    executor.execute(
        RequestDescriptor(
            url="https://example.com/echo",
            method="POST",
            headers={"content-type": "text/plain"},
            body="raw text",
        )
    )
    sent = transport.requests[0]
    assert sent.headers.get_list("content-type") == ["text/plain"]
    assert sent.content == b"raw text"


def test_get_never_sends_body_or_default_content_type(executor, transport):
    executor.execute(RequestDescriptor(url="https://example.com/anything", body={"ignored": True}))
    sent = transport.requests[0]
    assert sent.method == "GET"
    assert sent.content == b""
    assert "content-type" not in sent.headers
    assert sent.url.query == b""


def test_headers_applied_and_user_agent_defaulted(executor, transport):
    executor.execute(RequestDescriptor(url="https://example.com/anything", headers={"Authorization": "Bearer t"}))
    executor.execute(RequestDescriptor(url="https://example.com/anything", headers={"user-agent": "Mine/2"}))
    first, second = transport.requests
    assert first.headers["Authorization"] == "Bearer t"
    assert first.headers["User-Agent"] == "httpbridge-tests/1.0"
    assert second.headers["User-Agent"] == "Mine/2"


def test_error_status_body_is_read_like_success(executor):
    missing = executor.execute(RequestDescriptor(url="https://example.com/missing"))
    assert missing.status == 404
    assert missing.data == {"text": "not found"}

    failed = executor.execute(RequestDescriptor(url="https://example.com/server-error"))
    assert failed.status == 500
    assert failed.data == {"error": "boom", "code": 500}


def test_malformed_json_falls_back_to_text(executor):
    response = executor.execute(RequestDescriptor(url="https://example.com/broken-json"))
    assert response.status == 200
    assert response.data == {"text": "{invalid json"}


def test_repeated_headers_keep_first_value_and_body_lines_are_joined(executor):
    response = executor.execute(RequestDescriptor(url="https://example.com/multi"))
    assert response.header("X-Dup") == "first"
    assert "x-dup" not in response.headers
    assert response.data == {"text": "line oneline two"}


def test_raw_body_mode_keeps_text_verbatim(transport):
    settings = HttpSettings(join_body_lines=False)
    executor = RequestExecutor(HttpxClient(settings, client=httpx.Client(transport=transport)), settings)
    response = executor.execute(RequestDescriptor(url="https://example.com/multi"))
    assert response.data == {"text": "  line one \n line two  \n"}


def test_repeated_get_is_idempotent(executor):
    descriptor = RequestDescriptor(url="https://example.com/server-error")
    first = executor.execute(descriptor)
    second = executor.execute(descriptor)
    assert (first.status, first.data) == (second.status, second.data)


def test_transport_failure_becomes_network_error(executor):
    with pytest.raises(NetworkError) as excinfo:
        executor.execute(RequestDescriptor(url="https://example.com/refused"))
    assert excinfo.value.message == "Connection refused"
    assert excinfo.value.category == ErrorCategory.CONNECTION_ERROR
    assert excinfo.value.__cause__ is not None


def test_unexpected_client_exception_is_wrapped():
    class ExplodingClient:
        def request(self, request):  # noqa: ARG002
            raise RuntimeError("socket closed")

        def close(self):
            return None

    executor = RequestExecutor(ExplodingClient(), HttpSettings())
    with pytest.raises(NetworkError, match="socket closed"):
        executor.execute(RequestDescriptor(url="https://example.com"))


def test_invalid_url_fails_before_any_request():
    stub = StubHttpClient()
    RequestExecutor(stub, HttpSettings())
    with pytest.raises(InvalidRequest):
        RequestDescriptor(url="", method="GET", headers={}, body=None)
    assert stub.requests == []


def test_get_data_as_query_appends_mapping_to_url():
    stub = StubHttpClient()
    stub.add("https://example.com/search?q=books&page=2", HttpResponse(status_code=200, content=b"found"))
    executor = RequestExecutor(stub, HttpSettings(get_data_as_query=True))

    response = executor.execute(RequestDescriptor(url="https://example.com/search", body={"q": "books", "page": 2}))

    assert response.data == {"text": "found"}
    assert stub.requests[0].content is None


def test_build_request_carries_settings():
    stub = StubHttpClient()
    executor = RequestExecutor(stub, HttpSettings(allow_redirects=False, user_agent="UA/9"))
    request = executor.build_request(RequestDescriptor(url="https://example.com", method="put", body=[1, 2]))
    assert request.method == "PUT"
    assert request.content == b"[1,2]"
    assert request.allow_redirects is False
    assert request.headers == {"User-Agent": "UA/9", "Content-Type": "application/json"}
