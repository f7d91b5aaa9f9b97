"""Tests for client construction and request building."""

from __future__ import annotations

import httpx
import pytest
from pydantic import SecretStr

from library_client import (
    BearerTokenCredentials,
    Client,
    ClientConfig,
    ConfigError,
    RequestError,
    new_client,
)
from library_client.logging import logger as default_logger


def _client(base_url: str = "https://library.example/api", **kwargs) -> Client:
    return new_client(ClientConfig(base_url=base_url, http_client=httpx.AsyncClient(), **kwargs))


def test_new_client_appends_trailing_separator():
    client = _client("https://example.com/api")

    assert str(client.base_url) == "https://example.com/api/"


def test_new_client_keeps_existing_separator():
    client = _client("https://example.com/api/")

    assert str(client.base_url) == "https://example.com/api/"


@pytest.mark.parametrize(
    "base_url, message",
    [
        ("", "missing base URL"),
        ("ftp://example.com", "unsupported scheme"),
        ("example.com/api", "unsupported scheme"),
        ("http://example.com:port", "invalid base URL"),
    ],
)
def test_new_client_rejects_bad_base_url(base_url, message):
    with pytest.raises(ConfigError, match=message):
        new_client(ClientConfig(base_url=base_url))


def test_new_client_without_config_uses_empty_default():
    with pytest.raises(ConfigError, match="missing base URL"):
        new_client()


def test_new_client_defaults_transport_and_logger():
    client = new_client(ClientConfig(base_url="http://example.com"))

    assert isinstance(client.http_client, httpx.AsyncClient)
    assert client.logger is default_logger
    assert client.auth_token is None
    assert client.user_agent is None


def test_new_client_keeps_supplied_dependencies():
    http_client = httpx.AsyncClient()
    sink = object()
    client = new_client(
        ClientConfig(
            base_url="https://example.com",
            auth_token=SecretStr("tok"),
            user_agent="agent/1.0",
            http_client=http_client,
            logger=sink,
        )
    )

    assert client.http_client is http_client
    assert client.logger is sink
    assert client.auth_token == "tok"
    assert client.user_agent == "agent/1.0"


def test_config_is_frozen():
    config = ClientConfig(base_url="https://example.com")

    with pytest.raises(Exception):
        config.base_url = "https://other.example"  # type: ignore[misc]


@pytest.mark.parametrize(
    "base_url, path, expected",
    [
        ("https://example.com/api", "v1/search", "https://example.com/api/v1/search"),
        ("https://example.com", "v1/search", "https://example.com/v1/search"),
        ("https://example.com/api/", "/v1/search", "https://example.com/v1/search"),
        ("https://example.com/a/b", "../v1/search", "https://example.com/a/v1/search"),
    ],
)
def test_new_request_resolves_against_base(base_url, path, expected):
    request = _client(base_url).new_request("GET", path)

    assert str(request.url) == expected
    assert request.method == "GET"


def test_new_request_appends_raw_query():
    request = _client().new_request("GET", "v1/search", "value=alpine&arch=amd64%2Carm64")

    assert str(request.url) == (
        "https://library.example/api/v1/search?value=alpine&arch=amd64%2Carm64"
    )
    assert request.url.params["arch"] == "amd64,arm64"


def test_new_request_sets_bearer_token():
    request = _client(auth_token=SecretStr("secret")).new_request("GET", "v1/search")

    assert request.headers["Authorization"] == "Bearer secret"


def test_new_request_without_token_has_no_authorization():
    request = _client().new_request("GET", "v1/search")

    assert "Authorization" not in request.headers


def test_empty_token_is_treated_as_unset():
    request = _client(auth_token="").new_request("GET", "v1/search")

    assert "Authorization" not in request.headers


def test_new_request_sets_user_agent():
    request = _client(user_agent="library-cli/2.0").new_request("GET", "v1/search")

    assert request.headers["User-Agent"] == "library-cli/2.0"


def test_new_request_leaves_transport_user_agent_when_unset():
    http_client = httpx.AsyncClient(headers={"User-Agent": "transport/1.0"})
    client = new_client(ClientConfig(base_url="https://example.com", http_client=http_client))

    request = client.new_request("GET", "v1/search")

    assert request.headers["User-Agent"] == "transport/1.0"


def test_new_request_carries_body():
    request = _client().new_request("POST", "v1/things", body=b'{"a": 1}')

    assert request.method == "POST"
    assert request.content == b'{"a": 1}'


def test_new_request_wraps_allocation_errors():
    with pytest.raises(RequestError):
        _client().new_request("POST", "v1/things", body=12345)


def test_bearer_credentials_apply_overwrites_header():
    request = httpx.Request("GET", "https://example.com", headers={"Authorization": "Basic x"})

    BearerTokenCredentials("tok").apply(request)

    assert request.headers["Authorization"] == "Bearer tok"


@pytest.mark.asyncio
async def test_aclose_closes_owned_transport_only():
    owned = new_client(ClientConfig(base_url="https://example.com"))
    await owned.aclose()
    assert owned.http_client.is_closed

    supplied = httpx.AsyncClient()
    async with new_client(ClientConfig(base_url="https://example.com", http_client=supplied)):
        pass
    assert not supplied.is_closed
    await supplied.aclose()


def test_new_request_colon_in_first_segment_stays_a_path():
    request = _client("https://x.example/api").new_request("GET", "a:b")

    assert str(request.url) == "https://x.example/api/a:b"


def test_new_request_escapes_query_and_fragment_characters_in_path():
    request = _client("https://x.example/api").new_request("GET", "a?b#c", "value=abc")

    assert request.url.host == "x.example"
    assert request.url.path == "/api/a?b#c"
    assert request.url.raw_path == b"/api/a%3Fb%23c?value=abc"
    assert request.url.params["value"] == "abc"


def test_new_request_double_slash_path_keeps_host():
    request = _client("https://x.example/api").new_request("GET", "//other.example/x")

    assert request.url.host == "x.example"


@pytest.mark.asyncio
async def test_owns_http_client_keyword_closes_supplied_transport():
    http_client = httpx.AsyncClient()
    client = Client.from_config(
        ClientConfig(base_url="https://example.com", http_client=http_client),
        owns_http_client=True,
    )

    await client.aclose()

    assert http_client.is_closed
