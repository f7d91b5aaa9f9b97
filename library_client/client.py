"""Cloud-library service client: construction, request building and search."""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import quote

import httpx
from pydantic import ValidationError as PydanticValidationError

from library_client.config import (
    DEFAULT_BASE_URL,
    DEFAULT_CONFIG,
    ClientConfig,
    LibrarySettings,
    get_settings,
)
from library_client.credentials import BearerTokenCredentials
from library_client.exceptions import (
    ConfigError,
    DecodeError,
    NotFoundError,
    RequestError,
    ResponseError,
    UnauthorizedError,
)
from library_client.logging import logger as default_logger
from library_client.models import ErrorResponse, SearchResponse, SearchResults
from library_client.search import SEARCH_PATH, encode_search_args, validate_search_args

SUPPORTED_SCHEMES = ("http", "https")
# RFC 3986 pchar plus "/"; everything else in a path is percent-encoded.
_PATH_SAFE = "/:@!$&'()*+,;=-._~"


def default_http_client(timeout: float | None = None) -> httpx.AsyncClient:
    """Create the transport used when a configuration does not supply one."""

    if timeout is None:
        return httpx.AsyncClient()
    return httpx.AsyncClient(timeout=timeout)


def _parse_base_url(raw: str | None) -> httpx.URL:
    base = raw or DEFAULT_BASE_URL
    if not base:
        raise ConfigError("missing base URL")

    # Without the trailing separator, reference resolution would drop the
    # last segment of the base path.
    if not base.endswith("/"):
        base += "/"

    try:
        url = httpx.URL(base)
    except httpx.InvalidURL as exc:
        raise ConfigError(f"invalid base URL: {exc}") from exc

    if url.scheme not in SUPPORTED_SCHEMES:
        raise ConfigError(f"unsupported scheme {url.scheme!r}")
    return url


class Client:
    """Immutable handle on a cloud-library service.

    Safe to share between concurrent tasks. When the client created its own
    transport it closes it in :meth:`aclose`; a supplied transport is left to
    its owner.
    """

    def __init__(
        self,
        base_url: httpx.URL,
        *,
        auth_token: str | None = None,
        user_agent: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        logger: Any | None = None,
        owns_http_client: bool = False,
    ) -> None:
        self._base_url = base_url
        self._auth_token = auth_token or None
        self._user_agent = user_agent or None
        self._owns_http_client = owns_http_client or http_client is None
        self._http_client = http_client if http_client is not None else default_http_client()
        self._logger = logger if logger is not None else default_logger

    @classmethod
    def from_config(
        cls, config: ClientConfig | None = None, *, owns_http_client: bool = False
    ) -> "Client":
        if config is None:
            config = DEFAULT_CONFIG

        base_url = _parse_base_url(config.base_url)
        token = config.auth_token.get_secret_value() if config.auth_token else None
        return cls(
            base_url,
            auth_token=token,
            user_agent=config.user_agent,
            http_client=config.http_client,
            logger=config.logger,
            owns_http_client=owns_http_client,
        )

    @classmethod
    def from_settings(cls, settings: LibrarySettings | None = None) -> "Client":
        """Build a client from ``LIBRARY_*`` environment settings."""

        if settings is None:
            settings = get_settings()
        # Validate before allocating a transport so nothing leaks on failure.
        _parse_base_url(settings.base_url)
        return cls.from_config(
            settings.to_config(
                http_client=default_http_client(settings.request_timeout_seconds)
            ),
            owns_http_client=True,
        )

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    @property
    def auth_token(self) -> str | None:
        return self._auth_token

    @property
    def user_agent(self) -> str | None:
        return self._user_agent

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client

    @property
    def logger(self) -> Any:
        return self._logger

    def __repr__(self) -> str:
        return f"Client(base_url={str(self._base_url)!r})"

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def new_request(
        self,
        method: str,
        path: str,
        raw_query: str = "",
        body: Any = None,
        *,
        timeout: float | None = None,
    ) -> httpx.Request:
        """Return a request for ``path`` resolved against the base URL.

        Relative paths are merged onto the base path; absolute paths replace
        it. No I/O is performed.
        """

        reference = _path_reference(path)
        if raw_query:
            reference = f"{reference}?{raw_query}"
        extra: dict[str, Any] = {}
        if timeout is not None:
            extra["timeout"] = timeout
        try:
            url = self._base_url.join(reference)
            request = self._http_client.build_request(method, url, content=body, **extra)
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise RequestError(f"unable to build {method} request for {path!r}: {exc}") from exc

        if self._auth_token:
            BearerTokenCredentials(self._auth_token).apply(request)
        if self._user_agent:
            request.headers["User-Agent"] = self._user_agent
        return request

    async def _api_get(
        self, path: str, raw_query: str = "", *, timeout: float | None = None
    ) -> bytes:
        request = self.new_request("GET", path, raw_query, timeout=timeout)
        self._logger.debug("library_request", method=request.method, url=str(request.url))

        response = await self._http_client.send(request)
        self._logger.debug(
            "library_response",
            method=request.method,
            url=str(request.url),
            status_code=response.status_code,
        )

        if response.is_success:
            return response.content

        code, message = _read_error(response)
        if response.status_code == httpx.codes.UNAUTHORIZED:
            raise UnauthorizedError(response.status_code, message, code=code)
        if response.status_code == httpx.codes.NOT_FOUND:
            raise NotFoundError(response.status_code, message, code=code)
        raise ResponseError(response.status_code, message, code=code)

    async def search(
        self, args: Mapping[str, str], *, timeout: float | None = None
    ) -> SearchResults:
        """Search the library for matching entities, collections, containers or images.

        ``args`` must contain ``"value"``, matched against every kind of
        object. Further keys narrow the search, e.g. ``"arch"`` (``"amd64"``
        or ``"amd64,arm64"``) or ``"signed"`` (``"true"``/``"false"``);
        either of those restricts the results to images.

            await client.search({"value": "alpine", "arch": "amd64"})
        """

        validate_search_args(args)
        body = await self._api_get(SEARCH_PATH, encode_search_args(args), timeout=timeout)
        try:
            response = SearchResponse.model_validate_json(body)
        except PydanticValidationError as exc:
            raise DecodeError(f"error decoding results: {exc}") from exc
        return response.data


def _path_reference(path: str) -> str:
    """Escape ``path`` so it is resolved as a path, never as a full URL."""

    escaped = quote(path, safe=_PATH_SAFE)
    if escaped.startswith("//"):
        # Otherwise read as an authority.
        escaped = f"/.{escaped}"
    elif not escaped.startswith("/") and ":" in escaped.split("/", 1)[0]:
        # Otherwise read as a scheme.
        escaped = f"./{escaped}"
    return escaped


def _read_error(response: httpx.Response) -> tuple[int | None, str | None]:
    """Extract code and message from a ``{"error": {...}}`` body if present."""

    try:
        payload = ErrorResponse.model_validate_json(response.content)
    except PydanticValidationError:
        text = response.text.strip()
        return None, text[:500] or None
    return payload.error.code, payload.error.message or None


def new_client(config: ClientConfig | None = None) -> Client:
    """Validate ``config`` and return a client; see :meth:`Client.from_config`."""

    return Client.from_config(config)


__all__ = ["Client", "SUPPORTED_SCHEMES", "default_http_client", "new_client"]
