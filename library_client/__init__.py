"""Client for the cloud-library search API."""

from library_client.client import Client, default_http_client, new_client
from library_client.config import (
    DEFAULT_BASE_URL,
    DEFAULT_CONFIG,
    ClientConfig,
    LibrarySettings,
    default_config,
    get_settings,
)
from library_client.credentials import BearerTokenCredentials, Credentials
from library_client.exceptions import (
    BadRequestError,
    ConfigError,
    DecodeError,
    LibraryClientError,
    NotFoundError,
    RequestError,
    ResponseError,
    TransportError,
    UnauthorizedError,
    ValidationError,
    ValueRequiredError,
)
from library_client.models import (
    Collection,
    Container,
    Entity,
    Image,
    SearchResponse,
    SearchResults,
)

__all__ = [
    "BadRequestError",
    "BearerTokenCredentials",
    "Client",
    "ClientConfig",
    "Collection",
    "ConfigError",
    "Container",
    "Credentials",
    "DEFAULT_BASE_URL",
    "DEFAULT_CONFIG",
    "DecodeError",
    "Entity",
    "Image",
    "LibraryClientError",
    "LibrarySettings",
    "NotFoundError",
    "RequestError",
    "ResponseError",
    "SearchResponse",
    "SearchResults",
    "TransportError",
    "UnauthorizedError",
    "ValidationError",
    "ValueRequiredError",
    "default_config",
    "default_http_client",
    "get_settings",
    "new_client",
]
