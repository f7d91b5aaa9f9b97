"""Search argument validation and encoding."""

from __future__ import annotations

from typing import Mapping
from urllib.parse import urlencode

from library_client.exceptions import BadRequestError, ValueRequiredError

SEARCH_PATH = "v1/search"
MIN_QUERY_LENGTH = 3


def validate_search_args(args: Mapping[str, str]) -> str:
    """Check the mandatory ``value`` key and return it.

    The length check only mirrors what the service is expected to enforce.
    """

    if "value" not in args:
        raise ValueRequiredError()
    value = args["value"]
    if not isinstance(value, str):
        raise BadRequestError(f"bad query {value!r}: search value must be a string")
    if len(value.strip()) < MIN_QUERY_LENGTH:
        raise BadRequestError(
            f"query too short: bad query '{value}'. "
            f"You must search for at least {MIN_QUERY_LENGTH} characters"
        )
    return value


def encode_search_args(args: Mapping[str, str]) -> str:
    """Encode every key-value pair, ``value`` included, as a query string.

    ``arch`` may hold a comma-separated list (``"amd64,arm64"``) and
    ``signed`` either ``"true"`` or ``"false"``; supplying them limits the
    search to images on the service side.
    """

    return urlencode({str(key): str(value) for key, value in args.items()})


__all__ = [
    "MIN_QUERY_LENGTH",
    "SEARCH_PATH",
    "encode_search_args",
    "validate_search_args",
]
