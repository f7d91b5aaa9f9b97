"""Credential injection for outbound requests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import httpx


class Credentials(Protocol):
    def apply(self, request: httpx.Request) -> None:
        """Attach credentials to ``request`` in place."""


@dataclass(frozen=True, slots=True)
class BearerTokenCredentials:
    auth_token: str

    def apply(self, request: httpx.Request) -> None:
        request.headers["Authorization"] = f"Bearer {self.auth_token}"


__all__ = ["BearerTokenCredentials", "Credentials"]
