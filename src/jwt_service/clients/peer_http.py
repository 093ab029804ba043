"""
jwt_service.clients.peer_http

httpx integration for calling peer services.

Responsibilities:
- Mint a fresh token per outgoing request via `TokenService.encode`.
- Attach it as `Authorization: Bearer <token>`.
"""

from __future__ import annotations

from collections.abc import Callable, Generator

import httpx

from jwt_service.payload import Payload
from jwt_service.service import TokenService


class PeerTokenAuth(httpx.Auth):
    """
    Usage:
        auth = PeerTokenAuth(service, lambda sender: Payload(sender=sender, to="billing"))
        httpx.Client(auth=auth).get("https://billing.internal/v1/invoices")

    `Forbidden` propagates before the request is sent when the policy has no
    key for the recipient.
    """

    def __init__(self, service: TokenService, factory: Callable[[str], Payload]) -> None:
        self._service = service
        self._factory = factory

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        token = self._service.encode(self._factory)
        request.headers["Authorization"] = f"Bearer {token.decode('ascii')}"
        yield request


# --- Module Notes -----------------------------------------------------------
# Tokens are not cached; every request httpx sends, redirects included, carries a
# newly signed token.
