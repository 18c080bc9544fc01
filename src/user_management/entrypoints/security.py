from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass, field

from fastapi import HTTPException, Request, status

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiPrincipal:
    name: str = "API User"
    identifier: str = "api-user"


@dataclass(frozen=True)
class ApiKeyGate:
    """Yes/no gate comparing one request header against a shared secret.

    Used as a FastAPI dependency on the routes that need it. The comparison
    is exact and case-sensitive.
    """

    api_key: str = field(repr=False)
    header_name: str = "X-API-Key"

    def _reject(self, detail: str) -> HTTPException:
        logger.warning(f"API key rejected: {detail}")
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "ApiKey"},
        )

    def authenticate(self, provided: str | None) -> ApiPrincipal:
        if provided is None:
            raise self._reject("Missing API Key")
        if not provided.strip():
            raise self._reject("Invalid API Key")
        if not hmac.compare_digest(provided.encode("utf-8"), self.api_key.encode("utf-8")):
            raise self._reject("Invalid API Key")
        return ApiPrincipal()

    def __call__(self, request: Request) -> ApiPrincipal:
        return self.authenticate(request.headers.get(self.header_name))


def require_api_key(request: Request) -> ApiPrincipal:
    gate: ApiKeyGate = request.app.state.api_key_gate
    return gate(request)
