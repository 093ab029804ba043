"""
jwt_service.errors

Error kinds raised at the token service boundary.

Responsibilities:
- `Unauthorized`: any inbound verification failure (undifferentiated).
- `Forbidden`: outbound issuance blocked by local trust policy.
- `PayloadError`: self-consistency failure of a payload (masked by decode).
"""

from __future__ import annotations

from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN


class JwtServiceError(Exception):
    status_code: int = 500
    detail: str = "Internal error"

    def __init__(self) -> None:
        super().__init__(self.detail)


class Unauthorized(JwtServiceError):
    # Message is constant; callers must not learn which check failed.
    status_code = HTTP_401_UNAUTHORIZED
    detail = "Unauthorized"


class Forbidden(JwtServiceError):
    status_code = HTTP_403_FORBIDDEN
    detail = "Forbidden"


class PayloadError(ValueError):
    pass


# --- Module Notes -----------------------------------------------------------
# The API layer maps `JwtServiceError.status_code` onto HTTP responses
# (see `jwt_service.api.app`).
