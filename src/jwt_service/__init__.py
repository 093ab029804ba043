"""
jwt_service

Service-to-service authentication with signed tokens.

Responsibilities:
- Expose package version metadata.
- Re-export the public decode/encode surface.
"""

from jwt_service.errors import Forbidden, JwtServiceError, PayloadError, Unauthorized
from jwt_service.payload import Payload
from jwt_service.service import TokenService
from jwt_service.signer import JwtSigner, Signer
from jwt_service.trust import StaticTrustPolicy, TrustPolicy

__all__ = [
    "Forbidden",
    "JwtServiceError",
    "JwtSigner",
    "Payload",
    "PayloadError",
    "Signer",
    "StaticTrustPolicy",
    "TokenService",
    "TrustPolicy",
    "Unauthorized",
    "__version__",
]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Framework glue (FastAPI, httpx) lives in subpackages and is not imported here.
