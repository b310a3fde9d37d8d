"""Authentication: bearer token verification and tenant resolution."""

from .dependencies import get_current_tenant, get_store
from .verifier import TokenVerifier, JWTTokenVerifier, FirebaseTokenVerifier, create_token_verifier

__all__ = [
    "get_current_tenant",
    "get_store",
    "TokenVerifier",
    "JWTTokenVerifier",
    "FirebaseTokenVerifier",
    "create_token_verifier",
]
