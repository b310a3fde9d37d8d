"""Bearer token verifiers.

A verifier turns a raw bearer token into the tenant id that owns the
request, or raises ``AuthenticationError``.
"""

from abc import ABC, abstractmethod
from typing import Optional

import structlog

from recruit_crm.core.config import Settings
from recruit_crm.core.errors import AuthenticationError
from .models import TokenData
from .utils import decode_access_token

logger = structlog.get_logger(__name__)


class TokenVerifier(ABC):
    """Exchanges a bearer token for a verified identity."""

    @abstractmethod
    def verify(self, token: str) -> TokenData:
        """Return the verified identity or raise AuthenticationError."""


class JWTTokenVerifier(TokenVerifier):
    """Verifies HS256 tokens minted by ``create_access_token``."""

    def __init__(self, secret_key: str, algorithm: str = "HS256") -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm

    def verify(self, token: str) -> TokenData:
        token_data = decode_access_token(token, self.secret_key, self.algorithm)
        if token_data is None:
            raise AuthenticationError()
        return token_data


class FirebaseTokenVerifier(TokenVerifier):
    """Verifies Firebase Authentication ID tokens."""

    def __init__(self, settings: Settings, app=None) -> None:
        self.settings = settings
        self._app = app

    def _get_app(self):
        if self._app is None:
            from recruit_crm.core.firebase import get_firebase_app
            self._app = get_firebase_app(self.settings)
        return self._app

    def verify(self, token: str) -> TokenData:
        from firebase_admin import auth

        try:
            decoded = auth.verify_id_token(token, app=self._get_app())
        except Exception as e:
            # firebase_admin raises several unrelated types (ValueError, InvalidIdTokenError, CertificateFetchError)
            logger.warning("Failed to verify auth token", error_type=type(e).__name__)
            raise AuthenticationError(original_error=e) from e

        logger.debug("Token verified", tenant_id=decoded["uid"])
        return TokenData(tenant_id=decoded["uid"], email=decoded.get("email"))


def create_token_verifier(settings: Settings, app: Optional[object] = None) -> TokenVerifier:
    """Build the verifier named by ``settings.auth_provider``."""
    provider = settings.auth_provider.lower()
    if provider == "jwt":
        return JWTTokenVerifier(settings.secret_key, settings.algorithm)
    if provider == "firebase":
        return FirebaseTokenVerifier(settings, app=app)
    raise ValueError(f"Unknown auth provider: {settings.auth_provider}")
