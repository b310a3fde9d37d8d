"""FastAPI dependencies for authentication and request-scoped services."""

from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
import structlog

from recruit_crm.core.errors import AuthenticationError
from recruit_crm.store.base import DocumentStore
from .verifier import TokenVerifier

logger = structlog.get_logger(__name__)

# Missing headers are reported by get_current_tenant, not by the scheme itself
security = HTTPBearer(auto_error=False)

UNAUTHORIZED_DETAIL = "Unauthorized - Invalid or missing authentication token"


def get_store(request: Request) -> DocumentStore:
    """Document store attached to the application at startup."""
    return request.app.state.store


def get_token_verifier(request: Request) -> TokenVerifier:
    """Token verifier attached to the application at startup."""
    return request.app.state.token_verifier


def get_current_tenant(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    verifier: TokenVerifier = Depends(get_token_verifier)
) -> str:
    """Resolve the tenant id of the caller from its bearer token.

    Args:
        credentials: HTTP Bearer credentials
        verifier: Token verifier configured for the application

    Returns:
        Verified tenant id

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=UNAUTHORIZED_DETAIL,
        headers={"WWW-Authenticate": "Bearer"},
    )

    if not credentials or not credentials.credentials:
        logger.info("No authorization header or invalid format")
        raise credentials_exception

    try:
        token_data = verifier.verify(credentials.credentials)
    except AuthenticationError:
        raise credentials_exception

    return token_data.tenant_id
