"""Error taxonomy shared by services, repositories and API routers."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from fastapi import HTTPException, status
import structlog

logger = structlog.get_logger(__name__)


class ErrorCategory(Enum):
    """Error categories for classification and routing."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    STORE = "store"
    CONFIGURATION = "configuration"


class CRMError(Exception):
    """Base exception class for CRM errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        category: ErrorCategory,
        original_error: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.original_error = original_error
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "message": self.message,
            "category": self.category.value,
            "status_code": self.status_code,
            "timestamp": self.timestamp.isoformat(),
            "original_error": str(self.original_error) if self.original_error else None,
            "original_error_type": type(self.original_error).__name__ if self.original_error else None,
        }


class ValidationError(CRMError):
    """Error for request validation failures."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, ErrorCategory.VALIDATION, **kwargs)
        self.field = field


class AuthenticationError(CRMError):
    """Error for missing or invalid bearer tokens."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized - Invalid or missing authentication token", **kwargs):
        super().__init__(message, ErrorCategory.AUTHENTICATION, **kwargs)


class OwnershipError(CRMError):
    """Error raised when a tenant touches a document it does not own."""

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Unauthorized", **kwargs):
        super().__init__(message, ErrorCategory.AUTHORIZATION, **kwargs)


class NotFoundError(CRMError):
    """Error for documents that do not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str, **kwargs):
        super().__init__(message, ErrorCategory.NOT_FOUND, **kwargs)


class ConflictError(CRMError):
    """Error for writes that would duplicate an existing document."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, message: str, **kwargs):
        super().__init__(message, ErrorCategory.CONFLICT, **kwargs)


class StoreError(CRMError):
    """Error for document store failures and malformed stored documents."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, ErrorCategory.STORE, **kwargs)


class ConfigurationError(CRMError):
    """Error for configuration issues."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, ErrorCategory.CONFIGURATION, **kwargs)


def to_http_exception(error: CRMError, server_detail: str = "Internal server error") -> HTTPException:
    """Translate a CRM error into the HTTP response the routers raise.

    Server-side failures get ``server_detail`` (the route's fixed
    "Failed to ..." text) so store internals never reach the client.
    """
    if error.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Server-side error", **error.to_dict())
        return HTTPException(status_code=error.status_code, detail=server_detail)

    headers = None
    if error.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return HTTPException(status_code=error.status_code, detail=error.message, headers=headers)
