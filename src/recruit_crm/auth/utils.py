"""JWT helpers for development and test tokens."""

from datetime import datetime, timedelta, timezone
from typing import Optional
import uuid

from jose import JWTError, jwt
import structlog

from recruit_crm.core.config import Settings, settings as default_settings
from .models import TokenData

logger = structlog.get_logger(__name__)


def create_access_token(
    data: dict,
    expires_delta: Optional[timedelta] = None,
    settings: Optional[Settings] = None
) -> str:
    """Create a signed JWT access token.

    Args:
        data: Claims to encode; ``sub`` carries the tenant id
        expires_delta: Token lifetime, defaults to the configured expiry
        settings: Settings providing the signing key

    Returns:
        Encoded JWT token
    """
    settings = settings or default_settings
    to_encode = data.copy()

    now = datetime.now(timezone.utc)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.access_token_expire_minutes)

    to_encode.update({
        "exp": expire,
        "iat": now,
        "jti": str(uuid.uuid4()),
    })

    encoded_jwt = jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)
    logger.debug("Access token created", expires_at=expire.isoformat())
    return encoded_jwt


def decode_access_token(token: str, secret_key: str, algorithm: str) -> Optional[TokenData]:
    """Verify and decode a JWT access token.

    Returns:
        TokenData if the token is valid and names a subject, None otherwise
    """
    try:
        payload = jwt.decode(token, secret_key, algorithms=[algorithm])
    except JWTError as e:
        logger.warning("Token verification failed", error=str(e))
        return None

    subject = payload.get("sub")
    if not subject:
        logger.warning("Token missing subject")
        return None

    return TokenData(tenant_id=str(subject), email=payload.get("email"))
