"""Firebase Admin SDK initialisation."""

import firebase_admin
from firebase_admin import credentials
import structlog

from .config import Settings
from .errors import ConfigurationError

logger = structlog.get_logger(__name__)


def get_firebase_app(settings: Settings) -> firebase_admin.App:
    """Return the default Firebase app, initialising it on first use.

    Raises:
        ConfigurationError: If service account variables are missing
    """
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    missing = settings.missing_firebase_credentials()
    if missing:
        logger.error("Missing required environment variables", missing=missing)
        raise ConfigurationError(f"Missing environment variables: {', '.join(missing)}")

    credential = credentials.Certificate(settings.firebase_service_account())
    app = firebase_admin.initialize_app(credential, {"projectId": settings.firebase_project_id})
    logger.info("Firebase Admin initialized", project_id=settings.firebase_project_id)
    return app
