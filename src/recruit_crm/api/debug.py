"""Anonymous diagnostics endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
import structlog

from recruit_crm.auth.dependencies import get_store
from recruit_crm.core.config import FIREBASE_CREDENTIAL_VARS
from recruit_crm.store.base import DocumentStore

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api", tags=["debug"])

PROBE_COLLECTION = "test"


@router.get("/debug-env")
def debug_env(request: Request):
    """Report which credential variables are configured, never their values."""
    settings = request.app.state.settings
    missing = settings.missing_firebase_credentials()

    environment_status = [
        {
            "name": name,
            "present": name not in missing,
            "value": "MISSING" if name in missing else "***SET***",
        }
        for name in FIREBASE_CREDENTIAL_VARS
    ]

    return {
        "success": not missing,
        "missingVariables": missing,
        "environmentStatus": environment_status,
        "totalRequired": len(FIREBASE_CREDENTIAL_VARS),
        "totalPresent": len(FIREBASE_CREDENTIAL_VARS) - len(missing),
    }


@router.get("/debug/store")
def debug_store(store: DocumentStore = Depends(get_store)):
    """Write, read back and delete a probe document."""
    try:
        document = store.add(PROBE_COLLECTION, {
            "test": True,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        })
        read_back = store.get(PROBE_COLLECTION, document.id)
        store.delete(PROBE_COLLECTION, document.id)
    except Exception as e:
        logger.error("Store probe failed", store=store.name, error=str(e))
        return JSONResponse(
            status_code=500,
            content={"success": False, "store": store.name, "errorType": type(e).__name__},
        )

    success = read_back is not None and read_back.data.get("test") is True
    logger.info("Store probe finished", store=store.name, success=success)
    return JSONResponse(
        status_code=200 if success else 500,
        content={"success": success, "store": store.name, "testDocId": document.id},
    )
