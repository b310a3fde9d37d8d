"""FastAPI application for the recruitment CRM."""

from contextlib import asynccontextmanager
from typing import Any, Dict, Iterable, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

from recruit_crm import __version__
from recruit_crm.api import (
    applications_router,
    candidate_sheet_router,
    candidates_router,
    clients_router,
    debug_router,
    jobs_router,
)
from recruit_crm.auth.verifier import TokenVerifier, create_token_verifier
from recruit_crm.core.config import Settings, settings as default_settings
from recruit_crm.core.logging import configure_logging, error_logger
from recruit_crm.store import DocumentStore, create_store

logger = structlog.get_logger(__name__)

# Request parts FastAPI prefixes to error locations
_LOCATION_PREFIXES = {"body", "query", "path", "header"}


def describe_validation_errors(errors: Iterable[Dict[str, Any]]) -> str:
    """Turn pydantic error records into one readable sentence."""
    messages = []
    for error in errors:
        parts = [str(part) for part in error.get("loc", ()) if part not in _LOCATION_PREFIXES]
        field = ".".join(parts)
        if not field:
            messages.append("Request body is required" if error.get("type") == "missing"
                            else f"Invalid request: {error.get('msg')}")
        elif error.get("type") in ("missing", "string_too_short"):
            messages.append(f"{field} is required")
        else:
            messages.append(f"{field}: {error.get('msg')}")
    return "; ".join(messages) or "Invalid request"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = describe_validation_errors(exc.errors())
    error_logger.log_validation_error(field=request.url.path, error_message=message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": message})


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Close the document store on shutdown."""
    yield
    app.state.store.close()
    logger.info("Document store closed", store=app.state.store.name)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[DocumentStore] = None,
    token_verifier: Optional[TokenVerifier] = None
) -> FastAPI:
    """Build the application with its store and token verifier.

    Collaborators are attached to ``app.state`` and resolved by request
    dependencies, so tests can pass in-memory replacements.
    """
    settings = settings or default_settings
    configure_logging(settings)

    app = FastAPI(
        title="Recruit CRM API",
        description="Multi-tenant recruitment CRM",
        version=__version__,
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.store = store if store is not None else create_store(settings)
    app.state.token_verifier = token_verifier or create_token_verifier(settings)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(clients_router)
    app.include_router(jobs_router)
    app.include_router(candidates_router)
    app.include_router(candidate_sheet_router)
    app.include_router(applications_router)
    app.include_router(debug_router)

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": "recruit-crm",
            "store": app.state.store.name,
        }

    logger.info(
        "Application created",
        store=app.state.store.name,
        auth_provider=settings.auth_provider,
        environment=settings.environment
    )
    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "recruit_crm.main:create_app",
        factory=True,
        host=default_settings.api_host,
        port=default_settings.api_port,
        reload=True
    )
