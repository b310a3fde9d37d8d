"""Client management API endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
import structlog

from recruit_crm.auth.dependencies import get_current_tenant, get_store
from recruit_crm.core.errors import CRMError, to_http_exception
from recruit_crm.core.logging import performance_logger, error_logger
from recruit_crm.schemas.client import ClientCreate, ClientUpdate, ClientResponse
from recruit_crm.services.client_service import ClientService
from recruit_crm.store.base import DocumentStore

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/clients", tags=["clients"])


def get_client_service(store: DocumentStore = Depends(get_store)) -> ClientService:
    return ClientService(store)


@router.get("", response_model=List[ClientResponse])
def list_clients(
    tenant_id: str = Depends(get_current_tenant),
    service: ClientService = Depends(get_client_service)
):
    """List the caller's clients."""
    try:
        with performance_logger.log_operation_time("list_clients", tenant_id=tenant_id):
            clients = service.list_clients(tenant_id)
            logger.info("Clients listed via API", tenant_id=tenant_id, count=len(clients))
            return clients
    except CRMError as e:
        raise to_http_exception(e, server_detail="Failed to fetch clients")
    except Exception as e:
        error_logger.log_error_with_context(e, "list_clients", tenant_id=tenant_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch clients"
        )


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
def create_client(
    client_data: ClientCreate,
    tenant_id: str = Depends(get_current_tenant),
    service: ClientService = Depends(get_client_service)
):
    """Create a client owned by the caller."""
    try:
        with performance_logger.log_operation_time("create_client", tenant_id=tenant_id):
            return service.create_client(tenant_id, client_data)
    except CRMError as e:
        raise to_http_exception(e, server_detail="Failed to create client")
    except Exception as e:
        error_logger.log_error_with_context(e, "create_client", tenant_id=tenant_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create client"
        )


@router.put("/{client_id}", response_model=ClientResponse)
def update_client(
    client_id: str,
    client_data: ClientUpdate,
    tenant_id: str = Depends(get_current_tenant),
    service: ClientService = Depends(get_client_service)
):
    """Update a client's information.

    Only provided fields are updated; the client must belong to the caller.
    """
    try:
        with performance_logger.log_operation_time(
            "update_client", tenant_id=tenant_id, client_id=client_id
        ):
            return service.update_client(tenant_id, client_id, client_data)
    except CRMError as e:
        raise to_http_exception(e, server_detail="Failed to update client")
    except Exception as e:
        error_logger.log_error_with_context(e, "update_client", tenant_id=tenant_id, client_id=client_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update client"
        )


@router.delete("/{client_id}")
def delete_client(
    client_id: str,
    tenant_id: str = Depends(get_current_tenant),
    service: ClientService = Depends(get_client_service)
):
    """Permanently delete a client belonging to the caller."""
    try:
        with performance_logger.log_operation_time(
            "delete_client", tenant_id=tenant_id, client_id=client_id
        ):
            service.delete_client(tenant_id, client_id)
            return {"success": True}
    except CRMError as e:
        raise to_http_exception(e, server_detail="Failed to delete client")
    except Exception as e:
        error_logger.log_error_with_context(e, "delete_client", tenant_id=tenant_id, client_id=client_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete client"
        )
