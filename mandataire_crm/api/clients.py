from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from mandataire_crm.api.dependencies import get_clients_service
from mandataire_crm.schemas.clients import Client, ClientCreateRequest, ClientUpdateRequest
from mandataire_crm.services.clients_service import ClientsService


router = APIRouter(prefix="/clients", tags=["clients"])


@router.get("")
def list_clients(
    q: Optional[str] = Query(default=None, max_length=200),
    archived: Optional[bool] = Query(default=None),
    service: ClientsService = Depends(get_clients_service),
) -> List[Client]:
    return service.list_clients(q=q, archived=archived)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_client(
    request: ClientCreateRequest,
    service: ClientsService = Depends(get_clients_service),
) -> Client:
    return service.create_client(request)


@router.get("/{client_id}")
def get_client(
    client_id: str,
    service: ClientsService = Depends(get_clients_service),
) -> Client:
    return service.get_client(client_id)


@router.patch("/{client_id}")
def update_client(
    client_id: str,
    request: ClientUpdateRequest,
    service: ClientsService = Depends(get_clients_service),
) -> Client:
    return service.update_client(client_id, request)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_client(
    client_id: str,
    service: ClientsService = Depends(get_clients_service),
) -> Response:
    service.delete_client(client_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
