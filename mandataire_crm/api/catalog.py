from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from mandataire_crm.api.dependencies import get_catalog_service
from mandataire_crm.schemas.catalog import Service, ServiceCreateRequest, ServiceUpdateRequest
from mandataire_crm.services.catalog_service import CatalogService


router = APIRouter(prefix="/services", tags=["services"])


@router.get("")
def list_services(
    active: Optional[bool] = Query(default=None),
    service: CatalogService = Depends(get_catalog_service),
) -> List[Service]:
    return service.list_services(active=active)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_service(
    request: ServiceCreateRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> Service:
    return service.create_service(request)


@router.get("/{service_id}")
def get_service(
    service_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> Service:
    return service.get_service(service_id)


@router.patch("/{service_id}")
def update_service(
    service_id: str,
    request: ServiceUpdateRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> Service:
    return service.update_service(service_id, request)


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_service(
    service_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    service.delete_service(service_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
