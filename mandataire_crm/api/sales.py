from __future__ import annotations

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from mandataire_crm.api.dependencies import get_sales_service
from mandataire_crm.schemas.dashboard import normalize_optional_filter
from mandataire_crm.schemas.sales import (
    ClientService,
    ClientServiceCreateRequest,
    ClientServiceListFilters,
    ClientServiceUpdateRequest,
)
from mandataire_crm.services.sales_service import SalesService


router = APIRouter(prefix="/client-services", tags=["client-services"])


def get_client_service_filters(
    client_id: Optional[str] = Query(default=None, alias="clientId"),
    service_id: Optional[str] = Query(default=None, alias="serviceId"),
    from_date: Optional[date] = Query(default=None, alias="from"),
    to_date: Optional[date] = Query(default=None, alias="to"),
) -> ClientServiceListFilters:
    return ClientServiceListFilters(
        client_id=normalize_optional_filter(client_id),
        service_id=normalize_optional_filter(service_id),
        from_date=from_date,
        to_date=to_date,
    )


@router.get("")
def list_client_services(
    filters: ClientServiceListFilters = Depends(get_client_service_filters),
    service: SalesService = Depends(get_sales_service),
) -> List[ClientService]:
    return service.list_sales(
        client_id=filters.client_id,
        service_id=filters.service_id,
        from_date=filters.from_date,
        to_date=filters.to_date,
    )


@router.post("", status_code=status.HTTP_201_CREATED)
def create_client_service(
    request: ClientServiceCreateRequest,
    service: SalesService = Depends(get_sales_service),
) -> ClientService:
    return service.create_sale(request)


@router.get("/{sale_id}")
def get_client_service(
    sale_id: str,
    service: SalesService = Depends(get_sales_service),
) -> ClientService:
    return service.get_sale(sale_id)


@router.patch("/{sale_id}")
def update_client_service(
    sale_id: str,
    request: ClientServiceUpdateRequest,
    service: SalesService = Depends(get_sales_service),
) -> ClientService:
    return service.update_sale(sale_id, request)


@router.delete("/{sale_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_client_service(
    sale_id: str,
    service: SalesService = Depends(get_sales_service),
) -> Response:
    service.delete_sale(sale_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
