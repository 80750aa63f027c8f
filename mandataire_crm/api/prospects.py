from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from mandataire_crm.api.dependencies import get_prospects_service
from mandataire_crm.schemas.prospects import Prospect, ProspectCreateRequest, ProspectUpdateRequest
from mandataire_crm.services.prospects_service import ProspectsService


router = APIRouter(prefix="/prospects", tags=["prospects"])


@router.get("")
def list_prospects(
    q: Optional[str] = Query(default=None, max_length=200),
    archived: Optional[bool] = Query(default=None),
    service: ProspectsService = Depends(get_prospects_service),
) -> List[Prospect]:
    return service.list_prospects(q=q, archived=archived)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_prospect(
    request: ProspectCreateRequest,
    service: ProspectsService = Depends(get_prospects_service),
) -> Prospect:
    return service.create_prospect(request)


@router.get("/{prospect_id}")
def get_prospect(
    prospect_id: str,
    service: ProspectsService = Depends(get_prospects_service),
) -> Prospect:
    return service.get_prospect(prospect_id)


@router.patch("/{prospect_id}")
def update_prospect(
    prospect_id: str,
    request: ProspectUpdateRequest,
    service: ProspectsService = Depends(get_prospects_service),
) -> Prospect:
    return service.update_prospect(prospect_id, request)


@router.delete("/{prospect_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_prospect(
    prospect_id: str,
    service: ProspectsService = Depends(get_prospects_service),
) -> Response:
    service.delete_prospect(prospect_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
