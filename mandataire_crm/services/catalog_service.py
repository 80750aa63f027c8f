from __future__ import annotations

import logging
from typing import List, Optional

from mandataire_crm.core.errors import NotFoundError
from mandataire_crm.models.catalog import ServiceRecord
from mandataire_crm.repositories.catalog_repository import CatalogRepository
from mandataire_crm.schemas.catalog import Service, ServiceCreateRequest, ServiceUpdateRequest


logger = logging.getLogger(__name__)


class CatalogService:
    def __init__(self, repository: CatalogRepository) -> None:
        self.repository = repository

    def list_services(self, active: Optional[bool] = None) -> List[Service]:
        return [self._to_service(record) for record in self.repository.list_services(active=active)]

    def get_service(self, service_id: str) -> Service:
        record = self.repository.get_service(service_id)
        if not record:
            raise NotFoundError("Service not found")
        return self._to_service(record)

    def create_service(self, payload: ServiceCreateRequest) -> Service:
        record = self.repository.create_service(payload.model_dump(mode="json"))
        logger.info("Created service %s", record.id)
        return self._to_service(record)

    def update_service(self, service_id: str, payload: ServiceUpdateRequest) -> Service:
        changes = payload.to_payload()
        if not changes:
            return self.get_service(service_id)
        record = self.repository.update_service(service_id, changes)
        if not record:
            raise NotFoundError("Service not found")
        logger.info("Updated service %s fields=%s", service_id, sorted(changes))
        return self._to_service(record)

    def delete_service(self, service_id: str) -> None:
        if not self.repository.delete_service(service_id):
            raise NotFoundError("Service not found")
        logger.info("Deleted service %s", service_id)

    def _to_service(self, record: ServiceRecord) -> Service:
        return Service(
            id=record.id,
            name=record.name or "",
            description=record.description,
            is_active=record.is_active,
            created_at=record.created_at,
        )
