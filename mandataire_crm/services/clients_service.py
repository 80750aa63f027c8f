from __future__ import annotations

import logging
from typing import List, Optional

from mandataire_crm.core.errors import NotFoundError
from mandataire_crm.models.clients import ClientRecord
from mandataire_crm.repositories.clients_repository import ClientsRepository
from mandataire_crm.schemas.clients import Client, ClientCreateRequest, ClientUpdateRequest


logger = logging.getLogger(__name__)


class ClientsService:
    def __init__(self, repository: ClientsRepository) -> None:
        self.repository = repository

    def list_clients(self, q: Optional[str] = None, archived: Optional[bool] = None) -> List[Client]:
        records = self.repository.list_clients(q=q, archived=archived)
        return [self._to_client(record) for record in records]

    def get_client(self, client_id: str) -> Client:
        record = self.repository.get_client(client_id)
        if not record:
            raise NotFoundError("Client not found")
        return self._to_client(record)

    def create_client(self, payload: ClientCreateRequest) -> Client:
        record = self.repository.create_client(payload.model_dump(mode="json"))
        logger.info("Created client %s", record.id)
        return self._to_client(record)

    def update_client(self, client_id: str, payload: ClientUpdateRequest) -> Client:
        changes = payload.to_payload()
        if not changes:
            return self.get_client(client_id)
        record = self.repository.update_client(client_id, changes)
        if not record:
            raise NotFoundError("Client not found")
        logger.info("Updated client %s fields=%s", client_id, sorted(changes))
        return self._to_client(record)

    def delete_client(self, client_id: str) -> None:
        if not self.repository.delete_client(client_id):
            raise NotFoundError("Client not found")
        logger.info("Deleted client %s", client_id)

    def _to_client(self, record: ClientRecord) -> Client:
        return Client(
            id=record.id,
            first_name=record.first_name or "",
            last_name=record.last_name or "",
            phone=record.phone,
            profession=record.profession,
            recommended_by=record.recommended_by,
            notes=record.notes,
            is_archived=record.is_archived,
            created_at=record.created_at,
        )
