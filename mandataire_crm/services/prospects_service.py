from __future__ import annotations

import logging
from typing import List, Optional

from mandataire_crm.core.errors import NotFoundError
from mandataire_crm.repositories.prospects_repository import ProspectsRepository
from mandataire_crm.schemas.prospects import Prospect, ProspectCreateRequest, ProspectUpdateRequest


logger = logging.getLogger(__name__)


class ProspectsService:
    def __init__(self, repository: ProspectsRepository) -> None:
        self.repository = repository

    def list_prospects(
        self, q: Optional[str] = None, archived: Optional[bool] = None
    ) -> List[Prospect]:
        records = self.repository.list_prospects(q=q, archived=archived)
        return [Prospect.model_validate(record.model_dump()) for record in records]

    def get_prospect(self, prospect_id: str) -> Prospect:
        record = self.repository.get_prospect(prospect_id)
        if not record:
            raise NotFoundError("Prospect not found")
        return Prospect.model_validate(record.model_dump())

    def create_prospect(self, payload: ProspectCreateRequest) -> Prospect:
        record = self.repository.create_prospect(payload.model_dump(mode="json"))
        logger.info("Created prospect %s", record.id)
        return Prospect.model_validate(record.model_dump())

    def update_prospect(self, prospect_id: str, payload: ProspectUpdateRequest) -> Prospect:
        changes = payload.to_payload()
        if not changes:
            return self.get_prospect(prospect_id)
        record = self.repository.update_prospect(prospect_id, changes)
        if not record:
            raise NotFoundError("Prospect not found")
        logger.info("Updated prospect %s fields=%s", prospect_id, sorted(changes))
        return Prospect.model_validate(record.model_dump())

    def delete_prospect(self, prospect_id: str) -> None:
        if not self.repository.delete_prospect(prospect_id):
            raise NotFoundError("Prospect not found")
        logger.info("Deleted prospect %s", prospect_id)
