from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional

from mandataire_crm.analytics.commission import sale_commission_cents
from mandataire_crm.core.errors import BadRequestError, NotFoundError
from mandataire_crm.models.sales import SaleRecord
from mandataire_crm.repositories.catalog_repository import CatalogRepository
from mandataire_crm.repositories.clients_repository import ClientsRepository
from mandataire_crm.repositories.sales_repository import SalesRepository
from mandataire_crm.schemas.sales import (
    ClientService,
    ClientServiceCreateRequest,
    ClientServiceUpdateRequest,
)


logger = logging.getLogger(__name__)


class SalesService:
    def __init__(
        self,
        repository: SalesRepository,
        clients_repository: ClientsRepository,
        catalog_repository: CatalogRepository,
        default_commission_rate_percent: Decimal = Decimal("3.5"),
    ) -> None:
        self.repository = repository
        self.clients_repository = clients_repository
        self.catalog_repository = catalog_repository
        self.default_commission_rate_percent = default_commission_rate_percent

    def list_sales(
        self,
        client_id: Optional[str] = None,
        service_id: Optional[str] = None,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
    ) -> List[ClientService]:
        if from_date and to_date and from_date > to_date:
            raise BadRequestError("from must be on or before to")
        records = self.repository.list_sales(
            client_id=client_id,
            service_id=service_id,
            from_date=from_date,
            to_date=to_date,
        )
        return [self._to_client_service(record) for record in records]

    def get_sale(self, sale_id: str) -> ClientService:
        record = self.repository.get_sale(sale_id)
        if not record:
            raise NotFoundError("Client service not found")
        return self._to_client_service(record)

    def create_sale(self, payload: ClientServiceCreateRequest) -> ClientService:
        self._ensure_references(client_id=payload.client_id, service_id=payload.service_id)
        values = payload.model_dump(mode="json")
        if payload.commission_rate_percent is None:
            values["commission_rate_percent"] = str(self.default_commission_rate_percent)
        values["currency"] = payload.currency.upper()
        record = self.repository.create_sale(values)
        logger.info(
            "Created client service %s client=%s service=%s amount_cents=%s",
            record.id,
            record.client_id,
            record.service_id,
            record.amount_cents,
        )
        return self._to_client_service(record)

    def update_sale(self, sale_id: str, payload: ClientServiceUpdateRequest) -> ClientService:
        changes: Dict[str, Any] = payload.to_payload()
        if not changes:
            return self.get_sale(sale_id)
        self._ensure_references(
            client_id=changes.get("client_id"), service_id=changes.get("service_id")
        )
        if "currency" in changes:
            changes["currency"] = changes["currency"].upper()
        record = self.repository.update_sale(sale_id, changes)
        if not record:
            raise NotFoundError("Client service not found")
        logger.info("Updated client service %s fields=%s", sale_id, sorted(changes))
        return self._to_client_service(record)

    def delete_sale(self, sale_id: str) -> None:
        if not self.repository.delete_sale(sale_id):
            raise NotFoundError("Client service not found")
        logger.info("Deleted client service %s", sale_id)

    def _ensure_references(self, client_id: Optional[str], service_id: Optional[str]) -> None:
        if client_id is not None and self.clients_repository.get_client(client_id) is None:
            raise BadRequestError("Client not found")
        if service_id is not None and self.catalog_repository.get_service(service_id) is None:
            raise BadRequestError("Service not found")

    def _to_client_service(self, record: SaleRecord) -> ClientService:
        return ClientService(
            id=record.id,
            client_id=record.client_id,
            service_id=record.service_id,
            amount_cents=record.amount_cents,
            currency=record.currency,
            occurred_at=record.occurred_at,
            notes=record.notes,
            commission_rate_percent=float(record.commission_rate_percent),
            commission_amount_cents_override=record.commission_amount_cents_override,
            is_split=record.is_split,
            split_ratio=float(record.split_ratio),
            partner_name=record.partner_name,
            commission_cents=sale_commission_cents(record),
            created_at=record.created_at,
        )
