from __future__ import annotations

import os
from datetime import date, datetime, timezone
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("SUPABASE_URL", "http://supabase.test")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")

from mandataire_crm.api.dependencies import (  # noqa: E402
    get_catalog_service,
    get_clients_service,
    get_dashboard_service,
    get_prospects_service,
    get_sales_service,
)
from mandataire_crm.core.errors import BadRequestError, NotFoundError  # noqa: E402
from mandataire_crm.main import create_app  # noqa: E402
from mandataire_crm.schemas.catalog import Service, ServiceCreateRequest, ServiceUpdateRequest  # noqa: E402
from mandataire_crm.schemas.clients import Client, ClientCreateRequest, ClientUpdateRequest  # noqa: E402
from mandataire_crm.schemas.dashboard import (  # noqa: E402
    ClientBreakdownRow,
    DashboardFilters,
    DashboardPoint,
    DashboardSummary,
    ServiceBreakdownRow,
)
from mandataire_crm.schemas.prospects import (  # noqa: E402
    Prospect,
    ProspectCreateRequest,
    ProspectUpdateRequest,
)
from mandataire_crm.schemas.sales import (  # noqa: E402
    ClientService,
    ClientServiceCreateRequest,
    ClientServiceUpdateRequest,
)


CREATED_AT = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


class FakeDashboardService:
    def __init__(self) -> None:
        self.received: List[DashboardFilters] = []

    def get_summary(self, filters: DashboardFilters) -> DashboardSummary:
        self.received.append(filters)
        return DashboardSummary(
            total_cents=30000,
            total_commission_cents=600,
            breakdown_by_service=(
                ServiceBreakdownRow(
                    service_id="svc-1", service_name="Assurance vie", total_cents=30000, commission_cents=600
                ),
            ),
            breakdown_by_client=(
                ClientBreakdownRow(
                    client_id="cli-1", client_name="Alice Martin", total_cents=30000, commission_cents=600
                ),
            ),
            points=(
                DashboardPoint(period="2024-03-01", total_cents=0, commission_cents=0),
                DashboardPoint(period="2024-03-02", total_cents=30000, commission_cents=600),
            ),
        )


class FakeProspectsService:
    def __init__(self) -> None:
        self.prospects: Dict[str, Prospect] = {
            "pro-1": Prospect(
                id="pro-1",
                first_name="Paul",
                last_name="Durand",
                phone="0600000000",
                profession="Artisan",
                created_at=CREATED_AT,
            )
        }

    def list_prospects(self, q: Optional[str] = None, archived: Optional[bool] = None) -> List[Prospect]:
        items = list(self.prospects.values())
        if archived is not None:
            items = [item for item in items if item.is_archived == archived]
        return items

    def get_prospect(self, prospect_id: str) -> Prospect:
        if prospect_id not in self.prospects:
            raise NotFoundError("Prospect not found")
        return self.prospects[prospect_id]

    def create_prospect(self, payload: ProspectCreateRequest) -> Prospect:
        created = Prospect(id="pro-2", created_at=CREATED_AT, **payload.model_dump())
        self.prospects[created.id] = created
        return created

    def update_prospect(self, prospect_id: str, payload: ProspectUpdateRequest) -> Prospect:
        current = self.get_prospect(prospect_id)
        updated = current.model_copy(update=payload.to_payload())
        self.prospects[prospect_id] = updated
        return updated

    def delete_prospect(self, prospect_id: str) -> None:
        self.get_prospect(prospect_id)
        del self.prospects[prospect_id]


class FakeClientsService:
    def list_clients(self, q: Optional[str] = None, archived: Optional[bool] = None) -> List[Client]:
        return [Client(id="cli-1", first_name="Alice", last_name="Martin", created_at=CREATED_AT)]

    def get_client(self, client_id: str) -> Client:
        if client_id != "cli-1":
            raise NotFoundError("Client not found")
        return self.list_clients()[0]

    def create_client(self, payload: ClientCreateRequest) -> Client:
        return Client(id="cli-2", created_at=CREATED_AT, **payload.model_dump())

    def update_client(self, client_id: str, payload: ClientUpdateRequest) -> Client:
        return self.get_client(client_id).model_copy(update=payload.to_payload())

    def delete_client(self, client_id: str) -> None:
        self.get_client(client_id)


class FakeCatalogService:
    def list_services(self, active: Optional[bool] = None) -> List[Service]:
        return [Service(id="svc-1", name="Assurance vie", is_active=True, created_at=CREATED_AT)]

    def get_service(self, service_id: str) -> Service:
        if service_id != "svc-1":
            raise NotFoundError("Service not found")
        return self.list_services()[0]

    def create_service(self, payload: ServiceCreateRequest) -> Service:
        return Service(id="svc-2", created_at=CREATED_AT, **payload.model_dump())

    def update_service(self, service_id: str, payload: ServiceUpdateRequest) -> Service:
        return self.get_service(service_id).model_copy(update=payload.to_payload())

    def delete_service(self, service_id: str) -> None:
        self.get_service(service_id)


class FakeSalesService:
    def __init__(self) -> None:
        self.list_calls: List[dict] = []

    def _sale(self) -> ClientService:
        return ClientService(
            id="sale-1",
            client_id="cli-1",
            service_id="svc-1",
            amount_cents=10000,
            currency="EUR",
            occurred_at=datetime(2024, 3, 5, 10, 0, tzinfo=timezone.utc),
            commission_rate_percent=3.5,
            split_ratio=1.0,
            commission_cents=350,
            created_at=CREATED_AT,
        )

    def list_sales(
        self,
        client_id: Optional[str] = None,
        service_id: Optional[str] = None,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
    ) -> List[ClientService]:
        self.list_calls.append(
            {"client_id": client_id, "service_id": service_id, "from_date": from_date, "to_date": to_date}
        )
        return [self._sale()]

    def get_sale(self, sale_id: str) -> ClientService:
        if sale_id != "sale-1":
            raise NotFoundError("Client service not found")
        return self._sale()

    def create_sale(self, payload: ClientServiceCreateRequest) -> ClientService:
        if payload.client_id != "cli-1":
            raise BadRequestError("Client not found")
        return self._sale().model_copy(
            update={"id": "sale-2", "amount_cents": payload.amount_cents, "occurred_at": payload.occurred_at}
        )

    def update_sale(self, sale_id: str, payload: ClientServiceUpdateRequest) -> ClientService:
        return self.get_sale(sale_id).model_copy(update=payload.to_payload())

    def delete_sale(self, sale_id: str) -> None:
        self.get_sale(sale_id)


@pytest.fixture()
def fake_dashboard_service() -> FakeDashboardService:
    return FakeDashboardService()


@pytest.fixture()
def fake_sales_service() -> FakeSalesService:
    return FakeSalesService()


@pytest.fixture()
def client(fake_dashboard_service: FakeDashboardService, fake_sales_service: FakeSalesService) -> TestClient:
    app = create_app()
    prospects_service = FakeProspectsService()
    app.dependency_overrides[get_dashboard_service] = lambda: fake_dashboard_service
    app.dependency_overrides[get_prospects_service] = lambda: prospects_service
    app.dependency_overrides[get_clients_service] = FakeClientsService
    app.dependency_overrides[get_catalog_service] = FakeCatalogService
    app.dependency_overrides[get_sales_service] = lambda: fake_sales_service
    return TestClient(app)
