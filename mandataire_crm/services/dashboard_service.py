from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Optional

from mandataire_crm.analytics.dashboard import build_dashboard_summary
from mandataire_crm.models.catalog import ServiceRecord
from mandataire_crm.models.clients import ClientRecord
from mandataire_crm.models.sales import SalesFilter
from mandataire_crm.repositories.catalog_repository import CatalogRepository
from mandataire_crm.repositories.clients_repository import ClientsRepository
from mandataire_crm.repositories.sales_repository import SalesRepository
from mandataire_crm.schemas.dashboard import DashboardFilters, DashboardSummary
from mandataire_crm.shared.time import resolve_period


logger = logging.getLogger(__name__)


class DashboardService:
    def __init__(
        self,
        sales_repository: SalesRepository,
        catalog_repository: CatalogRepository,
        clients_repository: ClientsRepository,
    ) -> None:
        self.sales_repository = sales_repository
        self.catalog_repository = catalog_repository
        self.clients_repository = clients_repository

    def get_summary(
        self, filters: DashboardFilters, today: Optional[date] = None
    ) -> DashboardSummary:
        period = resolve_period(filters.view, filters.year, filters.month, today=today)
        sales_filter = SalesFilter(
            start=period.start,
            end=period.end,
            service_id=filters.service_id,
            client_id=filters.client_id,
        )
        # One sales read feeds every view, so they cannot disagree with each other.
        sales = self.sales_repository.list_sales_in_range(sales_filter)
        services: Dict[str, ServiceRecord] = {
            record.id: record
            for record in self.catalog_repository.list_services_by_ids(
                sale.service_id for sale in sales
            )
        }
        clients: Dict[str, ClientRecord] = {
            record.id: record
            for record in self.clients_repository.list_clients_by_ids(
                sale.client_id for sale in sales
            )
        }
        summary = build_dashboard_summary(sales, sales_filter, period, services, clients)
        logger.info(
            "Dashboard summary view=%s range=[%s, %s) service=%s client=%s sales=%d total_cents=%d",
            period.view,
            period.start.date().isoformat(),
            period.end.date().isoformat(),
            filters.service_id or "all",
            filters.client_id or "all",
            len(sales),
            summary.total_cents,
        )
        return summary
