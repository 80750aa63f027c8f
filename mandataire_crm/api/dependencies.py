from __future__ import annotations

from functools import lru_cache

from mandataire_crm.core.config import get_settings
from mandataire_crm.repositories.catalog_repository import CatalogRepository
from mandataire_crm.repositories.clients_repository import ClientsRepository
from mandataire_crm.repositories.prospects_repository import ProspectsRepository
from mandataire_crm.repositories.sales_repository import SalesRepository
from mandataire_crm.services.catalog_service import CatalogService
from mandataire_crm.services.clients_service import ClientsService
from mandataire_crm.services.dashboard_service import DashboardService
from mandataire_crm.services.prospects_service import ProspectsService
from mandataire_crm.services.sales_service import SalesService


@lru_cache
def get_prospects_repository() -> ProspectsRepository:
    return ProspectsRepository()


def get_prospects_service() -> ProspectsService:
    return ProspectsService(repository=get_prospects_repository())


@lru_cache
def get_clients_repository() -> ClientsRepository:
    return ClientsRepository()


def get_clients_service() -> ClientsService:
    return ClientsService(repository=get_clients_repository())


@lru_cache
def get_catalog_repository() -> CatalogRepository:
    return CatalogRepository()


def get_catalog_service() -> CatalogService:
    return CatalogService(repository=get_catalog_repository())


@lru_cache
def get_sales_repository() -> SalesRepository:
    return SalesRepository()


def get_sales_service() -> SalesService:
    return SalesService(
        repository=get_sales_repository(),
        clients_repository=get_clients_repository(),
        catalog_repository=get_catalog_repository(),
        default_commission_rate_percent=get_settings().default_commission_rate_percent,
    )


def get_dashboard_service() -> DashboardService:
    return DashboardService(
        sales_repository=get_sales_repository(),
        catalog_repository=get_catalog_repository(),
        clients_repository=get_clients_repository(),
    )
