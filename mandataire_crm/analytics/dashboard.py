from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from mandataire_crm.analytics.commission import sale_commission_cents
from mandataire_crm.models.catalog import ServiceRecord
from mandataire_crm.models.clients import ClientRecord
from mandataire_crm.models.dashboard import ReportingPeriod
from mandataire_crm.models.sales import SaleRecord, SalesFilter
from mandataire_crm.schemas.dashboard import (
    ClientBreakdownRow,
    DashboardPoint,
    DashboardSummary,
    ServiceBreakdownRow,
)
from mandataire_crm.shared.time import bucket_label


DEFAULT_SERVICE_NAME = "Service"

# (total_cents, commission_cents)
Totals = Tuple[int, int]


def _add(current: Totals, amount_cents: int, commission_cents: int) -> Totals:
    return current[0] + amount_cents, current[1] + commission_cents


def filter_sales(sales: Iterable[SaleRecord], sales_filter: SalesFilter) -> List[SaleRecord]:
    return [sale for sale in sales if sales_filter.matches(sale)]


def calculate_totals(sales: Iterable[SaleRecord]) -> Totals:
    totals: Totals = (0, 0)
    for sale in sales:
        totals = _add(totals, sale.amount_cents, sale_commission_cents(sale))
    return totals


def calculate_service_breakdown(
    sales: Iterable[SaleRecord],
    services: Mapping[str, ServiceRecord],
) -> List[ServiceBreakdownRow]:
    grouped: Dict[str, Totals] = defaultdict(lambda: (0, 0))
    for sale in sales:
        # Sales pointing at a deleted service stay in the totals only.
        if sale.service_id not in services:
            continue
        grouped[sale.service_id] = _add(
            grouped[sale.service_id], sale.amount_cents, sale_commission_cents(sale)
        )

    rows = [
        ServiceBreakdownRow(
            service_id=service_id,
            service_name=services[service_id].name or DEFAULT_SERVICE_NAME,
            total_cents=total_cents,
            commission_cents=commission_cents,
        )
        for service_id, (total_cents, commission_cents) in grouped.items()
    ]
    return sorted(rows, key=lambda row: (-row.total_cents, row.service_name, row.service_id))


def calculate_client_breakdown(
    sales: Iterable[SaleRecord],
    clients: Mapping[str, ClientRecord],
) -> List[ClientBreakdownRow]:
    grouped: Dict[str, Totals] = defaultdict(lambda: (0, 0))
    for sale in sales:
        if sale.client_id not in clients:
            continue
        grouped[sale.client_id] = _add(
            grouped[sale.client_id], sale.amount_cents, sale_commission_cents(sale)
        )

    rows = [
        ClientBreakdownRow(
            client_id=client_id,
            client_name=clients[client_id].full_name,
            total_cents=total_cents,
            commission_cents=commission_cents,
        )
        for client_id, (total_cents, commission_cents) in grouped.items()
    ]
    return sorted(rows, key=lambda row: (-row.total_cents, row.client_name, row.client_id))


def calculate_timeseries(
    sales: Iterable[SaleRecord],
    period: ReportingPeriod,
) -> List[DashboardPoint]:
    buckets: Dict[str, Totals] = defaultdict(lambda: (0, 0))
    for sale in sales:
        label = bucket_label(period.view, sale.occurred_at)
        buckets[label] = _add(buckets[label], sale.amount_cents, sale_commission_cents(sale))

    points: List[DashboardPoint] = []
    for label in period.bucket_labels:
        total_cents, commission_cents = buckets.get(label, (0, 0))
        points.append(
            DashboardPoint(period=label, total_cents=total_cents, commission_cents=commission_cents)
        )
    return points


def build_dashboard_summary(
    sales: Sequence[SaleRecord],
    sales_filter: SalesFilter,
    period: ReportingPeriod,
    services: Mapping[str, ServiceRecord],
    clients: Mapping[str, ClientRecord],
) -> DashboardSummary:
    """Aggregate one fetched set of sales into every dashboard view.

    Rows are re-checked against ``sales_filter`` first so totals, breakdowns
    and the time series all describe exactly the same sales.
    """
    matching = filter_sales(sales, sales_filter)
    total_cents, commission_cents = calculate_totals(matching)
    return DashboardSummary(
        total_cents=total_cents,
        total_commission_cents=commission_cents,
        breakdown_by_service=tuple(calculate_service_breakdown(matching, services)),
        breakdown_by_client=tuple(calculate_client_breakdown(matching, clients)),
        points=tuple(calculate_timeseries(matching, period)),
    )
