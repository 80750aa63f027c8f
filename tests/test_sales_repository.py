from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from mandataire_crm.core.supabase import in_filter, search_filter
from mandataire_crm.models.sales import SaleRecord, SalesFilter
from mandataire_crm.repositories.sales_repository import SalesRepository


class StubSupabaseClient:
    def __init__(self, rows: List[Dict[str, Any]]) -> None:
        self.rows = rows
        self.calls: List[Dict[str, Any]] = []

    def select(
        self,
        table: str,
        select: str,
        filters: Optional[List[Tuple[str, str]]] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        order: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        self.calls.append({"table": table, "filters": filters, "limit": limit, "offset": offset, "order": order})
        start = offset or 0
        return self.rows[start : start + (limit or len(self.rows))]


def _row(index: int) -> Dict[str, Any]:
    return {
        "id": f"sale-{index}",
        "client_id": "cli-1",
        "service_id": "svc-1",
        "amount_cents": 100 * index,
        "currency": "EUR",
        "occurred_at": f"2024-03-{index:02d}T10:00:00+00:00",
        "commission_rate_percent": 3.5,
        "commission_amount_cents_override": None,
        "is_split": False,
        "split_ratio": 1,
    }


def _repository(rows: List[Dict[str, Any]], page_size: int) -> Tuple[SalesRepository, StubSupabaseClient]:
    repository = SalesRepository()
    stub = StubSupabaseClient(rows)
    repository.client = stub
    repository.page_size = page_size
    return repository, stub


MARCH_2024 = SalesFilter(
    start=datetime(2024, 3, 1, tzinfo=timezone.utc),
    end=datetime(2024, 4, 1, tzinfo=timezone.utc),
)


def test_list_sales_in_range_reads_every_page():
    repository, stub = _repository([_row(i) for i in range(1, 6)], page_size=2)
    sales = repository.list_sales_in_range(MARCH_2024)
    assert [sale.id for sale in sales] == ["sale-1", "sale-2", "sale-3", "sale-4", "sale-5"]
    assert [call["offset"] for call in stub.calls] == [0, 2, 4]
    assert stub.calls[0]["table"] == "client_services"
    assert stub.calls[0]["filters"] == MARCH_2024.to_query_filters()


def test_list_sales_in_range_stops_after_short_page():
    repository, stub = _repository([_row(1), _row(2)], page_size=2)
    repository.list_sales_in_range(MARCH_2024)
    # A full last page needs one extra (empty) read to confirm the end.
    assert [call["offset"] for call in stub.calls] == [0, 2]


def test_list_sales_uses_inclusive_day_bounds():
    repository, stub = _repository([], page_size=50)
    repository.list_sales(client_id="cli-1", from_date=date(2024, 3, 1), to_date=date(2024, 3, 31))
    assert stub.calls[0]["filters"] == [
        ("client_id", "eq.cli-1"),
        ("occurred_at", "gte.2024-03-01T00:00:00+00:00"),
        ("occurred_at", "lt.2024-04-01T00:00:00+00:00"),
    ]
    assert stub.calls[0]["order"] == "occurred_at.desc,id.asc"


def test_sales_filter_renders_half_open_range_and_optional_ids():
    assert MARCH_2024.to_query_filters() == [
        ("occurred_at", "gte.2024-03-01T00:00:00+00:00"),
        ("occurred_at", "lt.2024-04-01T00:00:00+00:00"),
    ]
    narrowed = MARCH_2024.model_copy(update={"service_id": "svc-1", "client_id": "cli-1"})
    assert narrowed.to_query_filters()[2:] == [
        ("service_id", "eq.svc-1"),
        ("client_id", "eq.cli-1"),
    ]


def test_sales_filter_predicate_matches_query():
    narrowed = MARCH_2024.model_copy(update={"service_id": "svc-1"})
    inside = SaleRecord.model_validate(_row(5))
    other_service = SaleRecord.model_validate({**_row(5), "service_id": "svc-2"})
    naive_end = SaleRecord.model_validate({**_row(5), "occurred_at": "2024-04-01T00:00:00"})
    assert narrowed.matches(inside)
    assert not narrowed.matches(other_service)
    assert not narrowed.matches(naive_end)


def test_postgrest_filter_helpers_quote_values():
    assert in_filter(["a", 'b"c']) == 'in.("a","bc")'
    key, value = search_filter(["first_name", "phone"], " Dup,ont ")
    assert key == "or"
    assert value == '(first_name.ilike."*Dup,ont*",phone.ilike."*Dup,ont*")'
