from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Union

from mandataire_crm.models.sales import SaleRecord


Number = Union[int, float, Decimal, str]

ONE_HUNDRED = Decimal("100")


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps float inputs such as 3.5 or 0.5 exact.
    return Decimal(str(value))


def round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_commission_cents(
    amount_cents: int,
    commission_rate_percent: Number,
    commission_amount_cents_override: Optional[int],
    split_ratio: Number = 1,
) -> int:
    if commission_amount_cents_override is not None:
        basis = Decimal(commission_amount_cents_override)
    else:
        basis = Decimal(amount_cents) * _to_decimal(commission_rate_percent) / ONE_HUNDRED
    return max(round_half_up(basis * _to_decimal(split_ratio)), 0)


def sale_commission_cents(sale: SaleRecord) -> int:
    return compute_commission_cents(
        amount_cents=sale.amount_cents,
        commission_rate_percent=sale.commission_rate_percent,
        commission_amount_cents_override=sale.commission_amount_cents_override,
        split_ratio=sale.split_ratio,
    )


def total_commission_cents(sales: Iterable[SaleRecord]) -> int:
    return sum(sale_commission_cents(sale) for sale in sales)
