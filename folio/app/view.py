"""Display formatting for the dashboard page. No business logic, only view derivation."""
from typing import List, Optional

from pydantic import BaseModel

from folio.app.schemas import AssetError, CamelModel, Dashboard, QuoteMetrics
from folio.tools.numeric import safe_number

PLACEHOLDER = "—"
ALL = "ALL"


def fmt_num(value: Optional[float], decimals: int = 2) -> str:
    num = safe_number(value)
    if num is None:
        return PLACEHOLDER
    return f"{num:.{decimals}f}"


def fmt_pct(value: Optional[float]) -> str:
    num = safe_number(value)
    if num is None:
        return PLACEHOLDER
    sign = "+" if num > 0 else ""
    return f"{sign}{num:.1f}%"


class RowView(CamelModel):
    ticker: str
    name: str
    exchange: str
    price: str
    low52: str
    low52_diff_pct: str
    high52: str
    high52_diff_pct: str
    pe_ratio: str
    ev_to_ebitda: str


class GroupView(BaseModel):
    strategy: str
    rows: List[RowView]


class DashboardView(CamelModel):
    strategies: List[str]
    selected: str
    groups: List[GroupView]
    errors: List[AssetError]
    updated_at: str


def row_view(row: QuoteMetrics) -> RowView:
    price = fmt_num(row.price, 2)
    if row.currency and price != PLACEHOLDER:
        price = f"{price} {row.currency}"
    return RowView(
        ticker=row.ticker,
        name=row.name,
        exchange=row.exchange,
        price=price,
        low52=fmt_num(row.low52, 2),
        low52_diff_pct=fmt_pct(row.low52_diff_pct),
        high52=fmt_num(row.high52, 2),
        high52_diff_pct=fmt_pct(row.high52_diff_pct),
        pe_ratio=fmt_num(row.pe_ratio, 1),
        ev_to_ebitda=fmt_num(row.ev_to_ebitda, 1),
    )


def build_view(dashboard: Dashboard, strategy: Optional[str] = None) -> DashboardView:
    """Formatted groups for one selected strategy, or all of them (the default)."""
    strategies = sorted(dashboard.grouped)
    selected = strategy or ALL
    visible = strategies if selected == ALL else [selected]
    groups = [
        GroupView(strategy=name, rows=[row_view(r) for r in dashboard.grouped.get(name, [])])
        for name in visible
    ]
    return DashboardView(
        strategies=strategies,
        selected=selected,
        groups=groups,
        errors=dashboard.errors,
        updated_at=dashboard.updated_at.isoformat(),
    )
