"""Derived metrics for one dashboard row."""
from typing import Optional

from folio.app.schemas import Asset, Fundamentals, QuoteMetrics, TimeSeries
from folio.tools.numeric import finite, pct_diff


def range_from_series(series: TimeSeries) -> tuple[Optional[float], Optional[float], Optional[float]]:
    """``(price, low52, high52)`` from a most-recent-first daily series.

    The "52-week" range covers whatever window the provider returned; a
    recent listing with fewer than a year of bars gives a shorter range.
    """
    closes = finite(p.close for p in series.points)
    lows = finite(p.low for p in series.points)
    highs = finite(p.high for p in series.points)
    price = closes[0] if closes else None
    low52 = min(lows) if lows else None
    high52 = max(highs) if highs else None
    return price, low52, high52


def build_metrics(asset: Asset, series: Optional[TimeSeries], fundamentals: Optional[Fundamentals]) -> QuoteMetrics:
    price = low52 = high52 = None
    currency = None
    if series is not None:
        price, low52, high52 = range_from_series(series)
        currency = series.currency
    fundamentals = fundamentals or Fundamentals()
    return QuoteMetrics(
        ticker=asset.ticker,
        name=asset.name,
        exchange=asset.exchange,
        strategy=asset.strategy,
        price=price,
        low52=low52,
        low52_diff_pct=pct_diff(price, low52),
        high52=high52,
        high52_diff_pct=pct_diff(price, high52),
        pe_ratio=fundamentals.pe_ratio,
        ev_to_ebitda=fundamentals.ev_to_ebitda,
        currency=currency,
    )
