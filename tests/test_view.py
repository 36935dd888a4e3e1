import datetime as dt

import pytest

from folio.app.schemas import AssetError, Dashboard, QuoteMetrics
from folio.app.view import PLACEHOLDER, build_view, fmt_num, fmt_pct


def _row(ticker, strategy, **fields):
    return QuoteMetrics(ticker=ticker, name=f"{ticker} Inc", exchange="XNAS", strategy=strategy, **fields)


@pytest.fixture
def dashboard():
    return Dashboard(
        grouped={
            "Others": [_row("PYPL", "Others", price=61.234, currency="USD", low52=55.0, low52_diff_pct=11.3345)],
            "Cybersecurity": [_row("PANW", "Cybersecurity", pe_ratio=48.76, ev_to_ebitda=None, high52_diff_pct=-4.04)],
        },
        errors=[AssetError(ticker="PANW", provider_symbol="PANW", source="quote-provider", message="HTTP 500")],
        updated_at=dt.datetime(2026, 10, 19, 14, 30, tzinfo=dt.timezone.utc),
    )


class TestFormatting:
    def test_fixed_decimals(self):
        assert fmt_num(61.234) == "61.23"
        assert fmt_num(48.76, 1) == "48.8"
        assert fmt_num(0.0) == "0.00"

    @pytest.mark.parametrize("value", [None, float("nan"), float("inf")])
    def test_placeholder_for_absent_or_non_finite(self, value):
        assert fmt_num(value) == PLACEHOLDER
        assert fmt_pct(value) == PLACEHOLDER

    def test_percent_sign(self):
        assert fmt_pct(11.3345) == "+11.3%"
        assert fmt_pct(-4.04) == "-4.0%"
        assert fmt_pct(0.0) == "0.0%"


class TestBuildView:
    def test_default_shows_all_groups_sorted(self, dashboard):
        view = build_view(dashboard)
        assert view.selected == "ALL"
        assert view.strategies == ["Cybersecurity", "Others"]
        assert [g.strategy for g in view.groups] == ["Cybersecurity", "Others"]
        assert view.errors[0].ticker == "PANW"
        assert view.updated_at.startswith("2026-10-19T14:30:00")

    def test_single_select_filter(self, dashboard):
        view = build_view(dashboard, "Others")
        assert [g.strategy for g in view.groups] == ["Others"]
        (row,) = view.groups[0].rows
        assert row.price == "61.23 USD"
        assert row.low52 == "55.00"
        assert row.low52_diff_pct == "+11.3%"
        assert row.high52 == PLACEHOLDER
        assert row.pe_ratio == PLACEHOLDER

    def test_absent_price_has_no_currency_suffix(self, dashboard):
        (row,) = build_view(dashboard, "Cybersecurity").groups[0].rows
        assert row.price == PLACEHOLDER
        assert row.pe_ratio == "48.8"
        assert row.ev_to_ebitda == PLACEHOLDER
        assert row.high52_diff_pct == "-4.0%"

    def test_unknown_strategy_yields_empty_group(self, dashboard):
        view = build_view(dashboard, "Nope")
        assert [(g.strategy, g.rows) for g in view.groups] == [("Nope", [])]
