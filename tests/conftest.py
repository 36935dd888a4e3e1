from __future__ import annotations

from typing import Any

import httpx
import pytest

from folio.app.schemas import Asset
from folio.app.universe import AssetRegistry
from folio.tools.finnhub import FinnhubClient
from folio.tools.twelve_data import TwelveDataClient

TWELVE_BASE = "https://twelve.test"
FINNHUB_BASE = "https://finnhub.test/api/v1"


def asset(ticker: str, strategy: str, provider_symbol: str | None = None) -> Asset:
    return Asset(
        name=f"{ticker} Corp",
        ticker=ticker,
        exchange="XNAS",
        strategy=strategy,
        provider_symbol=provider_symbol or ticker,
    )


def series_payload(closes: list[float], lows: list[float], highs: list[float], currency: str = "USD") -> dict:
    """Twelve Data style payload, most recent bar first, numbers as strings."""
    values = [
        {
            "datetime": f"2026-10-{19 - i:02d}",
            "open": str(c),
            "high": str(h),
            "low": str(lo),
            "close": str(c),
            "volume": "1000",
        }
        for i, (c, lo, h) in enumerate(zip(closes, lows, highs))
    ]
    return {"meta": {"symbol": "X", "interval": "1day", "currency": currency}, "values": values, "status": "ok"}


def metrics_payload(**metric: Any) -> dict:
    return {"metric": metric, "metricType": "all", "symbol": "X"}


class FakeUpstream:
    """Routes Twelve Data / Finnhub requests to canned responses and records every call.

    Each canned response is ``(status, body)``; a ``str`` body is sent as-is
    (non-JSON), anything else as JSON. An ``Exception`` instance is raised.
    """

    def __init__(self) -> None:
        self.quotes: dict[str, Any] = {}
        self.metrics: dict[str, Any] = {}
        self.news: dict[str, Any] = {}
        self.calls: list[httpx.Request] = []

    def _respond(self, canned: Any, request: httpx.Request) -> httpx.Response:
        if isinstance(canned, Exception):
            raise canned
        status, body = canned
        if isinstance(body, str):
            return httpx.Response(status, text=body, request=request)
        return httpx.Response(status, json=body, request=request)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        symbol = request.url.params.get("symbol")
        path = request.url.path
        if path.endswith("/time_series"):
            table = self.quotes
        elif path.endswith("/stock/metric"):
            table = self.metrics
        elif path.endswith("/company-news"):
            table = self.news
        else:
            return httpx.Response(404, json={"error": "unknown path"}, request=request)
        if symbol not in table:
            return httpx.Response(404, json={"error": f"no fixture for {symbol}"}, request=request)
        return self._respond(table[symbol], request)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))

    def calls_to(self, suffix: str) -> list[httpx.Request]:
        return [c for c in self.calls if c.url.path.endswith(suffix)]


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def http_client(upstream: FakeUpstream):
    with upstream.client() as client:
        yield client


@pytest.fixture
def twelve(http_client: httpx.Client) -> TwelveDataClient:
    return TwelveDataClient(http_client, api_key="td-key", base_url=TWELVE_BASE)


@pytest.fixture
def finnhub(http_client: httpx.Client) -> FinnhubClient:
    return FinnhubClient(http_client, api_key="fh-key", base_url=FINNHUB_BASE)


@pytest.fixture
def abc_registry() -> AssetRegistry:
    return AssetRegistry([asset("A", "X"), asset("B", "X"), asset("C", "Y")])
