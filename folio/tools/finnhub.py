"""Finnhub client: valuation metrics snapshot and company news."""
import datetime as dt
import logging
from typing import Any, Dict, List

import httpx

from folio.app.logging import redact
from folio.app.schemas import Fundamentals
from folio.app.settings import Settings
from folio.tools.http_client import get_json
from folio.tools.numeric import first_number, safe_number
from folio.tools.result import FetchResult

logger = logging.getLogger(__name__)


def parse_fundamentals(data: Dict[str, Any]) -> Fundamentals:
    # Coverage is patchy for non-US listings and ETFs; missing keys stay None.
    metric = data.get("metric") if isinstance(data.get("metric"), dict) else {}
    return Fundamentals(
        pe_ratio=first_number(metric.get("peTTM"), metric.get("peBasicExclExtraTTM")),
        ev_to_ebitda=safe_number(metric.get("evEbitdaTTM")),
    )


class FinnhubClient:
    def __init__(self, client: httpx.Client, api_key: str | None, base_url: str):
        self.client = client
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    @classmethod
    def from_settings(cls, settings: Settings, client: httpx.Client) -> "FinnhubClient":
        return cls(client, api_key=settings.finnhub_api_key, base_url=settings.finnhub_base_url)

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def _get(self, path: str, params: Dict[str, Any]) -> FetchResult[Any]:
        try:
            resp = get_json(self.client, f"{self.base_url}{path}", {**params, "token": self.api_key})
        except httpx.HTTPError as exc:
            return FetchResult.failure(redact(str(exc)) or type(exc).__name__)
        if not resp.parsed or not resp.ok:
            if resp.status_code == 429:
                logger.warning("Finnhub rate-limited (429) for %s", path)
            return FetchResult.failure(resp.failure_message("error"))
        if isinstance(resp.data, dict) and resp.data.get("error"):
            return FetchResult.failure(str(resp.data["error"]))
        return FetchResult.success(resp.data)

    def fetch_metrics(self, ticker: str) -> FetchResult[Fundamentals]:
        result = self._get("/stock/metric", {"symbol": ticker, "metric": "all"})
        if not result.ok:
            return FetchResult.failure(result.error)
        if not isinstance(result.value, dict):
            return FetchResult.failure(f"Unexpected payload for {ticker}")
        return FetchResult.success(parse_fundamentals(result.value))

    def fetch_company_news(self, ticker: str, start: dt.date, end: dt.date) -> FetchResult[List[Any]]:
        """Raw company-news entries for ``ticker`` between two inclusive dates."""
        result = self._get(
            "/company-news",
            {"symbol": ticker, "from": start.isoformat(), "to": end.isoformat()},
        )
        if not result.ok:
            return FetchResult.failure(result.error)
        data = result.value
        return FetchResult.success(data if isinstance(data, list) else [])
