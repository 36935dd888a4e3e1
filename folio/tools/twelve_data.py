"""Twelve Data client: daily time series used for price and the 52-week range."""
import logging
from typing import Any, Dict, List

import httpx

from folio.app.logging import redact
from folio.app.schemas import TimeSeries, TimeSeriesPoint
from folio.app.settings import Settings
from folio.tools.http_client import get_json
from folio.tools.numeric import safe_number
from folio.tools.result import FetchResult

logger = logging.getLogger(__name__)


def parse_time_series(data: Dict[str, Any]) -> TimeSeries:
    """Map a ``/time_series`` payload to a ``TimeSeries``.

    Twelve Data returns ``values`` most-recent-first with every number as a
    string; the order is kept as delivered.
    """
    meta = data.get("meta") if isinstance(data.get("meta"), dict) else {}
    values = data.get("values") if isinstance(data.get("values"), list) else []
    points: List[TimeSeriesPoint] = []
    for v in values:
        if not isinstance(v, dict):
            continue
        points.append(
            TimeSeriesPoint(
                date=str(v.get("datetime") or v.get("date") or ""),
                open=safe_number(v.get("open")),
                high=safe_number(v.get("high")),
                low=safe_number(v.get("low")),
                close=safe_number(v.get("close")),
                volume=safe_number(v.get("volume")),
            )
        )
    currency = meta.get("currency")
    return TimeSeries(currency=currency if isinstance(currency, str) and currency else None, points=points)


class TwelveDataClient:
    def __init__(self, client: httpx.Client, api_key: str | None, base_url: str, outputsize: int = 260):
        self.client = client
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.outputsize = outputsize

    @classmethod
    def from_settings(cls, settings: Settings, client: httpx.Client) -> "TwelveDataClient":
        return cls(
            client,
            api_key=settings.twelve_data_api_key,
            base_url=settings.twelve_data_base_url,
            outputsize=settings.quote_outputsize,
        )

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def fetch_time_series(self, symbol: str) -> FetchResult[TimeSeries]:
        params = {
            "symbol": symbol,
            "interval": "1day",
            "outputsize": self.outputsize,
            "apikey": self.api_key,
        }
        try:
            resp = get_json(self.client, f"{self.base_url}/time_series", params)
        except httpx.HTTPError as exc:
            return FetchResult.failure(redact(str(exc)) or type(exc).__name__)

        # Errors come back as {"status": "error", "code": 400, "message": "..."}, often with HTTP 200.
        provider_error = resp.parsed and isinstance(resp.data, dict) and resp.data.get("status") == "error"
        if not resp.parsed or not resp.ok or provider_error:
            return FetchResult.failure(resp.failure_message("message"))
        if not isinstance(resp.data, dict):
            return FetchResult.failure(f"Unexpected payload for {symbol}")
        series = parse_time_series(resp.data)
        logger.debug("Twelve Data returned %d points for %s", len(series.points), symbol)
        return FetchResult.success(series)
