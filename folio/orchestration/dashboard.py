import datetime as dt
import logging
from typing import Dict, List

from folio.app.errors import ConfigurationError
from folio.app.schemas import AssetError, Dashboard, QuoteMetrics
from folio.app.universe import AssetRegistry
from folio.orchestration.metrics import build_metrics
from folio.tools.finnhub import FinnhubClient
from folio.tools.twelve_data import TwelveDataClient

logger = logging.getLogger(__name__)


def group_by_strategy(rows: List[QuoteMetrics]) -> Dict[str, List[QuoteMetrics]]:
    """Groups in first-occurrence order, each sorted by ticker."""
    grouped: Dict[str, List[QuoteMetrics]] = {}
    for row in rows:
        grouped.setdefault(row.strategy, []).append(row)
    for members in grouped.values():
        members.sort(key=lambda r: r.ticker)
    return grouped


class DashboardAggregator:
    """Quote + fundamentals for every tracked asset, one provider call at a time."""

    def __init__(self, registry: AssetRegistry, quotes: TwelveDataClient, fundamentals: FinnhubClient):
        self.registry = registry
        self.quotes = quotes
        self.fundamentals = fundamentals

    def _require_credentials(self) -> None:
        missing = []
        if not self.quotes.configured:
            missing.append("TWELVE_DATA_API_KEY")
        if not self.fundamentals.configured:
            missing.append("FINNHUB_API_KEY")
        if missing:
            raise ConfigurationError(missing)

    def build_dashboard(self) -> Dashboard:
        self._require_credentials()

        rows: List[QuoteMetrics] = []
        errors: List[AssetError] = []
        for asset in self.registry:
            series_result = self.quotes.fetch_time_series(asset.provider_symbol)
            if not series_result.ok:
                logger.warning("Quote fetch failed for %s (%s): %s", asset.ticker, asset.provider_symbol, series_result.error)
                errors.append(
                    AssetError(
                        ticker=asset.ticker,
                        provider_symbol=asset.provider_symbol,
                        source="quote-provider",
                        message=series_result.error,
                    )
                )

            metrics_result = self.fundamentals.fetch_metrics(asset.ticker)
            if not metrics_result.ok:
                logger.warning("Fundamentals fetch failed for %s: %s", asset.ticker, metrics_result.error)
                errors.append(
                    AssetError(
                        ticker=asset.ticker,
                        provider_symbol=asset.provider_symbol,
                        source="fundamentals-provider",
                        message=metrics_result.error,
                    )
                )

            rows.append(build_metrics(asset, series_result.value, metrics_result.value))

        logger.info("Dashboard built: %d assets, %d provider errors", len(rows), len(errors))
        return Dashboard(
            grouped=group_by_strategy(rows),
            errors=errors,
            updated_at=dt.datetime.now(dt.timezone.utc),
        )
