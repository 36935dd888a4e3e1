import datetime as dt
import logging
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError

from folio.app.errors import ConfigurationError
from folio.app.schemas import NewsDigest, NewsItem, TickerError
from folio.tools.finnhub import FinnhubClient
from folio.tools.numeric import safe_number

logger = logging.getLogger(__name__)


def news_window(days_back: int, today: Optional[dt.date] = None) -> tuple[dt.date, dt.date]:
    """Inclusive ``(from, to)`` calendar dates, UTC."""
    end = today or dt.datetime.now(dt.timezone.utc).date()
    return end - dt.timedelta(days=days_back), end


def trim_news(raw: List[Any], limit: int) -> List[NewsItem]:
    """First ``limit`` entries in provider order, reduced to the fields the brief needs."""
    items: List[NewsItem] = []
    for x in raw[:limit]:
        if not isinstance(x, dict):
            continue
        ts = safe_number(x.get("datetime"))
        try:
            items.append(
                NewsItem(
                    headline=x.get("headline"),
                    source=x.get("source"),
                    datetime=int(ts) if ts is not None else None,
                    summary=x.get("summary") or "",
                    url=x.get("url"),
                )
            )
        except ValidationError as exc:
            logger.debug("Skipping malformed news entry: %s", exc)
    return items


def fetch_news(
    client: FinnhubClient,
    tickers: Sequence[str],
    days_back: int,
    limit: int,
    today: Optional[dt.date] = None,
) -> NewsDigest:
    """Recent company news per ticker. A failed ticker gets an empty list and an error entry."""
    if not client.configured:
        raise ConfigurationError(["FINNHUB_API_KEY"])

    start, end = news_window(days_back, today)
    by_ticker: Dict[str, List[NewsItem]] = {}
    errors: List[TickerError] = []
    for ticker in tickers:
        result = client.fetch_company_news(ticker, start, end)
        if not result.ok:
            logger.warning("News fetch failed for %s: %s", ticker, result.error)
            errors.append(TickerError(ticker=ticker, message=result.error))
            by_ticker[ticker] = []
            continue
        by_ticker[ticker] = trim_news(result.value, limit)

    logger.info(
        "Fetched news for %d tickers (%s..%s), %d failed",
        len(by_ticker),
        start.isoformat(),
        end.isoformat(),
        len(errors),
    )
    return NewsDigest(by_ticker=by_ticker, errors=errors)
