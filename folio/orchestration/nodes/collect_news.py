import logging
from typing import Any, Callable, Dict

from folio.orchestration.news import fetch_news
from folio.tools.finnhub import FinnhubClient

logger = logging.getLogger(__name__)


def make_collect_news_node(client: FinnhubClient, limit: int) -> Callable[[Dict[str, Any]], Dict[str, Any]]:
    def collect_news_node(state: Dict[str, Any]) -> Dict[str, Any]:
        request = state["request"]
        digest = fetch_news(client, request.tickers, request.days_back, limit)
        state["news"] = digest
        failed = {e.ticker for e in digest.errors}
        quiet = [t for t, items in digest.by_ticker.items() if not items and t not in failed]
        if quiet:
            logger.info("No news for: %s", ", ".join(quiet))
        return state

    return collect_news_node
