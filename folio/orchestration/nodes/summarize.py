from typing import Any, Callable, Dict

from folio.app.schemas import BriefContext
from folio.inference.summarizer import Summarizer


def make_summarize_node(summarizer: Summarizer) -> Callable[[Dict[str, Any]], Dict[str, Any]]:
    def summarize_node(state: Dict[str, Any]) -> Dict[str, Any]:
        request = state["request"]
        digest = state["news"]
        context = BriefContext(
            period_description=f"last {request.days_back} days",
            tickers=request.tickers,
            news_by_ticker=digest.by_ticker,
            unavailable=[e.ticker for e in digest.errors],
        )
        # SummarizationError propagates out of the graph; there is no partial brief.
        state["brief"] = summarizer.summarize(context)
        return state

    return summarize_node
