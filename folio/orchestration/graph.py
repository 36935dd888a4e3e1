from langgraph.graph import END, StateGraph

from folio.inference.summarizer import Summarizer
from folio.orchestration.nodes.collect_news import make_collect_news_node
from folio.orchestration.nodes.summarize import make_summarize_node
from folio.orchestration.state import BriefState
from folio.tools.finnhub import FinnhubClient


def build_brief_workflow(news_client: FinnhubClient, summarizer: Summarizer, news_limit: int):
    graph = StateGraph(BriefState)

    graph.add_node("collect_news", make_collect_news_node(news_client, news_limit))
    graph.add_node("summarize", make_summarize_node(summarizer))

    graph.set_entry_point("collect_news")
    graph.add_edge("collect_news", "summarize")
    graph.add_edge("summarize", END)

    return graph.compile()
