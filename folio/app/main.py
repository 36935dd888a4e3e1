import logging
from pathlib import Path
from typing import Iterator, Optional

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from folio.app.errors import ConfigurationError, SummarizationError
from folio.app.logging import configure_logging, event
from folio.app.schemas import BriefRequest, BriefResponse, Dashboard, NewsDigest, NewsRequest
from folio.app.settings import Settings, get_settings
from folio.app.universe import AssetRegistry, get_registry
from folio.app.view import DashboardView, build_view
from folio.inference.summarizer import Summarizer
from folio.observability.langsmith import configure_tracing
from folio.orchestration.dashboard import DashboardAggregator
from folio.orchestration.graph import build_brief_workflow
from folio.orchestration.news import fetch_news
from folio.tools.finnhub import FinnhubClient
from folio.tools.http_client import build_client
from folio.tools.twelve_data import TwelveDataClient

configure_logging()
configure_tracing()

app = FastAPI(title="Folio Portfolio Dashboard")

# Serve static files (dashboard UI)
static_dir = Path(__file__).parent.parent.parent / "static"
if static_dir.exists():
    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")
logger = logging.getLogger(__name__)


def get_http_client(settings: Settings = Depends(get_settings)) -> Iterator[httpx.Client]:
    with build_client(settings.request_timeout) as client:
        yield client


def get_summarizer(settings: Settings = Depends(get_settings)) -> Summarizer:
    return Summarizer.from_settings(settings)


def get_aggregator(
    settings: Settings = Depends(get_settings),
    registry: AssetRegistry = Depends(get_registry),
    client: httpx.Client = Depends(get_http_client),
) -> DashboardAggregator:
    return DashboardAggregator(
        registry,
        quotes=TwelveDataClient.from_settings(settings, client),
        fundamentals=FinnhubClient.from_settings(settings, client),
    )


def get_finnhub(
    settings: Settings = Depends(get_settings),
    client: httpx.Client = Depends(get_http_client),
) -> FinnhubClient:
    return FinnhubClient.from_settings(settings, client)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    logger.error("Configuration error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": "missing-configuration", "message": str(exc)})


@app.exception_handler(SummarizationError)
async def summarization_error_handler(request: Request, exc: SummarizationError):
    return JSONResponse(status_code=502, content={"error": "summarization-failed", "message": str(exc)})


@app.get("/dashboard", response_model=Dashboard)
def dashboard(aggregator: DashboardAggregator = Depends(get_aggregator)):
    result = aggregator.build_dashboard()
    event("dashboard served", {"groups": len(result.grouped), "errors": len(result.errors)})
    return result


@app.get("/dashboard/view", response_model=DashboardView)
def dashboard_view(
    strategy: Optional[str] = None,
    aggregator: DashboardAggregator = Depends(get_aggregator),
):
    return build_view(aggregator.build_dashboard(), strategy)


@app.post("/news", response_model=NewsDigest)
def news(
    payload: NewsRequest,
    settings: Settings = Depends(get_settings),
    finnhub: FinnhubClient = Depends(get_finnhub),
):
    return fetch_news(finnhub, payload.tickers, payload.days_back, settings.news_limit)


@app.post("/brief", response_model=BriefResponse)
def brief(
    payload: BriefRequest,
    settings: Settings = Depends(get_settings),
    finnhub: FinnhubClient = Depends(get_finnhub),
    summarizer: Summarizer = Depends(get_summarizer),
):
    missing = []
    if not finnhub.configured:
        missing.append("FINNHUB_API_KEY")
    if not summarizer.configured:
        missing.append("OPENAI_API_KEY")
    if missing:
        raise ConfigurationError(missing)

    workflow = build_brief_workflow(finnhub, summarizer, settings.brief_news_limit)
    result = workflow.invoke({"request": payload})
    return BriefResponse(brief=result["brief"])


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/")
async def root():
    """Serve the dashboard UI."""
    ui_path = static_dir / "index.html"
    if ui_path.exists():
        return FileResponse(ui_path)
    return {"message": "Dashboard UI not found. Use GET /dashboard."}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
