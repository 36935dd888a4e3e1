import datetime as dt
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serialized with camelCase keys; accepts either spelling on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Asset(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: str
    ticker: str
    exchange: str
    strategy: str  # cluster label, display grouping only
    provider_symbol: str  # Twelve Data symbol, may differ from ticker (e.g. "ASML.AS")


class TimeSeriesPoint(CamelModel):
    date: str
    open: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    close: Optional[float] = None
    volume: Optional[float] = None


class TimeSeries(CamelModel):
    currency: Optional[str] = None
    points: List[TimeSeriesPoint] = []  # most recent first


class Fundamentals(CamelModel):
    pe_ratio: Optional[float] = None
    ev_to_ebitda: Optional[float] = None


class QuoteMetrics(CamelModel):
    ticker: str
    name: str
    exchange: str
    strategy: str

    price: Optional[float] = None
    low52: Optional[float] = None
    low52_diff_pct: Optional[float] = None
    high52: Optional[float] = None
    high52_diff_pct: Optional[float] = None
    pe_ratio: Optional[float] = None
    ev_to_ebitda: Optional[float] = None
    currency: Optional[str] = None


ErrorSource = Literal["quote-provider", "fundamentals-provider"]


class AssetError(CamelModel):
    ticker: str
    provider_symbol: str
    source: ErrorSource
    message: str


class Dashboard(CamelModel):
    grouped: Dict[str, List[QuoteMetrics]]
    errors: List[AssetError] = []
    updated_at: dt.datetime


class NewsItem(CamelModel):
    headline: Optional[str] = None
    source: Optional[str] = None
    datetime: Optional[int] = None  # unix seconds
    summary: str = ""
    url: Optional[str] = None


class TickerError(CamelModel):
    ticker: str
    message: str


class NewsDigest(CamelModel):
    by_ticker: Dict[str, List[NewsItem]]
    errors: List[TickerError] = []


class NewsRequest(CamelModel):
    tickers: List[str] = Field(..., min_length=1)
    days_back: int = Field(3, ge=0, le=365)


class BriefRequest(NewsRequest):
    pass


class BriefResponse(BaseModel):
    brief: str


class BriefContext(BaseModel):
    period_description: str
    tickers: List[str]
    news_by_ticker: Dict[str, List[NewsItem]]
    unavailable: List[str] = []  # tickers whose news fetch failed


class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None
