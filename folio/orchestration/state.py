"""LangGraph state schema for the news brief workflow."""
from typing import Optional, TypedDict

from folio.app.schemas import BriefRequest, NewsDigest


class BriefState(TypedDict, total=False):
    """State passed between the brief workflow nodes."""

    # Input
    request: BriefRequest

    # News collection
    news: Optional[NewsDigest]

    # Output
    brief: Optional[str]
