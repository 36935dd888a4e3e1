import logging
import re
from typing import Any, Dict

from rich.logging import RichHandler

_APIKEY_RE = re.compile(r"(apikey|api_key|token|key)=[^&\s]+", re.IGNORECASE)


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[RichHandler(rich_tracebacks=True)],
    )
    # httpx logs full request URLs at INFO, which carry provider keys in the query string.
    logging.getLogger("httpx").setLevel(logging.WARNING)


def redact(text: str) -> str:
    """Mask credential query parameters (token=..., apikey=...) in a message."""
    return _APIKEY_RE.sub(r"\1=***", text)


def event(msg: str, extra: Dict[str, Any] | None = None, level: int = logging.INFO) -> None:
    logging.log(level, msg, extra=extra or {})
