"""News brief summarization through a chat model.

The adapter only builds the instruction + data payload and hands back the
model's text untouched. No retries: a failure fails the brief request.
"""
import json
import logging
from typing import Any, Dict, Optional

from langchain_core.prompts import ChatPromptTemplate
from langchain_openai import ChatOpenAI
from openai import RateLimitError

from folio.app.errors import SummarizationError
from folio.app.schemas import BriefContext
from folio.app.settings import Settings
from folio.prompts.brief_prompt import BRIEF_SYSTEM, BRIEF_USER_TEMPLATE, OUTPUT_FORMAT

logger = logging.getLogger(__name__)


def build_payload(context: BriefContext) -> str:
    return json.dumps(
        {
            "period": context.period_description,
            "tickers": context.tickers,
            "newsByTicker": {
                ticker: [item.model_dump(by_alias=True) for item in items]
                for ticker, items in context.news_by_ticker.items()
            },
            "unavailable": context.unavailable,
            "output_format": OUTPUT_FORMAT,
        },
        ensure_ascii=False,
    )


class Summarizer:
    def __init__(self, llm: Any = None, settings: Optional[Settings] = None):
        self._llm = llm
        self._settings = settings

    @classmethod
    def from_settings(cls, settings: Settings) -> "Summarizer":
        return cls(settings=settings)

    @property
    def configured(self) -> bool:
        return self._llm is not None or bool(self._settings and self._settings.openai_api_key)

    def llm(self) -> Any:
        # Built on first use so a missing key is reported before the client is constructed.
        if self._llm is None:
            kwargs: Dict[str, Any] = {
                "model": self._settings.model_name,
                "temperature": 0.2,
                "timeout": self._settings.request_timeout,
                "max_retries": 0,
                "api_key": self._settings.openai_api_key,
            }
            self._llm = ChatOpenAI(**kwargs)
        return self._llm

    def messages(self, context: BriefContext) -> list:
        prompt = ChatPromptTemplate.from_messages([("system", BRIEF_SYSTEM), ("user", BRIEF_USER_TEMPLATE)])
        return prompt.format_messages(payload=build_payload(context))

    def summarize(self, context: BriefContext) -> str:
        msgs = self.messages(context)
        try:
            response = self.llm().invoke(msgs)
        except RateLimitError as exc:
            if "insufficient_quota" in str(exc).lower():
                logger.error("OpenAI quota exceeded. Check your billing plan. Error: %s", exc)
            else:
                logger.error("OpenAI rate limit error: %s", exc)
            raise SummarizationError(str(exc)) from exc
        except Exception as exc:  # noqa: BLE001
            logger.error("Summarization failed: %s", exc)
            raise SummarizationError(str(exc) or type(exc).__name__) from exc
        content = response.content
        return content if isinstance(content, str) else str(content)
