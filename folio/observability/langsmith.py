import os

from folio.app.settings import settings


def configure_tracing() -> None:
    """
    Configure LangSmith tracing for the brief summarizer via environment variables.

    If `LANGCHAIN_TRACING_V2=true` and LangSmith creds are present, LangChain
    traces every chat model call on its own.
    """
    if settings.langchain_tracing_v2:
        os.environ["LANGCHAIN_TRACING_V2"] = "true"
    if settings.langsmith_api_key:
        os.environ["LANGSMITH_API_KEY"] = settings.langsmith_api_key
    if settings.langsmith_project:
        os.environ["LANGSMITH_PROJECT"] = settings.langsmith_project
