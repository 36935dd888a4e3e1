from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Keys must be provided via env / .env (never hardcode secrets in code)
    twelve_data_api_key: str | None = None
    finnhub_api_key: str | None = None
    openai_api_key: str | None = None
    langsmith_api_key: str | None = None
    langsmith_project: str | None = None
    langchain_tracing_v2: bool = False
    model_name: str = "gpt-4o-mini"

    twelve_data_base_url: str = "https://api.twelvedata.com"
    finnhub_base_url: str = "https://finnhub.io/api/v1"
    universe_path: str | None = None  # JSON list of assets; built-in universe when unset

    request_timeout: float = 30.0
    quote_outputsize: int = 260  # ~1 year of trading days
    brief_news_limit: int = 12
    news_limit: int = 5


settings = Settings()  # load once at import


def get_settings() -> Settings:
    return settings
