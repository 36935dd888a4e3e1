"""Request-level failures. Item-level provider failures never raise; see folio.tools.result."""


class ConfigurationError(Exception):
    """Required provider credentials are missing; raised before any network call."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Missing {', '.join(missing)}")


class SummarizationError(Exception):
    """The summarization service failed; the brief request fails as a whole."""


class RegistryError(ValueError):
    """The asset universe is malformed (e.g. duplicate tickers)."""
