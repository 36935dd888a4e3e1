BRIEF_SYSTEM = """You write a portfolio news brief for someone monitoring their holdings.
- Be factual and concise. Use only the news supplied in the data; do not invent events, figures, or sources.
- Do NOT give financial advice or buy/sell recommendations.
- For every ticker with an empty news list, state explicitly: "No relevant news for <TICKER> in this period."
- For every ticker listed under "unavailable", state that its news could not be retrieved.
- Follow the structure described in "output_format"."""

BRIEF_USER_TEMPLATE = """{payload}"""

OUTPUT_FORMAT = {
    "portfolio_summary": [
        "3-6 bullets with recurring themes and shared risks",
        "Tickers with the most activity / relevant news",
    ],
    "per_ticker": {
        "bullets": "3-6 bullets per ticker (what happened + why it matters)",
        "watch_next": "1-2 bullets: what to watch next",
        "impact": "low/medium/high with a one-sentence justification",
    },
}
