"""Tracked assets.

``provider_symbol`` is what Twelve Data expects and can differ from the
ticker Finnhub uses (exchange suffixes: "AI.PA", "SAP.DE", "KYGA.L"). A wrong
mapping only breaks that asset's quote fetch; the rest of the batch is fine.
"""
import json
import logging
import pathlib
from functools import lru_cache
from typing import Iterable, Iterator, List, Optional, Tuple

from pydantic import TypeAdapter, ValidationError

from folio.app.errors import RegistryError
from folio.app.schemas import Asset
from folio.app.settings import settings

logger = logging.getLogger(__name__)

_AI_INFRA = "AI & Digital Infra: AI / Semis / Automation / Robotics"

DEFAULT_UNIVERSE: Tuple[Asset, ...] = (
    Asset(name="ADOBE INC.", ticker="ADBE", exchange="XNAS", strategy=_AI_INFRA, provider_symbol="ADBE"),
    Asset(name="PAYPAL HOLDINGS, INC.", ticker="PYPL", exchange="XNAS", strategy="Others", provider_symbol="PYPL"),
    Asset(
        name="PALO ALTO NETWORKS, INC.",
        ticker="PANW",
        exchange="XNAS",
        strategy="Cybersecurity & Defense",
        provider_symbol="PANW",
    ),
    Asset(name="ALPHABET INC.", ticker="GOOGL", exchange="XNAS", strategy=_AI_INFRA, provider_symbol="GOOGL"),
)


class AssetRegistry:
    """Ordered, read-only set of assets keyed by ticker."""

    def __init__(self, assets: Iterable[Asset]):
        self._assets: Tuple[Asset, ...] = tuple(assets)
        seen = set()
        for asset in self._assets:
            if asset.ticker in seen:
                raise RegistryError(f"Duplicate ticker in universe: {asset.ticker}")
            seen.add(asset.ticker)

    def __iter__(self) -> Iterator[Asset]:
        return iter(self._assets)

    def __len__(self) -> int:
        return len(self._assets)

    def tickers(self) -> List[str]:
        return [a.ticker for a in self._assets]

    def strategies(self) -> List[str]:
        """Distinct strategy labels in first-occurrence order."""
        return list(dict.fromkeys(a.strategy for a in self._assets))

    def get(self, ticker: str) -> Optional[Asset]:
        return next((a for a in self._assets if a.ticker == ticker), None)

    @classmethod
    def from_json(cls, path: str | pathlib.Path) -> "AssetRegistry":
        """Load a JSON list of ``{name, ticker, exchange, strategy, providerSymbol}`` objects."""
        try:
            raw = json.loads(pathlib.Path(path).read_text(encoding="utf-8"))
            assets = TypeAdapter(List[Asset]).validate_python(raw)
        except (OSError, ValueError, ValidationError) as exc:
            raise RegistryError(f"Invalid universe file {path}: {exc}") from exc
        return cls(assets)


def load_registry(universe_path: str | None = None) -> AssetRegistry:
    if universe_path:
        registry = AssetRegistry.from_json(universe_path)
        logger.info("Loaded %d assets from %s", len(registry), universe_path)
        return registry
    return AssetRegistry(DEFAULT_UNIVERSE)


@lru_cache(maxsize=1)
def get_registry() -> AssetRegistry:
    return load_registry(settings.universe_path)
