import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from folio.app.logging import redact

logger = logging.getLogger(__name__)


@dataclass
class JsonResponse:
    status_code: int
    data: Any = None
    parsed: bool = False

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def failure_message(self, *keys: str) -> str:
        """Provider-reported message under the first present key, else the HTTP status."""
        if self.parsed and isinstance(self.data, dict):
            for key in keys:
                msg = self.data.get(key)
                if msg:
                    return str(msg)
        return f"HTTP {self.status_code}"


def get_json(client: httpx.Client, url: str, params: Optional[Dict[str, Any]] = None) -> JsonResponse:
    """GET ``url`` and decode the body as JSON.

    Transport errors propagate as ``httpx.HTTPError``. A body that is not JSON
    is reported through ``parsed=False`` so callers can fall back to the status.
    """
    try:
        resp = client.get(url, params=params)
    except httpx.HTTPError as exc:
        logger.debug("GET failed for %s: %s", url, redact(str(exc)))
        raise
    try:
        data = resp.json()
    except ValueError:
        logger.debug("Non-JSON body from %s (HTTP %s)", url, resp.status_code)
        return JsonResponse(status_code=resp.status_code)
    return JsonResponse(status_code=resp.status_code, data=data, parsed=True)


def build_client(timeout: float) -> httpx.Client:
    return httpx.Client(timeout=timeout, headers={"Accept": "application/json"})
