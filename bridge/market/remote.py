"""Remote quote provider.

Calls ``GET {base_url}/{symbol}/quotes?apikey=...`` on a TD Ameritrade style
market data API and forwards the JSON body unmodified. Any failure
(connection, timeout, non-2xx, body that is not JSON) is raised as
``UpstreamError`` so the handler can turn it into a service error.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests
from dotenv import load_dotenv

from .base import QuoteProvider
from ..core.errors import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.tdameritrade.com/v1/marketdata"


class RemoteQuoteProvider(QuoteProvider):
    def __init__(
        self,
        name: str = "remote",
        base_url: str = DEFAULT_BASE_URL,
        api_key: Optional[str] = None,
        timeout: float = 5.0,
    ):
        super().__init__(name)
        load_dotenv()
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key or os.getenv("TD_API_KEY")
        self.timeout = timeout
        if not self.api_key:
            logger.warning("No TD_API_KEY configured; upstream will likely reject requests")

    def _headers(self) -> Dict[str, str]:
        return {"Accept": "application/json"}

    def _url(self, symbol: str) -> str:
        return f"{self.base_url}/{quote(symbol, safe='')}/quotes"

    def get_quote(self, symbol: str) -> Any:
        url = self._url(symbol)
        try:
            resp = requests.get(
                url,
                params={"apikey": self.api_key},
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise UpstreamError(f"quote request for {symbol} failed: {e}") from e
        if not (200 <= resp.status_code < 300):
            raise UpstreamError(
                f"quote request for {symbol} returned {resp.status_code}",
                status_code=resp.status_code,
            )
        try:
            return resp.json()
        except ValueError as e:
            raise UpstreamError(
                f"quote response for {symbol} is not JSON", status_code=resp.status_code
            ) from e
