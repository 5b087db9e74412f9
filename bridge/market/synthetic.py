"""Synthetic quote provider.

Fabricates a fictional quote so the backend works without network
credentials:

- lastPrice uniform in [100, 150]
- change uniform in [0, 5]
- changePercent uniform in [0, 2]

Each value is rounded to 2 decimals. Pass ``seed`` (or an ``rng``) for a
reproducible sequence.
"""

from __future__ import annotations

import random
from typing import Any, Dict, Optional

from .base import QuoteProvider
from ..core.types import MarketQuote


class SyntheticQuoteProvider(QuoteProvider):
    def __init__(
        self,
        name: str = "synthetic",
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(name)
        self._rng = rng or random.Random(seed)

    def quote(self, symbol: str) -> MarketQuote:
        return MarketQuote(
            symbol=symbol,
            last_price=round(self._rng.uniform(100.0, 150.0), 2),
            change=round(self._rng.uniform(0.0, 5.0), 2),
            change_percent=round(self._rng.uniform(0.0, 2.0), 2),
        )

    def get_quote(self, symbol: str) -> Dict[str, Any]:
        return self.quote(symbol).to_dict()
