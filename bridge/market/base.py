"""Quote provider abstraction."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class QuoteProvider(ABC):
    name: str

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def get_quote(self, symbol: str) -> Any:
        """Return a JSON-serializable quote for ``symbol``."""
        ...
