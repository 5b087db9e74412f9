"""Core record types for the scrap-metal backend.

Records are immutable once created; the store hands out the same instances
to every reader.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict


class RecordKind(str, Enum):
    INVENTORY = "inventory"
    FUTURES = "futures"


def format_timestamp(ts: datetime) -> str:
    """Render a timestamp as ISO-8601 UTC with millisecond precision.

    Example: 2025-01-02T03:04:05.678Z
    """
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    ts = ts.astimezone(timezone.utc)
    return ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class InventoryRecord:
    id: int
    type: str
    quantity: float
    condition: str
    created_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "quantity": self.quantity,
            "condition": self.condition,
            "createdAt": format_timestamp(self.created_at),
        }


@dataclass(frozen=True)
class FuturesContract:
    id: int
    commodity: str
    quantity: float
    expiration_date: str
    target_price: float
    contract_type: str  # usually "long" or "short"
    created_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "commodity": self.commodity,
            "quantity": self.quantity,
            "expirationDate": self.expiration_date,
            "targetPrice": self.target_price,
            "contractType": self.contract_type,
            "createdAt": format_timestamp(self.created_at),
        }


@dataclass(frozen=True)
class MarketQuote:
    symbol: str
    last_price: float
    change: float
    change_percent: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "symbol": self.symbol,
            "lastPrice": self.last_price,
            "change": self.change,
            "changePercent": self.change_percent,
        }
