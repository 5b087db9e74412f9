"""In-memory, append-only record store.

Each record kind has its own id sequence. Ids are ``len(records) + 1`` at
insert time; since nothing is ever removed that is a strictly increasing
counter. Assignment and append happen under one lock so concurrent
requests never observe the same length.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Union

from ..core.clock import SystemClock
from ..core.types import FuturesContract, InventoryRecord, RecordKind

logger = logging.getLogger(__name__)

Record = Union[InventoryRecord, FuturesContract]

_FACTORIES = {
    RecordKind.INVENTORY: InventoryRecord,
    RecordKind.FUTURES: FuturesContract,
}


@dataclass
class RecordStore:
    clock: Any = field(default_factory=SystemClock)
    _records: Dict[RecordKind, List[Record]] = field(
        default_factory=lambda: {kind: [] for kind in RecordKind}
    )
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def create(self, kind: RecordKind, fields: Mapping[str, Any]) -> Record:
        """Append a new record of ``kind`` built from already-validated fields."""
        kind = RecordKind(kind)
        factory = _FACTORIES[kind]
        with self._lock:
            records = self._records[kind]
            record = factory(id=len(records) + 1, created_at=self.clock.now(), **fields)
            records.append(record)
        logger.info("Created %s record id=%s", kind.value, record.id)
        return record

    def list_all(self, kind: RecordKind) -> List[Record]:
        """Snapshot of every record of ``kind`` in insertion order."""
        kind = RecordKind(kind)
        with self._lock:
            return list(self._records[kind])

    def count(self, kind: RecordKind) -> int:
        with self._lock:
            return len(self._records[RecordKind(kind)])

    def add_inventory(self, type: str, quantity: float, condition: str) -> InventoryRecord:
        return self.create(
            RecordKind.INVENTORY,
            {"type": type, "quantity": quantity, "condition": condition},
        )

    def add_contract(
        self,
        commodity: str,
        quantity: float,
        expiration_date: str,
        target_price: float,
        contract_type: str,
    ) -> FuturesContract:
        return self.create(
            RecordKind.FUTURES,
            {
                "commodity": commodity,
                "quantity": quantity,
                "expiration_date": expiration_date,
                "target_price": target_price,
                "contract_type": contract_type,
            },
        )
