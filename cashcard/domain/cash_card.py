"""The cash card record as seen by services and routers."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class CashCard:
    id: Optional[int]
    amount: float
    owner: str

    def with_amount(self, amount: float, owner: str) -> "CashCard":
        """Copy keeping the id, replacing amount and owner."""
        return replace(self, amount=amount, owner=owner)
