"""Store interface consumed by the cash card service."""
from __future__ import annotations

from typing import Optional, Protocol

from cashcard.domain.cash_card import CashCard
from cashcard.domain.paging import PageRequest


class CashCardStore(Protocol):
    def find_by_id_and_owner(self, card_id: int, owner: str) -> Optional[CashCard]: ...

    def exists_by_id_and_owner(self, card_id: int, owner: str) -> bool: ...

    def find_by_owner(self, owner: str, page_request: PageRequest) -> list[CashCard]: ...

    def save(self, card: CashCard) -> CashCard: ...

    def delete_by_id(self, card_id: int) -> None: ...
