"""Owner-scoped CRUD over cash cards."""

from __future__ import annotations

import logging

from cashcard.domain.cash_card import CashCard
from cashcard.domain.paging import DEFAULT_SORT, PageRequest
from cashcard.repositories.base import CashCardStore

logger = logging.getLogger(__name__)


class CashCardError(Exception):
    """Base exception for cash card workflows."""


class CashCardNotFoundError(CashCardError):
    """No card with that id belongs to the caller (absent or owned by someone else)."""

    def __init__(self, card_id: int, caller: str):
        super().__init__(f"Cash card {card_id} not found for {caller}")
        self.card_id = card_id
        self.caller = caller


class CashCardService:
    """Create/read/update/delete/list cash cards for the authenticated caller.

    Every lookup goes through a store query filtered by ``(id, owner)``, so a
    card owned by someone else behaves exactly like a missing one.
    """

    def __init__(self, store: CashCardStore) -> None:
        self.store = store

    def get(self, card_id: int, caller: str) -> CashCard:
        card = self.store.find_by_id_and_owner(card_id, caller)
        if card is None:
            logger.debug("Cash card %s not visible to %s", card_id, caller)
            raise CashCardNotFoundError(card_id, caller)
        return card

    def create(self, amount: float, caller: str) -> CashCard:
        saved = self.store.save(CashCard(id=None, amount=amount, owner=caller))
        logger.info("Created cash card %s for %s", saved.id, caller)
        return saved

    def list(self, caller: str, page_request: PageRequest | None = None) -> list[CashCard]:
        request = page_request or PageRequest()
        if not request.sort.is_sorted:
            request = PageRequest(page=request.page, size=request.size, sort=DEFAULT_SORT)
        return self.store.find_by_owner(caller, request)

    def update(self, card_id: int, amount: float, caller: str) -> CashCard:
        current = self.get(card_id, caller)
        updated = self.store.save(current.with_amount(amount, owner=caller))
        logger.info("Updated cash card %s for %s", card_id, caller)
        return updated

    def delete(self, card_id: int, caller: str) -> None:
        if not self.store.exists_by_id_and_owner(card_id, caller):
            logger.debug("Delete of cash card %s refused for %s", card_id, caller)
            raise CashCardNotFoundError(card_id, caller)
        self.store.delete_by_id(card_id)
        logger.info("Deleted cash card %s for %s", card_id, caller)
