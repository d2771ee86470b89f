"""
Pydantic models for cash card payloads.

Write bodies only carry ``amount``; ``id`` and ``owner`` sent by a client are
dropped during decoding because the store assigns the id and the owner always
comes from the authenticated caller.
"""

from pydantic import BaseModel, ConfigDict, Field

from cashcard.domain.cash_card import CashCard


class CashCardWrite(BaseModel):
    """Body of POST /cashcards and PUT /cashcards/{id}."""

    model_config = ConfigDict(extra="ignore")

    amount: float = Field(..., strict=True, allow_inf_nan=False, examples=[250.0])


class CashCardRead(BaseModel):
    """Record returned by GET endpoints."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., examples=[99])
    amount: float = Field(..., examples=[123.45])
    owner: str = Field(..., examples=["sarah1"])

    @classmethod
    def from_card(cls, card: CashCard) -> "CashCardRead":
        return cls.model_validate(card)
