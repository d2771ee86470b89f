"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import delete, select, update

from cashcard.db.models import CashCard as CashCardRow, User
from cashcard.db.session import get_session
from cashcard.domain.cash_card import CashCard
from cashcard.domain.paging import PageRequest

_SORT_COLUMNS = {
    "id": CashCardRow.id,
    "amount": CashCardRow.amount,
    "owner": CashCardRow.owner,
}


def _to_domain(row: CashCardRow) -> CashCard:
    return CashCard(id=row.id, amount=row.amount, owner=row.owner)


class SQLCashCardRepository:
    """Owner-scoped queries over the cash_card table."""

    def find_by_id_and_owner(self, card_id: int, owner: str) -> Optional[CashCard]:
        with get_session() as session:
            stmt = select(CashCardRow).where(CashCardRow.id == card_id, CashCardRow.owner == owner)
            row = session.execute(stmt).scalar_one_or_none()
            return _to_domain(row) if row else None

    def exists_by_id_and_owner(self, card_id: int, owner: str) -> bool:
        with get_session() as session:
            stmt = select(CashCardRow.id).where(CashCardRow.id == card_id, CashCardRow.owner == owner).limit(1)
            return session.execute(stmt).first() is not None

    def find_by_owner(self, owner: str, page_request: PageRequest) -> list[CashCard]:
        order_by = []
        for order in page_request.sort.orders:
            column = _SORT_COLUMNS[order.field]
            order_by.append(column.desc() if order.descending else column.asc())
        if not any(o.field == "id" for o in page_request.sort.orders):
            order_by.append(CashCardRow.id.asc())
        stmt = (
            select(CashCardRow)
            .where(CashCardRow.owner == owner)
            .order_by(*order_by)
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        with get_session() as session:
            return [_to_domain(row) for row in session.execute(stmt).scalars().all()]

    def save(self, card: CashCard) -> CashCard:
        with get_session() as session:
            if card.id is None:
                row = CashCardRow(amount=card.amount, owner=card.owner)
                session.add(row)
                session.commit()
                session.refresh(row)
                return _to_domain(row)
            stmt = (
                update(CashCardRow)
                .where(CashCardRow.id == card.id)
                .values(amount=card.amount, owner=card.owner)
            )
            session.execute(stmt)
            session.commit()
            return card

    def delete_by_id(self, card_id: int) -> None:
        with get_session() as session:
            session.execute(delete(CashCardRow).where(CashCardRow.id == card_id))
            session.commit()


class SQLUserRepository:
    """Credential lookups for the authenticator."""

    def get_user(self, username: str) -> Optional[User]:
        with get_session() as session:
            return session.get(User, username)

    def upsert_user(self, username: str, password_hash: str, role: str) -> User:
        with get_session() as session:
            user = session.get(User, username)
            if not user:
                user = User(username=username, password_hash=password_hash, role=role)
                session.add(user)
            else:
                user.password_hash = password_hash or user.password_hash
                user.role = role or user.role
            session.commit()
            session.refresh(user)
            return user

    def list_users(self) -> list[User]:
        with get_session() as session:
            return session.execute(select(User).order_by(User.username)).scalars().all()
