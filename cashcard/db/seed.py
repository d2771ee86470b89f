"""Demo users and cards used by local runs and the API tests."""
from __future__ import annotations

import logging

from sqlalchemy import select

from cashcard.core.security import hash_password
from cashcard.domain.roles import CARD_OWNER, NON_OWNER

from .models import CashCard, User
from .session import get_session

logger = logging.getLogger(__name__)

DEMO_USERS = (
    ("sarah1", "abc123", CARD_OWNER),
    ("kumar2", "xyz789", CARD_OWNER),
    ("hank-owns-no-cards", "qrs456", NON_OWNER),
)

DEMO_CARDS = (
    (99, 123.45, "sarah1"),
    (100, 1.00, "sarah1"),
    (101, 150.00, "sarah1"),
    (102, 200.00, "kumar2"),
)


def seed_demo_data() -> None:
    """Insert the demo users and cards that are missing. Safe to run repeatedly."""
    with get_session() as session:
        for username, password, role in DEMO_USERS:
            if session.get(User, username) is None:
                session.add(User(username=username, password_hash=hash_password(password), role=role))
        existing = set(session.execute(select(CashCard.id)).scalars().all())
        for card_id, amount, owner in DEMO_CARDS:
            if card_id not in existing:
                session.add(CashCard(id=card_id, amount=amount, owner=owner))
        session.commit()
    logger.info("Demo data seeded (%d users, %d cards)", len(DEMO_USERS), len(DEMO_CARDS))
