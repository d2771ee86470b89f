"""
Smoke tests for the SQL stores against a temporary SQLite database.
"""
from __future__ import annotations

from cashcard.domain.cash_card import CashCard
from cashcard.domain.paging import PageRequest, Sort
from cashcard.domain.roles import CARD_OWNER
from cashcard.repositories.sql_repository import SQLCashCardRepository, SQLUserRepository


def test_save_assigns_id_and_scoped_lookup(temp_db):
    repo = SQLCashCardRepository()
    saved = repo.save(CashCard(id=None, amount=42.5, owner="alice"))
    assert saved.id is not None
    assert repo.find_by_id_and_owner(saved.id, "alice") == CashCard(saved.id, 42.5, "alice")
    assert repo.find_by_id_and_owner(saved.id, "bob") is None
    assert repo.exists_by_id_and_owner(saved.id, "alice")
    assert not repo.exists_by_id_and_owner(saved.id, "bob")


def test_save_with_id_updates_in_place(temp_db):
    repo = SQLCashCardRepository()
    saved = repo.save(CashCard(id=None, amount=10.0, owner="alice"))
    repo.save(CashCard(id=saved.id, amount=19.99, owner="alice"))
    card = repo.find_by_id_and_owner(saved.id, "alice")
    assert card.id == saved.id
    assert card.amount == 19.99


def test_find_by_owner_sorts_pages_and_filters(seeded_db):
    repo = SQLCashCardRepository()

    ascending = repo.find_by_owner("sarah1", PageRequest(page=0, size=20, sort=Sort.by("amount")))
    assert [c.amount for c in ascending] == [1.00, 123.45, 150.00]
    assert {c.owner for c in ascending} == {"sarah1"}

    top = repo.find_by_owner("sarah1", PageRequest(page=0, size=1, sort=Sort.by("amount", direction="desc")))
    assert [c.amount for c in top] == [150.00]

    second_page = repo.find_by_owner("sarah1", PageRequest(page=1, size=2, sort=Sort.by("amount")))
    assert [c.amount for c in second_page] == [150.00]

    assert repo.find_by_owner("nobody", PageRequest()) == []


def test_find_by_owner_breaks_ties_by_id(temp_db):
    repo = SQLCashCardRepository()
    ids = [repo.save(CashCard(id=None, amount=5.0, owner="alice")).id for _ in range(3)]
    cards = repo.find_by_owner("alice", PageRequest(page=0, size=10, sort=Sort.by("amount", direction="desc")))
    assert [c.id for c in cards] == sorted(ids)


def test_delete_by_id(seeded_db):
    repo = SQLCashCardRepository()
    repo.delete_by_id(99)
    assert repo.find_by_id_and_owner(99, "sarah1") is None
    assert repo.find_by_id_and_owner(102, "kumar2") is not None


def test_user_upsert_and_lookup(temp_db):
    repo = SQLUserRepository()
    repo.upsert_user("alice", password_hash="hash", role=CARD_OWNER)
    user = repo.get_user("alice")
    assert user is not None
    assert user.role == CARD_OWNER
    repo.upsert_user("alice", password_hash="hash2", role="NON-OWNER")
    assert repo.get_user("alice").password_hash == "hash2"
    assert [u.username for u in repo.list_users()] == ["alice"]
    assert repo.get_user("missing") is None
