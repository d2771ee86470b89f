"""Utility script to create the database schema (and optionally the demo data)."""
from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata


def create_all() -> None:
    engine = get_engine()
    Base.metadata.create_all(bind=engine)


def main() -> None:
    ap = argparse.ArgumentParser(description="Create cash card tables")
    ap.add_argument("--seed", action="store_true", help="Also insert the demo users and cards")
    args = ap.parse_args()
    try:
        create_all()
        if args.seed:
            from .seed import seed_demo_data

            seed_demo_data()
        print("Database tables created successfully.")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc


if __name__ == "__main__":
    main()
