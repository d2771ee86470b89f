#!/usr/bin/env python3
"""
Create, update or list API users.

Usage:
  python scripts/add_user.py --username sarah1 [--password abc123] [--role CARD-OWNER]
  python scripts/add_user.py --list
"""
from __future__ import annotations

import argparse
import getpass
import sys

from cashcard.db.create_tables import create_all
from cashcard.domain.roles import CARD_OWNER, NON_OWNER
from cashcard.repositories.sql_repository import SQLUserRepository
from cashcard.services.auth_service import AuthService, RegistrationError


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Create, update or list cash card API users")
    ap.add_argument("--username", help="Login used in Basic auth")
    ap.add_argument("--password", help="Password (prompted when omitted)")
    ap.add_argument("--role", default=CARD_OWNER, choices=[CARD_OWNER, NON_OWNER], help="Role granted to the user")
    ap.add_argument("--list", action="store_true", help="Print existing users and their roles")
    args = ap.parse_args(argv)

    create_all()
    repo = SQLUserRepository()
    if args.list:
        for user in repo.list_users():
            print(f"{user.username}\t{user.role}")
        return
    if not args.username:
        ap.error("--username is required unless --list is given")

    password = args.password or getpass.getpass("Password: ")
    svc = AuthService(repo)
    try:
        caller = svc.register_user(args.username, password, args.role)
    except RegistrationError as exc:
        raise SystemExit(f"Invalid user: {exc.message}")
    print("OK: user saved")
    print(f"  Username: {caller.username}")
    print(f"  Role: {caller.role}")


if __name__ == "__main__":
    try:
        main()
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
