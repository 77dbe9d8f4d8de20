#!/usr/bin/env python3
"""
Reset a user's password in the Home Services SQLite database.

This script never reads or reveals existing passwords.  It stores a new
PBKDF2-HMAC-SHA256 hash (format "salthex$hashhex") for the user with
the given phone number.

Usage:
    python reset_password.py --db ./home_services_api/home_services.db --phone +966500000000 --password "NewStrongPass!234"

If --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import getpass
import os
import sqlite3
import sys
from typing import Optional, Sequence

from home_services_api.app.core.security import hash_password


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Reset a Home Services user password (SQLite).")
    ap.add_argument("--db", required=True, help="Path to SQLite DB file (e.g., ./home_services_api/home_services.db)")
    ap.add_argument("--phone", required=True, help="Phone number of the user to update")
    ap.add_argument("--password", help="New password. If omitted, you'll be prompted securely.")
    args = ap.parse_args(argv)

    if not os.path.exists(args.db):
        print(f"[!] DB not found: {args.db}", file=sys.stderr)
        return 1

    new_password = args.password or getpass.getpass("Enter NEW password: ")
    if not new_password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        return 1

    conn = sqlite3.connect(args.db)
    try:
        cur = conn.cursor()
        row = cur.execute("SELECT id FROM users WHERE phone = ?", (args.phone,)).fetchone()
        if not row:
            print(f"[!] No user found with phone: {args.phone}", file=sys.stderr)
            return 2
        cur.execute(
            "UPDATE users SET password_hash = ?, updated_at = CURRENT_TIMESTAMP WHERE phone = ?",
            (hash_password(new_password), args.phone),
        )
        conn.commit()
        print(f"[+] Password updated for user: {args.phone}")
        return 0
    finally:
        conn.close()


if __name__ == "__main__":
    sys.exit(main())
