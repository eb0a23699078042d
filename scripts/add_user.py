#!/usr/bin/env python3
"""
Register a citizen directly in the configured store, with the same validation
as POST /api/register.

Usage:
  python scripts/add_user.py --name "Asha" --email asha@example.com --mobile 9876543210 --location Jaipur
"""
from __future__ import annotations

import argparse
import sys

from portal.core.config import get_settings
from portal.repositories import build_repository
from portal.services.user_service import UserService, UserServiceError


def main() -> None:
    ap = argparse.ArgumentParser(description="Register a user in the portal store")
    ap.add_argument("--name", required=True)
    ap.add_argument("--email", required=True)
    ap.add_argument("--mobile", required=True, help="10 digits")
    ap.add_argument("--location", required=True)
    args = ap.parse_args()

    settings = get_settings()
    repo = build_repository(settings)
    repo.initialize()
    svc = UserService(repo, strict_reads=True)
    try:
        user = svc.register(
            {"name": args.name, "email": args.email, "mobile": args.mobile, "location": args.location}
        )
    except UserServiceError as exc:
        raise SystemExit(f"Rejected: {exc.message}")
    print("OK: user registered")
    print(f"  ID: {user['id']}")
    print(f"  Email: {user['email']}")
    print(f"  Registered at: {user['registeredAt']}")


if __name__ == "__main__":
    try:
        main()
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
