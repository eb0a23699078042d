"""One-off migration script: JSON (users.json) -> SQL database (DATABASE_URL)."""
from __future__ import annotations

import argparse
from pathlib import Path
import sys

# Make the portal package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from portal.core.config import get_settings
from portal.repositories.json_storage import JsonUserRepository
from portal.repositories.sql_repository import SQLUserRepository


def migrate(data_file: Path, database_url: str | None = None) -> int:
    if not data_file.exists():
        raise SystemExit(f"File not found: {data_file}")
    records = JsonUserRepository(data_file).load_all()

    repo = SQLUserRepository(database_url)
    repo.initialize()
    if not repo.save_all(records):
        raise SystemExit("Failed to write registrations to the database")
    return len(records)


def main() -> None:
    ap = argparse.ArgumentParser(description="Copy the JSON user store into the SQL database")
    ap.add_argument("--data-file", help="JSON file to migrate (default: DATA_FILE)")
    ap.add_argument("--database-url", help="target SQLAlchemy URL (default: DATABASE_URL)")
    args = ap.parse_args()

    data_file = Path(args.data_file or get_settings().data_file)
    count = migrate(data_file, args.database_url)
    print(f"{count} registration(s) migrated to the database successfully.")


if __name__ == "__main__":
    main()
