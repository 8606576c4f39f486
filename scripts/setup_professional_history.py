"""
Create the database tables and, optionally, a user's professional history.

Usage:
    uv run python scripts/setup_professional_history.py [user_id]
"""

import sys

from dotenv import load_dotenv

load_dotenv()

from job_vault.config import settings  # noqa: E402
from job_vault.db import create_client  # noqa: E402
from job_vault.services.professional_history import ensure_history  # noqa: E402


def main():
    print("Setting up professional history tables...")
    if not settings.database_url:
        print("Error: DATABASE_URL not set")
        sys.exit(1)

    client = create_client()
    try:
        client.create_all()
        print("OK: Tables created")

        if len(sys.argv) > 1:
            db = client.session()
            try:
                history = ensure_history(db, sys.argv[1])
                print(f"OK: Professional history {history.id} for user {history.user_id}")
            finally:
                db.close()
    finally:
        client.dispose()


if __name__ == "__main__":
    main()
