"""
Seed the sample "Full Stack Developer Resume" for a user.

Usage:
    uv run python scripts/seed_resume.py <user_id>

Writes directly through the resume service against DATABASE_URL, creating
tables first if needed.
"""

import sys

from dotenv import load_dotenv

load_dotenv()

from job_vault.auth import AuthUser  # noqa: E402
from job_vault.config import settings  # noqa: E402
from job_vault.db import create_client  # noqa: E402
from job_vault.errors import ServiceError  # noqa: E402
from job_vault.services import ResumeService  # noqa: E402


def main():
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(1)
    user_id = sys.argv[1]

    if not settings.database_url:
        print("Error: DATABASE_URL not set")
        sys.exit(1)

    client = create_client()
    client.create_all()
    db = client.session()
    try:
        resume = ResumeService(db, AuthUser(id=user_id)).seed_sample()
        print(f"OK: Created resume {resume.id} ({resume.name}) with {len(resume.sections)} sections")
    except ServiceError as e:
        print(f"FAIL: {e.dev_message}")
        sys.exit(1)
    finally:
        db.close()
        client.dispose()


if __name__ == "__main__":
    main()
