"""
Job Vault - API server entry point.

Usage:
    uv run python main.py [--host HOST] [--port PORT] [--reload]
"""

import argparse

from dotenv import load_dotenv

load_dotenv()

import uvicorn  # noqa: E402


def main():
    """Serve the Job Vault API with uvicorn."""
    parser = argparse.ArgumentParser(description="Run the Job Vault API server")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    args = parser.parse_args()

    print("Job Vault")
    print("=" * 40)
    print(f"Serving on http://{args.host}:{args.port}")
    uvicorn.run("job_vault.api.app:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
