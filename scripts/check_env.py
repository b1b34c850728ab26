#!/usr/bin/env python3
"""
Check that required environment variables are set.
Loads .env from project root. Use before starting the app or in CI.
Usage: python scripts/check_env.py
"""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Project root (parent of scripts/)
PROJECT_ROOT = Path(__file__).resolve().parents[1]
ENV_PATH = PROJECT_ROOT / ".env"

# Required to verify sessions and look up nominators
REQUIRED = [
    "SESSION_SECRET",
    "CMS_TOKEN",
]

# Optional; defaults live in nominations/config.py
OPTIONAL = [
    "DATABASE_PATH",
    "CMS_URL",
    "CMS_TIMEOUT",
    "LISTEN_URL",
]


def _is_set(key: str) -> bool:
    val = os.environ.get(key)
    return val is not None and str(val).strip() != ""


def main() -> int:
    if ENV_PATH.exists():
        load_dotenv(ENV_PATH)
    else:
        load_dotenv()

    missing = [key for key in REQUIRED if not _is_set(key)]

    print("Environment check (from .env or shell)")
    print("-" * 50)
    for key in REQUIRED:
        status = "OK" if _is_set(key) else "MISSING"
        print(f"  {key}: {status}")
    for key in OPTIONAL:
        status = "set" if _is_set(key) else "not set"
        print(f"  {key} (optional): {status}")

    timeout = os.environ.get("CMS_TIMEOUT", "").strip()
    if timeout and not timeout.isdigit():
        missing.append("CMS_TIMEOUT (must be a whole number of seconds)")
    print("-" * 50)

    if missing:
        print("Missing required:", ", ".join(missing))
        return 1
    print("All required keys are set.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
