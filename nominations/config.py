"""
Environment-driven configuration.
Values are read once at import; load_dotenv() must run before this module is imported.
"""

import os
from datetime import date


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'")


DATABASE_PATH = os.environ.get("DATABASE_PATH", os.path.join(os.getcwd(), "elecnoms.db"))

# Institutional records service (CMS)
CMS_URL = os.environ.get("CMS_URL", "https://cms.union.rpi.edu/api").rstrip("/")
CMS_TOKEN = os.environ.get("CMS_TOKEN", "")
CMS_TIMEOUT = _int_env("CMS_TIMEOUT", 30)

# Secret shared with the session issuer; used only to verify cookie signatures.
SESSION_SECRET = os.environ.get("SESSION_SECRET", "")

LISTEN_URL = os.environ.get("LISTEN_URL", "0.0.0.0:3001")


def current_year() -> int:
    """Calendar year used for cohort arithmetic in request handlers."""
    return date.today().year
