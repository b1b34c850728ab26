"""Pytest hooks for the nominations service. Keep the app's import-time database out of the working tree."""

import os
import tempfile


def pytest_configure(config):
    """Point DATABASE_PATH at a scratch file before flask_app is imported."""
    if not os.environ.get("DATABASE_PATH"):
        scratch = tempfile.mkdtemp(prefix="elecnoms-")
        os.environ["DATABASE_PATH"] = os.path.join(scratch, "elecnoms.db")
