"""
Shared fixtures for database-backed tests.
"""

import os
import tempfile

import pytest

from nominations import database

ELECTION_ID = 1


@pytest.fixture
def temp_db(monkeypatch):
    """Create a temporary database with an active election for testing."""
    temp_dir = tempfile.mkdtemp()
    db_path = os.path.join(temp_dir, "test_elecnoms.db")

    # Override DB_PATH using monkeypatch
    monkeypatch.setattr(database, "DB_PATH", db_path)

    database.init_database()
    database.set_active_election(ELECTION_ID)

    yield db_path

    # Cleanup
    if os.path.exists(db_path):
        os.remove(db_path)
    os.rmdir(temp_dir)
