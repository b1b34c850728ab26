"""
Local SQLite database for offices, nominations and sessions.
One connection per call; every sqlite3 error surfaces as DataAccessError.
"""

import sqlite3
import json
import logging
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Optional, List, Dict, Iterator

from nominations.config import DATABASE_PATH
from nominations.schema import Nomination, NominationCount

logger = logging.getLogger(__name__)

DB_PATH = DATABASE_PATH

ACTIVE_ELECTION_QUERY = "(SELECT CAST(value AS INTEGER) FROM configurations WHERE \"key\" = 'active_election_id')"


class DataAccessError(RuntimeError):
    """Storage failure (as opposed to a property of the nomination)."""


@contextmanager
def _connect() -> Iterator[sqlite3.Connection]:
    try:
        conn = sqlite3.connect(str(DB_PATH))
    except sqlite3.Error as e:
        logger.error(f"unable to open database: {e}")
        raise DataAccessError(f"unable to open database: {e}") from e
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    except sqlite3.Error as e:
        conn.rollback()
        raise DataAccessError(f"unable to query database: {e}") from e
    finally:
        conn.close()


def init_database():
    """Initialize the SQLite database with the tables the service reads and writes."""
    Path(DB_PATH).parent.mkdir(parents=True, exist_ok=True)

    with _connect() as conn:
        cursor = conn.cursor()
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS configurations (
                "key" TEXT PRIMARY KEY,
                value TEXT
            )
        """)
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS offices (
                office_id INTEGER NOT NULL,
                election_id INTEGER NOT NULL,
                name TEXT,
                type TEXT NOT NULL,
                PRIMARY KEY (office_id, election_id)
            )
        """)
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS nominations (
                nomination_id INTEGER PRIMARY KEY AUTOINCREMENT,
                election_id INTEGER,
                rcs_id TEXT NOT NULL,
                office_id INTEGER NOT NULL,
                nomination_rin INTEGER,
                nomination_partial_rin TEXT,
                nomination_rcs_id TEXT,
                valid BOOLEAN,
                page INTEGER,
                number INTEGER,
                date TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        cursor.execute("""
            CREATE INDEX IF NOT EXISTS idx_nominations_candidate
            ON nominations(rcs_id, office_id, election_id)
        """)
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS assistants (
                rcs_id TEXT NOT NULL,
                candidate_rcs_id TEXT NOT NULL,
                election_id INTEGER
            )
        """)
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS sessions (
                session_id TEXT PRIMARY KEY,
                data TEXT NOT NULL
            )
        """)


def set_active_election(election_id: int) -> None:
    with _connect() as conn:
        conn.execute(
            "INSERT OR REPLACE INTO configurations (\"key\", value) VALUES ('active_election_id', ?)",
            (str(election_id),),
        )


def active_election_id() -> Optional[int]:
    with _connect() as conn:
        row = conn.execute(
            "SELECT value FROM configurations WHERE \"key\" = 'active_election_id'"
        ).fetchone()
    if row is None or row["value"] is None:
        return None
    return int(row["value"])


def save_office(office_id: int, office_type: str, name: str = "") -> None:
    """Create or replace an office in the active election."""
    with _connect() as conn:
        conn.execute(
            "INSERT OR REPLACE INTO offices (office_id, election_id, name, type) "
            f"VALUES (?, {ACTIVE_ELECTION_QUERY}, ?, ?)",
            (office_id, name, office_type),
        )


def get_office_type(office_id: int) -> Optional[str]:
    """Type string of an office in the active election, or None if there is no such office."""
    with _connect() as conn:
        row = conn.execute(
            f"SELECT type FROM offices WHERE office_id = ? AND election_id = {ACTIVE_ELECTION_QUERY}",
            (office_id,),
        ).fetchone()
    return row["type"] if row else None


def count_prior_nominations(candidate_rcs: str, office_id: int, nominator_rin: int, nomination_id: int) -> int:
    """
    Count nominations in the active election by the same nominator for the same
    candidate and office that were recorded before `nomination_id`.
    """
    with _connect() as conn:
        row = conn.execute(
            "SELECT count(*) AS prior FROM nominations "
            "WHERE rcs_id = ? AND office_id = ? AND nomination_rin = ? AND nomination_id < ? "
            f"AND election_id = {ACTIVE_ELECTION_QUERY}",
            (candidate_rcs.lower(), office_id, nominator_rin, nomination_id),
        ).fetchone()
    return int(row["prior"])


def _row_to_nomination(row: sqlite3.Row) -> Nomination:
    valid = row["valid"]
    return Nomination(
        id=row["nomination_id"],
        rin=row["nomination_partial_rin"] or "",
        rcs=row["nomination_rcs_id"] or "",
        nominator_rin=row["nomination_rin"],
        valid=None if valid is None else bool(valid),
        page=row["page"] or 0,
        number=row["number"] or 0,
        office_id=row["office_id"],
        submitted=row["date"],
    )


def list_nominations(rcs: str, office_id: Optional[int] = None) -> List[Nomination]:
    """Nominations collected by a candidate in the active election, ordered by line number."""
    query = (
        "SELECT nomination_id, nomination_partial_rin, nomination_rcs_id, nomination_rin, "
        "valid, page, office_id, date, number FROM nominations "
        f"WHERE rcs_id = ? AND election_id = {ACTIVE_ELECTION_QUERY}"
    )
    params: list = [rcs.lower()]
    if office_id is not None:
        query += " AND office_id = ?"
        params.append(office_id)
    query += " ORDER BY page, number"

    with _connect() as conn:
        rows = conn.execute(query, params).fetchall()
    return [_row_to_nomination(row) for row in rows]


def get_nomination(nomination_id: int) -> Optional[Nomination]:
    with _connect() as conn:
        row = conn.execute(
            "SELECT nomination_id, nomination_partial_rin, nomination_rcs_id, nomination_rin, "
            "valid, page, office_id, date, number FROM nominations WHERE nomination_id = ?",
            (nomination_id,),
        ).fetchone()
    return _row_to_nomination(row) if row else None


def add_nominations(rcs: str, office_id: int, nominations: List[Nomination]) -> int:
    """
    Insert one submitted sheet of nominations in a single transaction.

    Returns:
        The page number assigned to the sheet (previous highest page + 1)
    """
    rcs = rcs.lower()
    with _connect() as conn:
        row = conn.execute(
            "SELECT COALESCE(MAX(page), 0) AS prev FROM nominations "
            f"WHERE rcs_id = ? AND office_id = ? AND election_id = {ACTIVE_ELECTION_QUERY}",
            (rcs, office_id),
        ).fetchone()
        page = int(row["prev"]) + 1

        now = datetime.now().isoformat(sep=" ", timespec="seconds")
        for nomination in nominations:
            conn.execute(
                "INSERT INTO nominations (rcs_id, office_id, nomination_partial_rin, nomination_rcs_id, "
                f"page, number, date, election_id) VALUES (?, ?, ?, ?, ?, ?, ?, {ACTIVE_ELECTION_QUERY})",
                (rcs, office_id, nomination.rin, nomination.rcs.lower(), page, nomination.number, now),
            )
    return page


def update_nomination(nomination: Nomination) -> bool:
    """
    Overwrite an existing nomination (mainly to mark it valid, invalid or pending).

    Returns:
        True if a row was updated, False if no nomination has that id
    """
    with _connect() as conn:
        cursor = conn.execute(
            "UPDATE nominations SET nomination_partial_rin = ?, nomination_rcs_id = ?, nomination_rin = ?, "
            "page = ?, valid = ?, number = ? WHERE nomination_id = ?",
            (
                nomination.rin,
                nomination.rcs.lower(),
                nomination.nominator_rin,
                nomination.page,
                None if nomination.valid is None else int(nomination.valid),
                nomination.number,
                nomination.id,
            ),
        )
        return cursor.rowcount > 0


def nomination_counts(rcs: Optional[str] = None) -> List[NominationCount]:
    """Valid nominations per candidate and office, optionally for one candidate only."""
    query = "SELECT rcs_id, office_id, COUNT(*) AS nominations FROM nominations WHERE valid = 1"
    params: list = []
    if rcs:
        query += " AND rcs_id = ?"
        params.append(rcs.lower())
    query += " GROUP BY rcs_id, office_id ORDER BY rcs_id, office_id"

    with _connect() as conn:
        rows = conn.execute(query, params).fetchall()
    return [
        NominationCount(office_id=row["office_id"], rcs_id=row["rcs_id"], nominations=row["nominations"])
        for row in rows
    ]


def add_assistant(rcs: str, candidate_rcs: str) -> None:
    with _connect() as conn:
        conn.execute(
            f"INSERT INTO assistants (rcs_id, candidate_rcs_id, election_id) VALUES (?, ?, {ACTIVE_ELECTION_QUERY})",
            (rcs.lower(), candidate_rcs.lower()),
        )


def candidate_assistants(candidate_rcs: str) -> List[str]:
    """RCS ids allowed to manage a candidate's nominations in the active election."""
    with _connect() as conn:
        rows = conn.execute(
            f"SELECT rcs_id FROM assistants WHERE candidate_rcs_id = ? AND election_id = {ACTIVE_ELECTION_QUERY}",
            (candidate_rcs.lower(),),
        ).fetchall()
    return [row["rcs_id"].lower() for row in rows]


def save_session(session_id: str, data: Dict) -> None:
    with _connect() as conn:
        conn.execute(
            "INSERT OR REPLACE INTO sessions (session_id, data) VALUES (?, ?)",
            (session_id, json.dumps(data)),
        )


def get_session_data(session_id: str) -> Optional[Dict]:
    with _connect() as conn:
        row = conn.execute("SELECT data FROM sessions WHERE session_id = ?", (session_id,)).fetchone()
    if row is None:
        return None
    try:
        return json.loads(row["data"])
    except json.JSONDecodeError as e:
        raise DataAccessError(f"session {session_id} has malformed data: {e}") from e
