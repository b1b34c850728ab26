"""
Tests for session-cookie verification.
"""

from urllib.parse import quote

from auth.session import ANONYMOUS, context_from_session, sign, split_cookie, verify_cookie
from nominations import database

SECRET = "keyboard cat"


def _cookie(session_id: str, secret: str = SECRET) -> str:
    return f"s:{session_id}.{sign(session_id, secret)}"


def test_known_signature():
    # value produced by Express cookie-signature for ("hello", "tobiiscool")
    assert sign("hello", "tobiiscool") == "DGDUkGlIkCzPz+C0B064FNgHdEjox7ch8tOBGslZ5QI"


def test_signed_cookie_verifies():
    assert verify_cookie(_cookie("abc123"), SECRET) == "abc123"


def test_url_encoded_cookie_verifies():
    assert verify_cookie(quote(_cookie("abc123"), safe=""), SECRET) == "abc123"


def test_wrong_secret_fails():
    assert verify_cookie(_cookie("abc123", secret="other"), SECRET) is None


def test_tampered_session_id_fails():
    value = _cookie("abc123").replace("abc123", "abc124")
    assert verify_cookie(value, SECRET) is None


def test_unsigned_or_malformed_cookies_fail():
    assert split_cookie("abc123") is None
    assert split_cookie("s:abc123") is None
    assert verify_cookie("s:.sig", SECRET) is None
    assert verify_cookie(_cookie("abc123"), "") is None


def test_context_from_session(temp_db):
    database.save_session("abc123", {"cas_user": "LyonJ4", "admin_rights": True, "is_authenticated": True})
    auth = context_from_session("abc123")
    assert auth.cas_user == "lyonj4"
    assert auth.admin is True
    assert auth.authenticated is True


def test_unknown_session_is_anonymous(temp_db):
    assert context_from_session("missing") == ANONYMOUS
