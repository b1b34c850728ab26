"""
Session-cookie authentication.

Verifies cookies signed by Express `cookie-signature` ("s:<session id>.<mac>"),
loads the session record from the database and exposes the identity on
`flask.g` for request handlers.
"""

import base64
import hashlib
import hmac
import logging
from dataclasses import dataclass
from typing import Optional, Tuple
from urllib.parse import unquote

from flask import g, request

from nominations import config, database

logger = logging.getLogger(__name__)

# Express sessions name their cookie this way by default.
SESSION_COOKIE = "connect.sid"
SIGNED_PREFIX = "s:"


@dataclass(frozen=True)
class AuthContext:
    cas_user: str = ""
    admin: bool = False
    authenticated: bool = False


ANONYMOUS = AuthContext()


def split_cookie(value: str) -> Optional[Tuple[str, str]]:
    """Return (session_id, signature) or None if the value is not a signed session cookie."""
    value = unquote(value or "")
    if not value.startswith(SIGNED_PREFIX):
        return None
    session_id, sep, signature = value[len(SIGNED_PREFIX):].rpartition(".")
    if not sep or not session_id or not signature:
        return None
    return session_id, signature


def sign(session_id: str, secret: str) -> str:
    mac = hmac.new(secret.encode("utf-8"), session_id.encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(mac).decode("ascii").rstrip("=")


def verify_cookie(value: str, secret: str) -> Optional[str]:
    """Return the session id if the cookie signature is valid, otherwise None."""
    parts = split_cookie(value)
    if parts is None:
        return None
    session_id, signature = parts
    if not secret:
        return None
    if not hmac.compare_digest(sign(session_id, secret), signature):
        return None
    return session_id


def context_from_session(session_id: str) -> AuthContext:
    data = database.get_session_data(session_id)
    if data is None:
        return ANONYMOUS
    return AuthContext(
        cas_user=str(data.get("cas_user") or "").lower(),
        admin=bool(data.get("admin_rights")),
        authenticated=bool(data.get("is_authenticated")),
    )


def authenticate() -> None:
    """before_request hook: attach an AuthContext to flask.g, anonymous on any failure."""
    g.auth = ANONYMOUS

    cookie = request.cookies.get(SESSION_COOKIE)
    if not cookie:
        return

    session_id = verify_cookie(cookie, config.SESSION_SECRET)
    if session_id is None:
        logger.warning("cookie invalid")
        return

    try:
        g.auth = context_from_session(session_id)
    except database.DataAccessError as e:
        logger.error(f"unable to attach session info: {e}")


def current_auth() -> AuthContext:
    return getattr(g, "auth", ANONYMOUS)
