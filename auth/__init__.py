"""
Auth package exports.
"""

from auth.session import AuthContext, authenticate, current_auth

__all__ = ["AuthContext", "authenticate", "current_auth"]
