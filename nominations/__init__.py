"""
Nomination eligibility package exports.
"""

from nominations.runner import NominationCheck, OfficeNotFoundError, check_nomination
from nominations.validate import validate

__all__ = ["NominationCheck", "OfficeNotFoundError", "check_nomination", "validate"]
