"""
Stable problem codes for nomination validation and the messages sent to clients.
"""

from enum import Enum
from typing import Dict, Iterable, List


class ProblemCode(str, Enum):
    NOT_A_STUDENT = "NOT_A_STUDENT"
    NOT_UNDERGRADUATE = "NOT_UNDERGRADUATE"
    NOT_GRADUATE = "NOT_GRADUATE"
    COHORT_NOT_ELIGIBLE = "COHORT_NOT_ELIGIBLE"
    NOT_GREEK = "NOT_GREEK"
    GREEK_AFFILIATED = "GREEK_AFFILIATED"
    INITIALS_TOO_SHORT = "INITIALS_TOO_SHORT"
    INITIALS_TOO_LONG = "INITIALS_TOO_LONG"
    INITIALS_MISMATCH = "INITIALS_MISMATCH"
    NAME_MISSING = "NAME_MISSING"
    NAME_FORMAT = "NAME_FORMAT"
    FIRST_NAME_MISMATCH = "FIRST_NAME_MISMATCH"
    LAST_NAME_MISMATCH = "LAST_NAME_MISMATCH"
    PARTIAL_RIN_TOO_LONG = "PARTIAL_RIN_TOO_LONG"
    PARTIAL_RIN_MISMATCH = "PARTIAL_RIN_MISMATCH"
    DUPLICATE_NOMINATION = "DUPLICATE_NOMINATION"
    INVALID_RIN = "INVALID_RIN"


# Messages are part of the response format; do not reword.
PROBLEM_MESSAGES: Dict[ProblemCode, str] = {
    ProblemCode.NOT_A_STUDENT: "Not a student.",
    ProblemCode.NOT_UNDERGRADUATE: "Not an undergraduate student.",
    ProblemCode.NOT_GRADUATE: "Not a graduate student.",
    ProblemCode.COHORT_NOT_ELIGIBLE: "Cohorts not eligible for this office.",
    ProblemCode.NOT_GREEK: "Not Greek-affiliated.",
    ProblemCode.GREEK_AFFILIATED: "Greek-affiliated.",
    ProblemCode.INITIALS_TOO_SHORT: "Initials shorter than two characters.",
    ProblemCode.INITIALS_TOO_LONG: "Initials longer than three characters.",
    ProblemCode.INITIALS_MISMATCH: "Initials do not match Institute records.",
    ProblemCode.NAME_MISSING: "No name provided.",
    ProblemCode.NAME_FORMAT: "Name not in recognized format.",
    ProblemCode.FIRST_NAME_MISMATCH: "First name does not match Institute records.",
    ProblemCode.LAST_NAME_MISMATCH: "Last name does not match Institute records.",
    ProblemCode.PARTIAL_RIN_TOO_LONG: "Partial RIN value contains more than three digits.",
    ProblemCode.PARTIAL_RIN_MISMATCH: "Mismatched RIN digits.",
    ProblemCode.DUPLICATE_NOMINATION: "Nominator has already nominated this candidate for this office.",
    ProblemCode.INVALID_RIN: "Invalid RIN.",
}


def message_for(code: ProblemCode) -> str:
    return PROBLEM_MESSAGES[code]


def messages_for(codes: Iterable[ProblemCode]) -> List[str]:
    return [PROBLEM_MESSAGES[code] for code in codes]
