"""
Eligibility rules for nominations.

Each rule is a pure check over the nomination claims, the nominator's
institutional record and the office profile, returning zero or more problem
codes. Any argument may be None; a rule that lacks what it needs reports
nothing.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from nominations.cohorts import resolve_cohorts
from nominations.problems import ProblemCode
from nominations.schema import InstitutionalRecord, NominationCandidateInfo, OfficeEligibilityProfile

Candidate = Optional[NominationCandidateInfo]
Record = Optional[InstitutionalRecord]
Profile = Optional[OfficeEligibilityProfile]
Problems = Tuple[ProblemCode, ...]

STUDENT_ENROLLMENT = "Student"


class Rule(str, Enum):
    STUDENT = "student"
    COHORT = "cohort"
    GREEK_INDEPENDENT = "greek_independent"
    INITIALS = "initials"
    NAME = "name"
    PARTIAL_RIN = "partial_rin"


def check_student(candidate: Candidate, record: Record, profile: Profile) -> Problems:
    if record is None:
        return ()
    if record.enrollment_type != STUDENT_ENROLLMENT:
        return (ProblemCode.NOT_A_STUDENT,)
    return ()


def check_cohort(candidate: Candidate, record: Record, profile: Profile) -> Problems:
    """
    Undergraduate/graduate offices first check standing; otherwise the record
    must match one accepted cohort by graduation year, credit year, or
    Greek/independent status.
    """
    if record is None or profile is None or record.graduation_date is None:
        return ()

    cohorts = resolve_cohorts(record, profile.year)

    if profile.category == "undergraduate" and not cohorts.is_undergraduate:
        return (ProblemCode.NOT_UNDERGRADUATE,)
    if profile.category == "graduate" and not cohorts.is_graduate:
        return (ProblemCode.NOT_GRADUATE,)

    accepted = profile.accepted_cohorts
    if cohorts.entry_cohort in accepted:
        return ()
    if cohorts.credit_cohort is not None and cohorts.credit_cohort in accepted:
        return ()
    if record.greek_affiliated and "greek" in accepted:
        return ()
    if not record.greek_affiliated and "independent" in accepted:
        return ()
    return (ProblemCode.COHORT_NOT_ELIGIBLE,)


def check_greek_independent(candidate: Candidate, record: Record, profile: Profile) -> Problems:
    if record is None or profile is None:
        return ()
    problems = []
    if profile.category == "greek" and not record.greek_affiliated:
        problems.append(ProblemCode.NOT_GREEK)
    if profile.category == "independent" and record.greek_affiliated:
        problems.append(ProblemCode.GREEK_AFFILIATED)
    return tuple(problems)


def _first_letter(value: str) -> str:
    return value[:1].lower()


def check_initials(candidate: Candidate, record: Record, profile: Profile) -> Problems:
    if candidate is None or record is None:
        return ()

    initials = candidate.initials.lower()
    if len(initials) < 2:
        return (ProblemCode.INITIALS_TOO_SHORT,)
    if len(initials) > 3:
        return (ProblemCode.INITIALS_TOO_LONG,)

    if len(initials) == 2:
        parts = (record.first_name, record.last_name)
    else:
        parts = (record.first_name, record.middle_name, record.last_name)
    expected = "".join(_first_letter(p) for p in parts)

    if initials != expected:
        return (ProblemCode.INITIALS_MISMATCH,)
    return ()


def check_name(candidate: Candidate, record: Record, profile: Profile) -> Problems:
    """Expects "Firstname Lastname"; not part of the default rule set."""
    if candidate is None or record is None:
        return ()
    if not candidate.name:
        return (ProblemCode.NAME_MISSING,)

    tokens = candidate.name.split()
    if len(tokens) != 2:
        return (ProblemCode.NAME_FORMAT,)

    first, last = (t.lower() for t in tokens)
    problems = []
    if first != record.first_name.lower():
        problems.append(ProblemCode.FIRST_NAME_MISMATCH)
    if last != record.last_name.lower():
        problems.append(ProblemCode.LAST_NAME_MISMATCH)
    return tuple(problems)


def check_partial_rin(candidate: Candidate, record: Record, profile: Profile) -> Problems:
    """The partial RIN on a sheet is the last three digits of the nominator's RIN."""
    if candidate is None or record is None:
        return ()
    partial = candidate.partial_institutional_id.strip()
    problems = []
    if len(partial) > 3:
        problems.append(ProblemCode.PARTIAL_RIN_TOO_LONG)
    if partial != record.institutional_id.strip()[-3:]:
        problems.append(ProblemCode.PARTIAL_RIN_MISMATCH)
    return tuple(problems)


RuleCheck = Callable[[Candidate, Record, Profile], Problems]

RULE_CHECKS: Dict[Rule, RuleCheck] = {
    Rule.STUDENT: check_student,
    Rule.COHORT: check_cohort,
    Rule.GREEK_INDEPENDENT: check_greek_independent,
    Rule.INITIALS: check_initials,
    Rule.NAME: check_name,
    Rule.PARTIAL_RIN: check_partial_rin,
}

_unbound = set(Rule) - set(RULE_CHECKS)
if _unbound:
    raise AssertionError(f"Rules without a check: {sorted(r.value for r in _unbound)}")

DEFAULT_RULES: Tuple[Rule, ...] = (
    Rule.STUDENT,
    Rule.COHORT,
    Rule.GREEK_INDEPENDENT,
    Rule.INITIALS,
)


def run_rule(rule: Rule, candidate: Candidate, record: Record, profile: Profile) -> Problems:
    return RULE_CHECKS[rule](candidate, record, profile)
