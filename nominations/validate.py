"""
Validation module: runs the eligibility rules and builds a verdict.
"""

from typing import Optional, Sequence

from nominations.problems import ProblemCode, messages_for
from nominations.rules import DEFAULT_RULES, Rule, run_rule
from nominations.schema import (
    InstitutionalRecord,
    NominationCandidateInfo,
    OfficeEligibilityProfile,
    ValidationVerdict,
)


def build_verdict(codes: Sequence[ProblemCode]) -> ValidationVerdict:
    codes = list(codes)
    return ValidationVerdict(valid=not codes, problems=messages_for(codes), codes=codes)


def validate(
    candidate: Optional[NominationCandidateInfo],
    record: Optional[InstitutionalRecord],
    profile: Optional[OfficeEligibilityProfile],
    prior_problems: Sequence[ProblemCode] = (),
    rules: Sequence[Rule] = DEFAULT_RULES,
) -> ValidationVerdict:
    """
    Validates a nomination against every rule in `rules`.

    All rules run; a failing rule never stops later ones. Problems found
    outside the pure rules (e.g. the uniqueness check) are passed in as
    `prior_problems` and come first in the result.

    Returns:
        ValidationVerdict with valid == (no problems)
    """
    codes = tuple(prior_problems)
    for rule in rules:
        codes = codes + run_rule(rule, candidate, record, profile)
    return build_verdict(codes)
