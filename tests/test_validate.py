"""
Validation tests: full verdicts across the default rule set.
"""

import itertools
from collections import Counter

from helpers import grad, make_candidate, make_profile, make_record
from nominations.problems import ProblemCode
from nominations.rules import DEFAULT_RULES, Rule
from nominations.validate import validate

ALL_COHORTS = ("graduate", "2018", "2019", "2020", "2021")


def test_student_in_open_office_is_valid():
    verdict = validate(None, make_record(graduation_date=grad("2020-01-01")), make_profile("all", ALL_COHORTS), [])
    assert verdict.valid is True
    assert verdict.problems == []
    assert verdict.to_dict() == {"valid": True}


def test_staff_is_not_a_student():
    verdict = validate(None, make_record(enrollment_type="Staff"), make_profile("all", ()), [])
    assert verdict.valid is False
    assert verdict.problems == ["Not a student."]


def test_year_office_matched_by_credit_standing():
    record = make_record(class_standing="Junior", graduation_date=grad("2019-01-01"))
    verdict = validate(None, record, make_profile("junior", ["2019"]), [])
    assert verdict.valid is True


def test_greek_office_requires_affiliation():
    record = make_record(greek_affiliated=False, graduation_date=grad("2020-01-01"))
    verdict = validate(None, record, make_profile("greek", ALL_COHORTS), [])
    assert verdict.valid is False
    assert verdict.problems == ["Not Greek-affiliated."]

    greek = make_record(greek_affiliated=True, graduation_date=grad("2020-01-01"))
    assert validate(None, greek, make_profile("greek", ALL_COHORTS), []).valid is True


def test_independent_office_rejects_greek():
    record = make_record(greek_affiliated=True, graduation_date=grad("2020-01-01"))
    verdict = validate(None, record, make_profile("independent", ALL_COHORTS), [])
    assert verdict.problems == ["Greek-affiliated."]

    independent = make_record(greek_affiliated=False, graduation_date=grad("2020-01-01"))
    assert validate(None, independent, make_profile("independent", ALL_COHORTS), []).valid is True


def test_graduate_office_rejects_non_graduate():
    record = make_record(greek_affiliated=True, graduation_date=grad("2018-01-01"))
    verdict = validate(None, record, make_profile("graduate", ["graduate"]), [])
    assert verdict.problems == ["Not a graduate student."]


def test_all_rules_run_without_stopping_early():
    record = make_record(enrollment_type="Staff", greek_affiliated=True, graduation_date=grad("2030-01-01"))
    verdict = validate(make_candidate(initials="Q"), record, make_profile("independent", ["independent"]), [])
    assert verdict.codes == [
        ProblemCode.NOT_A_STUDENT,
        ProblemCode.COHORT_NOT_ELIGIBLE,
        ProblemCode.GREEK_AFFILIATED,
        ProblemCode.INITIALS_TOO_SHORT,
    ]


def test_prior_problems_come_first_and_are_not_deduplicated():
    record = make_record(enrollment_type="Staff")
    verdict = validate(None, record, None, [ProblemCode.DUPLICATE_NOMINATION, ProblemCode.NOT_A_STUDENT])
    assert verdict.problems == [
        "Nominator has already nominated this candidate for this office.",
        "Not a student.",
        "Not a student.",
    ]


def test_prior_problems_alone_make_verdict_invalid():
    verdict = validate(None, make_record(), None, [ProblemCode.DUPLICATE_NOMINATION])
    assert verdict.valid is False


def test_extra_rules_can_be_selected():
    candidate = make_candidate(name="Joey Kochman", partial_institutional_id="123")
    verdict = validate(candidate, make_record(), None, rules=DEFAULT_RULES + (Rule.NAME, Rule.PARTIAL_RIN))
    assert verdict.codes == [ProblemCode.FIRST_NAME_MISMATCH, ProblemCode.PARTIAL_RIN_MISMATCH]


def test_rule_order_changes_sequence_not_content():
    record = make_record(enrollment_type="Staff", greek_affiliated=False, graduation_date=grad("2030-01-01"))
    profile = make_profile("greek", ["greek"])
    candidate = make_candidate(initials="ABCD")

    expected = Counter(validate(candidate, record, profile).codes)
    for order in itertools.permutations(DEFAULT_RULES):
        assert Counter(validate(candidate, record, profile, rules=order).codes) == expected


def test_valid_matches_empty_problems():
    cases = [
        (None, make_record(), make_profile("all", ALL_COHORTS)),
        (make_candidate(initials="EZ"), make_record(), None),
        (None, None, None),
        (make_candidate(), make_record(enrollment_type="Staff"), make_profile("greek", ["greek"])),
    ]
    for candidate, record, profile in cases:
        verdict = validate(candidate, record, profile)
        assert verdict.valid == (len(verdict.problems) == 0)
        assert len(verdict.codes) == len(verdict.problems)
