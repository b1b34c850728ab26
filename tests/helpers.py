"""
Builders shared by the test modules.
"""

from datetime import date

from nominations.schema import InstitutionalRecord, NominationCandidateInfo, OfficeEligibilityProfile


def make_record(**overrides) -> InstitutionalRecord:
    base = {
        "enrollment_type": "Student",
        "class_standing": "",
        "graduation_date": None,
        "greek_affiliated": False,
        "first_name": "Sidney",
        "middle_name": "David",
        "last_name": "Kochman",
        "institutional_id": "661520999",
    }
    base.update(overrides)
    return InstitutionalRecord(**base)


def make_candidate(**overrides) -> NominationCandidateInfo:
    base = {
        "institutional_numeric_id": 661520999,
        "initials": "SK",
        "partial_institutional_id": "999",
        "name": "Sidney Kochman",
        "nomination_record_id": 5,
        "candidate_identifier": "lyonj4",
    }
    base.update(overrides)
    return NominationCandidateInfo(**base)


def make_profile(category: str, cohorts, year: int = 2018, office_id: int = 1) -> OfficeEligibilityProfile:
    return OfficeEligibilityProfile(
        office_id=office_id,
        category=category,
        accepted_cohorts=tuple(cohorts),
        year=year,
    )


def grad(iso: str) -> date:
    return date.fromisoformat(iso)
