"""
Office eligibility profiles derived from an office's declared type.
"""

from __future__ import annotations

from typing import Tuple

from nominations.schema import OfficeEligibilityProfile

# Number of undergraduate class years open to "all"/"undergraduate" offices.
UNDERGRADUATE_YEARS = 4


def _class_years(current_year: int) -> Tuple[str, ...]:
    return tuple(str(current_year + i) for i in range(UNDERGRADUATE_YEARS))


def accepted_cohorts(category: str, current_year: int) -> Tuple[str, ...]:
    """
    Cohort tokens accepted by an office category.

    Unrecognized categories accept exactly themselves, so an office typed
    "2021" is open to the class of 2021 only.
    """
    if category == "all":
        return ("graduate",) + _class_years(current_year)
    if category == "greek":
        return ("greek",)
    if category == "independent":
        return ("independent",)
    if category == "graduate":
        return ("graduate",)
    if category == "undergraduate":
        return _class_years(current_year)
    return (category,)


def derive_profile(office_type: str, current_year: int, office_id: int = 0) -> OfficeEligibilityProfile:
    category = (office_type or "").lower()
    return OfficeEligibilityProfile(
        office_id=office_id,
        category=category,
        accepted_cohorts=accepted_cohorts(category, current_year),
        year=current_year,
    )
