"""
Cohort resolution: turns an institutional record into class-year tokens.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from nominations.schema import InstitutionalRecord

# Years until graduation, keyed by lowercased class standing.
COHORT_OFFSETS: Dict[str, int] = {
    "senior": 0,
    "junior": 1,
    "sophomore": 2,
    "freshman": 3,
}

GRADUATE_STANDING = "graduate"


@dataclass(frozen=True)
class CohortResolution:
    """
    credit_cohort: expected graduation year from current class standing
        (None unless the record is undergraduate).
    entry_cohort: year of the recorded graduation date (None if unset).
    """
    credit_cohort: Optional[str]
    entry_cohort: Optional[str]
    is_undergraduate: bool
    is_graduate: bool


def is_undergraduate(record: InstitutionalRecord) -> bool:
    return record.class_standing.lower() in COHORT_OFFSETS


def is_graduate(record: InstitutionalRecord) -> bool:
    return record.class_standing.lower() == GRADUATE_STANDING


def credit_cohort(record: InstitutionalRecord, current_year: int) -> Optional[str]:
    offset = COHORT_OFFSETS.get(record.class_standing.lower())
    if offset is None:
        return None
    return str(current_year + offset)


def entry_cohort(record: InstitutionalRecord) -> Optional[str]:
    if record.graduation_date is None:
        return None
    return f"{record.graduation_date.year:04d}"


def resolve_cohorts(record: InstitutionalRecord, current_year: int) -> CohortResolution:
    return CohortResolution(
        credit_cohort=credit_cohort(record, current_year),
        entry_cohort=entry_cohort(record),
        is_undergraduate=is_undergraduate(record),
        is_graduate=is_graduate(record),
    )
