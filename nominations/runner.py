"""
Nomination check runner: ties together office lookup, records lookup,
the duplicate check and rule validation for one nomination.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from nominations import database
from nominations.cohorts import resolve_cohorts
from nominations.offices import derive_profile
from nominations.problems import ProblemCode
from nominations.records import RecordNotFoundError, cms_info_rin
from nominations.schema import (
    InstitutionalRecord,
    NominationCandidateInfo,
    OfficeEligibilityProfile,
    ValidationVerdict,
)
from nominations.uniqueness import PriorCounter, check_unique
from nominations.validate import build_verdict, validate

logger = logging.getLogger(__name__)

RecordLookup = Callable[[int], InstitutionalRecord]
OfficeTypeLookup = Callable[[int], Optional[str]]


class OfficeNotFoundError(LookupError):
    """No office with this id in the active election."""


def record_payload(record: InstitutionalRecord, current_year: int) -> dict:
    """Client-facing view of a record, including the derived cohorts."""
    cohorts = resolve_cohorts(record, current_year)
    return {
        "type": record.enrollment_type,
        "greek": record.greek_affiliated,
        "first_name": record.first_name,
        "middle_name": record.middle_name,
        "last_name": record.last_name,
        "credit_cohort": cohorts.credit_cohort or "",
        "entry_cohort": cohorts.entry_cohort or "",
        "is_graduate": cohorts.is_graduate,
    }


@dataclass(frozen=True)
class NominationCheck:
    validation: ValidationVerdict
    office: OfficeEligibilityProfile
    nominator: Optional[InstitutionalRecord]

    def to_dict(self) -> dict:
        return {
            "validation": self.validation.to_dict(),
            "office": self.office.to_dict(),
            "nominator": record_payload(self.nominator, self.office.year) if self.nominator else None,
        }


def check_nomination(
    candidate: NominationCandidateInfo,
    office_id: int,
    current_year: int,
    lookup_record: Optional[RecordLookup] = None,
    office_type: Optional[OfficeTypeLookup] = None,
    count_prior: Optional[PriorCounter] = None,
) -> NominationCheck:
    """
    Check one nomination end to end.

    An unknown RIN is a failed verdict ("Invalid RIN.") with no record attached.

    Raises:
        OfficeNotFoundError: office_id is not an office in the active election
        database.DataAccessError: storage failure
        records.RecordLookupError: records service failure other than not-found
    """
    lookup_record = lookup_record or cms_info_rin
    office_type = office_type or database.get_office_type

    declared_type = office_type(office_id)
    if declared_type is None:
        raise OfficeNotFoundError(f"office {office_id} not found")
    profile = derive_profile(declared_type, current_year, office_id=office_id)

    try:
        record = lookup_record(candidate.institutional_numeric_id)
    except RecordNotFoundError:
        logger.info(f"RIN not found for nomination {candidate.nomination_record_id}")
        return NominationCheck(
            validation=build_verdict([ProblemCode.INVALID_RIN]),
            office=profile,
            nominator=None,
        )

    prior = check_unique(candidate, office_id, count_prior)
    verdict = validate(candidate, record, profile, prior_problems=prior)
    logger.info(
        f"nomination {candidate.nomination_record_id} for office {office_id}: "
        f"valid={verdict.valid} problems={[c.value for c in verdict.codes]}"
    )
    return NominationCheck(validation=verdict, office=profile, nominator=record)
