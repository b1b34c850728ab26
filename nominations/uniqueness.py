"""
Duplicate-nomination check. The only rule that reads stored state.
"""

from typing import Callable, Optional, Tuple

from nominations import database
from nominations.problems import ProblemCode
from nominations.schema import NominationCandidateInfo

# (candidate_rcs, office_id, nominator_rin, nomination_id) -> prior matching nominations
PriorCounter = Callable[[str, int, int, int], int]


def check_unique(
    candidate: Optional[NominationCandidateInfo],
    office_id: int,
    count_prior: Optional[PriorCounter] = None,
) -> Tuple[ProblemCode, ...]:
    """
    Flags a nomination when the same nominator already nominated the same
    candidate for the same office under a lower nomination id.

    Only later duplicates are flagged; the earliest nomination stays valid.
    Storage failures raise database.DataAccessError.
    """
    if candidate is None:
        return ()

    counter = count_prior or database.count_prior_nominations
    prior = counter(
        candidate.candidate_identifier,
        office_id,
        candidate.institutional_numeric_id,
        candidate.nomination_record_id,
    )
    if prior > 0:
        return (ProblemCode.DUPLICATE_NOMINATION,)
    return ()
