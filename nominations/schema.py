"""
Data models for nomination eligibility checks.
Uses Pydantic for validation and type safety.
"""

from datetime import date
from typing import Optional, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nominations.problems import ProblemCode


class InstitutionalRecord(BaseModel):
    """
    Snapshot of a person's status as reported by the institutional records service.
    Field aliases match the CMS JSON payload.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    enrollment_type: str = Field("", alias="user_type")
    class_standing: str = Field("", alias="class_by_credit")
    graduation_date: Optional[date] = Field(None, alias="grad_date")
    entry_date: Optional[date] = None
    greek_affiliated: bool = False
    first_name: str = ""
    middle_name: str = ""
    last_name: str = ""
    institutional_id: str = Field("", alias="student_id")

    @field_validator("graduation_date", "entry_date", mode="before")
    @classmethod
    def _blank_date_is_unset(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return value

    @field_validator(
        "enrollment_type", "class_standing", "first_name", "middle_name",
        "last_name", "institutional_id", mode="before",
    )
    @classmethod
    def _null_text_is_empty(cls, value):
        return "" if value is None else str(value)


class NominationCandidateInfo(BaseModel):
    """Claims written on a nomination sheet, checked against the institutional record."""
    model_config = ConfigDict(frozen=True)

    institutional_numeric_id: int
    initials: str = ""
    partial_institutional_id: str = ""
    name: str = ""
    nomination_record_id: int
    candidate_identifier: str


class OfficeEligibilityProfile(BaseModel):
    """
    Which cohort tokens an office accepts.
    `year` is the calendar year the profile was derived for; credit cohorts
    are computed against it.
    """
    model_config = ConfigDict(frozen=True)

    office_id: int = 0
    category: str
    accepted_cohorts: Tuple[str, ...]
    year: int = Field(default_factory=lambda: date.today().year)

    def to_dict(self) -> dict:
        return {
            "id": self.office_id,
            "type": self.category,
            "cohorts": list(self.accepted_cohorts),
        }


class ValidationVerdict(BaseModel):
    """
    Result of one validation pass.
    `problems` holds the human-readable messages; `codes` the matching stable codes.
    """
    model_config = ConfigDict(frozen=True)

    valid: bool
    problems: List[str] = []
    codes: List[ProblemCode] = Field(default_factory=list, exclude=True)

    def to_dict(self) -> dict:
        payload = {"valid": self.valid}
        if self.problems:
            payload["problems"] = list(self.problems)
        return payload


class Nomination(BaseModel):
    """A nomination line as submitted on a candidate's sheet."""
    id: int = 0
    rin: str = ""  # partial RIN as written by the nominator
    rcs: str = ""
    nominator_rin: Optional[int] = None  # full RIN, recorded once the nominator is looked up
    valid: Optional[bool] = None  # None = pending review
    page: int = 0
    number: int = 0
    office_id: Optional[int] = None
    submitted: Optional[str] = None


class NominationCount(BaseModel):
    office_id: int
    rcs_id: str
    nominations: int
