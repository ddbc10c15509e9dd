import datetime as dt
from typing import Any, Optional

from pydantic import field_validator

from me_tool.models.enums import AgeGroup, Sex
from me_tool.schemas.base import (
    FormSchema,
    ResponseSchema,
    ensure_not_future,
    parse_calendar_date,
)
from me_tool.schemas.project import ProjectOption

_ACTIVITY_LABELS = {
    "projectId": "Project",
    "disaggregatedSex": "Sex",
    "ageGroup": "Age group",
}


def _positive_project_id(v: int) -> int:
    if v <= 0:
        raise ValueError("Project ID must be a positive integer")
    return v


# ========== WORKSHOP ==========
class WorkshopCreate(FormSchema):
    field_labels = {
        **_ACTIVITY_LABELS,
        "numParticipants": "Number of participants",
        "preEvaluation": "Pre-evaluation",
        "postEvaluation": "Post-evaluation",
        "challenges": "Challenges",
        "strengths": "Strengths",
        "outcomes": "Outcomes",
        "recommendations": "Recommendations",
    }

    project_id: int
    purpose: str
    date: dt.date
    location: str
    num_participants: int
    disaggregated_sex: Sex
    disability: bool = False
    age_group: AgeGroup
    pre_evaluation: str
    post_evaluation: str
    local_partner: str
    local_partner_responsibility: str
    success_of_partnership: str
    challenges: str
    strengths: str
    outcomes: str
    recommendations: str

    @field_validator("project_id")
    @classmethod
    def validate_project(cls, v: int) -> int:
        return _positive_project_id(v)

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v: Any) -> dt.date:
        return ensure_not_future(
            parse_calendar_date(v),
            "Workshop date cannot be in the future",
        )

    @field_validator("num_participants")
    @classmethod
    def validate_participants(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Number of participants must be non-negative")
        return v


class WorkshopResponse(ResponseSchema):
    id: int
    project_id: int
    purpose: str
    date: dt.date
    location: str
    num_participants: int
    disaggregated_sex: Sex
    disability: bool
    age_group: AgeGroup
    pre_evaluation: str
    post_evaluation: str
    local_partner: str
    local_partner_responsibility: str
    success_of_partnership: str
    challenges: str
    strengths: str
    outcomes: str
    recommendations: str
    project: Optional[ProjectOption] = None


# ========== LIVELIHOOD ==========
class LivelihoodCreate(FormSchema):
    field_labels = {
        **_ACTIVITY_LABELS,
        "grantAmountReceived": "Grant amount",
        "progress1": "Progress 1",
        "progress2": "Progress 2",
    }

    project_id: int
    participant_name: str
    location: str
    disaggregated_sex: Sex
    disability: bool = False
    age_group: AgeGroup
    grant_amount_received: float
    grant_purpose: str
    progress1: str
    progress2: str
    outcome: str
    subsequent_grant_amount: float

    @field_validator("project_id")
    @classmethod
    def validate_project(cls, v: int) -> int:
        return _positive_project_id(v)

    @field_validator("grant_amount_received")
    @classmethod
    def validate_grant(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Grant amount must be positive")
        return v

    @field_validator("subsequent_grant_amount")
    @classmethod
    def validate_subsequent_grant(cls, v: float) -> float:
        if v < 0:
            raise ValueError("Subsequent grant amount must be non-negative")
        return v


class LivelihoodResponse(ResponseSchema):
    id: int
    project_id: int
    participant_name: str
    location: str
    disaggregated_sex: Sex
    disability: bool
    age_group: AgeGroup
    grant_amount_received: float
    grant_purpose: str
    progress1: str
    progress2: str
    outcome: str
    subsequent_grant_amount: float
    project: Optional[ProjectOption] = None
