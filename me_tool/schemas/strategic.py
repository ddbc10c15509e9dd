from datetime import date
from typing import Any, Optional

from pydantic import ValidationInfo, field_validator

from me_tool.models.enums import Status
from me_tool.schemas.base import (
    FormSchema,
    ResponseSchema,
    ensure_not_future,
    parse_calendar_date,
)
from me_tool.schemas.team import TeamResponse


class StrategicObjectiveCreate(FormSchema):
    """Schema for a new strategic objective"""
    field_labels = {"kpi": "KPI", "teamId": "Team"}

    name: str
    outcome: str
    kpi: str
    target_value: float
    actual_value: float
    status: Status
    team_id: int
    last_updated: date

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if len(v) > 100:
            raise ValueError("Name must be 100 characters or less")
        return v

    @field_validator("target_value")
    @classmethod
    def validate_target(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Target value must be a positive number")
        return v

    @field_validator("actual_value")
    @classmethod
    def validate_actual(cls, v: float, info: ValidationInfo) -> float:
        if v < 0:
            raise ValueError("Actual value must be non-negative")
        target = info.data.get("target_value")
        if target is not None and v > target:
            raise ValueError("Actual value cannot exceed target value")
        return v

    @field_validator("team_id")
    @classmethod
    def validate_team(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Team ID must be a positive integer")
        return v

    @field_validator("last_updated", mode="before")
    @classmethod
    def validate_last_updated(cls, v: Any) -> date:
        return ensure_not_future(
            parse_calendar_date(v),
            "Last updated date cannot be in the future",
        )


class StrategicObjectiveResponse(ResponseSchema):
    id: int
    name: str
    outcome: str
    kpi: str
    target_value: float
    actual_value: float
    progress_percentage: float
    status: Status
    team_id: int
    last_updated: date
    responsible_team: Optional[TeamResponse] = None


class StrategicObjectiveOption(ResponseSchema):
    id: int
    name: str
