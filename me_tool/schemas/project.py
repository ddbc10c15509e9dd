from datetime import date
from typing import Any, Optional

from pydantic import field_validator

from me_tool.models.enums import Status
from me_tool.schemas.base import (
    FormSchema,
    ResponseSchema,
    ensure_not_future,
    parse_calendar_date,
)
from me_tool.schemas.strategic import StrategicObjectiveOption
from me_tool.schemas.team import TeamResponse


class ProjectCreate(FormSchema):
    """Schema for a new project.

    ``actual_value`` may exceed ``target_value`` here; only strategic
    objectives enforce that ceiling. ``progressPercentage`` is not an input
    and is ignored if submitted.
    """
    field_labels = {
        "name": "Project name",
        "objective": "Project objective",
        "outcome": "Project outcome",
        "kpi": "KPI",
        "strategicObjectiveId": "Strategic objective",
        "teamId": "Team",
    }
    field_messages = {
        "strategicObjectiveId": "Please select a strategic objective",
        "teamId": "Please select a team",
        "status": "Please select a valid status",
    }

    name: str
    objective: str
    strategic_objective_id: int
    outcome: str
    activity: str
    kpi: str
    target_value: float
    actual_value: float
    status: Status
    team_id: int
    timeline: str
    last_updated: date

    @field_validator("target_value")
    @classmethod
    def validate_target(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Target value must be positive")
        return v

    @field_validator("actual_value")
    @classmethod
    def validate_actual(cls, v: float) -> float:
        if v < 0:
            raise ValueError("Actual value must be non-negative")
        return v

    @field_validator("last_updated", mode="before")
    @classmethod
    def validate_last_updated(cls, v: Any) -> date:
        return ensure_not_future(
            parse_calendar_date(v, strict=True),
            "Last updated date cannot be in the future",
        )

    @property
    def progress_percentage(self) -> float:
        return (self.actual_value / self.target_value) * 100


class ProjectResponse(ResponseSchema):
    id: int
    project_name: str
    objective: str
    strategic_objective_id: int
    outcome: str
    activity: str
    kpi: str
    target_value: float
    actual_value: float
    progress_percentage: float
    status: Status
    team_id: int
    timeline: str
    last_updated: date
    strategic_objective: Optional[StrategicObjectiveOption] = None
    responsible_team: Optional[TeamResponse] = None


class ProjectOption(ResponseSchema):
    id: int
    project_name: str
