from .activities import LivelihoodCreate, LivelihoodResponse, WorkshopCreate, WorkshopResponse
from .auth import LoginForm
from .base import Decoded, DecodeResult, FieldError, Rejected, decode_form
from .project import ProjectCreate, ProjectOption, ProjectResponse
from .staff import SafeStaff, StaffCreate
from .strategic import (
    StrategicObjectiveCreate,
    StrategicObjectiveOption,
    StrategicObjectiveResponse,
)
from .team import TeamCreate, TeamResponse

__all__ = [
    "Decoded",
    "DecodeResult",
    "FieldError",
    "Rejected",
    "decode_form",
    "LoginForm",
    "StaffCreate",
    "SafeStaff",
    "TeamCreate",
    "TeamResponse",
    "StrategicObjectiveCreate",
    "StrategicObjectiveOption",
    "StrategicObjectiveResponse",
    "ProjectCreate",
    "ProjectOption",
    "ProjectResponse",
    "WorkshopCreate",
    "WorkshopResponse",
    "LivelihoodCreate",
    "LivelihoodResponse",
]
