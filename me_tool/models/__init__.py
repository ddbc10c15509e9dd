from .base import Base, BaseModel
from .activities import Livelihood, Workshop
from .enums import AgeGroup, Role, Sex, Status
from .project import Project
from .staff import Staff
from .strategic import StrategicObjective
from .team import Team

__all__ = [
    "Base",
    "BaseModel",
    "AgeGroup",
    "Role",
    "Sex",
    "Status",
    "Staff",
    "Team",
    "StrategicObjective",
    "Project",
    "Workshop",
    "Livelihood",
]
