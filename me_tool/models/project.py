from sqlalchemy import Column, Date, Enum, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from me_tool.models.base import BaseModel
from me_tool.models.enums import Status


class Project(BaseModel):
    """Initiative delivering a strategic objective"""
    __tablename__ = "projects"

    project_name = Column(String(200), nullable=False, index=True)
    objective = Column(Text, nullable=False)
    outcome = Column(Text, nullable=False)
    activity = Column(Text, nullable=False)
    kpi = Column(String(255), nullable=False)

    # KPI; progress_percentage is written once, at creation
    target_value = Column(Float, nullable=False)
    actual_value = Column(Float, nullable=False, default=0)
    progress_percentage = Column(Float, nullable=False, default=0)
    status = Column(Enum(Status), default=Status.ON_TRACK, nullable=False)
    timeline = Column(String(255), nullable=False)
    last_updated = Column(Date, nullable=False)

    strategic_objective_id = Column(Integer, ForeignKey("strategic_objectives.id"), nullable=False)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False)

    strategic_objective = relationship("StrategicObjective", back_populates="projects")
    responsible_team = relationship("Team", back_populates="projects")
    workshops = relationship("Workshop", back_populates="project")
    livelihoods = relationship("Livelihood", back_populates="project")
