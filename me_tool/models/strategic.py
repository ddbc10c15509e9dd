from sqlalchemy import Column, Date, Enum, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from me_tool.models.base import BaseModel
from me_tool.models.enums import Status


class StrategicObjective(BaseModel):
    """Top-level organisational goal with a KPI target/actual pair"""
    __tablename__ = "strategic_objectives"

    name = Column(String(100), nullable=False, index=True)
    outcome = Column(Text, nullable=False)
    kpi = Column(String(255), nullable=False)

    # KPI
    target_value = Column(Float, nullable=False)
    actual_value = Column(Float, nullable=False, default=0)
    status = Column(Enum(Status), default=Status.ON_TRACK, nullable=False)
    last_updated = Column(Date, nullable=False)

    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False)

    responsible_team = relationship("Team", back_populates="strategic_objectives")
    projects = relationship("Project", back_populates="strategic_objective")

    @property
    def progress_percentage(self) -> float:
        """Progress computed from the KPI pair on every read."""
        if not self.target_value:
            return 0.0
        return (self.actual_value / self.target_value) * 100
