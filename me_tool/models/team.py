from sqlalchemy import Column, ForeignKey, String
from sqlalchemy.orm import relationship

from me_tool.models.base import BaseModel


class Team(BaseModel):
    """Team responsible for objectives and projects"""
    __tablename__ = "teams"

    name = Column(String(100), nullable=False, index=True)
    created_by_id = Column(String(36), ForeignKey("staff.id"), nullable=False)

    created_by = relationship("Staff", back_populates="teams_created")
    strategic_objectives = relationship("StrategicObjective", back_populates="responsible_team")
    projects = relationship("Project", back_populates="responsible_team")
