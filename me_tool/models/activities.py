from sqlalchemy import Boolean, Column, Date, Enum, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from me_tool.models.base import BaseModel
from me_tool.models.enums import AgeGroup, Sex


class Workshop(BaseModel):
    """Workshop delivered under a project, with participant demographics and evaluation notes"""
    __tablename__ = "workshops"

    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    purpose = Column(Text, nullable=False)
    date = Column(Date, nullable=False)
    location = Column(String(255), nullable=False)

    # Participants
    num_participants = Column(Integer, nullable=False, default=0)
    disaggregated_sex = Column(Enum(Sex), nullable=False)
    disability = Column(Boolean, nullable=False, default=False)
    age_group = Column(Enum(AgeGroup), nullable=False)

    # Evaluation
    pre_evaluation = Column(Text, nullable=False)
    post_evaluation = Column(Text, nullable=False)
    local_partner = Column(String(255), nullable=False)
    local_partner_responsibility = Column(Text, nullable=False)
    success_of_partnership = Column(Text, nullable=False)
    challenges = Column(Text, nullable=False)
    strengths = Column(Text, nullable=False)
    outcomes = Column(Text, nullable=False)
    recommendations = Column(Text, nullable=False)

    project = relationship("Project", back_populates="workshops")


class Livelihood(BaseModel):
    """Livelihood grant paid to a project participant"""
    __tablename__ = "livelihoods"

    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    participant_name = Column(String(200), nullable=False)
    location = Column(String(255), nullable=False)

    # Demographics
    disaggregated_sex = Column(Enum(Sex), nullable=False)
    disability = Column(Boolean, nullable=False, default=False)
    age_group = Column(Enum(AgeGroup), nullable=False)

    # Grant
    grant_amount_received = Column(Float, nullable=False)
    grant_purpose = Column(Text, nullable=False)
    subsequent_grant_amount = Column(Float, nullable=False, default=0)

    # Follow-up
    progress1 = Column(Text, nullable=False)
    progress2 = Column(Text, nullable=False)
    outcome = Column(Text, nullable=False)

    project = relationship("Project", back_populates="livelihoods")
