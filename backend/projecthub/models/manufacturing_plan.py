# backend/projecthub/models/manufacturing_plan.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base


class ManufacturingPlan(Base):
    __tablename__ = "manufacturing_plans"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    start_date = Column(String(32), nullable=True)
    end_date = Column(String(32), nullable=True)
    status = Column(String(50), nullable=True)

    project = relationship("Project", back_populates="manufacturing_plans")
