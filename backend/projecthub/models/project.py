# backend/projecthub/models/project.py
from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    start_date = Column(String(32), nullable=True)
    end_date = Column(String(32), nullable=True)
    status = Column(String(50), nullable=True)
    cover_image = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Child rows are removed by ON DELETE CASCADE, not by the ORM
    milestones = relationship("Milestone", back_populates="project", cascade="all, delete-orphan", passive_deletes=True)
    materials = relationship("Material", back_populates="project", cascade="all, delete-orphan", passive_deletes=True)
    documents = relationship("Document", back_populates="project", cascade="all, delete-orphan", passive_deletes=True)
    team_members = relationship("TeamMember", back_populates="project", cascade="all, delete-orphan", passive_deletes=True)
    manufacturing_plans = relationship(
        "ManufacturingPlan", back_populates="project", cascade="all, delete-orphan", passive_deletes=True
    )
