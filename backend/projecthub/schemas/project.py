# backend/projecthub/schemas/project.py
from typing import Optional
from .base import BaseSchema, TimestampMixin

class ProjectBase(BaseSchema):
    name: str
    description: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    status: Optional[str] = None

class ProjectCreate(ProjectBase):
    cover_image: Optional[str] = None

class ProjectUpdate(BaseSchema):
    """Only fields that were explicitly set are written"""
    name: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    status: Optional[str] = None

class Project(ProjectBase, TimestampMixin):
    id: int
    cover_image: Optional[str] = None
