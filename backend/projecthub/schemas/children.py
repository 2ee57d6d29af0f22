# backend/projecthub/schemas/children.py
from datetime import datetime
from typing import Optional
from .base import BaseSchema


class MilestoneCreate(BaseSchema):
    title: str
    description: Optional[str] = None
    due_date: Optional[str] = None
    status: Optional[str] = None

class Milestone(MilestoneCreate):
    id: int
    project_id: int


class MaterialCreate(BaseSchema):
    name: str
    quantity: Optional[int] = None
    unit: Optional[str] = None
    status: Optional[str] = None

class Material(MaterialCreate):
    id: int
    project_id: int


class DocumentCreate(BaseSchema):
    title: str
    file_path: Optional[str] = None
    status: Optional[str] = None

class Document(DocumentCreate):
    id: int
    project_id: int
    uploaded_at: Optional[datetime] = None


class TeamMemberCreate(BaseSchema):
    name: str
    role: Optional[str] = None
    email: Optional[str] = None

class TeamMember(TeamMemberCreate):
    id: int
    project_id: int


class ManufacturingPlanCreate(BaseSchema):
    title: str
    description: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    status: Optional[str] = None

class ManufacturingPlan(ManufacturingPlanCreate):
    id: int
    project_id: int
