# backend/projecthub/schemas/overview.py
from typing import List
from .base import BaseSchema
from .project import Project
from .children import Milestone, Material, Document, TeamMember, ManufacturingPlan

class ProjectOverview(BaseSchema):
    """Everything the project detail page shows"""
    project: Project
    milestones: List[Milestone] = []
    materials: List[Material] = []
    documents: List[Document] = []
    team_members: List[TeamMember] = []
    manufacturing_plans: List[ManufacturingPlan] = []
