# backend/projecthub/schemas/__init__.py
from .project import Project, ProjectCreate, ProjectUpdate
from .children import (
    Milestone, MilestoneCreate,
    Material, MaterialCreate,
    Document, DocumentCreate,
    TeamMember, TeamMemberCreate,
    ManufacturingPlan, ManufacturingPlanCreate,
)
from .overview import ProjectOverview

__all__ = [
    "Project", "ProjectCreate", "ProjectUpdate",
    "Milestone", "MilestoneCreate",
    "Material", "MaterialCreate",
    "Document", "DocumentCreate",
    "TeamMember", "TeamMemberCreate",
    "ManufacturingPlan", "ManufacturingPlanCreate",
    "ProjectOverview",
]
