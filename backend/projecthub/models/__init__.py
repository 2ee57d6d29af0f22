# backend/projecthub/models/__init__.py
import enum

from ..database import Base
from .project import Project
from .milestone import Milestone
from .material import Material
from .document import Document
from .team_member import TeamMember
from .manufacturing_plan import ManufacturingPlan


class ChildKind(str, enum.Enum):
    """The five record kinds that hang off a project"""
    MILESTONES = "milestones"
    MATERIALS = "materials"
    DOCUMENTS = "documents"
    TEAM_MEMBERS = "team_members"
    MANUFACTURING_PLANS = "manufacturing_plans"

    @property
    def model(self):
        return CHILD_MODELS[self]


CHILD_MODELS = {
    ChildKind.MILESTONES: Milestone,
    ChildKind.MATERIALS: Material,
    ChildKind.DOCUMENTS: Document,
    ChildKind.TEAM_MEMBERS: TeamMember,
    ChildKind.MANUFACTURING_PLANS: ManufacturingPlan,
}

__all__ = [
    "Base",
    "Project",
    "Milestone",
    "Material",
    "Document",
    "TeamMember",
    "ManufacturingPlan",
    "ChildKind",
    "CHILD_MODELS",
]
