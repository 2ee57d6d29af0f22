# backend/projecthub/api/__init__.py
from .projects import router as projects_router
from .children import router as children_router

__all__ = ["projects_router", "children_router"]
