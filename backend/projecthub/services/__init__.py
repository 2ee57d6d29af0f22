# backend/projecthub/services/__init__.py
from .cleanup import cleanup_service
from .overview import get_project_overview

__all__ = ["cleanup_service", "get_project_overview"]
