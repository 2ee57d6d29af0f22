# backend/projecthub/api/common.py
from pathlib import Path
from typing import Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from ..errors import BadRequest, ValidationError
from ..store import RecordStore

TEMPLATES_PATH = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_PATH))


def get_store(request: Request) -> RecordStore:
    """The process-wide store opened by the application lifespan"""
    return request.app.state.store


def parse_record_id(raw_id: str) -> int:
    try:
        record_id = int(raw_id)
    except (TypeError, ValueError):
        raise BadRequest(f"Invalid id: {raw_id!r}")
    if record_id < 1:
        raise BadRequest(f"Invalid id: {raw_id!r}")
    return record_id


def optional_text(value: Optional[str]) -> Optional[str]:
    """Empty form inputs are stored as NULL"""
    if value is None:
        return None
    value = value.strip()
    return value or None


def required_text(value: Optional[str], field: str) -> str:
    value = optional_text(value)
    if value is None:
        raise ValidationError(f"{field} is required")
    return value


def optional_int(value: Optional[str], field: str) -> Optional[int]:
    value = optional_text(value)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{field} must be a whole number")
