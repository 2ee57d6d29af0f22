# backend/projecthub/api/children.py
import asyncio
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import RedirectResponse

from ..errors import ProjectHubError
from ..models import ChildKind
from ..schemas.children import (
    DocumentCreate,
    ManufacturingPlanCreate,
    MaterialCreate,
    MilestoneCreate,
    TeamMemberCreate,
)
from ..services.cleanup import cleanup_service
from ..store import RecordStore
from ..utils.files import AttachmentKind, save_attachment
from ..utils.logging import api_logger
from .common import get_store, optional_int, optional_text, parse_record_id, required_text

router = APIRouter(prefix="/projects/{project_id}", tags=["children"])


async def _existing_project_id(store: RecordStore, raw_project_id: str) -> int:
    """Parse the id and make sure the project exists.

    Unknown projects answer 404 instead of surfacing the foreign key failure.
    """
    project_id = parse_record_id(raw_project_id)
    await asyncio.to_thread(store.get_project, project_id)
    return project_id


async def _insert(store: RecordStore, kind: ChildKind, project_id: int, fields: Dict[str, Any]) -> RedirectResponse:
    api_logger.info("Adding child record", extra={"kind": kind.value, "project_id": project_id})
    await asyncio.to_thread(store.insert_child, kind, project_id, fields)
    return RedirectResponse(f"/projects/{project_id}", status_code=303)


@router.post("/milestones")
async def add_milestone(
        project_id: str,
        title: Optional[str] = Form(None),
        description: Optional[str] = Form(None),
        due_date: Optional[str] = Form(None),
        status: Optional[str] = Form(None),
        store: RecordStore = Depends(get_store)
):
    milestone = MilestoneCreate(
        title=required_text(title, "Milestone title"),
        description=optional_text(description),
        due_date=optional_text(due_date),
        status=optional_text(status)
    )
    record_id = await _existing_project_id(store, project_id)
    return await _insert(store, ChildKind.MILESTONES, record_id, milestone.model_dump())


@router.post("/materials")
async def add_material(
        project_id: str,
        name: Optional[str] = Form(None),
        quantity: Optional[str] = Form(None),
        unit: Optional[str] = Form(None),
        status: Optional[str] = Form(None),
        store: RecordStore = Depends(get_store)
):
    material = MaterialCreate(
        name=required_text(name, "Material name"),
        quantity=optional_int(quantity, "Quantity"),
        unit=optional_text(unit),
        status=optional_text(status)
    )
    record_id = await _existing_project_id(store, project_id)
    return await _insert(store, ChildKind.MATERIALS, record_id, material.model_dump())


@router.post("/documents")
async def add_document(
        project_id: str,
        title: Optional[str] = Form(None),
        status: Optional[str] = Form(None),
        document: Optional[UploadFile] = File(None),
        store: RecordStore = Depends(get_store)
):
    title = required_text(title, "Document title")
    record_id = await _existing_project_id(store, project_id)

    file_path = await save_attachment(document, AttachmentKind.DOCUMENT)
    record = DocumentCreate(title=title, file_path=file_path, status=optional_text(status))
    try:
        return await _insert(store, ChildKind.DOCUMENTS, record_id, record.model_dump())
    except ProjectHubError:
        await cleanup_service.delete_attachments([file_path])
        raise


@router.post("/team-members")
async def add_team_member(
        project_id: str,
        name: Optional[str] = Form(None),
        role: Optional[str] = Form(None),
        email: Optional[str] = Form(None),
        store: RecordStore = Depends(get_store)
):
    member = TeamMemberCreate(
        name=required_text(name, "Team member name"),
        role=optional_text(role),
        email=optional_text(email)
    )
    record_id = await _existing_project_id(store, project_id)
    return await _insert(store, ChildKind.TEAM_MEMBERS, record_id, member.model_dump())


@router.post("/manufacturing-plans")
async def add_manufacturing_plan(
        project_id: str,
        title: Optional[str] = Form(None),
        description: Optional[str] = Form(None),
        start_date: Optional[str] = Form(None),
        end_date: Optional[str] = Form(None),
        status: Optional[str] = Form(None),
        store: RecordStore = Depends(get_store)
):
    plan = ManufacturingPlanCreate(
        title=required_text(title, "Plan title"),
        description=optional_text(description),
        start_date=optional_text(start_date),
        end_date=optional_text(end_date),
        status=optional_text(status)
    )
    record_id = await _existing_project_id(store, project_id)
    return await _insert(store, ChildKind.MANUFACTURING_PLANS, record_id, plan.model_dump())
