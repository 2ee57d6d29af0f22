# backend/projecthub/api/projects.py
import asyncio
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import RedirectResponse

from ..errors import ProjectHubError
from ..schemas.project import Project as ProjectSchema, ProjectCreate, ProjectUpdate
from ..services.cleanup import cleanup_service
from ..services.overview import get_project_overview
from ..store import PROJECT_FIELDS, RecordStore
from ..utils.files import AttachmentKind, save_attachment
from ..utils.logging import api_logger
from .common import get_store, optional_text, parse_record_id, required_text, templates

router = APIRouter(tags=["projects"])


@router.get("/")
async def list_projects(request: Request, store: RecordStore = Depends(get_store)):
    """Project index page"""
    projects = await asyncio.to_thread(store.list_projects)
    api_logger.info(f"Found {len(projects)} projects")

    return templates.TemplateResponse(request, "index.html", {
        "projects": [ProjectSchema.model_validate(project) for project in projects]
    })


@router.get("/projects/new")
async def new_project(request: Request):
    return templates.TemplateResponse(request, "projects/new.html", {})


@router.post("/projects")
async def create_project(
        name: Optional[str] = Form(None),
        description: Optional[str] = Form(None),
        start_date: Optional[str] = Form(None),
        end_date: Optional[str] = Form(None),
        status: Optional[str] = Form(None),
        cover_image: Optional[UploadFile] = File(None),
        store: RecordStore = Depends(get_store)
):
    project = ProjectCreate(
        name=required_text(name, "Project name"),
        description=optional_text(description),
        start_date=optional_text(start_date),
        end_date=optional_text(end_date),
        status=optional_text(status)
    )
    api_logger.info("Creating new project", extra={"project_name": project.name})

    project.cover_image = await save_attachment(cover_image, AttachmentKind.COVER_IMAGE)
    try:
        project_id = await asyncio.to_thread(store.create_project, project.model_dump())
    except ProjectHubError:
        await cleanup_service.delete_attachments([project.cover_image])
        raise

    api_logger.info("Project created successfully", extra={"project_id": project_id})
    return RedirectResponse("/", status_code=303)


@router.get("/projects/{project_id}")
async def show_project(request: Request, project_id: str, store: RecordStore = Depends(get_store)):
    """Project detail page with every child collection"""
    overview = await get_project_overview(store, parse_record_id(project_id))
    return templates.TemplateResponse(request, "projects/show.html", {"overview": overview})


@router.get("/projects/{project_id}/edit")
async def edit_project(request: Request, project_id: str, store: RecordStore = Depends(get_store)):
    project = await asyncio.to_thread(store.get_project, parse_record_id(project_id))
    return templates.TemplateResponse(request, "projects/edit.html", {
        "project": ProjectSchema.model_validate(project)
    })


@router.post("/projects/{project_id}")
async def update_project(
        request: Request,
        project_id: str,
        cover_image: Optional[UploadFile] = File(None),
        store: RecordStore = Depends(get_store)
):
    record_id = parse_record_id(project_id)
    api_logger.info("Updating project", extra={"project_id": record_id})

    existing = await asyncio.to_thread(store.get_project, record_id)

    # Fields missing from the form keep their stored value; posted empty ones are cleared
    form = await request.form()
    update = ProjectUpdate(**{
        field: optional_text(form[field]) for field in PROJECT_FIELDS
        if field in form and isinstance(form[field], str)
    })
    if "name" in update.model_fields_set:
        update.name = required_text(update.name, "Project name")

    new_cover = await save_attachment(cover_image, AttachmentKind.COVER_IMAGE)
    try:
        await asyncio.to_thread(
            store.update_project, record_id, update.model_dump(exclude_unset=True), cover_image=new_cover
        )
    except ProjectHubError:
        await cleanup_service.delete_attachments([new_cover])
        raise

    if new_cover and existing.cover_image and existing.cover_image != new_cover:
        await cleanup_service.delete_attachments([existing.cover_image])

    api_logger.info("Project updated successfully", extra={"project_id": record_id})
    return RedirectResponse(f"/projects/{record_id}", status_code=303)


@router.post("/projects/{project_id}/delete")
async def delete_project(project_id: str, store: RecordStore = Depends(get_store)):
    record_id = parse_record_id(project_id)
    api_logger.info("Deleting project", extra={"project_id": record_id})

    attachments = await asyncio.to_thread(store.delete_project, record_id)
    await cleanup_service.delete_attachments(attachments)

    api_logger.info(f"Successfully deleted project {record_id}")
    return RedirectResponse("/", status_code=303)
