# tests/api/test_children.py
import pytest
from fastapi import status

from projecthub.config import settings
from projecthub.models import ChildKind


@pytest.mark.parametrize("path,kind,data,field,expected", [
    ("milestones", ChildKind.MILESTONES,
     {"title": "Design", "due_date": "2024-04-01", "status": "open", "description": "Drawings"},
     "title", "Design"),
    ("materials", ChildKind.MATERIALS,
     {"name": "Steel", "quantity": "10", "unit": "t", "status": "ordered"},
     "quantity", 10),
    ("team-members", ChildKind.TEAM_MEMBERS,
     {"name": "Ada", "role": "Engineer", "email": "ada@example.com"},
     "email", "ada@example.com"),
    ("manufacturing-plans", ChildKind.MANUFACTURING_PLANS,
     {"title": "Batch 1", "start_date": "2024-05-01", "end_date": "2024-05-31", "status": "draft"},
     "end_date", "2024-05-31"),
])
def test_add_child_record(client, store, sample_project, path, kind, data, field, expected):
    response = client.post(f"/projects/{sample_project.id}/{path}", data=data, follow_redirects=False)

    assert response.status_code == status.HTTP_303_SEE_OTHER
    assert response.headers["location"] == f"/projects/{sample_project.id}"
    records = store.list_children(kind, sample_project.id)
    assert len(records) == 1
    assert getattr(records[0], field) == expected

@pytest.mark.parametrize("path,data", [
    ("milestones", {"description": "no title"}),
    ("materials", {"quantity": "3"}),
    ("team-members", {"role": "Engineer"}),
    ("manufacturing-plans", {"title": ""}),
    ("documents", {"status": "draft"}),
])
def test_add_child_missing_required_field(client, sample_project, path, data):
    response = client.post(f"/projects/{sample_project.id}/{path}", data=data)
    assert response.status_code == status.HTTP_400_BAD_REQUEST

def test_add_material_with_invalid_quantity(client, store, sample_project):
    response = client.post(f"/projects/{sample_project.id}/materials", data={"name": "Steel", "quantity": "ten"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert store.list_children(ChildKind.MATERIALS, sample_project.id) == []

def test_add_material_without_quantity(client, store, sample_project):
    client.post(f"/projects/{sample_project.id}/materials", data={"name": "Bolts", "quantity": ""})
    assert store.list_children(ChildKind.MATERIALS, sample_project.id)[0].quantity is None

def test_add_child_to_unknown_project(client):
    response = client.post("/projects/99999/milestones", data={"title": "Design"})
    assert response.status_code == status.HTTP_404_NOT_FOUND

def test_add_child_non_numeric_project_id(client):
    response = client.post("/projects/abc/team-members", data={"name": "Ada"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST

def test_add_document_with_file(client, store, sample_project):
    response = client.post(
        f"/projects/{sample_project.id}/documents",
        data={"title": "Drawing", "status": "final"},
        files={"document": ("drawing.pdf", b"%PDF-1.4 drawing", "application/pdf")},
        follow_redirects=False
    )

    assert response.status_code == status.HTTP_303_SEE_OTHER
    documents = store.list_children(ChildKind.DOCUMENTS, sample_project.id)
    assert len(documents) == 1
    assert documents[0].title == "Drawing"
    assert documents[0].uploaded_at is not None
    assert (settings.STORAGE_PATH / documents[0].file_path).read_bytes() == b"%PDF-1.4 drawing"

    page = client.get(f"/projects/{sample_project.id}")
    assert f"/storage/{documents[0].file_path}" in page.text

def test_add_document_without_file(client, store, sample_project):
    client.post(f"/projects/{sample_project.id}/documents", data={"title": "Placeholder"})

    documents = store.list_children(ChildKind.DOCUMENTS, sample_project.id)
    assert documents[0].file_path is None

def test_add_oversize_document(client, store, sample_project, stored_files):
    settings.MAX_UPLOAD_BYTES = 16

    response = client.post(
        f"/projects/{sample_project.id}/documents",
        data={"title": "Huge"},
        files={"document": ("huge.bin", b"x" * 64, "application/octet-stream")}
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert store.list_children(ChildKind.DOCUMENTS, sample_project.id) == []
    assert stored_files() == []

def test_add_document_to_unknown_project_stores_nothing(client, stored_files):
    response = client.post(
        "/projects/99999/documents",
        data={"title": "Orphan"},
        files={"document": ("a.txt", b"a", "text/plain")}
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert stored_files() == []

def test_add_document_checks_project_once(client, store, sample_project, monkeypatch):
    original = store.get_project
    calls = []

    def counting_get_project(project_id):
        calls.append(project_id)
        return original(project_id)

    monkeypatch.setattr(store, "get_project", counting_get_project)

    response = client.post(
        f"/projects/{sample_project.id}/documents",
        data={"title": "Drawing"},
        files={"document": ("drawing.pdf", b"%PDF-1.4", "application/pdf")},
        follow_redirects=False
    )

    assert response.status_code == status.HTTP_303_SEE_OTHER
    assert calls == [sample_project.id]
