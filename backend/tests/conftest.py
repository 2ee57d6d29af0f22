# tests/conftest.py
import io
import shutil
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from projecthub.config import settings
from projecthub.main import create_app
from projecthub.models import ChildKind
from projecthub.store import RecordStore


@pytest.fixture(scope="session")
def temp_storage_dir():
    """Create temporary storage directory for test files"""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)

@pytest.fixture(autouse=True)
def override_settings(temp_storage_dir):
    """Point storage at a fresh directory for every test"""
    original_storage = settings.STORAGE_PATH
    original_uploads = settings.UPLOADS_PATH
    original_max_bytes = settings.MAX_UPLOAD_BYTES

    storage = Path(tempfile.mkdtemp(dir=temp_storage_dir))
    settings.STORAGE_PATH = storage
    settings.UPLOADS_PATH = storage / "uploads"

    yield storage

    settings.STORAGE_PATH = original_storage
    settings.UPLOADS_PATH = original_uploads
    settings.MAX_UPLOAD_BYTES = original_max_bytes

@pytest.fixture
def store(tmp_path):
    """Record store backed by a throwaway SQLite file"""
    record_store = RecordStore(f"sqlite:///{tmp_path / 'test.db'}")
    record_store.open()
    yield record_store
    record_store.close()

@pytest.fixture
def client(store):
    """Test client wired to the test store"""
    app = create_app(store)
    with TestClient(app) as test_client:
        yield test_client

@pytest.fixture
def sample_project(store):
    """Create a sample project and return its stored row"""
    project_id = store.create_project({
        "name": "Test Project",
        "description": "Test Description",
        "start_date": "2024-01-01",
        "end_date": "2024-06-30",
        "status": "active"
    })
    return store.get_project(project_id)

@pytest.fixture
def sample_milestone(store, sample_project):
    return store.insert_child(ChildKind.MILESTONES, sample_project.id, {"title": "Design"})

@pytest.fixture
def image_bytes():
    """Build a small real image in the requested Pillow format"""
    def _make(image_format: str = "PNG") -> bytes:
        buffer = io.BytesIO()
        Image.new("RGB", (8, 8), color=(200, 30, 30)).save(buffer, format=image_format)
        return buffer.getvalue()
    return _make

@pytest.fixture
def stored_files(override_settings):
    """List the files currently in the uploads directory"""
    def _list():
        uploads = settings.UPLOADS_PATH
        if not uploads.exists():
            return []
        return sorted(p.name for p in uploads.iterdir())
    return _list

@pytest.fixture
def lenient_client(store):
    """Test client that returns 500 responses instead of re-raising server errors"""
    app = create_app(store)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
