# backend/projecthub/main.py
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from .api import children_router, projects_router
from .api.common import templates
from .config import settings
from .errors import ProjectHubError
from .store import RecordStore
from .utils.logging import api_logger

STATIC_PATH = Path(__file__).resolve().parent / "static"


def create_app(store: Optional[RecordStore] = None) -> FastAPI:
    store = store or RecordStore(settings.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store.open()
        app.state.store = store
        yield
        store.close()

    app = FastAPI(title="ProjectHub", lifespan=lifespan)

    app.mount("/static", StaticFiles(directory=str(STATIC_PATH)), name="static")
    app.mount("/storage", StaticFiles(directory=str(settings.STORAGE_PATH), check_dir=False), name="storage")

    app.include_router(projects_router)
    app.include_router(children_router)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        api_logger.info(f"{request.method} {request.url.path} {response.status_code}", extra={
            "execution_time_ms": round((time.time() - start_time) * 1000, 2)
        })
        return response

    @app.exception_handler(ProjectHubError)
    async def handle_projecthub_error(request: Request, exc: ProjectHubError):
        log = api_logger.error if exc.status_code >= 500 else api_logger.warning
        log(f"{type(exc).__name__}: {exc.message}", extra={"path": request.url.path})
        return templates.TemplateResponse(
            request,
            "error.html",
            {"status_code": exc.status_code, "message": exc.message},
            status_code=exc.status_code
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        api_logger.error(f"Unhandled {type(exc).__name__}", extra={"path": request.url.path}, exc_info=exc)
        return templates.TemplateResponse(
            request,
            "error.html",
            {"status_code": 500, "message": "Something went wrong while handling the request"},
            status_code=500
        )

    return app


app = create_app()
