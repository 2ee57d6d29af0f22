# backend/projecthub/services/overview.py
import asyncio
import time

from ..models import ChildKind
from ..schemas.overview import ProjectOverview
from ..store import RecordStore
from ..utils.logging import service_logger


async def get_project_overview(store: RecordStore, project_id: int) -> ProjectOverview:
    """Load a project together with its five child collections.

    The project is read first so a missing project raises NotFound without
    touching the child tables. The child reads then run concurrently in
    worker threads; the first failure propagates and no partial overview is
    returned.
    """
    start_time = time.time()
    project = await asyncio.to_thread(store.get_project, project_id)

    kinds = list(ChildKind)
    results = await asyncio.gather(*(
        asyncio.to_thread(store.list_children, kind, project_id) for kind in kinds
    ))
    children = {kind.value: rows for kind, rows in zip(kinds, results)}

    overview = ProjectOverview.model_validate({"project": project, **children}, from_attributes=True)

    service_logger.info("Built project overview", extra={
        "project_id": project_id,
        "counts": {kind: len(rows) for kind, rows in children.items()},
        "execution_time_ms": round((time.time() - start_time) * 1000, 2)
    })
    return overview
