# backend/projecthub/store.py
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from .database import Base, build_engine, build_sessionmaker
from .errors import ConstraintViolation, NotFound, StoreError
from .models import ChildKind, Document, Project
from .utils.logging import db_logger

PROJECT_FIELDS = ("name", "description", "start_date", "end_date", "status")


class RecordStore:
    """CRUD over the projects table and its five child tables.

    One instance per process: ``open()`` at startup, ``close()`` on shutdown.
    Every public method runs in its own session and commits once, so each
    mutation is a single transaction. Returned rows are detached and safe to
    read after the session is gone.
    """

    def __init__(self, database_url: str):
        self.database_url = database_url
        self.engine = build_engine(database_url)
        self.SessionLocal = build_sessionmaker(self.engine)

    def open(self) -> None:
        """Create any missing tables. Safe to call more than once."""
        Base.metadata.create_all(bind=self.engine)
        db_logger.info("Record store ready", extra={"database_url": self.database_url})

    def close(self) -> None:
        self.engine.dispose()
        db_logger.info("Record store closed")

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self.SessionLocal()
        try:
            yield db
            db.commit()
        except IntegrityError as e:
            db.rollback()
            db_logger.error("Constraint violation", extra={"error": str(e.orig)})
            raise ConstraintViolation("The record violates a database constraint") from e
        except SQLAlchemyError as e:
            db.rollback()
            db_logger.error("Database error", extra={"error": str(e)})
            raise StoreError("Database error") from e
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    # Projects

    def create_project(self, fields: Dict[str, Any]) -> int:
        with self.session() as db:
            project = Project(**fields)
            db.add(project)
            db.flush()
            project_id = project.id

        db_logger.info("Project created", extra={"project_id": project_id, "project_name": fields.get("name")})
        return project_id

    def get_project(self, project_id: int) -> Project:
        with self.session() as db:
            project = db.get(Project, project_id)
            if project is None:
                raise NotFound(f"Project {project_id} not found")
            return project

    def list_projects(self) -> List[Project]:
        with self.session() as db:
            query = select(Project).order_by(Project.created_at.desc(), Project.id.desc())
            return list(db.scalars(query).all())

    def update_project(
            self,
            project_id: int,
            fields: Dict[str, Any],
            cover_image: Optional[str] = None
    ) -> Project:
        """Merge ``fields`` into the stored project.

        Keys absent from ``fields`` keep their stored value, and the cover
        image is only replaced when a new path is given.
        """
        with self.session() as db:
            project = db.get(Project, project_id)
            if project is None:
                raise NotFound(f"Project {project_id} not found")

            for field, value in fields.items():
                if field not in PROJECT_FIELDS:
                    raise ValueError(f"Unknown project field: {field}")
                setattr(project, field, value)
            if cover_image is not None:
                project.cover_image = cover_image

        db_logger.info("Project updated", extra={
            "project_id": project_id,
            "update_fields": sorted(fields),
            "cover_replaced": cover_image is not None
        })
        return project

    def delete_project(self, project_id: int) -> List[str]:
        """Delete a project and, through ON DELETE CASCADE, all of its children.

        Returns the attachment paths the deleted rows pointed at.
        """
        with self.session() as db:
            project = db.get(Project, project_id)
            if project is None:
                raise NotFound(f"Project {project_id} not found")

            attachments = [project.cover_image] if project.cover_image else []
            file_paths = db.scalars(
                select(Document.file_path)
                .where(Document.project_id == project_id, Document.file_path.is_not(None))
            ).all()
            attachments.extend(file_paths)

            db.delete(project)

        db_logger.info("Project deleted", extra={"project_id": project_id, "attachment_count": len(attachments)})
        return attachments

    # Child records

    def insert_child(self, kind: ChildKind, project_id: int, fields: Dict[str, Any]) -> int:
        """Insert one child row. The parent is not looked up first; an unknown
        project_id is rejected by the foreign key as ConstraintViolation."""
        kind = ChildKind(kind)
        with self.session() as db:
            record = kind.model(project_id=project_id, **fields)
            db.add(record)
            db.flush()
            record_id = record.id

        db_logger.info("Child record created", extra={
            "kind": kind.value,
            "project_id": project_id,
            "record_id": record_id
        })
        return record_id

    def list_children(self, kind: ChildKind, project_id: int) -> List[Any]:
        model = ChildKind(kind).model
        with self.session() as db:
            query = select(model).where(model.project_id == project_id).order_by(model.id)
            return list(db.scalars(query).all())
