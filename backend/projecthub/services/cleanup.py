# backend/projecthub/services/cleanup.py
from pathlib import Path
from typing import Iterable, List

from ..config import settings
from ..utils.files import delete_file
from ..utils.logging import service_logger


class CleanupService:
    """Removes stored attachment files once no row references them"""

    @staticmethod
    def resolve(relative_path: str) -> Path:
        """Map a stored relative path to its location under STORAGE_PATH"""
        root = settings.STORAGE_PATH.resolve()
        path = (root / relative_path).resolve()
        if root not in path.parents:
            raise ValueError(f"Attachment path escapes the storage root: {relative_path}")
        return path

    @staticmethod
    async def delete_attachments(relative_paths: Iterable[str]) -> List[str]:
        """Delete the given stored files; returns the ones actually removed"""
        removed = []
        for relative_path in relative_paths:
            if not relative_path:
                continue
            try:
                path = CleanupService.resolve(relative_path)
                if path.exists():
                    await delete_file(path)
                    removed.append(relative_path)
                    service_logger.info(f"Deleted attachment: {relative_path}")
            except Exception as e:
                service_logger.error(f"Error deleting attachment: {str(e)}", extra={
                    "stored_path": relative_path
                })
                raise

        return removed


cleanup_service = CleanupService()
