# backend/projecthub/utils/files.py
import enum
import os
import time
from pathlib import Path
from typing import Optional
from uuid import uuid4

from fastapi import UploadFile
from PIL import Image, UnidentifiedImageError

from ..config import settings
from ..errors import UploadRejected
from .logging import service_logger

CHUNK_SIZE = 64 * 1024

COVER_IMAGE_MEDIA_TYPES = {"image/jpeg", "image/png", "image/gif", "image/webp"}
COVER_IMAGE_FORMATS = {"JPEG", "PNG", "GIF", "WEBP"}


class AttachmentKind(str, enum.Enum):
    COVER_IMAGE = "cover_image"
    DOCUMENT = "document"


def has_file(upload_file: Optional[UploadFile]) -> bool:
    """Browsers send an empty part with no filename when nothing was picked"""
    return upload_file is not None and bool(upload_file.filename)


def unique_filename(original_name: str) -> str:
    """<epoch millis>-<random hex><original extension>"""
    extension = Path(original_name).suffix.lower()
    return f"{int(time.time() * 1000)}-{uuid4().hex[:12]}{extension}"


def _verify_image(path: Path) -> None:
    try:
        with Image.open(path) as image:
            image_format = image.format
            image.verify()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError) as e:
        raise UploadRejected("Cover image could not be read as an image") from e

    if image_format not in COVER_IMAGE_FORMATS:
        raise UploadRejected(f"Cover image format {image_format} is not allowed")


async def save_attachment(
        upload_file: Optional[UploadFile],
        kind: AttachmentKind
) -> Optional[str]:
    """Validate and store an uploaded attachment.

    Returns the stored path relative to STORAGE_PATH, or None when no file
    was submitted. Raises UploadRejected for a disallowed media type or a
    payload above MAX_UPLOAD_BYTES; in that case nothing is left on disk.
    """
    if not has_file(upload_file):
        return None

    kind = AttachmentKind(kind)
    if kind is AttachmentKind.COVER_IMAGE and upload_file.content_type not in COVER_IMAGE_MEDIA_TYPES:
        service_logger.warning("Rejected cover image media type", extra={
            "file_name": upload_file.filename,
            "content_type": upload_file.content_type
        })
        raise UploadRejected(
            f"Cover image must be one of JPEG, PNG, GIF or WEBP (got {upload_file.content_type or 'unknown'})"
        )

    directory = Path(settings.UPLOADS_PATH)
    directory.mkdir(parents=True, exist_ok=True)

    file_path = directory / unique_filename(upload_file.filename)
    partial_path = file_path.with_name(file_path.name + ".part")
    max_bytes = settings.MAX_UPLOAD_BYTES

    try:
        size = 0
        with partial_path.open("wb") as buffer:
            while True:
                chunk = await upload_file.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > max_bytes:
                    raise UploadRejected(f"File exceeds the upload limit of {max_bytes} bytes")
                buffer.write(chunk)

        if kind is AttachmentKind.COVER_IMAGE:
            _verify_image(partial_path)

        os.replace(partial_path, file_path)
    except UploadRejected as e:
        await delete_file(partial_path)
        service_logger.warning("Upload rejected", extra={
            "file_name": upload_file.filename,
            "kind": kind.value,
            "reason": e.reason
        })
        raise
    except BaseException:
        await delete_file(partial_path)
        raise

    relative_path = get_relative_path(file_path, settings.STORAGE_PATH)
    service_logger.info("Stored attachment", extra={
        "file_name": upload_file.filename,
        "kind": kind.value,
        "stored_path": relative_path,
        "file_size": size
    })
    return relative_path


async def delete_file(file_path: Path):
    """Delete a file if it exists"""
    if file_path.exists():
        file_path.unlink()


def get_relative_path(absolute_path: Path, base_path: Path) -> str:
    """Convert a path under base_path to the relative form stored in the database"""
    absolute_path = Path(absolute_path).absolute()
    base_path = Path(base_path).absolute()
    return absolute_path.relative_to(base_path).as_posix()
