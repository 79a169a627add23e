import hashlib
import logging
import uuid
from typing import NamedTuple
from fastapi import UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.errors import Forbidden, InvalidInput, Internal, NotFound, ServiceError
from app.core.storage import LocalFileStorage
from app.models.enums import ApplicationStatus, AttachmentMimeType
from app.repositories.application_repo import get_application_by_id
from app.repositories.application_file_repo import (
    create_application_file,
    delete_application_file,
    list_application_files,
)
from app.schemas.application_file_schema import ApplicationFileCreate

logger = logging.getLogger(__name__)

ALLOWED_MIME_TYPES = {m.value for m in AttachmentMimeType}
DISALLOWED_TYPE_MESSAGE = "Only PDF, DOCX, JPG, JPEG, and PNG files are allowed"


class IncomingFile(NamedTuple):
    name: str
    mime_type: str
    data: bytes


def _too_large_message(max_bytes: int) -> str:
    return f"One or more files exceed the {max_bytes // (1024 * 1024)}MB limit"


def parse_application_id(raw: str | None) -> int:
    value = (raw or "").strip()
    if not (value.isascii() and value.isdigit()) or int(value) <= 0:
        raise InvalidInput("Invalid or missing application ID")
    return int(value)


def check_file_count(files: list[UploadFile] | None, max_files: int) -> list[UploadFile]:
    if not files:
        raise InvalidInput("No files uploaded")
    if len(files) > max_files:
        raise InvalidInput(f"Too many files. Maximum is {max_files}")
    return files


async def read_incoming_file(upload: UploadFile, max_bytes: int) -> IncomingFile:
    if upload.content_type not in ALLOWED_MIME_TYPES:
        raise InvalidInput(DISALLOWED_TYPE_MESSAGE)

    buffer = bytearray()
    while True:
        chunk = await upload.read(1024 * 1024)
        if not chunk:
            break
        buffer.extend(chunk)
        if len(buffer) > max_bytes:
            raise InvalidInput(_too_large_message(max_bytes))
    return IncomingFile(name=upload.filename or "file", mime_type=upload.content_type, data=bytes(buffer))


def _remove_existing_files(db: Session, storage: LocalFileStorage, application_id: int) -> int:
    existing = list_application_files(db, application_id)
    for f in existing:
        # A blob that is already gone counts as removed.
        storage.delete(storage.name_from_url(f.path))
        delete_application_file(db, f)
    return len(existing)


def _store_file(db: Session, storage: LocalFileStorage, application_id: int, incoming: IncomingFile):
    name = storage.store(incoming.data, incoming.name)
    persisted = storage.read(name)
    data = ApplicationFileCreate(
        id=str(uuid.uuid4()),
        application_id=application_id,
        name=incoming.name,
        path=storage.url_for(name),
        size=len(persisted),
        mime_type=incoming.mime_type,
        hash=hashlib.sha256(persisted).hexdigest(),
    )
    return create_application_file(db, data)


def replace_application_files(
    db: Session,
    storage: LocalFileStorage,
    application_id: int,
    files: list[IncomingFile],
):
    """Swap the stored file set of an accepted application for ``files``.

    The previous batch is removed before the new one is written. Deletions are
    committed as they happen, so a failure while writing the new batch leaves
    the application with only the files stored so far.
    """
    try:
        application = get_application_by_id(db, application_id)
        if application is None:
            raise NotFound("Application not found")

        logger.info("Application %s status: %s", application_id, application.status)
        if application.status != ApplicationStatus.ACCEPTED.value:
            raise Forbidden("Files can only be uploaded for accepted applications")

        removed = _remove_existing_files(db, storage, application_id)
        if removed:
            logger.info("Removed %d previous file(s) for application %s", removed, application_id)

        records = [_store_file(db, storage, application_id, f) for f in files]
    except ServiceError:
        raise
    except Exception:
        logger.exception("Upload error for application %s", application_id)
        raise Internal("Failed to upload files")

    logger.info("Uploaded %d file(s) for application %s", len(records), application_id)
    return records


def get_application_files(db: Session, application_id: int):
    try:
        files = list_application_files(db, application_id)
    except SQLAlchemyError:
        logger.exception("Fetch files error for application %s", application_id)
        raise Internal("Failed to fetch uploaded files")

    logger.info("Fetched %d uploaded file(s) for application %s", len(files), application_id)
    return files
