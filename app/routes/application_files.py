import logging
from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session
from app.core.config import get_settings
from app.core.db import get_db
from app.core.storage import LocalFileStorage, get_storage
from app.controllers.application_file_controller import (
    check_file_count,
    get_application_files,
    parse_application_id,
    read_incoming_file,
    replace_application_files,
)
from app.schemas.application_file_schema import (
    ApplicationFileListItem,
    ApplicationFilesUploadResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/applications", tags=["application-files"])


@router.post(
    "/upload",
    response_model=ApplicationFilesUploadResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_application_files_route(
    application_id: str | None = Form(default=None, alias="applicationId"),
    files: list[UploadFile] | None = File(default=None),
    db: Session = Depends(get_db),
    storage: LocalFileStorage = Depends(get_storage),
):
    settings = get_settings()
    logger.info("Received upload request for applicationId: %s", application_id)

    parsed_id = parse_application_id(application_id)
    uploads = check_file_count(files, settings.max_files)
    incoming = [await read_incoming_file(f, settings.max_upload_bytes) for f in uploads]

    records = replace_application_files(db, storage, parsed_id, incoming)
    return {"message": "Files uploaded successfully", "files": records}


@router.get("/{application_id}/files", response_model=list[ApplicationFileListItem])
def list_application_files_route(application_id: int, db: Session = Depends(get_db)):
    return get_application_files(db, application_id)
