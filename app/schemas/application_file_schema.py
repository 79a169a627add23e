from pydantic import BaseModel, ConfigDict
from datetime import datetime


class ApplicationFileBase(BaseModel):
    name: str
    path: str
    size: int
    mime_type: str


class ApplicationFileCreate(ApplicationFileBase):
    id: str
    application_id: int
    hash: str


class ApplicationFileRead(ApplicationFileCreate):
    uploaded_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ApplicationFileListItem(ApplicationFileBase):
    id: str
    uploaded_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ApplicationFilesUploadResponse(BaseModel):
    message: str
    files: list[ApplicationFileRead]
