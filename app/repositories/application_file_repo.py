from sqlalchemy.orm import Session
from sqlalchemy import select
from app.models.application_file_model import ApplicationFile
from app.schemas.application_file_schema import ApplicationFileCreate


def create_application_file(db: Session, data: ApplicationFileCreate) -> ApplicationFile:
    f = ApplicationFile(**data.model_dump())
    db.add(f)
    db.commit()
    db.refresh(f)
    return f


def list_application_files(db: Session, application_id: int) -> list[ApplicationFile]:
    stmt = (
        select(ApplicationFile)
        .where(ApplicationFile.application_id == application_id)
        .order_by(ApplicationFile.uploaded_at.desc(), ApplicationFile.id)
    )
    return list(db.execute(stmt).scalars().all())


def delete_application_file(db: Session, f: ApplicationFile) -> None:
    db.delete(f)
    db.commit()
