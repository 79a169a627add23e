from sqlalchemy.orm import Session
from sqlalchemy import select
from app.models.application_model import Application


def get_application_by_id(db: Session, application_id: int) -> Application | None:
    stmt = select(Application).where(Application.id == application_id)
    return db.execute(stmt).scalars().first()
