import logging
from sqlalchemy.exc import SQLAlchemyError
from app.core.db import Database

logger = logging.getLogger(__name__)


def read_health(database: Database | None) -> dict:
    db_state = "unavailable"
    if database is not None:
        try:
            database.ping()
            db_state = "ok"
        except SQLAlchemyError:
            logger.warning("Database health check failed", exc_info=True)
    return {"status": "ok", "database": db_state}
