from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker


class Database:
    """Owns the engine (connection pool) and the session factory.

    Built once at application startup and disposed on shutdown; routes reach it
    through ``get_db`` instead of a module-level pool.
    """

    def __init__(self, url: str, **engine_kwargs):
        engine_kwargs.setdefault("pool_pre_ping", True)
        self.engine = create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def ping(self) -> None:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request):
    database: Database | None = getattr(request.app.state, "db", None)
    if database is None:
        raise RuntimeError("Database is not initialised")
    db = database.session()
    try:
        yield db
    finally:
        db.close()
