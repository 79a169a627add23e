import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from app.core.config import get_settings
from app.core.db import Database
from app.core.errors import ServiceError
from app.core.storage import LocalFileStorage
from app.routes.health import router as health_router
from app.routes.application_files import router as application_files_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

UPLOADS_PREFIX = "/uploads"


@asynccontextmanager
async def lifespan(app: FastAPI):
    os.makedirs(settings.upload_dir, exist_ok=True)
    app.state.storage = LocalFileStorage(
        settings.upload_dir,
        f"{settings.public_base_url.rstrip('/')}{UPLOADS_PREFIX}",
    )
    database = Database(settings.database_url)
    try:
        database.ping()
    except SQLAlchemyError:
        logger.exception("Database connection failed")
        database.dispose()
        raise
    app.state.db = database
    logger.info("Server running at %s", settings.public_base_url)
    try:
        yield
    finally:
        app.state.db.dispose()
        app.state.db = None


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


app.include_router(health_router)
app.include_router(application_files_router)

app.mount(UPLOADS_PREFIX, StaticFiles(directory=settings.upload_dir, check_dir=False), name="uploads")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.port)
