from pydantic import BaseModel
import os
from typing import Optional
from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()


class Settings(BaseModel):
    database_url: str
    upload_dir: str = "Uploads"
    public_base_url: str = "http://localhost:3811"
    max_upload_bytes: int = 10 * 1024 * 1024
    max_files: int = 10
    cors_allow_origins: list[str] = ["*"]
    log_level: str = "INFO"
    port: int = 3811


_settings: Optional[Settings] = None


def build_database_url() -> str:
    database_url = os.getenv("DATABASE_URL", "")
    if database_url:
        return database_url
    url = URL.create(
        "postgresql+psycopg",
        username=os.getenv("DB_USER", "postgres"),
        password=os.getenv("DB_PASSWORD") or None,
        host=os.getenv("DB_HOST", "postgres"),
        port=int(os.getenv("DB_PORT", "5432")),
        database=os.getenv("DB_NAME", "job_applications"),
    )
    return url.render_as_string(hide_password=False)


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings(
            database_url=build_database_url(),
            upload_dir=os.getenv("UPLOAD_DIR", "Uploads"),
            public_base_url=os.getenv("PUBLIC_BASE_URL", "http://localhost:3811"),
            max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024))),
            max_files=int(os.getenv("MAX_FILES", "10")),
            cors_allow_origins=[
                origin.strip() for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if origin.strip()
            ],
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            port=int(os.getenv("PORT", "3811")),
        )
    return _settings
