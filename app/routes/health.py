from fastapi import APIRouter, Request
from app.controllers.health_controller import read_health
from app.schemas.health_schema import HealthStatus

router = APIRouter()


@router.get("/health", response_model=HealthStatus)
def health(request: Request):
    return read_health(getattr(request.app.state, "db", None))
