# catalog_api/api/routers/health.py
from fastapi import APIRouter, Request

from catalog_api.domain.schemas import HealthOut

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health(request: Request):
    return HealthOut(status="ok", products=len(request.app.state.catalog))
