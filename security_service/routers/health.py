from fastapi import APIRouter, Depends

from security_service.dependencies import get_otp_repository
from security_service.models.common import HealthResponse, ReadyResponse
from security_service.storage.repository import Repository

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok")


@router.get("/ready", response_model=ReadyResponse)
async def ready(repository: Repository = Depends(get_otp_repository)):
    try:
        repository.ping()
        return ReadyResponse(status="ready", storage=True)
    except Exception as e:
        return ReadyResponse(status="degraded", storage=False, detail=str(e))
