from fastapi import APIRouter, Depends

from security_service.dependencies import get_password_service
from security_service.models.password import SavePasswordRequest, SavePasswordResponse, VerifyPasswordRequest
from security_service.services.password_service import PasswordService

router = APIRouter(prefix="/v1/passwords", tags=["Passwords"])


@router.put("/{id}", response_model=SavePasswordResponse)
async def save_password(id: int, req: SavePasswordRequest, service: PasswordService = Depends(get_password_service)):
    """Create or replace the password of an account."""
    password = service.save(id, req.value)
    return SavePasswordResponse(id=password.id)


@router.post("/{id}/verify")
async def verify_password(id: int, req: VerifyPasswordRequest, service: PasswordService = Depends(get_password_service)):
    service.verify(id, req.value)
    return {}


@router.delete("/{id}")
async def delete_password(id: int, service: PasswordService = Depends(get_password_service)):
    service.delete(id)
    return {}
