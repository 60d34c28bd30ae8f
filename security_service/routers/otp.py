from fastapi import APIRouter, Depends

from security_service.dependencies import get_otp_service
from security_service.models.otp import CreateOtpRequest, CreateOtpResponse, VerifyOtpRequest
from security_service.services.otp_service import OtpService

router = APIRouter(prefix="/v1/otp", tags=["OTP"])


@router.post("", response_model=CreateOtpResponse)
async def create_otp(req: CreateOtpRequest, service: OtpService = Depends(get_otp_service)):
    """Generate an OTP and send it to the address through the channel given by type."""
    otp = service.create(address=req.address, type=req.type)
    return CreateOtpResponse(token=otp.token)


@router.post("/{token}/verify")
async def verify_otp(token: str, req: VerifyOtpRequest, service: OtpService = Depends(get_otp_service)):
    service.verify(token, req.code)
    return {}
