from pydantic import BaseModel, Field


class CreateOtpRequest(BaseModel):
    type: str
    address: str = Field(..., min_length=1, max_length=255)


class CreateOtpResponse(BaseModel):
    token: str


class VerifyOtpRequest(BaseModel):
    code: str = Field(..., min_length=1, max_length=10)
