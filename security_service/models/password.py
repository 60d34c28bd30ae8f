from pydantic import BaseModel, Field


class SavePasswordRequest(BaseModel):
    value: str = Field(..., min_length=1, max_length=255)


class SavePasswordResponse(BaseModel):
    id: int


class VerifyPasswordRequest(BaseModel):
    value: str = Field(..., max_length=255)
