from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SendOtpRequest(BaseModel):
    email: Optional[str] = None


class VerifyOtpRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    otp_id: Optional[str] = Field(None, alias="otpId")
    otp: Optional[str] = None
