from datetime import datetime
from typing import Any, Dict, Optional
from pydantic import BaseModel, EmailStr, Field
from src.domain import SmtpEncryption


class SystemStatusDTO(BaseModel):
    system_status: Dict[str, Any]


class UpdateSystemControlRequest(BaseModel):
    open: bool
    deadline: datetime


class UpdateSystemControlCommand(UpdateSystemControlRequest):
    actor_id: str  # For audit logging


class UpdateSystemControlResponseDTO(BaseModel):
    message: str = "System settings updated successfully."
    system_status: Dict[str, Any]


class SettingsDTO(BaseModel):
    settings: Dict[str, Any]


class UpdateSystemSettingsRequest(BaseModel):
    registration_fee: Optional[int] = Field(default=None, ge=0)
    late_fee: Optional[int] = Field(default=None, ge=0)
    payment_deadline: Optional[datetime] = None
    system_open: Optional[bool] = None
    system_message: Optional[str] = Field(default=None, max_length=1000)
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = Field(default=None, max_length=20)


class UpdateEmailSettingsRequest(BaseModel):
    smtp_host: Optional[str] = Field(default=None, max_length=255)
    smtp_port: Optional[int] = Field(default=None, ge=1, le=65535)
    smtp_username: Optional[str] = Field(default=None, max_length=255)
    smtp_password: Optional[str] = Field(default=None, max_length=255)
    smtp_encryption: Optional[SmtpEncryption] = None
    from_email: Optional[EmailStr] = None
    from_name: Optional[str] = Field(default=None, max_length=255)

    class Config:
        use_enum_values = True


class UpdateSettingsCommand(BaseModel):
    """Only the provided values; absent fields keep their stored value"""

    values: Dict[str, Any]
    actor_id: str  # For audit logging


class UpdateSettingsResponseDTO(BaseModel):
    message: str
    settings: Optional[Dict[str, Any]] = None


class ClearCacheResponseDTO(BaseModel):
    success: bool = True
    message: str = "Cache cleared successfully"
