from .dtos import (
    SystemStatusDTO,
    UpdateSystemControlRequest,
    UpdateSystemControlCommand,
    UpdateSystemControlResponseDTO,
    SettingsDTO,
    UpdateSystemSettingsRequest,
    UpdateEmailSettingsRequest,
    UpdateSettingsCommand,
    UpdateSettingsResponseDTO,
    ClearCacheResponseDTO,
)
from .system_control_use_cases import GetSystemControlUseCase, UpdateSystemControlUseCase
from .settings_use_cases import (
    GetSystemSettingsUseCase,
    UpdateSystemSettingsUseCase,
    GetEmailSettingsUseCase,
    UpdateEmailSettingsUseCase,
    ClearCacheUseCase,
)

__all__ = [
    "SystemStatusDTO",
    "UpdateSystemControlRequest",
    "UpdateSystemControlCommand",
    "UpdateSystemControlResponseDTO",
    "SettingsDTO",
    "UpdateSystemSettingsRequest",
    "UpdateEmailSettingsRequest",
    "UpdateSettingsCommand",
    "UpdateSettingsResponseDTO",
    "ClearCacheResponseDTO",
    "GetSystemControlUseCase",
    "UpdateSystemControlUseCase",
    "GetSystemSettingsUseCase",
    "UpdateSystemSettingsUseCase",
    "GetEmailSettingsUseCase",
    "UpdateEmailSettingsUseCase",
    "ClearCacheUseCase",
]
