from libs.result import Result, Return
from src.app.services.audit_service import AuditService
from src.app.services.settings_service import SettingsService, UNSTORED_SETTINGS
from .dtos import ClearCacheResponseDTO, SettingsDTO, UpdateSettingsCommand, UpdateSettingsResponseDTO


class GetSystemSettingsUseCase:
    def __init__(self, settings_service: SettingsService):
        self.settings_service = settings_service

    async def execute(self) -> Result[SettingsDTO]:
        return Return.ok(SettingsDTO(settings=await self.settings_service.system_settings()))


class UpdateSystemSettingsUseCase:
    """Use case for storing the provided system settings for one year"""

    def __init__(self, settings_service: SettingsService, audit_service: AuditService):
        self.settings_service = settings_service
        self.audit_service = audit_service

    async def execute(self, command: UpdateSettingsCommand) -> Result[UpdateSettingsResponseDTO]:
        await self.settings_service.put_many(command.values)

        await self.audit_service.log_event(
            event_type="system_settings_updated",
            actor_id=command.actor_id,
            resource_type="settings",
            resource_id="system",
            metadata={"updated_fields": sorted(command.values)},
        )

        return Return.ok(
            UpdateSettingsResponseDTO(message="System settings updated successfully.", settings=command.values)
        )


class GetEmailSettingsUseCase:
    def __init__(self, settings_service: SettingsService):
        self.settings_service = settings_service

    async def execute(self) -> Result[SettingsDTO]:
        return Return.ok(SettingsDTO(settings=await self.settings_service.email_settings()))


class UpdateEmailSettingsUseCase:
    """Use case for storing SMTP settings; the password is never persisted"""

    def __init__(self, settings_service: SettingsService, audit_service: AuditService):
        self.settings_service = settings_service
        self.audit_service = audit_service

    async def execute(self, command: UpdateSettingsCommand) -> Result[UpdateSettingsResponseDTO]:
        await self.settings_service.put_many(command.values)

        await self.audit_service.log_event(
            event_type="email_settings_updated",
            actor_id=command.actor_id,
            resource_type="settings",
            resource_id="email",
            metadata={"updated_fields": sorted(set(command.values) - UNSTORED_SETTINGS)},
        )

        return Return.ok(UpdateSettingsResponseDTO(message="Email settings updated successfully."))


class ClearCacheUseCase:
    def __init__(self, settings_service: SettingsService):
        self.settings_service = settings_service

    async def execute(self) -> Result[ClearCacheResponseDTO]:
        await self.settings_service.clear()
        return Return.ok(ClearCacheResponseDTO())
