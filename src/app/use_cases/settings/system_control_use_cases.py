from libs.result import Result, Return
from src.app.services.audit_service import AuditService
from src.app.services.settings_service import SettingsService
from .dtos import SystemStatusDTO, UpdateSystemControlCommand, UpdateSystemControlResponseDTO


class GetSystemControlUseCase:
    def __init__(self, settings_service: SettingsService):
        self.settings_service = settings_service

    async def execute(self) -> Result[SystemStatusDTO]:
        return Return.ok(SystemStatusDTO(system_status=await self.settings_service.system_status()))


class UpdateSystemControlUseCase:
    """Use case for opening or closing the update window and moving the deadline"""

    def __init__(self, settings_service: SettingsService, audit_service: AuditService):
        self.settings_service = settings_service
        self.audit_service = audit_service

    async def execute(self, command: UpdateSystemControlCommand) -> Result[UpdateSystemControlResponseDTO]:
        await self.settings_service.put_many({"system_open": command.open, "payment_deadline": command.deadline})

        await self.audit_service.log_event(
            event_type="system_control_updated",
            actor_id=command.actor_id,
            resource_type="settings",
            resource_id="system_control",
            metadata={"open": command.open, "deadline": command.deadline.isoformat()},
        )

        return Return.ok(
            UpdateSystemControlResponseDTO(system_status=await self.settings_service.system_status())
        )
