from abc import ABC, abstractmethod
from typing import Dict, Any


class AuditService(ABC):
    """Service interface for audit event logging"""

    @abstractmethod
    async def log_event(
        self,
        event_type: str,
        actor_id: str,
        resource_type: str,
        resource_id: str,
        metadata: Dict[str, Any] = None,
    ) -> None:
        """
        Log an audit event

        Args:
            event_type: Type of event (e.g. "admin_user_created", "student_updated")
            actor_id: Staff member who triggered the event
            resource_type: Type of resource (e.g. "admin_user", "student_nysc")
            resource_id: ID of the affected resource
            metadata: Additional event metadata
        """
        pass
