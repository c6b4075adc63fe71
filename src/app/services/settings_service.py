"""Portal settings kept in the key-value store under the "nysc." prefix"""
from datetime import datetime, timedelta
from typing import Any, Dict
from src.app.services.key_value_store import KeyValueStore

SETTINGS_PREFIX = "nysc."

REGISTRATION_FEE = 500
LATE_FEE = 10000
DEFAULT_DEADLINE_DAYS = 30

SYSTEM_SETTING_DEFAULTS: Dict[str, Any] = {
    "registration_fee": REGISTRATION_FEE,
    "late_fee": LATE_FEE,
    "system_open": True,
    "system_message": "",
    "contact_email": "admin@nysc.gov.ng",
    "contact_phone": "+234-800-NYSC",
}

EMAIL_SETTING_DEFAULTS: Dict[str, Any] = {
    "smtp_host": "",
    "smtp_port": 587,
    "smtp_username": "",
    "smtp_encryption": "tls",
    "from_email": "",
    "from_name": "NYSC Portal",
}

# Accepted on update but never persisted
UNSTORED_SETTINGS = {"smtp_password"}


def _parse_deadline(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


class SettingsService:
    """Reads and writes portal settings with a fixed expiry"""

    def __init__(self, store: KeyValueStore, ttl_seconds: int):
        self.store = store
        self.ttl_seconds = ttl_seconds

    async def get(self, name: str, default: Any = None) -> Any:
        return await self.store.get(SETTINGS_PREFIX + name, default)

    async def put(self, name: str, value: Any) -> None:
        if isinstance(value, datetime):
            value = value.isoformat()
        await self.store.put(SETTINGS_PREFIX + name, value, self.ttl_seconds)

    async def put_many(self, values: Dict[str, Any]) -> None:
        for name, value in values.items():
            if name in UNSTORED_SETTINGS:
                continue
            await self.put(name, value)

    async def payment_deadline(self) -> datetime:
        stored = await self.get("payment_deadline")
        if stored is None:
            return datetime.utcnow() + timedelta(days=DEFAULT_DEADLINE_DAYS)
        return _parse_deadline(stored)

    async def system_status(self) -> Dict[str, Any]:
        deadline = await self.payment_deadline()
        now = datetime.now(deadline.tzinfo) if deadline.tzinfo else datetime.utcnow()
        is_late = now > deadline
        return {
            "is_open": await self.get("system_open", True),
            "deadline": deadline,
            "is_late_fee": is_late,
            "current_fee": LATE_FEE if is_late else REGISTRATION_FEE,
        }

    async def system_settings(self) -> Dict[str, Any]:
        settings = {name: await self.get(name, default) for name, default in SYSTEM_SETTING_DEFAULTS.items()}
        settings["payment_deadline"] = await self.payment_deadline()
        return settings

    async def email_settings(self) -> Dict[str, Any]:
        return {name: await self.get(name, default) for name, default in EMAIL_SETTING_DEFAULTS.items()}

    async def clear(self) -> None:
        await self.store.flush()
