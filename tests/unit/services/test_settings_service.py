"""
Unit tests for SettingsService
"""
from datetime import datetime, timedelta
import pytest
from src.adapter.services.in_memory_key_value_store import InMemoryKeyValueStore
from src.app.services.settings_service import LATE_FEE, REGISTRATION_FEE, SettingsService


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def settings_service(store):
    return SettingsService(store, ttl_seconds=3600)


@pytest.mark.asyncio
async def test_default_system_status_is_open_with_standard_fee(settings_service):
    status = await settings_service.system_status()

    assert status["is_open"] is True
    assert status["is_late_fee"] is False
    assert status["current_fee"] == REGISTRATION_FEE
    assert status["deadline"] > datetime.utcnow() + timedelta(days=29)


@pytest.mark.asyncio
async def test_past_deadline_switches_to_late_fee(settings_service):
    await settings_service.put("payment_deadline", datetime.utcnow() - timedelta(days=1))

    status = await settings_service.system_status()

    assert status["is_late_fee"] is True
    assert status["current_fee"] == LATE_FEE


@pytest.mark.asyncio
async def test_settings_are_stored_under_nysc_prefix(settings_service, store):
    await settings_service.put_many({"system_open": False, "contact_phone": "0800"})

    assert await store.get("nysc.system_open") is False
    assert await store.get("nysc.contact_phone") == "0800"


@pytest.mark.asyncio
async def test_smtp_password_is_never_stored(settings_service, store):
    await settings_service.put_many({"smtp_host": "smtp.example.com", "smtp_password": "secret"})

    assert await store.get("nysc.smtp_host") == "smtp.example.com"
    assert await store.keys("nysc.smtp_password") == []
    assert "smtp_password" not in await settings_service.email_settings()


@pytest.mark.asyncio
async def test_email_settings_defaults(settings_service):
    settings = await settings_service.email_settings()

    assert settings["smtp_port"] == 587
    assert settings["smtp_encryption"] == "tls"
    assert settings["from_name"] == "NYSC Portal"


@pytest.mark.asyncio
async def test_clear_removes_stored_settings(settings_service):
    await settings_service.put("system_open", False)

    await settings_service.clear()

    assert (await settings_service.system_settings())["system_open"] is True
