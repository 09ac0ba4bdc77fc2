"""Tests for workout reminders."""

import httpx
import pytest

from volleycoach.core.config import Settings
from volleycoach.services import ContactMethod, NotificationError, NotificationService
from volleycoach.services.notifications import reminder_message


def production_settings(**overrides):
    values = {
        "ENVIRONMENT": "production",
        "MOCK_NOTIFICATIONS": False,
        "TWILIO_ACCOUNT_SID": "AC123",
        "TWILIO_AUTH_TOKEN": "token",
        "TWILIO_PHONE_NUMBER": "+15550001111",
        "TWILIO_API_URL": "https://twilio.test/2010-04-01",
        "SMTP_HOST": "",
    }
    values.update(overrides)
    return Settings(**values)


def test_reminder_message():
    assert reminder_message("Sam", "plyometric", "6:00 PM") == (
        "Hi Sam! Reminder: You have a plyometric workout scheduled in 1 hour "
        "at 6:00 PM. Get ready to train!"
    )


class TestMockMode:
    """Tests for logged-only delivery."""

    def test_non_production_is_mocked(self):
        assert NotificationService(Settings(ENVIRONMENT="development")).mock_mode is True

    def test_flag_forces_mock_in_production(self):
        assert NotificationService(production_settings(MOCK_NOTIFICATIONS=True)).mock_mode is True

    def test_production_sends(self):
        assert NotificationService(production_settings()).mock_mode is False

    async def test_mock_sms_makes_no_request(self):
        def handler(request):
            raise AssertionError("no request expected")

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            service = NotificationService(Settings(ENVIRONMENT="development"), http_client=client)
            message = await service.send_workout_reminder(
                "Sam", "strength", "7:00 AM", ContactMethod.SMS, "+15550002222"
            )

        assert "strength workout" in message

    async def test_mock_email_needs_no_smtp(self):
        service = NotificationService(Settings(ENVIRONMENT="development", SMTP_HOST=""))

        message = await service.send_workout_reminder(
            "Sam", "skills", "5:30 PM", ContactMethod.EMAIL, "sam@example.com"
        )

        assert message.startswith("Hi Sam!")


class TestDelivery:
    """Tests for real delivery paths."""

    async def test_sms_posts_to_twilio(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(201, json={"sid": "SM1"})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            service = NotificationService(production_settings(), http_client=client)
            await service.send_workout_reminder(
                "Sam", "strength", "7:00 AM", "sms", "+15550002222"
            )

        assert len(requests) == 1
        request = requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://twilio.test/2010-04-01/Accounts/AC123/Messages.json"
        assert request.headers["Authorization"].startswith("Basic ")
        form = dict(httpx.QueryParams(request.content.decode()))
        assert form["To"] == "+15550002222"
        assert form["From"] == "+15550001111"
        assert form["Body"].startswith("Hi Sam!")

    async def test_sms_error_status_raises(self):
        def handler(request):
            return httpx.Response(400, json={"message": "invalid number"})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            service = NotificationService(production_settings(), http_client=client)
            with pytest.raises(NotificationError):
                await service.send_workout_reminder("Sam", "strength", "7:00 AM", "sms", "bad")

    async def test_sms_requires_credentials(self):
        service = NotificationService(production_settings(TWILIO_ACCOUNT_SID=""))

        with pytest.raises(NotificationError):
            await service.send_workout_reminder("Sam", "strength", "7:00 AM", "sms", "+15550002222")

    async def test_email_requires_smtp(self):
        service = NotificationService(production_settings(SMTP_HOST=""))

        with pytest.raises(NotificationError):
            await service.send_workout_reminder("Sam", "skills", "5:30 PM", "email", "sam@example.com")

    async def test_unknown_contact_method(self):
        service = NotificationService(Settings(ENVIRONMENT="development"))

        with pytest.raises(ValueError):
            await service.send_workout_reminder("Sam", "skills", "5:30 PM", "pigeon", "coop")
