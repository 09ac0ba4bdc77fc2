"""
Notification Service - workout reminders by email or SMS.

Email goes out over SMTP and SMS through the Twilio REST API. In mock
mode (MOCK_NOTIFICATIONS, or any non-production environment) messages
are logged instead of sent.
"""
import asyncio
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from enum import Enum
from typing import Optional

import httpx

from volleycoach.core.config import Settings, settings as default_settings
from volleycoach.core.logging import get_logger

logger = get_logger(__name__)


class ContactMethod(str, Enum):
    EMAIL = "email"
    SMS = "sms"


class NotificationError(Exception):
    """A notification could not be delivered."""


@dataclass
class EmailNotification:
    to: str
    subject: str
    body: str


@dataclass
class SMSNotification:
    to: str
    message: str


def reminder_message(athlete_name: str, workout_type: str, scheduled_time: str) -> str:
    return (
        f"Hi {athlete_name}! Reminder: You have a {workout_type} workout "
        f"scheduled in 1 hour at {scheduled_time}. Get ready to train!"
    )


class NotificationService:
    """Sends workout reminders, or logs them in mock mode."""

    def __init__(
        self,
        config: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config or default_settings
        self._http_client = http_client

    @property
    def mock_mode(self) -> bool:
        return self.config.MOCK_NOTIFICATIONS or not self.config.is_production

    async def send_email(self, notification: EmailNotification) -> None:
        if self.mock_mode:
            logger.info(
                "Mock email",
                to=notification.to,
                subject=notification.subject,
                body=notification.body,
            )
            return

        if not self.config.SMTP_HOST:
            raise NotificationError("SMTP is not configured")

        message = EmailMessage()
        message["From"] = self.config.SMTP_FROM
        message["To"] = notification.to
        message["Subject"] = notification.subject
        message.set_content(notification.body)

        try:
            await asyncio.to_thread(self._smtp_send, message)
        except (smtplib.SMTPException, OSError) as e:
            logger.error("Email delivery failed", to=notification.to, error=str(e))
            raise NotificationError(f"Failed to send email: {e}") from e

        logger.info("Email sent", to=notification.to)

    def _smtp_send(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.config.SMTP_HOST, self.config.SMTP_PORT, timeout=10) as server:
            server.starttls()
            if self.config.SMTP_USERNAME and self.config.SMTP_PASSWORD:
                server.login(self.config.SMTP_USERNAME, self.config.SMTP_PASSWORD)
            server.send_message(message)

    async def send_sms(self, notification: SMSNotification) -> None:
        if self.mock_mode:
            logger.info("Mock SMS", to=notification.to, message=notification.message)
            return

        sid = self.config.TWILIO_ACCOUNT_SID
        token = self.config.TWILIO_AUTH_TOKEN
        if not (sid and token and self.config.TWILIO_PHONE_NUMBER):
            raise NotificationError("Twilio is not configured")

        url = f"{self.config.TWILIO_API_URL}/Accounts/{sid}/Messages.json"
        data = {
            "To": notification.to,
            "From": self.config.TWILIO_PHONE_NUMBER,
            "Body": notification.message,
        }

        try:
            if self._http_client is not None:
                response = await self._http_client.post(url, data=data, auth=(sid, token))
            else:
                async with httpx.AsyncClient(timeout=10.0) as client:
                    response = await client.post(url, data=data, auth=(sid, token))
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("SMS delivery failed", to=notification.to, error=str(e))
            raise NotificationError(f"Failed to send SMS: {e}") from e

        logger.info("SMS sent", to=notification.to)

    async def send_workout_reminder(
        self,
        athlete_name: str,
        workout_type: str,
        scheduled_time: str,
        contact_method: ContactMethod,
        contact: str,
    ) -> str:
        """
        Send a reminder for an upcoming workout.

        Returns:
            The reminder text that was sent (or logged in mock mode)
        """
        message = reminder_message(athlete_name, workout_type, scheduled_time)

        if ContactMethod(contact_method) == ContactMethod.EMAIL:
            await self.send_email(EmailNotification(
                to=contact,
                subject=f"Workout Reminder: {workout_type}",
                body=message,
            ))
        else:
            await self.send_sms(SMSNotification(to=contact, message=message))

        return message
