"""
Notifications API endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from volleycoach.api.deps import get_notification_service
from volleycoach.core.auth import get_current_user_id
from volleycoach.core.logging import get_logger
from volleycoach.services import ContactMethod, NotificationError, NotificationService

logger = get_logger(__name__)
router = APIRouter()


class ReminderRequest(BaseModel):
    """Request to send a workout reminder."""
    contact_method: ContactMethod
    contact: str = Field(..., min_length=3, description="Email address or phone number")
    athlete_name: str = Field(..., min_length=1)
    workout_type: str = Field(..., min_length=1)
    scheduled_time: str = Field(..., min_length=1, description="Display time, e.g. 18:30")


class ReminderResponse(BaseModel):
    """Reminder delivery result."""
    sent: bool
    mocked: bool
    message: str


@router.post("/reminders", response_model=ReminderResponse)
async def send_reminder(
    request: ReminderRequest,
    user_id: str = Depends(get_current_user_id),
    notifier: NotificationService = Depends(get_notification_service),
):
    """
    Send (or, in mock mode, log) a workout reminder.
    """
    try:
        message = await notifier.send_workout_reminder(
            athlete_name=request.athlete_name,
            workout_type=request.workout_type,
            scheduled_time=request.scheduled_time,
            contact_method=request.contact_method,
            contact=request.contact,
        )
    except NotificationError as e:
        logger.warning("Reminder not delivered", user_id=user_id, error=str(e))
        raise HTTPException(status_code=502, detail=str(e))

    logger.info("Reminder sent", user_id=user_id, method=request.contact_method.value)
    return ReminderResponse(sent=True, mocked=notifier.mock_mode, message=message)
