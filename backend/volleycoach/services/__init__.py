"""
Services module - Application business logic layer.

Modules:
- scheduling: training plan template expansion into dated sessions
- plans: plan lifecycle and activation
- notifications: workout reminders by email or SMS
"""
from volleycoach.services.notifications import NotificationService, NotificationError, ContactMethod
from volleycoach.services.plans import TrainingPlanService, PlanNotFoundError, ActivationResult

__all__ = [
    "NotificationService",
    "NotificationError",
    "ContactMethod",
    "TrainingPlanService",
    "PlanNotFoundError",
    "ActivationResult",
]
