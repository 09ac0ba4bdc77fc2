"""
Shared route dependencies.
"""
from fastapi import Depends, Request

from volleycoach.services import NotificationService, TrainingPlanService
from volleycoach.store import Store


def get_store(request: Request) -> Store:
    """The store chosen at startup."""
    return request.app.state.store


def get_plan_service(store: Store = Depends(get_store)) -> TrainingPlanService:
    return TrainingPlanService(store)


def get_notification_service(request: Request) -> NotificationService:
    return request.app.state.notifier
