"""
Training Plans API endpoints.
"""
from datetime import date
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel, Field

from volleycoach.api.deps import get_plan_service
from volleycoach.core.auth import get_current_user_id, resolve_athlete_id
from volleycoach.core.logging import get_logger
from volleycoach.models.plan import PhaseType
from volleycoach.services import PlanNotFoundError, TrainingPlanService
from volleycoach.store import BulkInsertError, StoreError

logger = get_logger(__name__)
router = APIRouter()


# ========================================
# Request/Response Schemas
# ========================================

class CreatePlanRequest(BaseModel):
    """Request to create a training plan."""
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    phase_type: PhaseType
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    template_id: Optional[str] = Field(None, description="Built-in template to schedule from")
    phases: Optional[list[dict[str, Any]]] = Field(None, description="Inline phase template")
    athlete_id: Optional[str] = None


class UpdatePlanRequest(BaseModel):
    """Request to update a plan; only sent fields change."""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    phase_type: Optional[PhaseType] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    template_id: Optional[str] = None
    phases: Optional[list[dict[str, Any]]] = None


class ActivatePlanRequest(BaseModel):
    """Optional template supplied at activation time."""
    phases: Optional[list[dict[str, Any]]] = Field(
        None, description="Phases to schedule from; overrides the stored template"
    )


class PlanResponse(BaseModel):
    """Training plan response."""
    id: str
    athlete_id: str
    name: str
    description: Optional[str] = None
    phase_type: str
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    is_active: bool = False
    template_id: Optional[str] = None
    phases: Optional[list[dict[str, Any]]] = None
    created_at: str
    updated_at: str


class ActivatePlanResponse(PlanResponse):
    """Activated plan with session generation counts."""
    sessions_created: int = 0
    sessions_removed: int = 0


# ========================================
# API Endpoints
# ========================================

@router.get("", response_model=list[PlanResponse])
async def list_plans(
    athlete_id: Optional[str] = None,
    is_active: Optional[bool] = None,
    user_id: str = Depends(get_current_user_id),
    service: TrainingPlanService = Depends(get_plan_service),
):
    """
    Get the athlete's training plans, newest first.
    """
    athlete_id = resolve_athlete_id(athlete_id, user_id)
    return await service.list_plans(athlete_id, is_active=is_active)


@router.get("/{plan_id}", response_model=PlanResponse)
async def get_plan(
    plan_id: str,
    user_id: str = Depends(get_current_user_id),
    service: TrainingPlanService = Depends(get_plan_service),
):
    """
    Get a specific training plan by ID.
    """
    try:
        return await service.get_plan(plan_id, user_id)
    except PlanNotFoundError:
        raise HTTPException(status_code=404, detail="Training plan not found")


@router.post("", response_model=PlanResponse, status_code=201)
async def create_plan(
    request: CreatePlanRequest,
    user_id: str = Depends(get_current_user_id),
    service: TrainingPlanService = Depends(get_plan_service),
):
    """
    Create a new (inactive) training plan.
    """
    athlete_id = resolve_athlete_id(request.athlete_id, user_id)
    data = request.model_dump(exclude={"athlete_id"}, mode="json")

    try:
        return await service.create_plan(athlete_id, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StoreError as e:
        logger.error("Plan creation failed", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to create training plan")


@router.put("/{plan_id}", response_model=PlanResponse)
async def update_plan(
    plan_id: str,
    request: UpdatePlanRequest,
    user_id: str = Depends(get_current_user_id),
    service: TrainingPlanService = Depends(get_plan_service),
):
    """
    Update training plan fields.
    """
    changes = request.model_dump(exclude_unset=True, mode="json")
    # name and phase_type cannot be cleared
    for column in ("name", "phase_type"):
        if column in changes and changes[column] is None:
            changes.pop(column)

    try:
        return await service.update_plan(plan_id, user_id, changes)
    except PlanNotFoundError:
        raise HTTPException(status_code=404, detail="Training plan not found")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StoreError as e:
        logger.error("Plan update failed", plan_id=plan_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to update training plan")


@router.post("/{plan_id}/activate", response_model=ActivatePlanResponse)
async def activate_plan(
    plan_id: str,
    request: Optional[ActivatePlanRequest] = None,
    user_id: str = Depends(get_current_user_id),
    service: TrainingPlanService = Depends(get_plan_service),
):
    """
    Activate a plan for its athlete and generate its workout sessions.

    All other plans of the athlete are deactivated. Sessions of this
    plan that are still "scheduled" are replaced; completed, partial
    and skipped sessions are kept.
    """
    phases = request.phases if request else None

    try:
        result = await service.activate_plan(plan_id, user_id, phases=phases)
    except PlanNotFoundError:
        raise HTTPException(status_code=404, detail="Training plan not found")
    except BulkInsertError as e:
        logger.error("Session generation could not be stored", plan_id=plan_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to store generated sessions")

    return ActivatePlanResponse(
        **result.plan,
        sessions_created=len(result.sessions),
        sessions_removed=result.removed_sessions,
    )


@router.post("/{plan_id}/deactivate", response_model=PlanResponse)
async def deactivate_plan(
    plan_id: str,
    user_id: str = Depends(get_current_user_id),
    service: TrainingPlanService = Depends(get_plan_service),
):
    """
    Deactivate a plan. Its sessions are kept.
    """
    try:
        return await service.deactivate_plan(plan_id, user_id)
    except PlanNotFoundError:
        raise HTTPException(status_code=404, detail="Training plan not found")


@router.delete("/{plan_id}", status_code=204)
async def delete_plan(
    plan_id: str,
    user_id: str = Depends(get_current_user_id),
    service: TrainingPlanService = Depends(get_plan_service),
):
    """
    Delete a training plan and its sessions.
    """
    try:
        await service.delete_plan(plan_id, user_id)
    except PlanNotFoundError:
        raise HTTPException(status_code=404, detail="Training plan not found")

    return Response(status_code=204)
