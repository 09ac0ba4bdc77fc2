"""
Workouts API endpoints.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel, Field

from volleycoach.api.deps import get_store
from volleycoach.core.auth import get_current_user_id, resolve_athlete_id
from volleycoach.core.logging import get_logger
from volleycoach.models.workout import WorkoutType
from volleycoach.store import Query, Store, StoreError

logger = get_logger(__name__)
router = APIRouter()

WORKOUTS = "workouts"


# ========================================
# Request/Response Schemas
# ========================================

class WorkoutFields(BaseModel):
    """Optional workout attributes."""
    duration_minutes: Optional[int] = Field(None, ge=0)
    sets: Optional[int] = Field(None, ge=0)
    reps: Optional[int] = Field(None, ge=0)
    intensity_rpe: Optional[int] = Field(None, ge=1, le=10, description="RPE on a 1-10 scale")
    description: Optional[str] = None


class CreateWorkoutRequest(WorkoutFields):
    """Request to create a workout."""
    name: str = Field(..., min_length=1)
    type: WorkoutType
    athlete_id: Optional[str] = None


class UpdateWorkoutRequest(WorkoutFields):
    """Request to update a workout; only sent fields change."""
    name: Optional[str] = Field(None, min_length=1)
    type: Optional[WorkoutType] = None


class WorkoutResponse(WorkoutFields):
    """Workout response."""
    id: str
    athlete_id: str
    name: str
    type: str
    created_at: str
    updated_at: str


async def _get_owned(store: Store, workout_id: str, athlete_id: str) -> dict:
    workout = await store.get(WORKOUTS, workout_id)
    if not workout or workout["athlete_id"] != athlete_id:
        raise HTTPException(status_code=404, detail="Workout not found")
    return workout


# ========================================
# API Endpoints
# ========================================

@router.get("", response_model=list[WorkoutResponse])
async def list_workouts(
    athlete_id: Optional[str] = None,
    user_id: str = Depends(get_current_user_id),
    store: Store = Depends(get_store),
):
    """
    Get the athlete's workouts, newest first.
    """
    athlete_id = resolve_athlete_id(athlete_id, user_id)
    return await store.select(
        Query(WORKOUTS).eq("athlete_id", athlete_id).order("created_at", descending=True)
    )


@router.get("/{workout_id}", response_model=WorkoutResponse)
async def get_workout(
    workout_id: str,
    user_id: str = Depends(get_current_user_id),
    store: Store = Depends(get_store),
):
    """
    Get a specific workout by ID.
    """
    return await _get_owned(store, workout_id, user_id)


@router.post("", response_model=WorkoutResponse, status_code=201)
async def create_workout(
    request: CreateWorkoutRequest,
    user_id: str = Depends(get_current_user_id),
    store: Store = Depends(get_store),
):
    """
    Create a new workout.
    """
    athlete_id = resolve_athlete_id(request.athlete_id, user_id)
    values = request.model_dump(exclude={"athlete_id"}, mode="json")

    try:
        workout = await store.insert(WORKOUTS, {**values, "athlete_id": athlete_id})
    except StoreError as e:
        logger.error("Workout creation failed", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to create workout")

    logger.info("Workout created", workout_id=workout["id"])
    return workout


@router.put("/{workout_id}", response_model=WorkoutResponse)
async def update_workout(
    workout_id: str,
    request: UpdateWorkoutRequest,
    user_id: str = Depends(get_current_user_id),
    store: Store = Depends(get_store),
):
    """
    Update a workout.
    """
    await _get_owned(store, workout_id, user_id)

    changes = request.model_dump(exclude_unset=True, mode="json")
    # name and type cannot be cleared
    for column in ("name", "type"):
        if column in changes and changes[column] is None:
            changes.pop(column)

    try:
        workout = await store.update(WORKOUTS, workout_id, changes)
    except StoreError as e:
        logger.error("Workout update failed", workout_id=workout_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to update workout")
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")

    logger.info("Workout updated", workout_id=workout_id)
    return workout


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(
    workout_id: str,
    user_id: str = Depends(get_current_user_id),
    store: Store = Depends(get_store),
):
    """
    Delete a workout. Sessions linking to it keep their summary.
    """
    await _get_owned(store, workout_id, user_id)

    await store.update_where(
        Query("workout_sessions").eq("workout_id", workout_id),
        {"workout_id": None},
    )
    await store.delete(WORKOUTS, workout_id)

    logger.info("Workout deleted", workout_id=workout_id)
    return Response(status_code=204)
