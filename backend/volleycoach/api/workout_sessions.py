"""
Workout Sessions API endpoints.
"""
from datetime import date
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from volleycoach.api.deps import get_store
from volleycoach.core.auth import get_current_user_id, resolve_athlete_id
from volleycoach.core.logging import get_logger
from volleycoach.models.session import SessionStatus
from volleycoach.store import Query, Store, StoreError

logger = get_logger(__name__)
router = APIRouter()

SESSIONS = "workout_sessions"


# ========================================
# Request/Response Schemas
# ========================================

class CreateSessionRequest(BaseModel):
    """Request to schedule a single session by hand."""
    training_plan_id: str
    scheduled_date: date
    workout_id: Optional[str] = None
    workout_summary: Optional[str] = None
    workout_title: Optional[str] = None
    exercises: Optional[list[dict[str, Any]]] = None
    athlete_id: Optional[str] = None


class UpdateSessionRequest(BaseModel):
    """Request to record progress on a session."""
    status: Optional[SessionStatus] = None
    notes: Optional[str] = None
    workout_summary: Optional[str] = None


class SessionResponse(BaseModel):
    """Workout session response."""
    id: str
    athlete_id: str
    training_plan_id: str
    workout_id: Optional[str] = None
    scheduled_date: str
    status: SessionStatus
    notes: Optional[str] = None
    workout_summary: Optional[str] = None
    workout_title: Optional[str] = None
    exercises: Optional[list[dict[str, Any]]] = None
    workout: Optional[dict[str, Any]] = Field(None, description="Linked workout, if any")
    created_at: str
    updated_at: str


async def _get_owned(store: Store, session_id: str, athlete_id: str) -> dict:
    session = await store.get(SESSIONS, session_id)
    if not session or session["athlete_id"] != athlete_id:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


async def _attach_workouts(store: Store, sessions: list[dict]) -> list[dict]:
    """Embed each session's linked workout."""
    cache: dict[str, Optional[dict]] = {}
    for session in sessions:
        workout_id = session.get("workout_id")
        if workout_id and workout_id not in cache:
            cache[workout_id] = await store.get("workouts", workout_id)
        session["workout"] = cache.get(workout_id) if workout_id else None
    return sessions


# ========================================
# API Endpoints
# ========================================

@router.get("", response_model=list[SessionResponse])
async def list_sessions(
    athlete_id: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    training_plan_id: Optional[str] = None,
    user_id: str = Depends(get_current_user_id),
    store: Store = Depends(get_store),
):
    """
    Get the athlete's sessions in a date range, earliest first.
    """
    athlete_id = resolve_athlete_id(athlete_id, user_id)

    query = Query(SESSIONS).eq("athlete_id", athlete_id)
    if start_date:
        query.gte("scheduled_date", start_date.isoformat())
    if end_date:
        query.lte("scheduled_date", end_date.isoformat())
    if training_plan_id:
        query.eq("training_plan_id", training_plan_id)

    try:
        sessions = await store.select(query.order("scheduled_date"))
    except StoreError as e:
        logger.error("Session query failed", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to fetch workout sessions")

    return await _attach_workouts(store, sessions)


@router.post("", response_model=SessionResponse, status_code=201)
async def create_session(
    request: CreateSessionRequest,
    user_id: str = Depends(get_current_user_id),
    store: Store = Depends(get_store),
):
    """
    Schedule a single workout session.
    """
    athlete_id = resolve_athlete_id(request.athlete_id, user_id)

    plan = await store.get("training_plans", request.training_plan_id)
    if not plan or plan["athlete_id"] != athlete_id:
        raise HTTPException(status_code=400, detail="Unknown training_plan_id")

    if request.workout_id:
        workout = await store.get("workouts", request.workout_id)
        if not workout or workout["athlete_id"] != athlete_id:
            raise HTTPException(status_code=400, detail="Unknown workout_id")

    values = request.model_dump(exclude={"athlete_id"}, mode="json")
    try:
        session = await store.insert(SESSIONS, {
            **values,
            "athlete_id": athlete_id,
            "status": SessionStatus.SCHEDULED.value,
            "notes": None,
        })
    except StoreError as e:
        logger.error("Session creation failed", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to create workout session")

    logger.info("Session created", session_id=session["id"], plan_id=request.training_plan_id)
    return (await _attach_workouts(store, [session]))[0]


@router.put("/{session_id}", response_model=SessionResponse)
async def update_session(
    session_id: str,
    request: UpdateSessionRequest,
    user_id: str = Depends(get_current_user_id),
    store: Store = Depends(get_store),
):
    """
    Update a session's status, notes or summary.
    """
    await _get_owned(store, session_id, user_id)

    changes = request.model_dump(exclude_unset=True, mode="json")
    if changes.get("status") is None:
        changes.pop("status", None)

    try:
        session = await store.update(SESSIONS, session_id, changes)
    except StoreError as e:
        logger.error("Session update failed", session_id=session_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to update workout session")
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")

    logger.info("Session updated", session_id=session_id, status=session["status"])
    return (await _attach_workouts(store, [session]))[0]


@router.delete("/{session_id}")
async def delete_session(
    session_id: str,
    user_id: str = Depends(get_current_user_id),
    store: Store = Depends(get_store),
):
    """
    Delete a workout session.
    """
    await _get_owned(store, session_id, user_id)
    await store.delete(SESSIONS, session_id)

    logger.info("Session deleted", session_id=session_id)
    return {"message": "Session deleted successfully"}
