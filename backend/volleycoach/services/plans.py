"""
Training Plan Service - plan lifecycle and session generation.

Activation makes a plan the athlete's only active plan and replaces
its not-yet-trained sessions with a freshly generated schedule.
"""
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from volleycoach.core.config import settings
from volleycoach.core.logging import get_logger, log_duration
from volleycoach.models.session import SessionStatus
from volleycoach.services.scheduling import generate_sessions, parse_phases, template_span_days
from volleycoach.services.scheduling.dates import format_date, to_calendar_date
from volleycoach.store import Query, Store
from volleycoach.templates import get_template

logger = get_logger(__name__)

PLANS = "training_plans"
SESSIONS = "workout_sessions"


class PlanNotFoundError(LookupError):
    """The plan does not exist or belongs to another athlete."""

    def __init__(self, plan_id: str):
        self.plan_id = plan_id
        super().__init__(f"Training plan not found: {plan_id}")


@dataclass
class ActivationResult:
    """Outcome of activating a plan."""
    plan: Dict[str, Any]
    sessions: List[Dict[str, Any]] = field(default_factory=list)
    removed_sessions: int = 0


def _check_date_order(start: Optional[str], end: Optional[str]) -> None:
    if start and end and to_calendar_date(start) > to_calendar_date(end):
        raise ValueError("start_date must be on or before end_date")


def _normalize_phases(phases: Optional[List[Dict[str, Any]]]) -> Optional[List[Dict[str, Any]]]:
    if phases is None:
        return None
    return [phase.to_dict() for phase in parse_phases(phases)]


class TrainingPlanService:
    """Plan operations on top of the row store."""

    def __init__(self, store: Store):
        self.store = store

    async def get_plan(self, plan_id: str, athlete_id: str) -> Dict[str, Any]:
        """
        Get a plan owned by the athlete.

        Raises:
            PlanNotFoundError: if missing or owned by someone else
        """
        plan = await self.store.get(PLANS, plan_id)
        if plan is None or plan["athlete_id"] != athlete_id:
            raise PlanNotFoundError(plan_id)
        return plan

    async def list_plans(
        self,
        athlete_id: str,
        is_active: Optional[bool] = None
    ) -> List[Dict[str, Any]]:
        query = Query(PLANS).eq("athlete_id", athlete_id)
        if is_active is not None:
            query.eq("is_active", is_active)
        return await self.store.select(query.order("created_at", descending=True))

    async def create_plan(self, athlete_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create an inactive plan.

        ``template_id`` must name a built-in template; inline ``phases``
        take precedence over it at activation time.
        """
        _check_date_order(data.get("start_date"), data.get("end_date"))

        template_id = data.get("template_id")
        if template_id and get_template(template_id) is None:
            raise ValueError(f"Unknown template: {template_id}")

        values = {
            **data,
            "athlete_id": athlete_id,
            "is_active": False,
            "phases": _normalize_phases(data.get("phases")),
        }
        plan = await self.store.insert(PLANS, values)

        logger.info("Plan created", plan_id=plan["id"], athlete_id=athlete_id)
        return plan

    async def update_plan(
        self,
        plan_id: str,
        athlete_id: str,
        changes: Dict[str, Any]
    ) -> Dict[str, Any]:
        plan = await self.get_plan(plan_id, athlete_id)
        _check_date_order(
            changes.get("start_date", plan.get("start_date")),
            changes.get("end_date", plan.get("end_date")),
        )

        template_id = changes.get("template_id")
        if template_id and get_template(template_id) is None:
            raise ValueError(f"Unknown template: {template_id}")
        if "phases" in changes:
            changes = {**changes, "phases": _normalize_phases(changes["phases"])}

        updated = await self.store.update(PLANS, plan_id, changes)
        if updated is None:
            raise PlanNotFoundError(plan_id)

        logger.info("Plan updated", plan_id=plan_id, fields=sorted(changes))
        return updated

    async def delete_plan(self, plan_id: str, athlete_id: str) -> None:
        await self.get_plan(plan_id, athlete_id)
        removed = await self.store.delete_where(Query(SESSIONS).eq("training_plan_id", plan_id))
        await self.store.delete(PLANS, plan_id)
        logger.info("Plan deleted", plan_id=plan_id, removed_sessions=removed)

    async def deactivate_plan(self, plan_id: str, athlete_id: str) -> Dict[str, Any]:
        await self.get_plan(plan_id, athlete_id)
        plan = await self.store.update(PLANS, plan_id, {"is_active": False})
        logger.info("Plan deactivated", plan_id=plan_id)
        return plan

    def _resolve_phases(
        self,
        plan: Dict[str, Any],
        phases: Optional[List[Dict[str, Any]]]
    ) -> List[Dict[str, Any]]:
        if phases is not None:
            return phases
        if plan.get("phases"):
            return plan["phases"]
        if plan.get("template_id"):
            template = get_template(plan["template_id"])
            if template is not None:
                return template["phases"]
            logger.warning("Plan references unknown template", plan_id=plan["id"],
                           template_id=plan["template_id"])
        return []

    @staticmethod
    def _resolve_bounds(plan: Dict[str, Any], phases: List[Dict[str, Any]]) -> tuple[date, date]:
        start = to_calendar_date(plan["start_date"]) if plan.get("start_date") else date.today()
        if plan.get("end_date"):
            return start, to_calendar_date(plan["end_date"])

        span = template_span_days(parse_phases(phases)) if phases else 0
        if span <= 0:
            span = settings.DEFAULT_PLAN_WEEKS * 7
        return start, start + timedelta(days=span - 1)

    async def activate_plan(
        self,
        plan_id: str,
        athlete_id: str,
        phases: Optional[List[Dict[str, Any]]] = None,
    ) -> ActivationResult:
        """
        Activate a plan and regenerate its sessions.

        Steps:
        1. Resolve the template (request > stored phases > catalog template)
        2. Resolve date bounds, deriving missing ones from the template
        3. Insert the generated sessions in one batch
        4. Remove the plan's previous sessions still in "scheduled" status
        5. Deactivate the athlete's other plans and activate this one

        Raises:
            PlanNotFoundError: if the plan is missing or not the athlete's
            BulkInsertError: if the generated sessions could not be stored;
                the plan and its existing sessions are left untouched
        """
        plan = await self.get_plan(plan_id, athlete_id)

        normalized = _normalize_phases(phases)
        template = self._resolve_phases(plan, normalized)
        start, end = self._resolve_bounds(plan, template)

        drafts = generate_sessions(plan_id, athlete_id, start, end, template)

        stale = await self.store.select(
            Query(SESSIONS)
            .eq("training_plan_id", plan_id)
            .eq("status", SessionStatus.SCHEDULED.value)
        )

        with log_duration(logger, "Sessions persisted", plan_id=plan_id) as ctx:
            sessions = await self.store.insert_many(SESSIONS, [d.to_dict() for d in drafts])
            ctx["count"] = len(sessions)

        for session in stale:
            await self.store.delete(SESSIONS, session["id"])

        deactivated = await self.store.update_where(
            Query(PLANS).eq("athlete_id", athlete_id).neq("id", plan_id).eq("is_active", True),
            {"is_active": False},
        )

        changes: Dict[str, Any] = {
            "is_active": True,
            "start_date": format_date(start),
            "end_date": format_date(end),
        }
        if normalized is not None:
            changes["phases"] = normalized
        activated = await self.store.update(PLANS, plan_id, changes)

        logger.info(
            "Plan activated",
            plan_id=plan_id,
            athlete_id=athlete_id,
            sessions=len(sessions),
            removed_sessions=len(stale),
            deactivated_plans=deactivated,
        )
        return ActivationResult(plan=activated, sessions=sessions, removed_sessions=len(stale))
