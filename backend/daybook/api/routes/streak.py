"""Streak Routes — current streak, missed days and explicit recalculation."""

from datetime import date

from fastapi import APIRouter, Depends

from daybook.api.dependencies import get_streak_service, require_identity
from daybook.core.errors import ValidationError
from daybook.core.identity import Identity
from daybook.schemas.analytics import MissedDaysResponse, StreakResponse
from daybook.services.streak_service import StreakService

router = APIRouter(prefix="/api/v1/streak", tags=["streak"])


@router.get("", response_model=StreakResponse)
async def get_streak(
    identity: Identity = Depends(require_identity),
    service: StreakService = Depends(get_streak_service),
):
    streak = await service.get_streak(identity.user_id)
    return StreakResponse.model_validate(streak) if streak else StreakResponse()


@router.get("/missed-days", response_model=MissedDaysResponse)
async def get_missed_days(
    start: date,
    end: date,
    identity: Identity = Depends(require_identity),
    service: StreakService = Depends(get_streak_service),
):
    if end < start:
        raise ValidationError("End date must not be before start date.", "end")
    return MissedDaysResponse(
        start=start, end=end,
        missed_days=await service.get_missed_days(identity.user_id, start, end),
    )


@router.post("/recalculate", response_model=StreakResponse)
async def recalculate(
    identity: Identity = Depends(require_identity),
    service: StreakService = Depends(get_streak_service),
):
    streak = await service.recalculate(identity.user_id)
    await service.gateway.commit()
    return StreakResponse.model_validate(streak)
