"""Analytics Routes — windowed aggregates and the dashboard.

Invariants:
    - start/end query params are optional and inclusive
    - Date-keyed maps serialized with ISO date keys
"""

from datetime import date

from fastapi import APIRouter, Depends, Query

from daybook.api.dependencies import get_analytics_service, require_identity
from daybook.core.domain_types import DEFAULT_TOP_TAGS
from daybook.core.identity import Identity
from daybook.schemas.analytics import (
    AverageWordCount, MoodCount, StatsResponse, TagCount,
)
from daybook.schemas.catalog import MoodResponse, TagResponse
from daybook.services.analytics_service import AnalyticsService

router = APIRouter(prefix="/api/v1/analytics", tags=["analytics"])


@router.get("/mood-distribution", response_model=dict[str, float])
async def mood_distribution(
    start: date | None = None,
    end: date | None = None,
    identity: Identity = Depends(require_identity),
    service: AnalyticsService = Depends(get_analytics_service),
):
    distribution = await service.mood_distribution(identity, start, end)
    return {category.value: share for category, share in distribution.items()}


@router.get("/most-frequent-mood", response_model=MoodCount | None)
async def most_frequent_mood(
    start: date | None = None,
    end: date | None = None,
    identity: Identity = Depends(require_identity),
    service: AnalyticsService = Depends(get_analytics_service),
):
    found = await service.most_frequent_mood(identity, start, end)
    if found is None:
        return None
    mood, count = found
    return MoodCount(mood=MoodResponse.model_validate(mood), count=count)


@router.get("/top-tags", response_model=list[TagCount])
async def most_used_tags(
    start: date | None = None,
    end: date | None = None,
    top_n: int = Query(DEFAULT_TOP_TAGS, ge=1, le=100),
    identity: Identity = Depends(require_identity),
    service: AnalyticsService = Depends(get_analytics_service),
):
    ranked = await service.most_used_tags(identity, start, end, top_n)
    return [
        TagCount(tag=TagResponse.model_validate(tag), count=count)
        for tag, count in ranked
    ]


@router.get("/tag-breakdown", response_model=dict[str, float])
async def tag_breakdown(
    start: date | None = None,
    end: date | None = None,
    identity: Identity = Depends(require_identity),
    service: AnalyticsService = Depends(get_analytics_service),
):
    return await service.tag_breakdown(identity, start, end)


@router.get("/average-word-count", response_model=AverageWordCount)
async def average_word_count(
    start: date | None = None,
    end: date | None = None,
    identity: Identity = Depends(require_identity),
    service: AnalyticsService = Depends(get_analytics_service),
):
    return AverageWordCount(
        average_word_count=await service.average_word_count(identity, start, end),
    )


@router.get("/word-count-trend", response_model=dict[str, int])
async def word_count_trend(
    start: date | None = None,
    end: date | None = None,
    identity: Identity = Depends(require_identity),
    service: AnalyticsService = Depends(get_analytics_service),
):
    trend = await service.word_count_trend(identity, start, end)
    return {day.isoformat(): words for day, words in trend.items()}


@router.get("/word-count-trend/recent", response_model=dict[str, int])
async def recent_word_count_trend(
    last_n: int = Query(30, ge=1, le=365),
    identity: Identity = Depends(require_identity),
    service: AnalyticsService = Depends(get_analytics_service),
):
    trend = await service.recent_word_count_trend(identity, last_n)
    return {day.isoformat(): words for day, words in trend.items()}


@router.get("/dashboard", response_model=StatsResponse)
async def dashboard(
    start: date | None = None,
    end: date | None = None,
    identity: Identity = Depends(require_identity),
    service: AnalyticsService = Depends(get_analytics_service),
):
    return StatsResponse.model_validate(
        await service.dashboard_stats(identity, start, end),
    )
