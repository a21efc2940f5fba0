"""API Dependencies — per-request gateway, bearer-token identity and services.

Invariants:
    - One JournalGateway (one AsyncSession) per request, shared by every service
    - A missing or unknown bearer token resolves to None; require_identity
      turns that into AuthenticationError (401)
    - The SessionRegistry is process-wide (single-process deployment)
"""

from functools import lru_cache

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from daybook.config import get_settings
from daybook.core.errors import AuthenticationError
from daybook.core.identity import Identity, SessionRegistry
from daybook.infrastructure.database import get_db
from daybook.infrastructure.repositories import JournalGateway
from daybook.services.analytics_service import AnalyticsService
from daybook.services.catalog_service import CatalogService
from daybook.services.entry_service import EntryService
from daybook.services.export_service import ExportService
from daybook.services.identity_service import IdentityService
from daybook.services.search_service import SearchService
from daybook.services.streak_service import StreakService
from daybook.services.tag_service import TagService

bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache
def get_session_registry() -> SessionRegistry:
    return SessionRegistry(token_bytes=get_settings().session_token_bytes)


def get_gateway(db: AsyncSession = Depends(get_db)) -> JournalGateway:
    return JournalGateway(db)


def get_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str | None:
    return credentials.credentials if credentials else None


def get_identity(
    token: str | None = Depends(get_bearer_token),
    sessions: SessionRegistry = Depends(get_session_registry),
) -> Identity | None:
    return sessions.resolve(token)


def require_identity(identity: Identity | None = Depends(get_identity)) -> Identity:
    if identity is None:
        raise AuthenticationError()
    return identity


# ─── Services ────────────────────────────────────────────────────

def get_identity_service(
    gateway: JournalGateway = Depends(get_gateway),
    sessions: SessionRegistry = Depends(get_session_registry),
) -> IdentityService:
    settings = get_settings()
    return IdentityService(
        gateway, sessions,
        iterations=settings.password_iterations,
        salt_bytes=settings.salt_bytes,
    )


def get_streak_service(gateway: JournalGateway = Depends(get_gateway)) -> StreakService:
    return StreakService(gateway)


def get_entry_service(
    gateway: JournalGateway = Depends(get_gateway),
    streaks: StreakService = Depends(get_streak_service),
) -> EntryService:
    return EntryService(gateway, streaks)


def get_search_service(gateway: JournalGateway = Depends(get_gateway)) -> SearchService:
    return SearchService(gateway)


def get_analytics_service(
    gateway: JournalGateway = Depends(get_gateway),
    streaks: StreakService = Depends(get_streak_service),
) -> AnalyticsService:
    return AnalyticsService(gateway, streaks)


def get_tag_service(gateway: JournalGateway = Depends(get_gateway)) -> TagService:
    return TagService(gateway)


def get_catalog_service(gateway: JournalGateway = Depends(get_gateway)) -> CatalogService:
    return CatalogService(gateway)


def get_export_service(gateway: JournalGateway = Depends(get_gateway)) -> ExportService:
    return ExportService(gateway)
