"""Auth Routes — register, login/logout and the PIN gate.

Invariants:
    - login returns the bearer token used by every other route
    - logout is idempotent and always 200
"""

from fastapi import APIRouter, Depends, status

from daybook.api.dependencies import (
    get_bearer_token, get_identity_service, require_identity,
)
from daybook.core.identity import Identity
from daybook.schemas.auth import (
    Credentials, LoginResponse, MessageResponse, PinRequest, UserResponse,
)
from daybook.services.identity_service import IdentityService

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post(
    "/register", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: Credentials, service: IdentityService = Depends(get_identity_service),
):
    result = await service.register(body.username, body.password)
    return UserResponse.model_validate(result.unwrap())


@router.post("/login", response_model=LoginResponse)
async def login(
    body: Credentials, service: IdentityService = Depends(get_identity_service),
):
    active = (await service.login(body.username, body.password)).unwrap()
    return LoginResponse(
        token=active.token, user=UserResponse.model_validate(active.user),
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(
    token: str | None = Depends(get_bearer_token),
    service: IdentityService = Depends(get_identity_service),
):
    service.logout(token)
    return MessageResponse(message="Logged out.")


@router.get("/me", response_model=UserResponse)
async def me(
    identity: Identity = Depends(require_identity),
    service: IdentityService = Depends(get_identity_service),
):
    return UserResponse.model_validate(await service.get_user(identity))


@router.post("/pin", response_model=MessageResponse)
async def set_pin(
    body: PinRequest,
    identity: Identity = Depends(require_identity),
    service: IdentityService = Depends(get_identity_service),
):
    result = await service.set_pin(identity, body.pin)
    result.unwrap()
    return MessageResponse(message=result.message)


@router.post("/pin/verify", response_model=MessageResponse)
async def verify_pin(
    body: PinRequest,
    identity: Identity = Depends(require_identity),
    service: IdentityService = Depends(get_identity_service),
):
    result = await service.verify_pin(identity, body.pin)
    result.unwrap()
    return MessageResponse(message=result.message)
