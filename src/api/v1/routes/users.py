"""User API routes.

All endpoints answer with JSEND envelopes. A missing user is reported with
the generic "unable to process" message so that callers cannot probe which
IDs exist.
"""

import structlog
from fastapi import APIRouter, Depends, Request

from api.v1.dependencies import get_user_orchestrator
from api.v1.schemas.common import EmptySuccessResponse
from api.v1.schemas.user import (
    UserEnvelope,
    UserIdRequest,
    UserRegisterRequest,
    UserUpdateRequest,
)
from core.exceptions import NotFoundError, RequestNotProcessableError
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.user_orchestrator import UserOrchestrator

logger = structlog.get_logger()

router = APIRouter(prefix="/user", tags=["users"])


@router.post(
    "/register",
    response_model=UserEnvelope,
    summary="Register a user",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def register_user(
    request: Request,
    body: UserRegisterRequest,
    orchestrator: UserOrchestrator = Depends(get_user_orchestrator),
) -> UserEnvelope:
    """Create a new account and its empty profile. Emails must be unique."""
    user = await orchestrator.register_user(body.email, body.password)
    return UserEnvelope.for_user(user)


@router.post(
    "/get",
    response_model=UserEnvelope,
    summary="Fetch a user",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_user(
    request: Request,
    body: UserIdRequest,
    orchestrator: UserOrchestrator = Depends(get_user_orchestrator),
) -> UserEnvelope:
    """Fetch a user by ID."""
    try:
        user = await orchestrator.get_user_by_id(body.id)
    except NotFoundError as e:
        logger.info("user_lookup_failed", reason=e.message)
        raise RequestNotProcessableError() from e
    return UserEnvelope.for_user(user)


@router.post(
    "/update",
    response_model=UserEnvelope,
    summary="Update a user's email or password",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_user(
    request: Request,
    body: UserUpdateRequest,
    orchestrator: UserOrchestrator = Depends(get_user_orchestrator),
) -> UserEnvelope:
    """Change email and, when ``newPassword`` is given, the password.

    Changing the password requires ``oldPassword`` to match the one on record.
    """
    try:
        user = await orchestrator.update_user_details(
            user_id=body.id,
            email=body.email,
            old_password=body.old_password,
            new_password=body.new_password,
        )
    except NotFoundError as e:
        logger.info("user_update_failed", reason=e.message)
        raise RequestNotProcessableError() from e
    return UserEnvelope.for_user(user)


@router.post(
    "/delete",
    response_model=EmptySuccessResponse,
    summary="Delete a user",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_user(
    request: Request,
    body: UserIdRequest,
    orchestrator: UserOrchestrator = Depends(get_user_orchestrator),
) -> EmptySuccessResponse:
    """Delete a user and their profile."""
    try:
        user = await orchestrator.get_user_by_id(body.id)
        await orchestrator.delete_user(user)
    except NotFoundError as e:
        logger.info("user_delete_failed", reason=e.message)
        raise RequestNotProcessableError() from e
    return EmptySuccessResponse()
