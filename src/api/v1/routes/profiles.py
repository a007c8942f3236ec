"""Profile API routes."""

import structlog
from fastapi import APIRouter, Depends, Request

from api.v1.dependencies import get_profile_orchestrator
from api.v1.schemas.profile import (
    ProfileEnvelope,
    ProfileGetRequest,
    ProfileUpdateRequest,
)
from core.exceptions import NotFoundError, RequestNotProcessableError
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.profile_orchestrator import ProfileOrchestrator

logger = structlog.get_logger()

router = APIRouter(prefix="/profile", tags=["profiles"])


@router.post(
    "/get",
    response_model=ProfileEnvelope,
    summary="Fetch a user's profile",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    body: ProfileGetRequest,
    orchestrator: ProfileOrchestrator = Depends(get_profile_orchestrator),
) -> ProfileEnvelope:
    try:
        profile = await orchestrator.get_profile_by_user_id(body.user_id)
    except NotFoundError as e:
        logger.info("profile_lookup_failed", reason=e.message)
        raise RequestNotProcessableError() from e
    return ProfileEnvelope.for_profile(profile)


@router.post(
    "/update",
    response_model=ProfileEnvelope,
    summary="Update a user's profile",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_profile(
    request: Request,
    body: ProfileUpdateRequest,
    orchestrator: ProfileOrchestrator = Depends(get_profile_orchestrator),
) -> ProfileEnvelope:
    """Update the supplied profile fields; omitted fields keep their value."""
    fields = body.model_dump(exclude_unset=True, exclude={"user_id"})
    try:
        profile = await orchestrator.update_profile_details(body.user_id, **fields)
    except NotFoundError as e:
        logger.info("profile_update_failed", reason=e.message)
        raise RequestNotProcessableError() from e
    return ProfileEnvelope.for_profile(profile)
