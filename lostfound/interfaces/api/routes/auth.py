"""Endpoint issuing tokens for local development and end-to-end tests."""

import logging

from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.orm import Session

from lostfound.application.use_cases.users import issue_test_token
from lostfound.config import get_settings
from lostfound.infrastructure.database import get_db
from lostfound.interfaces.api.schemas import (
    DevTokenRequest,
    DevTokenResponse,
    DevTokenUser,
)

router = APIRouter(prefix="/api/test", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/token", response_model=DevTokenResponse)
def issue_token(
    payload: DevTokenRequest | None = Body(default=None),
    db: Session = Depends(get_db),
):
    """Return a JWT for the test user, creating it with the ``User`` role if needed.

    Only available while ``ENVIRONMENT`` is ``development`` or ``testing``.
    """

    if not get_settings().allows_test_tokens():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

    payload = payload or DevTokenRequest()
    token, user = issue_test_token(
        db,
        google_id=payload.google_id,
        email=payload.email,
        first_name=payload.first_name,
        last_name=payload.last_name,
    )
    logger.info("Issued development token for user %s", user.id)
    return DevTokenResponse(
        token=token,
        user=DevTokenUser(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            avatar_url=user.profile_picture,
            role_name=user.role_name,
        ),
    )
