"""Use case for minting tokens for development and end-to-end test users."""

from __future__ import annotations

import logging
from dataclasses import replace

from sqlalchemy.orm import Session

from lostfound.domain.entities import ROLE_USER, User
from lostfound.infrastructure.repositories import RoleRepository, UserRepository
from lostfound.infrastructure.security import create_access_token
from lostfound.utils import now_utc_naive

logger = logging.getLogger(__name__)

DEFAULT_TEST_GOOGLE_ID = "playwright-test-1"
DEFAULT_TEST_EMAIL = "playwright@test.local"


def issue_test_token(
    session: Session,
    *,
    google_id: str | None = None,
    email: str | None = None,
    first_name: str | None = None,
    last_name: str | None = None,
) -> tuple[str, User]:
    """Find or create the test user and return ``(token, user)``."""

    google_id = (google_id or "").strip() or DEFAULT_TEST_GOOGLE_ID
    email = (email or "").strip() or DEFAULT_TEST_EMAIL

    repository = UserRepository(session)
    user = repository.get_by_google_id(google_id) or repository.get_by_email(email)
    if user is None:
        role = RoleRepository(session).get_by_name(ROLE_USER)
        user = repository.create(
            User(
                id=None,
                google_id=google_id,
                email=email,
                first_name=first_name or "Playwright",
                last_name=last_name or "Tester",
                profile_picture=None,
                role=role,
                created_at=now_utc_naive(),
                last_login=None,
            )
        )
        logger.info("Created test user %s", user.id)

    user = repository.update(replace(user, last_login=now_utc_naive()))
    return create_access_token(user), user
