"""Routes for browsing users and administering their accounts."""

import logging

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from lostfound.application.use_cases.items import list_items as list_items_uc
from lostfound.application.use_cases.users import (
    get_user as get_user_uc,
    list_deleted_users as list_deleted_users_uc,
    list_users as list_users_uc,
    restore_user as restore_user_uc,
    soft_delete_user as soft_delete_user_uc,
    update_user_role as update_user_role_uc,
)
from lostfound.domain.entities import Page, User
from lostfound.infrastructure.database import get_db
from lostfound.interfaces.api.dependencies import get_current_user, require_admin
from lostfound.interfaces.api.routes.items import item_page_to_schema
from lostfound.interfaces.api.routes_helpers import http_error, normalize_paging
from lostfound.interfaces.api.schemas import (
    ItemRead,
    PageRead,
    RoleUpdate,
    RoleUpdateResult,
    UserRead,
)

router = APIRouter(prefix="/api/users", tags=["users"])
logger = logging.getLogger(__name__)


def _to_read_model(user: User) -> UserRead:
    return UserRead(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        profile_picture=user.profile_picture,
        role_name=user.role_name,
        created_at=user.created_at,
        last_login=user.last_login,
    )


def _to_page(page: Page[User]) -> PageRead[UserRead]:
    return PageRead[UserRead](
        total=page.total,
        page=page.page,
        page_size=page.page_size,
        items=[_to_read_model(user) for user in page.items],
    )


@router.get("", response_model=PageRead[UserRead])
def list_users(
    page: int = 1,
    page_size: int = Query(20, alias="pageSize"),
    q: str | None = None,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Return active users ordered by id."""

    page, page_size = normalize_paging(page, page_size)
    return _to_page(list_users_uc(db, page=page, page_size=page_size, search=q))


@router.get("/deleted", response_model=PageRead[UserRead])
def list_deleted_users(
    page: int = 1,
    page_size: int = Query(20, alias="pageSize"),
    q: str | None = None,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    page, page_size = normalize_paging(page, page_size)
    return _to_page(list_deleted_users_uc(db, page=page, page_size=page_size, search=q))


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_user)):
    """Return the authenticated user."""

    return _to_read_model(current_user)


@router.get("/{user_id}", response_model=UserRead)
def read_user(
    user_id: int,
    db: Session = Depends(get_db),
):
    try:
        user = get_user_uc(db, user_id)
    except ValueError as exc:
        raise http_error(exc) from exc
    return _to_read_model(user)


@router.get("/{user_id}/profile", response_model=UserRead)
def read_user_profile(
    user_id: int,
    db: Session = Depends(get_db),
):
    """Public profile of ``user_id``; same shape as ``GET /api/users/{id}``."""

    try:
        user = get_user_uc(db, user_id)
    except ValueError as exc:
        raise http_error(exc) from exc
    return _to_read_model(user)


@router.get("/{user_id}/items", response_model=PageRead[ItemRead])
def list_user_items(
    user_id: int,
    page: int = 1,
    page_size: int = Query(20, alias="pageSize"),
    q: str | None = None,
    type_id: int | None = Query(None, alias="typeId"),
    status_id: int | None = Query(None, alias="statusId"),
    category_id: int | None = Query(None, alias="categoryId"),
    db: Session = Depends(get_db),
):
    """Return the live items reported by ``user_id``, newest first."""

    page, page_size = normalize_paging(page, page_size)
    result = list_items_uc(
        db,
        page=page,
        page_size=page_size,
        user_id=user_id,
        status_id=status_id,
        category_id=category_id,
        type_id=type_id,
        search=q,
    )
    return item_page_to_schema(result)


@router.post("/{user_id}/soft-delete", status_code=status.HTTP_204_NO_CONTENT)
def soft_delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    try:
        soft_delete_user_uc(db, user_id=user_id, acting_user=current_user)
    except ValueError as exc:
        raise http_error(exc) from exc
    logger.info("User %s soft-deleted by %s", user_id, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{user_id}/restore", status_code=status.HTTP_204_NO_CONTENT)
def restore_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    try:
        restore_user_uc(db, user_id=user_id)
    except ValueError as exc:
        raise http_error(exc) from exc
    logger.info("User %s restored by %s", user_id, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{user_id}/role", response_model=RoleUpdateResult)
def update_user_role(
    user_id: int,
    role_in: RoleUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    """Assign a new role to ``user_id``; administrators cannot change their own."""

    try:
        user = update_user_role_uc(
            db, user_id=user_id, role_name=role_in.role_name, acting_user=current_user
        )
    except ValueError as exc:
        raise http_error(exc) from exc
    return RoleUpdateResult(id=user.id, role_name=user.role_name)
