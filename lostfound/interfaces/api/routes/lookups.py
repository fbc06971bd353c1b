"""Routes for the category, item type and status lookup tables.

The three tables share one set of handlers; :func:`build_lookup_router` binds
them to a path prefix and repository.
"""

from collections.abc import Callable

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from lostfound.application.errors import ConflictError
from lostfound.application.use_cases.lookups import (
    create_lookup_value,
    delete_lookup_value,
    get_lookup_usage,
    get_lookup_value,
    list_lookup_values,
    merge_lookup_values,
    update_lookup_value,
)
from lostfound.domain.entities import LookupValue, User
from lostfound.infrastructure.database import get_db
from lostfound.infrastructure.repositories import (
    CategoryRepository,
    ItemTypeRepository,
    LookupRepository,
    StatusRepository,
)
from lostfound.interfaces.api.dependencies import get_current_user, require_admin
from lostfound.interfaces.api.routes_helpers import conflict_response, http_error
from lostfound.interfaces.api.schemas import LookupRead, LookupUsageRead, LookupWrite


def _to_read_model(value: LookupValue) -> LookupRead:
    return LookupRead(
        id=value.id,
        name=value.name,
        description=value.description,
        is_active=value.is_active,
        created_at=value.created_at,
        updated_at=value.updated_at,
    )


def build_lookup_router(
    prefix: str,
    repository_class: Callable[[Session], LookupRepository],
    *,
    tag: str,
    allow_merge: bool,
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[tag])

    @router.get("", response_model=list[LookupRead])
    def list_values(
        db: Session = Depends(get_db),
        _: User = Depends(get_current_user),
    ):
        return [_to_read_model(value) for value in list_lookup_values(repository_class(db))]

    @router.get("/{value_id}", response_model=LookupRead)
    def read_value(
        value_id: int,
        db: Session = Depends(get_db),
        _: User = Depends(get_current_user),
    ):
        try:
            value = get_lookup_value(repository_class(db), value_id)
        except ValueError as exc:
            raise http_error(exc) from exc
        return _to_read_model(value)

    @router.post("", response_model=LookupRead, status_code=status.HTTP_201_CREATED)
    def create_value(
        value_in: LookupWrite,
        response: Response,
        db: Session = Depends(get_db),
        _: User = Depends(require_admin),
    ):
        try:
            value = create_lookup_value(
                repository_class(db),
                name=value_in.name,
                description=value_in.description,
            )
        except ValueError as exc:
            raise http_error(exc) from exc
        response.headers["Location"] = f"{prefix}/{value.id}"
        return _to_read_model(value)

    @router.put("/{value_id}", status_code=status.HTTP_204_NO_CONTENT)
    def update_value(
        value_id: int,
        value_in: LookupWrite,
        db: Session = Depends(get_db),
        _: User = Depends(require_admin),
    ):
        try:
            update_lookup_value(
                repository_class(db),
                value_id=value_id,
                name=value_in.name,
                description=value_in.description,
            )
        except ValueError as exc:
            raise http_error(exc) from exc
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete("/{value_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_value(
        value_id: int,
        db: Session = Depends(get_db),
        _: User = Depends(require_admin),
    ):
        try:
            delete_lookup_value(repository_class(db), value_id)
        except ConflictError as exc:
            return conflict_response(exc)
        except ValueError as exc:
            raise http_error(exc) from exc
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.get("/{value_id}/usage", response_model=LookupUsageRead)
    def read_usage(
        value_id: int,
        db: Session = Depends(get_db),
        _: User = Depends(require_admin),
    ):
        return LookupUsageRead(
            id=value_id, item_count=get_lookup_usage(repository_class(db), value_id)
        )

    if allow_merge:

        @router.post(
            "/{value_id}/merge-into/{target_id}",
            status_code=status.HTTP_204_NO_CONTENT,
        )
        def merge_value(
            value_id: int,
            target_id: int,
            db: Session = Depends(get_db),
            _: User = Depends(require_admin),
        ):
            """Reassign every item to ``target_id`` and delete ``value_id``."""

            try:
                merge_lookup_values(
                    repository_class(db), source_id=value_id, target_id=target_id
                )
            except ValueError as exc:
                raise http_error(exc) from exc
            return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


categories_router = build_lookup_router(
    "/api/categories", CategoryRepository, tag="categories", allow_merge=True
)
item_types_router = build_lookup_router(
    "/api/item-types", ItemTypeRepository, tag="item-types", allow_merge=True
)
statuses_router = build_lookup_router(
    "/api/statuses", StatusRepository, tag="statuses", allow_merge=False
)
