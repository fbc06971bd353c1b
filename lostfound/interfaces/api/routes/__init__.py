from fastapi import FastAPI

from .auth import router as auth_router
from .hub import router as hub_router
from .item_matches import router as item_matches_router
from .items import router as items_router
from .lookups import categories_router, item_types_router, statuses_router
from .messages import router as messages_router
from .notifications import router as notifications_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router and the websocket hub on ``app``."""

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(items_router)
    app.include_router(categories_router)
    app.include_router(item_types_router)
    app.include_router(statuses_router)
    app.include_router(item_matches_router)
    app.include_router(messages_router)
    app.include_router(notifications_router)
    app.include_router(hub_router)
