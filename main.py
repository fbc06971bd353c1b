import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lostfound.config import get_settings
from lostfound.infrastructure.database import engine, initialize_database
from lostfound.infrastructure.realtime import (
    ConnectionRegistry,
    NotificationDispatcher,
    WebSocketTransport,
)
from lostfound.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare the database on startup and release resources on shutdown."""

    initialize_database()
    yield
    await app.state.notification_dispatcher.aclose()
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(title="Lost and Found API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # One registry per process; the hub registers into it and use cases push through it.
    registry = ConnectionRegistry()
    transport = WebSocketTransport()
    app.state.connection_registry = registry
    app.state.push_transport = transport
    app.state.notification_dispatcher = NotificationDispatcher(registry, transport)

    register_routes(app)
    return app


app = create_app()
