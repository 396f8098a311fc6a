import logging

from fastapi import FastAPI
from sqlalchemy import Engine

from studentdb.core.config import PORTS
from studentdb.core.logging_middleware import LoggingMiddleware
from studentdb.db.session import check_connection, make_engine, make_session_factory
from studentdb.repositories.registry import get_repository_class
from studentdb.routers.students import router as students_router

logging.basicConfig(level=logging.INFO)

logger = logging.getLogger(__name__)


def create_app(variant: str, engine: Engine | None = None) -> FastAPI:
    """Build the two-route app for one data-access variant.

    The engine (and its connection pool) is created once here and handed to
    every request through ``app.state``; pass one in to share or replace it.
    """
    get_repository_class(variant)  # fail fast on unknown variants

    if engine is None:
        engine = make_engine()

    app = FastAPI(title=f"using-{variant}")
    app.state.variant = variant
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)

    # Middleware
    app.add_middleware(LoggingMiddleware)

    # Startup event
    @app.on_event("startup")
    def on_startup():
        check_connection(engine)
        logger.info("using-%s listening on %s", variant, PORTS[variant])

    app.include_router(students_router)

    return app
