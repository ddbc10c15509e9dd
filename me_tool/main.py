import logging
from typing import Optional

from fastapi import FastAPI

from me_tool.api.router import api_router
from me_tool.core.config import Settings, get_settings
from me_tool.core.errors import register_exception_handlers
from me_tool.core.initial_data import seed_initial_admin
from me_tool.core.log import configure_logging
from me_tool.core.security import SessionCodec
from me_tool.database import build_engine, build_session_factory, init_db

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Builds the application: settings, session codec, database and routes.

    Run with ``uvicorn me_tool.main:create_app --factory``.
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    # Fails here, before anything is served, when production lacks SESSION_SECRET
    session_codec = SessionCodec.from_settings(settings)

    engine = build_engine(settings.DATABASE_URL)
    init_db(engine)
    session_factory = build_session_factory(engine)
    seed_initial_admin(session_factory, settings)

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = session_factory
    app.state.session_codec = session_codec

    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/health", include_in_schema=False)
    def healthcheck():
        return {"status": "ok"}

    logger.info("%s started in %s mode", settings.PROJECT_NAME, settings.NODE_ENV)
    return app
