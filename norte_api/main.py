# norte_api/main.py
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import OperationalError

from .config import Settings
from .db import Base, create_db_engine, create_session_factory
from . import models  # noqa: F401 ensure models are imported so tables are known
from .exception_handler import setup_exception_handlers
from .utils import logger, retry


@retry(OperationalError, tries=3, delay=2, backoff=2)
def create_tables(engine):
    Base.metadata.create_all(bind=engine)


def create_app(settings: Settings = None) -> FastAPI:
    settings = settings or Settings()
    logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

    app = FastAPI(title="Norte Automotores API")
    app.state.settings = settings
    app.state.engine = create_db_engine(settings)
    app.state.session_factory = create_session_factory(app.state.engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept", "Authorization"],
    )
    setup_exception_handlers(app)

    from .api.routes import router as api_router
    from .api.preview_routes import router as preview_router
    app.include_router(api_router)
    # catch-all for the client bundle, keep it last
    app.include_router(preview_router)

    @app.on_event("startup")
    def on_startup_create_tables():
        create_tables(app.state.engine)
        logger.info("Table 'autos' verified")

    @app.on_event("shutdown")
    def on_shutdown_dispose_engine():
        app.state.engine.dispose()

    return app


app = create_app()


def run():
    import uvicorn

    settings = app.state.settings
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
