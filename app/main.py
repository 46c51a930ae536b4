from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from app.core.config import Settings, settings as default_settings
from app.core.database import create_db_engine, create_session_factory, init_db
from app.core.handlers import register_exception_handlers
from app.core.logging import setup_logging
from app.core.middleware import RequestContextMiddleware
from app.api.router import api_router
from app.services.student.datastore import StudentDatastore


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    The database engine is opened in the lifespan and the datastore is
    stored on `app.state`; a database that cannot be opened aborts startup.
    """
    settings = settings or default_settings
    logger = setup_logging("DEBUG" if settings.DEBUG else settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_db_engine(settings)
        init_db(engine)
        app.state.engine = engine
        app.state.datastore = StudentDatastore(
            create_session_factory(engine),
            report_missing=settings.REPORT_MISSING_ON_MUTATION,
        )
        logger.info(f"{settings.PROJECT_NAME} ready on {settings.DATABASE_URL}")
        try:
            yield
        finally:
            engine.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )

    register_exception_handlers(app)
    app.add_middleware(RequestContextMiddleware)

    # Include API router
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    setup_logging(default_settings.LOG_LEVEL).info(
        f"server start on port :{default_settings.PORT}"
    )
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
