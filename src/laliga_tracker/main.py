import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from laliga_tracker.config.logging import setup_logging
from laliga_tracker.config.settings import AppConfig
from laliga_tracker.constants import MSG_INVALID_REQUEST
from laliga_tracker.infra.api_routes import match_routes
from laliga_tracker.infra.db import Database
from laliga_tracker.infra.repo.event_ledger import EventLedger
from laliga_tracker.infra.repo.match_repo import MatchRepository

logger = logging.getLogger(__name__)


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """
    Build the API. Storage is opened when the app starts and disposed when
    it stops, so nothing touches the database at import time.
    """
    config = config or AppConfig.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        config.ensure_directories_exist()
        database = Database(config.database_url, echo=config.echo_sql)
        database.init_db()

        match_repository = MatchRepository(database.session_factory)
        app.state.database = database
        app.state.match_repository = match_repository
        app.state.event_ledger = EventLedger(database.session_factory, match_repository)
        logger.info(f"Storage ready at {database.url.render_as_string(hide_password=True)}")
        try:
            yield
        finally:
            database.dispose()
            logger.info("Storage closed")

    app = FastAPI(
        title="LaLiga Tracker",
        description="Football matches, goals and cards as JSON",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # malformed JSON, wrong field types and non-integer ids are client errors
        errors = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
            for err in exc.errors()
        ]
        logger.warning(f"{request.method} {request.url.path} rejected: {errors}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": MSG_INVALID_REQUEST, "errors": jsonable_encoder(errors)},
        )

    app.include_router(match_routes.router, prefix="/api")
    return app


def run() -> None:
    config = AppConfig.from_env()
    config.ensure_directories_exist()
    log_file = setup_logging(config.log_level, config.logs_dir)
    if log_file:
        logger.info(f"Writing logs to {log_file}")

    logger.info(f"Server listening on {config.host}:{config.port}")
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
