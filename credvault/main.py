# credvault/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from credvault import __version__
from credvault.api import auth, health
from credvault.core.config import Settings, get_settings, validate_config
from credvault.core.errors import (
    AppError,
    app_error_handler,
    request_validation_handler,
    unhandled_exception_handler,
)
from credvault.core.logging import LOGGER_NAME, configure_logging
from credvault.core.middleware.errors import UnhandledErrorMiddleware
from credvault.core.middleware.ratelimit import RateLimitMiddleware
from credvault.core.middleware.request_log import RequestLogMiddleware
from credvault.core.middleware.security_headers import SecurityHeadersMiddleware
from credvault.core.ratelimit import RateLimitConfig
from credvault.core.security import PasswordHasher
from credvault.core.validation import PasswordPolicy
from credvault.database import build_engine, build_session_factory, init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = logging.getLogger(LOGGER_NAME)
    logger.info("Starting credvault %s", __version__)
    try:
        yield
    finally:
        app.state.engine.dispose()
        logger.info("Stopping credvault")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.ENV)
    validate_config(settings)

    engine = build_engine(settings.DATABASE_URL)
    init_db(engine)

    app = FastAPI(title="credvault", version=__version__, lifespan=lifespan)

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
    app.state.password_policy = PasswordPolicy.from_settings(settings)

    # Last added runs first: request log, security headers, rate limit, CORS,
    # unhandled errors. Errors caught innermost still get every header below.
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RateLimitMiddleware, config=RateLimitConfig.from_settings(settings))
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLogMiddleware)

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(auth.router)
    app.include_router(health.router)

    return app


def run():
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
