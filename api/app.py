"""FastAPI application factory."""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config import load_config
from core.health import (
    HealthChecker,
    check_event_loop,
    create_generator_check,
    create_logger_check,
)
from internal.logging import get_logger, LogLevel, StructuredLogger, AsyncFileLogger
from service.minter import IdMinter
from utils.crash import create_async_handler
from api.routes import ids, stats, health


def create_app(config=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    StructuredLogger.configure(min_level=LogLevel[config.logging.level.upper()])
    logger_instance = get_logger()

    # Core components
    audit = AsyncFileLogger(file_path=config.logging.file)
    minter = IdMinter(config=config.generator, audit=audit)
    health_checker = HealthChecker()
    health_checker.register("event_loop", check_event_loop, critical=True)
    health_checker.register("generator", create_generator_check(minter.generator), critical=True)
    health_checker.register("audit_logger", create_logger_check(audit), critical=False)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info("Application starting", version="1.0.0")
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(create_async_handler(logger_instance))

        await audit.start()
        logger_instance.info("Application started successfully")

        yield

        logger_instance.info("Application shutting down")
        await audit.stop()
        logger_instance.info("Application shutdown complete", issued=minter.issued)

    app = FastAPI(
        title="sortid",
        version="1.0.0",
        description="short, time-sortable identifier minting",
        lifespan=lifespan,
    )

    # Route modules hold module-level references
    ids.init(minter, config.server.max_batch)
    stats.init(minter, audit)
    health.init(minter, health_checker)

    app.include_router(ids.router)
    app.include_router(stats.router)
    app.include_router(health.router)

    return app
