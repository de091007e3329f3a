"""
memwatch API

Demonstration service with three endpoints (config update, simulated memory
allocation, stats) over lock-guarded shared state, a periodic stats logger
and a monitoring bridge.
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

# API routes
from memwatch.api.routes.config import router as config_router
from memwatch.api.routes.health import router as health_router
from memwatch.api.routes.memory import router as memory_router
from memwatch.api.routes.metrics import router as metrics_router
from memwatch.api.routes.stats import router as stats_router

# Configuration and logging
from memwatch.config.logging_utils import log_application_event
from memwatch.config.settings import Settings, settings as default_settings
from memwatch.container.container import Container
from memwatch.infrastructure.monitoring.bridge import MonitoringBridge

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan: monitoring bridge and stats reporter come up before
    serving and go down after the last request.
    """
    container: Container = app.state.container
    log_application_event("Starting memwatch", f"{container.settings.api_host}:{container.settings.api_port}")
    try:
        await container.startup()
        yield
    finally:
        await container.shutdown()
        log_application_event("memwatch shutdown")


def create_app(settings: Optional[Settings] = None, monitoring: Optional[MonitoringBridge] = None) -> FastAPI:
    """Build an application with its own container and shared state."""
    settings = settings or default_settings
    app = FastAPI(
        title="memwatch",
        description="Config, simulated memory and stats endpoints over monitored shared state.",
        version=VERSION,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.container = Container(settings, monitoring=monitoring)

    app.include_router(config_router)
    app.include_router(memory_router)
    app.include_router(stats_router)
    app.include_router(health_router)
    app.include_router(metrics_router)

    @app.get("/")
    async def read_root():
        """
        Root endpoint with API information.
        """
        return {
            "message": "memwatch operational",
            "project_name": "memwatch",
            "version": VERSION,
            "endpoints": {
                "config": "/config",
                "memory": "/memory",
                "stats": "/stats",
                "health": "/health",
                "metrics": "/metrics",
                "docs": "/docs",
            },
        }

    return app


app = create_app()
