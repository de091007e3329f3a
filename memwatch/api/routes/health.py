"""
Health check and system status endpoints.
"""
import os
import time

import psutil
from fastapi import APIRouter, Depends

from memwatch.api.dependencies import get_container
from memwatch.api.responses.response import FastJSONResponse
from memwatch.config.logging_utils import log_application_event
from memwatch.container.container import Container

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
async def health_check():
    """
    Health check endpoint to verify the API is operational.
    """
    return FastJSONResponse({"status": "healthy", "project_name": "memwatch"})


@router.get("/status")
async def system_status(container: Container = Depends(get_container)):
    """
    Process status next to the simulated allocation, to compare real RSS with the buffer size.
    """
    log_application_event("System status endpoint accessed")
    process = psutil.Process(os.getpid())
    store = container.state_store
    config = store.get_config()
    uptime = time.time() - container.started_at if container.started_at is not None else 0.0

    return FastJSONResponse({
        "status": "operational",
        "process": {
            "pid": process.pid,
            "rss_mb": round(process.memory_info().rss / (1024 * 1024), 2),
            "threads": process.num_threads(),
            "uptime_seconds": round(uptime, 3),
        },
        "simulated_memory": {
            "allocated_mb": store.current_usage_mb(),
            "max_memory_mb": config.max_memory_limit,
        },
        "stats_reporter_running": container.stats_reporter.running,
        "monitoring": type(container.monitoring).__name__,
    })
