from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST

from memwatch.api.dependencies import get_container
from memwatch.container.container import Container
from memwatch.infrastructure.monitoring.prometheus import PrometheusMonitoringBridge

router = APIRouter(tags=["monitoring"])


@router.get("/metrics")
async def metrics(container: Container = Depends(get_container)):
    """Prometheus exposition of the registered watches."""
    bridge = container.monitoring
    if not isinstance(bridge, PrometheusMonitoringBridge):
        raise HTTPException(status_code=404, detail="Monitoring is disabled")
    return Response(bridge.exposition(), media_type=CONTENT_TYPE_LATEST)
