"""Prometheus scrape endpoint, guarded by a shared token."""

import hmac
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from learning_patterns.core.config import get_settings

router = APIRouter(tags=["Monitoring"])
logger = logging.getLogger(__name__)


def require_metrics_token(
    request: Request,
    x_metrics_token: Annotated[str | None, Header()] = None,
) -> None:
    """Reject scrapes whose X-Metrics-Token does not match METRICS_TOKEN."""
    expected_token = get_settings().metrics_token
    if not expected_token:
        logger.error(
            "Metrics scrape refused: METRICS_TOKEN not configured",
            extra={"security_event": True, "event_type": "METRICS_NOT_CONFIGURED"},
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Metrics token not configured",
        )

    if not hmac.compare_digest(x_metrics_token or "", expected_token):
        logger.warning(
            "Metrics scrape refused: bad token",
            extra={
                "security_event": True,
                "event_type": "METRICS_ACCESS_DENIED",
                "client_ip": request.client.host if request.client else "unknown",
            },
        )
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid metrics token")


@router.get("/metrics", dependencies=[Depends(require_metrics_token)])
async def get_metrics() -> Response:
    """Scoring, persistence and storage metrics in Prometheus text format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
