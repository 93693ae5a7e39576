"""Monitoring and health check endpoints."""

import logging

from fastapi import APIRouter, HTTPException, status

from tokenline import __version__
from tokenline.api.dependencies import Registry
from tokenline.api.schemas.monitoring import HealthResponse, QueueListResponse, QueueStatus
from tokenline.runtime.errors import LockFailureError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/monitoring", tags=["monitoring"])


@router.get("/health", response_model=HealthResponse)
def health_check(registry: Registry) -> HealthResponse:
    """Liveness plus the number of channel queues created so far."""
    return HealthResponse(status="ok", version=__version__, queues=len(registry))


@router.get("/queues", response_model=QueueListResponse)
def list_queues(registry: Registry) -> QueueListResponse:
    """List every channel queue with its current line.

    Raises:
        HTTPException: 500 if a queue's lock is poisoned
    """
    queues: list[QueueStatus] = []
    for key in registry.keys():
        try:
            with registry.read(key) as queue:
                holder = queue.holder
                queues.append(
                    QueueStatus(
                        team_id=key.team_id,
                        channel_id=key.channel_id,
                        size=queue.size(),
                        holder=holder.user_name if holder else None,
                        members=queue.user_names(),
                    )
                )
        except LockFailureError as e:
            logger.error(f"Cannot read queue {key}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(e),
            )
    return QueueListResponse(queues=queues, total=len(queues))
