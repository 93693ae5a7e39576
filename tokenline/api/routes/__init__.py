"""API route modules."""

from tokenline.api.routes.monitoring import router as monitoring_router
from tokenline.api.routes.slack import router as slack_router

__all__ = ["monitoring_router", "slack_router"]
