"""Pydantic schemas for API responses."""

from tokenline.api.schemas.monitoring import HealthResponse, QueueListResponse, QueueStatus

__all__ = ["HealthResponse", "QueueListResponse", "QueueStatus"]
