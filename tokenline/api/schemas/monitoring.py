"""Pydantic schemas for monitoring endpoints."""

from pydantic import BaseModel, ConfigDict


class HealthResponse(BaseModel):
    """Response model for GET /monitoring/health."""

    status: str
    version: str
    queues: int

    model_config = ConfigDict(extra="forbid")


class QueueStatus(BaseModel):
    """State of a single channel's queue.

    Attributes:
        team_id: Team the channel belongs to
        channel_id: Channel identifier
        size: Number of users in line
        holder: Display name of the token holder, if any
        members: Display names in line order
    """

    team_id: str
    channel_id: str
    size: int
    holder: str | None = None
    members: list[str]

    model_config = ConfigDict(extra="forbid")


class QueueListResponse(BaseModel):
    """Response model for GET /monitoring/queues."""

    queues: list[QueueStatus]
    total: int

    model_config = ConfigDict(extra="forbid")
