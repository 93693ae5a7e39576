"""FastAPI application factory for Tokenline."""

from fastapi import FastAPI

from tokenline import __version__
from tokenline.api.routes.monitoring import router as monitoring_router
from tokenline.api.routes.slack import router as slack_router
from tokenline.channels.commands.handlers import build_router
from tokenline.channels.commands.router import CommandRouter
from tokenline.core.config import Config
from tokenline.runtime.queue.registry import QueueRegistry


def create_app(
    config: Config,
    registry: QueueRegistry | None = None,
    command_router: CommandRouter | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Loaded Tokenline configuration.
        registry: Queue registry to serve (default: a fresh, empty one).
        command_router: Command router (default: all built-in commands).

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Tokenline",
        description="Per-channel token queue for Slack slash commands",
        version=__version__,
    )

    app.state.config = config
    app.state.registry = registry if registry is not None else QueueRegistry()
    app.state.command_router = command_router if command_router is not None else build_router()

    app.include_router(slack_router)

    # Mount management routes at /api/v1
    api_v1 = FastAPI()
    api_v1.include_router(monitoring_router)

    # Share state with sub-app so dependencies resolve the same registry
    api_v1.state = app.state

    app.mount("/api/v1", api_v1)

    return app
