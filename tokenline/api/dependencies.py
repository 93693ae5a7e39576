"""FastAPI dependency injection providers."""

from typing import Annotated

from fastapi import Depends, Request

from tokenline.channels.commands.router import CommandRouter
from tokenline.core.config import Config
from tokenline.runtime.queue.registry import QueueRegistry


def get_config(request: Request) -> Config:
    """Get the loaded configuration from app state."""
    config: Config = request.app.state.config
    return config


def get_registry(request: Request) -> QueueRegistry:
    """Get the process-wide queue registry from app state."""
    registry: QueueRegistry = request.app.state.registry
    return registry


def get_command_router(request: Request) -> CommandRouter:
    """Get the command router from app state."""
    router: CommandRouter = request.app.state.command_router
    return router


# Type aliases for annotating dependencies
AppConfig = Annotated[Config, Depends(get_config)]
Registry = Annotated[QueueRegistry, Depends(get_registry)]
Commands = Annotated[CommandRouter, Depends(get_command_router)]
