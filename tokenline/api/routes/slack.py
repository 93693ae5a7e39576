"""Slack slash-command endpoint.

Handlers are plain ``def`` functions: FastAPI runs them on its worker
thread pool, which is what the blocking per-queue locks expect.
"""

import logging
import secrets
from typing import Annotated

from fastapi import APIRouter, Form, HTTPException, status
from fastapi.responses import PlainTextResponse

from tokenline.api.dependencies import AppConfig, Commands, Registry
from tokenline.channels.slack import SlackResponse, SlashCommand, render_help, render_result
from tokenline.core.config import SlackConfig
from tokenline.model.command import Command, UnrecognizedCommandError
from tokenline.runtime.errors import LockFailureError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["slack"])


def validate_command(slash: SlashCommand, config: SlackConfig) -> None:
    """Check the shared secret, team, and slash-command name.

    Raises:
        HTTPException: 403 on token mismatch or disallowed team, 400 on an
            unexpected slash-command name.
    """
    if not secrets.compare_digest(slash.token.encode(), config.token.encode()):
        logger.warning(f"Token mismatch for request from team {slash.team_id}")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="token mismatch")
    if config.allowed_teams and slash.team_id not in config.allowed_teams:
        logger.warning(f"Rejected command from team {slash.team_id}")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="invalid team")
    if config.command and slash.command and slash.command != config.command:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid command")


@router.get("/", response_class=PlainTextResponse)
def index() -> str:
    """Liveness check."""
    return "Hello, World!"


@router.post("/slack", response_model=SlackResponse, response_model_exclude_none=True)
def slack_command(
    slash: Annotated[SlashCommand, Form()],
    config: AppConfig,
    registry: Registry,
    commands: Commands,
) -> SlackResponse:
    """Run a slash command against the channel's token queue.

    Args:
        slash: Form-encoded slash-command payload
        config: Application configuration
        registry: Channel queue registry
        commands: Command router

    Returns:
        SlackResponse: The updated line (in channel), or an error or help
        text only the caller sees

    Raises:
        HTTPException: 403/400 if validation fails, 500 if the queue lock is poisoned
    """
    validate_command(slash, config.slack)

    slash_name = config.slack.command or slash.command or "/token"
    try:
        command = Command.parse(slash.text)
    except UnrecognizedCommandError:
        return render_help(commands.list_commands(), slash_name)

    try:
        result = commands.route(registry, slash.key, command, slash.user)
    except LockFailureError as e:
        logger.error(f"{command.value} failed for {slash.key}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="unable to lock token",
        )

    return render_result(result)
