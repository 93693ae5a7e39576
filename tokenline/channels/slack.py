"""Slack slash-command adapter.

Maps the form-encoded slash-command payload to domain types and renders
CommandResults into Slack message JSON. Responses are either ``in_channel``
(everyone sees the updated line) or ``ephemeral`` (only the caller sees an
error or the help text).
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from tokenline.channels.commands.base import CommandDefinition
from tokenline.model.result import CommandResult
from tokenline.model.user import ChannelKey, User

EMPTY_QUEUE_TEXT = "No one in the Token queue"


class SlashCommand(BaseModel):
    """Form fields Slack posts for a slash command."""

    token: str
    team_id: str
    team_domain: str = ""
    channel_id: str
    channel_name: str = ""
    user_id: str
    user_name: str
    command: str = ""
    text: str = ""
    response_url: str = ""

    model_config = ConfigDict(extra="ignore")

    @property
    def key(self) -> ChannelKey:
        """Queue key for the channel the command came from."""
        return ChannelKey(self.team_id, self.channel_id)

    @property
    def user(self) -> User:
        """The user who typed the command."""
        return User(self.user_id, self.user_name)


class ResponseType(str, Enum):
    """Who gets to see a response."""

    EPHEMERAL = "ephemeral"
    IN_CHANNEL = "in_channel"


class SlackAttachment(BaseModel):
    """Secondary block of message text."""

    text: str


class SlackResponse(BaseModel):
    """Message body returned to Slack."""

    response_type: ResponseType
    text: str | None = None
    attachments: list[SlackAttachment] = Field(default_factory=list)

    @classmethod
    def ephemeral_text(cls, text: str) -> "SlackResponse":
        """Message only the caller sees."""
        return cls(response_type=ResponseType.EPHEMERAL, text=text)

    @classmethod
    def in_channel_text(cls, text: str) -> "SlackResponse":
        """Message the whole channel sees."""
        return cls(response_type=ResponseType.IN_CHANNEL, text=text)


def format_list(text: str | None, users: tuple[User, ...] | list[User]) -> SlackResponse:
    """Render the line with each user numbered from 0 (the holder).

    Args:
        text: Optional message shown above the line.
        users: Users in line order.

    Returns:
        In-channel response; an empty line renders as EMPTY_QUEUE_TEXT.
    """
    if not users:
        body = f"{text}\n{EMPTY_QUEUE_TEXT}" if text else EMPTY_QUEUE_TEXT
        return SlackResponse.in_channel_text(body)

    lines = "".join(f"{i}: {user}\n" for i, user in enumerate(users))
    return SlackResponse(
        response_type=ResponseType.IN_CHANNEL,
        text=text,
        attachments=[SlackAttachment(text=lines)],
    )


def render_result(result: CommandResult) -> SlackResponse:
    """Render a command outcome: errors privately, the line publicly."""
    if result.error is not None:
        return SlackResponse.ephemeral_text(result.error.message)
    return format_list(result.message, result.members)


def render_help(commands: list[CommandDefinition], slash_command: str = "/token") -> SlackResponse:
    """Help text listing every available command."""
    lines = [
        f"Token manager. Use `{slash_command} get` to take hold of the token.",
        "Other commands available:",
    ]
    lines.extend(f"• `{slash_command} {d.name}` {d.description}" for d in commands)
    return SlackResponse(
        response_type=ResponseType.EPHEMERAL,
        attachments=[SlackAttachment(text="\n".join(lines))],
    )
