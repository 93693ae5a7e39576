"""Tests for Slack payload parsing and response rendering."""

from tokenline.channels.commands.handlers import build_router
from tokenline.channels.slack import (
    EMPTY_QUEUE_TEXT,
    ResponseType,
    SlackResponse,
    SlashCommand,
    format_list,
    render_help,
    render_result,
)
from tokenline.model.result import CommandResult
from tokenline.model.user import ChannelKey, User
from tokenline.runtime.errors import NotQueuedError

A = User("UA", "ann")
B = User("UB", "bob")


def make_slash(**overrides: str) -> SlashCommand:
    data = {
        "token": "secret",
        "team_id": "T1",
        "channel_id": "C1",
        "user_id": "UA",
        "user_name": "ann",
        "command": "/token",
        "text": "get",
    }
    data.update(overrides)
    return SlashCommand(**data)


class TestSlashCommand:
    """Tests for the inbound payload model."""

    def test_key_and_user(self):
        slash = make_slash()
        assert slash.key == ChannelKey("T1", "C1")
        assert slash.user == A
        assert slash.user.user_name == "ann"

    def test_optional_fields_default_empty(self):
        slash = make_slash()
        assert slash.team_domain == ""
        assert slash.response_url == ""

    def test_unknown_fields_ignored(self):
        """Extra fields Slack adds are accepted."""
        slash = make_slash(trigger_id="123.456", api_app_id="A1")
        assert not hasattr(slash, "trigger_id")


class TestFormatList:
    """Tests for line rendering."""

    def test_empty_line(self):
        response = format_list(None, ())
        assert response.response_type is ResponseType.IN_CHANNEL
        assert response.text == EMPTY_QUEUE_TEXT
        assert response.attachments == []

    def test_empty_line_with_message(self):
        response = format_list("<@UA|ann> dropped the token", ())
        assert response.text == f"<@UA|ann> dropped the token\n{EMPTY_QUEUE_TEXT}"

    def test_numbered_from_zero(self):
        """Position 0 is the holder."""
        response = format_list("hello", (A, B))
        assert response.response_type is ResponseType.IN_CHANNEL
        assert response.text == "hello"
        assert len(response.attachments) == 1
        assert response.attachments[0].text == "0: ann\n1: bob\n"


class TestRenderResult:
    """Tests for rendering command outcomes."""

    def test_error_is_ephemeral(self):
        response = render_result(CommandResult(error=NotQueuedError()))
        assert response.response_type is ResponseType.EPHEMERAL
        assert response.text == "You are not in the queue!"

    def test_success_is_in_channel(self):
        response = render_result(CommandResult(members=(A,), message="<@UA|ann> joined the queue"))
        assert response.response_type is ResponseType.IN_CHANNEL
        assert response.text == "<@UA|ann> joined the queue"
        assert response.attachments[0].text == "0: ann\n"

    def test_json_shape(self):
        """Serialized response uses Slack's field names and values."""
        data = SlackResponse.ephemeral_text("nope").model_dump(mode="json")
        assert data == {"response_type": "ephemeral", "text": "nope", "attachments": []}


class TestRenderHelp:
    """Tests for help text."""

    def test_lists_every_command(self):
        response = render_help(build_router().list_commands(), "/token")
        assert response.response_type is ResponseType.EPHEMERAL
        text = response.attachments[0].text
        assert text.startswith("Token manager. Use `/token get`")
        for word in ("get", "drop", "list", "afteryou", "barge", "steal"):
            assert f"`/token {word}`" in text

    def test_uses_configured_slash_name(self):
        response = render_help(build_router().list_commands(), "/stick")
        assert "`/stick barge`" in response.attachments[0].text
