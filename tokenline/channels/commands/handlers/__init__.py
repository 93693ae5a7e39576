"""Queue command handlers."""

from tokenline.channels.commands.base import CommandHandler
from tokenline.channels.commands.handlers.after_you import AfterYouCommand
from tokenline.channels.commands.handlers.barge import BargeCommand
from tokenline.channels.commands.handlers.drop import DropCommand
from tokenline.channels.commands.handlers.get import GetCommand
from tokenline.channels.commands.handlers.list_queue import ListCommand
from tokenline.channels.commands.handlers.steal import StealCommand
from tokenline.channels.commands.router import CommandRouter


def get_default_commands() -> list[CommandHandler]:
    """Return one handler per command, in help-text order.

    Returns:
        List of command handler instances.
    """
    return [
        GetCommand(),
        DropCommand(),
        ListCommand(),
        AfterYouCommand(),
        BargeCommand(),
        StealCommand(),
    ]


def build_router() -> CommandRouter:
    """Create a router with every default command registered."""
    router = CommandRouter()
    for handler in get_default_commands():
        router.register(handler)
    return router


__all__ = [
    "AfterYouCommand",
    "BargeCommand",
    "build_router",
    "DropCommand",
    "get_default_commands",
    "GetCommand",
    "ListCommand",
    "StealCommand",
]
