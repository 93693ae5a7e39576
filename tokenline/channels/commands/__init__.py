"""Command system: definitions, handlers, and routing."""

from tokenline.channels.commands.base import CommandDefinition, CommandHandler
from tokenline.channels.commands.router import CommandRouter

__all__ = ["CommandDefinition", "CommandHandler", "CommandRouter"]
