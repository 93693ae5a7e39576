"""Tokenline domain models - pure value types with no runtime dependencies."""

from tokenline.model.command import Command, UnrecognizedCommandError
from tokenline.model.result import CommandResult
from tokenline.model.user import ChannelKey, User

__all__ = [
    "ChannelKey",
    "Command",
    "CommandResult",
    "UnrecognizedCommandError",
    "User",
]
