"""Command routing system."""

import dataclasses
import logging

from tokenline.channels.commands.base import CommandDefinition, CommandHandler
from tokenline.model.command import Command
from tokenline.model.result import CommandResult
from tokenline.model.user import ChannelKey, User
from tokenline.runtime.errors import QueueError
from tokenline.runtime.queue.registry import QueueRegistry

logger = logging.getLogger(__name__)


class CommandRouter:
    """Routes commands to registered handlers under the right lock scope."""

    def __init__(self) -> None:
        self._handlers: dict[Command, CommandHandler] = {}

    def register(self, handler: CommandHandler) -> None:
        """Register a command handler.

        Args:
            handler: Command handler to register.
        """
        self._handlers[handler.definition.command] = handler

    def get_handler(self, command: Command) -> CommandHandler | None:
        """Get handler for a command.

        Args:
            command: The parsed command.

        Returns:
            Command handler if registered, None otherwise.
        """
        return self._handlers.get(command)

    def list_commands(self) -> list[CommandDefinition]:
        """List all registered commands in registration order."""
        return [h.definition for h in self._handlers.values()]

    def route(
        self,
        registry: QueueRegistry,
        key: ChannelKey,
        command: Command,
        user: User,
    ) -> CommandResult:
        """Run a command against the queue for a channel.

        The snapshot is taken inside the same lock scope as the command, so
        the returned members are exactly the state the command produced.

        Args:
            registry: Registry owning the channel queues.
            key: Channel the command was sent from.
            command: The parsed command.
            user: The user who sent it.

        Returns:
            CommandResult with the line, or with ``error`` set when the queue
            rejected the operation.

        Raises:
            KeyError: If no handler is registered for the command.
            LockFailureError: If the queue's lock is poisoned.
        """
        handler = self._handlers.get(command)
        if handler is None:
            raise KeyError(f"No handler registered for {command.value!r}")

        scope = registry.write if handler.definition.mutates else registry.read
        try:
            with scope(key) as queue:
                result = handler.handle(queue, user)
                members = queue.snapshot()
        except QueueError as e:
            logger.info(f"{command.value} rejected for {user.user_id} in {key}: {e.message}")
            return CommandResult(error=e)

        return dataclasses.replace(result, members=members)
