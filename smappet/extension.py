"""
Command registration lifecycle.

The host registers two stateless commands at startup and disposes of them
at teardown.
"""

import logging
from typing import Callable, Dict, List, Optional

from smappet.casing import CasingRegistry
from smappet.config import SmappetConfig
from smappet.host import Host
from smappet.pipelines import apply_template, capture_template


logger = logging.getLogger(__name__)


COPY_COMMAND = "smappet.copy"
PASTE_COMMAND = "smappet.paste"

CommandHandler = Callable[[], Optional[str]]


class CommandRegistry:
    """Registry of named command handlers."""

    def __init__(self):
        self._commands: Dict[str, CommandHandler] = {}

    def register(self, command_id: str, handler: CommandHandler) -> None:
        """
        Register a command handler.

        Raises:
            ValueError: If the command id is already registered
        """
        if command_id in self._commands:
            raise ValueError(f"Command already registered: {command_id}")
        self._commands[command_id] = handler
        logger.debug(f"Registered command: {command_id}")

    def execute(self, command_id: str) -> Optional[str]:
        """
        Run a registered command.

        Raises:
            KeyError: If the command is not registered
        """
        handler = self._commands.get(command_id)
        if handler is None:
            raise KeyError(f"Command not registered: {command_id}")
        logger.debug(f"Executing command: {command_id}")
        return handler()

    def exists(self, command_id: str) -> bool:
        return command_id in self._commands

    def list_commands(self) -> List[str]:
        return list(self._commands.keys())

    def dispose(self, command_id: str) -> None:
        if self._commands.pop(command_id, None) is not None:
            logger.debug(f"Disposed command: {command_id}")

    def dispose_all(self) -> None:
        for command_id in self.list_commands():
            self.dispose(command_id)


class SmappetExtension:
    """Binds the capture and apply pipelines to a host as commands."""

    def __init__(
        self,
        host: Host,
        config: Optional[SmappetConfig] = None,
        registry: Optional[CasingRegistry] = None,
        commands: Optional[CommandRegistry] = None
    ):
        self.host = host
        self.config = config or SmappetConfig()
        self.registry = registry or CasingRegistry()
        self.commands = commands or CommandRegistry()
        self._registered: List[str] = []

    def activate(self) -> None:
        self._register(COPY_COMMAND, lambda: capture_template(self.host, self.config, self.registry))
        self._register(PASTE_COMMAND, lambda: apply_template(self.host, self.config, self.registry))

    def deactivate(self) -> None:
        for command_id in self._registered:
            self.commands.dispose(command_id)
        self._registered = []

    def execute(self, command_id: str) -> Optional[str]:
        return self.commands.execute(command_id)

    def _register(self, command_id: str, handler: CommandHandler) -> None:
        self.commands.register(command_id, handler)
        self._registered.append(command_id)
