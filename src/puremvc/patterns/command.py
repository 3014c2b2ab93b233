"""Command patterns executed by the Controller."""
from __future__ import annotations

from typing import TYPE_CHECKING, List

from .observer import Notifier

if TYPE_CHECKING:
    from ..interfaces import CommandFactory, INotification


class SimpleCommand(Notifier):
    """Unit of business logic; a fresh instance handles each notification."""

    def execute(self, notification: INotification) -> None:
        pass


class MacroCommand(Notifier):
    """Runs an ordered list of sub-commands with the same notification.

    Subclasses populate the list in ``initialize_macro_command`` through
    ``add_sub_command``. Sub-commands run first-in first-out and each one is
    created fresh from its factory.
    """

    def __init__(self) -> None:
        self.sub_commands: List[CommandFactory] = []
        self.initialize_macro_command()

    def initialize_macro_command(self) -> None:
        """Subclass hook for adding sub-command factories."""

    def add_sub_command(self, command_factory: CommandFactory) -> None:
        self.sub_commands.append(command_factory)

    def execute(self, notification: INotification) -> None:
        while self.sub_commands:
            factory = self.sub_commands.pop(0)
            command = factory()
            if self._facade is not None:
                command.initialize_notifier(self._facade)
            command.execute(notification)
