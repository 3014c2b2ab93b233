"""Controller: maps notification names to command factories."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict

from ..patterns.observer import Observer

if TYPE_CHECKING:
    from ..interfaces import CommandFactory, IFacade, INotification
    from .view import View

logger = logging.getLogger(__name__)


class Controller:
    """Executes a fresh command for every notification it has a mapping for.

    The controller subscribes itself to the View once per mapped name, so
    replacing a factory never adds a second subscription.
    """

    def __init__(self, view: View, facade: IFacade | None = None) -> None:
        self.view = view
        self.facade = facade
        self.command_map: Dict[str, CommandFactory] = {}
        self.initialize_controller()

    def initialize_controller(self) -> None:
        """Subclass hook run at the end of construction."""

    def execute_command(self, notification: INotification) -> None:
        factory = self.command_map.get(notification.name)
        if factory is None:
            return

        command = factory()
        if self.facade is not None:
            command.initialize_notifier(self.facade)
        command.execute(notification)

    def register_command(self, notification_name: str, command_factory: CommandFactory) -> None:
        first = notification_name not in self.command_map
        self.command_map[notification_name] = command_factory
        if first:
            self.view.register_observer(notification_name, Observer(self.execute_command, self))
            logger.debug("Registered command for %s", notification_name)
        else:
            logger.debug("Replaced command for %s", notification_name)

    def remove_command(self, notification_name: str) -> None:
        if not self.has_command(notification_name):
            return
        self.view.remove_observer(notification_name, self)
        del self.command_map[notification_name]
        logger.debug("Removed command for %s", notification_name)

    def has_command(self, notification_name: str) -> bool:
        return notification_name in self.command_map
