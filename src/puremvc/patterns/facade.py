"""Facade: composition root over Model, View and Controller."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Optional

from ..config.settings import CoreSettings
from ..core.controller import Controller
from ..core.model import Model
from ..core.view import View
from ..errors import DuplicateCoreError
from ..logging import configure_logging
from .observer import Notification

if TYPE_CHECKING:
    from ..interfaces import CommandFactory, IMediator, INotification, IProxy

logger = logging.getLogger(__name__)


class Facade:
    """Single entry point for an application core.

    A Facade builds and owns its Model, View and Controller and hands itself
    to every proxy, mediator and command registered through it. Each live
    Facade claims a key; building a second one under the same key raises
    :class:`DuplicateCoreError` until the first is disposed.

    Applications usually subclass it and register their startup commands in
    ``initialize_controller``::

        class AppFacade(Facade):
            def initialize_controller(self) -> None:
                super().initialize_controller()
                self.register_command(STARTUP, StartupCommand)
    """

    _cores: ClassVar[Dict[str, "Facade"]] = {}

    def __init__(self, key: Optional[str] = None, settings: Optional[CoreSettings] = None) -> None:
        self.settings = settings or CoreSettings()
        self.key = key if key is not None else self.settings.key
        if self.key in Facade._cores:
            raise DuplicateCoreError(self.key)
        Facade._cores[self.key] = self

        self.model: Model | None = None
        self.view: View | None = None
        self.controller: Controller | None = None
        try:
            if self.settings.json_logs:
                configure_logging(self.settings.log_level)
            self.initialize_facade()
        except Exception:
            Facade._cores.pop(self.key, None)
            raise
        logger.info("Facade initialized", extra={"core_key": self.key})

    def initialize_facade(self) -> None:
        self.initialize_model()
        self.initialize_view()
        self.initialize_controller()

    def initialize_model(self) -> None:
        if self.model is None:
            self.model = Model(self)

    def initialize_view(self) -> None:
        if self.view is None:
            self.view = View(self, trace_notifications=self.settings.trace_notifications)

    def initialize_controller(self) -> None:
        if self.controller is None:
            self.controller = Controller(self.view, self)

    @classmethod
    def has_core(cls, key: str) -> bool:
        return key in Facade._cores

    @classmethod
    def remove_core(cls, key: str) -> None:
        if Facade._cores.pop(key, None) is not None:
            logger.info("Facade removed", extra={"core_key": key})

    def dispose(self) -> None:
        """Release this facade's key so a new core can be built under it."""
        if Facade._cores.get(self.key) is self:
            Facade.remove_core(self.key)

    # Proxies

    def register_proxy(self, proxy: IProxy) -> None:
        self.model.register_proxy(proxy)

    def retrieve_proxy(self, proxy_name: str) -> IProxy | None:
        return self.model.retrieve_proxy(proxy_name)

    def remove_proxy(self, proxy_name: str) -> IProxy | None:
        return self.model.remove_proxy(proxy_name)

    def has_proxy(self, proxy_name: str) -> bool:
        return self.model.has_proxy(proxy_name)

    # Mediators

    def register_mediator(self, mediator: IMediator) -> None:
        self.view.register_mediator(mediator)

    def retrieve_mediator(self, mediator_name: str) -> IMediator | None:
        return self.view.retrieve_mediator(mediator_name)

    def remove_mediator(self, mediator_name: str) -> IMediator | None:
        return self.view.remove_mediator(mediator_name)

    def has_mediator(self, mediator_name: str) -> bool:
        return self.view.has_mediator(mediator_name)

    # Commands

    def register_command(self, notification_name: str, command_factory: CommandFactory) -> None:
        self.controller.register_command(notification_name, command_factory)

    def remove_command(self, notification_name: str) -> None:
        self.controller.remove_command(notification_name)

    def has_command(self, notification_name: str) -> bool:
        return self.controller.has_command(notification_name)

    # Notifications

    def send_notification(self, notification_name: str, body: Any = None, type: Optional[str] = None) -> None:
        self.notify_observers(Notification(notification_name, body, type))

    def notify_observers(self, notification: INotification) -> None:
        self.view.notify_observers(notification)
