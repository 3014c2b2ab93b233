"""View: mediator registry and notification fan-out."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, List

from ..patterns.observer import Observer

if TYPE_CHECKING:
    from ..interfaces import IFacade, IMediator, INotification, IObserver

logger = logging.getLogger(__name__)


class View:
    """Keeps mediators by name and observer lists by notification name.

    Observers for a name are notified in the order they were registered.
    """

    def __init__(self, facade: IFacade | None = None, *, trace_notifications: bool = False) -> None:
        self.facade = facade
        self.trace_notifications = trace_notifications
        self.mediator_map: Dict[str, IMediator] = {}
        self.observer_map: Dict[str, List[IObserver]] = {}
        self.initialize_view()

    def initialize_view(self) -> None:
        """Subclass hook run at the end of construction."""

    def register_observer(self, notification_name: str, observer: IObserver) -> None:
        self.observer_map.setdefault(notification_name, []).append(observer)

    def remove_observer(self, notification_name: str, notify_context: object) -> None:
        observers = self.observer_map.get(notification_name)
        if observers is None:
            return

        observers[:] = [obs for obs in observers if not obs.compare_notify_context(notify_context)]
        if not observers:
            del self.observer_map[notification_name]

    def has_observer_list(self, notification_name: str) -> bool:
        return notification_name in self.observer_map

    def notify_observers(self, notification: INotification) -> None:
        observers = self.observer_map.get(notification.name)
        if observers is None:
            return

        # Handlers may register or remove observers for this same name.
        snapshot = list(observers)
        if self.trace_notifications:
            logger.debug(
                "Dispatching notification",
                extra={"notification": notification.name, "observers": len(snapshot)},
            )
        for observer in snapshot:
            observer.notify_observer(notification)

    def register_mediator(self, mediator: IMediator) -> None:
        name = mediator.mediator_name
        if name in self.mediator_map:
            logger.debug("Mediator %s already registered; ignoring", name)
            return

        if self.facade is not None:
            mediator.initialize_notifier(self.facade)

        interests = list(mediator.list_notification_interests())
        self.mediator_map[name] = mediator
        if interests:
            observer = Observer(mediator.handle_notification, mediator)
            for interest in interests:
                self.register_observer(interest, observer)

        logger.debug("Registered mediator %s", name, extra={"interests": interests})
        mediator.on_register()

    def retrieve_mediator(self, mediator_name: str) -> IMediator | None:
        return self.mediator_map.get(mediator_name)

    def remove_mediator(self, mediator_name: str) -> IMediator | None:
        mediator = self.mediator_map.get(mediator_name)
        if mediator is None:
            return None

        for interest in mediator.list_notification_interests():
            self.remove_observer(interest, mediator)

        del self.mediator_map[mediator_name]
        logger.debug("Removed mediator %s", mediator_name)
        mediator.on_remove()
        return mediator

    def has_mediator(self, mediator_name: str) -> bool:
        return mediator_name in self.mediator_map
