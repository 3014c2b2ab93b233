"""Notification, Observer and Notifier: the publish/subscribe primitives."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

from ..errors import NotifierNotInitializedError

if TYPE_CHECKING:
    from ..interfaces import IFacade, INotification


class Notification:
    """A named message with an optional body and type.

    The name is fixed at construction; body and type may be reassigned by
    handlers further down the fan-out.
    """

    __slots__ = ("_name", "body", "type")

    def __init__(self, name: str, body: Any = None, type: Optional[str] = None) -> None:
        self._name = name
        self.body = body
        self.type = type

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Notification(name={self._name!r}, body={self.body!r}, type={self.type!r})"

    def __str__(self) -> str:
        return f"Notification Name: {self._name}\nBody: {self.body}\nType: {self.type}"


class Observer:
    """A ``(notify_method, notify_context)`` pair registered with the View.

    The context is only ever compared by identity; it is how an observer is
    located again for removal.
    """

    __slots__ = ("notify_method", "notify_context")

    def __init__(self, notify_method: Callable[["INotification"], None], notify_context: object) -> None:
        self.notify_method = notify_method
        self.notify_context = notify_context

    def notify_observer(self, notification: "INotification") -> None:
        self.notify_method(notification)

    def compare_notify_context(self, obj: object) -> bool:
        return obj is self.notify_context

    def __repr__(self) -> str:
        return f"Observer(context={type(self.notify_context).__name__}@{id(self.notify_context):#x})"


class Notifier:
    """Base for actors that send notifications through their owning Facade.

    The facade is attached by the core actor that registers (proxies,
    mediators) or creates (commands) the notifier.
    """

    _facade: IFacade | None = None

    def initialize_notifier(self, facade: "IFacade") -> None:
        self._facade = facade

    @property
    def facade(self) -> "IFacade":
        if self._facade is None:
            raise NotifierNotInitializedError(
                f"{type(self).__name__} has no facade; register it through a Facade first"
            )
        return self._facade

    def send_notification(self, notification_name: str, body: Any = None, type: Optional[str] = None) -> None:
        self.facade.send_notification(notification_name, body, type)
