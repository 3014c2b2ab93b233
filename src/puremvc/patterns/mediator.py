"""Base class for application mediators."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from .observer import Notifier

if TYPE_CHECKING:
    from ..interfaces import INotification


class Mediator(Notifier):
    """Bridges a view component to notification-based communication.

    ``list_notification_interests`` is read once at registration and again at
    removal, so it should return the same names both times.
    """

    NAME = "Mediator"

    def __init__(self, mediator_name: Optional[str] = None, view_component: Any = None) -> None:
        self.mediator_name = mediator_name if mediator_name is not None else self.NAME
        self.view_component = view_component

    def list_notification_interests(self) -> List[str]:
        return []

    def handle_notification(self, notification: INotification) -> None:
        pass

    def on_register(self) -> None:
        pass

    def on_remove(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mediator_name={self.mediator_name!r})"
