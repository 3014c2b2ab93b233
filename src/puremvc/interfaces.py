"""Structural contracts shared by the core actors and the patterns."""
from __future__ import annotations

from typing import Any, Callable, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class INotification(Protocol):
    @property
    def name(self) -> str:
        ...

    body: Any
    type: Optional[str]


@runtime_checkable
class IObserver(Protocol):
    def notify_observer(self, notification: INotification) -> None:
        ...

    def compare_notify_context(self, obj: object) -> bool:
        ...


@runtime_checkable
class INotifier(Protocol):
    def send_notification(self, notification_name: str, body: Any = None, type: Optional[str] = None) -> None:
        ...

    def initialize_notifier(self, facade: "IFacade") -> None:
        ...


@runtime_checkable
class ICommand(INotifier, Protocol):
    def execute(self, notification: INotification) -> None:
        ...


CommandFactory = Callable[[], ICommand]


@runtime_checkable
class IProxy(INotifier, Protocol):
    proxy_name: str
    data: Any

    def on_register(self) -> None:
        ...

    def on_remove(self) -> None:
        ...


@runtime_checkable
class IMediator(INotifier, Protocol):
    mediator_name: str
    view_component: Any

    def list_notification_interests(self) -> List[str]:
        ...

    def handle_notification(self, notification: INotification) -> None:
        ...

    def on_register(self) -> None:
        ...

    def on_remove(self) -> None:
        ...


@runtime_checkable
class IModel(Protocol):
    def register_proxy(self, proxy: IProxy) -> None:
        ...

    def retrieve_proxy(self, proxy_name: str) -> IProxy | None:
        ...

    def remove_proxy(self, proxy_name: str) -> IProxy | None:
        ...

    def has_proxy(self, proxy_name: str) -> bool:
        ...


@runtime_checkable
class IView(Protocol):
    def register_observer(self, notification_name: str, observer: IObserver) -> None:
        ...

    def remove_observer(self, notification_name: str, notify_context: object) -> None:
        ...

    def notify_observers(self, notification: INotification) -> None:
        ...

    def register_mediator(self, mediator: IMediator) -> None:
        ...

    def retrieve_mediator(self, mediator_name: str) -> IMediator | None:
        ...

    def remove_mediator(self, mediator_name: str) -> IMediator | None:
        ...

    def has_mediator(self, mediator_name: str) -> bool:
        ...


@runtime_checkable
class IController(Protocol):
    def register_command(self, notification_name: str, command_factory: CommandFactory) -> None:
        ...

    def execute_command(self, notification: INotification) -> None:
        ...

    def remove_command(self, notification_name: str) -> None:
        ...

    def has_command(self, notification_name: str) -> bool:
        ...


@runtime_checkable
class IFacade(IModel, Protocol):
    def register_command(self, notification_name: str, command_factory: CommandFactory) -> None:
        ...

    def remove_command(self, notification_name: str) -> None:
        ...

    def has_command(self, notification_name: str) -> bool:
        ...

    def register_mediator(self, mediator: IMediator) -> None:
        ...

    def retrieve_mediator(self, mediator_name: str) -> IMediator | None:
        ...

    def remove_mediator(self, mediator_name: str) -> IMediator | None:
        ...

    def has_mediator(self, mediator_name: str) -> bool:
        ...

    def send_notification(self, notification_name: str, body: Any = None, type: Optional[str] = None) -> None:
        ...

    def notify_observers(self, notification: INotification) -> None:
        ...
