"""Proxy, Mediator, Command and Observer patterns."""

from .command import MacroCommand, SimpleCommand
from .mediator import Mediator
from .observer import Notification, Notifier, Observer
from .proxy import Proxy

__all__ = [
    "MacroCommand",
    "Mediator",
    "Notification",
    "Notifier",
    "Observer",
    "Proxy",
    "SimpleCommand",
]
