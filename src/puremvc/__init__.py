"""PureMVC: a Model-View-Controller meta-pattern framework."""
from __future__ import annotations

from .errors import DuplicateCoreError, NotifierNotInitializedError, PureMVCError
from .patterns import (
    MacroCommand,
    Mediator,
    Notification,
    Notifier,
    Observer,
    Proxy,
    SimpleCommand,
)
from .core import Controller, Model, View
from .config import CoreSettings
from .patterns.facade import Facade

__version__ = "0.1.0"

__all__ = [
    "Controller",
    "CoreSettings",
    "DuplicateCoreError",
    "Facade",
    "MacroCommand",
    "Mediator",
    "Model",
    "Notification",
    "Notifier",
    "NotifierNotInitializedError",
    "Observer",
    "Proxy",
    "PureMVCError",
    "SimpleCommand",
    "View",
]
