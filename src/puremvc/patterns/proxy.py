"""Base class for application proxies."""
from __future__ import annotations

from typing import Any, Optional

from .observer import Notifier


class Proxy(Notifier):
    """Manages a slice of model data registered with the Model by name.

    Subclasses usually override ``on_register`` to fetch or subscribe to
    their data and ``on_remove`` to release it.
    """

    NAME = "Proxy"

    def __init__(self, proxy_name: Optional[str] = None, data: Any = None) -> None:
        self.proxy_name = proxy_name if proxy_name is not None else self.NAME
        self.data = data

    def on_register(self) -> None:
        """Called by the Model after the proxy is registered."""

    def on_remove(self) -> None:
        """Called by the Model after the proxy is removed."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(proxy_name={self.proxy_name!r})"
