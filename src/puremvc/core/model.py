"""Model: named registry of proxies."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict

if TYPE_CHECKING:
    from ..interfaces import IFacade, IProxy

logger = logging.getLogger(__name__)


class Model:
    def __init__(self, facade: IFacade | None = None) -> None:
        self.facade = facade
        self.proxy_map: Dict[str, IProxy] = {}
        self.initialize_model()

    def initialize_model(self) -> None:
        """Subclass hook run at the end of construction."""

    def register_proxy(self, proxy: IProxy) -> None:
        if self.facade is not None:
            proxy.initialize_notifier(self.facade)
        self.proxy_map[proxy.proxy_name] = proxy
        logger.debug("Registered proxy %s", proxy.proxy_name)
        proxy.on_register()

    def retrieve_proxy(self, proxy_name: str) -> IProxy | None:
        return self.proxy_map.get(proxy_name)

    def remove_proxy(self, proxy_name: str) -> IProxy | None:
        proxy = self.proxy_map.pop(proxy_name, None)
        if proxy is None:
            return None
        logger.debug("Removed proxy %s", proxy_name)
        proxy.on_remove()
        return proxy

    def has_proxy(self, proxy_name: str) -> bool:
        return proxy_name in self.proxy_map
