from __future__ import annotations

import logging
import threading

from .address import normalize_mac
from .config import Settings
from .errors import ManufacturerNotFoundError
from .registry import Registry
from .storage import ensure_registry

logger = logging.getLogger(__name__)


class OUILookup:
    """
    Manufacturer lookup backed by a locally cached Wireshark manuf file.

    The cache is fetched on first use and loaded into an owned Registry.
    """

    def __init__(self, settings: Settings | None = None, registry: Registry | None = None) -> None:
        self.settings = settings or Settings.from_env()
        self.registry = registry if registry is not None else Registry()
        self._loaded = registry is not None and len(registry) > 0
        self._load_lock = threading.Lock()

    def load(self, refresh: bool = False) -> int:
        with self._load_lock:
            return self._load(refresh)

    def _load(self, refresh: bool = False) -> int:
        path = ensure_registry(self.settings, refresh=refresh)
        count = self.registry.reload(path)
        self._loaded = True
        logger.debug("Registry holds %d prefixes", count)
        return count

    def manufacturer(self, mac: str) -> str:
        if not self._loaded:
            # Concurrent first callers share a single download
            with self._load_lock:
                if not self._loaded:
                    self._load()
        return self.registry.resolve(normalize_mac(mac))

    def lookup(self, mac: str) -> str | None:
        try:
            return self.manufacturer(mac)
        except ManufacturerNotFoundError:
            return None
