from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from .errors import RegistryFileError, RegistryScanError
from .resolver import resolve

logger = logging.getLogger(__name__)


def normalize_prefix(specifier: str) -> str:
    """
    Collapse a registry prefix into a lookup key.

    Sub-octet blocks carry a bit-length suffix and become whole octets plus
    one trailing hex digit:

        FC:D2:B6:00/28     -> FC:D2:B6:0
        8C:1F:64:DC:70/36  -> 8C:1F:64:DC:7

    Only /28 and /36 are understood. Any other suffix returns the address
    part unchanged, so such blocks match as if they were whole octets.

    Raises ValueError if a /28 or /36 specifier has too few octets.
    """
    specifier = specifier.upper()
    if "/" not in specifier:
        return specifier

    mac, _, bits = specifier.partition("/")
    parts = mac.split(":")

    if bits == "28":
        whole = 3
    elif bits == "36":
        whole = 4
    else:
        logger.debug("Unknown prefix length /%s for %s, using address as-is", bits, mac)
        return mac

    if len(parts) <= whole or not parts[whole]:
        raise ValueError(f"Prefix {specifier!r} is too short for /{bits}")

    return f"{':'.join(parts[:whole])}:{parts[whole][0]}"


def load_registry(stream: Iterable[str]) -> dict[str, str]:
    """
    Parse manuf-format text into {normalized prefix: short name}.

    Comments, blank lines and lines with fewer than two fields are skipped.
    Later entries for the same key overwrite earlier ones.
    """
    mapping: dict[str, str] = {}
    try:
        for line in stream:
            if line.startswith("#") or not line.strip():
                continue

            fields = line.split()
            if len(fields) < 2:
                continue

            try:
                key = normalize_prefix(fields[0])
            except ValueError as e:
                logger.debug("Skipping malformed line: %s", e)
                continue

            mapping[key] = fields[1]
    except (OSError, UnicodeDecodeError) as e:
        raise RegistryScanError(f"error reading registry: {e}") from e

    return mapping


def load_registry_file(path: str | Path) -> dict[str, str]:
    p = Path(path)
    try:
        handle = p.open("r", encoding="utf-8")
    except OSError as e:
        raise RegistryFileError(f"failed to open manuf file {p}: {e}") from e

    with handle:
        mapping = load_registry(handle)

    logger.info("OUI database loaded from %s with %d entries", p, len(mapping))
    return mapping


class Registry:
    """
    An owned, reloadable registry snapshot.

    Loads build a complete new mapping before swapping it in, so a failed
    load keeps the previous snapshot and readers never observe a partial one.
    """

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._entries: Mapping[str, str] = MappingProxyType(dict(entries or {}))
        self._lock = threading.Lock()

    @property
    def entries(self) -> Mapping[str, str]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def _swap(self, mapping: dict[str, str]) -> int:
        with self._lock:
            self._entries = MappingProxyType(mapping)
        return len(mapping)

    def load(self, stream: Iterable[str]) -> int:
        return self._swap(load_registry(stream))

    def load_file(self, path: str | Path) -> int:
        return self._swap(load_registry_file(path))

    reload = load_file

    def resolve(self, address: str) -> str:
        return resolve(self._entries, address)
