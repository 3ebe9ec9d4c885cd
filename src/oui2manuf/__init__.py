from .errors import (
    ManufacturerNotFoundError,
    OUIError,
    RegistryError,
    RegistryFetchError,
    RegistryFileError,
    RegistryScanError,
)
from .oui import OUILookup
from .registry import Registry, load_registry, load_registry_file, normalize_prefix
from .resolver import candidate_keys, resolve

__all__ = [
    "ManufacturerNotFoundError",
    "OUIError",
    "OUILookup",
    "Registry",
    "RegistryError",
    "RegistryFetchError",
    "RegistryFileError",
    "RegistryScanError",
    "candidate_keys",
    "load_registry",
    "load_registry_file",
    "normalize_prefix",
    "resolve",
]

__version__ = "0.1.0"
