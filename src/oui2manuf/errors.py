from __future__ import annotations


class OUIError(Exception):
    """Base class for all oui2manuf errors."""


class RegistryError(OUIError):
    """The registry could not be made available for lookups."""


class RegistryFileError(RegistryError):
    """The registry source could not be opened."""


class RegistryScanError(RegistryError):
    """Reading the registry source failed partway through."""


class RegistryFetchError(RegistryError):
    """Downloading the upstream registry failed."""


class ManufacturerNotFoundError(OUIError, LookupError):
    def __init__(self, address: str) -> None:
        super().__init__(f"Manufacturer not found for MAC: {address}")
        self.address = address
