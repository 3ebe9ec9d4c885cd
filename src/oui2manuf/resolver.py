from __future__ import annotations

from collections.abc import Mapping

from .errors import ManufacturerNotFoundError


def split_address(address: str) -> list[str]:
    # Registry keys are uppercase; empty segments come from trailing colons
    return [p for p in address.upper().split(":") if p]


def _key24(parts: list[str]) -> str:
    return ":".join(parts[:3])


def _key28(parts: list[str]) -> str:
    return f"{':'.join(parts[:3])}:{parts[3][:1]}"


def _key36(parts: list[str]) -> str:
    return f"{':'.join(parts[:4])}:{parts[4][:1]}"


def candidate_keys(address: str) -> list[str]:
    """
    Registry keys to probe for `address`, most specific first.

    - 5+ segments: 36-bit, 28-bit, 24-bit
    - 4 segments:  28-bit, 24-bit
    - 3 segments:  24-bit
    - fewer:       nothing
    """
    parts = split_address(address)

    if len(parts) >= 5:
        return [_key36(parts), _key28(parts), _key24(parts)]
    if len(parts) >= 4:
        return [_key28(parts), _key24(parts)]
    if len(parts) >= 3:
        return [_key24(parts)]
    return []


def resolve(mapping: Mapping[str, str], address: str) -> str:
    """
    Longest-prefix match of `address` against a registry mapping.

    Raises ManufacturerNotFoundError when no candidate key is present.
    """
    for key in candidate_keys(address):
        label = mapping.get(key)
        if label is not None:
            return label
    raise ManufacturerNotFoundError(address)
