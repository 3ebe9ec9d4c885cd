from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from pathlib import Path

from .config import Settings
from .fetch import download_registry

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(UTC)


def cache_exists(path: str | Path) -> bool:
    return Path(path).is_file()


def cache_age(path: str | Path) -> timedelta | None:
    p = Path(path)
    if not p.is_file():
        return None
    mtime = datetime.fromtimestamp(p.stat().st_mtime, UTC)
    return utc_now() - mtime


def is_stale(path: str | Path, max_age: timedelta | None) -> bool:
    age = cache_age(path)
    if age is None:
        return True
    if max_age is None:
        return False
    return age > max_age


def ensure_registry(settings: Settings, refresh: bool = False) -> Path:
    """
    Return the path of a usable cached registry, downloading it when it is
    missing, older than settings.max_age_days, or when refresh is requested.
    """
    path = settings.db_path
    max_age = timedelta(days=settings.max_age_days) if settings.max_age_days is not None else None

    if refresh or is_stale(path, max_age):
        download_registry(settings.url, path, timeout=settings.timeout)
    else:
        logger.debug("Using cached OUI database at %s", path)

    return path
