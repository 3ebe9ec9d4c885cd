import os
import time
from datetime import timedelta

from oui2manuf.config import Settings
from oui2manuf.storage import cache_age, cache_exists, ensure_registry, is_stale


def test_cache_checks(tmp_path):
    path = tmp_path / "manuf.db"
    assert not cache_exists(path)
    assert cache_age(path) is None
    assert is_stale(path, None)

    path.write_text("00:00:00 Xerox\n", encoding="utf-8")
    assert cache_exists(path)
    assert cache_age(path) >= timedelta(0)
    assert not is_stale(path, None)
    assert not is_stale(path, timedelta(days=1))

    old = time.time() - 3 * 86400
    os.utime(path, (old, old))
    assert is_stale(path, timedelta(days=1))


def test_ensure_registry_downloads_when_missing(tmp_path, fake_get):
    settings = Settings(data_dir=tmp_path / "data", url="https://example.invalid/manuf.gz")
    path = ensure_registry(settings)
    assert path == settings.db_path
    assert path.is_file()
    assert len(fake_get.calls) == 1


def test_ensure_registry_uses_cache(tmp_path, fake_get):
    settings = Settings(data_dir=tmp_path)
    settings.db_path.write_text("00:00:00 Xerox\n", encoding="utf-8")

    ensure_registry(settings)
    assert fake_get.calls == []

    ensure_registry(settings, refresh=True)
    assert len(fake_get.calls) == 1


def test_ensure_registry_refreshes_stale_cache(tmp_path, fake_get):
    settings = Settings(data_dir=tmp_path, max_age_days=1)
    settings.db_path.write_text("00:00:00 Xerox\n", encoding="utf-8")
    old = time.time() - 3 * 86400
    os.utime(settings.db_path, (old, old))

    ensure_registry(settings)
    assert len(fake_get.calls) == 1
