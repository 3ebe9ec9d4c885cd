from __future__ import annotations

import logging
import os
import re
import tempfile
import zlib
from pathlib import Path
from typing import BinaryIO

import requests

from .errors import RegistryFetchError, RegistryScanError
from .registry import load_registry

logger = logging.getLogger(__name__)

_GZIP_MAGIC = b"\x1f\x8b"
_CHUNK_SIZE = 64 * 1024

# Every manuf key starts with a 24-bit OUI
_KEY_RE = re.compile(r"^[0-9A-F]{2}:[0-9A-F]{2}:[0-9A-F]{2}(?::|$)")


def _write_body(resp: requests.Response, out: BinaryIO) -> None:
    """
    Stream the response body into `out`, gunzipping it on the fly when it
    starts with the gzip magic. Plain bodies (plain mirrors, or a
    Content-Encoding: gzip already undone by requests) are copied as-is.
    """
    decomp = None
    first = True
    try:
        for chunk in resp.iter_content(chunk_size=_CHUNK_SIZE):
            if not chunk:
                continue
            if first:
                first = False
                if chunk[:2] == _GZIP_MAGIC:
                    decomp = zlib.decompressobj(16 + zlib.MAX_WBITS)
            out.write(decomp.decompress(chunk) if decomp else chunk)

        if decomp is not None:
            out.write(decomp.flush())
            if not decomp.eof:
                raise RegistryFetchError("truncated gzip data")
    except zlib.error as e:
        raise RegistryFetchError(f"corrupt gzip data: {e}") from e


def _check_registry(path: str | Path) -> int:
    """
    Reject bodies that are not a manuf registry, such as captive portal or
    error pages served with a 200 status.
    """
    try:
        with open(path, "r", encoding="utf-8") as handle:
            mapping = load_registry(handle)
    except RegistryScanError as e:
        raise RegistryFetchError(f"downloaded file is not a manuf registry: {e}") from e

    count = sum(1 for key in mapping if _KEY_RE.match(key))
    if count == 0:
        raise RegistryFetchError("downloaded file contains no manuf entries")
    return count


def download_registry(url: str, dest: str | Path, timeout: float = 30.0) -> Path:
    """
    Fetch the registry from `url` and store it, decompressed, at `dest`.

    The file is written to a temporary sibling and moved into place only
    once complete and valid, so a failed download never replaces the cache.
    """
    dest = Path(dest)
    logger.info("Fetching latest OUI database from %s", url)

    try:
        resp = requests.get(url, stream=True, timeout=timeout)
    except requests.RequestException as e:
        raise RegistryFetchError(f"error downloading the OUI database: {e}") from e

    with resp:
        if resp.status_code != 200:
            raise RegistryFetchError(f"failed to download file: status code {resp.status_code}")

        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=dest.parent, prefix=f".{dest.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "wb") as out:
                    _write_body(resp, out)
                count = _check_registry(tmp_name)
                os.chmod(tmp_name, 0o644)
                os.replace(tmp_name, dest)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except requests.RequestException as e:
            raise RegistryFetchError(f"error downloading the OUI database: {e}") from e
        except OSError as e:
            raise RegistryFetchError(f"error writing {dest}: {e}") from e

    logger.info("OUI database updated and saved to %s (%d entries)", dest, count)
    return dest
