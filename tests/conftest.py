import gzip
import time

import pytest

from .helpers import SAMPLE_MANUF, FakeResponse


@pytest.fixture
def manuf_file(tmp_path):
    path = tmp_path / "manuf.db"
    path.write_text(SAMPLE_MANUF, encoding="utf-8")
    return path


@pytest.fixture
def fake_get(monkeypatch):
    """
    Replace requests.get in oui2manuf.fetch. Requested URLs are recorded in
    `fake_get.calls`; set `fake_get.response` to control what is returned
    and `fake_get.delay` to slow the request down.
    """
    calls = []

    def _get(url, stream=False, timeout=None):
        calls.append(url)
        if _get.delay:
            time.sleep(_get.delay)
        return _get.response

    _get.response = FakeResponse(gzip.compress(SAMPLE_MANUF.encode("utf-8")))
    _get.calls = calls
    _get.delay = 0.0
    monkeypatch.setattr("oui2manuf.fetch.requests.get", _get)
    return _get
