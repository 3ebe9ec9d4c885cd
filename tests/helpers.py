from __future__ import annotations

SAMPLE_MANUF = """
# Comment
00:00:00            00:00:00        Xerox Corporation
FC:D2:B6:00/28      CgPowerAndIn    Cg Power And Industrial Solutions Ltd
FC:D2:B6:10/28      Link            Link (Far-East) Corporation
FC:D2:B6:20/28      Soma            Soma GmbH
8C:1F:64:DC:60/36   R&K             R&K
"""


class FakeResponse:
    """Minimal stand-in for a streamed requests.Response."""

    def __init__(self, content: bytes, status_code: int = 200, headers: dict[str, str] | None = None) -> None:
        self.content = content
        self.status_code = status_code
        self.headers = headers or {}
        self.closed = False

    def iter_content(self, chunk_size: int = 1):
        for i in range(0, len(self.content), chunk_size):
            yield self.content[i : i + chunk_size]

    def __enter__(self) -> FakeResponse:
        return self

    def __exit__(self, *exc: object) -> None:
        self.closed = True
