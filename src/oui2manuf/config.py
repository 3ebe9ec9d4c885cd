from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

# Wireshark's manufacturer database (gzip-compressed manuf file)
DEFAULT_URL = "https://www.wireshark.org/download/automated/data/manuf.gz"
DEFAULT_DATA_DIR = Path("./data")
DEFAULT_FILE_NAME = "manuf.db"
DEFAULT_TIMEOUT = 30.0

ENV_DATA_DIR = "OUI2MANUF_DATA_DIR"
ENV_URL = "OUI2MANUF_URL"
ENV_TIMEOUT = "OUI2MANUF_TIMEOUT"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    file_name: str = DEFAULT_FILE_NAME
    url: str = DEFAULT_URL
    timeout: float = DEFAULT_TIMEOUT
    max_age_days: float | None = None

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.file_name

    @classmethod
    def from_env(cls, **overrides: object) -> Settings:
        """
        Defaults, then environment variables, then explicit overrides.
        Overrides that are None are ignored, so argparse values can be
        passed straight through.
        """
        settings = cls()

        env: dict[str, object] = {}
        if os.environ.get(ENV_DATA_DIR):
            env["data_dir"] = Path(os.environ[ENV_DATA_DIR])
        if os.environ.get(ENV_URL):
            env["url"] = os.environ[ENV_URL]
        if os.environ.get(ENV_TIMEOUT):
            try:
                env["timeout"] = float(os.environ[ENV_TIMEOUT])
            except ValueError as e:
                raise ValueError(f"{ENV_TIMEOUT} must be a number of seconds") from e

        explicit = {k: v for k, v in overrides.items() if v is not None}
        if "data_dir" in explicit:
            explicit["data_dir"] = Path(explicit["data_dir"])  # type: ignore[arg-type]

        return replace(settings, **{**env, **explicit})
