"""Locates the blogstore data directory following the XDG Base Directory spec.

Directory layout:
    ~/.local/share/blogstore/
        blogstore.db        # SQLite database (the durable region)
"""

import os
from pathlib import Path


class StorePaths:
    """Resolves blogstore paths.

    ``BLOGSTORE_DATA_DIR`` overrides the data directory; it can also be passed
    explicitly for testing.
    """

    def __init__(self, *, data_dir: Path | None = None) -> None:
        env_data_dir = os.environ.get("BLOGSTORE_DATA_DIR")
        self._data_dir = (
            data_dir
            or (Path(env_data_dir).expanduser() if env_data_dir else None)
            or Path.home() / ".local" / "share" / "blogstore"
        )

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    @property
    def database_file(self) -> Path:
        return self._data_dir / "blogstore.db"
