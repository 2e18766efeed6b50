"""Creates empty SQL migration file pairs."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from pathlib import Path

_log = logging.getLogger(__name__)

_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


class SqlCreator:
    """Writes empty up and down .sql files for a migration."""

    name = "sql"

    def creates(self, migration_type: str) -> bool:
        """Whether this creator handles the given migration type."""
        return migration_type == "sql"

    def create(self, directory: str | os.PathLike[str], name: str, args: list[str]) -> None:
        """Create the empty up and down files in directory."""
        timestamp = datetime.now(timezone.utc).strftime(_TIMESTAMP_FORMAT)
        base = f"{timestamp}_{name}"
        directory = Path(directory)

        for direction in ("up", "down"):
            path = directory / f"{base}.{direction}.sql"
            try:
                path.touch()
            except OSError as exc:
                raise OSError(f"error creating file: {exc}") from exc

        _log.info("generated: %s/%s.up.sql", directory, base)
        _log.info("generated: %s/%s.down.sql", directory, base)