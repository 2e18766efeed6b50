"""Creates fizz migration file pairs."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from pathlib import Path

from oxtools.fizz.generators import generator_for

_log = logging.getLogger(__name__)

_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


class FizzCreator:
    """Writes the up and down .fizz files for a migration."""

    name = "fizz"

    def creates(self, migration_type: str) -> bool:
        """Whether this creator handles the given migration type."""
        return migration_type == "fizz"

    def create(self, directory: str | os.PathLike[str], name: str, args: list[str]) -> None:
        """Generate the fizz content for name and write both files into directory."""
        up, down = generator_for(name).generate(name, list(args))

        timestamp = datetime.now(timezone.utc).strftime(_TIMESTAMP_FORMAT)
        base = f"{timestamp}_{name}"
        directory = Path(directory)

        up_path = directory / f"{base}.up.fizz"
        down_path = directory / f"{base}.down.fizz"
        _write(up_path, up)
        _write(down_path, down)
        _log.info("generated: %s", up_path)
        _log.info("generated: %s", down_path)