"""Initializer that writes the inflections.yml file of a new application."""

from __future__ import annotations

import logging
from pathlib import Path

from oxtools.project import Options

_log = logging.getLogger(__name__)

_FILENAME = "inflections.yml"
_CONTENT = '{ "singular": "plural" }'


class InflectionsInitializer:
    """Creates inflections.yml unless it already exists."""

    name = "flect/initializer"

    def initialize(self, options: Options) -> None:
        path = Path(options.folder) / _FILENAME
        try:
            path.stat()
        except FileNotFoundError:
            pass
        else:
            _log.warning("inflections.yml file already exist, skipping generation")
            return

        path.write_text(_CONTENT, encoding="utf-8")