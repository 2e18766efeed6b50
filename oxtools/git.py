"""Git plugins: keep empty folders tracked and initialize the repository."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path

from oxtools.project import Options

_log = logging.getLogger(__name__)

_KEPT_FOLDERS = ("migrations", "public")


class GitInitializer:
    """Adds .gitkeep files so empty application folders are tracked."""

    name = "model/initializer"

    def initialize(self, options: Options) -> None:
        folder = Path(options.folder)
        for kept in _KEPT_FOLDERS:
            directory = folder / kept
            directory.mkdir(parents=True, exist_ok=True)
            (directory / ".gitkeep").write_bytes(b"")


class GitAfterInitializer:
    """Runs `git init` in a freshly created application when git is available."""

    name = "git/repoinitializer"

    def after_initialize(self, options: Options) -> None:
        if shutil.which("git") is None:
            _log.warning("[warning] Git repo was not initialized given git was not present")
            return

        os.chdir(options.folder)
        subprocess.run(["git", "init"], check=True)