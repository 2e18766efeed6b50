"""Yarn plugins: install dependencies before builds and after initialization."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path

from oxtools.project import Options

_INSTALL = ["yarn", "install", "--no-progress"]


class YarnPlugin:
    """Runs `yarn install` before a build when the project uses yarn."""

    name = "yarn"

    def run_before_build(self, root: str | os.PathLike[str], args: list[str]) -> None:
        command = self.build_command()
        if command is None:
            return
        subprocess.run(command, check=True)

    def build_command(self) -> list[str] | None:
        """The install command when yarn.lock exists, otherwise None."""
        if not Path("yarn.lock").exists():
            return None
        return list(_INSTALL)


class YarnAfterInitializer:
    """Installs the JavaScript dependencies of a new application."""

    name = "yarn/afterinitializer"

    def after_initialize(self, options: Options) -> None:
        subprocess.run(list(_INSTALL), check=True)