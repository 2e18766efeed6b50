"""Webpack plugin: runs the package.json build and dev scripts."""

from __future__ import annotations

import enum
import logging
import os
import subprocess
from pathlib import Path

_log = logging.getLogger(__name__)


class PackageManager(enum.Enum):
    YARN = "YARN"
    NPM = "NPM"
    NONE = "NONE"


_RUNNERS = {PackageManager.YARN: "yarn", PackageManager.NPM: "npm"}


class WebpackPlugin:
    """Runs webpack through the project's JavaScript package manager."""

    name = "Webpack"

    def package_manager(self, root: str | os.PathLike[str]) -> PackageManager:
        """Yarn if yarn.lock exists, npm if package-lock.json exists, else none."""
        if (Path(root) / "yarn.lock").is_file():
            return PackageManager.YARN
        if (Path(root) / "package-lock.json").is_file():
            return PackageManager.NPM
        return PackageManager.NONE

    def _command(self, root: str | os.PathLike[str], script: str) -> list[str] | None:
        runner = _RUNNERS.get(self.package_manager(root))
        if runner is None:
            _log.warning("did not find yarn.lock nor package-lock.json, skipping webpack build.")
            return None
        return [runner, "run", script]

    def build(self, root: str | os.PathLike[str], args: list[str]) -> None:
        """Run the build script; assumes it exists in package.json."""
        command = self._command(root, "build")
        if command is not None:
            subprocess.run(command, check=True)

    def develop(self, root: str | os.PathLike[str]) -> None:
        """Run the dev script with NODE_ENV=development."""
        command = self._command(root, "dev")
        if command is not None:
            env = {**os.environ, "NODE_ENV": "development"}
            subprocess.run(command, env=env, check=True)