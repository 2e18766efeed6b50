"""Refresh plugins: the live-reload configuration used during development."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from oxtools.project import Options, build_name

FILENAME = ".buffalo.dev.yml"

_NANOSECOND = 1
_MILLISECOND = 1_000_000 * _NANOSECOND


@dataclass
class RefreshConfig:
    """Live-reload settings; build_delay is in nanoseconds."""

    app_root: str = ""
    ignored_folders: list[str] = field(default_factory=list)
    included_extensions: list[str] = field(default_factory=list)
    build_target_path: str = ""
    build_path: str = ""
    build_flags: list[str] = field(default_factory=list)
    build_delay: int = 0
    binary_name: str = ""
    command_flags: list[str] = field(default_factory=list)
    command_env: list[str] = field(default_factory=list)
    enable_colors: bool = False
    log_name: str = ""

    def dump(self, path: str | os.PathLike[str]) -> None:
        """Write the configuration as YAML to path."""
        text = yaml.safe_dump(dataclasses.asdict(self), sort_keys=False)
        Path(path).write_text(text, encoding="utf-8")

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> RefreshConfig:
        """Read a configuration from a YAML file; unknown keys are ignored."""
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError(f"invalid refresh configuration in {path}")
        known = {f.name for f in dataclasses.fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})


_IGNORED_WHILE_DEVELOPING = [
    "vendor",
    "log",
    "logs",
    "webpack",
    "public",
    "grifts",
    "tmp",
    "bin",
    "node_modules",
    ".sass-cache",
]

_IGNORED_IN_NEW_APPS = [
    "vendor",
    "log",
    "logs",
    "assets",
    "public",
    "grifts",
    "tmp",
    "bin",
    "node_modules",
    ".sass-cache",
]


class RefreshPlugin:
    """Provides the refresh configuration for the development command."""

    name = "Refresh"

    def config(self, root: str | os.PathLike[str]) -> RefreshConfig:
        """The configuration from .buffalo.dev.yml if present, else the default."""
        if Path(FILENAME).exists():
            return RefreshConfig.load(FILENAME)
        return self.default_config(root)

    def default_config(self, root: str | os.PathLike[str]) -> RefreshConfig:
        """A configuration built from the module name of the application at root."""
        name = build_name(root)
        return RefreshConfig(
            app_root=str(root),
            ignored_folders=list(_IGNORED_WHILE_DEVELOPING),
            included_extensions=[".go", ".mod", ".env"],
            build_target_path=os.path.join(root, "cmd", name),
            build_path="tmp",
            build_delay=200 * _MILLISECOND,
            binary_name=name + "-build",
            enable_colors=True,
            log_name="ox",
        )


class RefreshInitializer:
    """Writes .buffalo.dev.yml for a new application."""

    name = "refresh/initializer"

    def initialize(self, options: Options) -> None:
        config = RefreshConfig(
            app_root=".",
            build_target_path="." + os.sep + os.path.join("cmd", options.name),
            build_path="bin",
            build_delay=200 * _NANOSECOND,
            binary_name=f"tmp-{options.name}-build",
            ignored_folders=list(_IGNORED_IN_NEW_APPS),
            included_extensions=[".go", ".env"],
            enable_colors=True,
            log_name="ox",
        )
        config.dump(Path(options.folder) / FILENAME)