"""Migration generation command and migrations folder initializer."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Iterable

from oxtools.fizz.columns import pluralize, underscore
from oxtools.project import Options

_log = logging.getLogger(__name__)

_DEFAULT_TYPE = "fizz"

_README = "This is the migrations folder, here live the migrations to keep the database up to date."


def _is_creator(plugin: Any) -> bool:
    return callable(getattr(plugin, "creates", None)) and callable(getattr(plugin, "create", None))


class Creators(list):
    """An ordered collection of migration creators."""

    def creator_for(self, name: str) -> Any | None:
        """Return the first creator handling the migration type name, or None."""
        return next((creator for creator in self if creator.creates(name)), None)


class Generator:
    """Generates migration files of the type chosen with --type."""

    name = "pop/generate-migration"
    invocation_name = "migration"

    def __init__(self, creators: Iterable[Any] = ()) -> None:
        self.creators = Creators(creators)
        self.migration_type = _DEFAULT_TYPE

    def generate(self, root: str | os.PathLike[str], args: list[str]) -> None:
        """Create a migration named by args[2], with column args following it."""
        if len(args) < 3:
            _log.info(
                "No name specified, please use "
                "`ox generate migration [name] [columns?] --type=[sql|fizz]`"
            )
            return

        creator = self.creators.creator_for(self.migration_type)
        if creator is None:
            raise ValueError("type not found")

        directory = Path(root) / "migrations"
        directory.mkdir(parents=True, exist_ok=True)

        name = underscore(pluralize(args[2]))
        columns = [arg for arg in args[3:] if not arg.startswith("-")]
        creator.create(directory, name, columns)

    def parse_flags(self, args: list[str]) -> None:
        """Read --type/-t from args; parsing stops quietly at the first bad flag."""
        self.migration_type = _DEFAULT_TYPE
        remaining = iter(args)
        for arg in remaining:
            if arg == "--":
                return
            if arg.startswith("--"):
                flag, has_value, value = arg[2:].partition("=")
                if flag != "type":
                    return
            elif arg.startswith("-") and len(arg) > 1:
                if arg[1] != "t":
                    return
                rest = arg[2:]
                has_value = bool(rest)
                value = rest[1:] if rest.startswith("=") else rest
            else:
                continue

            if not has_value:
                value = next(remaining, None)
                if value is None:
                    return
            self.migration_type = value

    def receive(self, plugins: Iterable[Any]) -> None:
        """Collect the migration creators among plugins."""
        self.creators.extend(plugin for plugin in plugins if _is_creator(plugin))


class SodaInitializer:
    """Creates the migrations folder with a README for a new application."""

    name = "soda/initializer"

    def initialize(self, options: Options) -> None:
        directory = Path(options.folder) / "migrations"
        directory.mkdir(parents=True, exist_ok=True)
        (directory / "README.md").write_text(_README, encoding="utf-8")