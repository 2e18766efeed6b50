"""Fizz migration generators selected by the migration name."""

from __future__ import annotations

import json
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from oxtools.fizz.columns import column_type, underscore


class FizzError(Exception):
    """Base error for fizz migration generation."""


class NoColumnFoundError(FizzError):
    def __init__(self, message: str = "no arguments was received, at least 1 column is required"):
        super().__init__(message)


class NoTableNameError(FizzError):
    def __init__(self, message: str = "no table name"):
        super().__init__(message)


class InvalidRenamerError(FizzError):
    def __init__(self, message: str = "invalid renamer, please write a valid argument"):
        super().__init__(message)


def _no_match() -> FizzError:
    return FizzError("generator do not match a valid expression")


@dataclass
class _Column:
    name: str
    column_type: str
    options: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        opts = ", ".join(f"{key}: {json.dumps(value)}" for key, value in sorted(self.options.items()))
        return f't.Column("{self.name}", "{self.column_type}", {{{opts}}})'


@dataclass
class Table:
    """A table definition that renders create and drop fizz statements."""

    name: str
    timestamps: bool = True
    columns: list[_Column] = field(default_factory=list)

    def column(self, name: str, column_type: str, options: dict[str, Any] | None = None) -> None:
        """Add a column; names must be non-empty and unique."""
        if not name:
            raise FizzError("column name can't be empty")
        if any(existing.name == name for existing in self.columns):
            raise FizzError(f"duplicated column {name}")
        self.columns.append(_Column(name, column_type, dict(options or {})))

    def fizz(self) -> str:
        lines = [f'create_table("{self.name}") {{']
        for col in self.columns:
            if self.timestamps and col.name in ("created_at", "updated_at"):
                continue
            lines.append(f"\t{col}")
        if not self.timestamps:
            lines.append("\tt.DisableTimestamps()")
        lines.append("}")
        return "\n".join(lines)

    def unfizz(self) -> str:
        return f'drop_table("{self.name}")'


def _split_column(arg: str) -> tuple[str, str]:
    parts = arg.split(":")
    raw_type = parts[1] if len(parts) > 1 else "string"
    return parts[0], raw_type


class MigrationGenerator(ABC):
    """Produces the up and down fizz for a migration name."""

    @abstractmethod
    def matches(self, name: str) -> bool:
        """Whether this generator applies to the migration name."""

    @abstractmethod
    def generate(self, name: str, args: list[str]) -> tuple[str, str]:
        """Return the (up, down) fizz content."""


class AddColumn(MigrationGenerator):
    _pattern = re.compile(r"add(?:ing)?_\w+_to_(\w+)", re.ASCII)

    def matches(self, name):
        return self._pattern.search(name) is not None

    def generate(self, name, args):
        if not args:
            raise NoColumnFoundError()
        match = self._pattern.search(name)
        if match is None:
            raise _no_match()
        table = match.group(1)

        columns: dict[str, str] = {}
        for arg in args:
            col_name, raw_type = _split_column(arg)
            columns[underscore(col_name)] = column_type(raw_type)

        up = "\n".join(f'add_column("{table}", "{col}", "{kind}", {{}})' for col, kind in columns.items())
        down = "\n".join(f'drop_column("{table}", "{col}")' for col in columns)
        return up, down


class ChangeColumn(MigrationGenerator):
    _pattern = re.compile(r"change_(\w+)_(\w+)", re.ASCII)

    def matches(self, name):
        return self._pattern.search(name) is not None

    def generate(self, name, args):
        if not args:
            raise NoColumnFoundError()
        match = self._pattern.search(name)
        if match is None:
            raise _no_match()
        table, column = match.group(1), match.group(2)
        new_type = column_type(args[0])
        null = "null: true" if "nulls" in args[0] else ""

        up = f'change_column("{table}", "{column}", "{new_type}", {{{null}}})'
        down = f'change_column("{table}", "{column}", "string", {{}})'
        return up, down


class CreateTable(MigrationGenerator):
    _prefix = "create_table_"

    def matches(self, name):
        return name.startswith(self._prefix)

    def generate(self, name, args):
        table_name = name.removeprefix(self._prefix)
        if not table_name:
            raise NoTableNameError()

        table = Table(table_name, timestamps=False)
        for arg in args:
            col_name, raw_type = _split_column(arg)
            col_name = underscore(col_name)
            options: dict[str, Any] = {}
            if col_name == "id":
                options["primary"] = True
            if raw_type.lower().startswith("nulls."):
                options["null"] = True
            table.column(col_name, column_type(raw_type), options)

        return table.fizz(), table.unfizz()


class DropTable(MigrationGenerator):
    _prefix = "drop_table_"

    def matches(self, name):
        return name.startswith(self._prefix)

    def generate(self, name, args):
        table_name = name.removeprefix(self._prefix)
        if not table_name:
            raise NoTableNameError()
        table = Table(table_name, timestamps=False)
        return table.unfizz(), table.fizz()


class Rename(MigrationGenerator):
    _patterns = {
        "rename_table": ("table", re.compile(r"rename_table_(\w+)_to_(\w+)", re.ASCII)),
        "rename_column": ("column", re.compile(r"rename_column_(\w+)_to_(\w+)_from_(\w+)", re.ASCII)),
        "rename_index": ("index", re.compile(r"rename_index_(\w+)_to_(\w+)_from_(\w+)", re.ASCII)),
    }

    def matches(self, name):
        return name.startswith("rename")

    def generate(self, name, args):
        selected = next(
            (entry for prefix, entry in self._patterns.items() if name.startswith(prefix)),
            None,
        )
        if selected is None:
            raise InvalidRenamerError()
        kind, pattern = selected
        match = pattern.search(name)
        if match is None:
            raise InvalidRenamerError()

        groups = match.groups()
        old, new = groups[0], groups[1]
        table = groups[2] if len(groups) == 3 else ""

        if kind == "table":
            return f'rename_table("{old}", "{new}")', f'rename_table("{new}", "{old}")'
        return (
            f'rename_{kind}("{table}", "{old}", "{new}")',
            f'rename_{kind}("{table}", "{new}", "{old}")',
        )


class DropIndex(MigrationGenerator):
    _pattern = re.compile(r"drop_index_(\w+)_from_(\w+)", re.ASCII)

    def matches(self, name):
        return self._pattern.search(name) is not None

    def generate(self, name, args):
        match = self._pattern.search(name)
        if match is None:
            raise _no_match()
        index, table = match.group(1), match.group(2)
        return f'drop_index("{table}", "{index}")', f'add_index("{table}", "{index}", {{}})'


_GENERATORS: tuple[MigrationGenerator, ...] = (
    AddColumn(),
    ChangeColumn(),
    CreateTable(),
    DropTable(),
    Rename(),
    DropIndex(),
)


def generator_for(name: str) -> MigrationGenerator:
    """Return the first generator matching name, defaulting to table creation."""
    return next((gen for gen in _GENERATORS if gen.matches(name)), CreateTable())