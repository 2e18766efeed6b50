"""Plugins that drive the standard Go toolchain: build, test, fix and tidy."""

from __future__ import annotations

import csv
import logging
import os
import subprocess
from pathlib import Path

from oxtools.project import Options, build_name, read_module_path

_log = logging.getLogger(__name__)

_MAIN_FILE = "main.go"

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class ModuleNameNeededError(ValueError):
    def __init__(self, message: str = "module name needed"):
        super().__init__(message)


class ModuleNameNotFoundError(ValueError):
    def __init__(self, message: str = "module name not found"):
        super().__init__(message)


class MainFileNotFoundError(FileNotFoundError):
    def __init__(self, message: str = "main.go file does not exist"):
        super().__init__(message)


def _parse_bool(value: str) -> bool | None:
    if value in _TRUE_WORDS:
        return True
    if value in _FALSE_WORDS:
        return False
    return None


def _split_tags(value: str) -> list[str]:
    if not value:
        return []
    return next(csv.reader([value]))


class Builder:
    """Compiles the application binary with `go build`."""

    name = "standard/builder"

    def __init__(self, output: str = "", build_tags: list[str] | None = None, static: bool = False) -> None:
        self.output = output
        self.build_tags = list(build_tags or [])
        self.static = static

    def build(self, root: str | os.PathLike[str], args: list[str]) -> None:
        """Run `go build` with the composed arguments."""
        subprocess.run(["go", *self.compose_build_args()], check=True)

    def parse_flags(self, args: list[str]) -> None:
        """Read -o/--output, --tags and --static; parsing stops at the first bad flag."""
        self.output = ""
        self.build_tags = []
        self.static = True
        tags_seen = False

        items = iter(args)
        for arg in items:
            if arg == "--":
                break
            if not arg.startswith("-") or arg == "-":
                continue

            if arg.startswith("--"):
                flag, equals, value = arg[2:].partition("=")
                has_value = bool(equals)
            else:
                if arg[1] != "o":
                    break
                flag = "output"
                rest = arg[2:]
                has_value = bool(rest)
                value = rest[1:] if rest.startswith("=") else rest

            if flag == "static":
                if not has_value:
                    self.static = True
                    continue
                parsed = _parse_bool(value)
                if parsed is None:
                    break
                self.static = parsed
                continue

            if flag not in ("output", "tags"):
                break

            if not has_value:
                next_value = next(items, None)
                if next_value is None:
                    break
                value = next_value

            if flag == "output":
                self.output = value
            else:
                tags = _split_tags(value)
                self.build_tags = self.build_tags + tags if tags_seen else tags
                tags_seen = True

    def compose_build_args(self) -> list[str]:
        """Return the `go` arguments for building the binary of the current module."""
        name = build_name(".")
        args = ["build"]
        if self.static:
            args += ["--ldflags", "-linkmode external", "--ldflags", '-extldflags "-static"']
        args += ["-o", self.binary_output(name)]
        if self.build_tags:
            args += ["-tags", *self.build_tags]
        args.append("./cmd/" + name)
        return args

    def binary_output(self, name: str) -> str:
        """The configured output path, or bin/<name> by default."""
        return self.output or "bin/" + name


class Tester:
    """Runs the Go test suite."""

    name = "standard/tester"

    def run_before_test(self, root: str | os.PathLike[str], args: list[str]) -> None:
        os.environ["GO_ENV"] = "test"

    def test(self, root: str | os.PathLike[str], args: list[str]) -> None:
        """Run `go test` with the given arguments."""
        _log.info("running tests")
        command = ["go", *self.test_args(args)]
        _log.info("Running Command: %s", " ".join(command))
        subprocess.run(command, check=True)

    def test_args(self, args: list[str]) -> list[str]:
        """Arguments for `go`, adding `-p 1` and `./...` when not given."""
        base = ["test"]
        if "-p" not in " ".join(args):
            base += ["-p", "1"]
        return base + (list(args) if args else ["./..."])


class Fixer:
    """Moves main.go into cmd/<module-name>/main.go."""

    name = "main"

    def fix(self, root: str | os.PathLike[str], args: list[str]) -> None:
        self.main_exists()
        self.move_file(self.find_module_name())

    def move_file(self, name: str) -> None:
        """Move main.go into cmd/<name>/."""
        if not name:
            raise ModuleNameNeededError()
        target = Path("cmd") / name
        target.mkdir(parents=True, exist_ok=True)
        os.rename(_MAIN_FILE, target / _MAIN_FILE)

    def find_module_name(self) -> str:
        """The last element of the module path in ./go.mod."""
        module = read_module_path(Path("go.mod").read_bytes()).rstrip("/")
        base = module.rsplit("/", 1)[-1] if module else "."
        if base == ".":
            raise ModuleNameNotFoundError()
        return base

    def main_exists(self) -> bool:
        """Return True when main.go is in the current folder, raise otherwise."""
        if any(entry.name == _MAIN_FILE for entry in Path(".").iterdir()):
            return True
        raise MainFileNotFoundError()


class GoModAfterGenerator:
    """Tidies the Go module after code generation."""

    name = "mod-tidy"

    def after_generate(self, root: str | os.PathLike[str], args: list[str]) -> None:
        subprocess.run(["go", "mod", "tidy"], check=True)


class AfterInitializer:
    """Tidies the Go module of a freshly created application."""

    name = "standard/afterinitializer"

    def after_initialize(self, options: Options) -> None:
        os.chdir(options.folder)
        subprocess.run(["go", "mod", "tidy"], check=True)