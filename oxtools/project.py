"""Project metadata: generation options and Go module information."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

_MODULE_KEYWORD = "module"


@dataclass(frozen=True)
class Options:
    """Options handed to initializers when a new application is created."""

    name: str = ""
    module: str = ""
    folder: str | os.PathLike[str] = ""


def _unquote(text: str) -> str:
    """Unquote a Go string literal, returning an empty string when invalid."""
    if text[0] == "`":
        if len(text) < 2 or not text.endswith("`"):
            return ""
        inner = text[1:-1]
        if "`" in inner or "\r" in inner:
            return ""
        return inner
    try:
        value = json.loads(text)
    except ValueError:
        return ""
    return value if isinstance(value, str) else ""


def read_module_path(go_mod: str | bytes) -> str:
    """Return the module path declared in go.mod content, or "" if absent."""
    if isinstance(go_mod, (bytes, bytearray)):
        go_mod = bytes(go_mod).decode("utf-8", errors="replace")

    for raw_line in go_mod.split("\n"):
        line = raw_line.split("//", 1)[0].strip()
        if not line.startswith(_MODULE_KEYWORD):
            continue

        rest = line[len(_MODULE_KEYWORD):]
        stripped = rest.strip()
        if len(stripped) == len(rest) or not stripped:
            continue

        if stripped[0] in "\"`":
            return _unquote(stripped)
        return stripped

    return ""


def build_name(root: str | os.PathLike[str] = ".") -> str:
    """Return the last element of the module path declared in root/go.mod."""
    go_mod = Path(root) / "go.mod"
    module = read_module_path(go_mod.read_bytes())
    base = module.rstrip("/").rsplit("/", 1)[-1]
    if not base or base == ".":
        raise ValueError(f"module name not found in {go_mod}")
    return base