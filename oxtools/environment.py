"""Plugins that set GO_ENV and NODE_ENV around the development lifecycle."""

from __future__ import annotations

import os


class Developer:
    """Sets GO_ENV to development before the app starts, unless already set."""

    name = "envy/developer"

    def before_develop(self, root: str | os.PathLike[str], args: list[str]) -> None:
        if not os.environ.get("GO_ENV"):
            os.environ["GO_ENV"] = "development"


class EnvTester:
    """Sets GO_ENV to test before tests run."""

    name = "envy/tester"

    def run_before_test(self, root: str | os.PathLike[str], args: list[str]) -> None:
        os.environ["GO_ENV"] = "test"


class NodeBuilder:
    """Sets NODE_ENV to the value of GO_ENV before a build."""

    name = "node/build"

    def run_before_build(self, root: str | os.PathLike[str], args: list[str]) -> None:
        os.environ["NODE_ENV"] = os.environ.get("GO_ENV", "")