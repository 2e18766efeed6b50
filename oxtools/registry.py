"""The base set of plugins used across most applications."""

from __future__ import annotations

from typing import Any

from oxtools.environment import Developer, EnvTester, NodeBuilder
from oxtools.fizz.creator import FizzCreator
from oxtools.git import GitAfterInitializer, GitInitializer
from oxtools.inflections import InflectionsInitializer
from oxtools.migrations import Generator, SodaInitializer
from oxtools.refresh import RefreshInitializer, RefreshPlugin
from oxtools.sqlcreator import SqlCreator
from oxtools.standard import AfterInitializer, Builder, Fixer, GoModAfterGenerator, Tester
from oxtools.webpack import WebpackPlugin
from oxtools.yarn import YarnAfterInitializer, YarnPlugin


def base_plugins() -> list[Any]:
    """Return fresh base plugins; receivers are handed the full list."""
    plugins: list[Any] = [
        # Tools.
        WebpackPlugin(),
        RefreshPlugin(),
        YarnPlugin(),
        Developer(),
        # Builders.
        NodeBuilder(),
        Builder(),
        # Fixers.
        Fixer(),
        # Generators.
        Generator(),
        # Initializers.
        RefreshInitializer(),
        InflectionsInitializer(),
        SodaInitializer(),
        GitInitializer(),
        # After initializers.
        AfterInitializer(),
        YarnAfterInitializer(),
        GitAfterInitializer(),
        # Testers.
        Tester(),
        EnvTester(),
        # Migration creators.
        FizzCreator(),
        SqlCreator(),
        # After generators.
        GoModAfterGenerator(),
    ]

    for plugin in plugins:
        receive = getattr(plugin, "receive", None)
        if callable(receive):
            receive(plugins)

    return plugins