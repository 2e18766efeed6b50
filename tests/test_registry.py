from oxtools.fizz.creator import FizzCreator
from oxtools.migrations import Generator
from oxtools.registry import base_plugins
from oxtools.sqlcreator import SqlCreator
from oxtools.webpack import WebpackPlugin


def test_every_plugin_has_a_unique_name():
    plugins = base_plugins()
    names = [plugin.name for plugin in plugins]

    assert all(names)
    assert len(set(names)) == len(names)


def test_first_plugin_is_webpack():
    first = base_plugins()[0]
    assert first.name == WebpackPlugin().name
    assert isinstance(first, WebpackPlugin)


def test_each_call_returns_fresh_instances():
    first = base_plugins()
    second = base_plugins()

    assert len(first) == len(second)
    assert all(a is not b for a, b in zip(first, second))


def test_migration_generator_receives_creators():
    plugins = base_plugins()
    generators = [plugin for plugin in plugins if isinstance(plugin, Generator)]

    assert len(generators) == 1
    creators = generators[0].creators
    assert isinstance(creators.creator_for("fizz"), FizzCreator)
    assert isinstance(creators.creator_for("sql"), SqlCreator)
    assert creators.creator_for("invalid") is None


def test_creators_come_from_the_same_list():
    plugins = base_plugins()
    generator = next(plugin for plugin in plugins if isinstance(plugin, Generator))

    for creator in generator.creators:
        assert any(creator is plugin for plugin in plugins)