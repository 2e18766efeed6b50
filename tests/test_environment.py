import os

from oxtools.environment import Developer, EnvTester, NodeBuilder


def test_developer_go_env_not_set(monkeypatch):
    monkeypatch.delenv("GO_ENV", raising=False)
    assert Developer().before_develop("", []) is None
    assert os.environ["GO_ENV"] == "development"


def test_developer_go_env_set_previously(monkeypatch):
    monkeypatch.setenv("GO_ENV", "somethingelse")
    assert Developer().before_develop("", []) is None
    assert os.environ["GO_ENV"] == "somethingelse"


def test_developer_empty_go_env_is_replaced(monkeypatch):
    monkeypatch.setenv("GO_ENV", "")
    assert Developer().before_develop("", []) is None
    assert os.environ["GO_ENV"] == "development"


def test_env_tester_sets_test(monkeypatch):
    monkeypatch.setenv("GO_ENV", "development")
    assert EnvTester().run_before_test("", []) is None
    assert os.environ["GO_ENV"] == "test"


def test_node_builder_copies_go_env(monkeypatch):
    monkeypatch.setenv("GO_ENV", "production")
    monkeypatch.delenv("NODE_ENV", raising=False)
    assert NodeBuilder().run_before_build("", []) is None
    assert os.environ["NODE_ENV"] == "production"


def test_node_builder_without_go_env(monkeypatch):
    monkeypatch.delenv("GO_ENV", raising=False)
    monkeypatch.setenv("NODE_ENV", "development")
    assert NodeBuilder().run_before_build("", []) is None
    assert os.environ["NODE_ENV"] == ""