import os

import pytest

from oxtools.project import Options
from oxtools.refresh import RefreshConfig, RefreshInitializer, RefreshPlugin


def test_initializer_writes_config_with_app_name(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    folder = tmp_path / "myapp"
    folder.mkdir()

    options = Options(name="myapp", module="oosss/myapp", folder=str(folder))
    RefreshInitializer().initialize(options)

    path = folder / ".buffalo.dev.yml"
    assert path.is_file()
    assert b"myapp" in path.read_bytes()


def test_initializer_config_values(tmp_path):
    RefreshInitializer().initialize(Options(name="myapp", folder=tmp_path))

    config = RefreshConfig.load(tmp_path / ".buffalo.dev.yml")
    assert config.binary_name == "tmp-myapp-build"
    assert config.build_target_path == "." + os.sep + os.path.join("cmd", "myapp")
    assert config.app_root == "."
    assert config.build_path == "bin"
    assert config.included_extensions == [".go", ".env"]
    assert "node_modules" in config.ignored_folders
    assert config.enable_colors is True
    assert config.log_name == "ox"


def test_dump_load_round_trip(tmp_path):
    original = RefreshConfig(
        app_root="root",
        ignored_folders=["vendor", "tmp"],
        included_extensions=[".go"],
        build_target_path="cmd/thing",
        build_path="bin",
        build_flags=["-race"],
        build_delay=1500,
        binary_name="thing-build",
        command_flags=["--port", "3000"],
        command_env=["A=B"],
        enable_colors=True,
        log_name="ox",
    )
    path = tmp_path / "config.yml"
    original.dump(path)

    assert RefreshConfig.load(path) == original


def test_load_partial_file_uses_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("app_root: somewhere\nunknown_key: 3\n")

    config = RefreshConfig.load(path)

    assert config.app_root == "somewhere"
    assert config == RefreshConfig(app_root="somewhere")


def test_load_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("")

    assert RefreshConfig.load(path) == RefreshConfig()


def test_default_config_uses_module_name(tmp_path):
    (tmp_path / "go.mod").write_text("module wawandco/app")

    config = RefreshPlugin().default_config(tmp_path)

    assert config.binary_name == "app-build"
    assert config.build_target_path == os.path.join(tmp_path, "cmd", "app")
    assert config.app_root == str(tmp_path)
    assert config.build_path == "tmp"
    assert config.included_extensions == [".go", ".mod", ".env"]
    assert "webpack" in config.ignored_folders


def test_default_delay_is_longer_than_initializer_delay(tmp_path):
    (tmp_path / "go.mod").write_text("module wawandco/app")
    RefreshInitializer().initialize(Options(name="app", folder=tmp_path))

    written = RefreshConfig.load(tmp_path / ".buffalo.dev.yml")
    default = RefreshPlugin().default_config(tmp_path)

    assert default.build_delay > written.build_delay > 0


def test_config_prefers_existing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    RefreshConfig(app_root="x", log_name="custom").dump(tmp_path / ".buffalo.dev.yml")

    config = RefreshPlugin().config(tmp_path)

    assert config.log_name == "custom"
    assert config.app_root == "x"


def test_config_falls_back_to_default(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "go.mod").write_text("module wawandco/app")

    config = RefreshPlugin().config(tmp_path)

    assert config.binary_name == "app-build"


def test_config_without_go_mod_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    with pytest.raises(FileNotFoundError):
        RefreshPlugin().config(tmp_path)