import subprocess
from pathlib import Path
from unittest import mock

import pytest

from oxtools.project import Options
from oxtools.yarn import YarnAfterInitializer, YarnPlugin


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_build_command_with_yarn_lock(workdir):
    Path("yarn.lock").write_bytes(b"")
    assert YarnPlugin().build_command() == ["yarn", "install", "--no-progress"]


def test_build_command_without_yarn_lock(workdir):
    assert YarnPlugin().build_command() is None


def test_run_before_build_skips_without_lock(workdir):
    plugin = YarnPlugin()
    with mock.patch("oxtools.yarn.subprocess.run") as run:
        plugin.run_before_build(".", [])
    assert plugin.build_command() is None
    assert run.call_count == 0


def test_run_before_build_installs_with_lock(workdir):
    Path("yarn.lock").write_bytes(b"")
    plugin = YarnPlugin()
    with mock.patch("oxtools.yarn.subprocess.run") as run:
        plugin.run_before_build(".", [])
    assert plugin.build_command() == ["yarn", "install", "--no-progress"]
    assert run.call_args.args[0] == plugin.build_command()


def test_after_initialize_installs_and_reports_failure(workdir):
    failure = subprocess.CalledProcessError(1, ["yarn", "install", "--no-progress"])
    with mock.patch("oxtools.yarn.subprocess.run", side_effect=failure) as run:
        with pytest.raises(subprocess.CalledProcessError):
            YarnAfterInitializer().after_initialize(Options(folder=str(workdir)))
    assert run.call_args.args[0] == ["yarn", "install", "--no-progress"]