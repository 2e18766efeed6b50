import pytest

from oxtools.inflections import InflectionsInitializer
from oxtools.project import Options


def test_creates_inflections_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    InflectionsInitializer().initialize(Options(folder=str(tmp_path)))

    path = tmp_path / "inflections.yml"
    assert path.is_file()
    assert path.read_text() == '{ "singular": "plural" }'


def test_existing_file_is_left_alone(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "inflections.yml"
    path.write_text("")

    InflectionsInitializer().initialize(Options(folder=str(tmp_path)))

    assert path.read_text() == ""


def test_missing_folder_raises(tmp_path):
    folder = tmp_path / "absent"

    with pytest.raises(FileNotFoundError):
        InflectionsInitializer().initialize(Options(folder=folder))