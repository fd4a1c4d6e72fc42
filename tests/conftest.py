import pytest
from PIL import Image


@pytest.fixture
def image_file(tmp_path):
    """Write a solid-colour image to disk and return its path."""

    def _make(name="photo.png", size=(20, 10), colour=(255, 255, 255)):
        path = tmp_path / name
        Image.new("RGB", size, colour).save(path)
        return path

    return _make


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr("pathlib.Path.home", lambda: home)
    return home
