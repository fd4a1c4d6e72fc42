import numpy as np
import pytest
from PIL import Image

from bitify.charsets import DensityPreset
from bitify.engine import CellGrid, SampleCell
from bitify.errors import PersistenceError
from bitify.output import output_path, save_ascii_png


def _grid():
    return CellGrid(rows=((SampleCell("@", (255, 255, 255)), SampleCell("#", (0, 255, 0))),))


def test_output_path_under_home(fake_home):
    path = output_path("/some/where/holiday.jpeg", DensityPreset.HIGH)
    assert path == fake_home / "Bitify" / "holiday_High_ascii.png"


def test_output_path_explicit_dir(tmp_path):
    assert output_path("cat.png", DensityPreset.LOW, tmp_path) == tmp_path / "cat_Low_ascii.png"


def test_output_path_without_stem(tmp_path):
    assert output_path("", DensityPreset.MEDIUM, tmp_path).name == "image_Medium_ascii.png"


def test_output_path_home_unresolvable(monkeypatch):
    def no_home():
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr("pathlib.Path.home", no_home)
    with pytest.raises(PersistenceError, match="home directory"):
        output_path("cat.png", DensityPreset.LOW)


def test_save_creates_directory_and_png(fake_home):
    path = save_ascii_png(_grid(), "pics/cat.jpg", DensityPreset.LOW)
    assert path == fake_home / "Bitify" / "cat_Low_ascii.png"
    with Image.open(path) as saved:
        assert saved.format == "PNG"
        assert saved.size == (16, 12)
        arr = np.asarray(saved.convert("RGB"))
    assert arr[0, 2].tolist() == [255, 255, 255]
    assert arr[0, 8:].sum() == 0


def test_save_overwrites_previous_run(tmp_path):
    save_ascii_png(_grid(), "cat.png", DensityPreset.LOW, tmp_path)
    path = save_ascii_png(_grid(), "cat.png", DensityPreset.LOW, tmp_path)
    assert sorted(tmp_path.iterdir()) == [path]


def test_save_failure_is_persistence_error(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    with pytest.raises(PersistenceError, match="Could not write"):
        save_ascii_png(_grid(), "cat.png", DensityPreset.LOW, blocker / "out")


def test_persistence_error_is_os_error(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    with pytest.raises(OSError):
        save_ascii_png(_grid(), "cat.png", DensityPreset.LOW, blocker)
