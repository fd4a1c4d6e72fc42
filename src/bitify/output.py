from pathlib import Path

from bitify.charsets import DensityPreset
from bitify.engine import CellGrid
from bitify.errors import PersistenceError
from bitify.rasterizer import render_grid

OUTPUT_DIR_NAME = "Bitify"


def default_output_dir() -> Path:
    try:
        return Path.home() / OUTPUT_DIR_NAME
    except RuntimeError as e:
        raise PersistenceError(f"Could not find home directory: {e}") from e


def output_path(source: str | Path, preset: DensityPreset, output_dir: str | Path | None = None) -> Path:
    """Where the PNG for ``source`` is written: ``<dir>/<stem>_<Preset>_ascii.png``."""
    directory = Path(output_dir) if output_dir is not None else default_output_dir()
    stem = Path(source).stem or "image"
    return directory / f"{stem}_{preset.display_name}_ascii.png"


def save_ascii_png(
    grid: CellGrid,
    source: str | Path,
    preset: DensityPreset,
    output_dir: str | Path | None = None,
) -> Path:
    """Rasterize ``grid`` and save it as a PNG, returning the written path."""
    path = output_path(source, preset, output_dir)
    image = render_grid(grid)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        image.save(path, format="PNG")
    except OSError as e:
        raise PersistenceError(f"Could not write {path}: {e}") from e
    return path
