from pathlib import Path

from PIL import Image

from bitify.charsets import DensityPreset
from bitify.engine import CellGrid
from bitify.sampler import SamplerEngine, load_image
from bitify.terminal import format_grid


def image_to_ascii(
    image: Image.Image | str | Path,
    preset: DensityPreset = DensityPreset.MEDIUM,
    width: int | None = None,
    colour: bool = True,
) -> tuple[str, CellGrid]:
    """Convert an image (or path to one) into terminal text and the grid it was built from.

    ``width`` defaults to the preset's own default width.
    """
    if not isinstance(image, Image.Image):
        image = load_image(image)
    grid = SamplerEngine(preset).render(image, width)
    return format_grid(grid, colour=colour), grid
