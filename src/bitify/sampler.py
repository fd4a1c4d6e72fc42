from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from bitify.charsets import DensityPreset
from bitify.engine import CellGrid, SampleCell
from bitify.errors import DecodeError
from bitify.sampling import quantize_grid, target_height

# Integer modes Pillow uses for 16-bit samples
WIDE_MODES = {"I", "I;16", "I;16L", "I;16B", "I;16N"}


def load_image(path: str | Path) -> Image.Image:
    """Open and fully decode an image file, raising DecodeError on any failure."""
    path = Path(path)
    try:
        with Image.open(path) as image:
            image.load()
            return image.copy()
    except FileNotFoundError:
        raise DecodeError(f"File not found: {path}") from None
    except UnidentifiedImageError:
        raise DecodeError(f"Not a recognised image format: {path}") from None
    except Image.DecompressionBombError as e:
        raise DecodeError(f"Image too large to decode safely: {path}: {e}") from e
    except (OSError, ValueError) as e:
        raise DecodeError(f"Could not read {path}: {e}") from e


def to_rgb(image: Image.Image) -> Image.Image:
    """Convert to 8-bit RGB, scaling 16-bit greyscale down rather than clipping it."""
    if image.mode in WIDE_MODES:
        arr = np.asarray(image, dtype=np.float64) / 257.0
        image = Image.fromarray(np.rint(arr).clip(0, 255).astype(np.uint8))
    return image.convert("RGB")


class SamplerEngine:
    """Maps an image onto a character grid by nearest-neighbour point sampling."""

    def __init__(self, preset: DensityPreset):
        self.preset = preset

    def render(self, image: Image.Image, width: int | None = None) -> CellGrid:
        if width is None:
            width = self.preset.default_width
        rows = target_height(image.width, image.height, width)

        resized = to_rgb(image).resize((width, rows), Image.Resampling.NEAREST)
        pixels = np.asarray(resized, dtype=np.uint8)
        indices = quantize_grid(pixels, len(self.preset.chars))

        chars = self.preset.chars
        return CellGrid(
            rows=tuple(
                tuple(
                    SampleCell(chars[indices[y, x]], tuple(int(v) for v in pixels[y, x]))
                    for x in range(width)
                )
                for y in range(rows)
            )
        )
