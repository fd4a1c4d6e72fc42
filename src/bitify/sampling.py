import math

import numpy as np

from bitify.errors import ValidationError

# Character cells are roughly twice as tall as they are wide
ASPECT_CORRECTION = 0.5

# Rec. 601 luma weights are applied per mille; white sums to exactly this
LUMA_SCALE = 255 * 1000


def target_height(source_width: int, source_height: int, target_width: int) -> int:
    """Number of character rows for a source image rendered at ``target_width`` columns.

    Rounds half up. Raises ValidationError for any degenerate result.
    """
    if target_width <= 0:
        raise ValidationError(f"Target width must be positive, got {target_width}")
    if source_width <= 0 or source_height <= 0:
        raise ValidationError(f"Source image is empty ({source_width}x{source_height})")
    rows = math.floor(target_width * (source_height / source_width) * ASPECT_CORRECTION + 0.5)
    if rows == 0:
        raise ValidationError(
            f"Image of {source_width}x{source_height} is too wide to render at {target_width} columns"
        )
    return rows


def brightness(r, g, b):
    """Perceptual brightness in [0, 1] of scalar or array channel values. Alpha is ignored.

    Weights are applied per mille to integer channels, so pure white is exactly 1.0.
    """
    return (299 * r + 587 * g + 114 * b) / LUMA_SCALE


def char_index(value, num_chars: int):
    """Quantize brightness in [0, 1] into one of ``num_chars`` palette slots."""
    index = np.floor(np.multiply(value, num_chars - 1))
    return np.clip(index, 0, num_chars - 1).astype(np.intp)


def quantize_grid(pixels: np.ndarray, num_chars: int) -> np.ndarray:
    """Palette index for every pixel of an (H, W, 3+) uint8 array."""
    rgb = pixels[..., :3].astype(np.int64)
    return char_index(brightness(rgb[..., 0], rgb[..., 1], rgb[..., 2]), num_chars)
