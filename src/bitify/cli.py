import argparse
import sys

from bitify.charsets import DENSITY_NAMES, DensityPreset, parse_density
from bitify.converter import image_to_ascii
from bitify.errors import BitifyError, PersistenceError
from bitify.output import save_ascii_png

_PRESET_NOTES = {
    DensityPreset.LOW: "Fast, chunky 8-bit look, good for pixel art",
    DensityPreset.MEDIUM: "Balanced detail and performance",
    DensityPreset.HIGH: "Fine detail, slower processing",
    DensityPreset.ULTRA: "Maximum detail, complex textures",
    DensityPreset.EXTREME: "Ultra-fine detail, very slow",
}


def _epilog() -> str:
    lines = ["density presets:"]
    for preset in DensityPreset:
        lines.append(
            f"  {preset.name.lower():<8} {len(preset.chars):>3} chars, width {preset.default_width:<4}"
            f"| {_PRESET_NOTES[preset]}"
        )
    lines += [
        "",
        "examples:",
        "  bitify image.jpg                    # Medium density (default)",
        "  bitify -d low image.jpg             # Low density for retro look",
        "  bitify -d ultra -w 120 image.jpg    # Ultra density with custom width",
    ]
    return "\n".join(lines)


def _density(value: str) -> DensityPreset:
    try:
        return parse_density(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid width: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"width must be positive, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bitify",
        description="Convert images to colorful ASCII art and save them as PNG files with black backgrounds",
        epilog=_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-w",
        "--width",
        type=_positive_int,
        default=None,
        help="Output width in characters (default: the density preset's width)",
    )
    parser.add_argument(
        "-d",
        "--density",
        type=_density,
        default=DensityPreset.MEDIUM,
        metavar="{" + ",".join(DENSITY_NAMES) + "}",
        help="ASCII density preset (default: medium)",
    )
    parser.add_argument(
        "--no-colour", dest="colour", action="store_false", default=True, help="Print plain text without ANSI colours"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    preset = args.density
    width = args.width if args.width is not None else preset.default_width

    try:
        text, grid = image_to_ascii(args.image, preset, width=width, colour=args.colour)
    except BitifyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(text)
    try:
        path = save_ascii_png(grid, args.image, preset)
    except PersistenceError as e:
        print(f"Warning: Failed to save ASCII art: {e}", file=sys.stderr)
    else:
        print(f"\nASCII art saved to {path} (density: {preset.display_name})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
