"""Fixed 8x12 bitmap font used to rasterize ASCII art.

Glyphs capture visual weight rather than exact letterforms: many characters
share one bitmap, grouped by how much ink they put in a cell.
"""

from types import MappingProxyType

import numpy as np

from bitify import charsets

GLYPH_WIDTH = 8
GLYPH_HEIGHT = 12

_BLANK_ROW = "." * GLYPH_WIDTH


def _glyph(*rows: str, top: int = 0) -> np.ndarray:
    """Build a read-only (GLYPH_HEIGHT, GLYPH_WIDTH) bool mask from string art.

    ``rows`` are placed starting at row ``top``; everything else is blank.
    """
    art = [_BLANK_ROW] * top + list(rows)
    art += [_BLANK_ROW] * (GLYPH_HEIGHT - len(art))
    if len(art) != GLYPH_HEIGHT or any(len(row) != GLYPH_WIDTH for row in art):
        raise ValueError(f"Glyph must be {GLYPH_WIDTH}x{GLYPH_HEIGHT}")
    mask = np.array([[c == "#" for c in row] for row in art], dtype=bool)
    mask.flags.writeable = False
    return mask


# fmt: off
BLANK = _glyph()

DOT = _glyph(
    "...##...",
    "...##...",
    top=9,
)

COLON = _glyph(
    "...##...",
    "...##...",
    "........",
    "........",
    "...##...",
    "...##...",
    top=3,
)

DASH = _glyph(".######.", top=6)

EQUALS = _glyph(
    ".######.",
    "........",
    "........",
    ".######.",
    top=4,
)

PLUS = _glyph(
    "...##...",
    "...##...",
    ".######.",
    ".######.",
    "...##...",
    "...##...",
    top=3,
)

ASTERISK = _glyph(
    "..#..#..",
    "...##...",
    ".######.",
    "...##...",
    "..#..#..",
    top=2,
)

HASH = _glyph(
    "..#.#...",
    "..#.#...",
    ".######.",
    "..#.#...",
    "..#.#...",
    ".######.",
    "..#.#...",
    "..#.#...",
    top=1,
)

PERCENT = _glyph(
    ".##...#.",
    ".##..#..",
    "....#...",
    "...#....",
    "..#.....",
    ".#......",
    ".#..##..",
    "....##..",
    top=1,
)

AT = _glyph(
    "..####..",
    ".#....#.",
    ".#.##.#.",
    ".##..##.",
    ".##..##.",
    ".##..##.",
    ".#.###..",
    ".#......",
    "..####..",
)

CARET = _glyph(
    "...##...",
    "..#..#..",
    ".#....#.",
    top=1,
)

GREATER = _glyph(
    "..#.....",
    "...#....",
    "....#...",
    ".....#..",
    "....#...",
    "...#....",
    "..#.....",
    top=2,
)

LESS = _glyph(
    ".....#..",
    "....#...",
    "...#....",
    "..#.....",
    "...#....",
    "....#...",
    ".....#..",
    top=2,
)

TILDE = _glyph(
    "..##..#.",
    ".#..##..",
    top=4,
)

UNDERSCORE = _glyph("########", top=11)

QUESTION = _glyph(
    "..####..",
    ".#....#.",
    ".....#..",
    "....#...",
    "...#....",
    "...#....",
    "........",
    "...#....",
    top=1,
)

BRACKET_RIGHT = _glyph(
    ".###....",
    *["...#...."] * 8,
    ".###....",
)

BRACKET_LEFT = _glyph(
    "...###..",
    *["...#...."] * 8,
    "...###..",
)

PAREN_RIGHT = _glyph(
    "..#.....",
    "...#....",
    *["....#..."] * 6,
    "...#....",
    "..#.....",
)

PAREN_LEFT = _glyph(
    "....#...",
    "...#....",
    *["..#....."] * 6,
    "...#....",
    "....#...",
)

PIPE = _glyph(*["...##..."] * 10)

BACKSLASH = _glyph(
    ".#......",
    ".#......",
    "..#.....",
    "..#.....",
    "...#....",
    "...#....",
    "....#...",
    "....#...",
    ".....#..",
    ".....#..",
)

SLASH = _glyph(
    ".....#..",
    ".....#..",
    "....#...",
    "....#...",
    "...#....",
    "...#....",
    "..#.....",
    "..#.....",
    ".#......",
    ".#......",
)

ZERO = _glyph(
    "..####..",
    ".#....#.",
    ".#...##.",
    ".#..#.#.",
    ".#.#..#.",
    ".##...#.",
    ".#....#.",
    "..####..",
)

SMALL_BLOCK = _glyph(*["..####.."] * 4, top=4)

MEDIUM_BLOCK = _glyph(*[".######."] * 6, top=2)

LARGE_BLOCK = _glyph(*["########"] * 9, top=1)
# fmt: on

# Characters sharing a bitmap, keyed by the shared glyph
_GROUPS = [
    (BLANK, charsets.BLANK),
    (DOT, ".'`,i"),
    (COLON, ':";'),
    (DASH, "-"),
    (EQUALS, "="),
    (PLUS, "+"),
    (ASTERISK, "*"),
    (HASH, "#"),
    (PERCENT, "%"),
    (AT, "@"),
    (CARET, "^"),
    (GREATER, ">"),
    (LESS, "<"),
    (TILDE, "~"),
    (UNDERSCORE, "_"),
    (QUESTION, "?"),
    (BRACKET_RIGHT, "]}"),
    (BRACKET_LEFT, "[{"),
    (PAREN_RIGHT, ")"),
    (PAREN_LEFT, "("),
    (PIPE, "Il!1|"),
    (BACKSLASH, "\\"),
    (SLASH, "/"),
    (ZERO, "0"),
    (SMALL_BLOCK, "tfjrxnuvcz" + "mwqpdbkhao"),
    (MEDIUM_BLOCK, "XYUJCLQOZ" + "gsyeFDN" + "2345679E"),
    (LARGE_BLOCK, "MWBAGHKPRSTV" + "&8$"),
]

GLYPHS = MappingProxyType({char: glyph for glyph, chars in _GROUPS for char in chars})


def glyph_for(char: str) -> np.ndarray:
    """Bitmap for a character, falling back to the blank glyph for anything unmapped."""
    return GLYPHS.get(char, BLANK)
