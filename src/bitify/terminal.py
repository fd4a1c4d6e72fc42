from bitify.engine import CellGrid

RESET = "\033[0m"


def format_grid(grid: CellGrid, colour: bool = True) -> str:
    """Render a grid as text, prefixing each character with an ANSI truecolor escape.

    Colours are reset once at the end of each row rather than after every character.
    """
    if not colour:
        return "\n".join(grid.chars)
    out = []
    for row in grid.rows:
        parts = []
        for cell in row:
            r, g, b = cell.color
            parts.append(f"\033[38;2;{r};{g};{b}m{cell.character}")
        parts.append(RESET)
        out.append("".join(parts))
    return "\n".join(out)
