from enum import Enum

# Standard 70-level ramp, sparse to dense
_RAMP = " .'`^\",:;Il!i><~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@"


class DensityPreset(Enum):
    """Named character palettes, ordered from blank to densest, with a default output width."""

    LOW = (" .:+#@", 40)
    MEDIUM = (" .:-=+*#%@", 80)
    HIGH = (_RAMP, 120)
    ULTRA = (_RAMP + "$", 150)
    EXTREME = (_RAMP + "$AGHKPRSTVgsyeFDN2345679E", 200)

    def __init__(self, chars: str, default_width: int):
        self.chars = tuple(chars)
        self.default_width = default_width

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


BLANK = " "

DENSITY_NAMES = [preset.name.lower() for preset in DensityPreset]


def parse_density(name: str) -> DensityPreset:
    try:
        return DensityPreset[name.strip().upper()]
    except KeyError:
        raise ValueError(f"Invalid density '{name}'. Use: {', '.join(DENSITY_NAMES)}") from None
