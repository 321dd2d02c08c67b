from typing import Tuple

Color = Tuple[int, int, int]

WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
DARK_RED: Color = (191, 0, 0)
ORANGE: Color = (255, 127, 0)
DARKER_ORANGE: Color = (127, 63, 0)
GREEN: Color = (0, 255, 0)
LIGHT_GREEN: Color = (114, 255, 114)
DESATURATED_GREEN: Color = (63, 127, 63)
DARKER_GREEN: Color = (0, 127, 0)
LIGHT_YELLOW: Color = (255, 255, 114)
YELLOW: Color = (255, 255, 0)
VIOLET: Color = (127, 0, 255)
LIGHT_VIOLET: Color = (184, 114, 255)
LIGHT_CYAN: Color = (114, 255, 255)
SKY: Color = (0, 191, 255)


def parse(value) -> Color:
    """Accept an (r, g, b) list/tuple or a name from this module."""
    if isinstance(value, str):
        named = globals().get(value.upper())
        if named is None or not isinstance(named, tuple):
            raise ValueError(f"Unknown color name: {value!r}")
        return named
    if isinstance(value, (list, tuple)) and len(value) == 3:
        return (int(value[0]), int(value[1]), int(value[2]))
    raise ValueError(f"Color must be a name or an (r, g, b) triple, got {value!r}")
