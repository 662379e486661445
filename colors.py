import numpy as np

STANDARD_COLORS = list(range(0, 16))
COLOR_CUBE = np.arange(16, 232)
GRAYSCALE = list(range(232, 256))

# standard and bright index for each base color
BASE_COLORS = {
    "black": [0, 8],
    "red": [1, 9],
    "green": [2, 10],
    "yellow": [3, 11],
    "blue": [4, 12],
    "magenta": [5, 13],
    "cyan": [6, 14],
    "white": [7, 15],
}

COLOR_MAP = sorted(BASE_COLORS)

PRIMARY_CHANNELS = {"red": 0, "green": 1, "blue": 2}

COMPOSITE_COLORS = {
    "yellow": lambda r, g, b: (r == g) & (r > b),
    "cyan": lambda r, g, b: (g == b) & (g > r),
    "magenta": lambda r, g, b: (r == b) & (r > g),
}


def _name(color) -> str:
    return str(getattr(color, "value", color)).strip().lower()


def _cube_channels():
    offset = COLOR_CUBE - 16
    return offset // 36, (offset % 36) // 6, offset % 6


def color_cube_rgb(color: int) -> tuple[int, int, int]:
    """Decompose a cube index (16-231) into r, g, b intensities on a 0-5 scale."""
    offset = int(color) - 16
    return offset // 36, (offset % 36) // 6, offset % 6


def color_cube_shades(base_color) -> list[int]:
    """Cube indexes whose hue is dominated by ``base_color``.

    Primaries match when their channel is the maximum of (r, g, b). On a tie
    the later channel wins, so (1, 1, 0) counts as green and grays as blue.
    """
    name = _name(base_color)
    r, g, b = _cube_channels()

    if name in PRIMARY_CHANNELS:
        rgb = np.stack([r, g, b], axis=1)
        # argmax returns the first maximum; flip to get the last one
        winner = 2 - np.argmax(rgb[:, ::-1], axis=1)
        mask = winner == PRIMARY_CHANNELS[name]
    elif name in COMPOSITE_COLORS:
        mask = COMPOSITE_COLORS[name](r, g, b)
    else:
        return []

    return [int(c) for c in COLOR_CUBE[mask]]


def shades_for(color_name) -> list[int]:
    name = _name(color_name)
    return list(BASE_COLORS.get(name, [])) + color_cube_shades(name)


def resolve_color(color):
    """Palette index for a color reference, or None when it can't be drawn."""
    if color is None or isinstance(color, bool):
        return None
    if isinstance(color, (int, np.integer)):
        index = int(color)
        return index if 0 <= index <= 255 else None
    base = BASE_COLORS.get(_name(color))
    return base[0] if base else None


def pair_for(color):
    index = resolve_color(color)
    return None if index is None else index + 1


def setup_colors(init_pair, background: int = 0, count: int = 256) -> None:
    """Bind pair index+1 to (index, background) for the first ``count`` colors."""
    for color in range(min(256, count)):
        init_pair(color + 1, color, background)


def available_colors() -> str:
    return ", ".join(COLOR_MAP)
