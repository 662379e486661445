from dataclasses import dataclass
from typing import Any

ELLIPSIS = "…"


def fit_text(text: str, width: int) -> str:
    """Pad or cut ``text`` to exactly ``width`` characters."""
    if len(text) > width:
        return text[: width - 1] + ELLIPSIS
    return text.ljust(width)


@dataclass(frozen=True)
class Column:
    name: Any
    width: int

    def __post_init__(self):
        if self.name is None or str(self.name) == "":
            raise ValueError("column needs a name")
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise ValueError(f"column {self.name!r}: width must be an integer")
        if self.width <= 0:
            raise ValueError(f"column {self.name!r}: width must be positive")

    @classmethod
    def from_spec(cls, spec):
        if isinstance(spec, Column):
            return spec
        if not isinstance(spec, dict):
            raise ValueError(f"invalid column spec: {spec!r}")
        missing = [key for key in ("name", "width") if key not in spec]
        if missing:
            raise ValueError(f"column spec {spec!r} is missing {', '.join(missing)}")
        return cls(name=spec["name"], width=spec["width"])

    @property
    def key(self) -> str:
        return str(self.name)

    def format_cell(self, cell):
        """Fit a cell into the column.

        Scalars give one ``(text, color)`` pair. Composites give a list of
        pairs whose texts add up to the column width: the component that
        overflows is cut with an ellipsis (or, when the run already fills the
        column, the last kept character becomes one), anything after it is
        dropped, and
        short runs end in an uncolored pad.
        """
        if not cell.composite:
            return fit_text(cell.text, self.width), cell.color

        parts = []
        room = self.width
        for component in cell.components:
            text = component.text
            if not text:
                continue
            if len(text) > room:
                if room > 0:
                    parts.append((fit_text(text, room), component.color))
                elif parts:
                    # the run filled the column exactly; mark what was dropped
                    last, color = parts[-1]
                    parts[-1] = (last[:-1] + ELLIPSIS, color)
                room = 0
                break
            parts.append((text, component.color))
            room -= len(text)
        if room > 0:
            parts.append((" " * room, None))
        return parts
