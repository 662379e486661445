from dataclasses import dataclass
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class Cell:
    """One table entry: a scalar value with an optional color, or a run of
    colored components drawn back to back (composite)."""

    raw_value: Any = ""
    color: Optional[Any] = None
    components: Tuple["Cell", ...] = ()

    def __post_init__(self):
        if self.components and self.color is not None:
            raise ValueError("composite cells carry color on their components")

    @classmethod
    def from_raw(cls, raw):
        if isinstance(raw, Cell):
            return raw
        if isinstance(raw, dict):
            return cls(raw_value=raw.get("value"), color=raw.get("color"))
        if isinstance(raw, (list, tuple)):
            parts = tuple(cls._component(item) for item in raw)
            return cls(raw_value=None, color=None, components=parts)
        return cls(raw_value=raw)

    @classmethod
    def _component(cls, item):
        cell = cls.from_raw(item)
        if cell.composite:
            # nested runs flatten into plain text
            return cls(raw_value=cell.value)
        return cell

    @property
    def composite(self) -> bool:
        return bool(self.components)

    @property
    def value(self):
        if self.composite:
            return "".join(part.text for part in self.components)
        return self.raw_value

    @property
    def text(self) -> str:
        value = self.value
        return "" if value is None else str(value)
