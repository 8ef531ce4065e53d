"""Size and position value types used by widgets and renderers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Size:
    """A width/height pair in pixels."""
    width: int = 0
    height: int = 0

    def max(self, other: "Size") -> "Size":
        """Component-wise maximum of two sizes."""
        return Size(max(self.width, other.width), max(self.height, other.height))

    def add(self, other: "Size") -> "Size":
        return Size(self.width + other.width, self.height + other.height)


@dataclass(frozen=True)
class Position:
    """An x/y offset relative to the parent's top-left corner."""
    x: int = 0
    y: int = 0

    def add(self, dx: int = 0, dy: int = 0) -> "Position":
        return Position(self.x + dx, self.y + dy)
