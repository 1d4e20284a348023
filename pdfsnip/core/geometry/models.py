from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

# ==============================================================================
# Types
# ==============================================================================


class CoordinateSpace(Enum):
    """Coordinate systems a rectangle can live in."""

    DISPLAY = "display"  # On-screen container pixels
    DOCUMENT = "document"  # Intrinsic page units (scale = 1)
    RASTER = "raster"  # Off-screen high-resolution bitmap pixels


class TextOrigin(Enum):
    """Where the y axis of a text layer starts."""

    TOP_LEFT = "top_left"  # y grows downwards, like the display
    BOTTOM_LEFT = "bottom_left"  # Raw PDF user space


# ==============================================================================
# Value Objects
# ==============================================================================


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle in a named coordinate space.

    Immutable: every transform returns a new instance.
    """

    x: float
    y: float
    width: float
    height: float
    space: CoordinateSpace = CoordinateSpace.DISPLAY

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Rect size must be non-negative, got {self.width}x{self.height}"
            )

    @classmethod
    def from_points(
        cls, a: Point, b: Point, space: CoordinateSpace = CoordinateSpace.DISPLAY
    ) -> "Rect":
        """Normalized rectangle spanning two corner points in any order."""
        return cls(
            x=min(a.x, b.x),
            y=min(a.y, b.y),
            width=abs(b.x - a.x),
            height=abs(b.y - a.y),
            space=space,
        )

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, point: Point) -> bool:
        """Inclusive on all four edges."""
        return self.x <= point.x <= self.right and self.y <= point.y <= self.bottom

    def scaled(self, sx: float, sy: float, space: CoordinateSpace) -> "Rect":
        return Rect(self.x * sx, self.y * sy, self.width * sx, self.height * sy, space)

    def intersection(self, other: "Rect") -> "Rect":
        """Overlap with another rectangle; zero-sized when they do not meet."""
        x0 = max(self.x, other.x)
        y0 = max(self.y, other.y)
        x1 = min(self.right, other.right)
        y1 = min(self.bottom, other.bottom)
        return replace(
            self, x=x0, y=y0, width=max(0.0, x1 - x0), height=max(0.0, y1 - y0)
        )

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class ScaleContext:
    """
    Scale factors relating page units to the display and to the raster.

    ``ratio`` converts display-space coordinates into raster-space ones.
    """

    display_scale: float
    raster_scale: float

    def __post_init__(self):
        if self.display_scale <= 0 or self.raster_scale <= 0:
            raise ValueError(
                f"Scales must be positive, got display={self.display_scale} "
                f"raster={self.raster_scale}"
            )

    @property
    def ratio(self) -> float:
        return self.raster_scale / self.display_scale
