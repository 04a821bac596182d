"""Point and curve types.

This module defines the coordinate types used by the geometry engine:
- Vector: A real-valued 2D point (unit scale, before scaling)
- GridPoint: An integer 2D point on the signed 16-bit working grid
- Curve: An immutable sequence of Vectors produced by the polar evaluator
- Skeleton: An 8-connected sequence of GridPoints bounding one shape
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from florist.exceptions import InvariantError

GRID_LIMIT = 32767


@dataclass(frozen=True, slots=True)
class Vector:
    """A point in real 2D space.

    Attributes:
        x: X coordinate (unit scale)
        y: Y coordinate (unit scale)
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def angle(self) -> float:
        """Polar angle of the vector in radians, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def rotated(self, angle: float) -> "Vector":
        """Rotate counter-clockwise around the origin.

        Args:
            angle: Rotation angle in radians

        Returns:
            Rotated vector
        """
        sin, cos = math.sin(angle), math.cos(angle)
        return Vector(self.x * cos - self.y * sin, self.x * sin + self.y * cos)


@dataclass(frozen=True, slots=True)
class GridPoint:
    """A point on the integer working grid.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate in grid units
        y: Y coordinate in grid units
    """

    x: int
    y: int

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def chebyshev_distance(self, other: "GridPoint") -> int:
        """Largest per-axis distance to another point."""
        return max(abs(self.x - other.x), abs(self.y - other.y))


ORIGIN = GridPoint(0, 0)


@dataclass(frozen=True)
class Curve:
    """An ordered, immutable sequence of real points spanning one lobe.

    An empty curve is the evaluator's signal that no shape can be produced
    from the given parameters.

    Attributes:
        points: Sampled points in sampling order
    """

    points: tuple[Vector, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Vector:
        return self.points[index]

    def is_empty(self) -> bool:
        """Check if the curve has no points."""
        return len(self.points) == 0


@dataclass(frozen=True)
class Skeleton:
    """Closed 8-connected discrete boundary of one shape.

    Consecutive points differ by at most one grid unit on each axis, which
    is what the scanline area extraction relies on. All coordinates lie
    within the signed 16-bit working grid.

    Attributes:
        points: Boundary points in walking order

    Raises:
        InvariantError: If two consecutive points are more than one unit
            apart or a coordinate is outside the grid
    """

    points: tuple[GridPoint, ...]

    def __post_init__(self) -> None:
        previous: GridPoint | None = None
        for index, point in enumerate(self.points):
            if abs(point.x) > GRID_LIMIT or abs(point.y) > GRID_LIMIT:
                raise InvariantError(
                    f"Skeleton point {point.to_tuple()} at index {index} is outside the grid"
                )
            if previous is not None and previous.chebyshev_distance(point) > 1:
                raise InvariantError(
                    f"Skeleton gap between {previous.to_tuple()} and "
                    f"{point.to_tuple()} at index {index}"
                )
            previous = point

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[GridPoint]:
        return iter(self.points)

    def __getitem__(self, index: int) -> GridPoint:
        return self.points[index]

    def is_empty(self) -> bool:
        """Check if the skeleton has no points."""
        return len(self.points) == 0

    def bounding_box(self) -> tuple[int, int, int, int]:
        """Calculate bounding box of the skeleton.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y); all zero when empty
        """
        if not self.points:
            return (0, 0, 0, 0)

        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with a flat list of [x, y] pairs
        """
        return {"points": [[p.x, p.y] for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Skeleton":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with a list of [x, y] pairs

        Returns:
            Skeleton instance
        """
        return cls(points=tuple(GridPoint(x, y) for x, y in data["points"]))
