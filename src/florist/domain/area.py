"""Scanline run-length encoded areas.

This module defines the filled-region types:
- Range: A closed integer interval on one scanline
- Line: The sorted, disjoint, non-touching Ranges of one scanline
- Area: A dense, trimmed stack of Lines over a contiguous y span

An area with no coverage is never represented as an Area; functions that
can produce one return None instead.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from functools import cached_property
from typing import Any

from florist.domain.point import GRID_LIMIT, GridPoint
from florist.exceptions import InvariantError


@dataclass(frozen=True, slots=True)
class Range:
    """A closed interval [start, end] on one scanline.

    Attributes:
        start: First covered x coordinate
        end: Last covered x coordinate (inclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvariantError(f"Range start {self.start} is after end {self.end}")

    @property
    def width(self) -> int:
        """Number of covered cells."""
        return self.end - self.start + 1

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (start, end) tuple."""
        return (self.start, self.end)


@dataclass(frozen=True, slots=True)
class Line:
    """Covered x intervals of one scanline.

    Ranges are sorted ascending and separated by at least one uncovered
    cell: ``ranges[i].end < ranges[i + 1].start - 1``.

    Attributes:
        ranges: Ranges in ascending order
    """

    ranges: tuple[Range, ...] = ()

    def __post_init__(self) -> None:
        for previous, current in zip(self.ranges, self.ranges[1:]):
            if previous.end >= current.start - 1:
                raise InvariantError(
                    f"Ranges {previous.to_tuple()} and {current.to_tuple()} overlap or touch"
                )

    @classmethod
    def merged(cls, ranges: Iterable[Range]) -> "Line":
        """Build a line from ranges in any order, joining overlapping or touching ones.

        Args:
            ranges: Ranges to combine

        Returns:
            Line satisfying the ordering invariant
        """
        result: list[Range] = []
        for current in sorted(ranges, key=lambda r: (r.start, r.end)):
            if result and current.start <= result[-1].end + 1:
                last = result[-1]
                result[-1] = Range(last.start, max(last.end, current.end))
            else:
                result.append(current)
        return cls(tuple(result))

    def __len__(self) -> int:
        return len(self.ranges)

    def __iter__(self) -> Iterator[Range]:
        return iter(self.ranges)

    def __getitem__(self, index: int) -> Range:
        return self.ranges[index]

    def is_empty(self) -> bool:
        """Check if the line covers nothing."""
        return len(self.ranges) == 0

    @property
    def min_x(self) -> int | None:
        """Leftmost covered x, None for an empty line."""
        return self.ranges[0].start if self.ranges else None

    @property
    def max_x(self) -> int | None:
        """Rightmost covered x, None for an empty line."""
        return self.ranges[-1].end if self.ranges else None

    def coverage(self) -> int:
        """Number of covered cells on this line."""
        return sum(r.width for r in self.ranges)

    def intersects(self, other: "Line") -> bool:
        """Check whether the x extents of two lines overlap.

        This compares only the outer bounds of each line, so two lines whose
        ranges interleave without touching still count as intersecting.

        Args:
            other: Line to compare with

        Returns:
            True if both lines are non-empty and their extents overlap
        """
        if not self.ranges or not other.ranges:
            return False
        return self.ranges[-1].end >= other.ranges[0].start and (
            other.ranges[-1].end >= self.ranges[0].start
        )

    def iter_x(self) -> Iterator[int]:
        """Iterate over every covered x coordinate."""
        for r in self.ranges:
            yield from range(r.start, r.end + 1)


EMPTY_LINE = Line()


@dataclass(frozen=True)
class Area:
    """Filled region stored as one Line per scanline.

    The area covers the rows ``min_y .. min_y + len(lines) - 1`` and is
    always trimmed: its first and last lines are non-empty.

    Attributes:
        lines: One line per row, starting at min_y
        min_y: Y coordinate of the first line

    Raises:
        InvariantError: If there are no lines, the area is not trimmed or
            the y span leaves the working grid
    """

    lines: tuple[Line, ...]
    min_y: int

    def __post_init__(self) -> None:
        if not self.lines:
            raise InvariantError("Area must contain at least one line")
        if self.lines[0].is_empty() or self.lines[-1].is_empty():
            raise InvariantError("Area must start and end with a non-empty line")
        if self.min_y < -GRID_LIMIT or self.max_y > GRID_LIMIT:
            raise InvariantError(
                f"Area rows {self.min_y}..{self.max_y} are outside the grid"
            )

    @classmethod
    def from_lines(cls, lines: Sequence[Line], min_y: int) -> "Area | None":
        """Build a trimmed area, dropping leading and trailing empty lines.

        Args:
            lines: One line per row starting at min_y
            min_y: Y coordinate of the first line

        Returns:
            Trimmed area, or None if every line is empty
        """
        start = next((i for i, line in enumerate(lines) if not line.is_empty()), None)
        if start is None:
            return None

        end = len(lines) - 1
        while lines[end].is_empty():
            end -= 1

        return cls(lines=tuple(lines[start : end + 1]), min_y=min_y + start)

    @property
    def max_y(self) -> int:
        """Y coordinate of the last line."""
        return self.min_y + len(self.lines) - 1

    @property
    def height(self) -> int:
        """Number of rows spanned."""
        return len(self.lines)

    def line(self, y: int) -> Line | None:
        """Get the line for row y.

        Args:
            y: Row to look up

        Returns:
            The row's line, or None if y is outside the area's span
        """
        if y < self.min_y or y > self.max_y:
            return None
        return self.lines[y - self.min_y]

    def iter_rows(self) -> Iterator[tuple[int, Line]]:
        """Iterate over (y, line) pairs from min_y to max_y."""
        for index, line in enumerate(self.lines):
            yield self.min_y + index, line

    def iter_points(self) -> Iterator[GridPoint]:
        """Iterate over every covered grid cell, row by row."""
        for y, line in self.iter_rows():
            for x in line.iter_x():
                yield GridPoint(x, y)

    def coverage(self) -> int:
        """Total number of covered cells."""
        return sum(line.coverage() for line in self.lines)

    @cached_property
    def min_x(self) -> int:
        """Leftmost covered x over all rows."""
        return min(line.min_x for line in self.lines if line.min_x is not None)

    @cached_property
    def max_x(self) -> int:
        """Rightmost covered x over all rows."""
        return max(line.max_x for line in self.lines if line.max_x is not None)

    def bounding_box(self) -> tuple[int, int, int, int]:
        """Bounding box of the covered cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    def intersects(self, other: "Area") -> bool:
        """Cheap overlap pre-filter.

        True iff the y spans overlap and, on at least one shared row, the
        x extents of both lines overlap. Interleaving ranges that never
        share a cell still count, so a True result does not guarantee
        common coverage. A False result does guarantee disjointness.

        Args:
            other: Area to compare with

        Returns:
            True if the areas may overlap
        """
        if self.min_y > other.max_y or other.min_y > self.max_y:
            return False
        if self.min_x > other.max_x or other.min_x > self.max_x:
            return False

        from_y = max(self.min_y, other.min_y)
        to_y = min(self.max_y, other.max_y)
        for y in range(from_y, to_y + 1):
            if self.lines[y - self.min_y].intersects(other.lines[y - other.min_y]):
                return True

        return False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with min_y and one list of [start, end] pairs per row
        """
        return {
            "min_y": self.min_y,
            "lines": [[list(r.to_tuple()) for r in line] for line in self.lines],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Area":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of an area

        Returns:
            Area instance
        """
        lines = tuple(
            Line(tuple(Range(start, end) for start, end in row)) for row in data["lines"]
        )
        return cls(lines=lines, min_y=data["min_y"])
