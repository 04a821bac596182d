"""Filled area extraction from closed skeletons.

The extraction is a scanline crossing-parity fill over an 8-connected
boundary:

1. Every vertical step of the skeleton records the x it arrives at as an
   anchor on its row. When the vertical direction reverses, the last anchor
   of the turning row is recorded again, since a turn crosses that row twice.
2. The row of the skeleton's first point (the grid origin for generated
   shapes) gets one extra anchor at that point if its count is odd.
3. Anchors are sorted per row and paired ``(a0, a1), (a2, a3), ...``; an odd
   leftover is paired with the anchor before it.
4. Each pair is pulled inward over runs of adjacent boundary cells, and the
   cells strictly between the trimmed ends become one Range.

Skeletons that enclose nothing yield None rather than an error.
"""

import bisect
from collections.abc import Iterable

from florist.domain import Area, GridPoint, Line, Range


def _collect_anchors(points: list[GridPoint], min_y: int, height: int) -> list[list[int]]:
    anchors: list[list[int]] = [[] for _ in range(height)]
    last_direction = 0

    for previous, point in zip(points, points[1:]):
        dy = point.y - previous.y
        if dy == 0:
            continue

        direction = 1 if dy > 0 else -1
        if direction != last_direction:
            turning_row = anchors[previous.y - min_y]
            if turning_row:
                turning_row.append(turning_row[-1])
            last_direction = direction

        anchors[point.y - min_y].append(point.x)

    origin = points[0]
    origin_row = anchors[origin.y - min_y]
    if len(origin_row) % 2 != 0:
        origin_row.append(origin.x)

    for row in anchors:
        row.sort()

    return anchors


def _collect_columns(points: Iterable[GridPoint], min_y: int, height: int) -> list[list[int]]:
    columns: list[list[int]] = [[] for _ in range(height)]
    for point in points:
        columns[point.y - min_y].append(point.x)
    for row in columns:
        row.sort()
    return columns


def _find(values: list[int], target: int, start: int) -> int | None:
    index = bisect.bisect_left(values, target, start)
    if index < len(values) and values[index] == target:
        return index
    return None


def _interior_range(
    x1: int, x2: int, columns: list[int], offset: int
) -> tuple[Range | None, int | None]:
    """Trim a crossing pair to the cells strictly inside the boundary.

    Args:
        x1: Left crossing
        x2: Right crossing
        columns: Sorted boundary x coordinates of the row
        offset: Index in columns to start searching for x1

    Returns:
        Tuple of (range or None, index of x2 in columns or None). The index
        is None when the pair was rejected before trimming.
    """
    if x2 - x1 <= 1:
        return None, None

    x1_index = _find(columns, x1, offset)
    if x1_index is None:
        return None, None
    x2_index = _find(columns, x2, x1_index)
    if x2_index is None:
        return None, None

    left = x1
    for i in range(x1_index + 1, x2_index):
        if columns[i] - left > 1:
            break
        left = columns[i]
        x1_index += 1

    right = x2
    i = x2_index - 1
    while i > x1_index:
        if right - columns[i] > 1:
            break
        right = columns[i]
        i -= 1

    if right - left > 1:
        return Range(left + 1, right - 1), x2_index
    return None, x2_index


def _fill_row(anchors: list[int], columns: list[int]) -> list[Range]:
    ranges: list[Range] = []
    if len(anchors) <= 1:
        return ranges

    offset = 0
    for index in range(0, len(anchors) - 1, 2):
        found, last_index = _interior_range(anchors[index], anchors[index + 1], columns, offset)
        if found is not None:
            ranges.append(found)
        if last_index is not None:
            offset = last_index

    if len(anchors) % 2 != 0:
        found, _ = _interior_range(anchors[-2], anchors[-1], columns, 0)
        if found is not None:
            ranges.append(found)

    return ranges


def extract_area(skeleton: Iterable[GridPoint]) -> Area | None:
    """Convert a closed skeleton into its filled interior.

    Args:
        skeleton: Closed 8-connected boundary, typically a Skeleton

    Returns:
        Trimmed area of the interior cells (boundary cells excluded), or
        None if the skeleton has fewer than two points or encloses nothing
    """
    points = list(skeleton)
    if len(points) <= 1:
        return None

    min_y = min(p.y for p in points)
    max_y = max(p.y for p in points)
    height = max_y - min_y + 1

    anchors = _collect_anchors(points, min_y, height)
    columns = _collect_columns(points, min_y, height)

    lines = [
        Line.merged(_fill_row(row_anchors, row_columns))
        for row_anchors, row_columns in zip(anchors, columns)
    ]

    return Area.from_lines(lines, min_y)
