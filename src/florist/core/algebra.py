"""Row-wise interval algebra on scanline areas.

This module provides the operations the occlusion resolver is built on:
- intersects: Cheap bounding pre-filter between two areas
- coverage: Number of covered cells
- subtract_line: Interval subtraction on a single scanline
- cull: What remains of a back area once a front area is drawn over it

All functions are pure; inputs are never modified.
"""

from florist.domain import Area, Line, Range


def intersects(a: Area, b: Area) -> bool:
    """Check whether two areas may overlap.

    See Area.intersects: a False result guarantees the areas are disjoint.
    """
    return a.intersects(b)


def coverage(area: Area | None) -> int:
    """Total number of covered cells; zero for an absent area."""
    if area is None:
        return 0
    return area.coverage()


def subtract_line(back: Line, front: Line) -> Line:
    """Remove the cells of one scanline from another.

    Both lines are walked once in lockstep. The part of a back range left
    of a front range is emitted, the part to its right stays pending until
    the next front range is known not to reach it.

    Args:
        back: Line being occluded
        front: Occluding line

    Returns:
        Cells of back not covered by front
    """
    if not back.intersects(front):
        return back

    ranges: list[Range] = []
    back_index = 0
    front_index = 0
    pending: Range | None = None

    while front_index < len(front):
        if pending is None:
            if back_index == len(back):
                break
            pending = back[back_index]
            back_index += 1

        cut = front[front_index]
        if pending.end < cut.start:
            # (...)___[...]
            ranges.append(pending)
            pending = None
            continue
        if cut.end < pending.start:
            # [...]___(...)
            front_index += 1
            continue

        if pending.start < cut.start:
            # (___[...?
            ranges.append(Range(pending.start, cut.start - 1))

        if cut.end < pending.end:
            # ?...]___)
            pending = Range(cut.end + 1, pending.end)
            front_index += 1
        else:
            # ?...)...]
            pending = None

    if pending is not None:
        ranges.append(pending)
    ranges.extend(back.ranges[back_index:])

    return Line(tuple(ranges))


def cull(back: Area, front: Area | None) -> Area | None:
    """Compute what stays visible of back after front is drawn over it.

    Rows only back covers are kept, rows only front covers are ignored and
    shared rows are subtracted range by range. The result is trimmed.

    Args:
        back: Area further back
        front: Occluding area; None occludes nothing

    Returns:
        Visible part of back, or None if front hides all of it
    """
    if front is None or not back.intersects(front):
        return back

    lines: list[Line] = []
    for y, back_line in back.iter_rows():
        front_line = front.line(y)
        if front_line is None:
            lines.append(back_line)
        else:
            lines.append(subtract_line(back_line, front_line))

    return Area.from_lines(lines, back.min_y)
