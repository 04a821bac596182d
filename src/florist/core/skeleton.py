"""Skeleton construction from sampled curves.

This module turns real-valued curves into closed 8-connected grid boundaries:
- scale: Map a curve onto the integer grid, dropping repeated cells
- merge: Join scaled fragments into one closed point sequence
- interpolate: Fill gaps so no step exceeds one cell on either axis
- build_skeleton: The three steps above for a pair of sides

Rounding is half away from zero so grid coordinates do not depend on the
parity of the rounded value.
"""

import math
from collections.abc import Sequence

from florist.core.polar import evaluate_curve
from florist.domain import GRID_LIMIT, ORIGIN, Curve, CurveParams, GridPoint, MergeMode, Skeleton
from florist.exceptions import ParameterDegenerateError


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    if value >= 0.0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def scale(curve: Curve, size: int) -> list[GridPoint]:
    """Scale a unit curve onto the grid.

    Each point is multiplied by ``size`` and rounded; a point that lands on
    the same cell as the previous kept point is dropped.

    Args:
        curve: Unit-scale curve
        size: Scale factor in grid units (1 < size <= 32767)

    Returns:
        Scaled points with consecutive duplicates removed

    Raises:
        ValueError: If size is out of range
    """
    if size <= 1 or size > GRID_LIMIT:
        raise ValueError(f"illegal size '{size}', allowed: [1 < size <= {GRID_LIMIT}]")

    scaled: list[GridPoint] = []
    for point in curve:
        grid_point = GridPoint(round_half_away(point.x * size), round_half_away(point.y * size))
        if not scaled or scaled[-1] != grid_point:
            scaled.append(grid_point)

    return scaled


def merge(fragments: Sequence[Sequence[GridPoint]], mode: MergeMode) -> list[GridPoint]:
    """Join scaled fragments into one point sequence.

    SIDE_WITH_SIDE walks the fragments alternately forward and backward, so
    two sides meeting at both ends form one closed lobe. SIDE_WITH_ORIGIN
    appends the grid origin after every fragment, closing unrelated
    fragments through the center.

    Args:
        fragments: Scaled fragments in merge order
        mode: Merge mode

    Returns:
        Merged points (not yet gap-free)
    """
    merged: list[GridPoint] = []

    if mode is MergeMode.SIDE_WITH_SIDE:
        for index, fragment in enumerate(fragments):
            merged.extend(fragment if index % 2 == 0 else reversed(fragment))
    else:
        for fragment in fragments:
            merged.extend(fragment)
            merged.append(ORIGIN)

    return merged


def interpolate(points: Sequence[GridPoint]) -> Skeleton:
    """Fill gaps between consecutive points.

    Between two points whose largest axis delta is ``n > 1``, the ``n - 1``
    intermediate cells along the straight segment are inserted. Repeated
    points collapse, so the result never stands still either.

    Args:
        points: Points to connect

    Returns:
        8-connected skeleton
    """
    if not points:
        return Skeleton(())

    result = [points[0]]
    for previous, point in zip(points, points[1:]):
        dx = point.x - previous.x
        dy = point.y - previous.y
        steps = max(abs(dx), abs(dy))

        for step in range(1, steps + 1):
            progress = step / steps
            result.append(
                GridPoint(
                    previous.x + round_half_away(dx * progress),
                    previous.y + round_half_away(dy * progress),
                )
            )

    return Skeleton(tuple(result))


def build_skeleton(first: Curve, second: Curve, size: int, mode: MergeMode) -> Skeleton:
    """Scale two sides, merge them and fill the gaps.

    Args:
        first: First side
        second: Second side
        size: Scale factor in grid units
        mode: How the sides are joined

    Returns:
        Closed 8-connected skeleton

    Raises:
        ParameterDegenerateError: If either side is empty
        ValueError: If size is out of range
    """
    if first.is_empty() or second.is_empty():
        raise ParameterDegenerateError("cannot build a skeleton from an empty side")

    return interpolate(merge([scale(first, size), scale(second, size)], mode))


def build_skeleton_from_params(
    first: CurveParams, second: CurveParams, size: int, mode: MergeMode
) -> Skeleton:
    """Evaluate two sides from their parameters and build the skeleton.

    Raises:
        ParameterDegenerateError: If either side evaluates to an empty curve
    """
    return build_skeleton(evaluate_curve(first), evaluate_curve(second), size, mode)
