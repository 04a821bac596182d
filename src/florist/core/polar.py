"""Polar curve evaluation.

This module samples one lobe of a periodic function given in polar form,
``r = f(k * theta)``, into a Curve of real points:
- The angular domain ends where ``f(k * theta)`` first reaches magnitude one
- The finished curve is turned so its last sample points along the negative
  y axis rotated by ``rotation``, independent of k
- Mirroring negates x after the rotation

All functions are pure and deterministic.
"""

import math
import sys
from collections.abc import Callable

from florist.domain import Curve, CurveParams, TrigFamily, Vector
from florist.exceptions import CapacityOverflowError

# Orientation of the last sample before the caller's rotation is applied.
TIP_ANGLE = -math.pi / 2


def to_cartesian(radius: float, theta: float) -> Vector:
    """Convert polar coordinates to a cartesian vector."""
    return Vector(radius * math.cos(theta), radius * math.sin(theta))


def sample_count(k: float, step: float, inverse_trig_fn: Callable[[float], float]) -> int:
    """Number of samples one lobe needs at the given angular step.

    The lobe spans ``theta`` in ``[0, inverse_trig_fn(1.0) / k)`` and is
    sampled at ``theta = i * step``.

    Args:
        k: Angular frequency (> 0)
        step: Angular sampling step (> 0)
        inverse_trig_fn: Inverse of the periodic function

    Returns:
        ``floor(bound / step)``, zero if the step exceeds the domain

    Raises:
        ValueError: If k or step is not a positive finite number
        CapacityOverflowError: If the count cannot be represented
    """
    if not math.isfinite(k) or k <= 0.0:
        raise ValueError(f"k must be > 0.0, got {k}")
    if not math.isfinite(step) or step <= 0.0:
        raise ValueError(f"step must be > 0.0, got {step}")

    ratio = (inverse_trig_fn(1.0) / k) / step
    if not math.isfinite(ratio) or ratio > sys.maxsize:
        raise CapacityOverflowError(ratio, f"Current parameters: [k: {k}, step: {step}]")

    return max(math.floor(ratio), 0)


def evaluate_polar(
    k: float,
    step: float,
    rotation: float,
    mirror: bool,
    trig_fn: Callable[[float], float],
    inverse_trig_fn: Callable[[float], float],
) -> Curve:
    """Sample one lobe of ``r = trig_fn(k * theta)``.

    Args:
        k: Angular frequency (> 0)
        step: Angular sampling step (> 0)
        rotation: Rotation of the lobe's tip away from the negative y axis
        mirror: Negate x of every point after rotating
        trig_fn: Periodic function
        inverse_trig_fn: Inverse of trig_fn

    Returns:
        Curve of ``floor((inverse_trig_fn(1.0) / k) / step)`` points. An empty
        curve means no shape can be drawn with these parameters.

    Raises:
        ValueError: If k, step or rotation is not valid
        CapacityOverflowError: If the sample count cannot be represented
    """
    if not math.isfinite(rotation):
        raise ValueError(f"rotation must be finite, got {rotation}")

    length = sample_count(k, step, inverse_trig_fn)
    if length == 0:
        return Curve()

    points = []
    for i in range(length):
        theta = i * step
        points.append(to_cartesian(trig_fn(theta * k), theta))

    turn = rotation + TIP_ANGLE - points[-1].angle()
    points = [point.rotated(turn) for point in points]

    if mirror:
        points = [Vector(-point.x, point.y) for point in points]

    return Curve(tuple(points))


def evaluate_sin(k: float, step: float, rotation: float = 0.0, mirror: bool = False) -> Curve:
    """Sample one lobe of ``r = sin(k * theta)``."""
    return evaluate_polar(k, step, rotation, mirror, math.sin, math.asin)


def evaluate_tan(k: float, step: float, rotation: float = 0.0, mirror: bool = False) -> Curve:
    """Sample one lobe of ``r = tan(k * theta)``."""
    return evaluate_polar(k, step, rotation, mirror, math.tan, math.atan)


def evaluate_curve(params: CurveParams) -> Curve:
    """Sample the side described by params."""
    family: TrigFamily = params.family
    return evaluate_polar(
        params.k,
        params.step,
        params.rotation,
        params.mirror,
        family.function,
        family.inverse,
    )


def rotate_curve(curve: Curve, angle: float) -> Curve:
    """Rotate every point of a curve counter-clockwise around the origin.

    Args:
        curve: Curve to rotate
        angle: Rotation angle in radians

    Returns:
        Rotated curve (the same object when angle is zero)
    """
    if angle == 0.0:
        return curve
    return Curve(tuple(point.rotated(angle) for point in curve))
