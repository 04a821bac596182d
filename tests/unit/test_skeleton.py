"""Tests for skeleton construction."""

import pytest

from florist.core.polar import evaluate_sin, evaluate_tan
from florist.core.skeleton import (
    build_skeleton,
    build_skeleton_from_params,
    interpolate,
    merge,
    round_half_away,
    scale,
)
from florist.domain import ORIGIN, Curve, CurveParams, GridPoint, MergeMode, Skeleton, Vector
from florist.exceptions import ParameterDegenerateError


def assert_gap_free(skeleton: Skeleton) -> None:
    for previous, point in zip(skeleton, skeleton.points[1:]):
        assert previous.chebyshev_distance(point) <= 1


class TestRoundHalfAway:
    """Tests for round_half_away function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.5, 1), (1.5, 2), (2.5, 3), (-0.5, -1), (-2.5, -3), (0.49, 0), (-1.2, -1), (3.0, 3)],
    )
    def test_ties_away_from_zero(self, value: float, expected: int) -> None:
        """Test ties go away from zero regardless of parity."""
        assert round_half_away(value) == expected


class TestScale:
    """Tests for scale function."""

    def test_scale_rounds_points(self) -> None:
        """Test points are multiplied by size and rounded."""
        curve = Curve((Vector(0.0, 0.0), Vector(0.25, -0.5), Vector(-0.125, 1.0)))
        assert scale(curve, 10) == [GridPoint(0, 0), GridPoint(3, -5), GridPoint(-1, 10)]

    def test_scale_drops_consecutive_duplicates(self) -> None:
        """Test repeated cells collapse."""
        curve = Curve((Vector(0.0, 0.0), Vector(0.01, 0.0), Vector(0.5, 0.0), Vector(0.0, 0.0)))
        assert scale(curve, 4) == [GridPoint(0, 0), GridPoint(2, 0), GridPoint(0, 0)]

    @pytest.mark.parametrize("size", [0, 1, -5, 32768])
    def test_scale_rejects_size(self, size: int) -> None:
        """Test size must be in (1, 32767]."""
        with pytest.raises(ValueError, match="illegal size"):
            scale(Curve((Vector(0.0, 0.0),)), size)

    def test_scale_accepts_bounds(self) -> None:
        """Test the smallest and largest accepted sizes."""
        curve = Curve((Vector(0.0, -1.0),))
        assert scale(curve, 2) == [GridPoint(0, -2)]
        assert scale(curve, 32767) == [GridPoint(0, -32767)]


class TestMerge:
    """Tests for merge function."""

    def test_side_with_side_reverses_second(self) -> None:
        """Test the second fragment is walked backwards."""
        first = [GridPoint(0, 0), GridPoint(1, -1)]
        second = [GridPoint(0, 0), GridPoint(-1, -1)]
        merged = merge([first, second], MergeMode.SIDE_WITH_SIDE)
        assert merged == [GridPoint(0, 0), GridPoint(1, -1), GridPoint(-1, -1), GridPoint(0, 0)]

    def test_side_with_origin_appends_origin(self) -> None:
        """Test the origin closes every fragment."""
        first = [GridPoint(3, 0)]
        second = [GridPoint(0, 3)]
        merged = merge([first, second], MergeMode.SIDE_WITH_ORIGIN)
        assert merged == [GridPoint(3, 0), ORIGIN, GridPoint(0, 3), ORIGIN]


class TestInterpolate:
    """Tests for interpolate function."""

    def test_fills_gaps(self) -> None:
        """Test intermediate cells are inserted."""
        skeleton = interpolate([GridPoint(0, 0), GridPoint(4, 2)])
        assert skeleton.points[0] == GridPoint(0, 0)
        assert skeleton.points[-1] == GridPoint(4, 2)
        assert len(skeleton) == 5
        assert_gap_free(skeleton)

    def test_diagonal_steps(self) -> None:
        """Test pure diagonals step one cell on both axes."""
        skeleton = interpolate([GridPoint(0, 0), GridPoint(-3, 3)])
        assert skeleton.points == (
            GridPoint(0, 0),
            GridPoint(-1, 1),
            GridPoint(-2, 2),
            GridPoint(-3, 3),
        )

    def test_duplicates_collapse(self) -> None:
        """Test repeated points add nothing."""
        skeleton = interpolate([GridPoint(1, 1), GridPoint(1, 1), GridPoint(1, 2)])
        assert skeleton.points == (GridPoint(1, 1), GridPoint(1, 2))

    def test_empty(self) -> None:
        """Test no points give an empty skeleton."""
        assert interpolate([]).is_empty()


class TestBuildSkeleton:
    """Tests for build_skeleton function."""

    def test_petal_is_closed_and_gap_free(self) -> None:
        """Test a petal starts and ends at the origin without gaps."""
        first = evaluate_sin(2.0, 0.001)
        second = evaluate_sin(2.0, 0.001, mirror=True)
        skeleton = build_skeleton(first, second, 100, MergeMode.SIDE_WITH_SIDE)
        assert skeleton.points[0] == ORIGIN
        assert skeleton.points[-1] == ORIGIN
        assert_gap_free(skeleton)
        assert skeleton.bounding_box()[1] == -100

    def test_mosaic_is_gap_free(self) -> None:
        """Test origin-anchored merging of unrelated sides."""
        first = evaluate_tan(0.005, 12.0, rotation=0.3)
        second = evaluate_sin(0.002, 9.0, rotation=-2.0, mirror=True)
        skeleton = build_skeleton(first, second, 40, MergeMode.SIDE_WITH_ORIGIN)
        assert skeleton.points[-1] == ORIGIN
        assert_gap_free(skeleton)

    def test_empty_side_rejected(self) -> None:
        """Test an empty side is a degenerate parameter set."""
        with pytest.raises(ParameterDegenerateError):
            build_skeleton(Curve(), evaluate_sin(2.0, 0.01), 10, MergeMode.SIDE_WITH_SIDE)

    def test_from_params(self) -> None:
        """Test building directly from parameters."""
        first = CurveParams(k=2.0, step=0.01)
        second = CurveParams(k=2.0, step=0.01, mirror=True)
        skeleton = build_skeleton_from_params(first, second, 50, MergeMode.SIDE_WITH_SIDE)
        assert skeleton == build_skeleton(
            evaluate_sin(2.0, 0.01),
            evaluate_sin(2.0, 0.01, mirror=True),
            50,
            MergeMode.SIDE_WITH_SIDE,
        )

    def test_from_params_degenerate(self) -> None:
        """Test a step past the domain cannot build a skeleton."""
        first = CurveParams(k=2.0, step=5.0)
        with pytest.raises(ParameterDegenerateError):
            build_skeleton_from_params(first, first, 50, MergeMode.SIDE_WITH_SIDE)
