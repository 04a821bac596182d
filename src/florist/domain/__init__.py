"""Domain models for florist.

This module contains the core domain models representing curves, skeletons,
scanline areas and the shapes built from them. The value types are immutable
(frozen dataclasses); only a Shape's visible area is replaced during
occlusion resolution.

Key classes:
- Vector / GridPoint: Real and integer 2D points
- Curve: Sampled polar side
- Skeleton: 8-connected closed boundary
- Range / Line / Area: Scanline run-length encoded region
- CurveParams: Parameters of one polar side
- Shape / Layer / Flower: Generated composition
"""

from florist.domain.area import EMPTY_LINE, Area, Line, Range
from florist.domain.point import GRID_LIMIT, ORIGIN, Curve, GridPoint, Skeleton, Vector
from florist.domain.shape import (
    CurveParams,
    Flower,
    Layer,
    MergeMode,
    Shape,
    ShapeKind,
    TrigFamily,
)

__all__: list[str] = [
    # Constants
    "EMPTY_LINE",
    "GRID_LIMIT",
    "ORIGIN",
    # Enums
    "MergeMode",
    "ShapeKind",
    "TrigFamily",
    # Core types
    "Vector",
    "GridPoint",
    "Curve",
    "Skeleton",
    "Range",
    "Line",
    "Area",
    "CurveParams",
    "Shape",
    "Layer",
    "Flower",
]
