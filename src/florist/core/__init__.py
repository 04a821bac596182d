"""Core generation algorithms for florist.

This module contains the core algorithms for:

- Polar curve evaluation (sin/tan families, rotation, mirroring)
- Skeleton building (scaling, merging, gap-free interpolation)
- Area extraction (crossing-parity scanline fill)
- Region algebra (intersection test, coverage, culling)
- Layer occlusion resolution
- Random parameter sampling and orchestration

The geometry functions are:
- Stateless
- Pure (no side effects, no logging)

Key functions:
- evaluate_sin / evaluate_tan / evaluate_curve: Sample a polar side
- build_skeleton: Scale, merge and interpolate two sides
- extract_area: Fill the interior of a skeleton
- intersects / coverage / cull: Region algebra on areas

Key classes:
- RestorableRandom: Seeded random source that can rewind to its seed
- MosaicGenerator / FlowerGenerator: Random shape parameter sampling
- LayerResolver: Culls every shape against the shapes in front of it
- FlowerProcessor: Orchestrates a full generation run
"""

from florist.core.algebra import coverage, cull, intersects, subtract_line
from florist.core.extractor import extract_area
from florist.core.generator import (
    FlowerGenerator,
    JitteredValue,
    LayerOptions,
    MosaicGenerator,
    normalize,
)
from florist.core.polar import (
    evaluate_curve,
    evaluate_polar,
    evaluate_sin,
    evaluate_tan,
    rotate_curve,
    sample_count,
)
from florist.core.processor import FlowerProcessor, GenerationResult
from florist.core.resolver import LayerResolver, resolve_layers
from florist.core.rng import RestorableRandom
from florist.core.skeleton import (
    build_skeleton,
    build_skeleton_from_params,
    interpolate,
    merge,
    round_half_away,
    scale,
)

__all__ = [
    # Generator classes
    "FlowerGenerator",
    # Processor classes
    "FlowerProcessor",
    "GenerationResult",
    "JitteredValue",
    "LayerOptions",
    # Resolver classes
    "LayerResolver",
    "MosaicGenerator",
    # Random source
    "RestorableRandom",
    # Skeleton functions
    "build_skeleton",
    "build_skeleton_from_params",
    # Algebra functions
    "coverage",
    "cull",
    # Polar functions
    "evaluate_curve",
    "evaluate_polar",
    "evaluate_sin",
    "evaluate_tan",
    # Extractor functions
    "extract_area",
    "interpolate",
    "intersects",
    "merge",
    "normalize",
    "resolve_layers",
    "rotate_curve",
    "round_half_away",
    "sample_count",
    "scale",
    "subtract_line",
]
