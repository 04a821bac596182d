"""Shape, layer and flower models.

This module defines the generation-level domain models: the parameters of a
polar side, the merge modes used to close two sides into one boundary, and
the shapes and layers the occlusion resolver works on.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from florist.domain.area import Area
from florist.domain.point import Skeleton


class TrigFamily(Enum):
    """Periodic function family used to draw a polar side.

    Each member pairs the function with its inverse, which is needed to find
    the angle where the function first reaches magnitude one.
    """

    SIN = "sin"
    TAN = "tan"

    @property
    def function(self) -> Callable[[float], float]:
        """The periodic function."""
        return math.sin if self is TrigFamily.SIN else math.tan

    @property
    def inverse(self) -> Callable[[float], float]:
        """The inverse function on its principal branch."""
        return math.asin if self is TrigFamily.SIN else math.atan


class MergeMode(Enum):
    """How two sides are joined into one closed boundary.

    - SIDE_WITH_SIDE: first side forward, second side reversed (petals)
    - SIDE_WITH_ORIGIN: each side followed by the origin (mosaic frames)
    """

    SIDE_WITH_SIDE = "side_with_side"
    SIDE_WITH_ORIGIN = "side_with_origin"


class ShapeKind(Enum):
    """What a shape represents in the composition."""

    PETAL = "petal"
    MOSAIC = "mosaic"


@dataclass(frozen=True)
class CurveParams:
    """Parameters of one polar side.

    Attributes:
        k: Angular frequency, must be positive
        step: Angular sampling step in radians, must be positive
        rotation: Orientation of the side's tip in radians
        mirror: Negate x after rotation
        family: Periodic function family
    """

    k: float
    step: float
    rotation: float = 0.0
    mirror: bool = False
    family: TrigFamily = TrigFamily.SIN

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "k": self.k,
            "step": self.step,
            "rotation": self.rotation,
            "mirror": self.mirror,
            "family": self.family.value,
        }


@dataclass
class Shape:
    """A generated silhouette with its visible region.

    The skeleton never changes after generation. The area only shrinks,
    and only during occlusion resolution.

    Attributes:
        skeleton: Closed boundary of the shape
        area: Currently visible filled region
        kind: Petal or mosaic frame
        layer_index: Index of the owning layer (0 is furthest back)
        rank: Draw order within the layer (higher is drawn later)
    """

    skeleton: Skeleton
    area: Area
    kind: ShapeKind = ShapeKind.PETAL
    layer_index: int = 0
    rank: int = 0

    def draw_key(self) -> tuple[int, int]:
        """Painter's order key: layer first, then rank within the layer."""
        return (self.layer_index, self.rank)

    def is_in_front_of(self, other: "Shape") -> bool:
        """Check whether this shape is drawn after another one."""
        return self.draw_key() > other.draw_key()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for an external renderer."""
        return {
            "kind": self.kind.value,
            "layer": self.layer_index,
            "rank": self.rank,
            "skeleton": self.skeleton.to_dict(),
            "area": self.area.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Shape":
        """Deserialize from dictionary."""
        return cls(
            skeleton=Skeleton.from_dict(data["skeleton"]),
            area=Area.from_dict(data["area"]),
            kind=ShapeKind(data["kind"]),
            layer_index=data["layer"],
            rank=data["rank"],
        )


@dataclass
class Layer:
    """Shapes sharing the same size and arrangement parameters.

    Attributes:
        index: Position in the stack (0 is furthest back)
        shapes: Shapes in draw order
    """

    index: int
    shapes: list[Shape] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Check if the layer holds no shapes."""
        return len(self.shapes) == 0

    def coverage(self) -> int:
        """Total visible coverage of the layer's shapes."""
        return sum(shape.area.coverage() for shape in self.shapes)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"index": self.index, "shapes": [s.to_dict() for s in self.shapes]}


@dataclass
class Flower:
    """A resolved composition of petal layers around a mosaic frame.

    Attributes:
        radius: Requested radius in grid units
        seed: Seed of the random source the flower was drawn from
        layers: Resolved petal layers, back to front
        mosaic: Central mosaic frame, drawn in front of every petal
    """

    radius: int
    seed: int
    layers: list[Layer]
    mosaic: Shape | None = None

    @property
    def petals(self) -> list[Shape]:
        """All visible petals, back to front."""
        return [shape for layer in self.layers for shape in layer.shapes]

    def shapes(self) -> list[Shape]:
        """Every visible shape in painter's order."""
        result = self.petals
        if self.mosaic is not None:
            result.append(self.mosaic)
        return result

    def coverage(self) -> int:
        """Total visible coverage of all shapes."""
        return sum(shape.area.coverage() for shape in self.shapes())

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for an external renderer."""
        return {
            "radius": self.radius,
            "seed": self.seed,
            "layers": [layer.to_dict() for layer in self.layers],
            "mosaic": self.mosaic.to_dict() if self.mosaic is not None else None,
        }
