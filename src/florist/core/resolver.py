"""Occlusion resolution across stacked layers.

Shapes are ordered painter's-style: layer index first (0 is furthest back),
then draw-order rank within the layer. Each shape keeps only the part of its
area that no shape in front of it covers. Shapes hidden entirely are
dropped, and so are layers left without shapes.
"""

import bisect

from florist.core.algebra import cull
from florist.domain import Area, Layer
from florist.exceptions import TotalOcclusionError
from florist.utils import GenerationLogger


class LayerResolver:
    """Resolves mutual occlusion between the shapes of ordered layers.

    Every shape is culled against the original areas of all shapes in front
    of it, nearest first. The cost is quadratic in the number of shapes;
    Area.intersects filters out disjoint pairs before any subtraction.

    Example:
        resolver = LayerResolver()
        visible_layers = resolver.resolve(layers)
    """

    def __init__(self, logger: GenerationLogger | None = None) -> None:
        """Initialize the resolver.

        Args:
            logger: Generation logger for culling statistics
        """
        self.logger = logger if logger is not None else GenerationLogger()

    def resolve(self, layers: list[Layer]) -> list[Layer]:
        """Cull every shape against the shapes in front of it.

        Shapes' areas are replaced in place and hidden shapes are removed
        from their layers.

        Args:
            layers: Layers to resolve, back to front

        Returns:
            Layers that still hold at least one shape, in input order

        Raises:
            TotalOcclusionError: If no shape in any layer stays visible
        """
        shape_count = sum(len(layer.shapes) for layer in layers)
        occluders: list[tuple[tuple[int, int], Area]] = sorted(
            ((shape.draw_key(), shape.area) for layer in layers for shape in layer.shapes),
            key=lambda item: item[0],
        )
        keys = [key for key, _ in occluders]

        for layer in layers:
            visible = []
            for shape in layer.shapes:
                key = shape.draw_key()
                start = bisect.bisect_right(keys, key)

                area: Area | None = shape.area
                tested = 0
                for _, occluder in occluders[start:]:
                    tested += 1
                    area = cull(area, occluder)
                    if area is None:
                        break

                if area is None:
                    self.logger.log_shape_culled(key[0], key[1], tested)
                    continue

                shape.area = area
                visible.append(shape)

            layer.shapes = visible

        kept = []
        for layer in layers:
            if layer.is_empty():
                self.logger.log_layer_dropped(layer.index)
            else:
                kept.append(layer)

        if not kept:
            self.logger.log_total_occlusion(len(layers), shape_count)
            raise TotalOcclusionError(len(layers), shape_count)

        self.logger.log_layers_resolved(
            layers=len(kept),
            shapes=sum(len(layer.shapes) for layer in kept),
            coverage=sum(layer.coverage() for layer in kept),
        )
        return kept


def resolve_layers(layers: list[Layer]) -> list[Layer]:
    """Resolve occlusion with a default LayerResolver."""
    return LayerResolver().resolve(layers)
