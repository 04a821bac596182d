"""Exception hierarchy for Florist."""


class FloristError(Exception):
    """Base exception for all Florist errors."""

    pass


class GeometryError(FloristError):
    """Errors in geometric calculations."""

    pass


class ParameterDegenerateError(GeometryError):
    """Curve parameters produced an empty curve."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Degenerate curve parameters: {reason}")


class CapacityOverflowError(GeometryError):
    """Computed sequence length cannot be represented."""

    def __init__(self, length: float, details: str) -> None:
        self.length = length
        self.details = details
        super().__init__(
            f"Polar curve length {length} exceeds the maximum sequence size. "
            f"Consider adjusting parameters, especially 'step'. {details}"
        )


class InvariantError(GeometryError):
    """A geometric value violates its structural invariant."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class GenerationError(FloristError):
    """Errors related to flower or mosaic generation."""

    pass


class ShapeGenerationError(GenerationError):
    """No usable shape could be drawn within the attempt budget."""

    def __init__(self, kind: str, attempts: int) -> None:
        self.kind = kind
        self.attempts = attempts
        super().__init__(f"Could not generate a {kind} after {attempts} attempts")


class TotalOcclusionError(GenerationError):
    """Every shape in every layer was culled away."""

    def __init__(self, layer_count: int, shape_count: int) -> None:
        self.layer_count = layer_count
        self.shape_count = shape_count
        super().__init__(
            f"Nothing left to render: all {shape_count} shapes in "
            f"{layer_count} layers are fully occluded"
        )
