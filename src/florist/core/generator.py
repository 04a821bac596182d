"""Random parameter sampling for petals, mosaic frames and flowers.

This module draws shape parameters from a RestorableRandom and feeds them
through the geometry engine:
- MosaicGenerator: Two unrelated polar sides closed through the origin
- FlowerGenerator: Stacked layers of petals, largest layer at the back

A draw whose parameters yield no curve or no interior is discarded and
redrawn up to the configured attempt budget. Nothing here resolves
occlusion; see LayerResolver.
"""

import math
from dataclasses import dataclass

from florist.config import Arrangement, FloristSettings
from florist.core.extractor import extract_area
from florist.core.polar import evaluate_curve, rotate_curve, sample_count
from florist.core.rng import RestorableRandom
from florist.core.skeleton import build_skeleton, round_half_away
from florist.domain import (
    Curve,
    CurveParams,
    Flower,
    Layer,
    MergeMode,
    Shape,
    ShapeKind,
    TrigFamily,
)
from florist.utils import GenerationLogger

TAU = math.pi * 2.0


def normalize(
    value: float, old_min: float, old_max: float, new_min: float, new_max: float
) -> float:
    """Map value linearly from [old_min, old_max] onto [new_min, new_max].

    A degenerate source interval maps everything onto new_min.
    """
    if old_max == old_min:
        return new_min
    return new_min + (value - old_min) * (new_max - new_min) / (old_max - old_min)


@dataclass(frozen=True)
class JitteredValue:
    """A value with the largest deviation allowed when sampling it.

    Attributes:
        value: Center value
        max_delta: Largest absolute deviation from value
    """

    value: float
    max_delta: float

    @classmethod
    def from_range(cls, low: float, high: float, random: RestorableRandom) -> "JitteredValue":
        """Draw a center in [low, high] and a delta that stays inside it."""
        value = random.next_float_in_range(low, high)
        max_delta = random.next_float_in_range(0.0, min(value - low, high - value))
        return cls(value, max_delta)

    def sample(self, random: RestorableRandom) -> float:
        """Draw a value within max_delta of the center."""
        return self.value + random.next_float_in_range(-self.max_delta, self.max_delta)

    def narrowed(self, random: RestorableRandom) -> "JitteredValue":
        """Draw a new center and delta whose span fits inside this one."""
        value = random.next_float_in_range(self.value - self.max_delta, self.value + self.max_delta)
        max_delta = random.next_float_in_range(
            0.0, max(0.0, self.max_delta - abs(value - self.value))
        )
        return JitteredValue(value, max_delta)


def _tip_angle(curve: Curve) -> float:
    return curve[-1].angle()


def _angular_extent(curves: tuple[Curve, Curve], tip: float) -> tuple[float, float]:
    """Smallest and largest angle of the curves' points relative to the tip."""
    low, high = 0.0, 0.0
    for curve in curves:
        for point in curve:
            if abs(point.x) + abs(point.y) < 1e-9:
                continue
            delta = math.remainder(point.angle() - tip, TAU)
            low = min(low, delta)
            high = max(high, delta)
    return low, high


class MosaicGenerator:
    """Draws mosaic frames: two random sides closed through the origin."""

    def __init__(self, settings: FloristSettings, logger: GenerationLogger | None = None) -> None:
        """Initialize the generator.

        Args:
            settings: Florist settings (mosaic and geometry sections are used)
            logger: Generation logger for discarded draws
        """
        self.settings = settings
        self.config = settings.mosaic
        self.logger = logger if logger is not None else GenerationLogger()

    def random_side(self, radius: int, random: RestorableRandom) -> Curve:
        """Draw one mosaic side.

        Args:
            radius: Mosaic radius the side will be scaled to
            random: Random source to consume

        Returns:
            The evaluated side; empty when the draw is unusable
        """
        config = self.config
        mirror = random.next_bool()
        rotation = random.next_float_in_range(-math.pi, math.pi)
        k = random.next_float_in_range(config.k_min, config.k_max)

        if random.next_bool():
            family = TrigFamily.SIN
            ceiling = normalize(k, config.k_min, config.k_max, config.max_step, config.max_step / 2.0)
        else:
            family = TrigFamily.TAN
            k /= 2.0
            ceiling = normalize(
                k, config.k_min / 2.0, config.k_max / 2.0, config.max_step, config.max_step / 2.0
            )
        step = random.next_float_in_range(config.min_step, max(config.min_step, ceiling))

        params = CurveParams(k=k, step=step, rotation=rotation, mirror=mirror, family=family)
        cells = sample_count(k, step, family.inverse) * radius
        if cells > self.settings.geometry.max_boundary_cells:
            self.logger.log_shape_discarded(ShapeKind.MOSAIC.value, "side too finely sampled")
            return Curve()

        return evaluate_curve(params)

    def try_generate(self, radius: int, random: RestorableRandom) -> Shape | None:
        """Make a single attempt at a mosaic frame.

        Returns:
            Mosaic shape, or None if this draw is unusable
        """
        first = self.random_side(radius, random)
        second = self.random_side(radius, random)
        if first.is_empty() or second.is_empty():
            self.logger.log_shape_discarded(ShapeKind.MOSAIC.value, "empty side")
            return None

        skeleton = build_skeleton(first, second, radius, MergeMode.SIDE_WITH_ORIGIN)
        area = extract_area(skeleton)
        if area is None:
            self.logger.log_shape_discarded(ShapeKind.MOSAIC.value, "no interior")
            return None

        self.logger.log_shape_generated(ShapeKind.MOSAIC.value, 0, area.coverage())
        return Shape(skeleton=skeleton, area=area, kind=ShapeKind.MOSAIC)

    def generate(self, radius: int, random: RestorableRandom) -> Shape | None:
        """Draw mosaic frames until one is usable.

        Args:
            radius: Mosaic radius in grid units
            random: Random source to consume

        Returns:
            Mosaic shape, or None if every attempt was unusable

        Raises:
            ValueError: If radius is out of range
        """
        max_radius = self.settings.geometry.max_radius
        if not self.config.min_radius <= radius <= max_radius:
            raise ValueError(
                f"illegal radius '{radius}', allowed: [{self.config.min_radius} <= radius <= {max_radius}]"
            )

        for _ in range(self.config.max_attempts):
            shape = self.try_generate(radius, random)
            if shape is not None:
                return shape

        return None


@dataclass(frozen=True)
class LayerOptions:
    """Parameters shared by every petal of one layer."""

    index: int
    mirror: bool
    flip: bool
    arrangement: Arrangement
    initial_angle: float
    max_angle_delta: float
    petal_count: int
    k: JitteredValue
    size: JitteredValue


@dataclass(frozen=True)
class _PetalDraw:
    sides: tuple[Curve, Curve]
    size: int
    low: float
    high: float


class FlowerGenerator:
    """Draws flowers: a mosaic frame and layers of petals around it.

    Layers are drawn from the largest petals (index 0, furthest back) to the
    smallest. Each layer shares mirror, flip, arrangement and jittered k and
    size parameters between its petals.

    Example:
        generator = FlowerGenerator(get_default_settings())
        flower = generator.generate(256, RestorableRandom(42))
    """

    def __init__(self, settings: FloristSettings, logger: GenerationLogger | None = None) -> None:
        """Initialize the generator.

        Args:
            settings: Florist settings
            logger: Generation logger for generated and discarded shapes
        """
        self.settings = settings
        self.config = settings.flower
        self.logger = logger if logger is not None else GenerationLogger()
        self.mosaic_generator = MosaicGenerator(settings, self.logger)

    def generate(self, radius: int, random: RestorableRandom) -> Flower:
        """Draw an unresolved flower.

        Args:
            radius: Flower radius in grid units
            random: Random source to consume

        Returns:
            Flower whose layers still overlap each other

        Raises:
            ValueError: If radius is out of range
        """
        config = self.config
        max_radius = self.settings.geometry.max_radius
        if not config.min_radius <= radius <= max_radius:
            raise ValueError(
                f"illegal radius '{radius}', allowed: [{config.min_radius} <= radius <= {max_radius}]"
            )

        mosaic_low = max(
            self.settings.mosaic.min_radius, round_half_away(radius * config.mosaic_min_fraction)
        )
        mosaic_high = max(mosaic_low, round_half_away(radius * config.mosaic_max_fraction))
        mosaic_low, mosaic_high = min(mosaic_low, radius), min(mosaic_high, radius)
        mosaic_radius = random.next_int_in_range(mosaic_low, mosaic_high)

        mosaic = None
        if config.include_mosaic:
            mosaic = self.mosaic_generator.generate(mosaic_radius, random.restore())
            if mosaic is None:
                self.logger.log_shape_discarded(ShapeKind.MOSAIC.value, "attempts exhausted")

        layer_count = random.next_int_in_range(1, config.max_layers)
        arrangement = self._arrangement_choice(random)
        mirror = random.option(lambda r: r.next_bool())
        flip = random.option(lambda r: r.next_bool())
        k = JitteredValue.from_range(config.k_min, config.k_max, random)
        min_length = random.next_int_in_range(min(max(2, mosaic_radius), radius), radius)

        layers = []
        for position, i in enumerate(reversed(range(layer_count))):
            options = LayerOptions(
                index=position,
                mirror=mirror if mirror is not None else random.next_bool(),
                flip=flip if flip is not None else random.next_bool(),
                arrangement=arrangement if arrangement is not None else self._random_arrangement(random),
                initial_angle=random.next_float_in_range(-math.pi, math.pi),
                max_angle_delta=random.next_float_in_range(
                    0.0, normalize(k.value, config.k_min, config.k_max, math.pi / 8.0, math.pi / 4.0)
                ),
                petal_count=self._petal_count(k.value, random),
                k=k.narrowed(random),
                size=self._layer_size(i, layer_count, min_length, radius, random),
            )
            layers.append(self.random_layer(options, random))

        if mosaic is not None:
            mosaic.layer_index = len(layers)

        return Flower(radius=radius, seed=random.seed, layers=layers, mosaic=mosaic)

    def _arrangement_choice(self, random: RestorableRandom) -> Arrangement | None:
        if self.config.arrangement is not Arrangement.AUTO:
            return self.config.arrangement
        return random.option(self._random_arrangement)

    @staticmethod
    def _random_arrangement(random: RestorableRandom) -> Arrangement:
        return Arrangement.VALVATE if random.next_bool() else Arrangement.RADIAL

    def _petal_count(self, k: float, random: RestorableRandom) -> int:
        config = self.config
        highest = normalize(k, config.k_min, config.k_max, 10.0, 40.0)
        count = int(random.next_float_in_range(highest / 3.5, highest))
        return max(1, min(count, config.max_petals_per_layer))

    @staticmethod
    def _layer_size(
        i: int, layer_count: int, min_length: int, radius: int, random: RestorableRandom
    ) -> JitteredValue:
        value = normalize(i, 0.0, layer_count - 1.0, min_length, radius) if layer_count > 1 else radius
        max_delta = min(
            (radius - min_length) / (layer_count * 2),
            value - min_length,
            radius - value,
        )
        return JitteredValue(value, random.next_float_in_range(0.0, max(0.0, max_delta)))

    def random_layer(self, options: LayerOptions, random: RestorableRandom) -> Layer:
        """Draw the petals of one layer and give them a random draw order.

        Args:
            options: Layer parameters
            random: Random source to consume

        Returns:
            Layer with ranked petals (may be empty if every draw failed)
        """
        if options.arrangement is Arrangement.VALVATE:
            petals = self._valvate_petals(options, random)
        else:
            petals = self._radial_petals(options, random)

        random.shuffle(petals)
        for rank, petal in enumerate(petals):
            petal.layer_index = options.index
            petal.rank = rank

        return Layer(index=options.index, shapes=petals)

    def _radial_petals(self, options: LayerOptions, random: RestorableRandom) -> list[Shape]:
        petals = []
        for i in range(options.petal_count):
            angle = options.initial_angle + (i / options.petal_count) * TAU
            for _ in range(self.config.max_shape_attempts):
                draw = self._draw_petal(options, random)
                if draw is None:
                    continue
                jitter = random.next_float_in_range(-options.max_angle_delta, options.max_angle_delta)
                petal = self._place_petal(draw, angle + jitter, options.index)
                if petal is not None:
                    petals.append(petal)
                    break
        return petals

    def _valvate_petals(self, options: LayerOptions, random: RestorableRandom) -> list[Shape]:
        draws: list[_PetalDraw] = []
        centers: list[float] = []
        minimum_span = TAU / self.config.max_petals_per_layer
        covered = 0.0

        while covered < TAU and len(draws) < self.config.max_petals_per_layer:
            draw = None
            for _ in range(self.config.max_shape_attempts):
                draw = self._draw_petal(options, random)
                if draw is not None:
                    break
            if draw is None:
                break

            span = max(draw.high - draw.low, minimum_span)
            centers.append(covered + span / 2.0)
            draws.append(draw)
            covered += span

        # Spread the last petal's overshoot evenly over the whole circle.
        fit = TAU / covered if covered > 0.0 else 1.0
        petals = []
        for draw, center in zip(draws, centers):
            jitter = random.next_float_in_range(-options.max_angle_delta, options.max_angle_delta)
            petal = self._place_petal(draw, options.initial_angle + center * fit + jitter, options.index)
            if petal is not None:
                petals.append(petal)
        return petals

    def _draw_petal(self, options: LayerOptions, random: RestorableRandom) -> _PetalDraw | None:
        """Draw both sides of a petal pointing along the negative y axis."""
        if options.mirror:
            mirrors = (False, True)
        else:
            base = random.next_bool()
            mirrors = (base, base)
        rotation = math.pi if options.flip else 0.0

        size = max(2, round_half_away(options.size.sample(random)))
        k = options.k.sample(random)
        step = normalize(
            size, 0.0, self.settings.geometry.max_radius, self.config.coarse_step, self.config.fine_step
        )

        sides = []
        for mirror in mirrors:
            if random.next_bool():
                params = CurveParams(k=k, step=step, rotation=rotation, mirror=mirror, family=TrigFamily.SIN)
            else:
                params = CurveParams(
                    k=k / 2.0, step=step, rotation=rotation, mirror=mirror, family=TrigFamily.TAN
                )
            side = evaluate_curve(params)
            if side.is_empty():
                self.logger.log_shape_discarded(ShapeKind.PETAL.value, "empty side")
                return None
            sides.append(side)

        pair = (sides[0], sides[1])
        low, high = _angular_extent(pair, _tip_angle(sides[0]))
        return _PetalDraw(sides=pair, size=size, low=low, high=high)

    def _place_petal(self, draw: _PetalDraw, angle: float, layer_index: int) -> Shape | None:
        """Turn a drawn petal so its middle points at angle and build its area."""
        tip = _tip_angle(draw.sides[0])
        turn = angle - (tip + (draw.low + draw.high) / 2.0)
        first, second = (rotate_curve(side, turn) for side in draw.sides)

        skeleton = build_skeleton(first, second, draw.size, MergeMode.SIDE_WITH_SIDE)
        area = extract_area(skeleton)
        if area is None:
            self.logger.log_shape_discarded(ShapeKind.PETAL.value, "no interior")
            return None

        self.logger.log_shape_generated(ShapeKind.PETAL.value, layer_index, area.coverage())
        return Shape(skeleton=skeleton, area=area, kind=ShapeKind.PETAL, layer_index=layer_index)
