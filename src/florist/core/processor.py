"""Generation orchestration for flowers and mosaics.

This module coordinates the full generation workflow: seeding the random
source, drawing shapes, resolving occlusion between layers and collecting
statistics.

Key components:
- GenerationResult: Generated flower plus run statistics
- FlowerProcessor: Main orchestrator class
"""

import time
from dataclasses import dataclass

import structlog

from florist.config import FloristSettings
from florist.core.generator import FlowerGenerator, MosaicGenerator
from florist.core.resolver import LayerResolver
from florist.core.rng import RestorableRandom
from florist.domain import Flower, Layer, ShapeKind
from florist.exceptions import ShapeGenerationError
from florist.utils import GenerationLogger, GenerationStats, configure_logging


@dataclass
class GenerationResult:
    """A generated flower and the statistics of the run that produced it."""

    flower: Flower
    stats: GenerationStats


class FlowerProcessor:
    """Orchestrates flower and mosaic generation.

    Manages the complete workflow:
    1. Seed a RestorableRandom (fresh entropy when no seed is given)
    2. Draw the mosaic frame and petal layers
    3. Cull every shape against the shapes in front of it
    4. Drop layers left empty and collect statistics

    Example:
        settings = FloristSettings()
        processor = FlowerProcessor(settings)
        result = processor.generate_flower(radius=256, seed=42)
    """

    def __init__(
        self,
        config: FloristSettings,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize processor with configuration.

        Args:
            config: Florist settings
            logger: Structured logger to use instead of configuring logging
        """
        self.config = config
        if logger is None:
            logger = configure_logging(
                log_file=config.logging.log_file,
                console_level=config.logging.log_level,
                file_level=config.logging.file_log_level,
                quiet=False,
            )
        self.logger = logger

    @staticmethod
    def _random(seed: int | None) -> RestorableRandom:
        if seed is None:
            return RestorableRandom.from_entropy()
        return RestorableRandom(seed)

    def generate_flower(self, radius: int, seed: int | None = None) -> GenerationResult:
        """Generate a flower with mutually culled layers.

        The mosaic frame, when enabled, is resolved as the front-most layer
        so petals never cover it.

        Args:
            radius: Flower radius in grid units
            seed: 64-bit seed (fresh entropy if None)

        Returns:
            GenerationResult with the resolved flower

        Raises:
            ValueError: If radius or seed is out of range
            TotalOcclusionError: If no shape stays visible
        """
        random = self._random(seed)
        generation_logger = GenerationLogger(self.logger)
        stats = generation_logger.stats
        stats.start_time = time.time()

        self.logger.info("Starting flower generation", radius=radius, seed=random.seed)

        flower = FlowerGenerator(self.config, generation_logger).generate(radius, random)

        layers = list(flower.layers)
        mosaic_layer = None
        if flower.mosaic is not None:
            mosaic_layer = Layer(index=len(layers), shapes=[flower.mosaic])
            layers.append(mosaic_layer)

        self.logger.info(
            "Shapes drawn",
            layers=len(flower.layers),
            petals=len(flower.petals),
            mosaic=flower.mosaic is not None,
        )

        resolved = LayerResolver(generation_logger).resolve(layers)
        flower.layers = [layer for layer in resolved if layer is not mosaic_layer]

        stats.end_time = time.time()
        self.logger.info(
            "Flower generation complete",
            layers=len(flower.layers),
            visible=stats.shapes_visible,
            culled=stats.shapes_culled,
            discarded=stats.shapes_discarded,
            coverage=stats.visible_coverage,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return GenerationResult(flower=flower, stats=stats)

    def generate_mosaic(self, radius: int, seed: int | None = None) -> GenerationResult:
        """Generate a standalone mosaic frame.

        A flower generated with the same seed carries this same mosaic,
        scaled to its own mosaic radius.

        Args:
            radius: Mosaic radius in grid units
            seed: 64-bit seed (fresh entropy if None)

        Returns:
            GenerationResult with a flower holding only the mosaic

        Raises:
            ValueError: If radius or seed is out of range
            ShapeGenerationError: If no attempt produced a usable mosaic
        """
        random = self._random(seed)
        generation_logger = GenerationLogger(self.logger)
        stats = generation_logger.stats
        stats.start_time = time.time()

        self.logger.info("Starting mosaic generation", radius=radius, seed=random.seed)

        mosaic = MosaicGenerator(self.config, generation_logger).generate(radius, random)
        if mosaic is None:
            attempts = self.config.mosaic.max_attempts
            self.logger.error("Mosaic generation failed", attempts=attempts)
            raise ShapeGenerationError(ShapeKind.MOSAIC.value, attempts)

        stats.visible_coverage = mosaic.area.coverage()
        stats.end_time = time.time()
        self.logger.info(
            "Mosaic generation complete",
            coverage=stats.visible_coverage,
            discarded=stats.shapes_discarded,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        flower = Flower(radius=radius, seed=random.seed, layers=[], mosaic=mosaic)
        return GenerationResult(flower=flower, stats=stats)
