"""Logging utilities for Florist."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class GenerationStats:
    """Statistics from a generation run."""

    shapes_generated: int = 0
    shapes_discarded: int = 0
    shapes_culled: int = 0
    layers_dropped: int = 0
    visible_coverage: int = 0
    discard_reasons: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def shapes_visible(self) -> int:
        """Shapes that survived occlusion."""
        return self.shapes_generated - self.shapes_culled

    @property
    def duration_seconds(self) -> float:
        """Calculate generation duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("florist")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file is not None else None,
        level=file_level,
    )

    return logger


class GenerationLogger:
    """Logger for tracking generation progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("florist")
        self._stats = GenerationStats()

    def log_shape_generated(self, kind: str, layer: int, coverage: int) -> None:
        """Log a shape that produced a usable area."""
        self._logger.debug("Shape generated", kind=kind, layer=layer, coverage=coverage)
        self._stats.shapes_generated += 1

    def log_shape_discarded(self, kind: str, reason: str) -> None:
        """Log a draw whose parameters produced no usable shape."""
        self._logger.debug("Shape discarded", kind=kind, reason=reason)
        self._stats.shapes_discarded += 1
        self._stats.discard_reasons.append((kind, reason))

    def log_shape_culled(self, layer: int, rank: int, occluders_tested: int) -> None:
        """Log a shape hidden entirely by shapes in front of it."""
        self._logger.debug(
            "Shape fully occluded",
            layer=layer,
            rank=rank,
            occluders_tested=occluders_tested,
        )
        self._stats.shapes_culled += 1

    def log_layer_dropped(self, layer: int) -> None:
        """Log a layer left without visible shapes."""
        self._logger.info("Layer dropped", layer=layer)
        self._stats.layers_dropped += 1

    def log_layers_resolved(self, layers: int, shapes: int, coverage: int) -> None:
        """Log the outcome of occlusion resolution."""
        self._logger.info(
            "Layers resolved",
            layers=layers,
            shapes=shapes,
            coverage=coverage,
        )
        self._stats.visible_coverage = coverage

    def log_total_occlusion(self, layers: int, shapes: int) -> None:
        """Log a run where nothing stayed visible."""
        self._logger.error("All shapes occluded", layers=layers, shapes=shapes)

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        """Underlying structured logger."""
        return self._logger

    @property
    def stats(self) -> GenerationStats:
        """Get current generation statistics."""
        return self._stats
