"""Configuration settings for Florist."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class Arrangement(str, Enum):
    """Preferred petal arrangement within a layer."""

    AUTO = "auto"
    VALVATE = "valvate"
    RADIAL = "radial"


class GeometryConfig(BaseModel):
    """Configuration for the integer working grid.

    All geometry after scaling lives on a signed 16-bit grid centered on the
    origin, so shape sizes and radii are bounded by ``grid_limit``.
    """

    grid_limit: int = Field(
        default=32767,
        ge=64,
        le=32767,
        description="Largest absolute grid coordinate",
    )
    max_boundary_cells: int = Field(
        default=500_000,
        ge=10_000,
        description="Estimated skeleton cells (samples x radius) above which a random side is redrawn",
    )

    @property
    def max_radius(self) -> int:
        """Largest radius that keeps every generated shape on the grid."""
        return self.grid_limit // 2 - 1


class MosaicConfig(BaseModel):
    """Configuration for mosaic frame generation."""

    min_radius: int = Field(
        default=8,
        ge=2,
        description="Smallest mosaic radius",
    )
    k_min: float = Field(
        default=0.0001,
        gt=0.0,
        description="Lower bound for the polar frequency of a mosaic side",
    )
    k_max: float = Field(
        default=0.01,
        gt=0.0,
        description="Upper bound for the polar frequency of a mosaic side",
    )
    min_step: float = Field(
        default=0.001,
        gt=0.0,
        description="Smallest angular sampling step",
    )
    max_step: float = Field(
        default=15.0,
        gt=0.0,
        description="Largest angular sampling step (reached at k_min)",
    )
    max_attempts: int = Field(
        default=16,
        ge=1,
        le=256,
        description="Parameter draws before giving up on a mosaic frame",
    )


class FlowerConfig(BaseModel):
    """Configuration for flower generation."""

    min_radius: int = Field(
        default=16,
        ge=4,
        description="Smallest flower radius",
    )
    max_layers: int = Field(
        default=12,
        ge=1,
        le=32,
        description="Maximum number of petal layers",
    )
    k_min: float = Field(
        default=1.1,
        gt=0.0,
        description="Lower bound for the petal polar frequency",
    )
    k_max: float = Field(
        default=6.0,
        gt=0.0,
        description="Upper bound for the petal polar frequency",
    )
    mosaic_min_fraction: float = Field(
        default=0.03,
        ge=0.0,
        le=1.0,
        description="Smallest mosaic radius as a fraction of the flower radius",
    )
    mosaic_max_fraction: float = Field(
        default=0.40,
        ge=0.0,
        le=1.0,
        description="Largest mosaic radius as a fraction of the flower radius",
    )
    coarse_step: float = Field(
        default=0.001,
        gt=0.0,
        description="Angular step used for the smallest petals",
    )
    fine_step: float = Field(
        default=0.00001,
        gt=0.0,
        description="Angular step used for petals at the maximum radius",
    )
    max_petals_per_layer: int = Field(
        default=40,
        ge=1,
        le=120,
        description="Upper bound on radially symmetrical petal count",
    )
    arrangement: Arrangement = Field(
        default=Arrangement.AUTO,
        description="Petal arrangement (auto picks per flower)",
    )
    max_shape_attempts: int = Field(
        default=8,
        ge=1,
        le=64,
        description="Parameter draws before a single petal is given up",
    )
    include_mosaic: bool = Field(
        default=True,
        description="Place a mosaic frame in front of the petals",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class FloristSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    mosaic: MosaicConfig = Field(default_factory=MosaicConfig)
    flower: FlowerConfig = Field(default_factory=FlowerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> FloristSettings:
    """Get default application settings."""
    return FloristSettings()
