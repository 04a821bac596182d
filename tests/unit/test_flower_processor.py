"""Tests for generation orchestration."""

from unittest.mock import MagicMock, patch

import pytest

from florist.config import FloristSettings, FlowerConfig
from florist.core.generator import MosaicGenerator
from florist.core.processor import FlowerProcessor, GenerationResult
from florist.core.rng import U64_MAX, RestorableRandom
from florist.core.skeleton import round_half_away
from florist.domain import Flower, Layer
from florist.exceptions import ShapeGenerationError, TotalOcclusionError


@pytest.fixture
def settings() -> FloristSettings:
    """Create settings with small flowers for fast tests."""
    return FloristSettings(flower=FlowerConfig(max_layers=3, max_petals_per_layer=6))


@pytest.fixture
def processor(settings: FloristSettings) -> FlowerProcessor:
    """Create a processor with a mock structured logger."""
    return FlowerProcessor(settings, logger=MagicMock())


class TestFlowerProcessorInit:
    """Tests for FlowerProcessor initialization."""

    def test_init_with_config(self, settings: FloristSettings) -> None:
        """Test processor configures logging when no logger is given."""
        with patch("florist.core.processor.configure_logging") as configure:
            processor = FlowerProcessor(settings)

        configure.assert_called_once_with(
            log_file=None,
            console_level="WARNING",
            file_level="DEBUG",
            quiet=False,
        )
        assert processor.config == settings
        assert processor.logger is configure.return_value

    def test_init_with_logger(self, settings: FloristSettings) -> None:
        """Test an injected logger is used as is."""
        logger = MagicMock()
        with patch("florist.core.processor.configure_logging") as configure:
            processor = FlowerProcessor(settings, logger=logger)

        configure.assert_not_called()
        assert processor.logger is logger


class TestGenerateFlower:
    """Tests for FlowerProcessor.generate_flower."""

    def test_returns_result(self, processor: FlowerProcessor) -> None:
        """Test a flower and its statistics are returned."""
        result = processor.generate_flower(96, seed=11)

        assert isinstance(result, GenerationResult)
        assert result.flower.radius == 96
        assert result.flower.seed == 11
        assert result.flower.shapes()
        assert result.stats.duration_seconds >= 0.0

    def test_visible_regions_disjoint(self, processor: FlowerProcessor) -> None:
        """Test no cell is visible in two shapes after resolution."""
        flower = processor.generate_flower(96, seed=2).flower

        seen = set()
        for shape in flower.shapes():
            cells = set(shape.area.iter_points())
            assert not cells & seen
            seen |= cells

    def test_layers_not_empty(self, processor: FlowerProcessor) -> None:
        """Test resolution leaves no empty petal layer behind."""
        flower = processor.generate_flower(96, seed=3).flower
        for layer in flower.layers:
            assert not layer.is_empty()

    def test_stats_match_flower(self, processor: FlowerProcessor) -> None:
        """Test statistics agree with the resolved flower."""
        result = processor.generate_flower(96, seed=4)
        assert result.stats.visible_coverage == result.flower.coverage()
        assert result.stats.shapes_visible == len(result.flower.shapes())

    def test_mosaic_never_culled(self, processor: FlowerProcessor) -> None:
        """Test the mosaic keeps its full area in front of the petals."""
        mosaic = MosaicGenerator(processor.config).generate(48, RestorableRandom(2024))
        assert mosaic is not None
        area = mosaic.area

        with patch("florist.core.generator.MosaicGenerator.generate", return_value=mosaic):
            flower = processor.generate_flower(96, seed=5).flower

        assert flower.mosaic is mosaic
        assert flower.mosaic.area == area
        assert mosaic.layer_index > max((layer.index for layer in flower.layers), default=-1)

    def test_same_seed_same_flower(self, processor: FlowerProcessor) -> None:
        """Test generation is reproducible from the seed."""
        a = processor.generate_flower(64, seed=123).flower
        b = processor.generate_flower(64, seed=123).flower
        assert a.to_dict() == b.to_dict()

    def test_fresh_seed(self, processor: FlowerProcessor) -> None:
        """Test a seed is drawn when none is given."""
        result = processor.generate_flower(48)
        assert 0 <= result.flower.seed <= U64_MAX

    def test_invalid_radius(self, processor: FlowerProcessor) -> None:
        """Test radius below the flower minimum is rejected."""
        with pytest.raises(ValueError, match="illegal radius"):
            processor.generate_flower(4, seed=1)

    def test_invalid_seed(self, processor: FlowerProcessor) -> None:
        """Test negative seeds are rejected."""
        with pytest.raises(ValueError, match="seed"):
            processor.generate_flower(64, seed=-1)

    def test_total_occlusion(self, processor: FlowerProcessor) -> None:
        """Test a run without a single shape fails explicitly."""
        empty = Flower(radius=64, seed=1, layers=[Layer(0, []), Layer(1, [])], mosaic=None)
        with patch("florist.core.processor.FlowerGenerator.generate", return_value=empty):
            with pytest.raises(TotalOcclusionError):
                processor.generate_flower(64, seed=1)


class TestGenerateMosaic:
    """Tests for FlowerProcessor.generate_mosaic."""

    @pytest.mark.parametrize("seed", [1, 5, 12, 29])
    def test_flower_carries_standalone_mosaic(self, processor: FlowerProcessor, seed: int) -> None:
        """Test a flower's mosaic re-derives identically from the restored seed."""
        config = processor.config
        radius = 200
        low = max(config.mosaic.min_radius, round_half_away(radius * config.flower.mosaic_min_fraction))
        high = max(low, round_half_away(radius * config.flower.mosaic_max_fraction))
        mosaic_radius = RestorableRandom(seed).next_int_in_range(low, high)

        flower = processor.generate_flower(radius, seed=seed).flower
        standalone = processor.generate_mosaic(mosaic_radius, seed=seed).flower.mosaic

        assert flower.mosaic is not None
        assert standalone is not None
        assert flower.mosaic.skeleton == standalone.skeleton
        assert flower.mosaic.area == standalone.area

    def test_returns_mosaic_only(self, processor: FlowerProcessor) -> None:
        """Test a standalone mosaic has no petal layers."""
        result = processor.generate_mosaic(40, seed=9)

        assert result.flower.layers == []
        assert result.flower.mosaic is not None
        assert result.stats.visible_coverage == result.flower.mosaic.area.coverage()

    def test_same_seed_same_mosaic(self, processor: FlowerProcessor) -> None:
        """Test mosaic generation is reproducible from the seed."""
        a = processor.generate_mosaic(40, seed=10).flower
        b = processor.generate_mosaic(40, seed=10).flower
        assert a.to_dict() == b.to_dict()

    def test_generation_failure(self, processor: FlowerProcessor) -> None:
        """Test exhausting every attempt raises."""
        with patch("florist.core.processor.MosaicGenerator.generate", return_value=None):
            with pytest.raises(ShapeGenerationError) as exc_info:
                processor.generate_mosaic(40, seed=1)
        assert exc_info.value.kind == "mosaic"
        assert exc_info.value.attempts == processor.config.mosaic.max_attempts

    def test_invalid_radius(self, processor: FlowerProcessor) -> None:
        """Test radius below the mosaic minimum is rejected."""
        with pytest.raises(ValueError, match="illegal radius"):
            processor.generate_mosaic(2, seed=1)
