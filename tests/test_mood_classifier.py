"""
Tests for MoodClassifier: per-channel strict tolerance against the
reference palette, coverage over the whole raster, alpha ignored.
"""

from __future__ import annotations

import numpy as np
import pytest

from badge_checker.exceptions import ConfigurationError
from badge_checker.models.palette import Color, ReferencePalette
from badge_checker.models.raster import RgbaRaster
from badge_checker.models.validation_config import MoodConfig
from badge_checker.models.verdict import FailureReason, Stage
from badge_checker.services.mood_classifier import MoodClassifier, matching_mask

from conftest import BLUE, YELLOW, solid


@pytest.fixture
def classifier() -> MoodClassifier:
    return MoodClassifier()


class TestCoverage:

    def test_palette_color_gives_full_coverage(self, classifier):
        raster = RgbaRaster(solid(YELLOW))
        assert classifier.coverage(raster) == 1.0

    @pytest.mark.parametrize("threshold", [0.0, 0.5, 0.75, 1.0])
    def test_palette_color_passes_any_threshold(self, classifier, threshold):
        verdict = classifier.classify(RgbaRaster(solid(YELLOW)), coverage_threshold=threshold)
        assert verdict.passed
        assert verdict.stage is Stage.MOOD
        assert verdict.coverage == 1.0

    def test_far_color_gives_zero_coverage_and_fails(self, classifier):
        verdict = classifier.classify(RgbaRaster(solid(BLUE)))
        assert verdict.reason is FailureReason.MOOD_MISMATCH
        assert verdict.coverage == 0.0

    def test_alpha_is_ignored(self, classifier):
        raster = RgbaRaster(solid(YELLOW, alpha=0))
        assert classifier.coverage(raster) == 1.0

    def test_half_coverage(self, classifier):
        arr = solid(BLUE, size=8)
        arr[:4, :, :3] = YELLOW
        raster = RgbaRaster(arr)
        assert classifier.coverage(raster) == 0.5
        assert not classifier.classify(raster).passed
        assert classifier.classify(raster, coverage_threshold=0.5).passed

    def test_threshold_is_inclusive_on_coverage(self, classifier):
        arr = solid(BLUE, size=4)
        arr.reshape(-1, 4)[:12, :3] = YELLOW  # 12 of 16 pixels = 0.75
        verdict = classifier.classify(RgbaRaster(arr))
        assert verdict.coverage == 0.75
        assert verdict.passed


class TestChannelTolerance:

    def test_difference_equal_to_threshold_does_not_match(self):
        # |223 - 193| == 30: strict inequality
        arr = solid((255, 193, 0), size=2)
        assert not matching_mask(arr, ReferencePalette.of([YELLOW]), 30).any()

    def test_difference_just_below_threshold_matches(self):
        arr = solid((226, 194, 29), size=2)
        assert matching_mask(arr, ReferencePalette.of([YELLOW]), 30).all()

    def test_single_channel_outside_rejects(self):
        arr = solid((255, 223, 40), size=2)
        assert not matching_mask(arr, ReferencePalette.of([YELLOW]), 30).any()

    def test_no_uint8_underflow(self):
        # 0 - 255 must not wrap around to a small number
        arr = solid((0, 0, 0), size=2)
        assert not matching_mask(arr, ReferencePalette.of([(255, 255, 255)]), 30).any()
        arr = solid((255, 255, 255), size=2)
        assert not matching_mask(arr, ReferencePalette.of([(0, 0, 0)]), 30).any()

    def test_any_palette_entry_may_match(self):
        palette = ReferencePalette.of([YELLOW, BLUE])
        arr = solid(YELLOW, size=2)
        arr[0, :, :3] = BLUE
        assert matching_mask(arr, palette, 30).all()

    def test_zero_threshold_matches_nothing(self):
        arr = solid(YELLOW, size=2)
        assert not matching_mask(arr, ReferencePalette.of([YELLOW]), 0).any()


class TestConfiguration:

    def test_defaults(self):
        config = MoodConfig()
        assert config.color_threshold == 30
        assert config.coverage_threshold == 0.75
        assert config.palette.colors == (Color(255, 223, 0),)

    def test_constructor_config_is_used(self):
        config = MoodConfig(palette=ReferencePalette.of([BLUE]))
        verdict = MoodClassifier(config).classify(RgbaRaster(solid(BLUE, size=4)))
        assert verdict.passed

    def test_arguments_override_config_independently(self, classifier):
        raster = RgbaRaster(solid((255, 193, 0), size=4))
        assert not classifier.classify(raster).passed
        assert classifier.classify(raster, color_threshold=31).passed

    @pytest.mark.parametrize("coverage", [-0.1, 1.5])
    def test_rejects_coverage_outside_unit_interval(self, coverage):
        with pytest.raises(ConfigurationError) as info:
            MoodConfig(coverage_threshold=coverage)
        assert info.value.field == "coverage_threshold"

    def test_rejects_negative_color_threshold(self, classifier):
        with pytest.raises(ConfigurationError):
            classifier.classify(RgbaRaster(solid(YELLOW, size=2)), color_threshold=-1)

    def test_classification_is_repeatable(self, classifier):
        rng = np.random.default_rng(3)
        raster = RgbaRaster(rng.integers(0, 256, (16, 16, 4), dtype=np.uint8))
        assert classifier.classify(raster) == classifier.classify(raster)
