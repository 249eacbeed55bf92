"""
Tests for the data models: raster accessor, colours, palette parsing,
verdicts and the pipeline report.
"""

from __future__ import annotations

import numpy as np
import pytest
from PIL import Image

from badge_checker.exceptions import ConfigurationError
from badge_checker.models.palette import HAPPY_PALETTE, Color, ReferencePalette
from badge_checker.models.raster import Rgba, RgbaRaster, to_rgba_array
from badge_checker.models.verdict import FailureReason, PipelineReport, Stage, ValidationVerdict


class TestRgbaRaster:

    def test_dimensions_and_pixel(self):
        arr = np.zeros((3, 5, 4), dtype=np.uint8)
        arr[2, 4] = (1, 2, 3, 4)
        raster = RgbaRaster(arr)
        assert (raster.width, raster.height) == (5, 3)
        assert raster.pixel(4, 2) == Rgba(1, 2, 3, 4)

    @pytest.mark.parametrize("x, y", [(-1, 0), (5, 0), (0, 3)])
    def test_out_of_bounds_pixel_raises(self, x, y):
        raster = RgbaRaster(np.zeros((3, 5, 4), dtype=np.uint8))
        with pytest.raises(IndexError):
            raster.pixel(x, y)

    def test_buffer_is_read_only_copy(self):
        arr = np.zeros((2, 2, 4), dtype=np.uint8)
        raster = RgbaRaster(arr)
        arr[0, 0, 3] = 255
        assert raster.pixel(0, 0).a == 0
        with pytest.raises(ValueError):
            raster.data[0, 0, 3] = 1

    @pytest.mark.parametrize("value", [256, -1])
    def test_rejects_out_of_range_values(self, value):
        arr = np.zeros((2, 2, 4), dtype=np.int64)
        arr[0, 0, 3] = value
        with pytest.raises(ValueError):
            RgbaRaster(arr)

    def test_accepts_in_range_wider_dtype(self):
        arr = np.full((2, 2, 4), 255, dtype=np.int64)
        raster = RgbaRaster(arr)
        assert raster.data.dtype == np.uint8
        assert raster.pixel(1, 1).a == 255

    @pytest.mark.parametrize("shape", [(2, 2, 3), (2, 2), (0, 2, 4)])
    def test_rejects_bad_shapes(self, shape):
        with pytest.raises(ValueError):
            RgbaRaster(np.zeros(shape, dtype=np.uint8))

    def test_from_pil_converts_to_rgba(self):
        image = Image.new("RGB", (4, 2), (10, 20, 30))
        raster = RgbaRaster.from_pil(image)
        assert (raster.width, raster.height) == (4, 2)
        assert raster.pixel(3, 1) == Rgba(10, 20, 30, 255)

    def test_to_rgba_array_returns_own_buffer(self):
        raster = RgbaRaster(np.ones((2, 2, 4), dtype=np.uint8))
        assert to_rgba_array(raster) is raster.data


class TestColor:

    @pytest.mark.parametrize("text", ["#FFDF00", "ffdf00", "255,223,0", " 255, 223, 0 "])
    def test_parse(self, text):
        assert Color.parse(text) == Color(255, 223, 0)

    @pytest.mark.parametrize("text", ["#FFF", "yellow", "1,2", "1,2,x"])
    def test_parse_rejects_garbage(self, text):
        with pytest.raises(ConfigurationError):
            Color.parse(text)

    @pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0)])
    def test_rejects_out_of_range_channels(self, channels):
        with pytest.raises(ConfigurationError):
            Color(*channels)

    def test_to_hex(self):
        assert Color(255, 223, 0).to_hex() == "#FFDF00"


class TestReferencePalette:

    def test_default_is_yellow(self):
        assert list(HAPPY_PALETTE) == [Color(255, 223, 0)]

    def test_parse_keeps_order(self):
        palette = ReferencePalette.parse("#FFDF00;255,165,0")
        assert palette.colors == (Color(255, 223, 0), Color(255, 165, 0))
        assert len(palette) == 2

    def test_empty_palette_rejected(self):
        with pytest.raises(ConfigurationError):
            ReferencePalette(())

    def test_is_immutable(self):
        with pytest.raises(AttributeError):
            HAPPY_PALETTE.colors = ()


class TestVerdict:

    def test_pass(self):
        verdict = ValidationVerdict.ok(Stage.CIRCLE)
        assert verdict.passed
        assert verdict.reason is None

    def test_failures_carry_details(self):
        assert ValidationVerdict.bad_dimensions(100, 200).size == (100, 200)
        assert ValidationVerdict.pixel_outside_circle(3, 4).pixel == (3, 4)
        assert ValidationVerdict.mood_mismatch(0.25).coverage == 0.25

    @pytest.mark.parametrize("verdict", [
        ValidationVerdict.ok(Stage.DIMENSIONS),
        ValidationVerdict.ok(Stage.MOOD, coverage=0.9),
        ValidationVerdict.bad_dimensions(1, 1),
        ValidationVerdict.pixel_outside_circle(0, 0),
        ValidationVerdict.mood_mismatch(0.1),
    ])
    def test_every_verdict_has_a_message(self, verdict):
        assert verdict.message

    def test_messages_distinguish_stages(self):
        messages = {
            ValidationVerdict.ok(Stage.DIMENSIONS).message,
            ValidationVerdict.ok(Stage.CIRCLE).message,
            ValidationVerdict.ok(Stage.MOOD).message,
        }
        assert len(messages) == 3

    def test_report_final_verdict(self):
        report = PipelineReport((
            ValidationVerdict.ok(Stage.DIMENSIONS),
            ValidationVerdict.pixel_outside_circle(0, 0),
        ))
        assert not report.passed
        assert report.verdict.reason is FailureReason.PIXEL_OUTSIDE_CIRCLE
        assert len(report.messages) == 2
