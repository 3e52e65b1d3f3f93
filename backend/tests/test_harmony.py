"""
Unit tests for the Color Harmony Engine

Tests hue-wheel arithmetic, channel scaling and the harmony generators to
ensure color theory rules are implemented correctly.
"""

import pytest

from tonal.services.colors.conversions import hex2hsv
from tonal.services.colors.harmony import (
    degrees, hue_separation, scale, lighten, darken, saturate, desaturate,
    algorithmic, complement, triadic, tetradic, pentadic
)


class TestHueRotation:
    """Test hue rotation mathematics."""

    def test_hue_wraparound(self):
        """Rotation past either end of the wheel wraps once."""
        assert degrees(350, 30) == 20
        assert degrees(10, -30) == 340

    def test_single_step_wrap_keeps_360(self):
        """The wrap is one correction, not a modulo; 360 is a valid result."""
        assert degrees(300, 60) == 360
        assert degrees(0, 0) == 0

    def test_hue_separation(self):
        """Separation is the shorter way around the wheel."""
        assert hue_separation(0, 180) == 180
        assert hue_separation(350, 10) == 20
        assert hue_separation(10, 350) == 20


class TestScale:
    """Test channel scaling and the convenience wrappers."""

    def test_lighten_moves_toward_max(self):
        """Lightening moves value toward 100 by a share of the remaining distance."""
        # value 50 -> 50 + (100 - 50) * 0.5 = 75
        assert lighten("#808080", 50) == "#bfbfbf"

    def test_darken_moves_down_by_remaining_distance(self):
        """Darkening subtracts the same share of the remaining distance."""
        # value 50 -> 50 + (100 - 50) * -0.5 = 25
        assert darken("#808080", 50) == "#404040"

    def test_wrappers_force_sign(self):
        """Wrappers ignore the sign of the amount they are given."""
        assert darken("#808080", -50) == darken("#808080", 50)
        assert lighten("#808080", -50) == lighten("#808080", 50)
        assert desaturate("#ff8080", -50) == desaturate("#ff8080", 50)
        assert saturate("#ff8080", -50) == saturate("#ff8080", 50)

    def test_percent_and_fraction_are_equivalent(self):
        """Amounts above 1 are read as percentages."""
        assert scale("#3498db", 25, "value") == scale("#3498db", 0.25, "value")

    def test_absolute_sets_channel(self):
        """Absolute mode sets the channel outright."""
        assert lighten("#ff0000", 0.2, absolute=True) == "#330000"

    def test_saturate_and_desaturate(self):
        """Saturation moves up and down on the saturation channel."""
        base_s = hex2hsv("#ff8080")[1]
        assert hex2hsv(saturate("#ff8080", 50))[1] > base_s
        assert hex2hsv(desaturate("#ff8080", 50))[1] < base_s

    def test_desaturate_fully_saturated_is_noop(self):
        """Relative scaling is proportional to the distance left to 100."""
        assert desaturate("#ff0000", 50) == "#ff0000"

    def test_malformed_hex_scales_black(self):
        """Malformed input is scaled as black."""
        assert lighten("not-a-color", 25) == lighten("#000000", 25)

    def test_unknown_channel(self):
        """Only hue, saturation and value can be scaled."""
        with pytest.raises(ValueError):
            scale("#ff0000", 0.5, "alpha")


class TestAlgorithmic:
    """Test the generic N-point generator."""

    def test_full_wheel_divides_by_count(self):
        """A full wheel spaces points scope/count apart."""
        assert algorithmic("#ff0000", count=4) == ["#ff0000", "#80ff00", "#00ffff", "#8000ff"]

    def test_bounded_arc_divides_by_count_minus_one(self):
        """A 180 degree arc of 4 points includes both endpoints, centered on the base."""
        assert algorithmic("#ff0000", count=4, scope=180) == ["#8000ff", "#ff0080", "#ff8000", "#80ff00"]

    def test_saturation_channel(self):
        """The generator can walk the saturation channel."""
        assert algorithmic("#ff0000", count=3, channel="saturation", scope=100) == [
            "#ffffff", "#ff8080", "#ff0000"
        ]

    def test_value_channel(self):
        """The generator can walk the value channel."""
        assert algorithmic("#ff0000", count=2, channel="value", scope=100) == ["#000000", "#ff0000"]

    def test_single_point_bounded_arc(self):
        """One point on a bounded arc is the base itself."""
        assert algorithmic("#ff0000", count=1, scope=180, rotation=180) == ["#80ff00"]

    def test_invalid_arguments(self):
        """Bad counts and channels are rejected."""
        with pytest.raises(ValueError):
            algorithmic("#ff0000", count=0)
        with pytest.raises(ValueError):
            algorithmic("#ff0000", channel="alpha")


class TestHarmonyPresets:
    """Test named harmony presets."""

    def test_triadic(self):
        """Triadic returns the base and two rotations."""
        assert triadic("#ff0000") == ["#ff0000", "#00ff00", "#0000ff"]

    def test_triadic_hues_are_120_apart(self):
        """Triadic hues are evenly spaced."""
        hues = [hex2hsv(c)[0] for c in triadic("#3498db")]
        assert len(hues) == 3
        for i in range(3):
            separation = hue_separation(hues[i], hues[(i + 1) % 3])
            assert abs(separation - 120) <= 2

    def test_tetradic(self):
        """Tetradic returns four points 90 degrees apart."""
        assert tetradic("#ff0000") == ["#ff0000", "#80ff00", "#00ffff", "#8000ff"]

    def test_pentadic(self):
        """Pentadic returns five points 72 degrees apart."""
        colors = pentadic("#ff0000")
        assert len(colors) == 5
        assert colors[0] == "#ff0000"
        hues = [hex2hsv(c)[0] for c in colors]
        for i in range(5):
            assert abs(hue_separation(hues[i], hues[(i + 1) % 5]) - 72) <= 2

    def test_complement(self):
        """The plain complement sits 180 degrees from the base."""
        assert complement("#ff0000") == ["#ff0000", "#00ffff"]

    def test_split_complement(self):
        """Split complement flanks the opposite hue."""
        assert complement("#ff0000", "split") == ["#80ff00", "#00ffff", "#8000ff"]

    def test_double_complement(self):
        """Double complement returns two complementary pairs."""
        assert complement("#ff0000", "double") == [
            "#80ff00", "#00ff40", "#00ffff", "#0040ff", "#8000ff"
        ]

    def test_unknown_complement_kind(self):
        """Unknown complement kinds raise ValueError."""
        with pytest.raises(ValueError):
            complement("#ff0000", "triple")
