"""Tests for Split enum and helpers."""

from dockarea.core.allowed_splits import AllowedSplits
from dockarea.core.split import Split, is_left_right, is_top_bottom


class TestSplitEnum:
    def test_four_splits(self):
        assert len(Split) == 4

    def test_values_are_strings(self):
        for split in Split:
            assert isinstance(split.value, str)

    def test_roundtrip_from_string(self):
        for split in Split:
            assert Split(split.value) is split


class TestAxisHelpers:
    def test_left_is_left_right(self):
        assert is_left_right(Split.LEFT) is True
        assert is_top_bottom(Split.LEFT) is False

    def test_right_is_left_right(self):
        assert is_left_right(Split.RIGHT) is True
        assert is_top_bottom(Split.RIGHT) is False

    def test_above_is_top_bottom(self):
        assert is_top_bottom(Split.ABOVE) is True
        assert is_left_right(Split.ABOVE) is False

    def test_below_is_top_bottom(self):
        assert is_top_bottom(Split.BELOW) is True
        assert is_left_right(Split.BELOW) is False


class TestAxisMasks:
    def test_axis_presets_follow_helpers(self):
        for split in Split:
            assert AllowedSplits.LEFT_RIGHT.allowed(split) is is_left_right(split)
            assert AllowedSplits.TOP_BOTTOM.allowed(split) is is_top_bottom(split)
