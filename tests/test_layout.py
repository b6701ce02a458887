"""
Tests for chest layouts and job options
"""
import pytest
from pydantic import ValidationError

from chestconverter.schema import (
    BoxSpec,
    ChestLayout,
    ConversionOptions,
    DOUBLE_DEBUG_LAYOUT,
    DOUBLE_LAYOUT,
    SINGLE_LAYOUT,
)


def box_named(layout, name):
    return next(b for b in layout.boxes if b.name == name)


class TestBoxSpec:
    """Test BoxSpec validation"""

    def test_defaults_to_corner(self):
        spec = BoxSpec(name="latch", width=2, height=4, length=1)
        assert spec.origin == (0, 0)
        assert (spec.u, spec.v) == (0, 0)

    def test_rejects_negative_size(self):
        with pytest.raises(ValidationError):
            BoxSpec(name="bad", width=-1, height=4, length=1)

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            BoxSpec(name="bad", width=1, height=1, length=1, depth=3)

    def test_frozen(self):
        spec = BoxSpec(name="lid", width=14, height=5, length=14)
        with pytest.raises(ValidationError):
            spec.width = 3


class TestChestLayouts:
    """The fixed chest geometry"""

    def test_blit_order(self):
        assert [b.name for b in SINGLE_LAYOUT.boxes] == ["body", "lid", "latch"]
        assert [b.name for b in DOUBLE_LAYOUT.boxes] == ["body", "lid", "latch"]

    def test_single_body(self):
        body = box_named(SINGLE_LAYOUT, "body")
        assert (body.width, body.height, body.length) == (14, 10, 14)
        assert body.origin == (0, 19)

    @pytest.mark.parametrize("name", ["body", "lid"])
    def test_double_halves_are_one_pixel_wider(self, name):
        single = box_named(SINGLE_LAYOUT, name)
        double = box_named(DOUBLE_LAYOUT, name)
        assert double.width == 2 * (single.width + 1)
        assert (double.height, double.length, double.origin) == (single.height, single.length, single.origin)

    def test_debug_layout_uses_half_width(self):
        assert box_named(DOUBLE_DEBUG_LAYOUT, "body").width == box_named(DOUBLE_LAYOUT, "body").width // 2

    def test_latch_is_shared(self):
        assert box_named(SINGLE_LAYOUT, "latch") == box_named(DOUBLE_LAYOUT, "latch")

    def test_layout_needs_boxes(self):
        with pytest.raises(ValidationError):
            ChestLayout(boxes=[])


class TestConversionOptions:
    """Test job switches"""

    def test_defaults_off(self):
        options = ConversionOptions()
        assert options.flip_single is False
        assert options.debug is False

    def test_rejects_unknown_switch(self):
        with pytest.raises(ValidationError):
            ConversionOptions(flip_double=True)
