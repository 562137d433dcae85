"""Tests for display-to-image coordinate mapping."""

import pytest
from PySide6.QtCore import QPointF

from cropdesk.crop.mapper import CoordinateMapper
from cropdesk.errors import MissingSurfaceContextError


def test_scale_is_native_over_display():
    mapper = CoordinateMapper((500, 400), (1000, 800))
    assert mapper.is_valid()
    assert mapper.scale() == (2.0, 2.0)


def test_map_point_and_back():
    mapper = CoordinateMapper((250, 400), (1000, 800))
    mapped = mapper.map_point(QPointF(10, 10))
    assert (mapped.x(), mapped.y()) == (40.0, 20.0)

    display = mapper.map_to_display(40.0, 20.0)
    assert (display.x(), display.y()) == pytest.approx((10.0, 10.0))


def test_map_delta_scales_per_axis():
    mapper = CoordinateMapper((500, 200), (1000, 800))
    delta = mapper.map_delta(QPointF(-400, -10))
    assert (delta.x(), delta.y()) == (-800.0, -40.0)


@pytest.mark.parametrize(
    "display, native",
    [((0, 400), (1000, 800)), ((500, 0), (1000, 800)), ((500, 400), (0, 0)), ((float("nan"), 1), (1, 1))],
)
def test_degenerate_sizes_are_invalid(display, native):
    mapper = CoordinateMapper(display, native)
    assert not mapper.is_valid()
    with pytest.raises(MissingSurfaceContextError):
        mapper.map_point(QPointF(1, 1))


def test_relative_to_surface_subtracts_origin():
    pos = CoordinateMapper.relative_to_surface(QPointF(130, 75), QPointF(30, 25))
    assert (pos.x(), pos.y()) == (100.0, 50.0)
