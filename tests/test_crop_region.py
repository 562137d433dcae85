"""Tests for the pixel-space crop region model."""

import math

import pytest

from cropdesk.crop.model import CropRegion
from cropdesk.crop.utils import CropHandle
from cropdesk.errors import InvalidHandleError


def make_region(x, y, width, height):
    region = CropRegion()
    region.x, region.y, region.width, region.height = x, y, width, height
    return region


def test_new_region_is_zeroed():
    region = CropRegion()
    assert region.as_tuple() == (0.0, 0.0, 0.0, 0.0)
    assert region.is_empty()


def test_init_centered_matches_default_session_region():
    region = CropRegion()
    region.init_centered(1000, 800)
    assert region.as_tuple() == (100, 80, 800, 640)


@pytest.mark.parametrize(
    "image_w, image_h",
    [(1, 1), (7, 3), (51, 49), (333, 217), (1000, 800), (1919, 1081), (4032, 3024)],
)
def test_init_centered_is_contained_and_centred(image_w, image_h):
    region = CropRegion()
    region.init_centered(image_w, image_h)

    assert region.width == math.floor(0.8 * image_w)
    assert region.height == math.floor(0.8 * image_h)
    assert 0 <= region.x and region.x + region.width <= image_w
    assert 0 <= region.y and region.y + region.height <= image_h
    # Centre within one pixel of the true image centre.
    assert abs(region.x + region.width / 2 - image_w / 2) <= 1
    assert abs(region.y + region.height / 2 - image_h / 2) <= 1


@pytest.mark.parametrize("dx", [-5000.0, -37.5, 0.0, 12.25, 5000.0])
@pytest.mark.parametrize("dy", [-5000.0, -3.0, 0.0, 99.0, 5000.0])
def test_translate_never_leaves_image(dx, dy):
    region = make_region(100, 80, 800, 640)
    region.translate(dx, dy, 1000, 800)

    assert region.x >= 0 and region.y >= 0
    assert region.x + region.width <= 1000
    assert region.y + region.height <= 800
    assert (region.width, region.height) == (800, 640)


def test_translate_moves_by_delta_inside_bounds():
    region = make_region(100, 80, 800, 640)
    region.translate(20, 20, 1000, 800)
    assert region.as_tuple() == (120, 100, 800, 640)


def test_resize_from_handle_accepts_compass_names():
    region = make_region(100, 80, 800, 640)
    region.resize_from_handle("se", -100, -40, 1000, 800)
    assert region.as_tuple() == (100, 80, 700, 600)

    region.resize_from_handle(CropHandle.TOP_LEFT, 10, 10, 1000, 800)
    assert region.as_tuple() == (110, 90, 690, 590)


def test_resize_from_handle_rejects_unknown_handle():
    region = make_region(100, 80, 800, 640)
    with pytest.raises(InvalidHandleError):
        region.resize_from_handle("north", 10, 10, 1000, 800)
    with pytest.raises(InvalidHandleError):
        region.resize_from_handle(CropHandle.INSIDE, 10, 10, 1000, 800)
    assert region.as_tuple() == (100, 80, 800, 640)


def test_reset_and_reset_to_full():
    region = make_region(100, 80, 800, 640)
    region.reset_to_full(1000, 800)
    assert region.as_tuple() == (0, 0, 1000, 800)

    region.reset()
    assert region.as_tuple() == (0, 0, 0, 0)


def test_clamp_pulls_region_back_inside():
    region = make_region(-20, 900, 10, 5000)
    region.clamp(1000, 800)
    assert region.as_tuple() == (0, 0, 50, 800)


def test_clamp_uses_image_extent_when_smaller_than_minimum():
    region = make_region(0, 0, 5, 5)
    region.clamp(30, 20)
    assert region.as_tuple() == (0, 0, 30, 20)


def test_mapping_round_trip_clamps_to_image():
    region = make_region(100, 80, 800, 640)
    values = region.as_mapping()
    assert values == {"x": 100.0, "y": 80.0, "width": 800.0, "height": 640.0}

    other = CropRegion()
    other.set_from_mapping({"x": 900, "y": 0, "width": 400, "height": 100}, 1000, 800)
    assert other.as_tuple() == (600, 0, 400, 100)


def test_snapshot_restore_and_change_detection():
    region = make_region(100, 80, 800, 640)
    snapshot = region.snapshot()
    assert not region.has_changed(snapshot)

    region.translate(5, 0, 1000, 800)
    assert region.has_changed(snapshot)

    region.restore(snapshot)
    assert region.as_tuple() == (100, 80, 800, 640)


def test_to_pixel_box_rounds_edges():
    region = make_region(10.4, 20.6, 50.2, 60.1)
    assert region.to_pixel_box() == (10, 21, 61, 81)
