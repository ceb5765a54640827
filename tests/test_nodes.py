"""Tests for the filter kernels in rt.nodes."""

import math

import cv2
import numpy as np
import pytest

from lomofilter.rt.nodes import (
    RED_CHANNEL,
    apply_channel_lut,
    apply_halo,
    effective_steepness,
    halo_mask,
    halo_pixel_radius,
    lut_from_steepness,
)


def _expected_entry(i, s):
    x = i / 256
    return min(255, max(0, round(256 * (1 / (1 + math.exp(-((x - 0.5) / (s / 100))))))))


@pytest.mark.parametrize("s", range(8, 21))
def test_lut_shape_range_and_monotonic(s):
    lut = lut_from_steepness(s)
    assert lut.shape == (256,)
    assert lut.dtype == np.uint8
    assert int(lut.min()) >= 0 and int(lut.max()) <= 255
    assert np.all(np.diff(lut.astype(int)) >= 0)


@pytest.mark.parametrize("s", range(8, 21))
def test_lut_midpoint_is_fixed(s):
    assert lut_from_steepness(s)[128] == 128


@pytest.mark.parametrize("s", [8, 10, 15, 20])
def test_lut_matches_logistic_formula(s):
    lut = lut_from_steepness(s)
    # away from .5 ties python's round and numpy's rint agree
    for i in (0, 1, 50, 100, 127, 129, 200, 254, 255):
        assert lut[i] == _expected_entry(i, s)


@pytest.mark.parametrize("s", [-3, 0, 1, 5, 7])
def test_lut_floors_low_steepness_to_eight(s):
    np.testing.assert_array_equal(lut_from_steepness(s), lut_from_steepness(8))


def test_effective_steepness_caps_range():
    assert effective_steepness(0) == 8
    assert effective_steepness(12) == 12
    assert effective_steepness(25) == 20


def test_smaller_steepness_gives_stronger_contrast():
    steep = lut_from_steepness(8)
    shallow = lut_from_steepness(20)
    assert steep[64] < shallow[64]
    assert steep[192] > shallow[192]


def test_channel_lut_only_touches_red_channel():
    rng = np.random.default_rng(7)
    img = rng.integers(0, 256, size=(9, 13, 3), dtype=np.uint8)
    before = img.copy()
    lut = lut_from_steepness(10)

    out = apply_channel_lut(img, lut)

    assert out.shape == img.shape
    assert out.dtype == np.uint8
    np.testing.assert_array_equal(out[..., 0], img[..., 0])
    np.testing.assert_array_equal(out[..., 1], img[..., 1])
    np.testing.assert_array_equal(out[..., RED_CHANNEL], lut[img[..., RED_CHANNEL]])
    np.testing.assert_array_equal(img, before)


def test_channel_lut_rejects_grayscale():
    with pytest.raises(ValueError):
        apply_channel_lut(np.zeros((4, 4), dtype=np.uint8), lut_from_steepness(10))


@pytest.mark.parametrize("n", [10, 11, 64, 101])
def test_full_radius_is_half_the_side(n):
    assert halo_pixel_radius(n, n, 100) == n // 2


def test_pixel_radius_uses_shorter_side_and_floors_to_one():
    assert halo_pixel_radius(300, 100, 100) == 50
    assert halo_pixel_radius(300, 100, 50) == 25
    assert halo_pixel_radius(300, 100, 0) == 1
    assert halo_pixel_radius(3, 3, 10) == 1


def test_mask_values_and_shape():
    mask = halo_mask(40, 30, halo_pixel_radius(40, 30, 60))
    assert mask.shape == (30, 40, 3)
    assert mask.dtype == np.float32
    assert float(mask.min()) >= 0.5 - 1e-6
    assert float(mask.max()) <= 1.0 + 1e-6


@pytest.mark.parametrize("pct", [0, 20, 50, 100])
def test_mask_centre_brighter_than_corners(pct):
    w, h = 41, 31
    mask = halo_mask(w, h, halo_pixel_radius(w, h, pct))
    centre = mask[h // 2, w // 2, 0]
    for y, x in ((0, 0), (0, w - 1), (h - 1, 0), (h - 1, w - 1)):
        assert centre >= mask[y, x, 0]


@pytest.mark.parametrize("pct", [10, 30, 45, 100])
def test_mask_symmetric_under_half_turn_for_odd_sizes(pct):
    w, h = 21, 15
    mask = halo_mask(w, h, halo_pixel_radius(w, h, pct))
    np.testing.assert_allclose(mask, np.rot90(mask, 2), atol=1e-5)


def test_mask_channels_are_identical():
    mask = halo_mask(25, 25, 6)
    np.testing.assert_array_equal(mask[..., 0], mask[..., 1])
    np.testing.assert_array_equal(mask[..., 0], mask[..., 2])


def test_halo_never_brightens():
    rng = np.random.default_rng(3)
    img = rng.integers(0, 256, size=(33, 47, 3), dtype=np.uint8)
    mask = halo_mask(47, 33, halo_pixel_radius(47, 33, 70))

    out = apply_halo(img, mask)

    assert out.dtype == np.uint8
    assert np.all(out <= img)


def test_halo_keeps_pixels_under_full_mask():
    rng = np.random.default_rng(11)
    img = rng.integers(0, 256, size=(8, 8, 3), dtype=np.uint8)
    mask = np.full((8, 8, 3), 0.5, dtype=np.float32)
    mask[2:6, 2:6] = 1.0

    out = apply_halo(img, mask)

    np.testing.assert_array_equal(out[2:6, 2:6], img[2:6, 2:6])
    expected_edge = np.rint(img[0, 0].astype(np.float32) * 0.5)
    np.testing.assert_array_equal(out[0, 0], expected_edge.astype(np.uint8))


def test_halo_does_not_mutate_input():
    img = np.full((6, 6, 3), 200, dtype=np.uint8)
    apply_halo(img, halo_mask(6, 6, 1))
    assert np.all(img == 200)


def test_halo_rejects_mismatched_mask():
    img = np.zeros((6, 6, 3), dtype=np.uint8)
    with pytest.raises(ValueError):
        apply_halo(img, halo_mask(7, 6, 2))


@pytest.mark.parametrize("radius", [2, 4, 6])
def test_even_radius_mask_stays_symmetric(radius):
    mask = halo_mask(19, 17, radius)
    np.testing.assert_allclose(mask, np.rot90(mask, 2), atol=1e-5)


def test_even_radius_blurs_like_next_odd_kernel():
    disc_only = np.full((17, 19, 3), 0.5, dtype=np.float32)
    yy, xx = np.ogrid[0:17, 0:19]
    disc_only[(xx - 9) ** 2 + (yy - 8) ** 2 <= 16] = 1.0
    np.testing.assert_allclose(halo_mask(19, 17, 4), cv2.blur(disc_only, (5, 5)), atol=1e-6)
