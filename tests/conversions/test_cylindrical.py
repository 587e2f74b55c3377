import numpy as np
import pytest

from prismatica.conversions.cylindrical import (
    hsl_to_hsv,
    hsl_to_rgb,
    hsv_to_hsl,
    hsv_to_hwb,
    hsv_to_rgb,
    hwb_to_hsv,
    hwb_to_rgb,
    np_hsl_to_rgb,
    np_hsv_to_hsl,
    np_hsv_to_rgb,
    np_hwb_to_rgb,
    np_rgb_to_hsl,
    np_rgb_to_hsv,
    np_rgb_to_hwb,
    rescale_wb,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_hwb,
)
from ..samples import samples_rgb_hsl, samples_rgb_hsv, samples_rgb_hwb

tolerance = 1e-9


def test_rgb_to_hsv_samples():
    for (r, g, b), expected in samples_rgb_hsv.items():
        assert rgb_to_hsv(r, g, b) == pytest.approx(expected, abs=tolerance)


def test_hsv_to_rgb_samples():
    for rgb, (h, s, v) in samples_rgb_hsv.items():
        assert hsv_to_rgb(h, s, v) == pytest.approx(rgb, abs=tolerance)


def test_rgb_to_hsl_samples():
    for (r, g, b), expected in samples_rgb_hsl.items():
        assert rgb_to_hsl(r, g, b) == pytest.approx(expected, abs=tolerance)


def test_hsl_to_rgb_samples():
    for rgb, (h, s, l) in samples_rgb_hsl.items():
        assert hsl_to_rgb(h, s, l) == pytest.approx(rgb, abs=tolerance)


def test_rgb_to_hwb_samples():
    for (r, g, b), expected in samples_rgb_hwb.items():
        assert rgb_to_hwb(r, g, b) == pytest.approx(expected, abs=tolerance)
        assert hwb_to_rgb(*expected) == pytest.approx((r, g, b), abs=tolerance)


def test_black_is_zero_hsv():
    assert rgb_to_hsv(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)


def test_achromatic_round_trip_is_exact():
    for level in (0.0, 0.1, 0.37, 0.5, 0.999, 1.0):
        h, s, v = rgb_to_hsv(level, level, level)
        assert (h, s) == (0.0, 0.0)
        assert hsv_to_rgb(h, s, v) == (level, level, level)
        assert hsl_to_rgb(*rgb_to_hsl(level, level, level)) == (level, level, level)


def test_primaries_are_exact():
    assert hsv_to_rgb(120.0, 1.0, 1.0) == (0.0, 1.0, 0.0)
    assert hsv_to_rgb(360.0, 1.0, 1.0) == (1.0, 0.0, 0.0)
    assert hsl_to_rgb(240.0, 1.0, 0.5) == (0.0, 0.0, 1.0)


def test_hsv_hsl_direct():
    for rgb, hsv in samples_rgb_hsv.items():
        hsl = rgb_to_hsl(*rgb)
        assert hsv_to_hsl(*hsv) == pytest.approx(hsl, abs=tolerance)
        assert hsl_to_hsv(*hsl) == pytest.approx(hsv, abs=tolerance)


def test_hsv_hwb_direct():
    assert hsv_to_hwb(30.0, 1.0, 1.0) == (30.0, 0.0, 0.0)
    assert hsv_to_hwb(210.0, 2.0 / 3.0, 0.6) == pytest.approx((210.0, 0.2, 0.4))
    assert hwb_to_hsv(210.0, 0.2, 0.4) == pytest.approx((210.0, 2.0 / 3.0, 0.6))


def test_hwb_oversaturated_is_rescaled():
    assert rescale_wb(0.8, 0.6) == pytest.approx((0.8 / 1.4, 0.6 / 1.4))
    r, g, b = hwb_to_rgb(90.0, 0.8, 0.6)
    assert r == pytest.approx(g)
    assert g == pytest.approx(b)
    assert r == pytest.approx(0.8 / 1.4)


def test_numpy_matches_scalar():
    rgb = np.array(list(samples_rgb_hsv.keys()))
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    for np_func, func in (
        (np_rgb_to_hsv, rgb_to_hsv),
        (np_rgb_to_hsl, rgb_to_hsl),
        (np_rgb_to_hwb, rgb_to_hwb),
    ):
        expected = np.array([func(*c) for c in rgb.tolist()])
        assert np.allclose(np_func(r, g, b), expected, atol=tolerance)


def test_numpy_inverse_round_trip():
    rgb = np.random.default_rng(7).random((64, 3))
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    for forward, inverse in (
        (np_rgb_to_hsv, np_hsv_to_rgb),
        (np_rgb_to_hsl, np_hsl_to_rgb),
        (np_rgb_to_hwb, np_hwb_to_rgb),
    ):
        out = forward(r, g, b)
        back = inverse(out[..., 0], out[..., 1], out[..., 2])
        assert np.allclose(back, rgb, atol=1e-9)


def test_numpy_hsv_hsl_direct():
    hsv = np.array([[30.0, 1.0, 1.0], [210.0, 2.0 / 3.0, 0.6], [0.0, 0.0, 0.0]])
    hsl = np_hsv_to_hsl(hsv[..., 0], hsv[..., 1], hsv[..., 2])
    assert np.allclose(hsl, [[30.0, 1.0, 0.5], [210.0, 0.5, 0.4], [0.0, 0.0, 0.0]])


def test_float32_is_preserved():
    rgb = np.array([[0.2, 0.4, 0.6]], dtype=np.float32)
    out = np_rgb_to_hsv(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    assert out.dtype == np.float32
