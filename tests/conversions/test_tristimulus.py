import numpy as np
import pytest

from prismatica.conversions.tristimulus import (
    decode_rgb,
    encode_rgb,
    lms_to_xyz,
    np_lms_to_xyz,
    np_rgb_to_xyz,
    np_xyy_to_xyz,
    np_xyz_to_lms,
    np_xyz_to_rgb,
    np_xyz_to_xyy,
    rgb_to_xyz,
    xyy_to_xyz,
    xyz_to_lms,
    xyz_to_rgb,
    xyz_to_xyy,
)
from prismatica.white_points import D50, D65
from prismatica.working_spaces import WORKING_SPACES
from ..samples import samples_srgb_xyz


def test_srgb_to_xyz_samples():
    for rgb, expected in samples_srgb_xyz.items():
        linear = decode_rgb(*rgb, "srgb")
        assert rgb_to_xyz(*linear, "srgb") == pytest.approx(expected, abs=1e-4)


def test_srgb_white_is_d65():
    assert rgb_to_xyz(1.0, 1.0, 1.0, "srgb") == pytest.approx(D65.xyz, abs=1e-12)
    assert rgb_to_xyz(1.0, 1.0, 1.0, "prophoto_rgb") == pytest.approx(D50.xyz, abs=1e-12)


def test_rgb_xyz_round_trip_every_working_space():
    rgb = (0.2, 0.5, 0.8)
    for name, ws in WORKING_SPACES.items():
        xyz = rgb_to_xyz(*rgb, ws)
        assert xyz_to_rgb(*xyz, name) == pytest.approx(rgb, abs=1e-9)


def test_transfer_round_trip():
    rgb = (0.01, 0.5, 0.99)
    for ws in WORKING_SPACES.values():
        assert encode_rgb(*decode_rgb(*rgb, ws), ws) == pytest.approx(rgb, abs=1e-12)


def test_out_of_gamut_is_not_clamped():
    r, g, b = xyz_to_rgb(0.1, 0.8, 0.1, "srgb")
    assert min(r, g, b) < 0.0


def test_numpy_rgb_xyz():
    rgb = np.random.default_rng(11).random((5, 4, 3))
    xyz = np_rgb_to_xyz(rgb[..., 0], rgb[..., 1], rgb[..., 2], "srgb")
    assert xyz.shape == (5, 4, 3)
    assert np.allclose(xyz[2, 1], rgb_to_xyz(*rgb[2, 1].tolist(), "srgb"))
    back = np_xyz_to_rgb(xyz[..., 0], xyz[..., 1], xyz[..., 2], "srgb")
    assert np.allclose(back, rgb)


def test_xyy():
    x, y, luminance = xyz_to_xyy(*D65.xyz)
    assert (x, y) == pytest.approx(D65.xy, abs=1e-4)
    assert luminance == 1.0
    assert xyy_to_xyz(x, y, luminance) == pytest.approx(D65.xyz, abs=1e-12)


def test_xyy_black():
    assert xyz_to_xyy(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
    assert xyy_to_xyz(0.3, 0.0, 0.5) == (0.0, 0.0, 0.0)
    out = np_xyz_to_xyy(np.array([0.0, 0.5]), np.array([0.0, 0.5]), np.array([0.0, 0.5]))
    assert np.allclose(out, [[0.0, 0.0, 0.0], [1 / 3, 1 / 3, 0.5]])
    back = np_xyy_to_xyz(out[..., 0], out[..., 1], out[..., 2])
    assert np.allclose(back, [[0.0, 0.0, 0.0], [0.5, 0.5, 0.5]])


@pytest.mark.parametrize("model", ["bradford", "von_kries", "hpe", "cat02", "cat97s"])
def test_lms_round_trip(model):
    xyz = (0.3, 0.4, 0.5)
    assert lms_to_xyz(*xyz_to_lms(*xyz, model), model) == pytest.approx(xyz, abs=1e-12)
    arr = np.array([xyz, D65.xyz])
    lms = np_xyz_to_lms(arr[..., 0], arr[..., 1], arr[..., 2], model)
    assert np.allclose(np_lms_to_xyz(lms[..., 0], lms[..., 1], lms[..., 2], model), arr)


def test_von_kries_d65_is_balanced():
    # Hunt-Pointer-Estevez normalized to D65 maps the D65 white to equal cone responses
    l, m, s = xyz_to_lms(*D65.xyz, "von_kries")
    assert l == pytest.approx(m, abs=1e-3)
    assert m == pytest.approx(s, abs=1e-3)


def test_unknown_lms_model():
    with pytest.raises(ValueError):
        xyz_to_lms(0.3, 0.4, 0.5, "cone9000")
