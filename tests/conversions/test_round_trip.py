from ..samples import interior_rgb
from prismatica.config import ConversionConfig
from prismatica.conversions import convert, np_convert
from prismatica.types.color_types import ALL_SPACES, HUE_INDEX
import numpy as np
import pytest


rgb_tolerance = 1e-6
hub_tolerance = 1e-6

SPOKES = sorted(ALL_SPACES - {"rgb"})


@pytest.mark.parametrize("space", SPOKES)
def test_round_trip_rgb(space):
    for rgb in interior_rgb:
        there = convert(rgb, "rgb", space)
        r_out, g_out, b_out = convert(there, space, "rgb")

        assert abs(rgb[0] - r_out) < rgb_tolerance
        assert abs(rgb[1] - g_out) < rgb_tolerance
        assert abs(rgb[2] - b_out) < rgb_tolerance


@pytest.mark.parametrize("space", SPOKES)
def test_round_trip_rgb_numpy(space):
    the_matrix = np.array(interior_rgb)
    there = np_convert(the_matrix, "rgb", space)
    back = np_convert(there, space, "rgb")
    assert np.allclose(back, the_matrix, atol=rgb_tolerance)


@pytest.mark.parametrize("space", ["hsl", "hwb", "hsi", "ycbcr", "luv", "lchab", "lms", "xyy"])
def test_round_trip_across_hubs(space):
    for rgb in interior_rgb:
        hsv = convert(rgb, "rgb", "hsv")
        back = convert(convert(hsv, "hsv", space), space, "hsv")
        assert back == pytest.approx(hsv, abs=hub_tolerance)


@pytest.mark.parametrize("working_space", ["adobe_rgb", "display_p3", "rec2020", "prophoto_rgb", "cie_rgb"])
def test_round_trip_other_working_spaces(working_space):
    cfg = ConversionConfig(working_space=working_space)
    for rgb in interior_rgb:
        for space in ("lab", "hsv", "xyy"):
            there = convert(rgb, "rgb", space, config=cfg)
            assert convert(there, space, "rgb", config=cfg) == pytest.approx(rgb, abs=rgb_tolerance)


def test_round_trip_through_adaptation():
    d50 = ConversionConfig(white_point="d50")
    for rgb in interior_rgb:
        lab = convert(rgb, "rgb", "lab", target_config=d50)
        back = convert(lab, "lab", "rgb", config=d50, target_config=ConversionConfig())
        assert back == pytest.approx(rgb, abs=rgb_tolerance)


@pytest.mark.parametrize("space", ["hsv", "hsl", "hsi", "ehsi", "hwb"])
def test_achromatic_hue_is_zero(space):
    for v in (0.0, 0.2, 0.5, 1.0):
        h, *_ = convert((v, v, v), "rgb", space)
        assert h == 0.0
    for v in (0.2, 0.5):
        _, second, third = convert((v, v, v), "rgb", space)
        if space == "hwb":
            assert (second, third) == pytest.approx((v, 1.0 - v), abs=1e-12)
        else:
            assert second == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("space", ["lchab", "lchuv"])
def test_achromatic_has_no_chroma(space):
    for v in (0.2, 0.5, 1.0):
        lightness, chroma, hue = convert((v, v, v), "rgb", space)
        assert chroma < 1e-6
        assert 0.0 <= hue < 360.0


def test_white_and_black():
    assert convert((1.0, 1.0, 1.0), "rgb", "lab") == pytest.approx((100.0, 0.0, 0.0), abs=1e-6)
    assert convert((1.0, 1.0, 1.0), "rgb", "luv") == pytest.approx((100.0, 0.0, 0.0), abs=1e-6)
    assert convert((0.0, 0.0, 0.0), "rgb", "hsv") == (0.0, 0.0, 0.0)
    assert convert((0.0, 0.0, 0.0), "rgb", "lab") == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)
    assert convert((0.0, 0.0, 0.0), "rgb", "xyy") == (0.0, 0.0, 0.0)
    assert convert((0.0, 0.0, 0.0), "rgb", "rgi") == (0.0, 0.0, 0.0)


def test_hue_spaces_stay_in_range():
    the_matrix = np.random.default_rng(21).random((200, 3))
    for space, index in HUE_INDEX.items():
        out = np_convert(the_matrix, "rgb", space)
        assert np.all((out[:, index] >= 0.0) & (out[:, index] < 360.0))


@pytest.mark.parametrize("via, a, c", [("rgb", "hsv", "hsl"), ("rgb", "hsl", "hsv"), ("rgb", "hsv", "hwb"),
                                        ("xyz", "lab", "lchab"), ("xyz", "luv", "lchuv"), ("xyz", "lchab", "lab")])
def test_direct_edge_matches_hub(via, a, c):
    for rgb in interior_rgb:
        start = convert(rgb, "rgb", a)
        direct = convert(start, a, c)
        composed = convert(convert(start, a, via), via, c)
        assert direct == pytest.approx(composed, abs=hub_tolerance)
