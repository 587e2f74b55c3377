from prismatica.colors import (
    ColorHSI,
    ColorHSV,
    ColorLab,
    ColorLChab,
    ColorLMS,
    ColorRGB,
    ColorRGBA,
    ColorXYY,
    ColorXYZ,
    ColorYCbCr,
)
from prismatica.errors import GamutWarning, ParameterMismatchError
from prismatica.white_points import D50, D65, E
from ..samples import samples_rgb_hsv, samples_srgb_lab, samples_rgb_ycbcr_jpeg
import numpy as np
import pytest
import warnings


def test_class_conversion_rgb_to_hsv():
    for rgb, hsv_expected in samples_rgb_hsv.items():
        hsv = ColorRGB(rgb).convert("hsv")
        assert isinstance(hsv, ColorHSV)
        assert hsv.value == pytest.approx(hsv_expected, abs=1e-9)


def test_class_conversion_rgb_to_lab():
    for rgb, lab_expected in samples_srgb_lab.items():
        lab = ColorRGB(rgb).convert("lab")
        assert isinstance(lab, ColorLab)
        assert lab.value == pytest.approx(lab_expected, abs=1e-2)
        assert lab.params["white_point"] is D65


def test_class_conversion_rgb_to_ycbcr():
    for rgb, expected in samples_rgb_ycbcr_jpeg.items():
        ycc = ColorRGB(rgb).convert("ycbcr")
        assert isinstance(ycc, ColorYCbCr)
        assert ycc.value == pytest.approx(expected, abs=1e-6)
    bt709 = ColorRGB((1.0, 0.0, 0.0)).convert("ycbcr", ycbcr_model="bt709")
    assert bt709.y == pytest.approx(0.2126)


def test_convert_to_same_space_is_a_copy():
    rgb = ColorRGB((0.2, 0.4, 0.6))
    same = rgb.convert()
    assert same == rgb
    assert same is not rgb


def test_working_space_white_is_inherited():
    lab = ColorRGB((0.5, 0.5, 0.5), working_space="prophoto_rgb").convert("lab")
    assert lab.params["white_point"] is D50
    assert lab.a == pytest.approx(0.0, abs=1e-9)
    assert lab.b == pytest.approx(0.0, abs=1e-9)
    assert ColorRGB((0.1, 0.2, 0.3), working_space="cie_rgb").convert("xyz").params["white_point"] is E


def test_shared_params_are_inherited():
    lab = ColorLab((50.0, 20.0, -10.0), white_point="d50")
    assert lab.convert("lchab").params["white_point"] is D50
    assert lab.convert("luv").params["white_point"] is D50
    hsv = ColorRGB((0.1, 0.2, 0.3), working_space="display_p3").convert("hsv")
    assert hsv.params["working_space"].name == "display_p3"


def test_explicit_white_adapts():
    white = ColorRGB((1.0, 1.0, 1.0))
    lab_d50 = white.convert("lab", white_point="d50")
    assert lab_d50.params["white_point"] is D50
    assert lab_d50.value == pytest.approx((100.0, 0.0, 0.0), abs=1e-6)
    xyz = white.convert("xyz", white_point="d50")
    assert xyz.value == pytest.approx(D50.xyz, abs=1e-6)


def test_adapted_round_trip():
    rgb = ColorRGB((0.3, 0.6, 0.2))
    lab = rgb.convert("lab", white_point="d50", adaptation="cat02")
    back = lab.convert("rgb", adaptation="cat02")
    assert back.isclose(rgb)


def test_adaptation_disabled_raises():
    lab = ColorLab((50.0, 10.0, 10.0), white_point="d50")
    with pytest.raises(ParameterMismatchError):
        lab.convert("rgb", adaptation=None)
    with pytest.raises(ParameterMismatchError):
        ColorRGB((0.5, 0.5, 0.5)).convert("lab", white_point="d50", adaptation=None)
    # nothing to adapt
    assert ColorRGB((0.5, 0.5, 0.5)).convert("lab", adaptation=None).params["white_point"] is D65


def test_unknown_target_parameter():
    with pytest.raises(TypeError):
        ColorRGB((0.5, 0.5, 0.5)).convert("hsv", white_point="d50")
    with pytest.raises(ValueError):
        ColorRGB((0.5, 0.5, 0.5)).convert("cmyk")


def test_gamut_warning_and_clamp():
    with pytest.warns(GamutWarning):
        rgb = ColorXYZ((0.1, 0.8, 0.1)).convert("rgb")
    assert all(0.0 <= c <= 1.0 for c in rgb.value)

    with pytest.warns(GamutWarning):
        srgb = ColorRGB((0.0, 1.0, 0.0), working_space="display_p3").convert("rgb", working_space="srgb")
    assert srgb.value[0] == 0.0


def test_no_warning_inside_gamut():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        ColorRGB((0.2, 0.4, 0.6)).convert("lab").convert("rgb")
        ColorRGB((1.0, 0.0, 0.0)).convert("ycbcr")
        ColorRGB((0.0, 1.0, 0.0)).convert("rgb", working_space="display_p3")


def test_chromaticity_targets_are_projected():
    with pytest.warns(GamutWarning):
        rgi = ColorLab((50.0, 80.0, 0.0)).convert("rgi")
    r, g, i = rgi.value
    assert 0.0 <= r <= 1.0 and 0.0 <= g <= 1.0
    assert r + g <= 1.0 + 1e-12

    with pytest.warns(GamutWarning):
        xyy = ColorXYZ((-0.1, 0.5, 0.2)).convert("xyy")
    assert xyy.x == 0.0
    assert xyy.Y == pytest.approx(0.5)

    with pytest.warns(GamutWarning):
        edge = ColorXYZ((0.9, 0.5, -0.5)).convert("xyy")
    assert edge.x + edge.y == pytest.approx(1.0)


def test_chromaticity_targets_inside_gamut_do_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        rgi = ColorRGB((0.2, 0.4, 0.6)).convert("rgi")
        xyy = ColorRGB((0.2, 0.4, 0.6)).convert("xyy")
    assert rgi.value[:2] == pytest.approx((1.0 / 6.0, 1.0 / 3.0))
    assert xyy.x + xyy.y < 1.0


def test_hsi_gamut_modes():
    hsi = ColorHSI((150.0, 1.0, 1.0))
    with pytest.warns(GamutWarning):
        preserved = hsi.convert("rgb")
    assert preserved.value == pytest.approx((0.0, 1.0, 1.0))
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        rescaled = hsi.convert("rgb", gamut_mode="rescale")
    assert rescaled.value == pytest.approx((0.0, 1.0, 0.5))


def test_alpha_survives_conversion():
    hsva = ColorRGBA((1.0, 0.0, 0.0, 0.4)).convert("hsva")
    assert hsva.value == pytest.approx((0.0, 1.0, 1.0, 0.4))
    laba = ColorRGBA((1.0, 1.0, 1.0, 0.25)).convert("laba")
    assert laba.alpha == 0.25
    opaque = ColorRGB((1.0, 0.0, 0.0)).convert("rgba")
    assert opaque.alpha == 1.0


def test_array_conversion():
    arr = np.random.default_rng(17).random((3, 4, 3))
    lab = ColorRGB(arr).convert("lab")
    assert lab.is_array
    assert lab.shape == (3, 4, 3)
    one = ColorRGB(tuple(arr[1, 2].tolist())).convert("lab")
    assert lab.value[1, 2] == pytest.approx(one.value)
    back = lab.convert("rgb")
    assert np.allclose(back.value, arr, atol=1e-6)


def test_chromaticity_and_cone_spaces():
    xyy = ColorRGB((1.0, 1.0, 1.0)).convert("xyy")
    assert isinstance(xyy, ColorXYY)
    assert (xyy.x, xyy.y) == pytest.approx(D65.xy, abs=1e-4)
    lms = ColorRGB((0.4, 0.5, 0.6)).convert("lms", lms_model="hpe")
    assert isinstance(lms, ColorLMS)
    assert lms.params["lms_model"] == "hpe"
    assert lms.convert("rgb").isclose(ColorRGB((0.4, 0.5, 0.6)))


def test_lch_of_gray_keeps_valid_hue():
    lch = ColorRGB((0.5, 0.5, 0.5)).convert("lchab")
    assert isinstance(lch, ColorLChab)
    assert lch.c == pytest.approx(0.0, abs=1e-6)
    assert 0.0 <= lch.h < 360.0
