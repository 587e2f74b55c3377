import numpy as np
import pytest

from prismatica.config import DEFAULT_CONFIG, ConversionConfig
from prismatica.errors import DomainError
from prismatica.types.color_types import OutOfGamutMode, split_alpha
from prismatica.white_points import D50, D65, WHITE_POINTS, get_white_point, white_point_from_xy
from prismatica.working_spaces import SRGB, WORKING_SPACES, get_working_space
from prismatica.ycbcr_models import YCBCR_MODELS, YCbCrModel, get_ycbcr_model


def test_white_point_lookup():
    assert get_white_point("D65") is D65
    assert get_white_point(D50) is D50
    assert get_white_point("d65/10") is WHITE_POINTS[10]["d65"]
    assert get_white_point("d65", observer=10) is WHITE_POINTS[10]["d65"]
    assert D65.xyz == (0.95047, 1.0, 1.08883)


def test_white_points_normalized_to_unit_luminance():
    for table in WHITE_POINTS.values():
        for white in table.values():
            assert white.xyz[1] == 1.0


def test_unknown_white_point():
    with pytest.raises(ValueError):
        get_white_point("d99")
    with pytest.raises(ValueError):
        get_white_point("d65", observer=5)


def test_white_point_from_xy():
    wp = white_point_from_xy(0.31271, 0.32902)
    assert np.allclose(wp.xyz, D65.xyz, atol=1e-4)
    with pytest.raises(ValueError):
        white_point_from_xy(0.3, 0.0)


def test_working_spaces():
    assert get_working_space("sRGB") is SRGB
    assert get_working_space("Adobe-RGB") is WORKING_SPACES["adobe_rgb"]
    assert WORKING_SPACES["prophoto_rgb"].white is D50
    for ws in WORKING_SPACES.values():
        assert np.allclose(ws.to_xyz @ ws.from_xyz, np.eye(3), atol=1e-9)
        assert not ws.to_xyz.flags.writeable
    with pytest.raises(ValueError):
        get_working_space("nope")


def test_ycbcr_models():
    assert get_ycbcr_model("rec709") is YCBCR_MODELS["bt709"]
    assert get_ycbcr_model("BT.2020") is YCBCR_MODELS["bt2020"]
    jpeg = YCBCR_MODELS["jpeg"]
    assert np.allclose(jpeg.forward[0], [0.299, 0.587, 0.114])
    assert np.allclose(jpeg.forward @ jpeg.inverse, np.eye(3))
    with pytest.raises(ValueError):
        get_ycbcr_model("ntsc2")


def test_invalid_luma_coefficients():
    with pytest.raises(DomainError):
        YCbCrModel.from_coefficients(0.6, 0.5)
    with pytest.raises(DomainError):
        YCbCrModel.from_coefficients(0.0, 0.1)


def test_config_resolution():
    cfg = ConversionConfig(working_space="prophoto_rgb")
    assert cfg.resolved_white_point() is D50
    assert DEFAULT_CONFIG.resolved_white_point() is D65
    assert ConversionConfig(white_point="d65/10").resolved_white_point() is WHITE_POINTS[10]["d65"]
    assert cfg.replace(white_point="d65").resolved_white_point() is D65
    assert ConversionConfig(gamut_mode="clip").gamut_mode is OutOfGamutMode.CLIP


def test_config_validation():
    with pytest.raises(ValueError):
        ConversionConfig(observer=4)
    with pytest.raises(ValueError):
        ConversionConfig(lms_model="nope").resolved_lms_model()
    with pytest.raises(ValueError):
        ConversionConfig(working_space="nope").resolved_working_space()


def test_split_alpha():
    assert split_alpha("rgba") == ("rgb", True)
    assert split_alpha("LAB") == ("lab", False)
    assert split_alpha("laba") == ("lab", True)
    with pytest.raises(ValueError):
        split_alpha("cmyk")
