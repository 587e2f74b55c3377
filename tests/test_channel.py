import math
import numpy as np
import pytest

from prismatica.channel import (
    channel_add,
    channel_divide,
    channel_scale,
    channel_subtract,
    clamp_channel,
    from_unit,
    hue_delta,
    lerp,
    lerp_hue,
    to_unit,
    wrap_hue,
)
from prismatica.errors import DomainError
from prismatica.types.format_type import FormatType


def test_to_unit_formats():
    assert to_unit(255, FormatType.INT) == 1.0
    assert to_unit(65535, FormatType.INT16) == 1.0
    assert to_unit(50.0, FormatType.PERCENTAGE) == 0.5
    assert to_unit(0.25, FormatType.FLOAT) == 0.25


def test_from_unit_rounds_and_saturates():
    assert from_unit(0.5, FormatType.INT) == 128
    assert from_unit(1.2, FormatType.INT) == 255
    assert from_unit(-0.1, FormatType.INT) == 0
    assert from_unit(1.0, FormatType.INT16) == 65535
    assert from_unit(0.25, FormatType.PERCENTAGE) == 25.0


def test_from_unit_array_dtype():
    out = from_unit(np.array([0.0, 0.5, 1.0]), FormatType.INT)
    assert out.dtype == np.uint8
    assert out.tolist() == [0, 128, 255]

    out = from_unit(np.array([0.0, 1.0]), FormatType.INT16)
    assert out.dtype == np.uint16


def test_quantizing_nan_raises():
    with pytest.raises(DomainError):
        from_unit(float("nan"), FormatType.INT)
    with pytest.raises(DomainError):
        from_unit(np.array([0.1, np.nan]), FormatType.INT16)


def test_float_from_unit_keeps_nan():
    assert math.isnan(from_unit(float("nan"), FormatType.FLOAT))


def test_channel_arithmetic_saturates_fixed_point():
    assert channel_add(200, 100, FormatType.INT) == 255
    assert channel_subtract(100, 200, FormatType.INT) == 0
    assert channel_scale(100, 2.0, FormatType.INT) == 200
    assert channel_divide(200, 2.0, FormatType.INT) == 100


def test_channel_arithmetic_float_is_unbounded():
    assert channel_add(0.75, 0.5) == pytest.approx(1.25)
    assert channel_subtract(0.25, 0.5) == pytest.approx(-0.25)


def test_channel_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        channel_divide(0.5, 0.0)


def test_clamp_channel():
    assert clamp_channel(1.5, 0.0, 1.0) == 1.0
    assert clamp_channel(-0.5, 0.0, 1.0) == 0.0
    assert math.isnan(clamp_channel(float("nan"), 0.0, 1.0))

    arr = clamp_channel(np.array([-1.0, 0.5, 2.0, np.nan]), 0.0, 1.0)
    assert arr[:3].tolist() == [0.0, 0.5, 1.0]
    assert np.isnan(arr[3])


def test_wrap_hue():
    assert wrap_hue(360.0) == 0.0
    assert wrap_hue(-30.0) == pytest.approx(330.0)
    assert wrap_hue(725.0) == pytest.approx(5.0)
    assert 0.0 <= wrap_hue(-1e-15) < 360.0
    assert math.isnan(wrap_hue(float("nan")))

    arr = wrap_hue(np.array([-90.0, 0.0, 360.0, 450.0]))
    assert np.allclose(arr, [270.0, 0.0, 0.0, 90.0])


def test_hue_delta_directions():
    assert hue_delta(350.0, 10.0, "shortest") == pytest.approx(20.0)
    assert hue_delta(10.0, 350.0, "shortest") == pytest.approx(-20.0)
    assert hue_delta(350.0, 10.0, "longest") == pytest.approx(-340.0)
    assert hue_delta(10.0, 350.0, "cw") == pytest.approx(340.0)
    assert hue_delta(350.0, 10.0, "ccw") == pytest.approx(-340.0)


def test_hue_delta_rejects_unknown_direction():
    with pytest.raises(ValueError):
        hue_delta(0.0, 90.0, "sideways")


def test_lerp_and_lerp_hue():
    assert lerp(0.0, 1.0, 0.25) == 0.25
    assert lerp_hue(350.0, 10.0, 0.5) == pytest.approx(0.0)
    assert lerp_hue(0.0, 90.0, 0.5) == pytest.approx(45.0)
    assert lerp_hue(0.0, 90.0, 0.5, "longest") == pytest.approx(225.0)

    out = lerp_hue(np.array([350.0, 0.0]), np.array([10.0, 90.0]), 0.5)
    assert np.allclose(out, [0.0, 45.0])
