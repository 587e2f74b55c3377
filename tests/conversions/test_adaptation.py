import numpy as np
import pytest

from prismatica.adaptation import (
    ADAPTATION_METHODS,
    adaptation_matrix,
    chromatic_adapt,
    get_lms_matrix,
    np_chromatic_adapt,
)
from prismatica.white_points import D50, D65, E, WHITE_POINTS, get_white_point, white_point_from_xy
from ..samples import bradford_d65_to_d50


def test_bradford_d65_to_d50():
    assert np.allclose(adaptation_matrix(D65, D50), bradford_d65_to_d50, atol=1e-5)


@pytest.mark.parametrize("method", ADAPTATION_METHODS)
def test_maps_white_to_white(method):
    assert chromatic_adapt(*D65.xyz, D65, D50, method) == pytest.approx(D50.xyz, abs=1e-9)
    assert chromatic_adapt(*E.xyz, "e", "d65", method) == pytest.approx(D65.xyz, abs=1e-9)


@pytest.mark.parametrize("method", ADAPTATION_METHODS)
def test_round_trip(method):
    xyz = (0.3, 0.25, 0.6)
    there = chromatic_adapt(*xyz, "d65", "d50", method)
    assert chromatic_adapt(*there, "d50", "d65", method) == pytest.approx(xyz, abs=1e-12)


def test_identity_for_every_registered_white():
    xyz = (0.3, 0.25, 0.6)
    for table in WHITE_POINTS.values():
        for wp in table.values():
            assert chromatic_adapt(*xyz, wp, wp) == xyz


def test_same_white_is_exact_identity():
    xyz = (0.123456789, 0.5, 0.987654321)
    assert chromatic_adapt(*xyz, "d65", D65) == xyz
    out = np_chromatic_adapt(np.array([0.1, 0.2]), np.array([0.3, 0.4]), np.array([0.5, 0.6]), D50, "d50")
    assert np.array_equal(out, [[0.1, 0.3, 0.5], [0.2, 0.4, 0.6]])


def test_numpy_matches_scalar():
    xyz = np.random.default_rng(5).random((4, 6, 3))
    out = np_chromatic_adapt(xyz[..., 0], xyz[..., 1], xyz[..., 2], "d65", "d50", "cat02")
    assert out.shape == xyz.shape
    assert out[3, 2] == pytest.approx(chromatic_adapt(*xyz[3, 2].tolist(), "d65", "d50", "cat02"))


def test_matrix_is_cached_and_read_only():
    m = adaptation_matrix("d65", "d50")
    assert m is adaptation_matrix(D65, "D50")
    with pytest.raises(ValueError):
        m[0, 0] = 1.0


def test_unknown_method():
    with pytest.raises(ValueError):
        adaptation_matrix("d65", "d50", "sharp9")
    assert get_lms_matrix("Von-Kries") is get_lms_matrix("von_kries")


def test_white_point_lookup():
    assert get_white_point("D65") is D65
    assert get_white_point("d65/10").observer == 10
    assert get_white_point("d65", observer=10) is get_white_point("d65/10")
    assert get_white_point(D50) is D50
    with pytest.raises(ValueError):
        get_white_point("d93")
    with pytest.raises(ValueError):
        get_white_point("d65", observer=4)


def test_white_point_from_xy():
    wp = white_point_from_xy(0.31271, 0.32902, "my_d65")
    assert wp.xyz == pytest.approx(D65.xyz, abs=1e-4)
    assert wp.xyz[1] == 1.0
    with pytest.raises(ValueError):
        white_point_from_xy(0.3, 0.0)
