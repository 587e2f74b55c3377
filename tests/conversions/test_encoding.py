import numpy as np
import pytest

from prismatica.encoding import (
    LINEAR_TRANSFER,
    REC709_TRANSFER,
    ROMM_TRANSFER,
    SRGB_TRANSFER,
    TransferFunction,
    linear_to_srgb,
    np_linear_to_srgb,
    np_srgb_to_linear,
    srgb_to_linear,
)

TRANSFERS = [SRGB_TRANSFER, LINEAR_TRANSFER, REC709_TRANSFER, ROMM_TRANSFER, TransferFunction("gamma", 2.2)]


def test_srgb_reference_values():
    assert srgb_to_linear(0.0) == 0.0
    assert srgb_to_linear(1.0) == pytest.approx(1.0)
    assert srgb_to_linear(0.5) == pytest.approx(0.21404114, abs=1e-8)
    assert linear_to_srgb(0.18) == pytest.approx(0.46135612, abs=1e-8)


def test_srgb_linear_segment():
    assert srgb_to_linear(0.04045) == pytest.approx(0.04045 / 12.92)
    assert linear_to_srgb(0.003) == pytest.approx(0.003 * 12.92)


@pytest.mark.parametrize("transfer", TRANSFERS, ids=lambda t: t.kind)
def test_decode_encode_round_trip(transfer):
    for c in np.linspace(0.0, 1.0, 101).tolist() + [1e-5, 0.0031308, 0.04045, 0.018]:
        assert transfer.decode(transfer.encode(c)) == pytest.approx(c, abs=1e-7)
        assert transfer.encode(transfer.decode(c)) == pytest.approx(c, abs=1e-7)


@pytest.mark.parametrize("transfer", TRANSFERS, ids=lambda t: t.kind)
def test_numpy_matches_scalar(transfer):
    values = np.linspace(-0.2, 1.2, 57)
    assert np.allclose(transfer.np_decode(values), [transfer.decode(v) for v in values.tolist()])
    assert np.allclose(transfer.np_encode(values), [transfer.encode(v) for v in values.tolist()])


def test_transfer_is_sign_preserving():
    assert srgb_to_linear(-0.5) == pytest.approx(-srgb_to_linear(0.5))
    assert linear_to_srgb(-0.2) == pytest.approx(-linear_to_srgb(0.2))
    assert ROMM_TRANSFER.decode(-0.5) == pytest.approx(-ROMM_TRANSFER.decode(0.5))


def test_float32_stays_float32():
    c = np.array([0.1, 0.5, 0.9], dtype=np.float32)
    assert np_srgb_to_linear(c).dtype == np.float32
    assert np_linear_to_srgb(c).dtype == np.float32


def test_invalid_transfer():
    with pytest.raises(ValueError):
        TransferFunction("pq")
    with pytest.raises(ValueError):
        TransferFunction("gamma", 0.0)
