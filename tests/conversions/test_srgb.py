from autotheme.conversions.srgb import srgb_to_linear, linear_to_srgb, np_srgb_to_linear, np_linear_to_srgb
import numpy as np

tolerance = 1e-9

def test_srgb_endpoints():
    assert srgb_to_linear(0.0) == 0.0
    assert abs(srgb_to_linear(1.0) - 1.0) < tolerance
    assert linear_to_srgb(0.0) == 0.0
    assert abs(linear_to_srgb(1.0) - 1.0) < tolerance

def test_srgb_linear_segment():
    assert abs(srgb_to_linear(0.04045) - 0.04045 / 12.92) < tolerance
    assert abs(linear_to_srgb(0.002) - 0.002 * 12.92) < tolerance

def test_srgb_mid_grey():
    # sRGB 50% grey is roughly 21.4% linear light
    assert abs(srgb_to_linear(0.5) - 0.214041) < 1e-6

def test_srgb_round_trip():
    for c in np.linspace(0.0, 1.0, 101):
        assert abs(linear_to_srgb(srgb_to_linear(c)) - c) < 1e-9

def test_srgb_numpy_matches_scalar():
    values = np.linspace(0.0, 1.0, 257)
    expected = np.array([srgb_to_linear(v) for v in values])
    assert np.allclose(np_srgb_to_linear(values), expected, atol=tolerance)

    expected = np.array([linear_to_srgb(v) for v in values])
    assert np.allclose(np_linear_to_srgb(values), expected, atol=tolerance)

def test_np_linear_to_srgb_negative_input_stays_finite():
    result = np_linear_to_srgb(np.array([-0.1, 0.5]))
    assert np.all(np.isfinite(result))
    assert result[0] < 0
