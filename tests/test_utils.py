from autotheme.utils import clamp01, normalize_hue, is_close_to_int, format_number

def test_clamp01():
    assert clamp01(-1) == 0.0
    assert clamp01(0.25) == 0.25
    assert clamp01(3) == 1.0

def test_normalize_hue():
    assert normalize_hue(0) == 0.0
    assert normalize_hue(360) == 0.0
    assert normalize_hue(-90) == 270.0
    assert normalize_hue(725) == 5.0
    assert 0.0 <= normalize_hue(-1e-17) < 360.0

def test_is_close_to_int():
    assert is_close_to_int(2.0000000001)
    assert not is_close_to_int(2.01)

def test_format_number():
    assert format_number(1.0) == "1"
    assert format_number(0.5) == "0.5"
    assert format_number(1 / 3) == "0.333"
    assert format_number(0.50196) == "0.502"
    assert format_number(-0.00001) == "0"
    assert format_number(62.79554, 2) == "62.8"
    assert format_number(-0.12345678, 4) == "-0.1235"

