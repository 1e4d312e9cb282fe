import math

from fossflow_ai.diagram.values import round_half_up, to_index, to_number, to_safe_string


def test_to_safe_string():
    assert to_safe_string(None) == ""
    assert to_safe_string("  x ") == "  x "
    assert to_safe_string(True) == "true"
    assert to_safe_string(3.0) == "3"
    assert to_safe_string(2.5) == "2.5"
    assert to_safe_string(["a", None, 1]) == "a,,1"


def test_to_number_loose_coercion():
    assert to_number(True) == 1.0
    assert to_number(None) == 0.0
    assert to_number(" 4 ") == 4.0
    assert to_number("") == 0.0
    assert to_number("0x10") == 16.0
    assert to_number("1e3") == 1000.0
    assert math.isnan(to_number("abc"))
    assert math.isnan(to_number([1]))
    assert math.isnan(to_number({"x": 1}))
    assert to_number(10 ** 400) == math.inf


def test_to_index_rejects_out_of_range_and_fractional():
    assert to_index(0, 3) == 0
    assert to_index("2", 3) == 2
    assert to_index(3, 3) is None
    assert to_index(-1, 3) is None
    assert to_index(1.5, 3) is None
    assert to_index(float("inf"), 3) is None
    assert to_index("x", 3) is None


def test_round_half_up_matches_grid_rounding():
    assert round_half_up(1.5) == 2
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(-0.6) == -1
    assert round_half_up(2.4) == 2
