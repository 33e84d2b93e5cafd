from services.charts import RenderOptions
from services.params import options_from_query, parse_flag, parse_number, parse_values


def test_parse_values_drops_junk_and_non_finite():
    assert parse_values("1, 2,abc,inf,nan,3.5") == [1.0, 2.0, 3.5]


def test_parse_values_blank_entries_are_zero():
    assert parse_values("1,,2") == [1.0, 0.0, 2.0]
    assert parse_values(None) == [0.0]
    assert parse_values("") == [0.0]


def test_parse_flag_only_exact_one():
    assert parse_flag("1")
    assert not parse_flag("true")
    assert not parse_flag("0")
    assert not parse_flag(None)


def test_parse_number():
    assert parse_number("50") == 50.0
    assert parse_number(" 2.5 ") == 2.5
    assert parse_number("abc") == 0
    assert parse_number(None) == 0


def test_options_from_query():
    opts = options_from_query({"line": "1", "fill": "1", "gray": "0", "maxValue": "40"})
    assert opts == RenderOptions(max_value=40.0, line=True, fill=True, gray=False, bar=False)
    assert options_from_query({}) == RenderOptions(max_value=0.0)
