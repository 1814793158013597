from beam_calc.engine.evaluate import evaluate
from beam_calc.services.display import (
    NO_RESULT_PROMPT, RESULT_NOTE, DisplaySettings, fmt_fixed, format_result, result_text
)


def test_format_result_rows(metric_point):
    rows = format_result(evaluate(metric_point))

    assert [r[2] for r in rows] == ["kN", "kN", "kN·m", "mm"]
    assert rows[0][1] == "5.000"
    assert rows[1][1] == "5.000"
    assert rows[2][1] == "7.500"
    assert rows[3][1] == "0.338"


def test_custom_decimals(metric_point):
    rows = format_result(evaluate(metric_point), DisplaySettings(decimals=1))
    assert rows[2][1] == "7.5"


def test_result_text(metric_point):
    assert result_text(None) == NO_RESULT_PROMPT
    txt = result_text(evaluate(metric_point))
    assert "7.500 kN·m" in txt
    lines = txt.splitlines()
    assert len(lines) == 5
    assert lines[-1] == RESULT_NOTE


def test_fmt_fixed_keeps_trailing_zeros():
    assert fmt_fixed(2, 3) == "2.000"
    assert fmt_fixed(0.0004, 3) == "0.000"
