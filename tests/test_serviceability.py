import math

import pytest

from beam_calc.domain.loads import MidspanPointLoad
from beam_calc.engine.evaluate import evaluate
from beam_calc.engine.serviceability import check_deflection
from beam_calc.services.display import DEFAULT_SETTINGS, DisplaySettings


def test_deflection_limits_metric(metric_point):
    chk = check_deflection(metric_point)
    res = evaluate(metric_point)

    assert chk.span_mm == pytest.approx(3000.0)
    assert chk.max_deflection_mm == pytest.approx(res.max_deflection)
    assert chk.span_ratio == pytest.approx(3000.0 / res.max_deflection)

    assert [r.denominator for r in chk.rows] == [240, 360]
    assert chk.rows[0].allowable_mm == pytest.approx(12.5)
    assert chk.rows[1].allowable_mm == pytest.approx(3000.0 / 360)
    # δ ≈ 0.34 mm: verifica holgado
    assert chk.ok


def test_deflection_limit_fails_for_flexible_beam(metric_point):
    soft = metric_point.with_changes(moment_of_inertia=1e5)
    chk = check_deflection(soft, limits=(360,))
    assert len(chk.rows) == 1
    assert not chk.rows[0].ok
    assert not chk.ok


def test_us_span_is_reported_in_mm(us_udl):
    chk = check_deflection(us_udl)
    assert chk.span_mm == pytest.approx(120 * 25.4)
    assert math.isfinite(chk.span_ratio)


def test_incomplete_and_invalid_limits(metric_point):
    assert check_deflection(metric_point.with_changes(load=MidspanPointLoad(magnitude=0))) is None
    with pytest.raises(ValueError):
        check_deflection(metric_point, limits=(0,))


def test_limits_follow_display_settings(metric_point):
    settings = DisplaySettings(deflection_limits=(1000,))
    chk = check_deflection(metric_point, settings=settings)
    assert [r.denominator for r in chk.rows] == [1000]
    assert chk.rows[0].allowable_mm == pytest.approx(3.0)

    # limits explícitos tienen prioridad sobre settings
    chk = check_deflection(metric_point, limits=(180,), settings=settings)
    assert [r.denominator for r in chk.rows] == [180]


def test_default_limits_come_from_default_settings(metric_point):
    chk = check_deflection(metric_point)
    assert tuple(r.denominator for r in chk.rows) == DEFAULT_SETTINGS.deflection_limits
