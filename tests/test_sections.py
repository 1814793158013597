import pytest

from beam_calc.domain.loads import MidspanPointLoad
from beam_calc.domain.inputs import BeamInput
from beam_calc.domain.units import UnitSystem
from beam_calc.engine.evaluate import evaluate
from beam_calc.sections.shapes import ISection, RectSection


def test_rectangle_inertia():
    assert RectSection(b=100.0, h=300.0).Ix == pytest.approx(100.0 * 300.0 ** 3 / 12.0)


def test_symmetric_i_section():
    sec = ISection(b_f=200.0, t_top=10.0, t_bot=10.0, h_web=280.0, t_web=8.0)
    p = sec.props()

    assert p["H"] == pytest.approx(300.0)
    assert p["ybar"] == pytest.approx(150.0)
    # rectángulo lleno menos los dos huecos a los lados del alma
    expected = (200.0 * 300.0 ** 3 - (200.0 - 8.0) * 280.0 ** 3) / 12.0
    assert sec.Ix == pytest.approx(expected)


def test_section_feeds_beam_input():
    sec = RectSection(b=100.0, h=200.0)  # mm
    inp = BeamInput(
        unit_system=UnitSystem.METRIC,
        span=3000.0,
        elastic_modulus=200.0,
        moment_of_inertia=sec.Ix,
        load=MidspanPointLoad(magnitude=10.0),
    )
    res = evaluate(inp)
    EI = 200e6 * sec.Ix * 1e-12
    assert res.max_deflection == pytest.approx(10 * 27 / (48 * EI) * 1000)


@pytest.mark.parametrize("b,h", [(0.0, 10.0), (10.0, -1.0)])
def test_invalid_dimensions(b, h):
    with pytest.raises(ValueError):
        RectSection(b=b, h=h)
