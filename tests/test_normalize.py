import pytest

from beam_calc.domain.loads import DistributedLoad, LoadKind, MidspanPointLoad
from beam_calc.domain.results import NormalizedBeam
from beam_calc.domain.units import CONVERSIONS, UnitSystem, unit_label
from beam_calc.engine.normalize import normalize_inputs
from beam_calc.engine.solver import solve


def test_us_factors_are_exact(us_udl):
    beam = normalize_inputs(us_udl)

    assert beam.kind is LoadKind.DISTRIBUTED
    assert beam.length_m == 120.0 * 0.0254
    assert beam.modulus_kn_per_m2 == 29000.0 * 0.006894757293168361 * 1e6
    assert beam.inertia_m4 == 200.0 * 0.0254 ** 4
    assert beam.distributed_kn_per_m == 0.001 * (4.4482216153 / 0.0254)
    assert beam.point_kn is None


def test_us_point_load(us_udl):
    beam = normalize_inputs(us_udl.with_changes(load=MidspanPointLoad(magnitude=10.0)))
    assert beam.kind is LoadKind.MIDSPAN_POINT
    assert beam.point_kn == 10.0 * 4.4482216153
    assert beam.distributed_kn_per_m is None


def test_metric_factors(metric_point):
    beam = normalize_inputs(metric_point)

    assert beam.length_m == pytest.approx(3.0)
    assert beam.modulus_kn_per_m2 == 200.0 * 1e6
    assert beam.inertia_m4 == pytest.approx(8.333e-5, rel=1e-12)
    assert beam.point_kn == 10.0

    udl = normalize_inputs(metric_point.with_changes(load=DistributedLoad(magnitude=0.002)))
    assert udl.distributed_kn_per_m == pytest.approx(2.0, rel=1e-12)


def test_conversion_table_covers_every_unit_system():
    assert set(CONVERSIONS) == set(UnitSystem)


def test_unit_labels():
    assert unit_label(UnitSystem.US, "span") == "in"
    assert unit_label(UnitSystem.METRIC, "span") == "mm"
    assert unit_label(UnitSystem.US, "elastic_modulus") == "ksi"
    assert unit_label(UnitSystem.METRIC, "moment_of_inertia") == "mm^4"
    assert unit_label(UnitSystem.US, "distributed_load") == "kip/in"
    assert unit_label(UnitSystem.METRIC, "point_load") == "kN"
    with pytest.raises(KeyError):
        unit_label(UnitSystem.US, "torque")


def test_unit_label_rejects_non_enum_system():
    with pytest.raises(TypeError):
        unit_label("US", "span")
    with pytest.raises(TypeError):
        unit_label(None, "span")


def test_solver_rejects_zero_stiffness():
    beam = NormalizedBeam(
        kind=LoadKind.MIDSPAN_POINT,
        length_m=3.0,
        modulus_kn_per_m2=0.0,
        inertia_m4=1e-4,
        point_kn=10.0,
    )
    with pytest.raises(ValueError):
        solve(beam)


def test_solver_distributed_formulas():
    beam = NormalizedBeam(
        kind=LoadKind.DISTRIBUTED,
        length_m=4.0,
        modulus_kn_per_m2=2e8,
        inertia_m4=1e-4,
        distributed_kn_per_m=5.0,
    )
    res = solve(beam)
    assert res.reaction == pytest.approx(10.0)
    assert res.peak_shear == pytest.approx(10.0)
    assert res.peak_moment == pytest.approx(10.0)
    assert res.max_deflection == pytest.approx(5 * 5.0 * 4.0 ** 4 / (384 * 2e8 * 1e-4) * 1000)
