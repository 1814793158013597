import pytest

from beam_calc.domain.inputs import BeamInput
from beam_calc.domain.loads import DistributedLoad, MidspanPointLoad
from beam_calc.domain.units import UnitSystem


@pytest.fixture
def us_udl():
    # Valores por defecto del formulario
    return BeamInput(
        unit_system=UnitSystem.US,
        span=120.0,
        elastic_modulus=29000.0,
        moment_of_inertia=200.0,
        load=DistributedLoad(magnitude=0.001),
    )


@pytest.fixture
def metric_point():
    return BeamInput(
        unit_system=UnitSystem.METRIC,
        span=3000.0,
        elastic_modulus=200.0,
        moment_of_inertia=8.333e7,
        load=MidspanPointLoad(magnitude=10.0),
    )
