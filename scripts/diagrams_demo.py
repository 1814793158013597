from beam_calc.domain.inputs import BeamInput
from beam_calc.domain.loads import MidspanPointLoad
from beam_calc.domain.units import UnitSystem
from beam_calc.engine.diagrams import build_diagram

inp = BeamInput(
    unit_system=UnitSystem.METRIC,
    span=3000,                # mm
    elastic_modulus=200,      # GPa
    moment_of_inertia=8.333e7,  # mm^4
    load=MidspanPointLoad(magnitude=10),  # kN
)

diag = build_diagram(inp)
x, V, M, D = diag.sample(n_per_segment=50)
print("V(0) =", diag.eval_V(0))
print("M(L/2) =", diag.eval_M(diag.L / 2))
print("δ(L/2) =", diag.eval_deflection(diag.L / 2))
print("max |M| muestreado =", abs(M).max())
