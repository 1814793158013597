from beam_calc.domain.inputs import BeamInput
from beam_calc.domain.loads import LoadKind
from beam_calc.domain.units import UnitSystem
from beam_calc.engine.evaluate import evaluate
from beam_calc.engine.serviceability import check_deflection
from beam_calc.services.display import result_text

# Valores por defecto del formulario (US, distribuida)
inp = BeamInput.from_form(
    unit_system=UnitSystem.US,
    span=120,              # in
    elastic_modulus=29000, # ksi
    moment_of_inertia=200, # in^4
    load_kind=LoadKind.DISTRIBUTED,
    distributed_magnitude=0.001,  # kip/in
    point_magnitude=10,           # kip (se ignora)
)

print(result_text(evaluate(inp)))

chk = check_deflection(inp)
print("L/δ =", chk.span_ratio)
for r in chk.rows:
    print(f"L/{r.denominator}: δadm={r.allowable_mm:.3f} mm ->", "OK" if r.ok else "NO")

# Misma viga sin luz -> sin resultado
print(result_text(evaluate(inp.with_changes(span=0))))
