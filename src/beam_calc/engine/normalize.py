from __future__ import annotations

from beam_calc.domain.inputs import BeamInput
from beam_calc.domain.loads import LoadKind
from beam_calc.domain.results import NormalizedBeam
from beam_calc.domain.units import GPA_TO_KN_PER_M2, conversion_for


def normalize_inputs(inp: BeamInput) -> NormalizedBeam:
    """
    Convierte los datos del usuario a unidades internas:
      longitud m, fuerza kN, E kN/m², I m⁴.

    Supone entrada completa (el Evaluator ya chequeó campos faltantes).
    Sin redondeos.
    """
    conv = conversion_for(inp.unit_system)

    L_m = float(inp.span) * conv.length_to_m
    E_GPa = float(inp.elastic_modulus) * conv.modulus_to_gpa
    I_m4 = float(inp.moment_of_inertia) * conv.inertia_to_m4

    # 1 GPa = 1e6 kN/m²
    E_kN_m2 = E_GPa * GPA_TO_KN_PER_M2

    # Solo se convierte la magnitud de la carga activa
    if inp.load_kind is LoadKind.DISTRIBUTED:
        return NormalizedBeam(
            kind=LoadKind.DISTRIBUTED,
            length_m=L_m,
            modulus_kn_per_m2=E_kN_m2,
            inertia_m4=I_m4,
            distributed_kn_per_m=float(inp.load.magnitude) * conv.dist_load_to_kn_per_m,
        )

    return NormalizedBeam(
        kind=LoadKind.MIDSPAN_POINT,
        length_m=L_m,
        modulus_kn_per_m2=E_kN_m2,
        inertia_m4=I_m4,
        point_kn=float(inp.load.magnitude) * conv.point_load_to_kn,
    )
