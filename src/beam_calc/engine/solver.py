from __future__ import annotations

from beam_calc.domain.loads import LoadKind
from beam_calc.domain.results import BeamResult, NormalizedBeam
from beam_calc.domain.units import M_TO_MM


def solve(beam: NormalizedBeam) -> BeamResult:
    """
    Fórmulas cerradas de viga simplemente apoyada (unidades internas).

    Distribuida w (kN/m) en toda la luz:
      R = w·L/2,  Vmax = R,  Mmax = w·L²/8,  δmax = 5·w·L⁴/(384·E·I)

    Puntual P (kN) en L/2:
      R = P/2,    Vmax = R,  Mmax = P·L/4,   δmax = P·L³/(48·E·I)

    Salida: kN, kN·m y δ en mm.
    """
    L = beam.length_m
    EI = beam.modulus_kn_per_m2 * beam.inertia_m4
    if EI == 0.0:
        raise ValueError("No se puede calcular la flecha: E·I = 0 (denominador nulo).")

    if beam.kind is LoadKind.DISTRIBUTED:
        w = beam.distributed_kn_per_m
        R = (w * L) / 2
        M_max = (w * L ** 2) / 8
        defl_m = (5 * w * L ** 4) / (384 * EI)
    else:
        P = beam.point_kn
        R = P / 2
        M_max = (P * L) / 4
        defl_m = (P * L ** 3) / (48 * EI)

    return BeamResult(
        reaction=R,
        peak_shear=R,  # máximo en los apoyos
        peak_moment=M_max,
        max_deflection=defl_m * M_TO_MM,
    )
