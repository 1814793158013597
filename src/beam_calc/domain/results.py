from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from beam_calc.domain.loads import LoadKind


@dataclass(frozen=True)
class NormalizedBeam:
    """Cantidades en unidades internas (m, kN, kN/m², m⁴)."""
    kind: LoadKind
    length_m: float
    modulus_kn_per_m2: float
    inertia_m4: float

    distributed_kn_per_m: Optional[float] = None  # solo DISTRIBUTED
    point_kn: Optional[float] = None              # solo MIDSPAN_POINT


@dataclass(frozen=True)
class BeamResult:
    reaction: float        # kN, cada apoyo
    peak_shear: float      # kN
    peak_moment: float     # kN·m
    max_deflection: float  # mm
