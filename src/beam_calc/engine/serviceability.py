from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from beam_calc.domain.inputs import BeamInput
from beam_calc.domain.units import M_TO_MM, conversion_for
from beam_calc.engine.evaluate import evaluate
from beam_calc.services.display import DEFAULT_SETTINGS, DisplaySettings


@dataclass(frozen=True)
class DeflectionLimitRow:
    denominator: int      # L/denominator
    allowable_mm: float
    ok: bool


@dataclass(frozen=True)
class DeflectionCheck:
    span_mm: float
    max_deflection_mm: float
    span_ratio: float     # L/δ (inf si δ = 0)
    rows: List[DeflectionLimitRow]

    @property
    def ok(self) -> bool:
        return all(r.ok for r in self.rows)


def check_deflection(
    inp: BeamInput,
    limits: Optional[Sequence[int]] = None,
    settings: DisplaySettings = DEFAULT_SETTINGS,
) -> Optional[DeflectionCheck]:
    """
    Compara δmax con L/240, L/360, ... (serviciabilidad, no resistencia).
    Sin limits explícitos se usan settings.deflection_limits.
    None si la entrada está incompleta.
    """
    if limits is None:
        limits = settings.deflection_limits
    res = evaluate(inp)
    if res is None:
        return None

    span_mm = float(inp.span) * conversion_for(inp.unit_system).length_to_m * M_TO_MM
    d = abs(res.max_deflection)
    ratio = math.inf if d == 0.0 else span_mm / d

    rows: List[DeflectionLimitRow] = []
    for n in limits:
        if n <= 0:
            raise ValueError(f"Límite de flecha inválido: L/{n}")
        allow = span_mm / float(n)
        rows.append(DeflectionLimitRow(denominator=int(n), allowable_mm=allow, ok=d <= allow))

    return DeflectionCheck(
        span_mm=span_mm,
        max_deflection_mm=d,
        span_ratio=ratio,
        rows=rows,
    )
