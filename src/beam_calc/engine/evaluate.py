from __future__ import annotations

import logging
import math
from typing import Optional

from beam_calc.domain.inputs import BeamInput
from beam_calc.domain.results import BeamResult
from beam_calc.engine.normalize import normalize_inputs
from beam_calc.engine.solver import solve

logger = logging.getLogger(__name__)


def _present(v: Optional[float]) -> bool:
    # 0, None y NaN (campo vacío mal parseado) cuentan como faltantes
    if not v:
        return False
    return not math.isnan(float(v))


def is_complete(inp: BeamInput) -> bool:
    """
    L, E, I y la magnitud de la carga activa deben estar presentes y ser != 0.
    La magnitud del tipo de carga inactivo no se mira.
    """
    return (
        _present(inp.span)
        and _present(inp.elastic_modulus)
        and _present(inp.moment_of_inertia)
        and _present(inp.load.magnitude)
    )


def evaluate(inp: BeamInput) -> Optional[BeamResult]:
    """
    Normaliza y resuelve. Devuelve None si faltan datos (nunca un resultado
    parcial o con ceros): quien llama debe mostrar un aviso en su lugar.
    """
    if not is_complete(inp):
        logger.debug("Entrada incompleta, sin resultado: %s", inp)
        return None

    beam = normalize_inputs(inp)
    result = solve(beam)
    logger.debug("Resultado %s para %s", result, inp)
    return result
