from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from beam_calc.domain.results import BeamResult
from beam_calc.domain.units import DISPLAY_UNITS

DEFAULT_DEFLECTION_LIMITS = (240, 360)

NO_RESULT_PROMPT = "Ingresá luz, E, I y una carga para ver resultados."

RESULT_NOTE = (
    "Unidades de salida fijas: kN, kN·m y mm. "
    "Las entradas en US se convierten internamente."
)


@dataclass(frozen=True)
class DisplaySettings:
    decimals: int = 3
    deflection_limits: Tuple[int, ...] = DEFAULT_DEFLECTION_LIMITS


DEFAULT_SETTINGS = DisplaySettings()

_ROWS = (
    ("reaction", "Reacción (c/apoyo)"),
    ("peak_shear", "Corte máximo |V|max"),
    ("peak_moment", "Momento máximo Mmax"),
    ("max_deflection", "Flecha máxima δmax"),
)


def fmt_fixed(v: float, decimals: int = 3) -> str:
    """Formato fijo con 'decimals' decimales (sin recortar ceros)."""
    return f"{float(v):.{int(decimals)}f}"


def format_result(result: BeamResult, settings: DisplaySettings = DEFAULT_SETTINGS) -> List[Tuple[str, str, str]]:
    """Filas (etiqueta, valor, unidad) en el orden del panel de resultados."""
    out: List[Tuple[str, str, str]] = []
    for attr, label in _ROWS:
        out.append((label, fmt_fixed(getattr(result, attr), settings.decimals), DISPLAY_UNITS[attr]))
    return out


def result_text(result: BeamResult | None, settings: DisplaySettings = DEFAULT_SETTINGS) -> str:
    """Bloque de texto listo para mostrar; el aviso si no hay resultado."""
    if result is None:
        return NO_RESULT_PROMPT
    lines = [f"{label}: {value} {unit}" for label, value, unit in format_result(result, settings)]
    lines.append(RESULT_NOTE)
    return "\n".join(lines)
