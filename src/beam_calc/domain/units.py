from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

IN_TO_M = 0.0254
MM_TO_M = 0.001
KIP_TO_KN = 4.4482216153             # 1 kip = 4.4482216153 kN
KSI_TO_GPA = 0.006894757293168361    # 1 ksi = 6.894757... MPa
GPA_TO_KN_PER_M2 = 1e6               # 1 GPa = 1e9 N/m² = 1e6 kN/m²
M_TO_MM = 1000.0


class UnitSystem(Enum):
    US = "US"
    METRIC = "Metric"


@dataclass(frozen=True)
class UnitConversion:
    """
    Factores de conversión de unidades de usuario -> unidades internas.

    Internas: longitud m, fuerza kN, E kN/m², I m⁴, w kN/m.
    Todos los factores son multiplicativos; no se redondea nada.
    """
    length_to_m: float
    modulus_to_gpa: float
    inertia_to_m4: float
    dist_load_to_kn_per_m: float
    point_load_to_kn: float


CONVERSIONS: Dict[UnitSystem, UnitConversion] = {
    UnitSystem.US: UnitConversion(
        length_to_m=IN_TO_M,                        # in -> m
        modulus_to_gpa=KSI_TO_GPA,                  # ksi -> GPa
        inertia_to_m4=IN_TO_M ** 4,                 # in⁴ -> m⁴
        dist_load_to_kn_per_m=KIP_TO_KN / IN_TO_M,  # kip/in -> kN/m
        point_load_to_kn=KIP_TO_KN,                 # kip -> kN
    ),
    UnitSystem.METRIC: UnitConversion(
        length_to_m=MM_TO_M,                        # mm -> m
        modulus_to_gpa=1.0,                         # GPa
        inertia_to_m4=MM_TO_M ** 4,                 # mm⁴ -> m⁴
        dist_load_to_kn_per_m=1.0 / MM_TO_M,        # kN/mm -> kN/m
        point_load_to_kn=1.0,                       # kN
    ),
}


# (US, Metric) por magnitud de entrada
_INPUT_LABELS: Dict[str, Tuple[str, str]] = {
    "span": ("in", "mm"),
    "elastic_modulus": ("ksi", "GPa"),
    "moment_of_inertia": ("in^4", "mm^4"),
    "distributed_load": ("kip/in", "kN/mm"),
    "point_load": ("kip", "kN"),
}

# Unidades fijas de salida (independientes del sistema de entrada)
DISPLAY_UNITS: Dict[str, str] = {
    "reaction": "kN",
    "peak_shear": "kN",
    "peak_moment": "kN·m",
    "max_deflection": "mm",
}


def conversion_for(unit_system: UnitSystem) -> UnitConversion:
    if not isinstance(unit_system, UnitSystem):
        raise TypeError(f"Sistema de unidades inválido: {unit_system!r}")
    return CONVERSIONS[unit_system]


def unit_label(unit_system: UnitSystem, quantity: str) -> str:
    """Etiqueta de unidad para un campo de entrada según el sistema elegido."""
    if not isinstance(unit_system, UnitSystem):
        raise TypeError(f"Sistema de unidades inválido: {unit_system!r}")
    try:
        us, metric = _INPUT_LABELS[quantity]
    except KeyError:
        raise KeyError(f"Magnitud sin etiqueta de unidad: {quantity!r}") from None
    return us if unit_system is UnitSystem.US else metric
