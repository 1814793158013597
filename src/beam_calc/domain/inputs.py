from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from beam_calc.domain.loads import BeamLoad, DistributedLoad, LoadKind, MidspanPointLoad, make_load
from beam_calc.domain.units import UnitSystem


@dataclass(frozen=True)
class BeamInput:
    """
    Datos de una viga simplemente apoyada, en unidades del usuario.

    US:     span [in], E [ksi], I [in⁴], w [kip/in], P [kip]
    Metric: span [mm], E [GPa], I [mm⁴], w [kN/mm], P [kN]

    Los campos numéricos pueden venir en None (campo vacío en el formulario).
    Cada edición produce un registro nuevo (ver with_changes).
    """
    unit_system: UnitSystem
    span: Optional[float]
    elastic_modulus: Optional[float]
    moment_of_inertia: Optional[float]
    load: BeamLoad

    def __post_init__(self) -> None:
        if not isinstance(self.unit_system, UnitSystem):
            raise TypeError(f"unit_system debe ser UnitSystem, no {self.unit_system!r}")
        if not isinstance(self.load, (DistributedLoad, MidspanPointLoad)):
            raise TypeError(f"load debe ser DistributedLoad o MidspanPointLoad, no {self.load!r}")

    @property
    def load_kind(self) -> LoadKind:
        return self.load.kind

    @classmethod
    def from_form(
        cls,
        *,
        unit_system: UnitSystem,
        span: Optional[float],
        elastic_modulus: Optional[float],
        moment_of_inertia: Optional[float],
        load_kind: LoadKind,
        distributed_magnitude: Optional[float] = None,
        point_magnitude: Optional[float] = None,
    ) -> "BeamInput":
        """
        Arma el registro desde la forma plana del formulario (selector + dos magnitudes).
        Solo la magnitud del tipo de carga activo pasa a la carga; la otra se descarta.
        """
        if load_kind is LoadKind.DISTRIBUTED:
            magnitude = distributed_magnitude
        else:
            magnitude = point_magnitude
        return cls(
            unit_system=unit_system,
            span=span,
            elastic_modulus=elastic_modulus,
            moment_of_inertia=moment_of_inertia,
            load=make_load(load_kind, magnitude),
        )

    def with_changes(self, **changes) -> "BeamInput":
        return replace(self, **changes)
