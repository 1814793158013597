from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class LoadKind(Enum):
    DISTRIBUTED = "UDL"
    MIDSPAN_POINT = "Point (midspan)"


@dataclass(frozen=True)
class DistributedLoad:
    """Carga uniforme sobre toda la luz. magnitude: kip/in (US) o kN/mm (Metric)."""
    magnitude: Optional[float]

    @property
    def kind(self) -> LoadKind:
        return LoadKind.DISTRIBUTED


@dataclass(frozen=True)
class MidspanPointLoad:
    """Carga puntual en el centro de la luz. magnitude: kip (US) o kN (Metric)."""
    magnitude: Optional[float]

    @property
    def kind(self) -> LoadKind:
        return LoadKind.MIDSPAN_POINT


BeamLoad = Union[DistributedLoad, MidspanPointLoad]


def make_load(kind: LoadKind, magnitude: Optional[float]) -> BeamLoad:
    if kind is LoadKind.DISTRIBUTED:
        return DistributedLoad(magnitude=magnitude)
    if kind is LoadKind.MIDSPAN_POINT:
        return MidspanPointLoad(magnitude=magnitude)
    raise TypeError(f"Tipo de carga inválido: {kind!r}")
