from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


def _rect_Ix_about_centroid(b: float, h: float) -> float:
    """Ix de un rectángulo b (ancho) x h (alto), respecto a su centroide (eje horizontal)."""
    return (b * h**3) / 12.0


def _check_positive(**dims: float) -> None:
    for name, v in dims.items():
        if v is None or float(v) <= 0.0:
            raise ValueError(f"Dimensión inválida {name}={v!r}: debe ser > 0.")


@dataclass(frozen=True)
class RectSection:
    """
    Sección rectangular maciza. Dimensiones en la unidad de longitud del
    usuario (in o mm); Ix sale en esa unidad a la cuarta.
    """
    b: float
    h: float

    def __post_init__(self) -> None:
        _check_positive(b=self.b, h=self.h)

    @property
    def Ix(self) -> float:
        return _rect_Ix_about_centroid(float(self.b), float(self.h))


@dataclass(frozen=True)
class ISection:
    """
    Sección doble T idealizada: 3 rectángulos (ala inf + alma + ala sup).
    Mismas unidades que RectSection.

    Convención de y: y=0 en la cara inferior, y positivo hacia arriba.
    """
    b_f: float      # ancho de alas
    t_top: float    # espesor ala superior
    t_bot: float    # espesor ala inferior
    h_web: float    # altura libre del alma entre alas
    t_web: float    # espesor del alma

    def __post_init__(self) -> None:
        _check_positive(b_f=self.b_f, t_top=self.t_top, t_bot=self.t_bot, h_web=self.h_web, t_web=self.t_web)

    @property
    def H(self) -> float:
        return float(self.t_bot + self.h_web + self.t_top)

    @property
    def Ix(self) -> float:
        return self.props()["Ix"]

    def props(self) -> Dict[str, float]:
        """
        Devuelve:
          - H
          - ybar (desde base)
          - Ix (sobre eje x que pasa por el centroide)
        """
        b = float(self.b_f)
        ttop = float(self.t_top)
        tbot = float(self.t_bot)
        h = float(self.h_web)
        tw = float(self.t_web)

        # Áreas
        A_bot = b * tbot
        A_web = tw * h
        A_top = b * ttop
        A_tot = A_bot + A_web + A_top

        # Centroides (y desde base)
        y_bot = tbot / 2.0
        y_web = tbot + h / 2.0
        y_top = tbot + h + ttop / 2.0

        ybar = (A_bot * y_bot + A_web * y_web + A_top * y_top) / A_tot

        # Steiner
        Ix = (
            _rect_Ix_about_centroid(b, tbot) + A_bot * (y_bot - ybar) ** 2
            + _rect_Ix_about_centroid(tw, h) + A_web * (y_web - ybar) ** 2
            + _rect_Ix_about_centroid(b, ttop) + A_top * (y_top - ybar) ** 2
        )

        return {"H": self.H, "ybar": ybar, "Ix": Ix}
