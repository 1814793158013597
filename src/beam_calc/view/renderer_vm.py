from __future__ import annotations

from typing import Optional, Tuple
import numpy as np

from beam_calc.engine.diagrams import BeamDiagram
from beam_calc.view.style import RenderStyle


# -------------------------
# Helpers formato
# -------------------------
def _fmt_plain(v: float, decimals: int = 3) -> str:
    """Formato fijo (sin notación científica) y recorte de ceros."""
    s = f"{float(v):.{decimals}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _annotate_peak(ax, x: np.ndarray, y: np.ndarray, unit: str, *, below: bool = False):
    """Marca el extremo de mayor |y| y anota su valor."""
    if len(x) == 0:
        return
    i = int(np.argmax(np.abs(y)))
    xi = float(x[i])
    yi = float(y[i])
    if abs(yi) < 1e-12:
        return

    ax.scatter([xi], [yi], s=18, zorder=6)
    y_min, y_max = ax.get_ylim()
    my = 0.03 * max(1e-12, float(y_max - y_min))
    ax.text(
        xi, yi - my if below else yi + my,
        f"{_fmt_plain(yi, 3)} {unit}",
        ha="center", va="top" if below else "bottom", fontsize=8, zorder=7,
    )


def _set_limits(ax, diag: BeamDiagram, y: np.ndarray, y_zoom: float, xlim: Optional[Tuple[float, float]]):
    if xlim is None:
        ax.set_xlim(diag.x_start, diag.x_end)
    else:
        ax.set_xlim(xlim[0], xlim[1])

    ymax = float(np.max(np.abs(y))) if len(y) else 1.0
    if ymax <= 0.0:
        ymax = 1.0
    pad = 1.15
    ax.set_ylim(-ymax * y_zoom * pad, ymax * y_zoom * pad)


# -------------------------
# Render
# -------------------------
def render_shear(ax, diag: BeamDiagram, style: RenderStyle = RenderStyle(), y_zoom: float = 1.0,
                 xlim: Optional[Tuple[float, float]] = None):
    ax.clear()
    x, V, _, _ = diag.sample(n_per_segment=style.n_per_segment)

    ax.plot(x, V, linewidth=style.diagram_lw)
    ax.axhline(0.0, linewidth=1.0)
    _set_limits(ax, diag, V, y_zoom, xlim)
    _annotate_peak(ax, x, V, "kN")

    ax.set_ylabel("V [kN]")
    ax.set_title("Diagrama de Corte V(x)")
    ax.grid(True, alpha=0.25)


def render_moment(ax, diag: BeamDiagram, style: RenderStyle = RenderStyle(), y_zoom: float = 1.0,
                  xlim: Optional[Tuple[float, float]] = None):
    ax.clear()
    x, _, M, _ = diag.sample(n_per_segment=style.n_per_segment)

    ax.plot(x, M, linewidth=style.diagram_lw)
    ax.axhline(0.0, linewidth=1.0)
    _set_limits(ax, diag, M, y_zoom, xlim)
    _annotate_peak(ax, x, M, "kN·m")

    ax.set_ylabel("M [kN·m]")
    ax.set_title("Diagrama de Momento Flector M(x)")
    ax.grid(True, alpha=0.25)


def render_deflection(ax, diag: BeamDiagram, style: RenderStyle = RenderStyle(), y_zoom: float = 1.0,
                      xlim: Optional[Tuple[float, float]] = None):
    """Elástica dibujada hacia abajo (δ positiva hacia abajo)."""
    ax.clear()
    x, _, _, D = diag.sample(n_per_segment=style.n_per_segment)

    ax.plot(x, -D, linewidth=style.diagram_lw)
    ax.axhline(0.0, linewidth=1.0)
    _set_limits(ax, diag, D, y_zoom, xlim)
    _annotate_peak(ax, x, -D, "mm", below=True)

    ax.set_ylabel("δ [mm]")
    ax.set_xlabel("x [m]")
    ax.set_title("Elástica δ(x)")
    ax.grid(True, alpha=0.25)
