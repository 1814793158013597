from __future__ import annotations

import numpy as np
from matplotlib.patches import Circle, Polygon, Rectangle

from beam_calc.domain.inputs import BeamInput
from beam_calc.domain.loads import LoadKind
from beam_calc.domain.units import unit_label
from beam_calc.engine.evaluate import evaluate, is_complete
from beam_calc.engine.normalize import normalize_inputs
from beam_calc.services.display import NO_RESULT_PROMPT, fmt_fixed
from beam_calc.view.style import RenderStyle


def _draw_arrow(ax, x: float, y0: float, y1: float, style: RenderStyle, color: str = "red"):
    ax.annotate(
        "",
        xy=(x, y1),
        xytext=(x, y0),
        arrowprops=dict(
            arrowstyle="-|>",
            lw=style.arrow_lw,
            mutation_scale=style.arrow_scale,
            color=color,
            facecolor=color,
            shrinkA=0,
            shrinkB=0,
        ),
    )


def _draw_support(ax, x: float, size: float, *, roller: bool):
    """Triángulo bajo la viga; el móvil lleva un rodillo debajo."""
    tri = Polygon(
        [(x, 0.0), (x - 0.6 * size, -size), (x + 0.6 * size, -size)],
        closed=True,
        facecolor="white",
        edgecolor="black",
        linewidth=1.0,
        zorder=5,
    )
    ax.add_patch(tri)
    if roller:
        ax.add_patch(Circle((x, -1.3 * size), 0.3 * size, facecolor="white", edgecolor="black", zorder=5))


def render_beam(ax, inp: BeamInput, style: RenderStyle = RenderStyle()):
    """
    Esquema de la viga simplemente apoyada: apoyos, carga activa y reacciones.
    x en m. Con entrada incompleta se muestra el aviso en lugar del esquema.
    """
    ax.clear()
    ax.set_yticks([])

    if not is_complete(inp):
        ax.text(0.5, 0.5, NO_RESULT_PROMPT, ha="center", va="center", transform=ax.transAxes,
                fontsize=style.font_size, color="gray")
        ax.set_xticks([])
        return

    beam = normalize_inputs(inp)
    res = evaluate(inp)
    L = float(beam.length_m)
    u = inp.unit_system

    arrow_h = (style.arrow_height_pctL / 100.0) * L
    dist_h = (style.dist_height_pctL / 100.0) * L
    sup = (style.support_size_pctL / 100.0) * L

    # Viga
    ax.plot([0, L], [0, 0], linewidth=style.beam_lw, color="blue")
    _draw_support(ax, 0.0, sup, roller=False)
    _draw_support(ax, L, sup, roller=True)

    # Carga activa (hacia abajo)
    mag = float(inp.load.magnitude)
    if inp.load_kind is LoadKind.DISTRIBUTED:
        rect = Rectangle(
            (0.0, 0.0),
            L,
            dist_h,
            facecolor="red",
            alpha=style.dist_rect_alpha,
            edgecolor="red",
            linewidth=style.dist_rect_lw,
        )
        ax.add_patch(rect)
        for xi in np.linspace(0.0, L, 11):
            _draw_arrow(ax, float(xi), dist_h, 0.0, style)
        ax.text(
            0.5 * L,
            dist_h + 0.03 * L,
            f"w={mag:g} {unit_label(u, 'distributed_load')}",
            ha="center",
            va="bottom",
            fontsize=style.font_size,
            color="red",
        )
        top = dist_h
    else:
        _draw_arrow(ax, 0.5 * L, arrow_h, 0.0, style)
        ax.text(
            0.5 * L,
            arrow_h + 0.02 * L,
            f"P={mag:g} {unit_label(u, 'point_load')}",
            ha="center",
            va="bottom",
            fontsize=style.font_size,
            color="red",
        )
        top = arrow_h

    # Reacciones (hacia arriba, debajo de los apoyos)
    y_r0 = -2.0 * sup - arrow_h
    for x in (0.0, L):
        _draw_arrow(ax, x, y_r0, -1.8 * sup, style, color="green")
        ax.text(
            x,
            y_r0 - 0.02 * L,
            f"R={fmt_fixed(res.reaction, 3)} kN",
            ha="center",
            va="top",
            fontsize=style.font_size,
            color="green",
        )

    margin = 0.08 * L
    ax.set_xlim(-margin, L + margin)
    ax.set_ylim(y_r0 - 0.12 * L, top + 0.12 * L)
    ax.set_aspect("auto", adjustable="box")

    ax.set_xlabel("x [m]")
    ax.set_title("Viga simplemente apoyada")
    ax.grid(True, axis="x", alpha=0.25)
