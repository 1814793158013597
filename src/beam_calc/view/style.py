from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class RenderStyle:
    beam_lw: float = 2

    arrow_lw: float = 1.0
    arrow_scale: float = 11.0

    dist_rect_lw: float = 0.9
    dist_rect_alpha: float = 0.12

    support_size_pctL: float = 3.0

    # Alturas (fijas, relativas a L)
    arrow_height_pctL: float = 12.0
    dist_height_pctL: float = 8.0

    diagram_lw: float = 1.5
    n_per_segment: int = 80
    font_size: int = 10
