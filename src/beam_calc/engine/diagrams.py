from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple
import numpy as np

from beam_calc.domain.inputs import BeamInput
from beam_calc.domain.loads import LoadKind
from beam_calc.domain.units import M_TO_MM
from beam_calc.engine.evaluate import is_complete
from beam_calc.engine.normalize import normalize_inputs


@dataclass(frozen=True)
class BeamDiagram:
    """
    Diagramas V(x), M(x) y δ(x) cerrados para viga simplemente apoyada.

    Convención:
    - x en m desde el apoyo izquierdo, dominio [0, L]
    - V en kN (+ a la izquierda del tramo), M en kN·m (+ sagging)
    - δ en mm, positiva hacia abajo
    """
    kind: LoadKind
    L: float     # m
    q: float     # kN/m (distribuida) o kN (puntual)
    EI: float    # kN·m²

    @property
    def x_start(self) -> float:
        return 0.0

    @property
    def x_end(self) -> float:
        return self.L

    def eval_V(self, x: float) -> float:
        return float(self._eval_V_array(np.asarray([x], dtype=float))[0])

    def eval_M(self, x: float) -> float:
        return float(self._eval_M_array(np.asarray([x], dtype=float))[0])

    def eval_deflection(self, x: float) -> float:
        return float(self._eval_defl_array(np.asarray([x], dtype=float))[0])

    # -------------------------
    # Evaluadores vectorizados
    # -------------------------
    def _eval_V_array(self, x: np.ndarray) -> np.ndarray:
        L = self.L
        if self.kind is LoadKind.DISTRIBUTED:
            return self.q * (0.5 * L - x)
        # puntual: salto -P en L/2 (se toma el valor derecho en x = L/2)
        return np.where(x >= 0.5 * L, -0.5 * self.q, 0.5 * self.q)

    def _eval_M_array(self, x: np.ndarray) -> np.ndarray:
        L = self.L
        if self.kind is LoadKind.DISTRIBUTED:
            return self.q * x * (L - x) * 0.5
        # simétrico respecto de L/2
        xs = np.minimum(x, L - x)
        return 0.5 * self.q * xs

    def _eval_defl_array(self, x: np.ndarray) -> np.ndarray:
        L = self.L
        if self.kind is LoadKind.DISTRIBUTED:
            d = self.q * x * (L ** 3 - 2.0 * L * x ** 2 + x ** 3) / (24.0 * self.EI)
        else:
            xs = np.minimum(x, L - x)
            d = self.q * xs * (3.0 * L ** 2 - 4.0 * xs ** 2) / (48.0 * self.EI)
        return d * M_TO_MM

    # -------------------------
    # Muestreo (con salto en L/2 para la puntual)
    # -------------------------
    def _breakpoints(self) -> np.ndarray:
        if self.kind is LoadKind.MIDSPAN_POINT:
            return np.array([0.0, 0.5 * self.L, self.L], dtype=float)
        return np.array([0.0, self.L], dtype=float)

    def sample(self, n_per_segment: int = 80) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """
        Devuelve (x, V, M, δ) listos para plot.
        En L/2 (puntual) x se duplica: valor izquierdo y derecho del corte.
        """
        bps = self._breakpoints()

        x_out: List[float] = []
        V_out: List[float] = []

        for i in range(len(bps) - 1):
            a = float(bps[i])
            b = float(bps[i + 1])

            if i > 0:
                # salto en a: primero el valor izquierdo, linspace agrega el derecho
                x_out.append(a)
                V_out.append(self.eval_V(a - 1e-9 * self.L))

            xs = np.linspace(a, b, int(n_per_segment), endpoint=False, dtype=float)
            x_out.extend(xs.tolist())
            V_out.extend(self._eval_V_array(xs).tolist())

        # extremo derecho
        x_out.append(self.L)
        V_out.append(self.eval_V(self.L))

        x = np.asarray(x_out, dtype=float)
        V = np.asarray(V_out, dtype=float)
        M = self._eval_M_array(x)
        D = self._eval_defl_array(x)
        return x, V, M, D


def build_diagram(inp: BeamInput) -> Optional[BeamDiagram]:
    """
    Construye el diagrama con la MISMA normalización que el Evaluator.
    None si la entrada está incompleta.
    """
    if not is_complete(inp):
        return None

    beam = normalize_inputs(inp)
    EI = beam.modulus_kn_per_m2 * beam.inertia_m4
    if beam.kind is LoadKind.DISTRIBUTED:
        q = float(beam.distributed_kn_per_m)
    else:
        q = float(beam.point_kn)

    return BeamDiagram(kind=beam.kind, L=float(beam.length_m), q=q, EI=float(EI))
