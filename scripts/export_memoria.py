# path: scripts/export_memoria.py
import os
import sys
import tempfile
import traceback

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from beam_calc.services.logging_setup import setup_logging
logger = setup_logging()

def _excepthook(exctype, value, tb):
    msg = "".join(traceback.format_exception(exctype, value, tb))
    logger.error("Excepción no capturada:\n%s", msg)
    # Mantener también el comportamiento por defecto (útil si hay consola)
    sys.__excepthook__(exctype, value, tb)

sys.excepthook = _excepthook

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from beam_calc.domain.inputs import BeamInput
from beam_calc.domain.loads import DistributedLoad
from beam_calc.domain.units import UnitSystem
from beam_calc.engine.diagrams import build_diagram
from beam_calc.engine.evaluate import evaluate
from beam_calc.engine.serviceability import check_deflection
from beam_calc.materials.material_db import MaterialDB, default_materials_path
from beam_calc.sections.shapes import RectSection
from beam_calc.services.memoria_calculo_pdf import (
    MemoriaHeader, MemoriaResultados, caso_from_input, export_memoria_pdf
)
from beam_calc.view.renderer_fbd import render_beam
from beam_calc.view.renderer_vm import render_deflection, render_moment, render_shear


def main(out_pdf: str = "memoria_viga.pdf") -> None:
    db = MaterialDB.from_txt(default_materials_path())
    sec = RectSection(b=100.0, h=300.0)  # mm

    inp = BeamInput(
        unit_system=UnitSystem.METRIC,
        span=4000.0,
        elastic_modulus=db.modulus("TIMBER-DF", UnitSystem.METRIC),
        moment_of_inertia=sec.Ix,
        load=DistributedLoad(magnitude=0.002),  # kN/mm = 2 kN/m
    )

    res = evaluate(inp)
    if res is None:
        logger.error("Entrada incompleta: no se exporta la memoria.")
        return

    diag = build_diagram(inp)
    with tempfile.TemporaryDirectory() as td:
        imgs = {}
        for key, draw in (
            ("viga", lambda ax: render_beam(ax, inp)),
            ("v", lambda ax: render_shear(ax, diag)),
            ("m", lambda ax: render_moment(ax, diag)),
            ("d", lambda ax: render_deflection(ax, diag)),
        ):
            fig, ax = plt.subplots(figsize=(8, 3))
            draw(ax)
            path = os.path.join(td, f"{key}.png")
            fig.savefig(path, dpi=120, bbox_inches="tight")
            plt.close(fig)
            imgs[key] = path

        export_memoria_pdf(
            out_pdf,
            header=MemoriaHeader(titulo="Memoria de cálculo - Viga simplemente apoyada"),
            caso=caso_from_input(inp),
            resultados=MemoriaResultados(resultado=res, flecha=check_deflection(inp)),
            imagenes=imgs,
        )


if __name__ == "__main__":
    main(*sys.argv[1:2])
