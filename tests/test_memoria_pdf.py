# path: tests/test_memoria_pdf.py
import os
import tempfile
from datetime import datetime

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from reportlab.pdfbase import pdfmetrics

from beam_calc.engine.diagrams import build_diagram
from beam_calc.engine.evaluate import evaluate
from beam_calc.engine.serviceability import check_deflection
from beam_calc.services.memoria_calculo_pdf import (
    FONT, FONT_BOLD, FONT_MONO, MemoriaHeader, MemoriaResultados, _report_styles,
    caso_from_input, export_memoria_pdf, register_fonts
)
from beam_calc.view.renderer_fbd import render_beam
from beam_calc.view.renderer_vm import render_deflection, render_moment, render_shear


def test_caso_from_input_uses_unit_labels(us_udl, metric_point):
    caso = caso_from_input(us_udl)
    assert caso.unidades == "US"
    assert caso.datos[0][0] == "Luz L [in]"
    assert caso.datos[-1][0] == "w [kip/in]"

    caso = caso_from_input(metric_point)
    assert caso.unidades == "Metric"
    assert caso.datos[-1] == ("P [kN]", "10")


def test_export_memoria_pdf_creates_file(us_udl):
    with tempfile.TemporaryDirectory() as td:
        out = os.path.join(td, "memoria.pdf")

        header = MemoriaHeader(titulo="Test Memoria", fecha=datetime.now())
        resultados = MemoriaResultados(resultado=evaluate(us_udl), flecha=check_deflection(us_udl))

        export_memoria_pdf(out, header=header, caso=caso_from_input(us_udl), resultados=resultados, imagenes={})
        assert os.path.exists(out)
        assert os.path.getsize(out) > 0


def test_export_memoria_pdf_with_figures(metric_point):
    diag = build_diagram(metric_point)
    with tempfile.TemporaryDirectory() as td:
        imgs = {}
        for key, draw in (
            ("viga", lambda ax: render_beam(ax, metric_point)),
            ("v", lambda ax: render_shear(ax, diag)),
            ("m", lambda ax: render_moment(ax, diag)),
            ("d", lambda ax: render_deflection(ax, diag)),
        ):
            fig, ax = plt.subplots(figsize=(6, 2.5))
            draw(ax)
            path = os.path.join(td, f"{key}.png")
            fig.savefig(path, dpi=60)
            plt.close(fig)
            imgs[key] = path

        out = os.path.join(td, "memoria_figs.pdf")
        export_memoria_pdf(
            out,
            header=MemoriaHeader(titulo="Con figuras"),
            caso=caso_from_input(metric_point),
            resultados=MemoriaResultados(resultado=evaluate(metric_point)),
            imagenes=imgs,
        )
        assert os.path.getsize(out) > 0


def test_render_beam_incomplete_shows_prompt(metric_point):
    fig, ax = plt.subplots()
    render_beam(ax, metric_point.with_changes(span=None))
    assert len(ax.texts) == 1
    plt.close(fig)


def test_report_uses_fonts_with_greek_and_superscripts(us_udl):
    styles = _report_styles()
    assert styles["BodyText"].fontName == FONT
    assert styles["Heading2"].fontName == FONT_BOLD
    assert styles["MonoSmall"].fontName == FONT_MONO

    registered = pdfmetrics.getRegisteredFontNames()
    for name in (FONT, FONT_BOLD, FONT_MONO):
        assert name in registered

    face = pdfmetrics.getFont(FONT).face
    for ch in "δ⁴∞·":
        assert ord(ch) in face.charToGlyph

    # registrar dos veces no falla
    register_fonts()

    with tempfile.TemporaryDirectory() as td:
        out = os.path.join(td, "memoria_fuentes.pdf")
        export_memoria_pdf(
            out,
            header=MemoriaHeader(titulo="Fuentes δ L⁴ ∞"),
            caso=caso_from_input(us_udl),
            resultados=MemoriaResultados(resultado=evaluate(us_udl), flecha=check_deflection(us_udl)),
        )
        with open(out, "rb") as f:
            assert b"DejaVuSans" in f.read()
