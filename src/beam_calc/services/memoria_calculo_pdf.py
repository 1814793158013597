# path: src/beam_calc/services/memoria_calculo_pdf.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple

import matplotlib
from reportlab.lib import colors, pagesizes
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.platypus import Image, PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from beam_calc.domain.inputs import BeamInput
from beam_calc.domain.loads import LoadKind
from beam_calc.domain.results import BeamResult
from beam_calc.domain.units import unit_label
from beam_calc.engine.serviceability import DeflectionCheck
from beam_calc.services.display import DEFAULT_SETTINGS, DisplaySettings, format_result

# Nota: de matplotlib solo se usan las fuentes DejaVu que trae (Helvetica no
# tiene δ, ⁴ ni ∞). Acepta paths a imágenes ya generadas (esquema de la viga,
# V, M, δ) y resultados pre-calculados.

logger = logging.getLogger(__name__)

FONT = "DejaVuSans"
FONT_BOLD = "DejaVuSans-Bold"
FONT_MONO = "DejaVuSansMono"

_TTF_FILES = {
    FONT: "DejaVuSans.ttf",
    FONT_BOLD: "DejaVuSans-Bold.ttf",
    FONT_MONO: "DejaVuSansMono.ttf",
}


def register_fonts() -> None:
    """Registra las TTF DejaVu (una sola vez por proceso)."""
    registered = set(pdfmetrics.getRegisteredFontNames())
    ttf_dir = os.path.join(matplotlib.get_data_path(), "fonts", "ttf")
    for name, filename in _TTF_FILES.items():
        if name in registered:
            continue
        pdfmetrics.registerFont(TTFont(name, os.path.join(ttf_dir, filename)))
    pdfmetrics.registerFontFamily(FONT, normal=FONT, bold=FONT_BOLD, italic=FONT, boldItalic=FONT_BOLD)


def _report_styles():
    register_fonts()
    styles = getSampleStyleSheet()
    for name in styles.byName:
        st = styles[name]
        is_bold = name.startswith("Heading") or name == "Title"
        st.fontName = FONT_BOLD if is_bold else FONT
    styles.add(ParagraphStyle(name="H1c", parent=styles["Heading1"], alignment=TA_CENTER))
    styles.add(ParagraphStyle(name="Small", parent=styles["BodyText"], fontSize=9, leading=11))
    styles.add(ParagraphStyle(name="MonoSmall", parent=styles["BodyText"], fontName=FONT_MONO, fontSize=8, leading=10))
    return styles


@dataclass(frozen=True)
class MemoriaHeader:
    titulo: str
    cliente_proyecto: str = ""
    autor: str = ""
    fecha: Optional[datetime] = None
    revision: str = "A"


@dataclass(frozen=True)
class MemoriaCaso:
    unidades: str
    tipo_carga: str
    datos: Sequence[Tuple[str, str]]  # (magnitud [unidad], valor)


@dataclass(frozen=True)
class MemoriaResultados:
    resultado: BeamResult
    flecha: Optional[DeflectionCheck] = None


def caso_from_input(inp: BeamInput) -> MemoriaCaso:
    """Arma los datos del caso con las etiquetas de unidad del sistema elegido."""
    u = inp.unit_system
    datos = [
        (f"Luz L [{unit_label(u, 'span')}]", _f(inp.span or 0.0, 3)),
        (f"E [{unit_label(u, 'elastic_modulus')}]", _f(inp.elastic_modulus or 0.0, 3)),
        (f"I [{unit_label(u, 'moment_of_inertia')}]", _f(inp.moment_of_inertia or 0.0, 3)),
    ]
    if inp.load_kind is LoadKind.DISTRIBUTED:
        tipo = "Distribuida uniforme en toda la luz"
        datos.append((f"w [{unit_label(u, 'distributed_load')}]", _f(inp.load.magnitude or 0.0, 6)))
    else:
        tipo = "Puntual en L/2"
        datos.append((f"P [{unit_label(u, 'point_load')}]", _f(inp.load.magnitude or 0.0, 3)))
    return MemoriaCaso(unidades=u.value, tipo_carga=tipo, datos=datos)


def export_memoria_pdf(
    out_pdf_path: str,
    header: MemoriaHeader,
    caso: MemoriaCaso,
    resultados: MemoriaResultados,
    imagenes: Optional[Dict[str, str]] = None,
    settings: DisplaySettings = DEFAULT_SETTINGS,
    page_size=pagesizes.A4,
) -> None:
    """
    Genera una Memoria de Cálculo en PDF (A4) para la viga simplemente apoyada.

    imagenes: claves "viga", "v", "m", "d" -> path a PNG/JPG ya generado.
    """
    imgs = _normalize_images_dict(imagenes)

    styles = _report_styles()

    doc = SimpleDocTemplate(
        out_pdf_path,
        pagesize=page_size,
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=12 * mm,
        bottomMargin=12 * mm,
        title=header.titulo,
    )

    story: List[object] = []

    # ----------------- Portada -----------------
    story.append(Paragraph(header.titulo, styles["H1c"]))
    story.append(Spacer(1, 4 * mm))

    fecha = header.fecha or datetime.now()
    meta_rows = [
        ["Proyecto / Cliente:", header.cliente_proyecto or "-"],
        ["Autor:", header.autor or "-"],
        ["Fecha:", fecha.strftime("%Y-%m-%d %H:%M")],
        ["Revisión:", header.revision],
        ["Unidades de entrada:", caso.unidades],
    ]
    t = Table(meta_rows, colWidths=[40 * mm, 140 * mm])
    t.setStyle(_kv_table_style())
    story.append(t)
    story.append(Spacer(1, 6 * mm))

    story.append(Paragraph("Alcance", styles["Heading2"]))
    story.append(
        Paragraph(
            "Viga simplemente apoyada de un tramo, con carga distribuida uniforme en toda la luz "
            "o carga puntual en el centro. Se calculan reacciones, corte y momento máximos y flecha máxima.",
            styles["BodyText"],
        )
    )
    story.append(Spacer(1, 4 * mm))

    # ----------------- Base teórica -----------------
    story.append(Paragraph("Base teórica y supuestos", styles["Heading2"]))
    base = [
        "Hipótesis: material elástico lineal, pequeñas deformaciones, viga de Euler-Bernoulli prismática.",
        "Las entradas se convierten a unidades SI (m, kN, kN/m², m⁴) antes de calcular.",
        "Resultados en unidades fijas kN, kN·m y mm, sin importar el sistema de entrada.",
        "La flecha se informa como magnitud (positiva hacia abajo).",
    ]
    story.extend(_bullets(base, styles))
    story.append(Spacer(1, 3 * mm))

    story.append(Paragraph("Ecuaciones principales", styles["Heading3"]))
    eq = [
        "Distribuida:  R = w·L/2   Mmax = w·L²/8   δmax = 5·w·L⁴/(384·E·I)",
        "Puntual L/2:  R = P/2     Mmax = P·L/4    δmax = P·L³/(48·E·I)",
        "Vmax = R (en los apoyos)",
    ]
    story.extend(_mono_block(eq, styles))
    story.append(Spacer(1, 4 * mm))

    # ----------------- Datos del caso -----------------
    story.append(Paragraph("Datos del caso", styles["Heading2"]))
    drows = [["Tipo de carga", caso.tipo_carga]] + [[a, b] for a, b in caso.datos]
    t = Table(drows, colWidths=[55 * mm, 125 * mm])
    t.setStyle(_kv_table_style())
    story.append(t)
    story.append(Spacer(1, 4 * mm))

    # ----------------- Resultados -----------------
    story.append(Paragraph("Resultados", styles["Heading2"]))
    rrows = [["Magnitud", "Valor", "Unidad"]]
    for label, value, unit in format_result(resultados.resultado, settings):
        rrows.append([label, value, unit])
    t = Table(rrows, colWidths=[80 * mm, 60 * mm, 40 * mm])
    t.setStyle(_grid_table_style(header_rows=1))
    story.append(t)
    story.append(Spacer(1, 3 * mm))

    chk = resultados.flecha
    if chk is not None:
        story.append(Paragraph("Serviciabilidad (flecha)", styles["Heading3"]))
        ratio = "∞" if chk.span_ratio == float("inf") else _f(chk.span_ratio, 0)
        rows = [["Límite", "δ adm [mm]", "δmax [mm]", "Verifica"]]
        for r in chk.rows:
            rows.append([
                f"L/{r.denominator}",
                _f(r.allowable_mm, settings.decimals),
                _f(chk.max_deflection_mm, settings.decimals),
                "Sí" if r.ok else "No",
            ])
        t = Table(rows, colWidths=[35 * mm, 50 * mm, 50 * mm, 45 * mm])
        t.setStyle(_grid_table_style(header_rows=1))
        story.append(t)
        story.append(Paragraph(f"Relación L/δ = {ratio}", styles["Small"]))
        story.append(Spacer(1, 3 * mm))

    # ----------------- Figuras -----------------
    if imgs:
        story.append(PageBreak())
        story.append(Paragraph("Figuras", styles["Heading2"]))

        _append_figure(story, styles, "viga", "Esquema de la viga", imgs, max_w=180 * mm, max_h=70 * mm)
        _append_figure(story, styles, "v", "Diagrama de corte V(x)", imgs, max_w=180 * mm, max_h=70 * mm)
        _append_figure(story, styles, "m", "Diagrama de momento M(x)", imgs, max_w=180 * mm, max_h=70 * mm)
        _append_figure(story, styles, "d", "Elástica δ(x)", imgs, max_w=180 * mm, max_h=70 * mm)

    doc.build(story)
    logger.info("Memoria PDF exportada: %s", out_pdf_path)


# ----------------- helpers -----------------

def _normalize_images_dict(imagenes: Optional[Dict[str, str]]) -> Dict[str, str]:
    if not imagenes:
        return {}
    out: Dict[str, str] = {}
    for k, v in imagenes.items():
        kk = (k or "").strip().lower()
        vv = (v or "").strip()
        if not kk or not vv:
            continue
        out[kk] = vv
    return out


def _append_figure(story: List[object], styles, key: str, title: str, imgs: Dict[str, str], *, max_w: float, max_h: float):
    story.append(Paragraph(title, styles["Heading3"]))
    path = (imgs.get(key) or "").strip()
    if path and os.path.exists(path):
        story.append(_img(path, max_w=max_w, max_h=max_h))
    else:
        # Dejar evidencia en el PDF si no se insertó la imagen
        story.append(Paragraph(f"(Sin imagen: '{key}' no disponible o no existe en disco)", styles["Small"]))
    story.append(Spacer(1, 3 * mm))


def _f(v: float, dec: int) -> str:
    s = f"{float(v):.{dec}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _bullets(items: List[str], styles):
    out: List[object] = []
    for it in items:
        out.append(Paragraph(f"• {it}", styles["BodyText"]))
        out.append(Spacer(1, 1.2 * mm))
    return out


def _mono_block(lines: List[str], styles):
    out: List[object] = []
    for ln in lines:
        out.append(Paragraph(ln.replace(" ", "&nbsp;"), styles["MonoSmall"]))
    return out


def _kv_table_style():
    return TableStyle(
        [
            ("FONTNAME", (0, 0), (-1, -1), FONT),
            ("FONTSIZE", (0, 0), (-1, -1), 10),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
            ("BACKGROUND", (0, 0), (0, -1), colors.whitesmoke),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("LEFTPADDING", (0, 0), (-1, -1), 6),
            ("RIGHTPADDING", (0, 0), (-1, -1), 6),
            ("TOPPADDING", (0, 0), (-1, -1), 4),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ]
    )


def _grid_table_style(header_rows: int = 1, font_size: int = 9):
    ts = [
        ("FONTNAME", (0, 0), (-1, -1), FONT),
        ("FONTSIZE", (0, 0), (-1, -1), font_size),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("LEFTPADDING", (0, 0), (-1, -1), 4),
        ("RIGHTPADDING", (0, 0), (-1, -1), 4),
        ("TOPPADDING", (0, 0), (-1, -1), 3),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
    ]
    if header_rows > 0:
        ts += [
            ("BACKGROUND", (0, 0), (-1, header_rows - 1), colors.lightgrey),
            ("FONTNAME", (0, 0), (-1, header_rows - 1), FONT_BOLD),
        ]
    return TableStyle(ts)


def _img(path: str, *, max_w: float, max_h: float):
    img = Image(path)
    iw, ih = img.imageWidth, img.imageHeight
    if iw <= 0 or ih <= 0:
        return img
    scale = min(max_w / iw, max_h / ih, 1.0)
    img.drawWidth = iw * scale
    img.drawHeight = ih * scale
    return img
