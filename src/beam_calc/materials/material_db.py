from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from beam_calc.domain.units import KSI_TO_GPA, UnitSystem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Material:
    """
    Material con módulo elástico típico en ambos sistemas de unidades.

    Se usa solo como sugerencia de E para la entrada (no hay verificación
    de tensiones).
    """
    id: str
    family: str = ""
    E_ksi: float = 0.0
    E_GPa: float = 0.0
    notes: str = ""

    def modulus(self, unit_system: UnitSystem) -> float:
        """E en la unidad de entrada del sistema (ksi o GPa)."""
        if unit_system is UnitSystem.US:
            return float(self.E_ksi)
        return float(self.E_GPa)


class MaterialDB:
    def __init__(self, materials: List[Material]):
        self.materials: List[Material] = list(materials)
        self.by_id: Dict[str, Material] = {m.id.strip(): m for m in self.materials if m.id.strip()}

    def ids(self) -> List[str]:
        return [m.id for m in self.materials]

    def get(self, mat_id: str) -> Optional[Material]:
        return self.by_id.get((mat_id or "").strip())

    def modulus(self, mat_id: str, unit_system: UnitSystem) -> float:
        m = self.get(mat_id)
        if m is None:
            raise KeyError(f"Material desconocido: {mat_id!r}")
        return m.modulus(unit_system)

    @staticmethod
    def _norm(s: str) -> str:
        return (s or "").strip()

    @classmethod
    def from_txt(cls, path: str | Path) -> "MaterialDB":
        """
        Formato: una fila por material, separador ';'
          id;family;E_ksi;E_GPa;notes
        Líneas vacías y comentarios (# o //) se ignoran. Acepta coma decimal.
        Si falta uno de los módulos se deriva del otro.
        """
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"No existe el archivo de materiales: {p}")

        lines = p.read_text(encoding="utf-8", errors="replace").splitlines()
        rows: List[List[str]] = []
        for ln in lines:
            t = ln.strip()
            if not t:
                continue
            if t.startswith("#") or t.startswith("//"):
                continue
            rows.append([c.strip() for c in t.split(";")])

        if not rows:
            raise ValueError("Archivo de materiales vacío o sin filas válidas.")

        # Detectar header
        header = [h.strip() for h in rows[0]]
        has_header = any(x.lower() in {"id", "material", "e_ksi", "e_gpa"} for x in header)
        data_rows = rows[1:] if has_header else rows
        if not has_header:
            header = ["id", "family", "E_ksi", "E_GPa", "notes"]

        def idx(name: str) -> Optional[int]:
            name_l = name.lower()
            for i, h in enumerate(header):
                if h.lower() == name_l:
                    return i
            return None

        i_id = idx("id")
        if i_id is None:
            i_id = idx("material")
        i_family = idx("family")
        i_ksi = idx("E_ksi")
        i_gpa = idx("E_GPa")
        i_notes = idx("notes")

        def get_cell(row: List[str], i: Optional[int]) -> str:
            if i is None:
                return ""
            return row[i] if i < len(row) else ""

        def try_float(s: str) -> Optional[float]:
            t = (s or "").strip().replace(",", ".")
            if t == "":
                return None
            try:
                return float(t)
            except ValueError:
                return None

        mats: List[Material] = []
        for r in data_rows:
            mid = cls._norm(get_cell(r, i_id))
            if not mid:
                continue

            e_ksi = try_float(get_cell(r, i_ksi))
            e_gpa = try_float(get_cell(r, i_gpa))

            if e_ksi is None and e_gpa is None:
                # sin módulo el material no sirve
                logger.warning("Material '%s' sin E_ksi ni E_GPa: se ignora.", mid)
                continue
            if e_gpa is None:
                e_gpa = e_ksi * KSI_TO_GPA
            if e_ksi is None:
                e_ksi = e_gpa / KSI_TO_GPA

            mats.append(Material(
                id=mid,
                family=cls._norm(get_cell(r, i_family)),
                E_ksi=float(e_ksi),
                E_GPa=float(e_gpa),
                notes=cls._norm(get_cell(r, i_notes)),
            ))

        if not mats:
            raise ValueError("No se pudieron cargar materiales: faltan columnas o valores de E.")

        # ordenar por id para UI estable
        mats.sort(key=lambda m: m.id.upper())
        logger.info("Materiales cargados desde %s: %d", p, len(mats))
        return cls(mats)


def default_materials_path() -> Path:
    """
    Ruta por defecto dentro del paquete:
      src/beam_calc/data/moduli.txt
    """
    here = Path(__file__).resolve()
    return here.parents[1] / "data" / "moduli.txt"
