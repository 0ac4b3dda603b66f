from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

from .document import Document, read
from .entity import Entity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConvertResult:
    source_path: str | None
    output_path: str
    total_entities: int
    written_entities: int
    skipped_entities: int
    skipped_by_type: dict[str, int]


def to_dxf(
    source: str | Path | Document,
    output_path: str | Path,
    *,
    types: str | Iterable[str] | None = None,
    dxf_version: str = "R2010",
    strict: bool = False,
) -> ConvertResult:
    """Rebuild the ENTITIES section of ``source`` as an ezdxf document."""
    ezdxf = _require_ezdxf()
    source_path, doc = _resolve_document(source)

    dxf_doc = ezdxf.new(dxfversion=dxf_version)
    modelspace = dxf_doc.modelspace()

    total = 0
    written = 0
    skipped_by_type: dict[str, int] = {}

    for entity in doc.query(types):
        total += 1
        if _write_entity_to_modelspace(modelspace, entity):
            written += 1
            continue
        skipped_by_type[entity.dxftype] = skipped_by_type.get(entity.dxftype, 0) + 1

    skipped = total - written
    if strict and skipped > 0:
        summary = ", ".join(
            f"{dxftype}:{count}" for dxftype, count in sorted(skipped_by_type.items())
        )
        raise ValueError(f"failed to convert {skipped} entities ({summary})")

    out_path = Path(output_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    dxf_doc.saveas(str(out_path))
    logger.info("converted %d of %d entities to %s", written, total, out_path)

    return ConvertResult(
        source_path=source_path,
        output_path=str(out_path),
        total_entities=total,
        written_entities=written,
        skipped_entities=skipped,
        skipped_by_type=dict(sorted(skipped_by_type.items())),
    )


def _require_ezdxf():
    try:
        import ezdxf
    except Exception as exc:
        raise ImportError(
            "ezdxf is required for DXF export. "
            'Install it with `pip install "dxfcodec[dxf]"`.'
        ) from exc
    return ezdxf


def _resolve_document(source: str | Path | Document) -> tuple[str | None, Document]:
    if isinstance(source, Document):
        return source.path, source
    return str(source), read(source)


def _write_entity_to_modelspace(modelspace: Any, entity: Entity) -> bool:
    try:
        return _write_entity_to_modelspace_unsafe(modelspace, entity)
    except Exception as exc:
        logger.debug("cannot export %s entity: %s", entity.dxftype, exc)
        return False


def _write_entity_to_modelspace_unsafe(modelspace: Any, entity: Entity) -> bool:
    dxftype = entity.dxftype
    dxf = entity.dxf
    dxfattribs = _entity_dxfattribs(entity)

    if dxftype in {"LINE", "3DLINE"}:
        modelspace.add_line(_point3(entity, "start"), _point3(entity, "end"), dxfattribs=dxfattribs)
        return True

    if dxftype == "POINT":
        modelspace.add_point(_point3(entity, "location"), dxfattribs=dxfattribs)
        return True

    if dxftype == "CIRCLE":
        modelspace.add_circle(
            _point3(entity, "center"),
            float(dxf.get("radius", 0.0)),
            dxfattribs=dxfattribs,
        )
        return True

    if dxftype == "ARC":
        modelspace.add_arc(
            _point3(entity, "center"),
            float(dxf.get("radius", 0.0)),
            float(dxf.get("start_angle", 0.0)),
            float(dxf.get("end_angle", 360.0)),
            dxfattribs=dxfattribs,
        )
        return True

    if dxftype == "ELLIPSE":
        modelspace.add_ellipse(
            _point3(entity, "center"),
            major_axis=_point3(entity, "major_axis"),
            ratio=float(dxf.get("ratio", 1.0)),
            start_param=float(dxf.get("start_param", 0.0)),
            end_param=float(dxf.get("end_param", 0.0)),
            dxfattribs=dxfattribs,
        )
        return True

    if dxftype in {"SOLID", "TRACE", "3DFACE"}:
        points = [_point3(entity, f"vtx{index}") for index in range(4)]
        add = {
            "SOLID": modelspace.add_solid,
            "TRACE": modelspace.add_trace,
            "3DFACE": modelspace.add_3dface,
        }[dxftype]
        add(points, dxfattribs=dxfattribs)
        return True

    if dxftype in {"RAY", "XLINE"}:
        add = modelspace.add_ray if dxftype == "RAY" else modelspace.add_xline
        add(_point3(entity, "start"), _point3(entity, "unit_vector"), dxfattribs=dxfattribs)
        return True

    if dxftype == "LWPOLYLINE":
        return _write_lwpolyline(modelspace, entity, dxfattribs)

    if dxftype in {"TEXT", "ATTRIB", "ATTDEF"}:
        return _write_text_like(modelspace, entity, dxfattribs)

    if dxftype == "MTEXT":
        return _write_mtext(modelspace, entity, dxfattribs)

    if dxftype == "INSERT":
        # Block definitions are not exported; keep the insert location visible.
        modelspace.add_point(_point3(entity, "insert"), dxfattribs=dxfattribs)
        return True

    return False


def _write_lwpolyline(modelspace: Any, entity: Entity, dxfattribs: dict[str, Any]) -> bool:
    dxf = entity.dxf
    points = entity.points("vertex")
    if not points:
        return False
    start_widths = list(dxf.get("start_width") or [])
    end_widths = list(dxf.get("end_width") or [])
    bulges = list(dxf.get("bulge") or [])
    vertices = []
    for i, (x, y) in enumerate(points):
        vertices.append(
            (
                float(x),
                float(y),
                float(start_widths[i]) if i < len(start_widths) else 0.0,
                float(end_widths[i]) if i < len(end_widths) else 0.0,
                float(bulges[i]) if i < len(bulges) else 0.0,
            )
        )
    lw = modelspace.add_lwpolyline(
        vertices,
        format="xyseb",
        close=bool(int(dxf.get("flags", 0)) & 1),
        dxfattribs=dxfattribs,
    )
    const_width = float(dxf.get("const_width", 0.0))
    if const_width:
        lw.dxf.const_width = const_width
    return True


def _write_text_like(modelspace: Any, entity: Entity, dxfattribs: dict[str, Any]) -> bool:
    dxf = entity.dxf
    text = str(dxf.get("text", "") or "")
    if text == "":
        return False
    text_entity = modelspace.add_text(
        text,
        height=float(dxf.get("height", 1.0)),
        rotation=float(dxf.get("rotation", 0.0)),
        dxfattribs=dxfattribs,
    )
    text_entity.dxf.insert = _point3(entity, "insert")
    return True


def _write_mtext(modelspace: Any, entity: Entity, dxfattribs: dict[str, Any]) -> bool:
    dxf = entity.dxf
    text = "".join(dxf.get("text_chunks") or []) + str(dxf.get("text", "") or "")
    if text == "":
        return False
    mtext = modelspace.add_mtext(text, dxfattribs=dxfattribs)
    mtext.set_location(_point3(entity, "insert"))
    mtext.dxf.char_height = float(dxf.get("char_height", 1.0))
    return True


def _entity_dxfattribs(entity: Entity) -> dict[str, Any]:
    attribs: dict[str, Any] = {"layer": entity.layer}
    if entity.linetype.upper() not in ("BYLAYER", ""):
        attribs["linetype"] = entity.linetype
    color = _to_valid_aci(entity.color)
    if color is not None:
        attribs["color"] = color
    return attribs


def _to_valid_aci(value: Any) -> int | None:
    try:
        aci = int(value)
    except Exception:
        return None
    if 1 <= aci <= 255:
        return aci
    return None


def _point3(entity: Entity, name: str) -> tuple[float, float, float]:
    value = entity.point(name)
    if len(value) >= 3:
        return (float(value[0]), float(value[1]), float(value[2]))
    if len(value) == 2:
        return (float(value[0]), float(value[1]), 0.0)
    raise ValueError(f"{entity.dxftype} entity has no point {name!r}")
