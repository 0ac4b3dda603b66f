from __future__ import annotations

import pytest

from dxfcodec.decoder import decode_entity
from dxfcodec.encoder import entity_tags
from dxfcodec.registry import REGISTRY, new_entity, schema_for
from dxfcodec.tags import Tag, TagReader
from tests._dxf_helpers import dxf_text, reader_for


def _reencode(entity, version: str):
    schema = schema_for(entity.dxftype)
    text = dxf_text(*entity_tags(entity, schema, version))
    return decode_entity(schema, TagReader.from_string(text), version)


def test_decoded_arc_survives_reencoding() -> None:
    reader = reader_for(
        (5, "1A"),
        (8, "0"),
        (10, "10.0"),
        (20, "20.0"),
        (30, "30.0"),
        (40, "5.0"),
        (50, "0.0"),
        (51, "90.0"),
    )
    arc = decode_entity(schema_for("ARC"), reader, "AC1009")

    assert _reencode(arc, "AC1009") == arc


@pytest.mark.parametrize("version", ["AC1009", "AC1015", "AC1032"])
def test_lwpolyline_survives_reencoding(version: str) -> None:
    lw = new_entity("LWPOLYLINE")
    lw.set("layer", "OUTLINE")
    lw.set("count", 2)
    lw.set("flags", 1)
    lw.set("vertex_x", [0.0, 2.5])
    lw.set("vertex_y", [1.0, -3.25])
    lw.set("bulge", [0.0, 1.0])
    lw.set("start_width", [0.5, 0.0])
    lw.set("end_width", [0.5, 0.0])
    lw.xdata.append(Tag(1001, "MYAPP"))

    assert _reencode(lw, version) == lw


def test_text_with_every_common_property_survives_reencoding() -> None:
    text = new_entity("TEXT")
    text.set("handle", 0xBEEF)
    text.set("owner", "1F")
    text.set("reactors", ["2A", "2B"])
    text.set("layer", "NOTES")
    text.set("linetype", "DASHED")
    text.set("color", 3)
    text.set("linetype_scale", 0.5)
    text.set("visibility", 1)
    text.set_point("insert", (1.0, 2.0, 0.0))
    text.set("height", 2.5)
    text.set("text", "hello world")
    text.set("rotation", 45.0)
    text.set("valign", 2)

    assert _reencode(text, "AC1015") == text


def test_fields_outside_the_target_version_come_back_as_defaults() -> None:
    line = new_entity("LINE")
    line.set_point("end", (1.0, 0.0, 0.0))
    line.set("linetype_scale", 3.0)

    decoded = _reencode(line, "AC1009")

    assert decoded.dxf["linetype_scale"] == 1.0
    assert decoded.point("end") == (1.0, 0.0, 0.0)


@pytest.mark.parametrize("dxftype", sorted(REGISTRY.keywords("ENTITIES")))
def test_default_records_survive_reencoding(dxftype: str) -> None:
    entity = new_entity(dxftype)

    assert _reencode(entity, "AC1032") == entity


def test_marker_spelling_survives_reencoding() -> None:
    reader = reader_for(
        (100, "AcDbEntity"),
        (8, "0"),
        (100, "AcDb3dPolyline"),
        (66, "1"),
        (10, "0.0"),
        (20, "0.0"),
        (30, "0.0"),
        (70, "8"),
    )
    polyline = decode_entity(schema_for("POLYLINE"), reader, "AC1015")

    tags = list(entity_tags(polyline, schema_for("POLYLINE"), "AC1015"))

    assert Tag(100, "AcDb3dPolyline") in tags
    assert Tag(100, "AcDb2dPolyline") not in tags
    assert _reencode(polyline, "AC1015") == polyline


def test_rotated_dimension_survives_reencoding() -> None:
    dimension = new_entity("DIMENSION")
    dimension.set("dimtype", 32)
    dimension.set_point("defpoint2", (1.0, 2.0, 0.0))
    dimension.set("angle", 90.0)
    dimension.subclasses["AcDbRotatedDimension"] = "AcDbRotatedDimension"

    assert _reencode(dimension, "AC1015") == dimension


def test_spline_survives_reencoding() -> None:
    spline = new_entity("SPLINE")
    spline.set("flags", 10)
    spline.set("knot_count", 5)
    spline.set("knots", [0.0, 0.0, 0.5, 1.0, 1.0])
    spline.set("weights", [1.0, 0.25])
    spline.set("control_point_count", 2)
    spline.set("control_point_x", [0.0, 2.0])
    spline.set("control_point_y", [1.0, 3.0])
    spline.set("control_point_z", [0.0, 0.5])
    spline.set_point("start_tangent", (1.0, 0.0, 0.0))

    assert _reencode(spline, "AC1018") == spline


@pytest.mark.parametrize("dxftype", sorted(REGISTRY.keywords("TABLES")))
def test_default_table_records_survive_reencoding(dxftype: str) -> None:
    record = new_entity(dxftype)
    record.set("name", "RECORD1")

    assert _reencode(record, "AC1032") == record
