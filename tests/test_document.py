from __future__ import annotations

import io
from pathlib import Path

import pytest

import dxfcodec
from dxfcodec.document import read, read_string, write
from dxfcodec.errors import DiagnosticKind, DXFPreconditionError, DXFStreamError, DXFVersionError
from dxfcodec.registry import Registry, new_entity
from dxfcodec.schema import EntitySchema, field, marker, point
from dxfcodec.schemas import SYMBOL_TABLE_TYPES, build_schemas, entity_header
from dxfcodec.versions import DXFVersion
from tests._dxf_helpers import dxf_document, dxf_text, written_tags


def _sample_text(version: str = "AC1015") -> str:
    return dxf_text(
        (999, "sample drawing"),
        (0, "SECTION"),
        (2, "HEADER"),
        (9, "$ACADVER"),
        (1, version),
        (9, "$INSUNITS"),
        (70, "4"),
        (0, "ENDSEC"),
        (0, "SECTION"),
        (2, "CLASSES"),
        (0, "CLASS"),
        (1, "ACDBDICTIONARYWDFLT"),
        (0, "ENDSEC"),
        (0, "SECTION"),
        (2, "TABLES"),
        (0, "TABLE"),
        (2, "LTYPE"),
        (70, "1"),
        (0, "LTYPE"),
        (2, "CONTINUOUS"),
        (0, "ENDTAB"),
        (0, "TABLE"),
        (2, "LAYER"),
        (70, "1"),
        (0, "LAYER"),
        (5, "10"),
        (330, "2"),
        (100, "AcDbSymbolTableRecord"),
        (100, "AcDbLayerTableRecord"),
        (2, "WALLS"),
        (70, "0"),
        (62, "1"),
        (6, "CONTINUOUS"),
        (0, "ENDTAB"),
        (0, "ENDSEC"),
        (0, "SECTION"),
        (2, "BLOCKS"),
        (0, "BLOCK"),
        (100, "AcDbEntity"),
        (8, "0"),
        (100, "AcDbBlockBegin"),
        (2, "DOOR"),
        (70, "0"),
        (10, "0.0"),
        (20, "0.0"),
        (30, "0.0"),
        (0, "LINE"),
        (100, "AcDbEntity"),
        (8, "0"),
        (100, "AcDbLine"),
        (11, "1.0"),
        (0, "ENDBLK"),
        (100, "AcDbEntity"),
        (8, "0"),
        (100, "AcDbBlockEnd"),
        (0, "ENDSEC"),
        (0, "SECTION"),
        (2, "ENTITIES"),
        (0, "LINE"),
        (5, "20"),
        (100, "AcDbEntity"),
        (8, "WALLS"),
        (100, "AcDbLine"),
        (10, "0.0"),
        (20, "0.0"),
        (30, "0.0"),
        (11, "10.0"),
        (21, "5.0"),
        (31, "0.0"),
        (0, "ARC"),
        (5, "21"),
        (100, "AcDbEntity"),
        (8, "0"),
        (100, "AcDbCircle"),
        (10, "1.0"),
        (20, "2.0"),
        (30, "0.0"),
        (40, "3.0"),
        (100, "AcDbArc"),
        (50, "0.0"),
        (51, "90.0"),
        (0, "WIPEOUT"),
        (5, "22"),
        (100, "AcDbEntity"),
        (8, "0"),
        (100, "AcDbWipeout"),
        (70, "8"),
        (0, "CIRCLE"),
        (5, "23"),
        (100, "AcDbEntity"),
        (8, "0"),
        (100, "AcDbCircle"),
        (10, "4.0"),
        (20, "4.0"),
        (30, "0.0"),
        (40, "1.5"),
        (0, "ENDSEC"),
        (0, "SECTION"),
        (2, "OBJECTS"),
        (0, "DICTIONARY"),
        (5, "C"),
        (0, "ENDSEC"),
        (0, "EOF"),
    )


def test_read_sections_and_version() -> None:
    doc = read_string(_sample_text())

    assert doc.version is DXFVersion.AC1015
    assert [entity.dxftype for entity in doc.entities] == ["LINE", "ARC", "CIRCLE"]
    assert doc.entity_types() == ["LINE", "ARC", "CIRCLE"]
    assert [entity.dxftype for entity in doc.section("BLOCKS")] == ["BLOCK", "LINE", "ENDBLK"]
    layers = list(doc.chain("LAYER", "TABLES"))
    assert [layer.dxf["name"] for layer in layers] == ["WALLS"]
    assert layers[0].dxf["owner"] == "2"
    assert layers[0].color == 1


def test_unknown_entity_type_is_skipped_with_diagnostic() -> None:
    doc = read_string(_sample_text())

    kinds = [diagnostic.kind for diagnostic in doc.diagnostics]
    assert kinds == [DiagnosticKind.UNKNOWN_ENTITY_TYPE]
    assert doc.diagnostics[0].dxftype == "WIPEOUT"
    circle = doc.chain("CIRCLE").first
    assert circle.dxf["radius"] == 1.5
    assert circle.handle == 0x23


def test_entities_are_chained_per_type() -> None:
    doc = read_string(
        dxf_document(
            (0, "POINT"),
            (8, "A"),
            (0, "LINE"),
            (8, "B"),
            (0, "POINT"),
            (8, "C"),
        )
    )

    points = doc.chain("POINT")
    assert len(points) == 2
    assert points.first.next is points.last
    assert [entity.layer for entity in doc.entities] == ["A", "B", "C"]
    assert len(doc.chain("WIPEOUT")) == 0


def test_missing_header_defaults_to_r12() -> None:
    doc = read_string(dxf_document((0, "LINE"), (8, "0"), (38, "2.0")))

    assert doc.version is DXFVersion.AC1009
    assert doc.chain("LINE").first.dxf["elevation"] == 2.0


def test_version_keyword_overrides_header() -> None:
    doc = read_string(dxf_document((0, "LINE"), (8, "0"), version="AC1015"), version="R12")

    assert doc.version is DXFVersion.AC1009


def test_unknown_header_version_reads_as_newest() -> None:
    doc = read_string(dxf_document((0, "LINE"), (8, "0"), (11, "2.0"), version="AC9999"))

    assert doc.version is DXFVersion.AC1032
    assert [diagnostic.kind for diagnostic in doc.diagnostics] == [DiagnosticKind.UNSUPPORTED_VERSION]
    assert doc.diagnostics[0].value == "AC9999"
    assert doc.chain("LINE").first.dxf["end_x"] == 2.0


def test_unknown_version_keyword_raises() -> None:
    with pytest.raises(DXFVersionError):
        read_string(dxf_document((0, "LINE"), (8, "0")), version="AC9999")



def test_types_filter_limits_entities() -> None:
    doc = read_string(_sample_text(), types="circle, line")

    assert [entity.dxftype for entity in doc.entities] == ["LINE", "CIRCLE"]
    assert [entity.dxftype for entity in doc.section("BLOCKS")] == ["BLOCK", "LINE", "ENDBLK"]


@pytest.mark.parametrize(
    ("types", "expected"),
    [
        (None, ["LINE", "ARC", "CIRCLE"]),
        ("ARC", ["ARC"]),
        ("C*", ["CIRCLE"]),
        ("ARC LINE", ["LINE", "ARC"]),
        (["line", "circle"], ["LINE", "CIRCLE"]),
        ("*", ["LINE", "ARC", "CIRCLE"]),
        ("WIPEOUT", []),
    ],
)
def test_query_types(types, expected: list[str]) -> None:
    doc = read_string(_sample_text())

    assert [entity.dxftype for entity in doc.query(types)] == expected


def test_read_from_path(tmp_path: Path) -> None:
    path = tmp_path / "sample.dxf"
    path.write_text(_sample_text(), encoding="utf-8")

    doc = dxfcodec.read(path)

    assert doc.path == str(path)
    assert len(doc.entities) == 3


def test_read_broken_stream_raises() -> None:
    text = dxf_document((0, "LINE"), (8, "0")).replace(" 8\n0\n", "eight\n0\n")

    with pytest.raises(DXFStreamError):
        read_string(text)


def test_write_then_read_reproduces_records() -> None:
    doc = read_string(_sample_text())
    stream = io.StringIO()

    written = doc.write(stream)
    again = read_string(stream.getvalue())

    assert written == 8
    assert again.version is DXFVersion.AC1015
    assert list(again.entities) == list(doc.entities)
    assert list(again.section("BLOCKS")) == list(doc.section("BLOCKS"))
    assert list(again.chain("LAYER", "TABLES")) == list(doc.chain("LAYER", "TABLES"))
    assert [record.dxf["name"] for record in again.chain("LTYPE", "TABLES")] == ["CONTINUOUS"]
    assert again.diagnostics == []


def test_write_frames_sections_and_tables() -> None:
    doc = read_string(_sample_text())
    stream = io.StringIO()

    write(doc, stream)

    tags = written_tags(stream.getvalue())
    assert tags[:5] == [(0, "SECTION"), (2, "HEADER"), (9, "$ACADVER"), (1, "AC1015"), (0, "ENDSEC")]
    assert tags[5:10] == [(0, "SECTION"), (2, "TABLES"), (0, "TABLE"), (2, "LTYPE"), (70, "1")]
    assert tags[-1] == (0, "EOF")
    section_names = [tags[i + 1][1] for i, tag in enumerate(tags) if tag == (0, "SECTION")]
    assert section_names == ["HEADER", "TABLES", "BLOCKS", "ENTITIES"]


def test_write_downgrades_to_r12() -> None:
    doc = read_string(_sample_text())
    stream = io.StringIO()

    write(doc, stream, version="R12")

    tags = written_tags(stream.getvalue())
    assert (1, "AC1009") in tags
    assert not any(code in (100, 330) for code, _ in tags)


def test_write_skips_records_without_layer(tmp_path: Path) -> None:
    doc = read_string(_sample_text())
    doc.chain("ARC").first.set("layer", "")

    written = doc.write(tmp_path / "out" / "rewritten.dxf")

    assert written == 7
    assert doc.diagnostics[-1].kind is DiagnosticKind.SKIPPED_RECORD
    again = read(tmp_path / "out" / "rewritten.dxf")
    assert [entity.dxftype for entity in again.entities] == ["LINE", "CIRCLE"]


def test_add_and_write_new_entities() -> None:
    doc = dxfcodec.Document(version=DXFVersion.AC1009)
    line = new_entity("LINE")
    line.set_point("end", (3.0, 4.0, 0.0))
    doc.add(line)
    stream = io.StringIO()

    assert doc.write(stream) == 1
    assert list(read_string(stream.getvalue()).entities) == [line]


def test_write_requires_document() -> None:
    with pytest.raises(DXFPreconditionError):
        write(None, io.StringIO())


def test_section_clear_releases_records() -> None:
    doc = read_string(_sample_text())
    line = doc.chain("LINE").first

    doc.entities.clear()

    assert len(doc.entities) == 0
    assert line.chain is None
    assert line.dxf == {}


def test_write_keeps_text_records_with_empty_strings() -> None:
    doc = read_string(
        dxf_document(
            (0, "TEXT"),
            (8, "0"),
            (1, ""),
            (0, "ATTDEF"),
            (8, "0"),
            (1, ""),
            (3, ""),
            (2, "TAG1"),
            version="AC1015",
        )
    )
    stream = io.StringIO()

    written = doc.write(stream)
    again = read_string(stream.getvalue())

    assert written == 2
    assert [entity.dxftype for entity in again.entities] == ["TEXT", "ATTDEF"]
    assert again.chain("ATTDEF").first.dxf["prompt"] == ""
    assert again.chain("ATTDEF").first.dxf["tag"] == "TAG1"
    assert not any(diagnostic.kind is DiagnosticKind.SKIPPED_RECORD for diagnostic in doc.diagnostics)


def test_read_rejects_bytes_outside_the_encoding(tmp_path: Path) -> None:
    path = tmp_path / "cp1252.dxf"
    path.write_bytes(dxf_document((0, "LINE"), (8, "Café")).encode("cp1252"))

    with pytest.raises(DXFStreamError):
        read(path)


def test_read_with_explicit_encoding(tmp_path: Path) -> None:
    path = tmp_path / "cp1252.dxf"
    path.write_bytes(dxf_document((0, "LINE"), (8, "Café"), version="AC1009").encode("cp1252"))
    output = tmp_path / "out.dxf"

    doc = read(path, encoding="cp1252")
    doc.write(output, encoding="cp1252")

    assert doc.chain("LINE").first.layer == "Café"
    assert b"Caf\xe9" in output.read_bytes()


def test_custom_registry_is_used_for_reading_and_writing() -> None:
    wipeout_schema = EntitySchema(
        "WIPEOUT",
        entity_header(),
        [marker("AcDbWipeout"), point(10, "insert", required=True), field(70, "display", 7)],
    )
    registry = Registry([*build_schemas(), wipeout_schema], table_types=SYMBOL_TABLE_TYPES)
    doc = read_string(
        dxf_document((0, "WIPEOUT"), (8, "0"), (10, "1.5"), (70, "3"), version="AC1015"),
        registry=registry,
    )
    stream = io.StringIO()

    written = doc.write(stream)

    assert doc.registry is registry
    assert [entity.dxftype for entity in doc.query("WIPE*")] == ["WIPEOUT"]
    assert written == 1
    again = read_string(stream.getvalue(), registry=registry)
    assert list(again.entities) == list(doc.entities)
    assert again.chain("WIPEOUT").first.dxf["display"] == 3
