from __future__ import annotations

from pathlib import Path
from typing import Iterator

from dxfcodec.tags import TagReader


def dxf_text(*tags: tuple[int, object]) -> str:
    """Render ``(code, value)`` pairs as an ASCII DXF tag stream."""
    return "".join(f"{code:>3}\n{value}\n" for code, value in tags)


def reader_for(*tags: tuple[int, object]) -> TagReader:
    return TagReader.from_string(dxf_text(*tags))


def dxf_document(*entity_tags: tuple[int, object], version: str | None = None) -> str:
    header: list[tuple[int, object]] = []
    if version is not None:
        header = [(0, "SECTION"), (2, "HEADER"), (9, "$ACADVER"), (1, version), (0, "ENDSEC")]
    body = [(0, "SECTION"), (2, "ENTITIES"), *entity_tags, (0, "ENDSEC"), (0, "EOF")]
    return dxf_text(*header, *body)


def written_tags(text: str) -> list[tuple[int, str]]:
    lines = text.splitlines()
    return [(int(lines[i].strip()), lines[i + 1]) for i in range(0, len(lines) - 1, 2)]


def iter_dxf_entities(path: Path) -> Iterator[dict[str, object]]:
    lines = path.read_text(encoding="utf-8", errors="replace").splitlines()
    section_name: str | None = None
    expect_section_name = False
    current_entity: dict[str, object] | None = None

    for i in range(0, len(lines) - 1, 2):
        code = lines[i].strip()
        value = lines[i + 1].strip()

        if code == "0":
            if current_entity is not None and section_name == "ENTITIES":
                yield current_entity
                current_entity = None

            if value == "SECTION":
                expect_section_name = True
                continue

            if value == "ENDSEC":
                section_name = None
                continue

            if section_name == "ENTITIES":
                current_entity = {"type": value, "groups": []}
            continue

        if expect_section_name and code == "2":
            section_name = value
            expect_section_name = False
            continue

        if section_name == "ENTITIES" and current_entity is not None:
            groups = current_entity["groups"]
            assert isinstance(groups, list)
            groups.append((code, value))

    if current_entity is not None and section_name == "ENTITIES":
        yield current_entity


def dxf_entities_of_type(path: Path, entity_type: str) -> list[dict[str, object]]:
    return [entity for entity in iter_dxf_entities(path) if entity["type"] == entity_type]


def group_float(entity: dict[str, object], code: str, default: float = 0.0) -> float:
    groups = entity["groups"]
    assert isinstance(groups, list)
    for group_code, raw_value in groups:
        if group_code == code:
            return float(raw_value)
    return default


def group_values(entity: dict[str, object], code: str) -> list[str]:
    groups = entity["groups"]
    assert isinstance(groups, list)
    return [raw_value for group_code, raw_value in groups if group_code == code]
