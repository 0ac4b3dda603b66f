"""Canonical tag emission for entity records.

The span is emitted without its leading ``0/<TYPE>`` tag, mirroring the
decoder; chain and document writers put the type tag in front.
"""

from __future__ import annotations

import logging
from typing import Iterator

from .collection import EntityChain
from .entity import Entity
from .errors import Diagnostic, DiagnosticKind, DXFPreconditionError, report
from .schema import EntitySchema, FieldSlot, Marker
from .tags import APP_GROUP_CODE, SUBCLASS_CODE, Tag, TagWriter, format_value
from .versions import DXFVersion, parse_version

logger = logging.getLogger(__name__)


def _check(entity: Entity, schema: EntitySchema) -> None:
    if entity is None:
        raise DXFPreconditionError("cannot encode a missing entity")
    if schema is None:
        raise DXFPreconditionError("cannot encode without a schema")
    if entity.dxftype != schema.dxftype:
        raise DXFPreconditionError(
            f"{entity.dxftype} entity cannot be encoded with the {schema.dxftype} schema"
        )


def _value(entity: Entity, slot: FieldSlot):
    if slot.count_of is not None:
        return len(entity.dxf.get(slot.count_of) or ())
    return entity.dxf.get(slot.name, slot.initial_value())


def _elided(entity: Entity, schema: EntitySchema, slot: FieldSlot) -> bool:
    if slot.required:
        return False
    point_name = schema.point_of(slot)
    if point_name is None:
        return slot.is_default(_value(entity, slot))
    # A point is written whole or not at all.
    return all(
        component.is_default(_value(entity, component))
        for component in schema.point_slots(point_name)
    )


def _rows(entity: Entity, schema: EntitySchema, group: str, version: DXFVersion) -> Iterator[Tag]:
    members = [member for member in schema.groups[group] if member.accepts(version)]
    leader = members[0]
    point_name = schema.point_of(leader)
    always = set(schema.points[point_name]) if point_name else {leader.name}
    columns = [list(entity.dxf.get(member.name) or []) for member in members]
    for index in range(len(columns[0])):
        for member, column in zip(members, columns):
            if index >= len(column):
                continue
            value = column[index]
            if member.name not in always and value == member.default:
                continue
            yield Tag(member.code, format_value(member.kind, value))


def _marker_tag(entity: Entity, item: Marker) -> Tag | None:
    name = entity.subclasses.get(item.name)
    if name is None:
        if item.optional:
            return None
        name = item.name
    return Tag(SUBCLASS_CODE, name)


def _iter_tags(entity: Entity, schema: EntitySchema, version: DXFVersion) -> Iterator[Tag]:
    for item in schema.layout:
        if isinstance(item, Marker):
            if item.accepts(version):
                tag = _marker_tag(entity, item)
                if tag is not None:
                    yield tag
            continue
        slot = item
        if not slot.accepts(version):
            continue
        if slot.group is not None:
            if schema.group_leader(slot).name == slot.name:
                yield from _rows(entity, schema, slot.group, version)
            continue
        if _elided(entity, schema, slot):
            continue
        value = _value(entity, slot)
        if value is None:
            continue
        values = value if slot.repeated else [value]
        if slot.app_group is not None:
            yield Tag(APP_GROUP_CODE, slot.app_group)
        for element in values:
            yield Tag(slot.code, format_value(slot.kind, element))
        if slot.app_group is not None:
            yield Tag(APP_GROUP_CODE, "}")
    yield from entity.xdata


def entity_tags(entity: Entity, schema: EntitySchema, version: DXFVersion | str) -> Iterator[Tag]:
    """Canonical tag sequence of ``entity`` for the ``version`` target."""
    _check(entity, schema)
    return _iter_tags(entity, schema, parse_version(version))


def encode_entity(
    entity: Entity,
    schema: EntitySchema,
    writer: TagWriter,
    version: DXFVersion | str,
) -> None:
    if writer is None:
        raise DXFPreconditionError("encode_entity requires a tag writer")
    writer.write_tags(entity_tags(entity, schema, version))


def validate_entity(entity: Entity, schema: EntitySchema) -> list[str]:
    """Structural problems that make a record unfit for writing."""
    _check(entity, schema)
    problems = []
    for slot in schema.slots:
        if not slot.required or slot.repeated:
            continue
        value = entity.dxf.get(slot.name)
        if value is None:
            problems.append(f"missing {slot.name}")
        elif slot.identifier and not str(value).strip():
            problems.append(f"empty {slot.name}")
    return problems


def encode_chain(
    chain: EntityChain,
    schema: EntitySchema,
    writer: TagWriter,
    version: DXFVersion | str,
    *,
    diagnostics: list[Diagnostic] | None = None,
) -> int:
    """Write every valid record of ``chain`` with its type tag; returns the count written."""
    if chain is None:
        raise DXFPreconditionError("encode_chain requires a chain")
    target = parse_version(version)
    written = 0
    for entity in chain:
        problems = validate_entity(entity, schema)
        if problems:
            handle = entity.handle
            label = f" with id-code {handle:X}" if handle is not None else ""
            report(
                diagnostics,
                DiagnosticKind.SKIPPED_RECORD,
                f"skipping {entity.dxftype} entity{label}: {', '.join(problems)}",
                dxftype=entity.dxftype,
            )
            continue
        writer.write_tag(0, schema.dxftype)
        encode_entity(entity, schema, writer, target)
        written += 1
    logger.debug("wrote %d of %d %s entities", written, len(chain), schema.dxftype)
    return written
