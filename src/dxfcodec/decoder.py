"""Generic tag-span decoder.

Reads tags for one entity until a code-0 tag, which is pushed back onto the
reader for whoever handles the next entity or section. Only stream failures
abort; schema mismatches become diagnostics and decoding goes on.
"""

from __future__ import annotations

import logging
from typing import Any

from .collection import EntityChain
from .entity import Entity
from .errors import Diagnostic, DiagnosticKind, DXFPreconditionError, report
from .schema import EntitySchema, FieldSlot
from .tags import (
    APP_GROUP_CODE,
    COMMENT_CODE,
    SUBCLASS_CODE,
    XDATA_MAX_CODE,
    XDATA_MIN_CODE,
    Tag,
    TagReader,
    parse_value,
)
from .versions import DXFVersion, parse_version

logger = logging.getLogger(__name__)


class _SpanDecoder:
    def __init__(
        self,
        schema: EntitySchema,
        reader: TagReader,
        version: DXFVersion,
        diagnostics: list[Diagnostic] | None,
    ) -> None:
        self.schema = schema
        self.reader = reader
        self.version = version
        self.diagnostics = diagnostics
        self.subclass: str | None = None
        self.app_group: str | None = None
        self.filled: set[str] = set()
        self.entity = Entity(dxftype=schema.dxftype, dxf=schema.new_fields())

    def run(self) -> Entity:
        reader = self.reader
        while True:
            tag = reader.next_tag()
            if tag is None:
                logger.debug(
                    "end of input inside %s entity at line %d", self.schema.dxftype, reader.line_number
                )
                break
            if tag.code == 0:
                reader.unread(tag)
                break
            self._consume(tag)
        return self.entity

    def _consume(self, tag: Tag) -> None:
        code = tag.code
        if code == COMMENT_CODE:
            logger.debug("DXF comment: %s", tag.value)
            return
        if code == APP_GROUP_CODE:
            self._app_group(tag)
            return
        if code == SUBCLASS_CODE:
            self._subclass(tag)
            return
        if XDATA_MIN_CODE <= code <= XDATA_MAX_CODE:
            self.entity.xdata.append(tag)
            return

        slot = self._match(tag)
        if slot is None:
            return
        try:
            value = parse_value(slot.kind, tag.value)
        except ValueError:
            self._report(
                DiagnosticKind.VALUE_PARSE_FAILURE,
                f"cannot read {tag.value!r} as {slot.kind.value} for field {slot.name!r}",
                tag,
            )
            if slot.group is not None and self._is_leader(slot):
                self._open_row(slot, slot.default)
            return
        self._apply(slot, value)

    def _subclass(self, tag: Tag) -> None:
        name = tag.value.strip()
        declared = self.schema.marker_named(name, self.version)
        if declared is None:
            self._report(
                DiagnosticKind.SUBCLASS_MARKER_MISMATCH,
                f"unexpected subclass marker {name!r} for {self.version.name}",
                tag,
            )
            self.subclass = name
            return
        if declared.optional or name != declared.name:
            self.entity.subclasses[declared.name] = name
        self.subclass = declared.name

    def _app_group(self, tag: Tag) -> None:
        text = tag.value.strip()
        if text.startswith("{"):
            self.app_group = text
        elif text == "}":
            self.app_group = None
        else:
            self._report(DiagnosticKind.UNKNOWN_GROUP_CODE, f"malformed application group {text!r}", tag)

    def _match(self, tag: Tag) -> FieldSlot | None:
        code = tag.code
        candidates = [
            slot for slot in self.schema.slots_for(code) if slot.app_group == self.app_group
        ]
        if not candidates:
            where = f" inside {self.app_group}" if self.app_group else ""
            self._report(DiagnosticKind.UNKNOWN_GROUP_CODE, f"unknown group code {code}{where}", tag)
            return None
        active = [slot for slot in candidates if slot.accepts(self.version)]
        if not active:
            self._report(
                DiagnosticKind.VERSION_GATED,
                f"group code {code} is not valid in {self.version.name}",
                tag,
            )
            return None
        if len(active) == 1:
            return active[0]

        in_subclass = [slot for slot in active if slot.subclass == self.subclass]
        if len(in_subclass) == 1:
            return in_subclass[0]
        for slot in in_subclass or active:
            if slot.repeated or slot.name not in self.filled:
                return slot
        self._report(
            DiagnosticKind.AMBIGUOUS_GROUP_CODE,
            f"group code {code} matches {', '.join(slot.name for slot in active)}",
            tag,
        )
        return None

    def _is_leader(self, slot: FieldSlot) -> bool:
        leader = self.schema.group_leader(slot)
        return leader is not None and leader.name == slot.name

    def _open_row(self, leader: FieldSlot, value: Any) -> None:
        for member in self.schema.groups[leader.group]:
            self.entity.dxf[member.name].append(value if member.name == leader.name else member.default)

    def _apply(self, slot: FieldSlot, value: Any) -> None:
        fields = self.entity.dxf
        if slot.group is not None:
            if self._is_leader(slot):
                self._open_row(slot, value)
            else:
                column = fields[slot.name]
                if not column:
                    leader = self.schema.group_leader(slot)
                    self._open_row(leader, leader.default)
                column[-1] = value
        elif slot.repeated:
            fields[slot.name].append(value)
        else:
            fields[slot.name] = value
        self.filled.add(slot.name)

    def _report(self, kind: DiagnosticKind, message: str, tag: Tag) -> None:
        report(
            self.diagnostics,
            kind,
            message,
            dxftype=self.schema.dxftype,
            line=self.reader.line_number,
            tag=tag,
        )


def decode_entity(
    schema: EntitySchema,
    reader: TagReader,
    version: DXFVersion | str,
    *,
    diagnostics: list[Diagnostic] | None = None,
) -> Entity:
    """Decode one entity span; the caller has already read its ``0/<TYPE>`` tag."""
    if schema is None:
        raise DXFPreconditionError("decode_entity requires a schema")
    if reader is None:
        raise DXFPreconditionError("decode_entity requires a tag reader")
    return _SpanDecoder(schema, reader, parse_version(version), diagnostics).run()


def decode_chain(
    schema: EntitySchema,
    reader: TagReader,
    version: DXFVersion | str,
    *,
    diagnostics: list[Diagnostic] | None = None,
) -> EntityChain:
    """Decode consecutive entities of the schema's type into one chain."""
    if schema is None:
        raise DXFPreconditionError("decode_chain requires a schema")
    chain = EntityChain(schema.dxftype)
    while True:
        chain.append(decode_entity(schema, reader, version, diagnostics=diagnostics))
        tag = reader.next_tag()
        if tag is None:
            break
        if tag.code == 0 and tag.value.strip().upper() == schema.dxftype:
            continue
        reader.unread(tag)
        break
    return chain
