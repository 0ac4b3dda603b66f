from __future__ import annotations

import fnmatch
import io
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, TextIO

from .collection import EntityChain
from .decoder import decode_entity
from .encoder import encode_chain, encode_entity, validate_entity
from .entity import Entity
from .errors import Diagnostic, DiagnosticKind, DXFPreconditionError, DXFVersionError, report
from .registry import REGISTRY, Registry
from .tags import Tag, TagReader, TagWriter
from .versions import DEFAULT_VERSION, NEWEST, DXFVersion, parse_version

logger = logging.getLogger(__name__)

SUPPORTED_ENTITY_TYPES = REGISTRY.keywords("ENTITIES")
SUPPORTED_TABLE_TYPES = REGISTRY.keywords("TABLES")

_ENTITY_SECTIONS = ("BLOCKS", "ENTITIES")
_WRITE_ORDER = ("TABLES", "BLOCKS", "ENTITIES")


@dataclass
class Section:
    name: str
    order: list[Entity] = field(default_factory=list)
    chains: dict[str, EntityChain] = field(default_factory=dict)

    def add(self, entity: Entity) -> Entity:
        chain = self.chains.get(entity.dxftype)
        if chain is None:
            chain = self.chains[entity.dxftype] = EntityChain(entity.dxftype)
        chain.append(entity)
        self.order.append(entity)
        return entity

    def __iter__(self) -> Iterator[Entity]:
        return iter(self.order)

    def __len__(self) -> int:
        return len(self.order)

    def clear(self) -> None:
        self.order.clear()
        for chain in self.chains.values():
            chain.clear()
        self.chains.clear()


@dataclass
class Document:
    version: DXFVersion
    sections: dict[str, Section] = field(default_factory=dict)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    path: str | None = None
    registry: Registry = field(default=REGISTRY, repr=False, compare=False)

    def section(self, name: str) -> Section:
        name = name.upper()
        if name not in self.sections:
            self.sections[name] = Section(name)
        return self.sections[name]

    @property
    def entities(self) -> Section:
        return self.section("ENTITIES")

    def chain(self, dxftype: str, section: str = "ENTITIES") -> EntityChain:
        chains = self.section(section).chains
        return chains.get(dxftype.upper()) or EntityChain(dxftype.upper())

    def entity_types(self, section: str = "ENTITIES") -> list[str]:
        return list(self.section(section).chains)

    def query(self, types: str | Iterable[str] | None = None) -> Iterator[Entity]:
        selected = set(_normalize_types(types, self.registry.keywords("ENTITIES")))
        for entity in self.entities:
            if entity.dxftype in selected:
                yield entity

    def add(self, entity: Entity, section: str = "ENTITIES") -> Entity:
        return self.section(section).add(entity)

    def write(
        self,
        target: str | Path | TextIO,
        *,
        version: DXFVersion | str | None = None,
        encoding: str = "utf-8",
    ) -> int:
        return write(self, target, version=version, encoding=encoding)

    def export_dxf(self, output_path: str, **kwargs):
        from .convert import to_dxf

        return to_dxf(self, output_path, **kwargs)


def _normalize_types(
    types: str | Iterable[str] | None, supported: Iterable[str] = SUPPORTED_ENTITY_TYPES
) -> list[str]:
    default_types = list(supported)
    if types is None:
        return default_types
    if isinstance(types, str):
        tokens = re.split(r"[,\s]+", types.strip())
    else:
        tokens = list(types)

    normalized = [token.strip().upper() for token in tokens if token and token.strip()]
    if not normalized:
        return default_types
    if any(token in {"*", "ALL"} for token in normalized):
        return default_types

    selected: list[str] = []
    seen = set()
    for token in normalized:
        if any(ch in token for ch in "*?[]"):
            for name in default_types:
                if fnmatch.fnmatchcase(name, token) and name not in seen:
                    seen.add(name)
                    selected.append(name)
            continue
        if token in default_types and token not in seen:
            seen.add(token)
            selected.append(token)
    return selected


class _DocumentReader:
    def __init__(
        self,
        reader: TagReader,
        *,
        version: DXFVersion | None,
        types: str | Iterable[str] | None,
        registry: Registry,
    ) -> None:
        self.reader = reader
        self.registry = registry
        self.forced_version = version
        supported = registry.keywords("ENTITIES")
        self.type_filter = None if types is None else set(_normalize_types(types, supported))
        self.doc = Document(version=version or DEFAULT_VERSION, path=reader.name, registry=registry)

    def run(self) -> Document:
        reader = self.reader
        while True:
            tag = reader.next_tag()
            if tag is None:
                break
            if tag.code != 0:
                continue
            keyword = tag.value.strip().upper()
            if keyword == "EOF":
                break
            if keyword != "SECTION":
                continue
            name_tag = reader.next_tag()
            if name_tag is None:
                break
            if name_tag.code != 2:
                reader.unread(name_tag)
                continue
            self._section(name_tag.value.strip().upper())
        return self.doc

    def _section(self, name: str) -> None:
        logger.debug("reading %s section at line %d", name, self.reader.line_number)
        if name == "HEADER":
            self._header()
        elif name == "TABLES":
            self._tables()
        elif name in _ENTITY_SECTIONS:
            self._entities(name)
        else:
            self._skip_section()

    def _header(self) -> None:
        reader = self.reader
        variable = None
        for tag in reader:
            if tag.code == 0:
                reader.unread(tag)
                break
            if tag.code == 9:
                variable = tag.value.strip().upper()
                continue
            if variable == "$ACADVER" and tag.code == 1:
                if self.forced_version is None:
                    self._header_version(tag)
                variable = None
        self._expect_endsec()

    def _header_version(self, tag: Tag) -> None:
        try:
            self.doc.version = parse_version(tag.value)
        except DXFVersionError:
            report(
                self.doc.diagnostics,
                DiagnosticKind.UNSUPPORTED_VERSION,
                f"unknown $ACADVER {tag.value.strip()!r}; reading as {NEWEST.name}",
                line=self.reader.line_number,
                tag=tag,
            )
            self.doc.version = NEWEST

    def _tables(self) -> None:
        reader = self.reader
        while True:
            tag = reader.next_tag()
            if tag is None:
                return
            if tag.code != 0:
                continue
            keyword = tag.value.strip().upper()
            if keyword == "ENDSEC":
                return
            if keyword in ("TABLE", "ENDTAB"):
                self._skip_span()
                continue
            entry = self.registry.lookup(keyword)
            if entry is None or entry.section != "TABLES":
                logger.debug("skipping %s table record at line %d", keyword, reader.line_number)
                self._skip_span()
                continue
            entity = decode_entity(entry.schema, reader, self.doc.version, diagnostics=self.doc.diagnostics)
            self.doc.add(entity, "TABLES")

    def _entities(self, section: str) -> None:
        reader = self.reader
        while True:
            tag = reader.next_tag()
            if tag is None:
                return
            if tag.code != 0:
                continue
            keyword = tag.value.strip().upper()
            if keyword == "ENDSEC":
                return
            entry = self.registry.lookup(keyword)
            if entry is None or entry.section != "ENTITIES":
                report(
                    self.doc.diagnostics,
                    DiagnosticKind.UNKNOWN_ENTITY_TYPE,
                    f"no schema for entity type {keyword!r}; skipped",
                    dxftype=keyword,
                    line=reader.line_number,
                    tag=tag,
                )
                self._skip_span()
                continue
            entity = decode_entity(entry.schema, reader, self.doc.version, diagnostics=self.doc.diagnostics)
            if section == "ENTITIES" and self.type_filter is not None and keyword not in self.type_filter:
                continue
            self.doc.add(entity, section)

    def _skip_span(self) -> None:
        reader = self.reader
        for tag in reader:
            if tag.code == 0:
                reader.unread(tag)
                return

    def _skip_section(self) -> None:
        reader = self.reader
        for tag in reader:
            if tag.code == 0 and tag.value.strip().upper() == "ENDSEC":
                return

    def _expect_endsec(self) -> None:
        tag = self.reader.next_tag()
        if tag is not None and not (tag.code == 0 and tag.value.strip().upper() == "ENDSEC"):
            self.reader.unread(tag)


def read(
    source: str | Path | TextIO,
    *,
    version: DXFVersion | str | None = None,
    types: str | Iterable[str] | None = None,
    registry: Registry = REGISTRY,
    encoding: str = "utf-8",
) -> Document:
    """Read a DXF file or text stream.

    An explicit ``version`` that cannot be parsed raises; an unknown
    $ACADVER in the file is reported and read as the newest version.
    ``encoding`` applies to paths only and is strict.
    """
    forced = parse_version(version) if version is not None else None
    if isinstance(source, (str, Path)):
        reader = TagReader.from_path(source, encoding=encoding)
    else:
        reader = TagReader(source)
    with reader:
        return _DocumentReader(reader, version=forced, types=types, registry=registry).run()


def read_string(text: str, **kwargs) -> Document:
    return read(io.StringIO(text), **kwargs)


def _write_entity(writer: TagWriter, entity: Entity, version: DXFVersion, doc: Document) -> bool:
    entry = doc.registry.lookup(entity.dxftype)
    if entry is None:
        raise DXFPreconditionError(f"no schema for entity type {entity.dxftype!r}")
    problems = validate_entity(entity, entry.schema)
    if problems:
        report(
            doc.diagnostics,
            DiagnosticKind.SKIPPED_RECORD,
            f"skipping {entity.dxftype} entity: {', '.join(problems)}",
            dxftype=entity.dxftype,
        )
        return False
    writer.write_tag(0, entity.dxftype)
    encode_entity(entity, entry.schema, writer, version)
    return True


def _write_section(writer: TagWriter, doc: Document, name: str, version: DXFVersion) -> int:
    section = doc.sections.get(name)
    if section is None or not section.order:
        return 0
    written = 0
    writer.write_tags([Tag(0, "SECTION"), Tag(2, name)])
    if name == "TABLES":
        for dxftype, chain in section.chains.items():
            writer.write_tags([Tag(0, "TABLE"), Tag(2, dxftype), Tag(70, str(len(chain)))])
            written += encode_chain(
                chain, doc.registry.schema_for(dxftype), writer, version, diagnostics=doc.diagnostics
            )
            writer.write_tag(0, "ENDTAB")
    else:
        for entity in section:
            if _write_entity(writer, entity, version, doc):
                written += 1
    writer.write_tag(0, "ENDSEC")
    return written


def write(
    doc: Document,
    target: str | Path | TextIO,
    *,
    version: DXFVersion | str | None = None,
    encoding: str = "utf-8",
) -> int:
    """Write ``doc`` as an ASCII DXF stream; returns the number of records written."""
    if doc is None:
        raise DXFPreconditionError("write requires a document")
    target_version = parse_version(version) if version is not None else doc.version
    if isinstance(target, (str, Path)):
        out_path = Path(target)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        writer = TagWriter.from_path(out_path, encoding=encoding)
    else:
        writer = TagWriter(target)
    with writer:
        writer.write_tags(
            [
                Tag(0, "SECTION"),
                Tag(2, "HEADER"),
                Tag(9, "$ACADVER"),
                Tag(1, target_version.name),
                Tag(0, "ENDSEC"),
            ]
        )
        written = 0
        for name in _WRITE_ORDER:
            written += _write_section(writer, doc, name, target_version)
        writer.write_tag(0, "EOF")
    return written
