from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Iterator, Mapping

from .entity import Entity
from .schema import EntitySchema
from .schemas import SYMBOL_TABLE_TYPES, build_schemas


@dataclass(frozen=True)
class RegistryEntry:
    schema: EntitySchema
    factory: Callable[[], Entity]
    section: str


def _factory(schema: EntitySchema) -> Callable[[], Entity]:
    def new() -> Entity:
        return Entity(dxftype=schema.dxftype, dxf=schema.new_fields())

    return new


class Registry:
    """Keyword -> schema lookup; read-only once built."""

    def __init__(self, schemas: Iterable[EntitySchema], *, table_types: Iterable[str] = ()) -> None:
        table_set = set(table_types)
        entries: dict[str, RegistryEntry] = {}
        for schema in schemas:
            if schema.dxftype in entries:
                raise ValueError(f"duplicate schema for {schema.dxftype}")
            section = "TABLES" if schema.dxftype in table_set else "ENTITIES"
            entries[schema.dxftype] = RegistryEntry(schema, _factory(schema), section)
        self._entries: Mapping[str, RegistryEntry] = MappingProxyType(entries)

    def __contains__(self, keyword: object) -> bool:
        return isinstance(keyword, str) and keyword.upper() in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, keyword: str) -> RegistryEntry | None:
        return self._entries.get(keyword.strip().upper())

    def schema_for(self, keyword: str) -> EntitySchema:
        entry = self.lookup(keyword)
        if entry is None:
            raise KeyError(f"no schema for entity type {keyword!r}")
        return entry.schema

    def new_entity(self, keyword: str) -> Entity:
        entry = self.lookup(keyword)
        if entry is None:
            raise KeyError(f"no schema for entity type {keyword!r}")
        return entry.factory()

    def keywords(self, section: str | None = None) -> tuple[str, ...]:
        if section is None:
            return tuple(self._entries)
        return tuple(name for name, entry in self._entries.items() if entry.section == section)


REGISTRY = Registry(build_schemas(), table_types=SYMBOL_TABLE_TYPES)


def schema_for(keyword: str) -> EntitySchema:
    return REGISTRY.schema_for(keyword)


def new_entity(keyword: str) -> Entity:
    return REGISTRY.new_entity(keyword)
