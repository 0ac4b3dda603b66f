from typing import Sequence

from .collection import EntityChain, free_entity
from .convert import ConvertResult, to_dxf
from .decoder import decode_chain, decode_entity
from .document import Document, Section, read, read_string, write
from .encoder import encode_chain, encode_entity, entity_tags, validate_entity
from .entity import Entity
from .errors import (
    Diagnostic,
    DiagnosticKind,
    DXFError,
    DXFPreconditionError,
    DXFStreamError,
    DXFVersionError,
)
from .registry import REGISTRY, Registry, new_entity, schema_for
from .schema import EntitySchema, FieldSlot, Marker
from .tags import Tag, TagReader, TagWriter, ValueKind
from .versions import DXFVersion, parse_version

__all__ = [
    "read",
    "read_string",
    "write",
    "Document",
    "Section",
    "Entity",
    "EntityChain",
    "free_entity",
    "decode_entity",
    "decode_chain",
    "encode_entity",
    "encode_chain",
    "entity_tags",
    "validate_entity",
    "EntitySchema",
    "FieldSlot",
    "Marker",
    "Registry",
    "REGISTRY",
    "schema_for",
    "new_entity",
    "Tag",
    "TagReader",
    "TagWriter",
    "ValueKind",
    "DXFVersion",
    "parse_version",
    "Diagnostic",
    "DiagnosticKind",
    "DXFError",
    "DXFStreamError",
    "DXFPreconditionError",
    "DXFVersionError",
    "to_dxf",
    "ConvertResult",
]


def main(argv: Sequence[str] | None = None) -> int:
    from dxfcodec.cli import main as cli_main

    return cli_main(argv)
