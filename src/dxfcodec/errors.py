from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class DXFError(Exception):
    pass


class DXFStreamError(DXFError):
    """The tag stream failed; the reader or writer is unusable afterwards."""

    def __init__(self, message: str, *, line: int | None = None, name: str | None = None) -> None:
        location = ""
        if name:
            location = f" in {name}"
        if line is not None:
            location = f"{location} at line {line}"
        super().__init__(f"{message}{location}")
        self.line = line
        self.name = name


class DXFPreconditionError(DXFError, ValueError):
    pass


class DXFVersionError(DXFError, ValueError):
    pass


class DiagnosticKind(str, Enum):
    UNKNOWN_GROUP_CODE = "unknown-group-code"
    VERSION_GATED = "version-gated"
    SUBCLASS_MARKER_MISMATCH = "subclass-marker-mismatch"
    VALUE_PARSE_FAILURE = "value-parse-failure"
    AMBIGUOUS_GROUP_CODE = "ambiguous-group-code"
    UNKNOWN_ENTITY_TYPE = "unknown-entity-type"
    UNSUPPORTED_VERSION = "unsupported-version"
    SKIPPED_RECORD = "skipped-record"


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    message: str
    dxftype: str | None = None
    line: int | None = None
    code: int | None = None
    value: str | None = None

    def __str__(self) -> str:
        where = f"line {self.line}: " if self.line is not None else ""
        return f"{where}{self.kind.value}: {self.message}"


def report(
    diagnostics: list[Diagnostic] | None,
    kind: DiagnosticKind,
    message: str,
    *,
    dxftype: str | None = None,
    line: int | None = None,
    tag: tuple[int, str] | None = None,
) -> Diagnostic:
    """Log a recoverable condition and append it to ``diagnostics`` when given."""
    diagnostic = Diagnostic(
        kind=kind,
        message=message,
        dxftype=dxftype,
        line=line,
        code=tag[0] if tag is not None else None,
        value=tag[1] if tag is not None else None,
    )
    logger.warning("%s", diagnostic)
    if diagnostics is not None:
        diagnostics.append(diagnostic)
    return diagnostic
