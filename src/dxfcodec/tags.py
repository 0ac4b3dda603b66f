from __future__ import annotations

import io
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Iterator, NamedTuple, TextIO

from .errors import DXFPreconditionError, DXFStreamError

COMMENT_CODE = 999
SUBCLASS_CODE = 100
APP_GROUP_CODE = 102
XDATA_MIN_CODE = 1000
XDATA_MAX_CODE = 1071

_INT_RANGES = {
    "INT16": (-(2**15), 2**15 - 1),
    "INT32": (-(2**31), 2**31 - 1),
    "INT64": (-(2**63), 2**63 - 1),
}


class Tag(NamedTuple):
    code: int
    value: str


class ValueKind(str, Enum):
    STRING = "string"
    HANDLE = "handle"
    DOUBLE = "double"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    BOOL = "bool"
    BINARY = "binary"


def kind_for_code(code: int) -> ValueKind:
    """Value kind a group code implies by convention."""
    if code == 5 or code == 105:
        return ValueKind.HANDLE
    if 0 <= code <= 9:
        return ValueKind.STRING
    if 10 <= code <= 59:
        return ValueKind.DOUBLE
    if 60 <= code <= 79 or 170 <= code <= 179 or 270 <= code <= 289 or 370 <= code <= 389:
        return ValueKind.INT16
    if 90 <= code <= 99:
        return ValueKind.INT32
    if 110 <= code <= 149 or 210 <= code <= 239 or 460 <= code <= 469:
        return ValueKind.DOUBLE
    if 160 <= code <= 169:
        return ValueKind.INT64
    if 290 <= code <= 299:
        return ValueKind.BOOL
    if 310 <= code <= 319 or code == 1004:
        return ValueKind.BINARY
    if 420 <= code <= 429 or 440 <= code <= 459:
        return ValueKind.INT32
    if 1010 <= code <= 1059:
        return ValueKind.DOUBLE
    if 1060 <= code <= 1070:
        return ValueKind.INT16
    if code == 1071:
        return ValueKind.INT32
    return ValueKind.STRING


def parse_value(kind: ValueKind, raw: str) -> Any:
    """Convert a raw value line; raises ``ValueError`` when it does not fit ``kind``."""
    if kind is ValueKind.STRING:
        return raw
    text = raw.strip()
    if kind is ValueKind.DOUBLE:
        return float(text)
    if kind is ValueKind.HANDLE:
        handle = int(text, 16)
        if handle < 0:
            raise ValueError(f"negative handle: {raw!r}")
        return handle
    if kind is ValueKind.BOOL:
        number = int(text)
        if number not in (0, 1):
            raise ValueError(f"boolean out of range: {raw!r}")
        return bool(number)
    if kind is ValueKind.BINARY:
        bytes.fromhex(text)
        return text.upper()
    low, high = _INT_RANGES[kind.name]
    number = int(text)
    if not low <= number <= high:
        raise ValueError(f"{kind.value} out of range: {raw!r}")
    return number


def format_value(kind: ValueKind, value: Any) -> str:
    if kind is ValueKind.DOUBLE:
        return repr(float(value))
    if kind is ValueKind.HANDLE:
        return f"{int(value):X}"
    if kind is ValueKind.BOOL:
        return "1" if value else "0"
    if kind in (ValueKind.INT16, ValueKind.INT32, ValueKind.INT64):
        return str(int(value))
    if kind is ValueKind.BINARY:
        return str(value).upper()
    return str(value)


class TagReader:
    """Cursor over ``(group code, raw value)`` line pairs.

    ``next_tag`` returns ``None`` at the end of input. At most one tag can be
    pushed back with ``unread``; that is how a code-0 boundary is handed to
    whoever reads the next entity or section.
    """

    def __init__(self, stream: TextIO, *, name: str | None = None, owns_stream: bool = False) -> None:
        if stream is None:
            raise DXFPreconditionError("TagReader requires a stream")
        self._stream = stream
        self._owns_stream = owns_stream
        self.name = name or getattr(stream, "name", None)
        self.line_number = 0
        self._pending: Tag | None = None
        self._broken: DXFStreamError | None = None

    @classmethod
    def from_path(cls, path: str | Path, *, encoding: str = "utf-8") -> "TagReader":
        try:
            stream = open(path, "r", encoding=encoding, newline=None)
        except OSError as exc:
            raise DXFStreamError(f"cannot open DXF stream: {exc}", name=str(path)) from exc
        return cls(stream, name=str(path), owns_stream=True)

    @classmethod
    def from_string(cls, text: str, *, name: str = "<string>") -> "TagReader":
        return cls(io.StringIO(text), name=name, owns_stream=True)

    @property
    def broken(self) -> bool:
        return self._broken is not None

    def next_tag(self) -> Tag | None:
        if self._pending is not None:
            tag = self._pending
            self._pending = None
            return tag
        if self._broken is not None:
            raise DXFStreamError("stream is unusable after an earlier failure", name=self.name)

        code_line = self._readline()
        if code_line == "":
            return None
        value_line = self._readline()
        if not code_line.strip():
            if value_line == "":
                return None
            self._fail("blank group code line")
        if value_line == "":
            self._fail("missing value line after group code")
        try:
            code = int(code_line.strip())
        except ValueError:
            self._fail(f"invalid group code {code_line.strip()!r}", line=self.line_number - 1)
        return Tag(code, value_line.rstrip("\r\n"))

    def unread(self, tag: Tag) -> None:
        if self._pending is not None:
            raise DXFPreconditionError("only one tag can be pushed back")
        self._pending = tag

    def peek_tag(self) -> Tag | None:
        tag = self.next_tag()
        if tag is not None:
            self.unread(tag)
        return tag

    def close(self) -> None:
        if self._owns_stream:
            self._stream.close()

    def __iter__(self) -> Iterator[Tag]:
        while True:
            tag = self.next_tag()
            if tag is None:
                return
            yield tag

    def __enter__(self) -> "TagReader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _readline(self) -> str:
        try:
            line = self._stream.readline()
        except (OSError, ValueError, UnicodeDecodeError) as exc:
            self._fail(f"failed to read DXF stream: {exc}", cause=exc)
        if line:
            self.line_number += 1
        return line

    def _fail(self, message: str, *, line: int | None = None, cause: Exception | None = None):
        error = DXFStreamError(
            message,
            line=self.line_number if line is None else line,
            name=self.name,
        )
        self._broken = error
        if cause is not None:
            raise error from cause
        raise error


class TagWriter:
    def __init__(self, stream: TextIO, *, name: str | None = None, owns_stream: bool = False) -> None:
        if stream is None:
            raise DXFPreconditionError("TagWriter requires a stream")
        self._stream = stream
        self._owns_stream = owns_stream
        self.name = name or getattr(stream, "name", None)
        self.tag_count = 0

    @classmethod
    def from_path(cls, path: str | Path, *, encoding: str = "utf-8") -> "TagWriter":
        try:
            stream = open(path, "w", encoding=encoding, newline="\n")
        except OSError as exc:
            raise DXFStreamError(f"cannot open DXF stream: {exc}", name=str(path)) from exc
        return cls(stream, name=str(path), owns_stream=True)

    def write_tag(self, code: int, value: str) -> None:
        try:
            self._stream.write(f"{code:>3}\n{value}\n")
        except (OSError, ValueError) as exc:
            raise DXFStreamError(f"failed to write DXF stream: {exc}", name=self.name) from exc
        self.tag_count += 1

    def write_tags(self, tags: Iterable[Tag]) -> None:
        for code, value in tags:
            self.write_tag(code, value)

    def close(self) -> None:
        if self._owns_stream:
            try:
                self._stream.close()
            except OSError as exc:
                raise DXFStreamError(f"failed to close DXF stream: {exc}", name=self.name) from exc

    def __enter__(self) -> "TagWriter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
