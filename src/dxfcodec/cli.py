from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Sequence

from .convert import to_dxf
from .document import SUPPORTED_ENTITY_TYPES, read, write
from .errors import Diagnostic
from .versions import release_name


def _package_version() -> str:
    try:
        return version("dxfcodec")
    except PackageNotFoundError:
        return "0.0.0"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dxfcodec", description="Inspect, rewrite, and convert DXF files.")
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_package_version()}",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging threshold; WARNING also prints every diagnostic as it is found.",
    )
    subparsers = parser.add_subparsers(dest="command")

    inspect_parser = subparsers.add_parser("inspect", help="Show basic DXF information.")
    inspect_parser.add_argument("path", help="Path to DXF file.")
    inspect_parser.add_argument(
        "--verbose",
        action="store_true",
        help="List individual diagnostics instead of only their counts.",
    )
    inspect_parser.add_argument("--encoding", default="utf-8", help="Text encoding of the DXF file.")

    rewrite_parser = subparsers.add_parser(
        "rewrite",
        help="Decode a DXF file and write it back in canonical form.",
    )
    rewrite_parser.add_argument("input_path", help="Path to input DXF file.")
    rewrite_parser.add_argument("output_path", help="Path to output DXF file.")
    rewrite_parser.add_argument(
        "--dxf-version",
        default=None,
        help="Target version, e.g. AC1009/R12/R2000. Defaults to the input's $ACADVER.",
    )
    rewrite_parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding of the input DXF file; the output is written in the same encoding.",
    )

    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert DXF entities using ezdxf as the writing backend.",
    )
    convert_parser.add_argument("input_path", help="Path to DXF file.")
    convert_parser.add_argument("output_path", help="Path to output DXF file.")
    convert_parser.add_argument(
        "--types",
        default=None,
        help='Entity filter passed to query(), e.g. "LINE ARC LWPOLYLINE".',
    )
    convert_parser.add_argument(
        "--dxf-version",
        default="R2010",
        help="DXF version for ezdxf.new(), e.g. R2000/R2010/R2018.",
    )
    convert_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail if any entity cannot be converted.",
    )
    return parser


def _print_diagnostics(diagnostics: list[Diagnostic], *, verbose: bool) -> None:
    print(f"diagnostics: {len(diagnostics)}")
    kinds = Counter(diagnostic.kind.value for diagnostic in diagnostics)
    for kind, count in sorted(kinds.items()):
        print(f"diagnostic[{kind}]: {count}")
    if verbose:
        for diagnostic in diagnostics:
            print(f"  {diagnostic}")


def _run_inspect(path: str, *, verbose: bool = False, encoding: str = "utf-8") -> int:
    file_path = Path(path)
    if not file_path.exists():
        print(f"error: file not found: {file_path}", file=sys.stderr)
        return 2

    try:
        doc = read(str(file_path), encoding=encoding)
    except Exception as exc:
        print(f"error: failed to read DXF: {exc}", file=sys.stderr)
        return 2

    counts = Counter(entity.dxftype for entity in doc.entities)
    print(f"file: {file_path}")
    print(f"version: {doc.version.name} ({release_name(doc.version)})")
    print(f"total_entities: {len(doc.entities)}")
    for dxftype in SUPPORTED_ENTITY_TYPES:
        count = counts.get(dxftype, 0)
        if count > 0:
            print(f"{dxftype}: {count}")
    for name in ("TABLES", "BLOCKS"):
        section = doc.sections.get(name)
        if section is not None and len(section):
            print(f"{name.lower()}_records: {len(section)}")
    _print_diagnostics(doc.diagnostics, verbose=verbose)
    return 0


def _run_rewrite(
    input_path: str,
    output_path: str,
    *,
    dxf_version: str | None = None,
    encoding: str = "utf-8",
) -> int:
    dxf_path = Path(input_path)
    if not dxf_path.exists():
        print(f"error: file not found: {dxf_path}", file=sys.stderr)
        return 2

    try:
        doc = read(str(dxf_path), encoding=encoding)
        written = write(doc, output_path, version=dxf_version, encoding=encoding)
    except Exception as exc:
        print(f"error: failed to rewrite DXF: {exc}", file=sys.stderr)
        return 2

    print(f"input: {dxf_path}")
    print(f"output: {output_path}")
    print(f"written_records: {written}")
    _print_diagnostics(doc.diagnostics, verbose=False)
    return 0


def _run_convert(
    input_path: str,
    output_path: str,
    *,
    types: str | None = None,
    dxf_version: str = "R2010",
    strict: bool = False,
) -> int:
    dxf_path = Path(input_path)
    if not dxf_path.exists():
        print(f"error: file not found: {dxf_path}", file=sys.stderr)
        return 2

    try:
        result = to_dxf(
            str(dxf_path),
            output_path,
            types=types,
            dxf_version=dxf_version,
            strict=strict,
        )
    except Exception as exc:
        print(f"error: failed to convert DXF: {exc}", file=sys.stderr)
        return 2

    print(f"input: {result.source_path}")
    print(f"output: {result.output_path}")
    print(f"total_entities: {result.total_entities}")
    print(f"written_entities: {result.written_entities}")
    print(f"skipped_entities: {result.skipped_entities}")
    for dxftype, count in result.skipped_by_type.items():
        print(f"skipped[{dxftype}]: {count}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "inspect":
        return _run_inspect(args.path, verbose=bool(args.verbose), encoding=args.encoding)
    if args.command == "rewrite":
        return _run_rewrite(
            args.input_path, args.output_path, dxf_version=args.dxf_version, encoding=args.encoding
        )
    if args.command == "convert":
        return _run_convert(
            args.input_path,
            args.output_path,
            types=args.types,
            dxf_version=args.dxf_version,
            strict=bool(args.strict),
        )

    parser.print_help()
    return 0
