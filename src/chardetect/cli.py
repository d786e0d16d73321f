"""Command-line interface for chardetect."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import chardetect
from chardetect._utils import DEFAULT_MAX_BYTES


def _report(name: str, result: dict, minimal: bool) -> str:
    if minimal:
        return str(result["encoding"])
    line = f"{name}: {result['encoding']} with confidence {result['confidence']}"
    if result["language"]:
        line += f" ({result['language']})"
    return line


def _convert(name: str, data: bytes, force: bool, out) -> bool:
    result = chardetect.transcode(data, force)
    out.write(result["text"])
    status = "converted" if result["converted"] else "not converted"
    if result["dropped_bytes"]:
        status += ", dropped bytes"
    print(f"{name}: {result['encoding']} ({status})", file=sys.stderr)
    return bool(result["converted"])


def main(argv: list[str] | None = None) -> None:
    """Run the ``chardetect-convert`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Detect the charset of files and optionally convert them to UTF-8."
    )
    parser.add_argument("files", nargs="*", help="Files to examine (default: stdin)")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the encoding name"
    )
    parser.add_argument(
        "-c", "--convert", action="store_true", help="Write the input converted to UTF-8"
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="With --convert, drop unconvertible bytes instead of failing",
    )
    parser.add_argument(
        "-o", "--output", type=Path, help="With --convert, write to this file"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log detection diagnostics"
    )
    parser.add_argument(
        "--version", action="version", version=f"chardetect {chardetect.__version__}"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    out_file = out = None
    if args.convert:
        if args.output is not None:
            try:
                out_file = args.output.open("wb")
            except OSError as e:
                print(f"chardetect-convert: {args.output}: {e}", file=sys.stderr)
                raise SystemExit(1) from e
        out = out_file if out_file is not None else sys.stdout.buffer

    failed = False
    try:
        sources = args.files or ["-"]
        for filepath in sources:
            name = "stdin" if filepath == "-" else filepath
            limit = -1 if args.convert else DEFAULT_MAX_BYTES
            if filepath == "-":
                data = sys.stdin.buffer.read(limit)
            else:
                try:
                    with Path(filepath).open("rb") as f:
                        data = f.read(limit)
                except OSError as e:
                    print(f"chardetect-convert: {filepath}: {e}", file=sys.stderr)
                    failed = True
                    continue
            if args.convert:
                if not _convert(name, data, args.force, out):
                    failed = True
            else:
                print(_report(name, chardetect.detect(data), args.minimal))
    finally:
        if out_file is not None:
            out_file.close()

    if failed:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
