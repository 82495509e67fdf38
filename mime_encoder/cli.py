"""Command-line interface for the MIME part encoder.

WHY: Part trees described as JSON (fixtures, templates, payloads produced
by other tools) need a quick way to be turned into wire bytes without
writing Python. The CLI wires the loader and the encoder together behind
a single command.

HOW: argparse accepts the JSON tree path, an optional output path and the
strict/permissive switch. The tree is loaded and validated, encoded, and
the bytes are written to the output file or to stdout. Status messages
and errors go to stderr.

RULES:
- Positional argument: path to the JSON part-tree document ("-" for stdin)
- --output/-o: write to a file instead of stdout
- --strict/--no-strict: override MIME_ENCODER_STRICT
- --verbose: log at DEBUG instead of MIME_LOG_LEVEL
- Invalid input (missing or unreadable file, non-UTF-8 or bad JSON,
  schema violation, shape mismatch in strict mode) and an unwritable
  output path print "Error: ..." to stderr and exit 1
- stdout receives only the encoded bytes
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from mime_encoder import config
from mime_encoder.core.encoder import encode
from mime_encoder.core.ir import Part
from mime_encoder.core.loader import load_part, load_part_file
from mime_encoder.errors import MimeEncoderError, TreeLoadError

logger = logging.getLogger(__name__)


def _error(msg: str) -> None:
    """Print an error to stderr and exit with status 1."""
    print("Error: {}".format(msg), file=sys.stderr, flush=True)
    sys.exit(1)


def _load_input(source: str) -> Part:
    if source == "-":
        try:
            document = json.load(sys.stdin)
        except json.JSONDecodeError as exc:
            raise TreeLoadError("Invalid JSON: {}".format(exc)) from exc
        except UnicodeDecodeError as exc:
            raise TreeLoadError("Input is not valid UTF-8: {}".format(exc)) from exc
        return load_part(document)
    return load_part_file(source)


def _write_output(data: bytes, output: Optional[str]) -> None:
    if output is None:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    try:
        Path(output).write_bytes(data)
    except OSError as exc:
        _error("Cannot write {}: {}".format(output, exc.strerror or exc))
    logger.info("Wrote %d bytes to %s", len(data), output)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Kept separate from main() so tests can inspect the parser without
    running the encoder.
    """
    parser = argparse.ArgumentParser(
        prog="mime-encode",
        description="Encode a JSON-described MIME part tree into RFC 2045/2046 wire format.",
    )

    parser.add_argument(
        "tree",
        help="Path to the JSON part-tree document, or '-' to read stdin.",
    )

    parser.add_argument(
        "-o", "--output",
        default=None,
        help="File to write the encoded bytes to (default: stdout).",
    )

    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=config.STRICT_SHAPE_CHECK,
        help="Reject parts whose body shape contradicts their boundary "
             "declaration (default: %(default)s).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug output to stderr.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``mime-encode`` and ``python -m mime_encoder``.

    argv=None means use sys.argv; an explicit list is for testing.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        stream=sys.stderr,
    )

    try:
        part = _load_input(args.tree)
        data = encode(part, strict=args.strict)
    except FileNotFoundError:
        _error("File not found: {}".format(args.tree))
    except OSError as exc:
        _error("Cannot read {}: {}".format(args.tree, exc.strerror or exc))
    except MimeEncoderError as exc:
        _error(str(exc))
    else:
        _write_output(data, args.output)


if __name__ == "__main__":
    main()
