"""CLI entrypoints for typecensus commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict

from .errors import TypeCensusError, UnitParseError
from .logging import configure_logging
from .orchestrator import CorpusAnalyzer
from .report import (
    functions_to_list,
    histogram_to_dict,
    render_functions,
    render_json,
    render_summary,
)


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    _add_verbose_option(parser, suppress_default=True)
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a .typecensus.yml file (defaults to the one in the corpus root).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit results as JSON.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typecensus",
        description="Count the standard-library and foreign types used in Rust function signatures.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan_parser = subparsers.add_parser(
        "scan",
        help="Collect label statistics for a corpus directory or a single file.",
    )
    _add_common_options(scan_parser)
    scan_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the corpus root (defaults to current directory).",
    )
    scan_parser.add_argument(
        "--by-provenance",
        action="store_true",
        help="Report native and foreign label counts separately.",
    )
    scan_parser.add_argument(
        "--functions",
        action="store_true",
        help="List the labels of every function.",
    )
    scan_parser.add_argument(
        "--include-empty",
        action="store_true",
        help="Include functions without labels in the function listing.",
    )

    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Show the labels of each function in one Rust source file.",
    )
    _add_common_options(inspect_parser)
    inspect_parser.add_argument("file", help="Rust source file to inspect.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for typecensus commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "scan":
        _run_scan(parser, args)
    elif args.command == "inspect":
        _run_inspect(parser, args)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_scan(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    try:
        analyzer = CorpusAnalyzer.for_path(args.path, args.config)
        result = analyzer.run(args.path)
    except FileNotFoundError as exc:
        parser.exit(1, f"{exc}\n")
    except TypeCensusError as exc:
        parser.exit(1, f"typecensus scan failed: {exc}\n")

    if args.json:
        payload: Dict[str, Any] = histogram_to_dict(result.histogram)
        payload["units"] = result.units
        payload["failed_units"] = list(result.failed_units)
        if args.functions:
            payload["functions"] = functions_to_list(
                result.functions, include_empty=args.include_empty
            )
        print(render_json(payload))
        return

    print(render_summary(result.histogram, by_provenance=args.by_provenance))
    if result.failed_units:
        print(f"failed units: {len(result.failed_units)}")
    if args.functions:
        listing = render_functions(result.functions, include_empty=args.include_empty)
        if listing:
            print(listing)


def _run_inspect(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    path = Path(args.file).expanduser()
    if not path.is_file():
        parser.exit(1, f"Source file not found: {args.file}\n")
    try:
        analyzer = CorpusAnalyzer.for_path(str(path), args.config)
        functions = analyzer.analyze_source(path.read_text(encoding="utf-8"), path.name)
    except UnitParseError as exc:
        parser.exit(1, f"{exc}\n")
    except (TypeCensusError, OSError, UnicodeDecodeError) as exc:
        parser.exit(1, f"typecensus inspect failed: {exc}\n")

    if args.json:
        print(render_json({"functions": functions_to_list(functions, include_empty=True)}))
        return
    listing = render_functions(functions, include_empty=True)
    if listing:
        print(listing)


if __name__ == "__main__":
    main(sys.argv[1:])
