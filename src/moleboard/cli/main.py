"""CLI entrypoint for the MoleBoard scanner."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from moleboard import __version__
from moleboard.config import load_config, validate_config_file
from moleboard.constants.branding import CLI_DESCRIPTION
from moleboard.exceptions import ConfigError, MoleboardError, PathNotFoundError, ScanCancelledError
from moleboard.exceptions.validation import format_errors
from moleboard.reporting.stdout import StdoutReporter
from moleboard.scanner import ScanCache, scan
from moleboard.scanner.orchestrator import expand_root

EXIT_INTERRUPTED: int = 130


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="moleboard",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan_parser = subparsers.add_parser("scan", help="Scan a directory tree and summarise disk usage")
    scan_parser.add_argument("-r", "--root", required=True, help="Scan root path (also the cache key)")
    scan_parser.add_argument("-f", "--force", action="store_true", help="Ignore any cached summary and rescan")
    scan_parser.add_argument("-d", "--max-depth", type=int, default=None, help="Maximum directory depth to descend")
    scan_parser.add_argument("-t", "--top", type=int, default=None, help="Number of largest files/folders to keep")
    scan_parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    scan_parser.add_argument("--cache-file", type=Path, default=None, help="Cache file path (overrides config)")
    scan_parser.add_argument("--no-stdout", action="store_true", help="Silence stdout output")
    scan_parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    scan_parser.add_argument("-v", "--verbose", action="store_true", help="Show progress, repos, and diagnostics")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without scanning")
    validate.add_argument("-r", "--root", type=Path, required=True, help="Scan root path")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return _handle_validate_config(args)

    if args.command != "scan":
        parser.error(f"Unsupported command: {args.command}")

    return _handle_scan(args)


def _handle_scan(args: argparse.Namespace) -> int:
    """Run a scan, print the report, and map failures to exit codes."""
    resolved_root = expand_root(args.root)
    validation_errors = validate_config_file(
        resolved_root,
        args.config,
        config_explicit=args.config is not None,
    )
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    try:
        config = load_config(resolved_root, args.config)
        cache_path = args.cache_file.expanduser() if args.cache_file else config.effective_cache_path
        summary = scan(
            args.root,
            cache=ScanCache(cache_path),
            force=args.force,
            max_depth=args.max_depth,
            top_n=args.top,
            config_path=args.config,
            on_progress=_print_progress if args.verbose else None,
        )
    except (ConfigError, PathNotFoundError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except (KeyboardInterrupt, ScanCancelledError):
        print("Scan cancelled.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except MoleboardError as exc:
        print(f"Scanner error: {exc}", file=sys.stderr)
        return 1

    if not args.no_stdout:
        use_color = not args.no_color and sys.stdout.isatty()
        reporter = StdoutReporter(summary, color=use_color, verbose=args.verbose)
        print(reporter.render())

    return 0


def _print_progress(processed: int, total: int) -> None:
    print(f"  aggregated {processed}/{total} files", file=sys.stderr)


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = validate_config_file(
        args.root,
        args.config,
        config_explicit=args.config is not None,
    )
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
