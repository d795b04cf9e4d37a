"""CLI entrypoint for declgen."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import DEFAULT_CONFIG_NAME
from .generator import DeclarationGenerator
from .logging import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="declgen",
        description="Generate a single ambient declaration file from TypeScript sources.",
    )
    parser.add_argument(
        "config",
        nargs="?",
        default=DEFAULT_CONFIG_NAME,
        help=f"Path to the configuration document (defaults to {DEFAULT_CONFIG_NAME}).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--emit-imports",
        action="store_true",
        help="Re-emit named imports from bare module specifiers.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint; failures are logged rather than raised."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logger = configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    generator = DeclarationGenerator(args.config, emit_imports=bool(args.emit_imports))
    try:
        result = generator.run()
    except Exception as exc:
        logger.error("declgen failed: %s", exc)
        logger.debug("Failure details", exc_info=True)
        return
    print(f"Declarations written to {_relativize(result.out_file)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
