"""jsonbeautify CLI: format and check JSON files."""

import argparse
import json
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _parse_keys(raw: Optional[str]) -> Optional[List[str]]:
    """Split a comma-separated --keys value into member names."""
    if raw is None:
        return None
    names = [name.strip() for name in raw.split(",") if name.strip()]
    # An empty allow-list would render every object as {}
    return names or None


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _setup_logging(verbose: bool) -> None:
    """Configure the root logger: stderr, DEBUG with --verbose, else WARNING."""
    level = logging.DEBUG if verbose else logging.WARNING
    root = logging.getLogger()
    root.setLevel(level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.handlers.clear()
    root.addHandler(handler)


def main():
    """Main CLI entry point for jsonbeautify commands."""
    try:
        package_version = get_version("jsonbeautify")
    except PackageNotFoundError:
        package_version = "dev"

    parser = argparse.ArgumentParser(
        prog="jsonbeautify",
        description="jsonbeautify: JSON formatting with width-aware line layout"
    )
    parser.add_argument("--version", action="version", version=f"jsonbeautify {package_version}")

    # Layout arguments shared by every command
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "input",
        help="Path to a JSON file, or '-' for stdin"
    )
    indent_group = parent_parser.add_mutually_exclusive_group()
    indent_group.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Number of spaces per nesting level (default: 2)"
    )
    indent_group.add_argument(
        "--indent-string",
        dest="indent_string",
        default=None,
        help="Literal indentation unit, e.g. a tab"
    )
    parent_parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Maximum single-line container width (default: 80; 0 always expands)"
    )
    parent_parser.add_argument(
        "--keys",
        default=None,
        help="Comma-separated member names to keep, in output order"
    )
    parent_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a JSON config file (flags override its values)"
    )
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    format_parser = subparsers.add_parser(
        "format",
        help="Beautify a JSON file",
        parents=[parent_parser]
    )
    format_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the result to this path instead of stdout"
    )

    subparsers.add_parser(
        "check",
        help="Check that a JSON file is already beautified",
        parents=[parent_parser]
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    _setup_logging(args.verbose)

    # Lazy import: only import the kernel when a command runs
    from .api import beautify
    from .config import load_config, merge_overrides

    try:
        config = merge_overrides(
            load_config(args.config),
            indent=args.indent_string if args.indent_string is not None else args.indent,
            width=args.width,
            keys=_parse_keys(args.keys),
        )
        logger.debug("Resolved config: %s", config.model_dump())

        raw = _read_input(args.input)
        value = json.loads(raw)
        text = beautify(value, config.keys, config.indent, config.width)

        if args.command == "format":
            if args.output is not None:
                args.output.parent.mkdir(parents=True, exist_ok=True)
                args.output.write_text(text + "\n", encoding="utf-8")
                if not args.quiet:
                    print("[OK] Formatted")
                    print(f"  Output: {args.output}")
            else:
                print(text)
        elif args.command == "check":
            ok = raw[:-1] == text if raw.endswith("\n") else raw == text
            if not args.quiet:
                print(f"Status: {'OK' if ok else 'FAILED'}")
            if not ok:
                sys.exit(1)
    except OSError as e:
        # FileNotFoundError, IsADirectoryError, PermissionError, ...
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        # json.JSONDecodeError, pydantic.ValidationError and
        # InvalidArgumentError are all ValueErrors
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
