"""
Command line entry point: print the HTTP status code table or its JSON form.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from rich.console import Console
from rich.logging import RichHandler

from .errors import RenderError
from .registry import StatusRegistry, build_registry
from .renderers import JsonRenderer, TableRenderer
from .status_class import StatusClass
from .version import get_package_version

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderOptions:
    json: bool = False
    pretty: bool = True
    status_class: Optional[StatusClass] = None
    codes: Tuple[int, ...] = ()
    invalid_codes: Tuple[str, ...] = ()
    verbose: bool = False


def _status_class_arg(value: str) -> StatusClass:
    try:
        return StatusClass.from_label(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


# Short options that take no value and may be bundled, as in `-jv`
_BOOLEAN_SHORT_FLAGS = "jv"


def _split_short_flags(argv: Sequence[str]) -> List[str]:
    """Split leading boolean flags off bundles so `-jx` reads as `-j -x`."""
    split = []
    for arg in argv:
        if len(arg) > 2 and arg[0] == "-" and arg[1] in _BOOLEAN_SHORT_FLAGS:
            rest = arg[1:]
            while rest and rest[0] in _BOOLEAN_SHORT_FLAGS:
                split.append(f"-{rest[0]}")
                rest = rest[1:]
            if rest:
                split.append(f"-{rest}")
        else:
            split.append(arg)
    return split


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="status-table",
        description="Print HTTP status codes and their reason phrases",
    )
    parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Print a JSON object mapping codes to reason phrases",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="With --json, print on a single line instead of pretty-printing",
    )
    parser.add_argument(
        "-c",
        "--class",
        dest="status_class",
        type=_status_class_arg,
        help="Only show one status class (1xx, 2xx, 3xx, 4xx or 5xx)",
    )
    parser.add_argument(
        "--code",
        dest="codes",
        action="append",
        default=[],
        help="Only show this status code (repeatable)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {get_package_version()}"
    )
    return parser


def parse_options(
    argv: Optional[Sequence[str]] = None,
) -> Tuple[RenderOptions, List[str]]:
    """Parse arguments; unrecognized ones are returned instead of rejected."""
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    args, unknown = parser.parse_known_args(_split_short_flags(argv))

    codes = []
    invalid_codes = []
    for value in args.codes:
        try:
            codes.append(int(value))
        except ValueError:
            invalid_codes.append(value)

    options = RenderOptions(
        json=args.json,
        pretty=not args.compact,
        status_class=args.status_class,
        codes=tuple(codes),
        invalid_codes=tuple(invalid_codes),
        verbose=args.verbose,
    )
    return options, unknown


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def select_entries(registry: StatusRegistry, options: RenderOptions) -> StatusRegistry:
    if options.status_class is not None:
        registry = registry.filter_class(options.status_class)
    if options.codes or options.invalid_codes:
        registry = registry.subset(options.codes)
    return registry


def run(options: RenderOptions) -> int:
    registry = select_entries(build_registry(), options)

    if options.json:
        try:
            JsonRenderer().print(registry, pretty=options.pretty)
        except RenderError as e:
            logger.error("%s", e)
    else:
        TableRenderer().print(registry)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    options, unknown = parse_options(argv)
    configure_logging(options.verbose)
    if unknown:
        logger.debug("Ignoring unrecognized arguments: %s", " ".join(unknown))
    for value in options.invalid_codes:
        logger.warning("Invalid status code %r, skipping", value)
    return run(options)


if __name__ == "__main__":
    raise SystemExit(main())
