"""
Command line interface for the what3words client.

Local commands (no API key needed):
    python -m w3w find "meet at ///filled.count.soap or index.home.raft"
    python -m w3w check filled-count-soap

Remote commands (W3W_API_KEY must be set):
    python -m w3w check filled.count.soap --validate
    python -m w3w to-3wa 51.520847 -0.195521
    python -m w3w to-coordinates filled.count.soap --language en
    python -m w3w autosuggest filled.count.so --n-results 3 --clip-to-country GB
    python -m w3w grid 52.207988 0.116126 52.208867 0.117540
    python -m w3w languages

Results are printed as JSON on stdout.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from typing import Any, List, Optional

from .config import configure_logging, get_config
from .domain.errors import W3WError
from .domain.models import AutoSuggestOptions, BoundingBox, ConvertOptions, Coordinates
from .matching import DEFAULT_MATCHER
from .services import W3WService
from .version import __version__

logger = logging.getLogger(__name__)


def _print_json(value: Any) -> None:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = dataclasses.asdict(value)
    print(json.dumps(value, ensure_ascii=False, indent=2))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="w3w",
        description="what3words v3 API client and three-word-address matcher",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )

    find_parser = subparsers.add_parser(
        "find", help="List substrings shaped like three-word addresses"
    )
    find_parser.add_argument("text")

    check_parser = subparsers.add_parser(
        "check", help="Classify a string as address / near-miss / neither"
    )
    check_parser.add_argument("text")
    check_parser.add_argument(
        "--validate",
        action="store_true",
        help="Also confirm with the API that the address exists",
    )

    to_3wa_parser = subparsers.add_parser("to-3wa", help="Coordinates to three-word address")
    to_3wa_parser.add_argument("lat", type=float)
    to_3wa_parser.add_argument("lng", type=float)
    to_3wa_parser.add_argument("--language")
    to_3wa_parser.add_argument("--locale")

    to_coords_parser = subparsers.add_parser(
        "to-coordinates", help="Three-word address to coordinates"
    )
    to_coords_parser.add_argument("words")
    to_coords_parser.add_argument("--language")
    to_coords_parser.add_argument("--locale")

    suggest_parser = subparsers.add_parser("autosuggest", help="Suggest real addresses")
    suggest_parser.add_argument("input")
    suggest_parser.add_argument("--n-results", type=int)
    suggest_parser.add_argument("--language")
    suggest_parser.add_argument(
        "--clip-to-country", action="append", default=[], metavar="CC"
    )
    suggest_parser.add_argument(
        "--focus", type=float, nargs=2, metavar=("LAT", "LNG")
    )

    grid_parser = subparsers.add_parser("grid", help="Grid lines inside a bounding box")
    for name in ("sw_lat", "sw_lng", "ne_lat", "ne_lng"):
        grid_parser.add_argument(name, type=float)

    subparsers.add_parser("languages", help="List available languages")

    return parser


def _run_remote(args: argparse.Namespace) -> Any:
    api = W3WService.from_config().v3()

    if args.command == "to-3wa":
        return api.convert_to_3wa(
            Coordinates(args.lat, args.lng),
            ConvertOptions(language=args.language, locale=args.locale),
        )
    if args.command == "to-coordinates":
        return api.convert_to_coordinates(
            args.words, ConvertOptions(language=args.language, locale=args.locale)
        )
    if args.command == "autosuggest":
        return api.autosuggest(
            args.input,
            AutoSuggestOptions(
                focus=Coordinates(*args.focus) if args.focus else None,
                clip_to_country=tuple(args.clip_to_country),
                language=args.language,
                n_results=args.n_results,
            ),
        )
    if args.command == "grid":
        return api.grid_section(
            BoundingBox(
                southwest=Coordinates(args.sw_lat, args.sw_lng),
                northeast=Coordinates(args.ne_lat, args.ne_lng),
            )
        )
    return api.available_languages()


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for remote or configuration errors).
        Usage errors exit with status 2 through argparse.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    observability = get_config().observability
    if args.verbose:
        observability = observability.model_copy(update={"level": "DEBUG"})
    configure_logging(observability)

    if args.command == "find":
        _print_json(DEFAULT_MATCHER.find_candidates(args.text))
        return 0

    try:
        if args.command == "check":
            result = {
                "text": args.text,
                "is_possible_3wa": DEFAULT_MATCHER.is_full_match(args.text),
                "did_you_mean": DEFAULT_MATCHER.is_likely_typo(args.text),
            }
            if args.validate:
                result["is_valid_3wa"] = W3WService.from_config().is_valid_3wa(args.text)
            _print_json(result)
            return 0

        _print_json(_run_remote(args))
        return 0
    except W3WError as e:
        logger.error("Command failed", extra={"command": args.command, "error": str(e)})
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        # Out-of-range arguments (e.g. latitude) are usage errors.
        parser.error(str(e))


if __name__ == "__main__":
    sys.exit(main())
