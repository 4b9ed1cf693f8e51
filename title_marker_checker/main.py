"""
Main entry point for the Title Marker Checker.

Checks the title markers of beatmap files and beatmapset folders.
"""

import argparse
import logging
import sys

from .config import Config
from .errors import error_handler
from .validation.config import ValidationConfig
from .validation.coordinator import ValidationCoordinator
from .validation.markers import TITLE_MARKERS, MARKER_NAMES
from .validation.reporter import format_report
from .validation.templates import TITLE_MARKER_METADATA


def setup_logging(verbose: bool = False):
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=level,
        format=Config.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )


def show_markers():
    """Print the markers that are checked and their canonical format."""
    print(TITLE_MARKER_METADATA.message)
    print()
    for marker in TITLE_MARKERS:
        print(f"  {marker.name:<12} {marker.canonical_text}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="title-marker-check",
        description="Check the format of version markers in beatmap titles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "Artist - Title (Mapper) [Hard].osu"
  %(prog)s path/to/beatmapset/
  %(prog)s path/to/beatmapset/ --disable-marker cut_ver
  %(prog)s --list-markers

Exit codes:
  0  no problems found
  1  incorrectly formatted title markers found
  2  no input could be loaded
        """
    )

    parser.add_argument(
        "paths",
        nargs="*",
        help="Beatmap (.osu) files or beatmapset folders to check"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    parser.add_argument(
        "--no-unicode",
        action="store_true",
        help="Skip the unicode title field"
    )

    parser.add_argument(
        "--disable-marker",
        action="append",
        choices=MARKER_NAMES,
        default=[],
        metavar="NAME",
        help=f"Skip a marker (one of: {', '.join(MARKER_NAMES)}); may be repeated"
    )

    parser.add_argument(
        "--list-markers",
        action="store_true",
        help="List the checked markers and exit"
    )

    return parser


def main(argv=None) -> int:
    """Command line interface."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_markers:
        show_markers()
        return 0

    if not args.paths:
        parser.error("at least one path is required")

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    config = ValidationConfig(check_unicode_title=not args.no_unicode)
    for marker_name in args.disable_marker:
        config.disable_marker(marker_name)

    logger.debug(f"Configuration: {config.get_config_summary()}")

    error_handler.clear_errors()
    coordinator = ValidationCoordinator(config=config, error_handler=error_handler)
    coordinator.start_session()
    coordinator.validate_paths(args.paths)
    report = coordinator.end_session()

    print(format_report(report))

    if error_handler.has_errors():
        error_summary = error_handler.get_error_summary()
        print(f"\nCould not load {error_summary['error_count']} input(s):")
        for error in error_summary['errors']:
            print(f"  • [{error['code']}] {error['message']}")
            if error['suggested_actions']:
                print(f"    Suggestion: {error['suggested_actions'][0]}")

    if report.total_records == 0:
        return 2
    if report.has_problems() and config.fail_on_problems:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
