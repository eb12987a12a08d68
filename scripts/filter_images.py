# Path: scripts/filter_images.py
# Purpose: CLI tool that lists images (or directories) under a root folder that pass the configured filters.
# Layer: scripts.
# Details: Resolves arguments over the JSON config file, runs the filter pipeline, prints one path per line.

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

# Ensure project root is on sys.path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import AppSettings, default_config_path, ensure_config_file, load_settings
from core.errors import ImgSiftError
from core.filtering.pipeline import FilterOptions, FilterPipeline
from core.models.domain import NodeType, Range, ScoreFilter

logger = logging.getLogger("imgsift")

EXIT_OK = 0
EXIT_FAILURE = 1


def _range_arg(text: str) -> Range:
    try:
        return Range.parse(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _score_filter_arg(text: str) -> ScoreFilter:
    try:
        return ScoreFilter.parse(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="imgsift",
        description="List images under a folder, filtered by dimensions and metadata scores.",
    )
    parser.add_argument("-d", "--directory", type=Path, help="Root folder to scan (overrides config)")
    parser.add_argument("-m", "--metadata-path", type=Path, help="JSON metadata file with per-image scores")
    parser.add_argument(
        "-s",
        "--score-filter",
        dest="score_filters",
        action="append",
        type=_score_filter_arg,
        metavar="FILTER",
        help="Score filter such as 'score>=5.0'; repeat to combine with AND",
    )
    parser.add_argument("--width", dest="width_range", type=_range_arg, metavar="MIN..MAX", help="Accepted widths")
    parser.add_argument("--height", dest="height_range", type=_range_arg, metavar="MIN..MAX", help="Accepted heights")
    parser.add_argument(
        "-t",
        "--node-type",
        choices=[node_type.value for node_type in NodeType],
        default=NodeType.IMAGE.value,
        help="List images (default) or directories",
    )
    parser.add_argument("--config", type=Path, help="Config file to use instead of the default location")
    parser.add_argument("--generate-config", action="store_true", help="Print the default config and exit")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar while probing dimensions")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    return parser


def _log_level(args: argparse.Namespace, settings: Optional[AppSettings]) -> int:
    if args.quiet:
        return logging.ERROR
    if args.verbose >= 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    if settings is not None:
        return logging.getLevelName(settings.log_level)
    return logging.WARNING


def run(args: argparse.Namespace) -> List[Path]:
    """Resolve settings and execute the requested listing, returning the paths to print."""

    config_path = args.config or default_config_path()
    ensure_config_file(config_path)
    logger.info("loading config from %s", config_path)
    settings = load_settings(config_path)
    logging.getLogger().setLevel(_log_level(args, settings))

    options = FilterOptions.resolve(
        settings,
        root=args.directory,
        metadata_path=args.metadata_path,
        score_filters=args.score_filters,
        width_range=args.width_range,
        height_range=args.height_range,
    )
    pipeline = FilterPipeline(options, logger=logger, show_progress=args.progress)
    if NodeType(args.node_type) is NodeType.DIRECTORY:
        return pipeline.list_directories()
    return pipeline.run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the filter CLI and return the process exit status."""

    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=_log_level(args, None), format="%(levelname)s %(name)s: %(message)s")

    if args.generate_config:
        logger.info("generating default config...")
        sys.stdout.write(AppSettings.create_default().to_json())
        return EXIT_OK

    try:
        paths = run(args)
    except ImgSiftError as exc:
        logger.error("critical failure: %s", exc)
        return EXIT_FAILURE

    for path in paths:
        print(path)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
