"""Command-line front end for the KML element extractor.

This module is purely the wiring layer between the terminal and the
upload orchestrator; all logic lives in the ``kml_viewer`` package.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from kml_viewer.core.config import ViewerConfig
from kml_viewer.core.exceptions import KmlViewerError
from kml_viewer.models.report import to_geojson
from kml_viewer.orchestrators.upload import handle_upload

if TYPE_CHECKING:
    from collections.abc import Sequence

    from kml_viewer.models.report import ViewerReport

logger = logging.getLogger("kml_viewer.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kml-viewer",
        description="Count KML geometries, measure line lengths, and emit map elements.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
    )

    sub = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("summary", "Print the element count table."),
        ("detail", "Print the line length table."),
        ("json", "Print the full UI report as JSON."),
        ("geojson", "Print the map elements as a GeoJSON FeatureCollection."),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("kmlfile", type=Path)
    return parser


def format_summary(report: ViewerReport) -> str:
    lines = [f"{'Element Type':<20}{'Count':>8}"]
    lines.extend(f"{row.element_type:<20}{row.count:>8}" for row in report.summary)
    return "\n".join(lines)


def format_detail(report: ViewerReport, precision: int = 2) -> str:
    lines = [f"{'Element Type':<20}{'Length (meters)':>18}"]
    lines.extend(
        f"{row.element_type:<20}{row.length_m:>18.{precision}f}" for row in report.detail
    )
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ViewerConfig.from_env()
    except (KmlViewerError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    kml_path: Path = args.kmlfile
    try:
        content = kml_path.read_bytes()
    except OSError as exc:
        print(f"error: cannot read {kml_path}: {exc}", file=sys.stderr)
        return 1

    outcome = handle_upload(content, filename=kml_path.name, config=config)
    if not outcome.ok or outcome.report is None or outcome.result is None:
        print(f"error: {outcome.error_message}", file=sys.stderr)
        return 1

    if args.command == "summary":
        print(format_summary(outcome.report))
    elif args.command == "detail":
        print(format_detail(outcome.report, config.length_precision))
    elif args.command == "json":
        print(outcome.report.to_json())
    else:
        print(json.dumps(to_geojson(outcome.result), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
