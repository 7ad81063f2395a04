"""Command-line interface for the campus paths client."""

import argparse
import asyncio
import logging
import sys

from src.campus_paths.app import CampusPathsApp
from src.campus_paths.client import CampusPathsClient
from src.campus_paths.config import load_settings
from src.campus_paths.directions import render_panel, render_printable
from src.campus_paths.errors import UnknownBuildingError
from src.campus_paths.renderer import OverlayRenderer, RasterAsset
from src.campus_paths.viewer import create_figure, export_html, follow_transform, show_figure
from src.logging_config import PACKAGE_LOGGER, setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Campus Paths - shortest walking routes between campus buildings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List building short names
  uv run python -m src.campus_paths.cli --list

  # Directions from CSE to MGH, map opened in the browser
  uv run python -m src.campus_paths.cli --start CSE --end MGH

  # Zoom in twice and export the map instead of opening it
  uv run python -m src.campus_paths.cli --start CSE --end MGH --zoom 2 --export route.html

  # Save printable directions
  uv run python -m src.campus_paths.cli --start CSE --end MGH --print-directions route.txt
        """,
    )

    parser.add_argument(
        "--start",
        type=str,
        metavar="SHORT",
        help="Short name of the start building",
    )
    parser.add_argument(
        "--end",
        type=str,
        metavar="SHORT",
        help="Short name of the destination building",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List all buildings and exit",
    )
    parser.add_argument(
        "--server",
        type=str,
        metavar="URL",
        help="Routing service base URL (default: $CAMPUS_PATHS_SERVER_URL or http://localhost:4567)",
    )
    parser.add_argument(
        "--map",
        type=str,
        metavar="IMAGE",
        help="Background campus map image",
    )
    parser.add_argument(
        "--marker",
        type=str,
        metavar="IMAGE",
        help="Marker icon for the start and destination buildings",
    )
    parser.add_argument(
        "--zoom",
        type=int,
        default=0,
        metavar="STEPS",
        help="Zoom steps to apply to the view (negative zooms out)",
    )
    parser.add_argument(
        "--export",
        type=str,
        metavar="FILE",
        help="Export the map to an HTML file instead of opening the browser",
    )
    parser.add_argument(
        "--print-directions",
        type=str,
        metavar="FILE",
        help="Write printable directions to a text file",
    )
    parser.add_argument(
        "--save-frame",
        type=str,
        metavar="FILE",
        help="Save the rendered map frame as an image",
    )
    parser.add_argument(
        "--no-show",
        action="store_true",
        help="Do not open the map in the browser",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


async def print_notice(message: str) -> None:
    print(message, file=sys.stderr)


async def run(args: argparse.Namespace) -> int:
    """Run one CLI session; returns the process exit code."""
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    server_url = args.server or settings.server_url

    background = RasterAsset(args.map or settings.map_image)
    marker = RasterAsset(args.marker or settings.marker_image)
    background.load()
    marker.load()
    renderer = OverlayRenderer(background, marker)

    async with CampusPathsClient(server_url, timeout=settings.timeout) as client:
        app = CampusPathsApp(client, renderer)

        if not await app.load_buildings(print_notice):
            return 1

        if args.list:
            for long_name, short_name in app.building_options():
                print(f"{short_name:<8} {long_name}")
            return 0

        if bool(args.start) != bool(args.end):
            print("Error: --start and --end must be given together", file=sys.stderr)
            return 2

        if args.start and args.end:
            try:
                app.select_start(args.start)
                app.select_end(args.end)
            except UnknownBuildingError as e:
                print(f"Error: {e}", file=sys.stderr)
                return 1
            await app.request_path(print_notice)

    result = app.render()
    print(render_panel(result.directions))

    if args.print_directions:
        if result.directions.is_empty:
            print("Nothing to print: no directions", file=sys.stderr)
        else:
            with open(args.print_directions, "w", encoding="utf-8") as f:
                f.write(render_printable(result.directions))
            print(f"Directions written to {args.print_directions}")

    if args.save_frame:
        result.frame.save(args.save_frame)
        print(f"Frame saved to {args.save_frame}")

    fig = create_figure(result.frame, app.transform, result.directions)
    follow_transform(fig, app.transform, result.frame.size)
    for _ in range(abs(args.zoom)):
        if args.zoom > 0:
            app.transform.zoom_in()
        else:
            app.transform.zoom_out()

    if args.export:
        logger.info(f"Exporting to {args.export}")
        export_html(fig, args.export)
        print(f"Exported to {args.export}")
    elif not args.no_show:
        logger.info("Opening in browser")
        show_figure(fig)

    return 0


def main() -> None:
    """Main entry point for campus paths CLI."""
    args = build_parser().parse_args()

    setup_logging()
    if args.verbose:
        logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)

    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
