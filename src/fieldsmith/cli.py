"""Command-line interface for FieldSmith."""

import argparse
import csv
import json
import logging
import sys
from pathlib import Path

import uvicorn

from .config import settings
from .detection import score_header_rows, pick_header_row
from .mapping import auto_map_fields_to_columns
from .matching import search_fields
from .registry import get_fields_by_category


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="FieldSmith - canonical field resolution for spreadsheet exports"
    )
    parser.add_argument(
        "--log-level", default=settings.log_level, help="Logging level (default: from LOG_LEVEL)"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Server command
    server_parser = subparsers.add_parser("serve", help="Start the web server")
    server_parser.add_argument(
        "--host", default=settings.host, help="Host to bind to (default: 127.0.0.1)"
    )
    server_parser.add_argument(
        "--port", type=int, default=settings.port, help="Port to bind to (default: 8000)"
    )
    server_parser.add_argument(
        "--reload", action="store_true", help="Enable auto-reload for development"
    )

    # Fields command
    fields_parser = subparsers.add_parser("fields", help="List canonical fields")
    fields_parser.add_argument("--search", "-q", help="Filter by name or alias")

    # Detect command
    detect_parser = subparsers.add_parser("detect", help="Detect the header row of a CSV file")
    detect_parser.add_argument("file", type=Path, help="CSV export to inspect")
    detect_parser.add_argument(
        "--rows", type=int, default=settings.header_scan_rows, help="Rows to scan (default: 5)"
    )

    # Map command
    map_parser = subparsers.add_parser("map", help="Map canonical fields onto a CSV header")
    map_parser.add_argument("file", type=Path, help="CSV export to map")
    map_parser.add_argument(
        "--fields", "-f", required=True, help="Comma-separated canonical field keys"
    )
    map_parser.add_argument(
        "--rows", type=int, default=settings.header_scan_rows, help="Rows to scan (default: 5)"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        run_server(args.host, args.port, args.reload)
    elif args.command == "fields":
        run_fields(args.search)
    elif args.command == "detect":
        run_detect(args.file, args.rows)
    elif args.command == "map":
        run_map(args.file, [k.strip() for k in args.fields.split(",") if k.strip()], args.rows)
    else:
        parser.print_help()
        sys.exit(1)


def run_server(host: str, port: int, reload: bool):
    """Run the web server."""
    uvicorn.run(
        "fieldsmith.api:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )


def read_csv_rows(path: Path, limit=None) -> list[list[str]]:
    """Read a CSV export into a grid of text cells."""
    try:
        with path.open(newline="", encoding="utf-8-sig") as handle:
            rows = []
            for row in csv.reader(handle):
                rows.append(row)
                if limit is not None and len(rows) >= limit:
                    break
            return rows
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        print(f"Error reading {path}: {e}", file=sys.stderr)
        sys.exit(1)


def run_fields(query: str = None):
    """Print canonical fields grouped by category."""
    matching_keys = {field.key for field in search_fields(query)}
    for category, fields in get_fields_by_category().items():
        shown = [f for f in fields if f.key in matching_keys]
        if not shown:
            continue
        print(f"{category}:")
        for field in shown:
            print(f"  {field.key:<18} {field.display_name}  ({', '.join(field.aliases)})")


def run_detect(path: Path, max_rows: int):
    """Print the detected header row and the per-row scores."""
    # Look-ahead needs rows beyond the scan window
    grid = read_csv_rows(path, limit=max_rows + 5)
    scores = score_header_rows(grid, max_rows, settings.header_match_confidence)
    header_row_index = pick_header_row(scores)

    print(
        json.dumps(
            {
                "header_row_index": header_row_index,
                "header_row": grid[header_row_index] if grid else [],
                "scores": [s.model_dump() for s in scores],
            },
            indent=2,
        )
    )


def run_map(path: Path, field_keys: list[str], max_rows: int):
    """Detect the header row, then auto-map the requested fields onto it."""
    grid = read_csv_rows(path, limit=max_rows + 5)
    if not grid:
        print(f"Error: {path} is empty", file=sys.stderr)
        sys.exit(1)

    scores = score_header_rows(grid, max_rows, settings.header_match_confidence)
    header_row_index = pick_header_row(scores)
    result = auto_map_fields_to_columns(
        field_keys,
        grid[header_row_index],
        minimum_confidence=settings.auto_map_confidence,
    )

    payload = {"header_row_index": header_row_index, **result.model_dump(mode="json")}
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
