# symbol_clusters/scan_symbol_clusters.py
"""Report the most frequent symbol clusters of a source tree.

Example:
    symbol-clusters --ext kt,kts --ignore build,.gradle --top 10 path/to/project
"""
import argparse
import sys
import time

from symbol_clusters import config
from symbol_clusters.render import render_table
from symbol_clusters.scan import ScanError, analyze_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Count the most frequent single, paired and tripled symbols per file extension.")
    parser.add_argument("path", help="Directory to walk, or a single file to analyse.")
    parser.add_argument(
        "--ext",
        type=config.parse_list,
        default=config.DEFAULT_EXTENSIONS,
        help=f"Comma separated file extensions to analyse (default: {','.join(config.DEFAULT_EXTENSIONS)}).",
    )
    parser.add_argument(
        "--ignore",
        type=config.parse_list,
        default=config.DEFAULT_EXCLUDED_FOLDERS,
        help=f"Comma separated path fragments to skip (default: {','.join(config.DEFAULT_EXCLUDED_FOLDERS)}).",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=config.DEFAULT_TOP_N,
        help=f"Rows to show per table, clamped to 1..{config.N_MAX} (default: {config.DEFAULT_TOP_N}).",
    )
    parser.add_argument(
        "--width",
        type=int,
        choices=[1, 2, 3],
        default=config.DEFAULT_WINDOW_WIDTH,
        help="Window width. 1 counts single symbols only, 3 also counts pairs and triples.",
    )
    parser.add_argument("--jobs", type=int, default=1, help="Worker threads used to read files (default: 1).")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar.")
    return parser


def print_report(aggregator, top_n: int):
    scopes = list(aggregator.scopes())
    # The combined table repeats the only extension table when there is one
    if len(aggregator) == 1:
        scopes = scopes[:1]
    for scope, table in scopes:
        print(render_table(scope, table, top_n))


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    top_n = config.clamp_top_n(args.top)
    if top_n != args.top:
        print(f"⚠️ --top {args.top} is out of range, showing {top_n} rows.", file=sys.stderr)

    print(f"Analyzing: {args.path}")
    started = time.monotonic()
    try:
        aggregator, file_count = analyze_path(
            args.path,
            args.ext,
            args.ignore,
            window_width=args.width,
            jobs=args.jobs,
            progress=not args.no_progress,
        )
    except ScanError as e:
        print(f"❌ ERROR: Could not read {e.path}: {e.reason}", file=sys.stderr)
        return 1
    elapsed = int(time.monotonic() - started)
    print(f"Analyzed {file_count} files")

    if aggregator:
        print_report(aggregator, top_n)
    else:
        print(f"ℹ️ No symbols found in files with extension(s): {', '.join(args.ext)}")

    print(f"Analyzes took {elapsed} seconds.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
