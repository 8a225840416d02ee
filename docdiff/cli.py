"""
Command line entry point.

Usage:
    docdiff diff <root_a> <root_b> --out report.html [options]
    docdiff allowlist <root>
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from docdiff.config import DiffOptions
from docdiff.console import error, log
from docdiff.corpus import gather
from docdiff.errors import DocDiffError
from docdiff.policy import stale_allowlist_entries
from docdiff.report import print_summary, run

COMMANDS = ("diff", "allowlist", "-h", "--help")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docdiff",
        description="Compare two generations of a JSON documentation corpus",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    diff_parser = subparsers.add_parser("diff", help="Compare two corpus directories")
    diff_parser.add_argument("root_a", type=Path, help="First corpus directory (old)")
    diff_parser.add_argument("root_b", type=Path, help="Second corpus directory (new)")
    diff_parser.add_argument("-o", "--out", type=Path, required=True, help="Report file to write")
    diff_parser.add_argument(
        "-q", "--query", default=None,
        help="JSONPath applied to every document before comparing (e.g. '$.doc.body')",
    )
    output = diff_parser.add_mutually_exclusive_group()
    output.add_argument("--html", action="store_true", help="Write an HTML report (default)")
    output.add_argument("--csv", action="store_true", help="Write a 'File;JSON Path' CSV report")
    diff_parser.add_argument(
        "--fast", action="store_true", help="Line-level instead of word-level diffs"
    )
    diff_parser.add_argument(
        "--value", action="store_true",
        help="Compare the projected values directly as text/HTML (HTML report only)",
    )
    diff_parser.add_argument(
        "--ignore-html-whitespace", action="store_true",
        help="With --value, collapse and minify HTML before comparing",
    )
    diff_parser.add_argument(
        "--sidebars", action="store_true", help="Also compare doc.sidebarHTML"
    )
    diff_parser.add_argument(
        "-i", "--inline", action="store_true", help="Echo each difference to the console"
    )
    diff_parser.add_argument(
        "--ignore-ps", action="store_true", help="Unwrap <p> elements before comparing HTML"
    )
    diff_parser.add_argument(
        "--check-dts", action="store_true",
        help="Keep <dt> ids and self-links instead of stripping them",
    )
    diff_parser.add_argument(
        "-j", "--jobs", type=int, default=None,
        help="Number of parallel jobs (default: number of CPUs)",
    )
    diff_parser.add_argument(
        "--restrict", default=None,
        help="Only compare documents whose path starts with this prefix",
    )
    diff_parser.add_argument(
        "--no-dedup", action="store_true",
        help="Render every difference in full, even when it repeats elsewhere",
    )

    allow_parser = subparsers.add_parser(
        "allowlist", help="List allow-list entries that no longer resolve in a corpus"
    )
    allow_parser.add_argument("root", type=Path, help="Corpus directory")

    return parser


def run_diff(args: argparse.Namespace) -> int:
    options = DiffOptions.from_args(args)
    result = run(args.root_a, args.root_b, options)
    print_summary(result)
    return 1 if result.items else 0


def run_allowlist(args: argparse.Namespace) -> int:
    corpus = gather(args.root)
    stale = stale_allowlist_entries(corpus)
    log(f"Checked allow-list against {len(corpus)} documents")
    if not stale:
        log("All allow-list entries resolve.")
        return 0
    log(f"Stale allow-list entries ({len(stale)}):")
    for file, key in stale:
        log(f"  {file} {key}")
    return 1


def main_cli(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommand support."""
    argv = list(sys.argv[1:] if argv is None else argv)
    # If first arg is not a known command or flag, assume it's a directory and prepend "diff"
    if argv and argv[0] not in COMMANDS:
        argv.insert(0, "diff")

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "diff":
            return run_diff(args)
        elif args.command == "allowlist":
            return run_allowlist(args)
        else:
            parser.print_help()
            return 0
    except DocDiffError as e:
        error(str(e))
        return 1
    except KeyboardInterrupt:
        log("\n\nInterrupted! No report written.")
        return 130  # Standard exit code for SIGINT
