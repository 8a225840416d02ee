"""Run configuration shared by every worker of a comparison run."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path

# Name of the per-document files written by the rendering pipeline.
INDEX_FILE = "index.json"

# Parser used for HTML fragments. lxml wraps fragments in <html><body> and
# leading text in <p>, which would change what is being compared.
FRAGMENT_PARSER = "html.parser"


@dataclass(frozen=True)
class DiffOptions:
    """Flags that change how documents are compared and reported."""

    query: str | None = None  # JSONPath projection applied to every document
    out: Path | None = None
    fmt: str = "html"  # "html" or "csv"
    fast: bool = False  # line-level instead of word-level diffs
    value: bool = False  # compare projected values as plain text/HTML
    inline: bool = False  # echo each diff to the console
    ignore_html_whitespace: bool = False  # plain-value mode only
    sidebars: bool = False  # include doc.sidebarHTML
    check_dts: bool = False  # keep <dt> ids and self-links
    ignore_ps: bool = False  # unwrap <p> before comparing
    jobs: int | None = None
    restrict: str | None = None  # only compare documents under this prefix
    dedup: bool = True

    @property
    def workers(self) -> int:
        return self.jobs or os.cpu_count() or 1

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> DiffOptions:
        return cls(
            query=args.query,
            out=args.out,
            fmt="csv" if args.csv else "html",
            fast=args.fast,
            value=args.value,
            inline=args.inline,
            ignore_html_whitespace=args.ignore_html_whitespace,
            sidebars=args.sidebars,
            check_dts=args.check_dts,
            ignore_ps=args.ignore_ps,
            jobs=args.jobs,
            restrict=args.restrict,
            dedup=not args.no_dedup,
        )
