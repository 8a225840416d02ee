"""
Compare two corpora in parallel and write the HTML or CSV report.
"""

from __future__ import annotations

import csv
import html
import io
import os
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from docdiff.canonicalize import collapse_tag_whitespace, minify
from docdiff.config import DiffOptions
from docdiff.console import BOLD, GREEN, RED, RESET, elapsed_ms, log, warn
from docdiff.corpus import gather
from docdiff.dedup import DedupCache
from docdiff.differ import diff_document, json_equal
from docdiff.errors import ReportError
from docdiff.textdiff import AnsiMarkup, diff_words

CSV_HEADER = ("File", "JSON Path")

# How many one-sided paths the summary lists.
SAMPLE_SIZE = 10

PAGE_TEMPLATE = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1" />
<title>{title}</title>
<style>
body > ul > li {{ list-style: none; }}
summary {{ cursor: pointer; font-weight: bold; }}
ul ul {{ display: flex; flex-direction: column; padding: 0; }}
ul ul > li {{
  margin: 1rem;
  border: 1px solid gray;
  list-style: none;
  display: grid;
  grid-template-areas: "h h" "a b" "r r";
  grid-auto-columns: 1fr 1fr;
}}
ul ul > li > span {{ padding: .5rem; background-color: lightgray; grid-area: h; }}
ul ul > li > div {{ padding: .5rem; overflow-x: auto; }}
ul ul > li > div.a {{ grid-area: a; }}
ul ul > li > div.b {{ grid-area: b; }}
ul ul > li > div.r {{ grid-area: r; }}
dt {{ font-family: monospace; font-weight: bold; }}
pre {{ text-wrap: wrap; }}
del {{ background-color: #fdd; color: #900; }}
ins {{ background-color: #dfd; color: #060; text-decoration: none; }}
</style>
</head>
<body>
<h1>{title}</h1>
<ul>
{body}
</ul>
</body>
</html>
"""


class AtomicCounter:
    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> None:
        with self._lock:
            self._value += 1

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


@dataclass
class ReportItem:
    """One differing document."""

    path: str
    divergences: dict[str, str] = field(default_factory=dict)  # json path -> diff
    before: str | None = None  # plain-value mode only
    after: str | None = None


@dataclass
class RunResult:
    items: list[ReportItem]
    same: int
    total: int
    only_in_a: list[str]
    only_in_b: list[str]
    distinct_deltas: int
    elapsed_ms: float = 0.0

    @property
    def divergence_count(self) -> int:
        return sum(len(item.divergences) for item in self.items)


def category(path: str) -> str:
    """Group key for the HTML report, derived from the leading path segments."""
    parts = path.split("/", 3)
    if len(parts) >= 3 and parts[0] == "docs" and parts[1] == "web":
        return f"docs/web/{parts[2]}"
    if len(parts) >= 2 and parts[0] == "docs":
        return f"docs/{parts[1]}"
    return parts[0]


def compare_value(
    path: str, lhs: Any, rhs: Any, options: DiffOptions
) -> ReportItem | None:
    """Compare projected values directly as text/HTML."""
    left = lhs if isinstance(lhs, str) else ""
    right = rhs if isinstance(rhs, str) else ""

    if options.ignore_html_whitespace:
        left = minify(collapse_tag_whitespace(left))
        right = minify(collapse_tag_whitespace(right))

    if left == right:
        return None

    if options.inline:
        log(f"{BOLD}{path}{RESET}")
        log(diff_words(left, right, AnsiMarkup))

    return ReportItem(path=path, before=left, after=right)


def compare_document(
    path: str,
    lhs: Any,
    rhs: Any,
    options: DiffOptions,
    cache: DedupCache | None,
    same: AtomicCounter,
) -> ReportItem | None:
    """Compare one document; counts it as same when nothing is reported."""
    if json_equal(lhs, rhs):
        same.increment()
        return None

    # CSV rows are json paths, so the CSV report always compares structurally.
    if options.value and options.fmt != "csv":
        item = compare_value(path, lhs, rhs, options)
    else:
        divergences = diff_document(path, lhs, rhs, options, cache)
        item = ReportItem(path=path, divergences=divergences) if divergences else None
        if item is not None and options.inline:
            for key in divergences:
                log(f"  {path} {key}")

    if item is None:
        same.increment()
    return item


def _render_item(item: ReportItem) -> str:
    header = f"<span>{html.escape(item.path)}</span>"
    if item.before is not None or item.after is not None:
        # Rendered as markup on purpose: the panes show the fragments themselves.
        return f'<li>{header}<div class="a">{item.before}</div><div class="b">{item.after}</div></li>'

    entries = "".join(
        f"<dt>{html.escape(key)}</dt><dd><pre><code>{diff}</code></pre></dd>"
        for key, diff in item.divergences.items()
    )
    return f'<li>{header}<div class="r"><dl>{entries}</dl></div></li>'


def render_html(items: list[ReportItem], title: str = "Corpus diff") -> str:
    groups: dict[str, list[ReportItem]] = {}
    for item in items:
        groups.setdefault(category(item.path), []).append(item)

    body = []
    for name in sorted(groups):
        group = groups[name]
        body.append(
            f"<li><details><summary>[{len(group)}] {html.escape(name)}</summary>"
            f"<ul>{''.join(_render_item(item) for item in group)}</ul></details></li>"
        )
    return PAGE_TEMPLATE.format(title=html.escape(title), body="\n".join(body))


def render_csv(items: list[ReportItem]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=";", lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for item in items:
        for key in item.divergences:
            writer.writerow((item.path, key))
    return buffer.getvalue()


def write_atomic(path: Path, content: str) -> None:
    """Write content to path via a temporary file in the same directory."""
    tmp = path.with_name(path.name + ".tmp")
    try:
        tmp.write_text(content, encoding="utf-8")
        os.replace(tmp, path)
    except OSError as e:
        raise ReportError(f"cannot write {path}: {e}") from e
    finally:
        if tmp.exists():
            tmp.unlink()


def compare_corpora(
    a: dict[str, Any],
    b: dict[str, Any],
    options: DiffOptions,
) -> RunResult:
    """Compare every document present on either side, in parallel."""
    keys = sorted(a.keys() | b.keys())
    if options.restrict:
        keys = [k for k in keys if k.startswith(options.restrict)]

    cache = DedupCache() if options.dedup else None
    same = AtomicCounter()
    items: list[ReportItem] = []

    executor = ThreadPoolExecutor(max_workers=options.workers)
    try:
        futures = [
            executor.submit(compare_document, key, a.get(key), b.get(key), options, cache, same)
            for key in keys
        ]
        for future in as_completed(futures):
            item = future.result()
            if item is not None:
                items.append(item)
    except BaseException:
        # Any failure (or Ctrl-C) ends the run; nothing is reported.
        executor.shutdown(wait=False, cancel_futures=True)
        raise
    executor.shutdown()

    # Workers finish in any order; the report is ordered by path.
    items.sort(key=lambda item: item.path)

    return RunResult(
        items=items,
        same=same.value,
        total=len(keys),
        only_in_a=sorted(k for k in keys if k not in b),
        only_in_b=sorted(k for k in keys if k not in a),
        distinct_deltas=len(cache) if cache is not None else 0,
    )


def run(root_a: Path, root_b: Path, options: DiffOptions) -> RunResult:
    """Load both sides, compare them and write the report to options.out."""
    start = time.perf_counter()
    log("Gathering everything...")

    step_start = time.perf_counter()
    a = gather(root_a, options.query)
    b = gather(root_b, options.query)
    log(f"Loaded {len(a)} + {len(b)} documents ({elapsed_ms(step_start, time.perf_counter())})")

    step_start = time.perf_counter()
    result = compare_corpora(a, b, options)
    log(f"Compared {result.total} documents ({elapsed_ms(step_start, time.perf_counter())})")

    if options.out is not None:
        if options.fmt == "csv":
            content = render_csv(result.items)
        else:
            content = render_html(result.items, title=f"{root_a} vs {root_b}")
        write_atomic(options.out, content)
        log(f"Wrote {options.fmt.upper()} report to {options.out}")

    result.elapsed_ms = (time.perf_counter() - start) * 1000
    return result


def _print_only_in(label: str, paths: list[str]) -> None:
    if not paths:
        return
    warn(f"{len(paths)} documents only in {label}")
    for path in paths[:SAMPLE_SIZE]:
        log(f"    {path}")
    if len(paths) > SAMPLE_SIZE:
        log(f"    ... and {len(paths) - SAMPLE_SIZE} more")


def print_summary(result: RunResult) -> None:
    log("\n" + "=" * 60)
    log(f"SUMMARY ({result.elapsed_ms:.1f}ms)")
    log("=" * 60)
    log(f"  Documents compared: {result.total}")
    log(f"  Only in A: {len(result.only_in_a)}")
    log(f"  Only in B: {len(result.only_in_b)}")
    log(f"  Differing documents: {len(result.items)}")
    log(f"  Divergences: {result.divergence_count}")
    log(f"  Distinct deltas rendered: {result.distinct_deltas}")
    _print_only_in("A", result.only_in_a)
    _print_only_in("B", result.only_in_b)

    color = GREEN if not result.items else RED
    log(f"{color}Took: {result.elapsed_ms:.1f}ms - {result.same}/{result.total} ok, "
        f"{result.total - result.same} remaining{RESET}")
