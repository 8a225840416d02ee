"""
Recursive comparison of two JSON documents.

Produces a map from dot-joined json path to a rendered difference. Values in
the map are HTML-safe: either a word/line diff with <del>/<ins> markup, or a
"See ..." back-reference to the first place the same delta was rendered.
"""

from __future__ import annotations

import html
import json
from typing import Any

from docdiff.canonicalize import canonicalize, is_html
from docdiff.config import DiffOptions
from docdiff.dedup import DedupCache, Seen, digest_pair
from docdiff.policy import (
    is_ignored_key,
    is_specification_key,
    make_key,
    normalize_string,
    should_skip,
    sort_specifications,
)
from docdiff.textdiff import diff_lines, diff_words

JsonPath = tuple[str | int, ...]


def _same_kinds(lhs: Any, rhs: Any) -> bool:
    if type(lhs) is not type(rhs):
        return False
    if isinstance(lhs, dict):
        return all(_same_kinds(value, rhs[key]) for key, value in lhs.items())
    if isinstance(lhs, list):
        return all(_same_kinds(a, b) for a, b in zip(lhs, rhs))
    return True


def json_equal(lhs: Any, rhs: Any) -> bool:
    """Equality of JSON values; unlike ==, true != 1 and 1 != 1.0."""
    return lhs == rhs and _same_kinds(lhs, rhs)


def to_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _render(lhs: str, rhs: str, options: DiffOptions) -> str:
    if options.fast:
        return diff_lines(lhs, rhs)
    return diff_words(lhs, rhs)


def _diff_strings(
    lhs: str,
    rhs: str,
    file: str,
    key: str,
    out: dict[str, str],
    options: DiffOptions,
    cache: DedupCache | None,
) -> None:
    lhs = normalize_string(key, lhs)
    rhs = normalize_string(key, rhs)

    if is_html(lhs) and is_html(rhs):
        lhs = canonicalize(lhs, options)
        rhs = canonicalize(rhs, options)

    if lhs == rhs:
        return

    if cache is not None:
        digest = digest_pair(lhs, rhs)
        if cache.record(digest, f"{file} {key}") is Seen.ALREADY_SEEN:
            out[key] = f"See {html.escape(cache.lookup(digest) or '', quote=False)}"
            return

    out[key] = _render(lhs, rhs, options)


def full_diff(
    lhs: Any,
    rhs: Any,
    file: str,
    path: JsonPath,
    out: dict[str, str],
    options: DiffOptions,
    cache: DedupCache | None = None,
) -> None:
    """Record every reportable difference between lhs and rhs into out."""
    key = make_key(path)

    if should_skip(file, path, key):
        return

    if json_equal(lhs, rhs):
        return

    if is_ignored_key(key, options):
        return

    if isinstance(lhs, list) and isinstance(rhs, list):
        if is_specification_key(key):
            lhs = sort_specifications(lhs)
            rhs = sort_specifications(rhs)
        for i in range(max(len(lhs), len(rhs))):
            full_diff(
                lhs[i] if i < len(lhs) else None,
                rhs[i] if i < len(rhs) else None,
                file,
                path + (i,),
                out,
                options,
                cache,
            )

    elif isinstance(lhs, dict) and isinstance(rhs, dict):
        for name in lhs.keys() | rhs.keys():
            full_diff(lhs.get(name), rhs.get(name), file, path + (name,), out, options, cache)

    elif isinstance(lhs, str) and isinstance(rhs, str):
        _diff_strings(lhs, rhs, file, key, out, options, cache)

    else:
        lhs_json = to_json(lhs)
        rhs_json = to_json(rhs)
        if lhs_json != rhs_json:
            out[key] = diff_words(lhs_json, rhs_json)


def diff_document(
    file: str,
    lhs: Any,
    rhs: Any,
    options: DiffOptions,
    cache: DedupCache | None = None,
) -> dict[str, str]:
    """Compare one document from each side; returns divergences ordered by path."""
    out: dict[str, str] = {}
    full_diff(lhs, rhs, file, (), out, options, cache)
    return dict(sorted(out.items()))
