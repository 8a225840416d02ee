"""
Which differences are expected, and how values are normalized before they
are compared.

The tables here are plain data so that they can be audited and validated
without running a comparison. The predicates are evaluated by the differ in
this order: root url, skipped files, allow-list, ignored keys, sidebar key.
"""

from __future__ import annotations

import json
from typing import Any

from docdiff.allowlist import ALLOWLIST
from docdiff.config import DiffOptions

# Document path prefixes that are not compared at all.
SKIP_PREFIXES: tuple[str, ...] = (
    "docs/mdn/writing_guidelines/",
    "docs/mozilla/add-ons/webextensions/",
    "docs/mozilla/firefox/releases/",
)

# Key prefixes of volatile fields: timestamps, popularity, diagnostics.
IGNORED_KEYS: tuple[str, ...] = (
    "doc.flaws",
    "blogMeta.readTime",
    "doc.modified",
    "doc.popularity",
    "doc.source.github_url",
    "doc.source.last_commit_url",
    "doc.sidebarMacro",
    "doc.hasMathML",
    "doc.other_translations",
    "doc.summary",
)

# Only compared with --sidebars.
SIDEBAR_KEY = "doc.sidebarHTML"

# Arrays under keys with this suffix have no meaningful order.
SPECIFICATIONS_SUFFIX = "specifications"
SPECIFICATION_SORT_FIELD = "bcdSpecificationURL"

POLICY_TABLES = {
    "skip_prefixes": SKIP_PREFIXES,
    "ignored_keys": IGNORED_KEYS,
    "allowlist": ALLOWLIST,
}


def make_key(path: tuple[str | int, ...]) -> str:
    """Render a json path as the dot-joined key used in reports."""
    return ".".join(str(segment) for segment in path)


def is_root_url(path: tuple[str | int, ...]) -> bool:
    return len(path) == 1 and path[0] == "url"


def is_skipped_file(file: str) -> bool:
    return file.startswith(SKIP_PREFIXES)


def is_allowed(file: str, key: str) -> bool:
    return (file, key) in ALLOWLIST


def should_skip(file: str, path: tuple[str | int, ...], key: str) -> bool:
    """Differences here are never reported, whatever the values are."""
    return is_root_url(path) or is_skipped_file(file) or is_allowed(file, key)


def is_ignored_key(key: str, options: DiffOptions) -> bool:
    """Differing values under this key are not reported."""
    if key.startswith(IGNORED_KEYS):
        return True
    return key == SIDEBAR_KEY and not options.sidebars


def _strip_id_suffix(value: str) -> str:
    return value.rstrip("_0123456789")


def normalize_string(key: str, value: str) -> str:
    """Apply the key-specific normalization to a string before comparing."""
    if key == "doc.sidebarMacro":
        return value.lower()
    if key == "doc.summary":
        return value.replace("\n  ", "\n")
    if key.startswith("doc.") and key.endswith("value.id"):
        # Generated heading ids get renumbered (heading_2 -> heading_3).
        return _strip_id_suffix(value)
    return value


def is_specification_key(key: str) -> bool:
    return key.endswith(SPECIFICATIONS_SUFFIX)


def _specification_sort_key(entry: Any) -> str:
    url = entry.get(SPECIFICATION_SORT_FIELD) if isinstance(entry, dict) else None
    return json.dumps(url, ensure_ascii=False)


def sort_specifications(entries: list[Any]) -> list[Any]:
    """Sort a specification list by its nested URL (missing sorts as null)."""
    return sorted(entries, key=_specification_sort_key)


def resolve_key(document: Any, key: str) -> bool:
    """Check whether a dot-joined key names a value inside document."""
    node = document
    for segment in key.split("."):
        if isinstance(node, dict) and segment in node:
            node = node[segment]
        elif isinstance(node, list) and segment.isdigit() and int(segment) < len(node):
            node = node[int(segment)]
        else:
            return False
    return True


def stale_allowlist_entries(corpus: dict[str, Any]) -> list[tuple[str, str]]:
    """
    Find allow-list entries that no longer point at anything.

    Only entries whose file is present in the corpus are checked; an entry
    whose json path does not resolve in that document is stale.
    """
    stale = []
    for file, key in sorted(ALLOWLIST):
        if file in corpus and not resolve_key(corpus[file], key):
            stale.append((file, key))
    return stale
