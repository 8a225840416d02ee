"""Load one side of a comparison: every index file under a root directory."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jsonpath_ng import parse as parse_jsonpath
from jsonpath_ng.exceptions import JSONPathError

from docdiff.config import INDEX_FILE
from docdiff.errors import CorpusError


def compile_query(query: str):
    """Compile a JSONPath projection, failing before any file is read."""
    try:
        return parse_jsonpath(query)
    except JSONPathError as e:
        raise CorpusError(f"invalid query {query!r}: {e}") from e


def find_index_files(directory: Path) -> set[Path]:
    """Find all index files in a directory, returning relative paths.

    Files below hidden directories (.git, .cache, ...) are not part of the
    rendered output and are skipped.
    """
    files = set()
    for path in directory.rglob(INDEX_FILE):
        rel_path = path.relative_to(directory)
        if any(part.startswith(".") for part in rel_path.parts[:-1]):
            continue
        if path.is_file():
            files.add(rel_path)
    return files


def load_document(path: Path, rel_path: str) -> Any:
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
        # Lone surrogate escapes ("\ud800") parse but are not valid text.
        json.dumps(document, ensure_ascii=False).encode("utf-8")
    except OSError as e:
        raise CorpusError(f"cannot read {rel_path}: {e}") from e
    except ValueError as e:
        raise CorpusError(f"malformed JSON in {rel_path}: {e}") from e
    return document


def gather(root: Path, query: str | None = None) -> dict[str, Any]:
    """
    Load every index file under root.

    Returns a mapping from the POSIX path relative to root to the parsed
    document, or to the first match of the query when one is given. A query
    that matches nothing yields None for that document.

    Any unreadable file or malformed document aborts the whole load.
    """
    expr = compile_query(query) if query else None

    if not root.is_dir():
        raise CorpusError(f"{root} is not a directory")

    try:
        rel_paths = sorted(find_index_files(root))
    except OSError as e:
        raise CorpusError(f"cannot walk {root}: {e}") from e

    corpus: dict[str, Any] = {}
    for rel_path in rel_paths:
        key = rel_path.as_posix()
        document = load_document(root / rel_path, key)
        if expr is not None:
            matches = expr.find(document)
            document = matches[0].value if matches else None
        corpus[key] = document
    return corpus
