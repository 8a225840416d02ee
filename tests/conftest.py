import json
from pathlib import Path

import pytest

from docdiff.config import DiffOptions


@pytest.fixture
def options() -> DiffOptions:
    return DiffOptions(jobs=4)


@pytest.fixture
def make_corpus(tmp_path: Path):
    """Write {relative path: document} under tmp_path/<name> and return the root."""

    def _make(name: str, documents: dict) -> Path:
        root = tmp_path / name
        root.mkdir()
        for rel_path, document in documents.items():
            path = root / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(document), encoding="utf-8")
        return root

    return _make

