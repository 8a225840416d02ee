import csv
import io

from docdiff.allowlist import ALLOWLIST
from docdiff.cli import build_parser, main_cli
from docdiff.config import DiffOptions
from tests.helpers import body_doc


def test_identical_corpora_exit_zero(make_corpus, tmp_path, capsys):
    documents = {"docs/web/x/index.json": body_doc("<p>x</p>")}
    a = make_corpus("a", documents)
    b = make_corpus("b", documents)
    out = tmp_path / "report.html"

    assert main_cli(["diff", str(a), str(b), "--out", str(out)]) == 0
    assert out.exists()
    assert "1/1 ok, 0 remaining" in capsys.readouterr().out


def test_diff_is_the_default_command(make_corpus, tmp_path):
    a = make_corpus("a", {"x/index.json": {"doc": {"title": "Old"}}})
    b = make_corpus("b", {"x/index.json": {"doc": {"title": "New"}}})
    out = tmp_path / "report.csv"

    assert main_cli([str(a), str(b), "-o", str(out), "--csv", "-j", "1"]) == 1
    rows = list(csv.reader(io.StringIO(out.read_text(encoding="utf-8")), delimiter=";"))
    assert rows == [["File", "JSON Path"], ["x/index.json", "doc.title"]]


def test_missing_root_is_an_error(make_corpus, tmp_path, capsys):
    a = make_corpus("a", {"x/index.json": {}})
    out = tmp_path / "report.html"

    assert main_cli([str(a), str(tmp_path / "missing"), "-o", str(out)]) == 1
    assert "Error:" in capsys.readouterr().err
    assert not out.exists()


def test_invalid_query_is_an_error(make_corpus, tmp_path, capsys):
    a = make_corpus("a", {"x/index.json": {}})
    out = tmp_path / "report.html"

    assert main_cli([str(a), str(a), "-o", str(out), "-q", "$["]) == 1
    assert "invalid query" in capsys.readouterr().err
    assert not out.exists()


def test_options_from_args(tmp_path):
    args = build_parser().parse_args([
        "diff", "a", "b", "-o", str(tmp_path / "r.csv"), "--csv", "--fast",
        "--sidebars", "--no-dedup", "--restrict", "docs/web/", "-j", "3",
    ])
    options = DiffOptions.from_args(args)
    assert options.fmt == "csv"
    assert options.fast
    assert options.sidebars
    assert not options.dedup
    assert options.restrict == "docs/web/"
    assert options.workers == 3


def test_allowlist_reports_stale_entries(make_corpus, capsys):
    file, key = sorted(ALLOWLIST)[0]
    root = make_corpus("a", {file: {"doc": {}}})

    assert main_cli(["allowlist", str(root)]) == 1
    assert f"{file} {key}" in capsys.readouterr().out


def test_allowlist_clean_corpus(make_corpus):
    root = make_corpus("a", {"unrelated/index.json": {}})
    assert main_cli(["allowlist", str(root)]) == 0


def test_one_sided_documents_are_listed(make_corpus, tmp_path, capsys):
    a = make_corpus("a", {"x/index.json": {}, "gone/index.json": {}})
    b = make_corpus("b", {"x/index.json": {}})

    assert main_cli([str(a), str(b), "-o", str(tmp_path / "r.html")]) == 1
    captured = capsys.readouterr()
    assert "Warning: 1 documents only in A" in captured.err
    assert "gone/index.json" in captured.out


def test_unwritable_report_is_an_error(make_corpus, tmp_path, capsys):
    a = make_corpus("a", {"x/index.json": {"doc": {"title": "Old"}}})
    b = make_corpus("b", {"x/index.json": {"doc": {"title": "New"}}})

    assert main_cli([str(a), str(b), "-o", str(tmp_path / "nodir" / "r.html")]) == 1
    assert "Error: cannot write" in capsys.readouterr().err


def test_malformed_document_is_an_error(make_corpus, tmp_path, capsys):
    a = make_corpus("a", {"x/index.json": {}})
    b = make_corpus("b", {"x/index.json": {}})
    (b / "x" / "index.json").write_text('{"doc": {"title": "\\ud800 old"}}', encoding="utf-8")
    out = tmp_path / "r.html"

    assert main_cli([str(a), str(b), "-o", str(out)]) == 1
    assert "Error: malformed JSON in x/index.json" in capsys.readouterr().err
    assert not out.exists()
