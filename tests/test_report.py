import csv
import io
from dataclasses import replace

import pytest

from docdiff.config import DiffOptions
from docdiff.errors import ReportError
from docdiff.report import (
    CSV_HEADER,
    ReportItem,
    category,
    compare_corpora,
    render_csv,
    render_html,
    run,
    write_atomic,
)
from tests.helpers import body_doc


def test_self_comparison_is_clean(options):
    corpus = {
        "docs/web/a/index.json": body_doc("<p>a</p>"),
        "docs/web/b/index.json": body_doc("<p>b</p>"),
    }
    result = compare_corpora(corpus, corpus, options)
    assert result.items == []
    assert result.same == result.total == 2


def test_repeated_delta_rendered_once_across_documents(options):
    a = {f"docs/web/{name}/index.json": body_doc(title="Old") for name in "xyz"}
    b = {f"docs/web/{name}/index.json": body_doc(title="New") for name in "xyz"}
    result = compare_corpora(a, b, options)

    rendered = [item.divergences["doc.title"] for item in result.items]
    full = [r for r in rendered if not r.startswith("See ")]
    back_refs = [r for r in rendered if r.startswith("See ")]
    assert len(full) == 1
    assert len(back_refs) == 2
    assert result.distinct_deltas == 1

    # Every back-reference points at the document that carries the full diff.
    owner = next(item.path for item in result.items if item.divergences["doc.title"] == full[0])
    assert set(back_refs) == {f"See {owner} doc.title"}


def test_no_dedup_renders_everything(options):
    a = {f"docs/web/{name}/index.json": body_doc(title="Old") for name in "xyz"}
    b = {f"docs/web/{name}/index.json": body_doc(title="New") for name in "xyz"}
    result = compare_corpora(a, b, replace(options, dedup=False))
    assert all(not item.divergences["doc.title"].startswith("See ") for item in result.items)
    assert result.distinct_deltas == 0


def test_items_are_ordered_by_path(options):
    names = ["d", "b", "e", "a", "c"]
    a = {f"docs/web/{n}/index.json": body_doc(title="Old") for n in names}
    b = {f"docs/web/{n}/index.json": body_doc(title="New") for n in names}
    result = compare_corpora(a, b, options)
    assert [item.path for item in result.items] == sorted(a)


def test_documents_on_one_side_only(options):
    doc = body_doc("<p>x</p>")
    result = compare_corpora({"a/index.json": doc}, {"b/index.json": doc}, options)
    assert result.only_in_a == ["a/index.json"]
    assert result.only_in_b == ["b/index.json"]
    assert [item.path for item in result.items] == ["a/index.json", "b/index.json"]
    # The whole document differs from the missing one, so the path is empty.
    assert [list(item.divergences) for item in result.items] == [[""], [""]]
    assert result.items[1].divergences[""].startswith("<del>null</del><ins>")


def test_restrict_limits_compared_documents(options):
    a = {"docs/web/css/index.json": {"t": 1}, "docs/web/html/index.json": {"t": 1}}
    b = {"docs/web/css/index.json": {"t": 2}, "docs/web/html/index.json": {"t": 2}}
    result = compare_corpora(a, b, replace(options, restrict="docs/web/css/"))
    assert result.total == 1
    assert [item.path for item in result.items] == ["docs/web/css/index.json"]


def test_inline_logs_divergent_paths(options, capsys):
    a = {"x/index.json": {"doc": {"title": "Old"}}}
    b = {"x/index.json": {"doc": {"title": "New"}}}
    compare_corpora(a, b, replace(options, inline=True))
    assert "x/index.json doc.title" in capsys.readouterr().out


def test_value_mode_compares_fragments(options):
    a = {"x/index.json": "<p>\n  Hello\n</p>", "y/index.json": "<p>Same</p>"}
    b = {"x/index.json": "<p>Hello</p>", "y/index.json": "<p>Other</p>"}

    result = compare_corpora(a, b, replace(options, value=True))
    assert [item.path for item in result.items] == ["x/index.json", "y/index.json"]
    assert result.items[1].before == "<p>Same</p>"
    assert result.items[1].after == "<p>Other</p>"

    result = compare_corpora(a, b, replace(options, value=True, ignore_html_whitespace=True))
    assert [item.path for item in result.items] == ["y/index.json"]
    assert result.same == 1


def test_value_mode_non_strings_compare_as_empty(options):
    result = compare_corpora({"x/index.json": None}, {"x/index.json": 3}, replace(options, value=True))
    assert result.items == []


def test_category():
    assert category("docs/web/css/color/index.json") == "docs/web/css"
    assert category("docs/learn/html/index.json") == "docs/learn"
    assert category("blog/post/index.json") == "blog"
    assert category("index.json") == "index.json"


def test_render_html_groups_by_category():
    items = [
        ReportItem("docs/web/css/a/index.json", {"doc.title": "<del>A</del><ins>B</ins>"}),
        ReportItem("docs/web/css/b/index.json", {"doc.title": "See docs/web/css/a/index.json doc.title"}),
        ReportItem("docs/glossary/c/index.json", {"doc.body.0": "x"}),
    ]
    page = render_html(items, title="a vs b")
    assert "<summary>[2] docs/web/css</summary>" in page
    assert "<summary>[1] docs/glossary</summary>" in page
    assert page.index("docs/glossary") < page.index("docs/web/css")
    assert "<dt>doc.title</dt><dd><pre><code><del>A</del><ins>B</ins></code></pre></dd>" in page


def test_render_html_value_mode_panes():
    page = render_html([ReportItem("x/index.json", before="<p>a</p>", after="<p>b</p>")])
    assert '<div class="a"><p>a</p></div><div class="b"><p>b</p></div>' in page


def test_render_csv_escapes_fields():
    items = [ReportItem("x;y/index.json", {"doc.title": "..", 'doc."q"': ".."})]
    rows = list(csv.reader(io.StringIO(render_csv(items)), delimiter=";"))
    assert rows == [list(CSV_HEADER), ["x;y/index.json", "doc.title"], ["x;y/index.json", 'doc."q"']]


def test_write_atomic(tmp_path):
    target = tmp_path / "report.html"
    target.write_text("old", encoding="utf-8")
    write_atomic(target, "new")
    assert target.read_text(encoding="utf-8") == "new"
    assert list(tmp_path.iterdir()) == [target]


def test_write_atomic_missing_directory(tmp_path):
    with pytest.raises(ReportError, match="cannot write"):
        write_atomic(tmp_path / "nodir" / "report.html", "content")
    assert list(tmp_path.iterdir()) == []


def test_run_writes_csv_with_every_divergence(make_corpus, tmp_path):
    a = make_corpus("a", {
        "docs/web/x/index.json": body_doc("<p>one</p>", "<p>two</p>", title="Old"),
        "docs/web/y/index.json": body_doc("<p>same</p>"),
    })
    b = make_corpus("b", {
        "docs/web/x/index.json": body_doc("<p>uno</p>", "<p>dos</p>", title="New"),
        "docs/web/y/index.json": body_doc("<p>same</p>"),
    })
    out = tmp_path / "report.csv"
    result = run(a, b, DiffOptions(out=out, fmt="csv", jobs=2))

    rows = list(csv.reader(io.StringIO(out.read_text(encoding="utf-8")), delimiter=";"))
    assert rows[0] == ["File", "JSON Path"]
    assert rows[1:] == [
        ["docs/web/x/index.json", "doc.body.0.value.content"],
        ["docs/web/x/index.json", "doc.body.1.value.content"],
        ["docs/web/x/index.json", "doc.title"],
    ]
    assert result.same == 1
    assert result.total == 2


def test_run_csv_ignores_value_mode(make_corpus, tmp_path):
    a = make_corpus("a", {"x/index.json": {"doc": {"title": "Old"}}})
    b = make_corpus("b", {"x/index.json": {"doc": {"title": "New"}}})
    out = tmp_path / "report.csv"
    run(a, b, DiffOptions(out=out, fmt="csv", value=True))
    assert out.read_text(encoding="utf-8") == "File;JSON Path\nx/index.json;doc.title\n"


def test_run_with_query_writes_html(make_corpus, tmp_path):
    a = make_corpus("a", {"x/index.json": body_doc("<p>one</p>", title="Old")})
    b = make_corpus("b", {"x/index.json": body_doc("<p>two</p>", title="New")})
    out = tmp_path / "report.html"
    result = run(a, b, DiffOptions(out=out, query="$.doc.body"))

    assert [list(item.divergences) for item in result.items] == [["0.value.content"]]
    page = out.read_text(encoding="utf-8")
    assert page.startswith("<!doctype html>")
    assert "<dt>0.value.content</dt>" in page
