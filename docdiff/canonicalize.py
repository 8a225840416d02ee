"""
HTML canonicalization for fragments stored in documents.

Both sides of a differing HTML value are run through the same steps so that
formatting noise (whitespace, empty paragraphs, diagnostic attributes, id
case) does not show up as a difference:

1. collapse whitespace right inside tags
2. drop empty paragraphs
3. rewrite elements (attributes, ids, optional unwrapping)
4. minify
5. re-format one tag per line, so the final text diff is readable
"""

from __future__ import annotations

import html
import re

from bs4 import BeautifulSoup, NavigableString, ParserRejectedMarkup, Tag
from lxml import etree
from lxml import html as lxml_html

from docdiff.config import FRAGMENT_PARSER, DiffOptions
from docdiff.errors import CanonicalizationError

# Whitespace after an opening/closing tag, or before a closing tag.
TAG_WHITESPACE = re.compile(r"(?P<x>>)[\n ]+|[\n ]+(?P<y></)")
EMPTY_PARAGRAPH = re.compile(r"<p>[\n ]*</p>")
# HTML whitespace only; &nbsp; and other Unicode spaces are content.
HTML_WHITESPACE = " \t\n\r\f"
WHITESPACE_RUN = re.compile(f"[{HTML_WHITESPACE}]+")
CONTROL_CHAR = re.compile(r"[\x00-\x08\x0b\x0e-\x1f]")

# Build diagnostics added by the renderer, not part of the content.
FLAW_ATTR_PREFIX = "data-flaw"
NOT_CREATED_CLASS = "page-not-created"
# Containers whose ids are generated and not linkable.
ID_STRIPPED_SELECTOR = "div.notecard, div.example-header, div.code-example"

WHITESPACE_SENSITIVE = frozenset({"pre", "textarea", "script", "style"})
BLOCK_TAGS = frozenset({
    "address", "article", "aside", "blockquote", "body", "dd", "details", "div",
    "dl", "dt", "fieldset", "figcaption", "figure", "footer", "form", "h1", "h2",
    "h3", "h4", "h5", "h6", "header", "hr", "li", "main", "nav", "ol", "p",
    "pre", "section", "summary", "table", "tbody", "td", "tfoot", "th", "thead",
    "tr", "ul",
})


def is_html(value: str) -> bool:
    return value.lstrip().startswith("<") and value.rstrip().endswith(">")


def collapse_tag_whitespace(fragment: str) -> str:
    return TAG_WHITESPACE.sub(r"\g<x>\g<y>", fragment)


def remove_empty_paragraphs(fragment: str) -> str:
    return EMPTY_PARAGRAPH.sub("", fragment)


def _parse(fragment: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(fragment, FRAGMENT_PARSER)
    except ParserRejectedMarkup as e:
        raise CanonicalizationError(f"cannot parse HTML fragment: {e}") from e


def rewrite(fragment: str, options: DiffOptions) -> str:
    """Drop diagnostic attributes, normalize ids, optionally unwrap elements."""
    soup = _parse(fragment)

    for tag in soup.find_all(True):
        for attr in [a for a in tag.attrs if a.startswith(FLAW_ATTR_PREFIX)]:
            del tag[attr]

    for tag in soup.select(f".{NOT_CREATED_CLASS}"):
        del tag["class"]

    for tag in soup.select(ID_STRIPPED_SELECTOR):
        tag.attrs.pop("id", None)

    for tag in soup.find_all(id=True):
        tag["id"] = tag["id"].lower()

    if options.ignore_ps:
        for tag in soup.find_all("p"):
            tag.unwrap()

    if not options.check_dts:
        for dt in soup.find_all("dt"):
            dt.attrs.pop("id", None)
            for link in dt.find_all("a", href=re.compile(r"^#"), recursive=False):
                link.unwrap()

    return str(soup)


def _is_block(node) -> bool:
    return isinstance(node.tag, str) and node.tag in BLOCK_TAGS


def _squash(text: str | None, droppable: bool) -> str | None:
    if not text:
        return text
    squashed = WHITESPACE_RUN.sub(" ", text)
    if droppable and squashed == " ":
        return None
    return squashed


def _minify_element(elem) -> None:
    if elem.tag in WHITESPACE_SENSITIVE:
        return
    children = list(elem)
    first_is_block = bool(children) and _is_block(children[0])
    elem.text = _squash(elem.text, _is_block(elem) or first_is_block)
    for i, child in enumerate(children):
        _minify_element(child)
        following = children[i + 1] if i + 1 < len(children) else None
        droppable = _is_block(child) or (following is None and _is_block(elem))
        if following is not None and _is_block(following):
            droppable = True
        child.tail = _squash(child.tail, droppable)


def minify(fragment: str) -> str:
    """Remove comments and insignificant whitespace from a fragment."""
    if not fragment.strip(HTML_WHITESPACE):
        return ""
    # lxml cannot hold these, whether or not its parser keeps them.
    control = CONTROL_CHAR.search(fragment)
    if control:
        raise CanonicalizationError(
            f"cannot minify HTML fragment: control character {control.group()!r}"
        )
    try:
        root = lxml_html.fragment_fromstring(fragment, create_parent="div")
    except (etree.ParserError, ValueError) as e:
        raise CanonicalizationError(f"cannot minify HTML fragment: {e}") from e

    for comment in root.xpath(".//comment()"):
        comment.drop_tree()
    _minify_element(root)

    # The wrapper div is a block, so its own leading/trailing space went too.
    parts = [root.text or ""]
    parts.extend(lxml_html.tostring(child, encoding="unicode") for child in root)
    return "".join(parts).strip(HTML_WHITESPACE)


def _open_tag(tag: Tag) -> str:
    attrs = []
    for name, value in tag.attrs.items():
        if isinstance(value, list):
            value = " ".join(value)
        attrs.append(f' {name}="{html.escape(str(value))}"')
    return f"<{tag.name}{''.join(attrs)}>"


def _format_node(node, depth: int, lines: list[str]) -> None:
    indent = " " * depth
    if isinstance(node, NavigableString):
        # Text is written as is: minify already collapsed its whitespace, and
        # a space next to an inline element is content.
        text = node.output_ready(formatter="minimal")
        if text:
            lines.append(indent + text)
        return
    if node.name in WHITESPACE_SENSITIVE:
        lines.append(indent + str(node))
        return
    if node.is_empty_element:
        lines.append(indent + _open_tag(node)[:-1] + "/>")
        return
    lines.append(indent + _open_tag(node))
    for child in node.children:
        _format_node(child, depth + 1, lines)
    lines.append(f"{indent}</{node.name}>")


def format_html(fragment: str) -> str:
    """Re-format a fragment one tag per line, indented by nesting depth."""
    lines: list[str] = []
    for node in _parse(fragment).children:
        _format_node(node, 0, lines)
    return "\n".join(lines) + "\n" if lines else ""


def canonicalize(fragment: str, options: DiffOptions) -> str:
    fragment = collapse_tag_whitespace(fragment)
    fragment = remove_empty_paragraphs(fragment)
    fragment = rewrite(fragment, options)
    return format_html(minify(fragment))

