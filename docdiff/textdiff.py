"""Word- and line-level text diffs, rendered as HTML or ANSI-colored text."""

from __future__ import annotations

import difflib
import html
import re

from docdiff.console import GREEN_BG, RED_BG, RESET

# Runs of whitespace and runs of everything else, so that joining the tokens
# gives back the input exactly.
WORD_TOKENS = re.compile(r"\s+|\S+")


class HtmlMarkup:
    """Removed text in <del>, added text in <ins>, everything escaped."""

    @staticmethod
    def equal(text: str) -> str:
        return html.escape(text, quote=False)

    @staticmethod
    def removed(text: str) -> str:
        return f"<del>{html.escape(text, quote=False)}</del>"

    @staticmethod
    def added(text: str) -> str:
        return f"<ins>{html.escape(text, quote=False)}</ins>"


class AnsiMarkup:
    """Removed text on red, added text on green (plain text off a TTY)."""

    @staticmethod
    def equal(text: str) -> str:
        return text

    @staticmethod
    def removed(text: str) -> str:
        return f"{RED_BG}{text}{RESET}"

    @staticmethod
    def added(text: str) -> str:
        return f"{GREEN_BG}{text}{RESET}"


def render_opcodes(old_parts: list[str], new_parts: list[str], markup=HtmlMarkup) -> str:
    matcher = difflib.SequenceMatcher(None, old_parts, new_parts, autojunk=False)
    result = []

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            result.append(markup.equal("".join(old_parts[i1:i2])))
            continue
        # replace, delete and insert: removed part first, then added part
        if i2 > i1:
            result.append(markup.removed("".join(old_parts[i1:i2])))
        if j2 > j1:
            result.append(markup.added("".join(new_parts[j1:j2])))

    return "".join(result)


def diff_words(old_str: str, new_str: str, markup=HtmlMarkup) -> str:
    return render_opcodes(WORD_TOKENS.findall(old_str), WORD_TOKENS.findall(new_str), markup)


def _lines(s: str) -> list[str]:
    lines = s.splitlines(keepends=True)
    if lines and not lines[-1].endswith("\n"):
        lines[-1] += "\n"
    return lines


def diff_lines(old_str: str, new_str: str, markup=HtmlMarkup) -> str:
    return render_opcodes(_lines(old_str), _lines(new_str), markup)
