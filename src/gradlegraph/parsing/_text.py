"""Text helpers shared by the build-file and settings parsers.

Gradle scripts are not parsed with a grammar.  Instead, comments (and, for
brace matching, string contents) are blanked out so that plain regexes and
a brace counter can be run over the remaining text.  Blanking keeps every
character offset intact, so spans found in a masked copy can be sliced out
of the unmasked text.
"""

from __future__ import annotations

import re


def _blank(chars: list[str], start: int, end: int) -> None:
    for i in range(start, end):
        if chars[i] != "\n":
            chars[i] = " "


def mask(content: str, *, blank_strings: bool = True) -> str:
    """Return *content* with comments (and optionally string contents) blanked.

    Quote characters themselves are kept so that string boundaries stay
    visible.  Unterminated strings end at the end of the line.
    """
    chars = list(content)
    i, n = 0, len(content)
    while i < n:
        ch = content[i]
        if content.startswith("//", i):
            j = content.find("\n", i)
            j = n if j == -1 else j
            _blank(chars, i, j)
            i = j
        elif content.startswith("/*", i):
            j = content.find("*/", i + 2)
            j = n if j == -1 else j + 2
            _blank(chars, i, j)
            i = j
        elif content.startswith('"""', i) or content.startswith("'''", i):
            # Raw/multi-line string: runs to the matching triple quote.
            quote = content[i : i + 3]
            j = content.find(quote, i + 3)
            j = n if j == -1 else j
            if blank_strings:
                _blank(chars, i + 3, j)
            i = j + 3
        elif ch in "\"'":
            j = i + 1
            while j < n and content[j] != ch and content[j] != "\n":
                if content[j] == "\\":
                    j += 1
                j += 1
            j = min(j, n)
            if blank_strings:
                _blank(chars, i + 1, j)
            i = j + 1
        else:
            i += 1
    return "".join(chars)


def strip_comments(content: str) -> str:
    return mask(content, blank_strings=False)


def _closing_brace(masked: str, start: int) -> int:
    """Index of the brace closing the block opened just before *start*."""
    depth = 1
    for i in range(start, len(masked)):
        ch = masked[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
    # Unterminated block: take everything up to the end of the file.
    return len(masked)


def top_level(content: str) -> str:
    """Return *content* with everything inside ``{ }`` blocks blanked."""
    masked = mask(content)
    chars = list(content)
    depth = 0
    for i, ch in enumerate(masked):
        if ch == "}":
            depth = max(depth - 1, 0)
        if depth > 0 and chars[i] != "\n":
            chars[i] = " "
        if ch == "{":
            depth += 1
    return "".join(chars)


def find_block(content: str, keyword: str) -> tuple[int, int] | None:
    """Locate the body of the first ``keyword { ... }`` block.

    Returns the ``(start, end)`` span of the block body (between the braces),
    or None when there is no such block.  A block at nesting depth zero wins
    over nested ones (e.g. ``buildscript { dependencies { ... } }``); when the
    keyword only occurs nested, the first nested occurrence is used.
    """
    masked = mask(content)
    pattern = re.compile(r"(?<![\w.])" + re.escape(keyword) + r"\s*\{")

    first: re.Match[str] | None = None
    for m in pattern.finditer(masked):
        if first is None:
            first = m
        depth = masked.count("{", 0, m.start()) - masked.count("}", 0, m.start())
        if depth <= 0:
            first = m
            break

    if first is None:
        return None
    start = first.end()
    return start, _closing_brace(masked, start)


def block_body(content: str, keyword: str) -> str | None:
    """Text of the first ``keyword { ... }`` block body, or None."""
    span = find_block(content, keyword)
    if span is None:
        return None
    return content[span[0] : span[1]]


def unique(items: list[str]) -> list[str]:
    """Drop duplicates, keeping first-seen order."""
    return list(dict.fromkeys(items))
