# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Tokenizing primitives shared by the parsers, renderers and expanders.

Every scanner here is a small explicit state machine over characters rather
than a regular expression, because string literals (with backslash escapes)
and nested ``<>``, ``()``, ``{}`` and ``[]`` groups must be honoured exactly.
Depth counters are clamped at zero so unbalanced input never drives them
negative.
"""

from __future__ import annotations

import re
from typing import List, NamedTuple


class CodeComment(NamedTuple):
    """A line split into its code part and its trailing line comment."""
    code: str
    comment: str


class AnnotationSplit(NamedTuple):
    """Text split into its base and a trailing ``(...)`` annotation."""
    base: str
    annotation: str


_OPENERS = {"<": ">", "(": ")", "{": "}", "[": "]"}
_CLOSERS = {v: k for k, v in _OPENERS.items()}


class _StringState:
    """Tracks whether a scanner is inside a quoted literal."""

    __slots__ = ("quote", "escaped")

    def __init__(self) -> None:
        self.quote = ""
        self.escaped = False

    def feed(self, ch: str) -> bool:
        """Consume ``ch``; return True if it belongs to a string literal."""
        if self.quote:
            if self.escaped:
                self.escaped = False
            elif ch == "\\":
                self.escaped = True
            elif ch == self.quote:
                self.quote = ""
            return True
        if ch in ("'", '"'):
            self.quote = ch
            return True
        return False


def split_line_comment(line: str) -> CodeComment:
    """Split ``line`` at the first ``//`` or ``#`` outside a string literal.

    Returns:
        CodeComment whose ``code`` is the untouched prefix and whose
        ``comment`` is the trimmed comment text including its marker, or an
        empty string when the line carries no comment.
    """
    strings = _StringState()
    for i, ch in enumerate(line):
        if strings.feed(ch):
            continue
        if ch == "#" or (ch == "/" and line.startswith("//", i)):
            return CodeComment(line[:i], line[i:].strip())
    return CodeComment(line, "")


def split_trailing_annotation(text: str) -> AnnotationSplit:
    """Separate a trailing ``(...)`` annotation group from ``text``.

    Only the outermost parenthesised group that ends exactly at the end of
    the trimmed text is treated as an annotation. Anything else, including
    unbalanced parentheses or characters after the final group, leaves the
    whole text as the base.
    """
    trimmed = text.strip()
    if not trimmed.endswith(")"):
        return AnnotationSplit(text, "")

    strings = _StringState()
    stack: List[int] = []
    group_start = -1
    group_end = -1
    for i, ch in enumerate(trimmed):
        if strings.feed(ch):
            continue
        if ch == "(":
            stack.append(i)
        elif ch == ")" and stack:
            start = stack.pop()
            if not stack:
                group_start, group_end = start, i

    if group_end != len(trimmed) - 1 or stack or strings.quote:
        return AnnotationSplit(text, "")
    base = trimmed[:group_start].rstrip()
    if not base:
        return AnnotationSplit(text, "")
    return AnnotationSplit(base, trimmed[group_start:])


_TYPE_SPACING = (
    (re.compile(r"\s+<"), "<"),
    (re.compile(r"<\s+"), "<"),
    (re.compile(r"\s+>"), ">"),
    (re.compile(r">\s*"), ">"),
    (re.compile(r"\s*,\s*"), ","),
)


def normalize_type(type_text: str) -> str:
    """Collapse whitespace inside generic type expressions.

    >>> normalize_type('list < string >')
    'list<string>'
    >>> normalize_type('map<string, i32>')
    'map<string,i32>'
    """
    result = type_text
    for pattern, replacement in _TYPE_SPACING:
        result = pattern.sub(replacement, result)
    return result.strip()


def split_top_level_parts(content: str) -> List[str]:
    """Split a one-line body on ``;``/``,`` found at nesting depth zero.

    Separators inside strings or inside any ``<>``, ``()``, ``{}`` or ``[]``
    group are kept. Parts are trimmed and empty parts are dropped.
    """
    parts: List[str] = []
    buf: List[str] = []
    depth = {opener: 0 for opener in _OPENERS}
    strings = _StringState()

    for ch in content:
        if strings.feed(ch):
            buf.append(ch)
            continue
        if ch in _OPENERS:
            depth[ch] += 1
        elif ch in _CLOSERS:
            opener = _CLOSERS[ch]
            depth[opener] = max(0, depth[opener] - 1)
        elif ch in ";," and not any(depth.values()):
            part = "".join(buf).strip()
            if part:
                parts.append(part)
            buf = []
            continue
        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        parts.append(tail)
    return parts


def bracket_depth(code: str) -> int:
    """Net change in ``(``/``[``/``{`` nesting across ``code``.

    String contents are skipped. The result is negative when ``code`` closes
    more groups than it opens.
    """
    depth = 0
    strings = _StringState()
    for ch in code:
        if strings.feed(ch):
            continue
        if ch in "([{":
            depth += 1
        elif ch in ")]}":
            depth -= 1
    return depth


def split_collection_items(inner: str) -> List[str]:
    """Split the inside of a ``[...]``/``{...}`` literal on top-level commas.

    Unlike :func:`split_top_level_parts` a ``;`` is ordinary text here and the
    ``key: value`` pairs of a map literal stay intact.
    """
    items: List[str] = []
    buf: List[str] = []
    depth = 0
    strings = _StringState()

    for ch in inner:
        if strings.feed(ch):
            buf.append(ch)
            continue
        if ch in "([{":
            depth += 1
        elif ch in ")]}":
            depth = max(0, depth - 1)
        elif ch == "," and depth == 0:
            items.append("".join(buf).strip())
            buf = []
            continue
        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        items.append(tail)
    return [item for item in items if item]


def normalize_generics_in_signature(text: str) -> str:
    """Normalize generic spacing across a whole signature line.

    Whitespace after ``<`` and before ``,``/``>`` inside a generic group is
    removed, as is whitespace between a closed generic group and a following
    ``,``, ``>`` or ``)``. Text inside string literals is left alone and a
    trailing line comment is re-appended verbatim.
    """
    if not text:
        return text
    code, comment = split_line_comment(text)
    if comment:
        code = code.rstrip()

    out: List[str] = []
    angle = 0
    strings = _StringState()
    i = 0
    n = len(code)

    def _skip_spaces(start: int) -> int:
        while start < n and code[start] == " ":
            start += 1
        return start

    def _drop_trailing_spaces() -> None:
        while out and out[-1] == " ":
            out.pop()

    while i < n:
        ch = code[i]
        if strings.feed(ch):
            out.append(ch)
            i += 1
            continue
        if ch == "<":
            _drop_trailing_spaces()
            out.append(ch)
            angle += 1
            i = _skip_spaces(i + 1)
            continue
        if ch == "," and angle > 0:
            _drop_trailing_spaces()
            out.append(ch)
            i = _skip_spaces(i + 1)
            continue
        if ch == ">" and angle > 0:
            _drop_trailing_spaces()
            out.append(ch)
            angle -= 1
            nxt = _skip_spaces(i + 1)
            if nxt >= n or code[nxt] in ",>)":
                i = nxt
            else:
                i += 1
            continue
        out.append(ch)
        i += 1

    normalized = "".join(out)
    return f"{normalized} {comment}" if comment else normalized
