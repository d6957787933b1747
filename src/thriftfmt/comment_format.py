# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""Block comment reflow."""

from __future__ import annotations

from typing import List, Sequence, Tuple

CLOSE_TOKEN = "*/"


def is_block_comment_start(line: str) -> bool:
    return line.strip().startswith("/*")


def collect_block_comment(lines: Sequence[str], start: int) -> Tuple[List[str], int]:
    """Collect the physical lines of the block comment opening at ``start``.

    Collection stops at the first line containing ``*/`` or at end of input.

    Returns:
        (comment lines, index of the first line after the comment)
    """
    collected = [lines[start]]
    index = start + 1
    # skip the opening "/*" so "/*/" is not mistaken for a closer
    if CLOSE_TOKEN in lines[start].strip()[2:]:
        return collected, index
    while index < len(lines):
        collected.append(lines[index])
        index += 1
        if CLOSE_TOKEN in lines[index - 1]:
            break
    return collected, index


def _interior(text: str) -> str:
    text = text.strip()
    if text.startswith("*"):
        text = text[1:]
    return text.strip()


def format_block_comment(comment_lines: Sequence[str], indent: str) -> List[str]:
    """Re-render a block comment with a normalized ``*`` column.

    The opening line keeps its ``/*``/``/**`` token and text. Interior lines
    become ``<indent> * text``. Text in front of the closing ``*/`` is kept as
    an interior line and the closer gets a line of its own. A comment with no
    closer is left unterminated.
    """
    if not comment_lines:
        return []
    if len(comment_lines) == 1:
        return [indent + comment_lines[0].strip()]

    out = [indent + comment_lines[0].strip()]
    for raw in comment_lines[1:-1]:
        text = _interior(raw)
        out.append(f"{indent} * {text}" if text else f"{indent} *")

    last = comment_lines[-1].strip()
    close_at = last.find(CLOSE_TOKEN)
    if close_at < 0:
        text = _interior(last)
        out.append(f"{indent} * {text}" if text else f"{indent} *")
        return out

    text = _interior(last[:close_at])
    trailing = last[close_at + len(CLOSE_TOKEN):].strip()
    if text:
        out.append(f"{indent} * {text}")
    out.append(f"{indent} */" + (f" {trailing}" if trailing else ""))
    return out
