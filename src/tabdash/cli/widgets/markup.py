"""Inline style markup and word wrapping for paragraphs.

Markup: {mod=bold;fg=yellow styled text}. The style spec runs up to the
first space, the styled run up to the first closing brace. A tag that
is unterminated or names an unknown key, modifier or color is kept as
literal text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

from tabdash.core.color import Color
from tabdash.core.style import MODIFIERS, Style

TAB_WIDTH = 4

_TAG = re.compile(r'\{([a-z]+=[a-z_-]+(?:;[a-z]+=[a-z_-]+)*) ([^{}]*)\}')

# A styled character
Glyph = tuple[str, Style]


@dataclass(frozen=True)
class Span:
    text: str
    style: Style


def _tag_style(spec: str) -> Style | None:
    """Style for a tag spec, or None if any part of it is unknown."""
    style = Style()
    for pair in spec.split(';'):
        key, _, value = pair.partition('=')
        if key == 'mod':
            if value not in MODIFIERS:
                return None
            style = style.with_modifier(value)
        elif key in ('fg', 'bg'):
            try:
                color = Color.from_name(value)
            except ValueError:
                return None
            style = style.patch(Style(**{key: color}))
        else:
            return None
    return style


def parse_markup(text: str, base: Style = Style()) -> list[Span]:
    """Split text into spans; styled runs are patched over base."""
    spans: list[Span] = []
    pos = 0
    for match in _TAG.finditer(text):
        style = _tag_style(match.group(1))
        if style is None:
            continue  # stays in the literal run
        if match.start() > pos:
            spans.append(Span(text[pos:match.start()], base))
        spans.append(Span(match.group(2), base.patch(style)))
        pos = match.end()
    if pos < len(text):
        spans.append(Span(text[pos:], base))
    return spans


def glyphs(spans: list[Span]) -> list[Glyph]:
    """Flatten spans into styled characters, expanding tabs."""
    out: list[Glyph] = []
    for span in spans:
        for char in span.text.replace('\t', ' ' * TAB_WIDTH):
            out.append((char, span.style))
    return out

    """Split on LF, CRLF or a lone CR; the line breaks themselves are dropped."""
def split_lines(line: list[Glyph]) -> list[list[Glyph]]:
    """Split on \n, \r\n or a lone \r; the line breaks themselves are dropped."""
    lines: list[list[Glyph]] = [[]]
    for i, glyph in enumerate(line):
        if glyph[0] == '\n' and i > 0 and line[i - 1][0] == '\r':
            continue
        if glyph[0] in ('\n', '\r'):
            lines.append([])
        else:
            lines[-1].append(glyph)
    return lines


def _tokens(line: list[Glyph]) -> Iterator[tuple[bool, list[Glyph]]]:
    """Runs of spaces and runs of non-spaces, as (is_space, glyphs)."""
    run: list[Glyph] = []
    in_space = False
    for glyph in line:
        is_space = glyph[0] == ' '
        if run and is_space != in_space:
            yield in_space, run
            run = []
        in_space = is_space
        run.append(glyph)
    if run:
        yield in_space, run


def wrap_line(line: list[Glyph], width: int) -> list[list[Glyph]]:
    """
    Greedy word wrap of one source line.

    Words move whole to the next row when they do not fit; a word
    longer than width is hard-broken and each fragment gets its own
    row. Leading indentation survives on the first row only. An empty
    line yields one empty row.
    """
    if width <= 0:
        return []

    rows: list[list[Glyph]] = []
    current: list[Glyph] = []
    gap: list[Glyph] = []
    first = True

    def place(word: list[Glyph]) -> list[Glyph]:
        if len(word) <= width:
            return word
        for i in range(0, len(word), width):
            rows.append(word[i:i + width])
        return []

    for is_space, token in _tokens(line):
        if is_space:
            gap = token
            continue
        if first:
            first = False
            current = place(gap + token if len(gap) + len(token) <= width else token)
        elif current and len(current) + len(gap) + len(token) <= width:
            current = current + gap + token
        else:
            if current:
                rows.append(current)
            current = place(token)
        gap = []

    if current or not rows:
        rows.append(current)
    return rows


def layout_text(text: str, width: int, wrap: bool, base: Style = Style()) -> list[list[Glyph]]:
    """Parse markup and lay text out into rows of at most width glyphs."""
    if width <= 0:
        return []
    rows: list[list[Glyph]] = []
    for line in split_lines(glyphs(parse_markup(text, base))):
        if wrap:
            rows.extend(wrap_line(line, width))
        else:
            rows.append(line[:width])
    return rows
