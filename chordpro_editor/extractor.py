"""Line-item extraction for ChordPro text.

This module provides the default extractor the document parser delegates
to: it turns raw ChordPro text into, per source line, a list of items that
are either a directive tag or a chord/lyrics pair.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

# Whole-line directive: {name} or {name: value}
DIRECTIVE_RE = re.compile(r"^\s*\{\s*([^:{}\s][^:{}]*?)\s*(?::\s*([^{}]*?)\s*)?\}\s*$")

# Inline chord: [symbol]; an empty "[]" stays lyric text
CHORD_BRACKET_RE = re.compile(r"\[([^\[\]\n]+)\]")


@dataclass(frozen=True)
class Tag:
    """A directive item.

    Parameters
    ----------
    name : str
        The directive name (e.g., "verse", "title").
    value : str | None
        The directive value, or None if the directive has none.
    """

    name: str
    value: str | None = None


@dataclass(frozen=True)
class ChordLyricsPair:
    """A chord and the lyrics that follow it.

    Parameters
    ----------
    chords : str
        The chord symbol, or "" for lyrics without a chord.
    lyrics : str
        The lyric text up to the next chord or end of line.
    """

    chords: str = ""
    lyrics: str = ""


LineItem = Tag | ChordLyricsPair

LineItemExtractor = Callable[[str], list[list[LineItem]]]


def split_lines(text: str) -> list[str]:
    """Normalize line endings and split text into lines.

    Parameters
    ----------
    text : str
        The raw input text.

    Returns
    -------
    list[str]
        Lines without their line breaks.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.split("\n")


def extract_line(line: str) -> list[LineItem]:
    """Extract the items of a single source line.

    Parameters
    ----------
    line : str
        The line to process, without a line break.

    Returns
    -------
    list[LineItem]
        No items for a blank line, a single Tag for a directive line,
        chord/lyrics pairs otherwise.

    Examples
    --------
    >>> extract_line("{title: Amazing Grace}")
    [Tag(name='title', value='Amazing Grace')]
    >>> extract_line("Amazing [G]grace")
    [ChordLyricsPair(chords='', lyrics='Amazing '), ChordLyricsPair(chords='G', lyrics='grace')]
    """
    if not line:
        return []

    directive = DIRECTIVE_RE.match(line)
    if directive:
        return [Tag(name=directive.group(1), value=directive.group(2))]

    items: list[LineItem] = []
    matches = list(CHORD_BRACKET_RE.finditer(line))

    # Lyrics before the first chord
    head = line[: matches[0].start()] if matches else line
    if head:
        items.append(ChordLyricsPair(chords="", lyrics=head))

    for i, match in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(line)
        items.append(ChordLyricsPair(chords=match.group(1), lyrics=line[match.end() : end]))

    return items


def extract_items(text: str) -> list[list[LineItem]]:
    """Extract line items from ChordPro text.

    Parameters
    ----------
    text : str
        The raw ChordPro text.

    Returns
    -------
    list[list[LineItem]]
        One item list per source line, in order.
    """
    return [extract_line(line) for line in split_lines(text)]
