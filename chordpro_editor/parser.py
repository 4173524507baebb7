"""ChordPro text to visual document.

This module provides parse(), which reshapes the line items produced by a
line-item extractor into the editable document model. Parsing never fails:
if the extractor raises, every source line becomes a single chordless token.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from chordpro_editor.extractor import extract_items, split_lines
from chordpro_editor.models import (
    ChordLyricLine,
    ChordToken,
    DirectiveLine,
    Document,
    EmptyLine,
    VisualLine,
    new_document,
)

if TYPE_CHECKING:
    from chordpro_editor.extractor import LineItemExtractor

logger = logging.getLogger(__name__)


def _is_directive(item: Any) -> bool:
    """Check whether an item looks like a directive tag.

    Items are matched by shape: a tag has a name but no chord or lyric
    fields.
    """
    return (
        getattr(item, "name", None) is not None
        and getattr(item, "chords", None) is None
        and getattr(item, "lyrics", None) is None
    )


def directive_raw(name: str, value: str | None) -> str:
    """Rebuild the text of a directive.

    Examples
    --------
    >>> directive_raw("verse", None)
    '{verse}'
    >>> directive_raw("title", "Amazing Grace")
    '{title: Amazing Grace}'
    """
    if value:
        return f"{{{name}: {value}}}"
    return f"{{{name}}}"


def item_to_token(item: Any) -> ChordToken:
    """Convert a chord/lyrics item into a token."""
    chords = getattr(item, "chords", None)
    lyrics = getattr(item, "lyrics", None)
    return ChordToken(
        chord=str(chords) if chords else None,
        lyric=str(lyrics) if lyrics else "",
    )


def items_to_line(items: list[Any]) -> VisualLine:
    """Convert the items of one source line into a visual line.

    Parameters
    ----------
    items : list
        Items produced by the extractor for a single line.

    Returns
    -------
    VisualLine
        EmptyLine for no items, DirectiveLine if the first item is a tag,
        ChordLyricLine otherwise (one token per item).
    """
    if not items:
        return EmptyLine()

    first = items[0]
    if _is_directive(first):
        value = getattr(first, "value", None)
        return DirectiveLine(raw=directive_raw(str(first.name), str(value) if value else None))

    return ChordLyricLine(tokens=tuple(item_to_token(item) for item in items))


def parse_fallback(text: str) -> Document:
    """Parse text as plain lyrics, one chordless token per line.

    Parameters
    ----------
    text : str
        The raw input text.

    Returns
    -------
    Document
        One line per source line; blank source lines become EmptyLine.
    """
    lines: list[VisualLine] = []
    for line in split_lines(text):
        if not line:
            lines.append(EmptyLine())
        else:
            lines.append(ChordLyricLine(tokens=(ChordToken(chord=None, lyric=line),)))
    return tuple(lines) or new_document()


def parse(text: str, extractor: LineItemExtractor | None = None) -> Document:
    """Parse ChordPro text into a visual document.

    This is the main entry point for building an editable document.

    Parameters
    ----------
    text : str
        The raw ChordPro text, possibly empty.
    extractor : LineItemExtractor | None
        Callable returning the items of each source line. Defaults to
        extract_items().

    Returns
    -------
    Document
        The visual lines of the text. Never empty.

    Examples
    --------
    >>> doc = parse("{verse}\\n[C]Amazing [G]grace")
    >>> doc[0]
    DirectiveLine(raw='{verse}')
    >>> [token.chord for token in doc[1].tokens]
    ['C', 'G']
    """
    if not text.strip():
        return new_document()

    extract = extractor if extractor is not None else extract_items

    try:
        lines = tuple(items_to_line(list(items)) for items in extract(text))
    except Exception:
        logger.warning("ChordPro extraction failed, parsing as plain lyrics", exc_info=True)
        return parse_fallback(text)

    return lines or new_document()
