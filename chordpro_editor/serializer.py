"""Visual document to ChordPro text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chordpro_editor.models import ChordLyricLine, DirectiveLine, EmptyLine

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chordpro_editor.models import ChordToken, VisualLine


def serialize_token(token: ChordToken) -> str:
    """Return "[chord]lyric", or just the lyric for a chordless token."""
    if token.chord:
        return f"[{token.chord}]{token.lyric}"
    return token.lyric


def serialize_line(line: VisualLine) -> str:
    """Convert one visual line to its ChordPro text.

    Parameters
    ----------
    line : VisualLine
        The line to serialize.

    Returns
    -------
    str
        The line text, without a line break.
    """
    if isinstance(line, EmptyLine):
        return ""
    if isinstance(line, DirectiveLine):
        return line.raw
    if isinstance(line, ChordLyricLine):
        return "".join(serialize_token(token) for token in line.tokens)

    msg = f"Unknown line type: {type(line).__name__}"
    raise TypeError(msg)


def serialize(document: Iterable[VisualLine]) -> str:
    """Convert a visual document to ChordPro text.

    Parameters
    ----------
    document : Iterable[VisualLine]
        The lines to serialize, in order.

    Returns
    -------
    str
        The ChordPro text, lines joined with "\\n".

    Examples
    --------
    >>> from chordpro_editor.models import ChordLyricLine, ChordToken, DirectiveLine
    >>> serialize([
    ...     DirectiveLine(raw="{verse}"),
    ...     ChordLyricLine(tokens=(ChordToken("C", "Amazing "), ChordToken("G", "grace"))),
    ... ])
    '{verse}\\n[C]Amazing [G]grace'
    """
    return "\n".join(serialize_line(line) for line in document)
