"""Structural edits on a visual document.

Every function takes a document and returns a new one. Models are frozen,
so lines that an edit does not touch are shared between the old and the new
document and earlier snapshots are never altered.

Indices are expected to come from the document being edited. A line index
that addresses a directive or empty line leaves the document unchanged.
Negative line indices count from the end, as for any Python sequence.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chordpro_editor.models import ChordLyricLine, ChordToken, blank_line, new_document

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from chordpro_editor.models import Document, VisualLine


def normalize_tokens(tokens: Iterable[ChordToken]) -> list[ChordToken]:
    """Merge consecutive chordless tokens.

    Parameters
    ----------
    tokens : Iterable[ChordToken]
        The tokens of one line.

    Returns
    -------
    list[ChordToken]
        Tokens where no two neighbours are both chordless. Applying this
        twice gives the same result as applying it once.

    Examples
    --------
    >>> normalize_tokens([ChordToken(None, "Amazing "), ChordToken(None, "grace")])
    [ChordToken(chord=None, lyric='Amazing grace')]
    """
    result: list[ChordToken] = []
    for token in tokens:
        if result and result[-1].chord is None and token.chord is None:
            result[-1] = ChordToken(chord=None, lyric=result[-1].lyric + token.lyric)
        else:
            result.append(token)
    return result


def _replace_lines(
    document: Sequence[VisualLine], start: int, stop: int, new: Iterable[VisualLine]
) -> Document:
    """Return a copy of document with lines[start:stop] replaced by new."""
    lines = list(document)
    lines[start:stop] = list(new)
    return tuple(lines)


def _line_position(document: Sequence[VisualLine], index: int) -> int:
    """Resolve a possibly negative line index to its position; IndexError if out of range."""
    return range(len(document))[index]


def _edit_tokens(
    document: Sequence[VisualLine],
    line_index: int,
    edit: Callable[[list[ChordToken]], list[ChordToken]],
) -> Document:
    """Apply a token-list edit to a chord-lyric line."""
    line_index = _line_position(document, line_index)
    line = document[line_index]
    if not isinstance(line, ChordLyricLine):
        return tuple(document)
    tokens = edit(list(line.tokens))
    return _replace_lines(document, line_index, line_index + 1, [ChordLyricLine(tokens=tuple(tokens))])


def split_and_insert(
    document: Sequence[VisualLine],
    line_index: int,
    token_index: int,
    char_offset: int,
    chord: str,
) -> Document:
    """Place a new chord by splitting a token's lyric.

    The first part keeps the token's chord and the lyric before
    char_offset; the second part gets the new chord and the rest of the
    lyric. Splitting at 0 keeps the original chord on an empty lyric,
    splitting at the end leaves the new chord on an empty lyric.

    Parameters
    ----------
    document : Sequence[VisualLine]
        The document to edit.
    line_index : int
        Index of the chord-lyric line.
    token_index : int
        Index of the token to split.
    char_offset : int
        Split position, clamped to [0, len(lyric)].
    chord : str
        The chord to place.

    Returns
    -------
    Document
        The edited document.

    Examples
    --------
    >>> from chordpro_editor.parser import parse
    >>> from chordpro_editor.serializer import serialize
    >>> serialize(split_and_insert(parse("Amazing grace"), 0, 0, 8, "C"))
    'Amazing [C]grace'
    """

    def edit(tokens: list[ChordToken]) -> list[ChordToken]:
        token = tokens[token_index]
        offset = min(max(char_offset, 0), len(token.lyric))
        tokens[token_index : token_index + 1] = [
            ChordToken(chord=token.chord, lyric=token.lyric[:offset]),
            ChordToken(chord=chord, lyric=token.lyric[offset:]),
        ]
        return tokens

    return _edit_tokens(document, line_index, edit)


def set_chord(
    document: Sequence[VisualLine],
    line_index: int,
    token_index: int,
    chord: str | None,
) -> Document:
    """Change or remove the chord on a token.

    The line is normalized afterwards, so removing a chord merges the
    token into a chordless neighbour. An empty string removes the chord.

    Parameters
    ----------
    document : Sequence[VisualLine]
        The document to edit.
    line_index : int
        Index of the chord-lyric line.
    token_index : int
        Index of the token.
    chord : str | None
        The new chord, or None to remove it.

    Returns
    -------
    Document
        The edited document.
    """

    def edit(tokens: list[ChordToken]) -> list[ChordToken]:
        token = tokens[token_index]
        tokens[token_index] = ChordToken(chord=chord or None, lyric=token.lyric)
        return normalize_tokens(tokens)

    return _edit_tokens(document, line_index, edit)


def append_chord(document: Sequence[VisualLine], line_index: int, chord: str) -> Document:
    """Add a chord at the end of a line.

    A trailing open slot (chordless token with an empty lyric) is filled
    in place; otherwise a new chord-only token is appended.
    """

    def edit(tokens: list[ChordToken]) -> list[ChordToken]:
        if tokens and tokens[-1].chord is None and tokens[-1].lyric == "":
            tokens[-1] = ChordToken(chord=chord, lyric="")
        else:
            tokens.append(ChordToken(chord=chord, lyric=""))
        return tokens

    return _edit_tokens(document, line_index, edit)


def insert_line(document: Sequence[VisualLine], after_index: int) -> Document:
    """Insert a blank chord-lyric line right after after_index.

    An after_index of -1 inserts at the top of the document.
    """
    position = after_index + 1
    return _replace_lines(document, position, position, [blank_line()])


def remove_line(document: Sequence[VisualLine], index: int) -> Document:
    """Remove a line, keeping at least one line in the document."""
    index = _line_position(document, index)
    return _replace_lines(document, index, index + 1, []) or new_document()
