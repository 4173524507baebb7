"""Data models for the ChordPro visual editor.

This module defines the immutable document model (visual lines made of
chord/lyric tokens), the decomposed chord representation, and the edit
targets an editing session can have pending.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChordToken:
    """An optional chord paired with the lyric text it precedes.

    Parameters
    ----------
    chord : str | None
        The chord symbol (e.g., "Am7", "D/F#"), or None for plain lyric.
    lyric : str
        The lyric text running until the next chord or end of line.

    Examples
    --------
    >>> ChordToken(chord="G", lyric="grace")
    ChordToken(chord='G', lyric='grace')
    """

    chord: str | None
    lyric: str = ""


@dataclass(frozen=True)
class EmptyLine:
    """A blank line."""

    pass


@dataclass(frozen=True)
class DirectiveLine:
    """A whole-line annotation such as "{verse}" or "{title: Song}".

    Parameters
    ----------
    raw : str
        The directive text, kept verbatim for round trips.
    """

    raw: str


@dataclass(frozen=True)
class ChordLyricLine:
    """A lyric line with chords anchored inside it.

    Parameters
    ----------
    tokens : tuple[ChordToken, ...]
        The tokens of the line, in order. No two neighbours are both
        chordless once the line has been normalized.
    """

    tokens: tuple[ChordToken, ...]


VisualLine = EmptyLine | DirectiveLine | ChordLyricLine

Document = tuple[VisualLine, ...]


def blank_line() -> ChordLyricLine:
    """Return a chord-lyric line holding a single empty token."""
    return ChordLyricLine(tokens=(ChordToken(chord=None, lyric=""),))


def new_document() -> Document:
    """Return the smallest valid document: one blank chord-lyric line."""
    return (blank_line(),)


@dataclass(frozen=True)
class ChordSpec:
    """A chord symbol split into its parts.

    Parameters
    ----------
    root : str
        The root note (e.g., "C", "F#", "Bb"). Holds the whole symbol when
        it could not be decomposed.
    quality : str
        The suffix after the root (e.g., "", "m7", "sus4").
    bass : str | None
        The bass note of a slash chord, None otherwise.

    Examples
    --------
    >>> str(ChordSpec(root="D", quality="m7", bass="F"))
    'Dm7/F'
    """

    root: str
    quality: str = ""
    bass: str | None = None

    def __str__(self) -> str:
        """Return the composed chord symbol."""
        from chordpro_editor.chords import compose_chord

        return compose_chord(self)


@dataclass(frozen=True)
class EditExistingToken:
    """Change or remove the chord already on a token."""

    line_index: int
    token_index: int


@dataclass(frozen=True)
class AppendAtLineEnd:
    """Add a chord-only token at the end of a line."""

    line_index: int


@dataclass(frozen=True)
class InsertBySplitting:
    """Place a new chord by splitting a token's lyric.

    Parameters
    ----------
    line_index : int
        Index of the line in the document.
    token_index : int
        Index of the token to split.
    char_offset : int
        Position in the token's lyric where the new chord goes.
    """

    line_index: int
    token_index: int
    char_offset: int


EditTarget = EditExistingToken | AppendAtLineEnd | InsertBySplitting
