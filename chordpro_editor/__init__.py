"""Visual editing engine for ChordPro chord sheets.

This library converts ChordPro text (chords written as "[G]" right before
the syllable they sit over) into an editable document of chord/lyric
tokens, applies structural chord edits to it, and writes it back as text.

Examples
--------
>>> from chordpro_editor import parse, serialize, split_and_insert, set_chord

>>> doc = parse("Amazing grace")
>>> doc = split_and_insert(doc, 0, 0, 8, "C")
>>> serialize(doc)
'Amazing [C]grace'

>>> # Removing the chord merges the lyric back together
>>> serialize(set_chord(doc, 0, 1, None))
'Amazing grace'

>>> from chordpro_editor import decompose_chord, compose_chord
>>> decompose_chord("D/F#")
ChordSpec(root='D', quality='', bass='F#')
>>> compose_chord(decompose_chord("Dm7/F"))
'Dm7/F'
"""

from chordpro_editor.builder import ChordBuilder
from chordpro_editor.chords import compose_chord, decompose_chord, is_chord
from chordpro_editor.editor import (
    append_chord,
    insert_line,
    normalize_tokens,
    remove_line,
    set_chord,
    split_and_insert,
)
from chordpro_editor.models import (
    AppendAtLineEnd,
    ChordLyricLine,
    ChordSpec,
    ChordToken,
    DirectiveLine,
    Document,
    EditExistingToken,
    EditTarget,
    EmptyLine,
    InsertBySplitting,
    VisualLine,
    new_document,
)
from chordpro_editor.parser import parse
from chordpro_editor.serializer import serialize
from chordpro_editor.session import EditingSession, Rect, resolve_offset

__all__ = [
    "AppendAtLineEnd",
    "ChordBuilder",
    "ChordLyricLine",
    "ChordSpec",
    "ChordToken",
    "DirectiveLine",
    "Document",
    "EditExistingToken",
    "EditTarget",
    "EditingSession",
    "EmptyLine",
    "InsertBySplitting",
    "Rect",
    "VisualLine",
    "append_chord",
    "compose_chord",
    "decompose_chord",
    "insert_line",
    "is_chord",
    "new_document",
    "normalize_tokens",
    "parse",
    "remove_line",
    "resolve_offset",
    "serialize",
    "set_chord",
    "split_and_insert",
]
