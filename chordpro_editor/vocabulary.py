"""Static chord vocabulary offered by the chord builder.

Two enharmonic spellings of the twelve notes (sharp-based and flat-based)
and the closed set of quality suffixes the builder lets a user pick from.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chordpro_editor.models import ChordSpec

SHARP_NOTES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)

FLAT_NOTES: tuple[str, ...] = (
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)

# (label, suffix) pairs in display order; the major triad has an empty suffix
QUALITIES: tuple[tuple[str, str], ...] = (
    ("maj", ""),
    ("m", "m"),
    ("7", "7"),
    ("maj7", "maj7"),
    ("m7", "m7"),
    ("dim", "dim"),
    ("aug", "aug"),
    ("sus2", "sus2"),
    ("sus4", "sus4"),
    ("add9", "add9"),
    ("dim7", "dim7"),
    ("m7b5", "m7b5"),
)

QUALITY_SUFFIXES: frozenset[str] = frozenset(suffix for _, suffix in QUALITIES)


def uses_flats(spec: ChordSpec) -> bool:
    """Check whether a chord is spelled with flats.

    Parameters
    ----------
    spec : ChordSpec
        The decomposed chord.

    Returns
    -------
    bool
        True if the root or the bass carries a flat accidental.

    Examples
    --------
    >>> from chordpro_editor.models import ChordSpec
    >>> uses_flats(ChordSpec(root="Bb", quality="m"))
    True
    >>> uses_flats(ChordSpec(root="D", bass="F#"))
    False
    """
    return spec.root[1:2] == "b" or (spec.bass is not None and spec.bass[1:2] == "b")


def respell(note: str, flats: bool) -> str:
    """Respell a note in the sharp or flat note set.

    Parameters
    ----------
    note : str
        A note from either set (e.g., "C#", "Db").
    flats : bool
        Target the flat-based set if True, the sharp-based set otherwise.

    Returns
    -------
    str
        The enharmonic equivalent, or the note unchanged if it is unknown.

    Examples
    --------
    >>> respell("C#", flats=True)
    'Db'
    >>> respell("Bb", flats=False)
    'A#'
    """
    source = SHARP_NOTES if note in SHARP_NOTES else FLAT_NOTES
    if note not in source:
        return note
    target = FLAT_NOTES if flats else SHARP_NOTES
    return target[source.index(note)]
