"""Chord symbol codec.

This module splits chord symbols into (root, quality, bass) and builds them
back. Decomposition is total: any string decomposes into a ChordSpec that
composes back into the same string.
"""

from __future__ import annotations

import re

from chordpro_editor.models import ChordSpec

# Constants for chord recognition
MAX_CHORD_LENGTH = 15

# Root note: a note letter with an optional single accidental
ROOT_RE = re.compile(r"^([A-G][#b]?)(.*)$", re.DOTALL)

# Pre-filter for well-known chord symbols
CHORD_RE = re.compile(
    r"^[A-G][b#]?"  # Root note with optional accidental
    r"(?:"
    r"m(?:aj)?(?:7|9|11|13)?|"  # minor variants: m, maj, maj7, m7, m9, etc.
    r"M(?:aj)?(?:7|9|11|13)?|"  # major variants: M, Maj, Maj7, M7, etc.
    r"dim(?:7)?|"  # diminished
    r"aug(?:7)?|"  # augmented
    r"sus[24]?(?:7)?|"  # suspended
    r"add[29]|"  # added tones
    r"[679]|"  # extensions
    r"11|13|"  # dominant extensions
    r"7-5|7b5|"  # half-diminished tail (after "m")
    r"5"  # power chord
    r")*"
    r"(?:/[A-G][b#]?)?$"  # Optional slash bass
)


def decompose_chord(symbol: str) -> ChordSpec:
    """Split a chord symbol into root, quality and bass.

    The bass is whatever follows the last "/". The remainder must start
    with a note letter and an optional accidental; otherwise the whole
    symbol becomes the root.

    Parameters
    ----------
    symbol : str
        The chord symbol (e.g., "Am7", "D/F#").

    Returns
    -------
    ChordSpec
        The decomposed chord. Never raises.

    Examples
    --------
    >>> decompose_chord("Dm7/F")
    ChordSpec(root='D', quality='m7', bass='F')
    >>> decompose_chord("N.C.")
    ChordSpec(root='N.C.', quality='', bass=None)
    """
    main, slash, bass = symbol.rpartition("/")
    if not slash:
        main, bass = symbol, None

    match = ROOT_RE.match(main)
    if match is None:
        return ChordSpec(root=symbol, quality="", bass=None)

    return ChordSpec(root=match.group(1), quality=match.group(2), bass=bass)


def compose_chord(spec: ChordSpec) -> str:
    """Build a chord symbol from its parts.

    Parameters
    ----------
    spec : ChordSpec
        The decomposed chord.

    Returns
    -------
    str
        The chord symbol.

    Examples
    --------
    >>> compose_chord(ChordSpec(root="C", quality="maj7", bass="E"))
    'Cmaj7/E'
    """
    result = f"{spec.root}{spec.quality}"
    if spec.bass is not None:
        result = f"{result}/{spec.bass}"
    return result


def is_chord(symbol: str) -> bool:
    """Check whether a symbol is a recognized chord.

    Uses regex pre-filtering followed by pychord validation.

    Parameters
    ----------
    symbol : str
        The chord symbol to check.

    Returns
    -------
    bool
        True if pychord can interpret the symbol, False otherwise.

    Examples
    --------
    >>> is_chord("Gm7")
    True
    >>> is_chord("Hello")
    False
    """
    if not symbol or len(symbol) > MAX_CHORD_LENGTH:
        return False

    if not CHORD_RE.match(symbol):
        return False

    from pychord import Chord as PyChord

    try:
        PyChord(symbol)
    except (ValueError, Exception):  # pychord may raise various exceptions
        return False
    return True
