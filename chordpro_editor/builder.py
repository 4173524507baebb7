"""Chord builder state.

Holds the root, quality and bass a user is assembling in the chord picker,
seeded from the chord being edited (if any).
"""

from __future__ import annotations

from dataclasses import dataclass

from chordpro_editor.chords import compose_chord, decompose_chord, is_chord
from chordpro_editor.models import ChordSpec
from chordpro_editor.vocabulary import FLAT_NOTES, SHARP_NOTES, respell, uses_flats


@dataclass
class ChordBuilder:
    """Mutable picker state for one chord.

    Parameters
    ----------
    root : str | None
        The chosen root note, None until the user picks one.
    quality : str
        The chosen quality suffix ("" for major).
    bass : str | None
        The chosen bass note, None for no slash chord.
    use_flats : bool
        Offer flat-based note names instead of sharp-based ones.
    is_editing : bool
        True when the builder was opened on an existing chord.

    Examples
    --------
    >>> builder = ChordBuilder.from_value("Bbm7")
    >>> builder.root, builder.quality, builder.use_flats
    ('Bb', 'm7', True)
    >>> builder.bass = "F"
    >>> builder.chord_name
    'Bbm7/F'
    """

    root: str | None = None
    quality: str = ""
    bass: str | None = None
    use_flats: bool = False
    is_editing: bool = False

    @classmethod
    def from_value(cls, value: str | None) -> ChordBuilder:
        """Create a builder for a new chord (None) or an existing one."""
        if not value:
            return cls()
        spec = decompose_chord(value)
        return cls(
            root=spec.root,
            quality=spec.quality,
            bass=spec.bass,
            use_flats=uses_flats(spec),
            is_editing=True,
        )

    @property
    def notes(self) -> tuple[str, ...]:
        return FLAT_NOTES if self.use_flats else SHARP_NOTES

    @property
    def chord_name(self) -> str | None:
        """The composed chord symbol, or None while no root is chosen."""
        if not self.root:
            return None
        return compose_chord(ChordSpec(root=self.root, quality=self.quality, bass=self.bass))

    @property
    def is_recognized(self) -> bool:
        name = self.chord_name
        return name is not None and is_chord(name)

    def toggle_flats(self) -> None:
        """Switch note spelling and respell the chosen root and bass."""
        self.use_flats = not self.use_flats
        if self.root is not None:
            self.root = respell(self.root, self.use_flats)
        if self.bass is not None:
            self.bass = respell(self.bass, self.use_flats)
