"""Editing session over one ChordPro document.

An EditingSession owns the current document, the single pending edit
target, and the last text it published. Text handed back to load() that
matches what the session published is not parsed again.

A session is not thread-safe; confine it to one thread or guard it with a
lock.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass

from chordpro_editor import editor
from chordpro_editor.chords import is_chord
from chordpro_editor.extractor import LineItemExtractor
from chordpro_editor.models import (
    AppendAtLineEnd,
    ChordLyricLine,
    Document,
    EditExistingToken,
    EditTarget,
    InsertBySplitting,
)
from chordpro_editor.parser import parse
from chordpro_editor.serializer import serialize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rect:
    """Horizontal extent of a rendered lyric span.

    Parameters
    ----------
    left : float
        The x coordinate of the span's left edge.
    width : float
        The span width.
    """

    left: float
    width: float


def resolve_offset(pointer_x: float, rect: Rect, lyric_length: int) -> int | None:
    """Map a pointer position over a lyric span to a character offset.

    Characters are assumed to share the span width evenly.

    Parameters
    ----------
    pointer_x : float
        The pointer x coordinate.
    rect : Rect
        The rendered lyric span.
    lyric_length : int
        Number of characters in the lyric.

    Returns
    -------
    int | None
        Offset in [0, lyric_length], rounded to the nearest character
        boundary, or None if the lyric is empty.

    Examples
    --------
    >>> resolve_offset(45.0, Rect(left=5.0, width=130.0), 13)
    4
    >>> resolve_offset(10.0, Rect(left=0.0, width=50.0), 0) is None
    True
    """
    if lyric_length <= 0:
        return None
    if rect.width <= 0:
        return 0

    char_width = rect.width / lyric_length
    offset = math.floor((pointer_x - rect.left) / char_width + 0.5)
    return min(max(offset, 0), lyric_length)


class EditingSession:
    """Holds a document and applies chord edits to it.

    Parameters
    ----------
    text : str
        The initial ChordPro text.
    on_change : Callable[[str], None] | None
        Called with the new text after every committed edit.
    extractor : LineItemExtractor | None
        Line-item extractor handed to parse().

    Examples
    --------
    >>> session = EditingSession("Amazing grace")
    >>> session.request_edit(InsertBySplitting(line_index=0, token_index=0, char_offset=8))
    >>> session.commit("C")
    'Amazing [C]grace'
    """

    def __init__(
        self,
        text: str = "",
        on_change: Callable[[str], None] | None = None,
        extractor: LineItemExtractor | None = None,
    ) -> None:
        self._on_change = on_change
        self._extractor = extractor
        self._document = parse(text, self._extractor)
        self._last_emitted = text
        self._active_target: EditTarget | None = None

    @property
    def document(self) -> Document:
        return self._document

    @property
    def active_target(self) -> EditTarget | None:
        return self._active_target

    @property
    def last_emitted(self) -> str:
        return self._last_emitted

    @property
    def can_remove_lines(self) -> bool:
        return len(self._document) > 1

    @property
    def active_chord_value(self) -> str | None:
        """The chord on the token being edited, if any."""
        target = self._active_target
        if not isinstance(target, EditExistingToken):
            return None
        line = self._document[target.line_index]
        if not isinstance(line, ChordLyricLine):
            return None
        return line.tokens[target.token_index].chord

    def load(self, text: str) -> bool:
        """Replace the document with parsed text.

        Parameters
        ----------
        text : str
            The incoming ChordPro text.

        Returns
        -------
        bool
            False if text is what this session last published (nothing is
            parsed), True if the document was rebuilt.
        """
        if text == self._last_emitted:
            logger.debug("Ignoring load of text this session published")
            return False
        self._document = parse(text, self._extractor)
        self._last_emitted = text
        return True

    def request_edit(self, target: EditTarget) -> None:
        """Set the pending edit target, replacing any previous one."""
        if not isinstance(target, (EditExistingToken, AppendAtLineEnd, InsertBySplitting)):
            msg = f"Unknown edit target: {target!r}"
            raise ValueError(msg)
        self._active_target = target

    def cancel(self) -> None:
        self._active_target = None

    def commit(self, chord: str) -> str | None:
        """Apply the pending edit with the given chord.

        Parameters
        ----------
        chord : str
            The chord symbol chosen by the user.

        Returns
        -------
        str | None
            The published text, or None if no edit was pending.
        """
        target = self._active_target
        if target is None:
            logger.debug("Commit of %r ignored, no pending edit", chord)
            return None

        if not is_chord(chord):
            logger.debug("Committing unrecognized chord %r", chord)

        if isinstance(target, EditExistingToken):
            document = editor.set_chord(self._document, target.line_index, target.token_index, chord)
        elif isinstance(target, AppendAtLineEnd):
            document = editor.append_chord(self._document, target.line_index, chord)
        else:
            document = editor.split_and_insert(
                self._document,
                target.line_index,
                target.token_index,
                target.char_offset,
                chord,
            )

        self._active_target = None
        return self._publish(document)

    def commit_removal(self) -> str | None:
        """Remove the chord of the token being edited.

        Returns
        -------
        str | None
            The published text, or None unless an EditExistingToken
            target is pending.
        """
        target = self._active_target
        if not isinstance(target, EditExistingToken):
            logger.debug("Chord removal ignored for target %r", target)
            return None

        document = editor.set_chord(self._document, target.line_index, target.token_index, None)
        self._active_target = None
        return self._publish(document)

    def add_line(self, after_index: int) -> str:
        """Insert a blank line after after_index and publish.

        Any pending edit is cancelled, since line indices shift.
        """
        self.cancel()
        return self._publish(editor.insert_line(self._document, after_index))

    def delete_line(self, index: int) -> str:
        """Remove the line at index and publish.

        Any pending edit is cancelled, since line indices shift.
        """
        self.cancel()
        return self._publish(editor.remove_line(self._document, index))

    def resolve_click_offset(
        self,
        line_index: int,
        token_index: int,
        pointer_x: float,
        rect: Rect,
        lyric_length: int | None = None,
    ) -> int | None:
        """Map a click on a token's lyric to a character offset.

        lyric_length defaults to the length of the addressed token's lyric.
        """
        if lyric_length is None:
            line = self._document[line_index]
            if not isinstance(line, ChordLyricLine):
                return None
            lyric_length = len(line.tokens[token_index].lyric)
        return resolve_offset(pointer_x, rect, lyric_length)

    def click_lyric(self, line_index: int, token_index: int, pointer_x: float, rect: Rect) -> EditTarget:
        """Turn a click on a token's lyric into a pending edit.

        A click on an empty lyric edits the token's chord slot, any other
        click places a new chord by splitting the lyric.
        """
        offset = self.resolve_click_offset(line_index, token_index, pointer_x, rect)
        target: EditTarget
        if offset is None:
            target = EditExistingToken(line_index=line_index, token_index=token_index)
        else:
            target = InsertBySplitting(line_index=line_index, token_index=token_index, char_offset=offset)
        self.request_edit(target)
        return target

    def _publish(self, document: Document) -> str:
        text = serialize(document)
        self._document = document
        self._last_emitted = text
        logger.debug("Published document with %d lines", len(document))
        if self._on_change is not None:
            self._on_change(text)
        return text
