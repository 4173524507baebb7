#!/usr/bin/env python3
"""CLI tool to load a ChordPro file into the visual editor.

Prints the visual document as JSON, or applies one chord edit and prints
the resulting ChordPro text.

Usage:
    python examples/visual_edit.py <input_file> [--split LINE TOKEN OFFSET CHORD]
    python examples/visual_edit.py <input_file> [--append LINE CHORD]
    python examples/visual_edit.py <input_file> [--remove LINE TOKEN]

Examples:
    python examples/visual_edit.py song.pro
    python examples/visual_edit.py song.pro --split 1 0 8 C
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from chordpro_editor import (
    AppendAtLineEnd,
    ChordLyricLine,
    DirectiveLine,
    EditExistingToken,
    EditingSession,
    EmptyLine,
    InsertBySplitting,
    VisualLine,
    decompose_chord,
)


def line_to_dict(line: VisualLine) -> dict[str, Any]:
    """Convert a visual line to a JSON-serializable dict."""
    if isinstance(line, EmptyLine):
        return {"type": "empty"}
    if isinstance(line, DirectiveLine):
        return {"type": "directive", "raw": line.raw}
    if isinstance(line, ChordLyricLine):
        tokens = []
        for token in line.tokens:
            entry: dict[str, Any] = {"chord": token.chord, "lyric": token.lyric}
            if token.chord is not None:
                spec = decompose_chord(token.chord)
                entry["spec"] = {"root": spec.root, "quality": spec.quality, "bass": spec.bass}
            tokens.append(entry)
        return {"type": "chord-lyric", "tokens": tokens}
    msg = f"Unknown line type: {type(line).__name__}"
    raise TypeError(msg)


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect or edit a ChordPro file")
    parser.add_argument("input", type=Path, help="ChordPro file to load")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--split", nargs=4, metavar=("LINE", "TOKEN", "OFFSET", "CHORD"))
    group.add_argument("--append", nargs=2, metavar=("LINE", "CHORD"))
    group.add_argument("--remove", nargs=2, metavar=("LINE", "TOKEN"))
    parser.add_argument("-v", "--verbose", action="store_true", help="Log session activity")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, stream=sys.stderr)

    session = EditingSession(args.input.read_text(encoding="utf-8"))

    if args.split:
        line, token, offset, chord = args.split
        session.request_edit(InsertBySplitting(int(line), int(token), int(offset)))
        sys.stdout.write(session.commit(chord) + "\n")
    elif args.append:
        line, chord = args.append
        session.request_edit(AppendAtLineEnd(int(line)))
        sys.stdout.write(session.commit(chord) + "\n")
    elif args.remove:
        line, token = args.remove
        session.request_edit(EditExistingToken(int(line), int(token)))
        sys.stdout.write(session.commit_removal() + "\n")
    else:
        lines = [line_to_dict(line) for line in session.document]
        sys.stdout.write(json.dumps(lines, indent=2) + "\n")


if __name__ == "__main__":
    main()
