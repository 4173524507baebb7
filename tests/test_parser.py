"""Tests for the document parser and serializer."""

import logging
from dataclasses import dataclass

import pytest

from chordpro_editor import (
    ChordLyricLine,
    ChordToken,
    DirectiveLine,
    EmptyLine,
    parse,
    serialize,
)
from chordpro_editor.extractor import ChordLyricsPair, Tag

DEFAULT_DOCUMENT = (ChordLyricLine(tokens=(ChordToken(chord=None, lyric=""),)),)


def failing_extractor(text: str) -> list:
    raise RuntimeError("extractor exploded")


class TestParseEmpty:
    """The parsed document is never empty."""

    @pytest.mark.parametrize("text", ["", "   ", "\n", " \n\t\n"])
    def test_blank_input(self, text: str) -> None:
        assert parse(text) == DEFAULT_DOCUMENT

    def test_extractor_returning_nothing(self) -> None:
        assert parse("text", extractor=lambda text: []) == DEFAULT_DOCUMENT


class TestParseLines:
    """Reshaping extractor items into visual lines."""

    def test_directive_and_chords(self) -> None:
        doc = parse("{verse}\n[C]Amazing [G]grace")
        assert doc == (
            DirectiveLine(raw="{verse}"),
            ChordLyricLine(
                tokens=(
                    ChordToken(chord="C", lyric="Amazing "),
                    ChordToken(chord="G", lyric="grace"),
                )
            ),
        )

    def test_directive_with_value(self) -> None:
        doc = parse("{title: Amazing Grace}")
        assert doc == (DirectiveLine(raw="{title: Amazing Grace}"),)

    def test_empty_line(self) -> None:
        doc = parse("Amazing\n\ngrace")
        assert isinstance(doc[1], EmptyLine)
        assert len(doc) == 3

    def test_chordless_lyric(self) -> None:
        doc = parse("Amazing grace")
        assert doc == (ChordLyricLine(tokens=(ChordToken(chord=None, lyric="Amazing grace"),)),)

    def test_empty_brackets_stay_lyric(self) -> None:
        doc = parse("[]la")
        assert doc[0].tokens == (ChordToken(chord=None, lyric="[]la"),)

    @pytest.mark.parametrize("text", ["a[]b", "[C]a[]b", "a[]b[G]c[]"])
    def test_empty_brackets_never_split_chordless_tokens(self, text: str) -> None:
        tokens = parse(text)[0].tokens
        for left, right in zip(tokens, tokens[1:]):
            assert not (left.chord is None and right.chord is None)
        assert serialize(parse(text)) == text


class TestInjectedExtractor:
    """The parser works with any extractor exposing the item fields."""

    def test_shape_matching(self) -> None:
        @dataclass
        class Pair:
            chords: str | None
            lyrics: str | None

        @dataclass
        class Meta:
            name: str
            value: str

        def extractor(text: str) -> list:
            return [[Meta(name="key", value="G")], [Pair(chords="G", lyrics=None), Pair(chords=None, lyrics="x")]]

        doc = parse("anything", extractor=extractor)
        assert doc == (
            DirectiveLine(raw="{key: G}"),
            ChordLyricLine(tokens=(ChordToken(chord="G", lyric=""), ChordToken(chord=None, lyric="x"))),
        )

    def test_items_one_to_one(self) -> None:
        def extractor(text: str) -> list:
            return [[ChordLyricsPair(chords="", lyrics="a"), ChordLyricsPair(chords="", lyrics="b")]]

        doc = parse("ab", extractor=extractor)
        assert len(doc[0].tokens) == 2

    def test_tag_value_none(self) -> None:
        doc = parse("x", extractor=lambda text: [[Tag(name="chorus")]])
        assert doc == (DirectiveLine(raw="{chorus}"),)


class TestParseFallback:
    """Extractor failures degrade to plain lyric lines."""

    def test_fallback_lines(self) -> None:
        doc = parse("[C]Amazing\n\ngrace", extractor=failing_extractor)
        assert doc == (
            ChordLyricLine(tokens=(ChordToken(chord=None, lyric="[C]Amazing"),)),
            EmptyLine(),
            ChordLyricLine(tokens=(ChordToken(chord=None, lyric="grace"),)),
        )

    def test_fallback_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="chordpro_editor.parser"):
            parse("Amazing grace", extractor=failing_extractor)
        assert "extraction failed" in caplog.text

    def test_fallback_round_trips_text(self) -> None:
        text = "[C]Amazing\n\ngrace"
        assert serialize(parse(text, extractor=failing_extractor)) == text


class TestSerialize:
    """Serializing visual lines back to text."""

    def test_line_kinds(self) -> None:
        doc = (
            DirectiveLine(raw="{verse}"),
            EmptyLine(),
            ChordLyricLine(tokens=(ChordToken(chord=None, lyric="Amazing "), ChordToken(chord="G", lyric="grace"))),
        )
        assert serialize(doc) == "{verse}\n\nAmazing [G]grace"

    def test_chord_only_token(self) -> None:
        doc = (ChordLyricLine(tokens=(ChordToken(chord="Am", lyric=""),)),)
        assert serialize(doc) == "[Am]"

    def test_default_document(self) -> None:
        assert serialize(DEFAULT_DOCUMENT) == ""


class TestRoundTrip:
    """Text survives a parse/serialize cycle."""

    @pytest.mark.parametrize(
        "text",
        [
            "{verse}\n[C]Amazing [G]grace",
            "{title: Amazing Grace}\n{artist: John Newton}\n\n[G]Amazing [G7]grace, how [C]sweet the [G]sound",
            "Amazing [D/F#]grace\n[Em][C]\n",
            "no chords at all",
        ],
    )
    def test_round_trip(self, text: str) -> None:
        assert serialize(parse(text)) == text
