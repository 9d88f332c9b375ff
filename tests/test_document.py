from __future__ import annotations

from textdoc import Position, Range, TextDocument, create


def make_document(text: str) -> TextDocument:
    return create("file://foo/bar", "text", 0, text)


def test_empty_content_has_one_line() -> None:
    document = make_document("")

    assert document.line_count == 1
    assert document.offset_at(Position(0, 0)) == 0
    assert document.position_at(0) == Position(0, 0)


def test_single_line_round_trip() -> None:
    text = "Hello World"
    document = make_document(text)

    assert document.line_count == 1
    for i in range(len(text)):
        assert document.offset_at(Position(0, i)) == i
        assert document.position_at(i) == Position(0, i)


def test_multiple_lines() -> None:
    text = "ABCDE\nFGHIJ\nKLMNO\n"
    document = make_document(text)

    assert document.line_count == 4
    for i in range(len(text)):
        line, column = divmod(i, 6)
        assert document.offset_at(Position(line, column)) == i
        assert document.position_at(i) == Position(line, column)

    assert document.offset_at(Position(3, 0)) == 18
    assert document.offset_at(Position(3, 1)) == 18
    assert document.position_at(18) == Position(3, 0)
    assert document.position_at(19) == Position(3, 0)


def test_starts_with_newline() -> None:
    document = make_document("\nABCDE")

    assert document.line_count == 2
    assert document.position_at(0) == Position(0, 0)
    assert document.position_at(1) == Position(1, 0)
    assert document.position_at(6) == Position(1, 5)


def test_line_count_for_each_terminator() -> None:
    assert make_document("ABCDE\rFGHIJ").line_count == 2
    assert make_document("ABCDE\nFGHIJ").line_count == 2
    assert make_document("ABCDE\r\nFGHIJ").line_count == 2
    assert make_document("ABCDE\n\nFGHIJ").line_count == 3
    assert make_document("ABCDE\r\rFGHIJ").line_count == 3
    assert make_document("ABCDE\n\rFGHIJ").line_count == 3
    assert make_document("A\n").line_count == 2


def test_get_text_with_ranges() -> None:
    text = "12345\n12345\n12345"
    document = make_document(text)

    assert document.get_text() == text
    assert document.get_text(Range.create(-1, 0, 0, 5)) == "12345"
    assert document.get_text(Range.create(0, 0, 0, 5)) == "12345"
    assert document.get_text(Range.create(0, 4, 1, 1)) == "5\n1"
    assert document.get_text(Range.create(0, 4, 2, 1)) == "5\n12345\n1"
    assert document.get_text(Range.create(0, 4, 3, 1)) == "5\n12345\n12345"
    assert document.get_text(Range.create(0, 0, 3, 5)) == text


def test_get_text_reversed_range_is_empty() -> None:
    document = make_document("12345\n12345")

    assert document.get_text(Range.create(1, 2, 0, 1)) == ""


def test_invalid_positions_and_offsets_are_clamped() -> None:
    text = "Hello World"
    document = make_document(text)

    assert document.offset_at(Position(0, len(text))) == len(text)
    assert document.offset_at(Position(0, len(text) + 3)) == len(text)
    assert document.offset_at(Position(2, 3)) == len(text)
    assert document.offset_at(Position(-1, 3)) == 0
    assert document.offset_at(Position(0, -3)) == 0
    assert document.offset_at(Position(1, -3)) == len(text)

    assert document.position_at(-1) == Position(0, 0)
    assert document.position_at(len(text)) == Position(0, len(text))
    assert document.position_at(len(text) + 3) == Position(0, len(text))


def test_character_past_line_end_stops_before_terminator() -> None:
    document = make_document("ab\r\ncd\nef")

    assert document.offset_at(Position(0, 10)) == 2
    assert document.offset_at(Position(1, 10)) == 6
    assert document.offset_at(Position(2, 10)) == 9


def test_offset_round_trip_across_terminators() -> None:
    text = "one\ntwo\r\nthree\rfour\n"
    document = make_document(text)

    for line in range(document.line_count):
        start = document.line_index.line_starts[line]
        for character in range(document.line_index.max_character(line) + 1):
            offset = document.offset_at(Position(line, character))
            assert offset == start + character
            assert document.position_at(offset) == Position(line, character)


def test_reads_are_idempotent_and_reuse_index() -> None:
    document = make_document("abc\ndef")

    first = document.line_index
    assert document.get_text() == document.get_text()
    assert document.offset_at(Position(1, 2)) == document.offset_at(Position(1, 2))
    assert document.position_at(5) == document.position_at(5)
    assert document.line_index is first


def test_accessors() -> None:
    document = create("file://a.txt", "plaintext", 7, "x")

    assert document.uri == "file://a.txt"
    assert document.language_id == "plaintext"
    assert document.version == 7
