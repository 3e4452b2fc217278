# tests/test_tokenizer.py

from __future__ import annotations

import pytest

from gedcom_core.core.exceptions import (
    GedcomSyntaxError,
    LevelOutOfRange,
    MalformedLevel,
    MalformedXref,
    UnknownTag,
    XrefTooLong,
)
from gedcom_core.loader import (
    CustomTag,
    KnownTag,
    Tokenizer,
    tokenize_file,
    tokenize_text,
)


def first_line(text: str):
    return Tokenizer(text).next_line()


def test_tokenize_simple_head() -> None:
    line = first_line("0 HEAD")
    assert line.lineno == 1
    assert line.level == 0
    assert line.tag is KnownTag.HEAD
    assert line.ref_id is None
    assert line.pointer is None
    assert line.value is None


def test_tokenize_record_with_ref_id_and_child_value() -> None:
    lines = list(tokenize_text("0 @I1@ INDI\n1 NAME John /Doe/\n"))
    assert len(lines) == 2

    indi, name = lines
    assert indi.level == 0
    assert indi.ref_id == "@I1@"
    assert indi.tag is KnownTag.INDI
    assert name.level == 1
    assert name.tag is KnownTag.NAME
    assert name.value == "John /Doe/"
    assert name.lineno == 2


def test_level_zero_and_two_digit_levels_are_accepted() -> None:
    assert first_line("0 HEAD").level == 0
    assert first_line("99 NOTE deep").level == 99
    assert first_line("  1 NOTE leading spaces").level == 1


@pytest.mark.parametrize("text", ["02 HEAD", "00 HEAD"])
def test_level_with_leading_zero_is_rejected(text: str) -> None:
    with pytest.raises(MalformedLevel):
        first_line(text)


def test_level_above_99_is_out_of_range() -> None:
    with pytest.raises(LevelOutOfRange):
        first_line("100 HEAD")


def test_missing_level_is_malformed() -> None:
    with pytest.raises(MalformedLevel) as excinfo:
        first_line("X HEAD")
    assert excinfo.value.lineno == 1
    assert excinfo.value.column == 1


def test_level_must_be_followed_by_delimiter() -> None:
    with pytest.raises(MalformedLevel):
        first_line("1NAME John")


def test_missing_tag_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        first_line("0")
    with pytest.raises(GedcomSyntaxError):
        first_line("0 @I1@")


def test_xref_is_scanned_exactly() -> None:
    line = first_line("0 @I1@ INDI")
    assert line.ref_id == "@I1@"
    assert len(line.ref_id) == 4


def test_xref_length_limit_includes_delimiters() -> None:
    longest = "@" + "A" * 20 + "@"
    assert len(longest) == 22
    assert first_line(f"0 {longest} INDI").ref_id == longest

    with pytest.raises(XrefTooLong):
        first_line("0 @" + "A" * 21 + "@ INDI")


def test_pointer_length_limit_is_enforced_too() -> None:
    with pytest.raises(XrefTooLong):
        first_line("1 HUSB @" + "B" * 25 + "@")


def test_unterminated_xref_is_malformed() -> None:
    with pytest.raises(MalformedXref):
        first_line("0 @I1 INDI")


def test_pointer_value() -> None:
    line = first_line("1 HUSB @I1@")
    assert line.pointer == "@I1@"
    assert line.value is None
    assert line.line_value == "@I1@"


def test_pointer_followed_by_text_is_rejected() -> None:
    with pytest.raises(MalformedXref):
        first_line("1 HUSB @I1@ and more")


def test_escape_sequence_is_a_literal_value() -> None:
    line = first_line("2 DATE @#DJULIAN@ 1925")
    assert line.pointer is None
    assert line.value == "@#DJULIAN@ 1925"


def test_line_without_value() -> None:
    line = first_line("1 BIRT\n")
    assert line.pointer is None
    assert line.value is None


def test_empty_value_region_yields_no_value() -> None:
    line = first_line("1 NAME   \n")
    assert line.value is None
    assert line.pointer is None


def test_value_keeps_inner_and_trailing_spaces() -> None:
    line = first_line("1 NOTE   two  spaces here  \n")
    assert line.value == "two  spaces here  "


def test_custom_tag() -> None:
    line = first_line("1 _UID 6B1C2A")
    assert line.tag == CustomTag("_UID")
    assert line.value == "6B1C2A"


def test_unknown_tag_reports_position() -> None:
    tokenizer = Tokenizer("0 HEAD\n1 FOO bar\n")
    tokenizer.next_line()
    with pytest.raises(UnknownTag) as excinfo:
        tokenizer.next_line()

    assert excinfo.value.tag == "FOO"
    assert excinfo.value.lineno == 2
    assert excinfo.value.column == 3


def test_skip_line_resumes_after_error() -> None:
    tokenizer = Tokenizer("0 HEAD\n1 FOO bar\n1 NOTE ok\n")
    assert tokenizer.next_line().tag is KnownTag.HEAD

    with pytest.raises(UnknownTag):
        tokenizer.next_line()
    tokenizer.skip_line()

    note = tokenizer.next_line()
    assert note.tag is KnownTag.NOTE
    assert note.value == "ok"
    assert note.lineno == 3
    assert tokenizer.next_line() is None


@pytest.mark.parametrize("newline", ["\n", "\r\n", "\r"])
def test_all_line_terminators_are_accepted(newline: str) -> None:
    text = newline.join(["0 HEAD", "1 NOTE hello", "0 TRLR"]) + newline
    lines = list(tokenize_text(text))
    assert [ln.lineno for ln in lines] == [1, 2, 3]
    assert lines[1].value == "hello"


def test_last_line_may_be_unterminated() -> None:
    lines = list(tokenize_text("0 HEAD\n0 TRLR"))
    assert [ln.tag for ln in lines] == [KnownTag.HEAD, KnownTag.TRLR]


def test_blank_lines_are_skipped_but_counted() -> None:
    lines = list(tokenize_text("0 HEAD\n\n   \n1 NOTE x\n\n"))
    assert len(lines) == 2
    assert lines[1].lineno == 4


def test_bom_at_start_is_ignored() -> None:
    line = first_line("\ufeff0 HEAD")
    assert line.level == 0
    assert line.tag is KnownTag.HEAD


def test_exhausted_tokenizer_keeps_returning_none() -> None:
    tokenizer = Tokenizer("0 HEAD")
    assert tokenizer.next_line() is not None
    assert tokenizer.next_line() is None
    assert tokenizer.next_line() is None
    assert Tokenizer("").next_line() is None


def test_line_may_carry_ref_id_and_pointer() -> None:
    # Whether a defining line may also point elsewhere is not settled by
    # the grammar; the tokenizer currently keeps both.
    line = first_line("0 @N1@ NOTE @N2@")
    assert line.ref_id == "@N1@"
    assert line.pointer == "@N2@"
    assert line.value is None


def test_tokenize_file_reads_mock_file(sample_path) -> None:
    lines = list(tokenize_file(sample_path))

    assert lines, "Expected at least one line from mock GEDCOM file"
    assert lines[0].tag is KnownTag.HEAD
    assert lines[-1].tag is KnownTag.TRLR


def test_tokenize_file_missing_path(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        list(tokenize_file(tmp_path / "missing.ged"))
