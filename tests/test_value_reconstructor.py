from gedcom_core.loader import assemble, reconstruct_values, tokenize_text


TEXT = (
    "0 @I1@ INDI\n"
    "1 NOTE Line1\n"
    "2 CONC X\n"
    "2 CONT Line2\n"
    "2 CONC Y\n"
    "2 SOUR @S1@\n"
    "0 @S1@ SOUR\n"
)


def test_assembler_keeps_continuations_as_children():
    doc = assemble(tokenize_text(TEXT))
    note = doc.resolve("@I1@").find_first("NOTE")

    assert note.value == "Line1"
    assert [c.tag_name for c in note.children] == ["CONC", "CONT", "CONC", "SOUR"]


def test_conc_cont_merge():
    doc = reconstruct_values(assemble(tokenize_text(TEXT)))
    note = doc.resolve("@I1@").find_first("NOTE")

    assert note.value == "Line1X\nLine2Y"
    assert [c.tag_name for c in note.children] == ["SOUR"]


def test_empty_cont_adds_blank_line():
    doc = reconstruct_values(assemble(tokenize_text("0 @N1@ NOTE a\n1 CONT\n1 CONT b\n")))

    assert doc.resolve("@N1@").value == "a\n\nb"
