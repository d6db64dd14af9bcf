"""Tests for splitting newsletter text into candidate chunks."""

from morning_brief.core.chunks import split_into_chunks


def test_split_on_blank_lines():
    text = "First paragraph.\n\nSecond paragraph.\n\n\n\nThird paragraph."
    assert split_into_chunks(text) == ["First paragraph.", "Second paragraph.", "Third paragraph."]


def test_bullet_block_is_merged_into_one_chunk():
    text = "Intro line\n\n- first point\n- second point\n- third point"
    assert split_into_chunks(text) == ["Intro line", "first point second point third point"]


def test_bullet_block_accepts_mixed_markers_and_drops_plain_lines():
    text = "Highlights:\n* alpha\n• beta\n- gamma"
    assert split_into_chunks(text) == ["alpha beta gamma"]


def test_single_bullet_keeps_block_intact():
    text = "Heading\n- only one bullet"
    assert split_into_chunks(text) == ["Heading\n- only one bullet"]


def test_marker_without_space_is_not_a_bullet():
    text = "-dash\n-dash again"
    assert split_into_chunks(text) == ["-dash\n-dash again"]


def test_empty_text_yields_no_chunks():
    assert split_into_chunks("") == []
    assert split_into_chunks("\n\n  \n\n") == []
