import pytest

from quill.chunker import chunk, effective_budget, render_marker, substring_by_byte_count
from quill.errors import InvalidArgumentError
from quill.models import TextChunk
from quill.normalize import byte_len

LOREM = ("lorem ipsum dolor sit amet, consectetur adipiscing elit. " * 30)[:1200]


def test_say_1200_chars_into_three_or_more_chunks():
    chunks = chunk("/say", LOREM, False, "(#c/#m)", False, 500)
    assert len(chunks) >= 3
    for c in chunks:
        assert byte_len(c.complete_text) <= 500
        assert c.header == "/say"
    assert chunks[-1].continuation_marker == ""
    assert chunks[0].continuation_marker == f"(1/{len(chunks)})"


def test_mark_last_puts_marker_on_every_chunk():
    chunks = chunk("/say", LOREM, False, "(#c/#m)", True, 500)
    n = len(chunks)
    assert [c.continuation_marker for c in chunks] == [f"({i}/{n})" for i in range(1, n + 1)]


def test_chunks_rebuild_the_text():
    chunks = chunk("/p", LOREM, True, "(#c/#m)", False, 200)
    assert " ".join(c.text for c in chunks) == " ".join(LOREM.split())


@pytest.mark.parametrize("base", [200, 333, 500])
@pytest.mark.parametrize("text", [
    LOREM,
    "Short one. Then another sentence! And a \"quoted one.\" done " * 6,
    "naïve café über straße " * 20,
])
def test_complete_text_stays_within_byte_budget(base, text):
    chunks = chunk("/s", text, False, "(#c/#m)", False, base)
    assert len(chunks) < 10
    for c in chunks:
        assert byte_len(c.complete_text) <= base


def test_multibyte_hard_cut_never_splits_characters():
    text = "é" * 300
    chunks = chunk("", text, False, "(#c/#m)", False, 100)
    budget = effective_budget("", "(#c/#m)", 100, False)
    assert all(byte_len(c.text) <= budget for c in chunks)
    assert "".join(c.text for c in chunks) == text


def test_effective_budget_formula():
    assert effective_budget("/say", "(#c/#m)", 500, False) == 500 - 5 - 7
    assert effective_budget("/say", "(#c/#m)", 500, True) == 500 - 5 - 7 - 6


def test_single_chunk_has_no_marker_even_with_mark_last():
    (only,) = chunk("/say", "hello there", False, "(#c/#m)", True, 500)
    assert only.continuation_marker == ""
    assert only.complete_text == "/say hello there"


def test_ooc_tags_wrap_text():
    (only,) = chunk("/say", "hello", True, "(#c/#m)", False, 500)
    assert only.complete_text == "/say (( hello ))"


def test_newline_starts_a_new_chunk():
    chunks = chunk("", "one\ntwo", False, "(#c/#m)", False, 500)
    assert [c.text for c in chunks] == ["one", "two"]
    assert chunks[1].start_index == 4


def test_empty_text_gives_no_chunks():
    assert chunk("/say", "", False, "(#c/#m)", False, 500) == []


def test_budget_too_small_is_rejected():
    with pytest.raises(InvalidArgumentError):
        chunk("/say", "x", False, "(#c/#m)", False, 10)


def test_cut_prefers_space_at_boundary():
    text = "Hi there. This is long"
    assert substring_by_byte_count(text, 0, 17) == "Hi there. This is"


def test_cut_prefers_sentence_break():
    text = "Hi there. This is long"
    assert substring_by_byte_count(text, 0, 16) == "Hi there."
    assert substring_by_byte_count(text, 0, 16, break_on_sentence=False) == "Hi there. This"


def test_sentence_break_after_encapsulation():
    text = 'He said "Stop." and left'
    assert substring_by_byte_count(text, 0, 21) == 'He said "Stop."'


def test_tail_that_fits_is_returned_whole():
    assert substring_by_byte_count("abc def", 4, 10) == "def"


@pytest.mark.parametrize("start", [7, 8, -1])
def test_start_outside_text_is_rejected(start):
    with pytest.raises(InvalidArgumentError):
        substring_by_byte_count("abc def", start, 10)


def test_render_marker():
    assert render_marker("(#c/#m)", 2, 5) == "(2/5)"
    assert render_marker("[cont]", 1, 3) == "[cont]"


def test_complete_text_omits_empty_parts():
    assert TextChunk(text="hi").complete_text == "hi"
    assert TextChunk(header="/p", text="hi\r\r\nthere", continuation_marker="(1/2)").complete_text == "/p hi there (1/2)"
