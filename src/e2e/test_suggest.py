import time

import pytest

from quill.dictionary import Dictionary
from quill.errors import InvalidArgumentError
from quill.suggest import LETTERS, SuggestionGenerator


@pytest.fixture
def make_gen():
    made = []

    def _make(words, cls=SuggestionGenerator, **kw):
        gen = cls(Dictionary(words), **kw)
        made.append(gen)
        return gen

    yield _make
    for g in made:
        g.close()


def test_transpose_comes_first(make_gen):
    gen = make_gen({"cat", "cart"})
    out = gen.suggest("cta", 5)
    assert out[0] == "cat"
    assert out.count("cat") == 1


def test_capitalization_is_preserved(make_gen):
    gen = make_gen({"world", "wold"})
    out = gen.suggest("Wrold", 5)
    assert "World" in out
    assert all(s[0].isupper() for s in out)


def test_lowercase_input_stays_lowercase(make_gen):
    gen = make_gen({"world"})
    assert gen.suggest("wrold", 5) == ["world"]


def test_splits_need_both_halves(make_gen):
    gen = make_gen({"a", "lot"})
    assert "a lot" in gen.suggest("alot", 5)


def test_deletes(make_gen):
    gen = make_gen({"cat"})
    assert gen.suggest("catt", 5) == ["cat"]


def test_max_results_caps_output(make_gen):
    gen = make_gen({"cat", "cot", "cut", "at"})
    assert len(gen.suggest("cat", 2)) == 2
    assert gen.suggest("cta", 0) == []


def test_no_suggestions_is_empty_list(make_gen):
    gen = make_gen({"alpha"})
    assert gen.suggest("zzzzzzz", 5) == []


def test_empty_word_fails_fast(make_gen):
    gen = make_gen({"cat"})
    with pytest.raises(InvalidArgumentError):
        gen.suggest("", 5)
    with pytest.raises(InvalidArgumentError):
        gen.suggest("cat", -1)


def test_away_ranks_vowel_positions_first(make_gen):
    gen = make_gen(set())
    out = gen.generate_away("cat", 1, False)
    assert out[:26] == ["c" + ch + "t" for ch in LETTERS]
    # second pass starts with letters added at the front
    assert out[26] == "acat"


def test_away_depth_two_reaches_two_edits(make_gen):
    gen = make_gen({"cat"})
    assert "cat" not in gen.generate_away("cxx", 1, True)
    assert "cat" in gen.generate_away("cxx", 2, False)


class _SlowTranspose(SuggestionGenerator):
    def generate_transpose(self, word, filtered=True):
        time.sleep(0.05)
        return ["tx"]

    def generate_away(self, word, depth=2, filtered=False):
        return []

    def generate_splits(self, word):
        return []

    def generate_deletes(self, word, filtered=True):
        return ["dx"]


def test_merge_order_ignores_completion_order(make_gen):
    gen = make_gen({"tx", "dx"}, cls=_SlowTranspose)
    assert gen.suggest("zz", 5) == ["tx", "dx"]


def test_dictionary_updates_visible_on_next_call(make_gen):
    gen = make_gen(set())
    assert gen.suggest("cta", 5) == []
    gen.dictionary.add("cat")
    assert gen.suggest("cta", 5) == ["cat"]


def test_closed_generator_refuses_work(make_gen):
    gen = make_gen({"cat"})
    gen.close()
    with pytest.raises(RuntimeError):
        gen.suggest("cta", 5)
