import logging
from pathlib import Path

import pytest

from quill.engine import Engine
from quill.config import Settings


def _seed(tmp: Path) -> Path:
    root = tmp / "Dictionaries"; root.mkdir()
    (root / "lang_en.txt").write_text(
        "# test list\nhello\nworld\nthere\nthe\ncat\na\nlot\nsee\nyou\n", encoding="utf-8"
    )
    return root


@pytest.fixture
def eng(tmp_path: Path):
    e = Engine()
    e.load([str(_seed(tmp_path))], custom=["Quill"])
    yield e
    e.shutdown()


@pytest.mark.e2e
def test_check_and_suggest(eng: Engine):
    rows = eng.check("Hello wrold, see you there")
    assert [(r.original, r.index) for r in rows] == [("wrold", 1)]
    assert eng.suggest("wrold")[0] == "world"
    assert eng.suggest("Alot")[0] == "A lot"


@pytest.mark.e2e
def test_custom_words_and_removal(eng: Engine):
    assert eng.check("quill") == []
    assert eng.add_word("kupo") is True
    assert eng.add_word("kupo") is False
    assert eng.check("kupo kupo") == []
    assert eng.remove_word("kupo") is True
    assert [r.index for r in eng.check("kupo kupo")] == [0, 1]


@pytest.mark.e2e
def test_replace_keeps_punctuation(eng: Engine):
    text = "hello wrold!"
    (bad,) = eng.check(text)
    assert eng.replace(text, bad, "world") == "hello world!"


@pytest.mark.e2e
def test_chunk_detects_header(eng: Engine):
    chunks = eng.chunk("/say hello  there")
    assert len(chunks) == 1
    assert chunks[0].header == "/say"
    assert chunks[0].complete_text == "/say hello there"
    assert eng.chunk("/say   ") == []


@pytest.mark.e2e
def test_chunk_explicit_header_and_ooc(eng: Engine):
    (c,) = eng.chunk("hi", header="/p", ooc=True)
    assert c.complete_text == "/p (( hi ))"


@pytest.mark.e2e
def test_configure_budget_splits_long_text(eng: Engine):
    eng.configure(byte_budget=60)
    text = " ".join(["hello world"] * 20)
    chunks = eng.chunk("/s " + text)
    assert len(chunks) > 1
    for c in chunks:
        assert len(c.complete_text.encode("utf-8")) <= 60
    assert chunks[0].continuation_marker.startswith("(1/")


@pytest.mark.e2e
def test_requires_load():
    e = Engine(Settings())
    with pytest.raises(RuntimeError):
        e.check("hello")
    with pytest.raises(RuntimeError):
        e.suggest("hello")
    with pytest.raises(ValueError):
        e.load()
    # chunking needs no dictionary
    assert e.chunk("/s hi")[0].complete_text == "/s hi"


@pytest.mark.e2e
def test_load_from_words_only():
    e = Engine()
    try:
        e.load(words=["cat"])
        assert e.check("cat catt")[0].original == "catt"
        assert e.suggest("catt") == ["cat"]
    finally:
        e.shutdown()


@pytest.mark.e2e
def test_verbose_load_logs_loader_progress(tmp_path: Path, caplog, monkeypatch):
    monkeypatch.delenv("QUILL_VERBOSE", raising=False)
    caplog.set_level(logging.INFO, logger="quill.loader")
    root = _seed(tmp_path)

    e = Engine()
    try:
        e.load([str(root)])
        assert not any("[done]" in r.getMessage() for r in caplog.records)

        e.load([str(root)], verbose=True)
        done = [r for r in caplog.records if r.name == "quill.loader" and "[done]" in r.getMessage()]
        assert len(done) == 1
        assert done[0].levelno == logging.INFO
        assert "files=1" in done[0].getMessage()
    finally:
        e.shutdown()
