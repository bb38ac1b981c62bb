"""Unit tests for splitting replies into IRC-sized chunks."""

import pytest

from agent.chunker import CHUNK_LIMIT, chunk_reply


def test_default_limit_is_400():
    assert CHUNK_LIMIT == 400


@pytest.mark.parametrize(
    "text,limit",
    [
        ("a" * 1000, 400),
        ("short", 400),
        ("x" * 400, 400),
        ("x" * 401, 400),
        ("abcdefg", 3),
        ("\x0304hot\x0f and \x0312cold\x0f", 5),
    ],
)
def test_chunks_reassemble_and_respect_limit(text, limit):
    chunks = list(chunk_reply(text, limit))
    assert "".join(chunks) == text
    assert all(0 < len(c) <= limit for c in chunks)


def test_exact_boundaries():
    assert list(chunk_reply("x" * 401, 400)) == ["x" * 400, "x"]
    assert len(chunk_reply("x" * 800, 400)) == 2


def test_multibyte_glyphs_counted_as_single_characters():
    text = "☀️🥵" * 150
    chunks = list(chunk_reply(text, 400))
    assert "".join(chunks) == text
    assert all(len(c) <= 400 for c in chunks)
    # every chunk is valid text on its own
    for c in chunks:
        c.encode("utf-8")


def test_empty_text_yields_no_chunks():
    assert list(chunk_reply("")) == []
    assert len(chunk_reply("")) == 0


def test_chunks_are_restartable():
    chunks = chunk_reply("abcdef", 4)
    assert list(chunks) == ["abcd", "ef"]
    assert list(chunks) == ["abcd", "ef"]


def test_color_code_may_straddle_chunks():
    text = "ab\x0304c"
    assert list(chunk_reply(text, 3)) == ["ab\x03", "04c"]


@pytest.mark.parametrize("limit", [0, -1])
def test_non_positive_limit_rejected(limit):
    with pytest.raises(ValueError):
        chunk_reply("abc", limit)
