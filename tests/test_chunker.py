import random

import pytest

from pageqa.errors import InvalidArgumentError
from pageqa.rag.chunker import build_chunks, chunk_by_sentences, split_sentences


def _overlap_len(prev: list[str], nxt: list[str]) -> int:
    """Number of leading sentences of nxt repeated from the end of prev (sentences are unique)."""
    for k in range(min(len(prev), len(nxt)), 0, -1):
        if prev[-k:] == nxt[:k]:
            return k
    return 0


def _random_text(seed: int) -> str:
    rng = random.Random(seed)
    words = ["alpha", "beta", "gamma", "delta", "vector", "page", "chunk", "query"]
    parts = []
    for i in range(rng.randint(1, 40)):
        body = " ".join(rng.choice(words) for _ in range(rng.randint(1, 25)))
        parts.append(f" s{i} {body}{rng.choice(['.', '?', '!', '...'])}")
    if rng.random() < 0.5:
        parts.append(" trailing words without a stop")
    return "".join(parts).lstrip()


def test_split_sentences_keeps_terminators_and_tail():
    assert split_sentences("One. Two? Three! Four") == ["One.", " Two?", " Three!", " Four"]
    assert split_sentences("Wait... what?! ok") == ["Wait...", " what?!", " ok"]
    assert split_sentences("") == []


def test_empty_text_gives_no_chunks():
    assert chunk_by_sentences("", 500, 50) == []


def test_single_short_sentence_is_one_chunk():
    assert chunk_by_sentences("Hello you.", 500, 50) == ["Hello you."]


def test_three_sentences_with_overlap():
    assert chunk_by_sentences("A.B.C.", 4, 2) == ["A.B.", "B.C."]


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_max_chunk_size_is_rejected(size):
    with pytest.raises(InvalidArgumentError):
        chunk_by_sentences("Some text.", size, 0)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        chunk_by_sentences("Some text.", 10, -1)


def test_oversized_sentence_is_kept_whole():
    long_sentence = " " + "x" * 30 + "."
    chunks = chunk_by_sentences("Hi." + long_sentence + " Bye.", 10, 5)
    assert chunks == ["Hi.", long_sentence, " Bye."]


def test_no_overlap_when_no_sentence_fits():
    assert chunk_by_sentences("Aaaaa.Bbbbb.Ccccc.", 12, 3) == ["Aaaaa.Bbbbb.", "Ccccc."]


def test_overlap_is_dropped_rather_than_exceed_max():
    assert chunk_by_sentences("Aaa.Bbb.Ccccccc.", 10, 8) == ["Aaa.Bbb.", "Ccccccc."]


def test_zero_overlap():
    assert chunk_by_sentences("A.B.C.", 4, 0) == ["A.B.", "C."]


@pytest.mark.parametrize("seed", range(25))
@pytest.mark.parametrize("max_size,overlap", [(500, 50), (120, 40), (60, 30), (30, 10)])
def test_chunking_properties(seed, max_size, overlap):
    text = _random_text(seed)
    chunks = chunk_by_sentences(text, max_size, overlap)
    assert chunks

    per_chunk = [split_sentences(c) for c in chunks]
    for c, sentences in zip(chunks, per_chunk):
        assert "".join(sentences) == c
        if len(c) > max_size:
            assert len(sentences) == 1

    rebuilt = list(per_chunk[0])
    for prev, nxt in zip(per_chunk, per_chunk[1:]):
        k = _overlap_len(prev, nxt)
        assert sum(len(s) for s in nxt[:k]) <= overlap
        assert k < len(nxt)
        rebuilt.extend(nxt[k:])

    assert rebuilt == split_sentences(text)
    assert "".join(rebuilt) == text


def test_chunking_is_deterministic():
    text = _random_text(7)
    assert chunk_by_sentences(text, 80, 20) == chunk_by_sentences(text, 80, 20)


def test_build_chunks_ids_are_stable_per_source():
    a = build_chunks(["one.", "two."], source="https://example.com/a")
    again = build_chunks(["one.", "two."], source="https://example.com/a")
    b = build_chunks(["one."], source="https://example.com/b")

    assert [c.chunk_id for c in a] == [c.chunk_id for c in again]
    assert a[0].chunk_id.endswith("::chunk_0000")
    assert a[1].chunk_id.endswith("::chunk_0001")
    assert a[0].chunk_id != b[0].chunk_id
    assert [c.text for c in a] == ["one.", "two."]


@pytest.mark.parametrize("max_size,overlap", [(True, 0), (10, "2"), (10.0, 2), (10, None)])
def test_non_int_sizes_are_rejected(max_size, overlap):
    with pytest.raises(InvalidArgumentError):
        chunk_by_sentences("a.", max_size, overlap)


def test_overlap_larger_than_max_stays_within_max():
    chunks = chunk_by_sentences("Aa.Bb.Cc.Dd.", 6, 10)
    assert chunks == ["Aa.Bb.", "Bb.Cc.", "Cc.Dd."]
    assert all(len(c) <= 6 for c in chunks)
