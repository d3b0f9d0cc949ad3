from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from pageqa.errors import InvalidArgumentError
from pageqa.utils.hashing import stable_hash

# A sentence runs up to and including a run of terminators; leftover text is the last sentence.
_SENTENCE_RE = re.compile(r"[^.?!]*[.?!]+|[^.?!]+\Z")


@dataclass(frozen=True)
class Chunk:
    chunk_id: str
    text: str


def split_sentences(text: str) -> list[str]:
    """Split text into sentences, keeping every character.

    "".join(split_sentences(text)) == text always holds.
    """
    if not text:
        return []
    return _SENTENCE_RE.findall(text)


def _check_sizes(max_chunk_size: int, overlap_size: int) -> None:
    for name, value in (("max_chunk_size", max_chunk_size), ("overlap_size", overlap_size)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(f"{name} must be an int, got {type(value).__name__}")
    if max_chunk_size <= 0:
        raise InvalidArgumentError(f"max_chunk_size must be positive, got {max_chunk_size}")
    if overlap_size < 0:
        raise InvalidArgumentError(f"overlap_size must be non-negative, got {overlap_size}")


def _overlap_tail(sentences: list[str], overlap_size: int) -> list[str]:
    # Longest run of trailing whole sentences fitting in overlap_size; may be empty.
    tail: list[str] = []
    size = 0
    for sentence in reversed(sentences):
        if size + len(sentence) > overlap_size:
            break
        tail.insert(0, sentence)
        size += len(sentence)
    return tail


def chunk_by_sentences(text: str, max_chunk_size: int, overlap_size: int) -> list[str]:
    """Greedily pack whole sentences into chunks of at most max_chunk_size chars.

    Each new chunk starts with the trailing sentences of the previous one that
    fit in overlap_size. A sentence longer than max_chunk_size becomes a chunk
    of its own and is never cut.
    """
    _check_sizes(max_chunk_size, overlap_size)

    chunks: list[str] = []
    current: list[str] = []
    current_len = 0

    for sentence in split_sentences(text):
        if current and current_len + len(sentence) > max_chunk_size:
            chunks.append("".join(current))
            current = _overlap_tail(current, overlap_size)
            current_len = sum(len(s) for s in current)
            # overlap must not push the next chunk over the limit
            while current and current_len + len(sentence) > max_chunk_size:
                current_len -= len(current.pop(0))
        current.append(sentence)
        current_len += len(sentence)

    if current:
        chunks.append("".join(current))
    return chunks


def build_chunks(texts: Iterable[str], *, source: str) -> list[Chunk]:
    # Ids depend only on source + position, so re-processing a page overwrites its chunks.
    prefix = stable_hash({"source": source})[:16]
    return [Chunk(chunk_id=f"{prefix}::chunk_{idx:04d}", text=t) for idx, t in enumerate(texts)]
