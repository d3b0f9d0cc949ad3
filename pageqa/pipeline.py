from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Union

from pageqa.config import Settings
from pageqa.errors import PipelineError
from pageqa.llm.generator import generate_answer
from pageqa.rag.chunker import chunk_by_sentences
from pageqa.rag.indexer import store_chunks
from pageqa.schemas import ProcessRequest, ProcessResult
from pageqa.scrape.cleaner import clean_html
from pageqa.scrape.fetcher import fetch_html

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ok:
    value: Any


@dataclass(frozen=True)
class Err:
    error: PipelineError

    @property
    def stage(self) -> str:
        return self.error.stage


Outcome = Union[Ok, Err]


def attempt(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Outcome:
    """Run one stage, turning a PipelineError into Err.

    Anything outside the PipelineError taxonomy is a bug and propagates.
    """
    try:
        return Ok(fn(*args, **kwargs))
    except PipelineError as exc:
        return Err(exc)


@dataclass(frozen=True)
class Pipeline:
    fetch: Callable[[str], str]
    clean: Callable[[str], str]
    store: Callable[[list[str], str], int]
    answer: Callable[[str, str], str]
    max_chunk_size: int = 500
    overlap_size: int = 50

    def index(self, url: str) -> Outcome:
        """Fetch, clean, chunk and store one page; Ok carries the stored chunk count."""
        fetched = attempt(self.fetch, url)
        if isinstance(fetched, Err):
            return fetched

        cleaned = attempt(self.clean, fetched.value)
        if isinstance(cleaned, Err):
            return cleaned

        chunked = attempt(chunk_by_sentences, cleaned.value, self.max_chunk_size, self.overlap_size)
        if isinstance(chunked, Err):
            return chunked
        logger.info("Split %s into %d chunks", url, len(chunked.value))

        return attempt(self.store, chunked.value, url)

    def run(self, req: ProcessRequest) -> Outcome:
        stored = self.index(req.url)
        if isinstance(stored, Err):
            return stored

        answered = attempt(self.answer, req.query, req.url)
        if isinstance(answered, Err):
            return answered

        return Ok(ProcessResult(url=req.url, query=req.query, answer=answered.value, chunk_count=stored.value))


def build_pipeline(settings: Settings) -> Pipeline:
    return Pipeline(
        fetch=partial(fetch_html, settings=settings),
        clean=clean_html,
        store=lambda chunks, source: store_chunks(chunks, source=source, settings=settings),
        answer=lambda query, source: generate_answer(query, settings=settings, source=source),
        max_chunk_size=settings.max_chunk_chars,
        overlap_size=settings.chunk_overlap_chars,
    )
