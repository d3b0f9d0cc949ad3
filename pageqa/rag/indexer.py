from __future__ import annotations

import logging

from pageqa.config import Settings
from pageqa.errors import StoreError
from pageqa.llm.embeddings import embed_texts
from pageqa.rag.chunker import build_chunks
from pageqa.rag.vector_store import delete_source, upsert_chunks

logger = logging.getLogger(__name__)

EMBED_BATCH_SIZE = 64


def store_chunks(chunks: list[str], *, source: str, settings: Settings) -> int:
    """Embed chunks of one page and replace that page's entries in the collection.

    Returns the number of chunks stored. Any embedding or chroma failure is
    raised as StoreError.
    """
    if not chunks:
        logger.info("No chunks to store for %s", source)
        return 0

    records = build_chunks(chunks, source=source)
    docs = [r.text for r in records]

    try:
        embeddings: list[list[float]] = []
        for i in range(0, len(docs), EMBED_BATCH_SIZE):
            embeddings.extend(embed_texts(docs[i:i + EMBED_BATCH_SIZE], settings=settings))

        upsert_chunks(
            persist_dir=settings.chroma_dir,
            ids=[r.chunk_id for r in records],
            embeddings=embeddings,
            documents=docs,
            metadatas=[{"source": source, "chunk_index": idx} for idx in range(len(records))],
            collection=settings.chroma_collection,
        )
        # drop the tail left over from a previous, longer version of the page
        delete_source(
            persist_dir=settings.chroma_dir,
            source=source,
            from_index=len(records),
            collection=settings.chroma_collection,
        )
    except Exception as exc:
        raise StoreError(f"failed to store {len(records)} chunks for {source}: {exc}") from exc

    logger.info("Stored %d chunks for %s in %s", len(records), source, settings.chroma_collection)
    return len(records)
