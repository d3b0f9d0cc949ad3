from __future__ import annotations

import logging
from typing import Any

from pageqa.config import Settings
from pageqa.errors import GenerationError
from pageqa.llm.embeddings import embed_query
from pageqa.llm.openai_client import make_client
from pageqa.rag.retriever import retrieve

logger = logging.getLogger(__name__)

SYSTEM = """You answer questions about a web page.
Use ONLY the numbered context excerpts taken from that page.
If the excerpts do not contain the answer, say that the page does not say.
Answer in plain text, in a few sentences."""


def build_messages(query: str, context: list[dict[str, Any]]) -> list[dict[str, str]]:
    excerpts = "\n\n".join(f"[{i}] {c.get('text') or ''}" for i, c in enumerate(context, start=1))
    user = f"Context:\n{excerpts or '(no context found)'}\n\nQuestion: {query}"
    return [
        {"role": "system", "content": SYSTEM},
        {"role": "user", "content": user},
    ]


def generate_answer(query: str, *, settings: Settings, source: str | None = None) -> str:
    """Answer query from stored chunks, limited to the chunks of source when
    settings.answer_from_page_only is set and a source is given."""
    where = {"source": source} if source and settings.answer_from_page_only else None
    try:
        q_emb = embed_query(query, settings=settings)
        context = retrieve(
            chroma_dir=settings.chroma_dir,
            query_embedding=q_emb,
            top_k=settings.retrieve_top_k,
            where=where,
            collection=settings.chroma_collection,
        )
        client = make_client(settings)
        resp = client.chat.completions.create(
            model=settings.openai_chat_model,
            messages=build_messages(query, context),
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
        )
    except Exception as exc:
        raise GenerationError(f"inference failed: {exc}") from exc

    if not resp.choices:
        raise GenerationError("inference server returned no choices")
    text = (resp.choices[0].message.content or "").strip()
    logger.info("Generated %d chars from %d context chunks", len(text), len(context))
    return text
