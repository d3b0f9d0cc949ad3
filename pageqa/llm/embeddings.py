from __future__ import annotations
from pageqa.config import Settings
from pageqa.llm.openai_client import make_client

def embed_texts(texts: list[str], *, settings: Settings) -> list[list[float]]:
    if not texts:
        return []
    client = make_client(settings)
    resp = client.embeddings.create(
        model=settings.openai_embed_model,
        input=texts,
    )
    # the server may return items out of order
    return [d.embedding for d in sorted(resp.data, key=lambda d: d.index)]

def embed_query(query: str, *, settings: Settings) -> list[float]:
    return embed_texts([query], settings=settings)[0]
