from __future__ import annotations
from typing import Any
import os
import chromadb
from chromadb.config import Settings as ChromaSettings

DEFAULT_COLLECTION = "page_chunks"

def get_client(persist_dir: str) -> chromadb.ClientAPI:
    os.makedirs(persist_dir, exist_ok=True)
    return chromadb.PersistentClient(path=persist_dir, settings=ChromaSettings(anonymized_telemetry=False))

def get_collection(client: chromadb.ClientAPI, name: str = DEFAULT_COLLECTION):
    # Embeddings always come from the inference server, never from chroma itself.
    return client.get_or_create_collection(
        name=name,
        metadata={"hnsw:space": "cosine"},
        embedding_function=None,
    )

def upsert_chunks(
    *,
    persist_dir: str,
    ids: list[str],
    embeddings: list[list[float]],
    documents: list[str],
    metadatas: list[dict[str, Any]],
    collection: str = DEFAULT_COLLECTION,
) -> None:
    client = get_client(persist_dir)
    col = get_collection(client, collection)
    col.upsert(ids=ids, embeddings=embeddings, documents=documents, metadatas=metadatas)

def delete_source(*, persist_dir: str, source: str, from_index: int = 0, collection: str = DEFAULT_COLLECTION) -> None:
    # from_index > 0 keeps the first from_index chunks of the page
    where: dict[str, Any] = {"source": source}
    if from_index > 0:
        where = {"$and": [{"source": source}, {"chunk_index": {"$gte": from_index}}]}
    client = get_client(persist_dir)
    col = get_collection(client, collection)
    col.delete(where=where)

def query_chunks(
    *,
    persist_dir: str,
    query_embedding: list[float],
    n_results: int,
    where: dict[str, Any] | None = None,
    collection: str = DEFAULT_COLLECTION,
) -> dict[str, Any]:
    client = get_client(persist_dir)
    col = get_collection(client, collection)
    return col.query(
        query_embeddings=[query_embedding],
        n_results=n_results,
        where=where,
        include=["documents", "metadatas", "distances"],
    )
