from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


def _env_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    try:
        return int(v.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    try:
        return float(v.strip())
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    # Local inference server speaking the OpenAI API (ONNX Runtime GenAI, llama.cpp, vLLM...)
    openai_base_url: str = "http://localhost:8000/v1"
    openai_api_key: str = "local"

    # Models
    openai_embed_model: str = "all-MiniLM-L6-v2"
    openai_chat_model: str = "phi-3-mini-4k-instruct-onnx"
    llm_timeout_seconds: float = 60.0
    llm_max_tokens: int = 512
    llm_temperature: float = 0.2

    # Storage
    chroma_dir: str = "storage/chroma"
    chroma_collection: str = "page_chunks"

    # Chunking
    max_chunk_chars: int = 500
    chunk_overlap_chars: int = 50

    # Retrieval / fetch
    retrieve_top_k: int = 5
    answer_from_page_only: bool = True
    fetch_timeout_seconds: float = 15.0
    fetch_user_agent: str = "pageqa/0.1"

    log_level: str = "INFO"


def get_settings() -> Settings:
    load_dotenv()

    return Settings(
        openai_base_url=os.getenv("OPENAI_BASE_URL", "http://localhost:8000/v1"),
        openai_api_key=os.getenv("OPENAI_API_KEY", "").strip() or "local",
        openai_embed_model=os.getenv("OPENAI_EMBED_MODEL", "all-MiniLM-L6-v2"),
        openai_chat_model=os.getenv("OPENAI_CHAT_MODEL", "phi-3-mini-4k-instruct-onnx"),
        llm_timeout_seconds=_env_float("LLM_TIMEOUT_SECONDS", 60.0),
        llm_max_tokens=_env_int("LLM_MAX_TOKENS", 512),
        llm_temperature=_env_float("LLM_TEMPERATURE", 0.2),
        chroma_dir=os.getenv("CHROMA_DIR", "storage/chroma"),
        chroma_collection=os.getenv("CHROMA_COLLECTION", "page_chunks"),
        max_chunk_chars=_env_int("MAX_CHUNK_CHARS", 500),
        chunk_overlap_chars=_env_int("CHUNK_OVERLAP_CHARS", 50),
        retrieve_top_k=_env_int("RETRIEVE_TOP_K", 5),
        answer_from_page_only=_env_bool("ANSWER_FROM_PAGE_ONLY", True),
        fetch_timeout_seconds=_env_float("FETCH_TIMEOUT_SECONDS", 15.0),
        fetch_user_agent=os.getenv("FETCH_USER_AGENT", "pageqa/0.1"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
