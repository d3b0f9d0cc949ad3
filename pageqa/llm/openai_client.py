from __future__ import annotations

from openai import OpenAI
from pageqa.config import Settings


def make_client(settings: Settings) -> OpenAI:
    # Points at a local OpenAI-compatible inference server; failures are not retried.
    return OpenAI(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        timeout=settings.llm_timeout_seconds,
        max_retries=0,
    )
