from __future__ import annotations

import logging
from urllib.parse import urlparse

import requests

from pageqa.config import Settings
from pageqa.errors import NetworkError

logger = logging.getLogger(__name__)


def _check_url(url: str) -> str:
    url = (url or "").strip()
    parsed = urlparse(url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise NetworkError(f"not an http(s) URL: {url!r}")
    return url


def fetch_html(url: str, *, settings: Settings, session: requests.Session | None = None) -> str:
    url = _check_url(url)
    http = session or requests.Session()
    try:
        resp = http.get(
            url,
            headers={"User-Agent": settings.fetch_user_agent, "Accept": "text/html,*/*;q=0.8"},
            timeout=settings.fetch_timeout_seconds,
        )
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise NetworkError(f"failed to fetch {url}: {exc}") from exc
    finally:
        if session is None:
            http.close()

    # without a declared charset requests assumes ISO-8859-1 for text/*
    if "charset" not in resp.headers.get("Content-Type", "").lower():
        resp.encoding = resp.apparent_encoding

    logger.info("Fetched %s (%d bytes, status %s, %s)", url, len(resp.content), resp.status_code, resp.encoding)
    return resp.text
