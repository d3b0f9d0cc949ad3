from __future__ import annotations

import re

from bs4 import BeautifulSoup

# Tags whose text never belongs to the readable page.
_DROP_TAGS = ["script", "style", "noscript", "template", "svg", "iframe", "head"]

_WS_RE = re.compile(r"\s+")


def clean_html(html: str) -> str:
    if not html or not html.strip():
        return ""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(_DROP_TAGS):
        tag.decompose()
    text = soup.get_text(separator=" ")
    return _WS_RE.sub(" ", text).strip()
