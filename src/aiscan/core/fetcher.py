from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import httpx
import trafilatura

_HEADERS = {
    "User-Agent": "Mozilla/5.0 (compatible; aiscan/0.1)"
}


class FetchError(Exception):
    pass


@dataclass(frozen=True)
class Article:
    """Title and plain-text body of an extracted page."""

    text_content: str
    title: str | None = None

    @property
    def corpus(self) -> str:
        """What the classifier consumes: title followed by the body."""
        if self.title:
            return f"{self.title}\n{self.text_content}"
        return self.text_content


def extract_article(html: str) -> Article | None:
    """Extract the main article from an HTML document, or None if there is none."""
    doc = trafilatura.bare_extraction(
        html,
        with_metadata=True,
        include_comments=False,
        include_tables=True,
    )

    if not doc or not doc.text or len(doc.text.split()) < 20:
        # Fallback: plain extract without metadata
        text = trafilatura.extract(html, include_tables=True)
        if not text or len(text.split()) < 20:
            return None
        return Article(text_content=text)

    return Article(text_content=doc.text, title=doc.title or None)


def fetch_url(url: str, timeout: int = 30) -> Article:
    """Download URL and extract its article."""
    try:
        response = httpx.get(url, timeout=timeout, follow_redirects=True, headers=_HEADERS)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise FetchError(f"HTTP {e.response.status_code} fetching {url}") from e
    except httpx.RequestError as e:
        raise FetchError(f"Request failed for {url}: {e}") from e

    article = extract_article(response.text)
    if article is None:
        raise FetchError(
            f"No article found at {url}. "
            "The page may be JavaScript-rendered, paywalled, or have no article body."
        )
    return article


def read_file(path: Path) -> Article:
    """Read a local .txt or .html file."""
    if not path.exists():
        raise FetchError(f"File not found: {path}")

    raw = path.read_text(encoding="utf-8", errors="replace")

    if path.suffix.lower() in (".html", ".htm"):
        article = extract_article(raw)
        if article is None:
            raise FetchError(f"No article found in {path}")
        return article

    if not raw.strip():
        raise FetchError(f"File is empty: {path}")
    return Article(text_content=raw)
