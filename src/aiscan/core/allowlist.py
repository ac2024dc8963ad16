from __future__ import annotations

from typing import Iterable
from urllib.parse import urlparse


def _split_url(url: str) -> tuple[str, str]:
    """Accept 'example.com/a' or 'https://example.com/a', return (host, path)."""
    if not url.startswith(("http://", "https://")):
        url = "https://" + url
    parsed = urlparse(url)
    host = (parsed.hostname or "").lower()
    if host.startswith("www."):
        host = host[4:]
    return host, parsed.path.rstrip("/")


def domain_of(url: str) -> str:
    return _split_url(url)[0]


class AllowList:
    """
    Domains (and domain+path prefixes) the user never wants scanned.

    'example.com' skips every page on the host; 'example.com/blog' skips only
    paths under /blog.
    """

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._domains: set[str] = set()
        self._paths: dict[str, list[str]] = {}
        for entry in entries:
            self.add(entry)

    def add(self, entry: str) -> None:
        entry = entry.strip()
        if not entry:
            return
        host, path = _split_url(entry)
        if path:
            self._paths.setdefault(host, []).append(path)
        else:
            self._domains.add(host)

    def should_skip(self, url: str) -> bool:
        host, path = _split_url(url)
        if host in self._domains:
            return True
        for prefix in self._paths.get(host, []):
            if path == prefix or path.startswith(prefix + "/"):
                return True
        return False

    def __len__(self) -> int:
        return len(self._domains) + sum(len(v) for v in self._paths.values())
