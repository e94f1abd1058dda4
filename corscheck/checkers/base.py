"""Abstract base for all origin checkers."""

from abc import ABC, abstractmethod
from typing import Optional
from urllib.parse import urlsplit

import tldextract

from corscheck.core.models import CORSConfig, Category


# Bundled public suffix snapshot only; never fetches the list over the network.
_SUFFIXES = tldextract.TLDExtract(cache_dir=None, suffix_list_urls=())


class BaseChecker(ABC):
    """Every checker must implement origin_for() and check()."""

    name: str = "Unnamed Checker"

    # ── public API ──────────────────────────────────────────────

    @abstractmethod
    def origin_for(self, url: str) -> str:
        """Return the Origin header value to send to *url*."""
        ...

    @abstractmethod
    def check(self, url: str, config: CORSConfig) -> Optional[Category]:
        """
        Inspect the CORS headers the server answered with.
        Return the Category if the configuration is exploitable, else None.
        """
        ...

    # ── shared helpers ──────────────────────────────────────────

    @staticmethod
    def exact_origin(url: str) -> str:
        """scheme://host[:port] of *url*, without credentials."""
        parts = urlsplit(url)
        host = parts.netloc.rpartition("@")[2]
        if not parts.scheme or not host:
            raise ValueError(f"Cannot derive origin from {url!r}")
        return f"{parts.scheme}://{host}"

    @staticmethod
    def public_suffix(url: str) -> str:
        """eTLD of the URL's host ("co.uk", "com"), empty for IPs and bare hosts."""
        host = urlsplit(url).hostname or ""
        if not host:
            return ""
        return _SUFFIXES(host).suffix
