from typing import List, Optional

import httpx

from corscheck.checkers.base import BaseChecker
from corscheck.checkers.origin import default_checkers
from corscheck.core.models import CORSResult
from corscheck.parsers.headers import parse_cors_config


class Engine:
    """
    Origin-probe engine: sends one GET per checker, each with a different
    Origin header, and stops at the first checker that reports a category.

    Usage:
        engine = Engine(timeout=10, logger=Log())
        result = engine.probe("https://example.com/api")   # CORSResult or None
    """

    def __init__(self, timeout: float = 10, proxy: str | None = None,
                 checkers: Optional[List[BaseChecker]] = None, logger=None,
                 transport: httpx.BaseTransport | None = None, verify: bool = False):
        self.timeout = timeout
        self.proxy = proxy
        self.checkers = checkers if checkers is not None else default_checkers()
        self.logger = logger
        self.transport = transport
        self.verify = verify

    def _client(self) -> httpx.Client:
        return httpx.Client(verify=self.verify, proxy=self.proxy, transport=self.transport,
                            follow_redirects=True, timeout=self.timeout)

    def probe(self, url: str) -> Optional[CORSResult]:
        if self.logger:
            self.logger.info(f"Checking URL -> {url}")

        try:
            with self._client() as client:
                return self._run_checkers(client, url)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            if self.logger:
                self.logger.debug(f"Skipping {url}: {exc}")
            return None

    def _run_checkers(self, client: httpx.Client, url: str) -> Optional[CORSResult]:
        for chk in self.checkers:
            origin = chk.origin_for(url)
            # Each step stands alone
            client.cookies.clear()
            # Headers only; the body is never read
            with client.stream("GET", url, headers={"Origin": origin}) as resp:
                status = resp.status_code
                config = parse_cors_config(resp.headers)

            category = chk.check(url, config)
            if self.logger and self.logger.verbose >= 2:
                self.logger.debug(
                    f"  {chk.name}: Origin {origin} → ACAO {config.allow_origin!r} "
                    f"(HTTP {status})")

            if category is not None:
                return CORSResult.finding(url, status, config, category)

        return None
