"""Origin checkers — the three differential Origin probes, in send order."""

from typing import List, Optional

from corscheck.checkers.base import BaseChecker
from corscheck.core.models import CORSConfig, Category


# Third-party origin an attacker could host a page on
_FOREIGN_ORIGIN = "http://example.com"


class NullOriginChecker(BaseChecker):

    name = "Null / Wildcard Origin"

    def origin_for(self, url: str) -> str:
        return "null"

    def check(self, url: str, config: CORSConfig) -> Optional[Category]:
        acao = config.allow_origin
        if acao == "*":
            return Category.WILDCARD
        if acao == "null":
            return Category.NULL_ORIGIN

        # Reflected value shares the target's public suffix
        suffix = self.public_suffix(url)
        if suffix and acao.endswith(suffix):
            return Category.SAME_DOMAIN
        return None


class ThirdPartyOriginChecker(BaseChecker):

    name = "Arbitrary Origin Reflection"

    def origin_for(self, url: str) -> str:
        return _FOREIGN_ORIGIN

    def check(self, url: str, config: CORSConfig) -> Optional[Category]:
        if config.allow_origin == _FOREIGN_ORIGIN:
            return Category.DIFFERENT_DOMAIN
        return None


class SameOriginChecker(BaseChecker):

    name = "Exact Origin Reflection"

    def origin_for(self, url: str) -> str:
        return self.exact_origin(url)

    def check(self, url: str, config: CORSConfig) -> Optional[Category]:
        if config.allow_origin == self.exact_origin(url):
            return Category.SAME_DOMAIN
        return None


def default_checkers() -> List[BaseChecker]:
    return [NullOriginChecker(), ThirdPartyOriginChecker(), SameOriginChecker()]
