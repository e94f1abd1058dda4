"""Origin checkers: which Origin each sends and how it reads the answer."""

import pytest

from corscheck.checkers.base import BaseChecker
from corscheck.checkers.origin import (
    NullOriginChecker, SameOriginChecker, ThirdPartyOriginChecker, default_checkers,
)
from corscheck.core.models import Category, CORSConfig


def acao(value: str) -> CORSConfig:
    return CORSConfig(allow_origins=(value,))


class TestHelpers:

    def test_exact_origin_keeps_port(self):
        assert BaseChecker.exact_origin("https://app.example.org:8443/api?x=1") == \
            "https://app.example.org:8443"

    def test_exact_origin_strips_credentials(self):
        assert BaseChecker.exact_origin("http://user:pw@example.net/") == "http://example.net"

    def test_exact_origin_rejects_relative(self):
        with pytest.raises(ValueError):
            BaseChecker.exact_origin("/just/a/path")

    @pytest.mark.parametrize("url,suffix", [
        ("https://api.example.com/v1", "com"),
        ("https://shop.example.co.uk/", "co.uk"),
        ("http://127.0.0.1:8080/", ""),
        ("http://localhost/", ""),
    ])
    def test_public_suffix(self, url, suffix):
        assert BaseChecker.public_suffix(url) == suffix


class TestNullOriginChecker:

    def setup_method(self):
        self.chk = NullOriginChecker()
        self.url = "https://api.example.co.uk/data"

    def test_sends_null(self):
        assert self.chk.origin_for(self.url) == "null"

    def test_wildcard(self):
        assert self.chk.check(self.url, acao("*")) is Category.WILDCARD

    def test_null(self):
        assert self.chk.check(self.url, acao("null")) is Category.NULL_ORIGIN

    def test_same_suffix(self):
        assert self.chk.check(self.url, acao("https://evil.co.uk")) is Category.SAME_DOMAIN

    def test_other_suffix(self):
        assert self.chk.check(self.url, acao("https://evil.com")) is None

    def test_absent(self):
        assert self.chk.check(self.url, acao("")) is None

    def test_ip_host_never_matches_suffix(self):
        assert self.chk.check("http://10.0.0.5/", acao("http://10.0.0.5")) is None


class TestThirdPartyOriginChecker:

    def test_echo(self):
        chk = ThirdPartyOriginChecker()
        url = "https://api.example.com/"
        assert chk.origin_for(url) == "http://example.com"
        assert chk.check(url, acao("http://example.com")) is Category.DIFFERENT_DOMAIN

    def test_no_echo(self):
        chk = ThirdPartyOriginChecker()
        assert chk.check("https://api.example.com/", acao("https://api.example.com")) is None


class TestSameOriginChecker:

    def test_echo(self):
        chk = SameOriginChecker()
        url = "https://api.example.com/users"
        assert chk.origin_for(url) == "https://api.example.com"
        assert chk.check(url, acao("https://api.example.com")) is Category.SAME_DOMAIN

    def test_scheme_mismatch(self):
        chk = SameOriginChecker()
        assert chk.check("https://api.example.com/", acao("http://api.example.com")) is None


def test_default_order():
    kinds = [type(c) for c in default_checkers()]
    assert kinds == [NullOriginChecker, ThirdPartyOriginChecker, SameOriginChecker]
