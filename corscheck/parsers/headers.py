import re
from typing import Optional, Tuple

import httpx

from corscheck.core.models import CORSConfig


_INTEGER = re.compile(r"[+-]?[0-9]+")


def first_value(headers: httpx.Headers, name: str) -> str:
    """First occurrence of a header; repeated headers are not merged."""
    values = headers.get_list(name)
    return values[0] if values else ""


def split_header(value: Optional[str]) -> Tuple[str, ...]:
    """Split a comma list as sent; items keep their surrounding spaces."""
    if not value:
        return ()
    return tuple(value.split(","))


def parse_max_age(value: Optional[str]) -> int:
    """Plain optionally-signed decimal only, anything else is 0."""
    if not value or not _INTEGER.fullmatch(value):
        return 0
    return int(value)


def parse_cors_config(headers: httpx.Headers) -> CORSConfig:
    """Build a CORSConfig from the first value of each Access-Control-* header."""
    return CORSConfig(
        allow_origins=(first_value(headers, "Access-Control-Allow-Origin"),),
        allow_methods=split_header(first_value(headers, "Access-Control-Allow-Methods")),
        allow_headers=split_header(first_value(headers, "Access-Control-Allow-Headers")),
        expose_headers=split_header(first_value(headers, "Access-Control-Expose-Headers")),
        max_age=parse_max_age(first_value(headers, "Access-Control-Max-Age")),
        allow_credentials=first_value(headers, "Access-Control-Allow-Credentials"),
    )
