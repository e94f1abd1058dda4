"""Shared data models for the CORS checker."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple


class Category(Enum):
    """Verdict category; each member carries (description, bucket file)."""

    NULL_ORIGIN = (
        "Null origin is allowed, which can allow malicious scripts to make "
        "requests on behalf of the user.",
        "null_origin_vulnerabilities.json",
    )
    WILDCARD = (
        "Wildcard origin (*) is set, which can allow malicious scripts to make "
        "requests on behalf of the user.",
        "wildcard_origin_vulnerabilities.json",
    )
    SAME_DOMAIN = (
        "Origin allows the same domain as the target URL, which can allow "
        "malicious scripts to make requests on behalf of the user.",
        "domain_origin_vulnerabilities.json",
    )
    DIFFERENT_DOMAIN = (
        "Origin allows a different domain, which can allow malicious scripts "
        "to make requests on behalf of the user.",
        "different_domain_origin_vulnerabilities.json",
    )

    @property
    def description(self) -> str:
        return self.value[0]

    @property
    def filename(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class CORSConfig:
    """Access-Control-* values taken from a single response."""
    allow_origins: Tuple[str, ...] = ("",)
    allow_methods: Tuple[str, ...] = ()
    allow_headers: Tuple[str, ...] = ()
    expose_headers: Tuple[str, ...] = ()
    max_age: int = 0
    allow_credentials: str = ""

    @property
    def allow_origin(self) -> str:
        return self.allow_origins[0] if self.allow_origins else ""

    def to_dict(self) -> Dict:
        return {
            "allowOrigins": list(self.allow_origins),
            "allowMethods": list(self.allow_methods),
            "allowHeaders": list(self.allow_headers),
            "exposeHeaders": list(self.expose_headers),
            "maxAge": self.max_age,
            "allowCredentials": self.allow_credentials,
        }


@dataclass(frozen=True)
class CORSResult:
    """Verdict for one probed URL."""
    url: str
    status_code: int
    cors_config: CORSConfig = field(default_factory=CORSConfig)
    vulnerable: bool = False
    vulnerability: str = ""
    category: Optional[Category] = None

    @classmethod
    def finding(cls, url: str, status_code: int, config: CORSConfig,
                category: Category) -> "CORSResult":
        return cls(url=url, status_code=status_code, cors_config=config,
                   vulnerable=True, vulnerability=category.description,
                   category=category)

    def to_dict(self) -> Dict:
        return {
            "url": self.url,
            "statusCode": self.status_code,
            "corsConfig": self.cors_config.to_dict(),
            "vulnerable": self.vulnerable,
            "vulnerability": self.vulnerability,
        }

    def __str__(self):
        label = self.category.name if self.category else "NONE"
        return f"[{label}] {self.url} (HTTP {self.status_code})"


def group_results(results: Iterable[CORSResult]) -> Dict[Category, List[CORSResult]]:
    """Bucket vulnerable results by category, every category present."""
    groups: Dict[Category, List[CORSResult]] = {cat: [] for cat in Category}
    for result in results:
        if result.vulnerable and result.category is not None:
            groups[result.category].append(result)
    return groups
