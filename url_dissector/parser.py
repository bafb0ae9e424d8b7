"""Structural URL parsing for URL Dissector."""

from __future__ import annotations

import re
from typing import Mapping, Optional

from .constants import PORT_MAX, PORT_MIN, URL_PATTERN
from .domain_utils import classify_host
from .logging_config import get_logger
from .models import ParsedUrl, QueryValue
from .query import decode_query

logger = get_logger(__name__)

_URL_RE = re.compile(URL_PATTERN, re.IGNORECASE | re.ASCII | re.DOTALL)


def parse(url: str) -> ParsedUrl:
    """Decompose ``url`` into a :class:`ParsedUrl`.

    Parsing never fails on content: parts the grammar cannot find are
    ``None``, and input the grammar cannot match at all yields a record
    with every part absent.
    """

    if not isinstance(url, str):
        raise TypeError(f"url must be a str, not {type(url).__name__}")

    match = _URL_RE.fullmatch(url)
    if match is None:
        logger.debug("URL did not match grammar", extra={"url": url})
        return ParsedUrl(url=url)

    groups = match.groupdict()
    host = _strip_brackets(groups["host"])
    query = groups["query"]
    host_parts = classify_host(host)

    return ParsedUrl(
        url=url,
        scheme=groups["scheme"],
        user=groups["user"],
        password=groups["password"],
        host=host,
        port=_parse_port(groups["port"], url),
        path=groups["path"],
        query=query,
        query_params=decode_query(query),
        fragment=groups["fragment"],
        subdomain=host_parts.subdomain,
        domain=host_parts.domain,
        tld=host_parts.tld,
    )


def _strip_brackets(raw_host: Optional[str]) -> Optional[str]:
    if not raw_host:
        return None
    if raw_host.startswith("[") and raw_host.endswith("]"):
        return raw_host[1:-1]
    return raw_host


def _parse_port(raw_port: Optional[str], url: str) -> Optional[int]:
    if not raw_port:
        return None
    digits = raw_port.lstrip("0") or "0"
    if len(digits) > len(str(PORT_MAX)) or not PORT_MIN <= int(digits) <= PORT_MAX:
        logger.debug("Port out of range", extra={"url": url, "port": raw_port})
        return None
    return int(digits)


class UrlParser:
    """Parse a URL once and expose its parts through read-only accessors."""

    __slots__ = ("_parsed",)

    def __init__(self, url: str) -> None:
        self._parsed = parse(url)

    @property
    def parsed(self) -> ParsedUrl:
        return self._parsed

    @property
    def original_url(self) -> str:
        return self._parsed.url

    @property
    def scheme(self) -> Optional[str]:
        return self._parsed.scheme

    @property
    def host(self) -> Optional[str]:
        return self._parsed.host

    @property
    def port(self) -> Optional[int]:
        return self._parsed.port

    @property
    def user(self) -> Optional[str]:
        return self._parsed.user

    @property
    def password(self) -> Optional[str]:
        return self._parsed.password

    @property
    def path(self) -> Optional[str]:
        return self._parsed.path

    @property
    def query(self) -> Optional[str]:
        """Raw query string, without the leading ``?``."""
        return self._parsed.query

    @property
    def query_params(self) -> Mapping[str, QueryValue]:
        return self._parsed.query_params

    @property
    def fragment(self) -> Optional[str]:
        return self._parsed.fragment

    @property
    def subdomain(self) -> Optional[str]:
        return self._parsed.subdomain

    @property
    def domain(self) -> Optional[str]:
        return self._parsed.domain

    @property
    def tld(self) -> Optional[str]:
        return self._parsed.tld

    def to_dict(self) -> dict:
        return self._parsed.to_dict()

    def __repr__(self) -> str:
        return f"UrlParser({self._parsed.url!r})"
