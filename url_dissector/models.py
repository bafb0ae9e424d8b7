"""Core data models for URL Dissector."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

QueryValue = Union[str, Tuple[str, ...]]

_EMPTY_PARAMS: Mapping[str, QueryValue] = MappingProxyType({})


@dataclass(slots=True, frozen=True)
class HostParts:
    """Naive label split of a hostname."""

    subdomain: Optional[str] = None
    domain: Optional[str] = None
    tld: Optional[str] = None


@dataclass(slots=True, frozen=True)
class ParsedUrl:
    """Immutable record of the parts found in one input string.

    ``password`` is exported under the ``pass`` key and ``query_params``
    under ``queryParams``; see :meth:`to_dict`.
    """

    url: str
    scheme: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None
    path: Optional[str] = None
    query: Optional[str] = None
    query_params: Mapping[str, QueryValue] = field(default_factory=lambda: _EMPTY_PARAMS, hash=False)
    fragment: Optional[str] = None
    subdomain: Optional[str] = None
    domain: Optional[str] = None
    tld: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return every part as a fresh plain dict keyed by the export names."""

        return {
            "scheme": self.scheme,
            "host": self.host,
            "port": self.port,
            "user": self.user,
            "pass": self.password,
            "path": self.path,
            "query": self.query,
            "queryParams": {
                key: list(value) if isinstance(value, tuple) else value
                for key, value in self.query_params.items()
            },
            "fragment": self.fragment,
            "subdomain": self.subdomain,
            "domain": self.domain,
            "tld": self.tld,
        }
