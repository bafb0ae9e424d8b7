"""Query string decoding for URL Dissector."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Union
from urllib.parse import parse_qsl

from .constants import ARRAY_KEY_SUFFIX
from .logging_config import get_logger
from .models import QueryValue

logger = get_logger(__name__)


def decode_query(raw: Optional[str]) -> Mapping[str, QueryValue]:
    """Decode a raw query string into a read-only ordered mapping.

    Pairs are split on ``&`` and percent-decoded (``+`` is a space). A key
    written as ``name[]`` collects its values into a tuple under ``name``;
    any other repeated key keeps only its last value.
    """

    if not raw:
        return MappingProxyType({})

    decoded: Dict[str, Union[str, List[str]]] = {}
    for key, value in parse_qsl(raw, keep_blank_values=True):
        if key.endswith(ARRAY_KEY_SUFFIX) and len(key) > len(ARRAY_KEY_SUFFIX):
            name = key[: -len(ARRAY_KEY_SUFFIX)]
            current = decoded.get(name)
            if isinstance(current, list):
                current.append(value)
            else:
                decoded[name] = [value]
            continue
        if not key:
            continue
        decoded[key] = value

    logger.debug("Decoded query string", extra={"param_count": len(decoded)})
    return MappingProxyType(
        {key: tuple(value) if isinstance(value, list) else value for key, value in decoded.items()}
    )
