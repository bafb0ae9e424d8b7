"""Hostname classification and naive label splitting for URL Dissector."""

from __future__ import annotations

import ipaddress
from typing import Optional

from .constants import LABEL_SEPARATOR
from .logging_config import get_logger
from .models import HostParts

logger = get_logger(__name__)


def is_ip_address(host: Optional[str]) -> bool:
    """Return True when ``host`` is a literal IPv4 or unbracketed IPv6 address.

    Scoped IPv6 addresses (``fe80::1%eth0``) are not literals.
    """

    if not host or "%" in host:
        return False
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


def classify_host(host: Optional[str]) -> HostParts:
    """Split ``host`` into subdomain, domain and tld.

    Only the last two labels are considered, without any public suffix
    lookup, so ``example.co.uk`` yields domain ``co.uk`` and tld ``uk``.
    IP literals are returned whole as the domain.
    """

    if not host:
        return HostParts()
    if is_ip_address(host):
        logger.debug("Host is an IP literal", extra={"host": host})
        return HostParts(domain=host)

    labels = host.split(LABEL_SEPARATOR)
    if len(labels) == 1:
        return HostParts(domain=host)

    tld = labels.pop()
    second = labels.pop()
    subdomain = LABEL_SEPARATOR.join(labels) if labels else None
    return HostParts(subdomain=subdomain, domain=f"{second}{LABEL_SEPARATOR}{tld}", tld=tld)
