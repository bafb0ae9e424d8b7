"""Shared constants for URL Dissector."""

SCHEME_PATTERN = r"(?P<scheme>[a-z][a-z0-9+\-.]*)"
"""Scheme token; compiled case-insensitive, so the stored text keeps its input case."""

AUTHORITY_PATTERN = (
    r"//"
    r"(?:(?P<user>[^:@/?#]+)(?::(?P<password>[^@/?#]*))?@)?"
    r"(?P<host>\[[^\]]+\]|[^:/?#]+)?"
    r"(?::(?P<port>[0-9]+))?"
)
"""Authority block introduced by ``//``: credentials, host or bracketed literal, port."""

PATH_PATTERN = r"(?P<path>/[^?#]*)"
QUERY_PATTERN = r"\?(?P<query>[^#]*)"
FRAGMENT_PATTERN = r"#(?P<fragment>.*)"

URL_PATTERN = (
    rf"(?:{SCHEME_PATTERN}:)?"
    rf"(?:{AUTHORITY_PATTERN})?"
    rf"{PATH_PATTERN}?"
    rf"(?:{QUERY_PATTERN})?"
    rf"(?:{FRAGMENT_PATTERN})?"
)

PORT_MIN = 0
PORT_MAX = 65535

LABEL_SEPARATOR = "."
ARRAY_KEY_SUFFIX = "[]"
"""Query keys ending with this suffix accumulate into a sequence."""

EXPORT_KEYS = (
    "scheme",
    "host",
    "port",
    "user",
    "pass",
    "path",
    "query",
    "queryParams",
    "fragment",
    "subdomain",
    "domain",
    "tld",
)
"""Bulk export keys, in output order."""
