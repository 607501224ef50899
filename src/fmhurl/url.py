"""src/fmhurl/url.py

URL parser adapter for fmhurl.

Parsing, IDNA host encoding, percent-encoding and the scheme default port
table all come from yarl. The converters only see URLs through this module.
"""

import enum
import ipaddress
from typing import Optional, Union

from yarl import URL

from fmhurl.exceptions import InvalidURLError

__all__ = [
    "URL",
    "HostKind",
    "parse_url",
    "serialize_url",
    "canonicalize",
    "default_port",
    "classify_host",
]


class HostKind(enum.Enum):
    """Kind of host carried by a parsed URL."""

    DOMAIN = "domain"
    IPV4 = "ipv4"
    IPV6 = "ipv6"


def parse_url(url: Union[str, URL]) -> URL:
    """
    Parse an absolute URL.

    Args:
        url: URL text, or an already parsed URL.

    Returns:
        The parsed URL, with IDNA hosts and percent-encoded components.

    Raises:
        InvalidURLError: If the parser rejects the text or it has no scheme.
            IPv6 hosts with a zone id are rejected too.
    """
    if isinstance(url, URL):
        parsed = url

    else:
        try:
            parsed = URL(url)

        except (TypeError, ValueError) as exc:
            raise InvalidURLError(f"Invalid URL {url!r}: {exc}") from exc

    if not parsed.scheme:
        raise InvalidURLError(f"URL has no scheme: {str(parsed)!r}")

    host = parsed.raw_host
    if host and "%" in host and classify_host(host) is HostKind.IPV6:
        raise InvalidURLError(f"IPv6 zone ids are not supported: {str(parsed)!r}")

    return parsed


def default_port(scheme: str) -> Optional[int]:
    """Known default port of a scheme, or None."""
    return URL.build(scheme=scheme, host="localhost").port


def classify_host(host: str) -> HostKind:
    """Classify host text (brackets and zone id allowed) as domain or IP."""
    candidate = host
    if candidate.startswith("[") and candidate.endswith("]"):
        candidate = candidate[1:-1]

    try:
        address = ipaddress.ip_address(candidate.partition("%")[0])

    except ValueError:
        return HostKind.DOMAIN

    return HostKind.IPV6 if address.version == 6 else HostKind.IPV4


def canonicalize(url: URL) -> URL:
    """
    Normalize the spellings yarl keeps apart but which name the same URL.

    An explicit default port is dropped and a bare authority gets the
    root path, so ``http://example.com:80`` and ``http://example.com/``
    compare (and serialize) equal.
    """
    port = url.explicit_port
    if port is not None and port == default_port(url.scheme):
        url = url.with_port(None)

    if (
        url.raw_authority
        and url.raw_path == "/"
        and not url.raw_query_string
        and not url.raw_fragment
    ):
        url = url.with_path("/", encoded=True)

    return url


def serialize_url(url: URL) -> str:
    """Canonical text form of a URL, for round-trip comparison."""
    return str(canonicalize(url))
