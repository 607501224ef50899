"""src/fmhurl/codec/host.py

Host encoding between URL hosts and FMH-URL hosts.

Domains are stored most-general label first (``a.b.com`` <-> ``com.b.a``),
IPv4 literals as-is and IPv6 literals expanded and bracketed.
"""

import ipaddress

from fmhurl.codec.ipv6 import expand_ipv6
from fmhurl.url import HostKind, classify_host


def _reverse_labels(host: str) -> str:
    return ".".join(reversed(host.split(".")))


def encode_host(host: str) -> str:
    """
    Encode a URL host for the FMH-URL host segment.

    Args:
        host: Host as given by the URL parser (IPv6 without brackets).

    Returns:
        Reversed domain, unchanged IPv4, or ``[expanded IPv6]``.
    """
    kind = classify_host(host)
    if kind is HostKind.IPV6:
        return f"[{expand_ipv6(host)}]"

    if kind is HostKind.IPV4:
        return host

    return _reverse_labels(host)


def decode_host(host: str) -> str:
    """
    Decode an FMH-URL host segment into URL host text.

    Bracketed IPv6 and IPv4 literals pass through; anything else is taken
    as reversed domain labels. Never fails.
    """
    if host.startswith("[") and host.endswith("]"):
        return host

    try:
        address = ipaddress.IPv4Address(host)

    except ValueError:
        return _reverse_labels(host)

    return str(address)
