"""src/fmhurl/codec/ipv6.py

Canonical IPv6 expansion.
"""

import ipaddress
import struct
from typing import Union


def expand_ipv6(address: Union[str, ipaddress.IPv6Address]) -> str:
    """
    Expand an IPv6 address to 8 groups of 4 lowercase hex digits.

    Compressed (``::1``) and IPv4-embedded (``::ffff:1.2.3.4``) notations
    expand to the same shape. Brackets and zone ids are ignored.

    Args:
        address: IPv6 address object or text.

    Returns:
        The address as ``xxxx:xxxx:xxxx:xxxx:xxxx:xxxx:xxxx:xxxx``.

    Raises:
        ValueError: If the text is not an IPv6 address.
    """
    if not isinstance(address, ipaddress.IPv6Address):
        text = address
        if text.startswith("[") and text.endswith("]"):
            text = text[1:-1]
        address = ipaddress.IPv6Address(text.partition("%")[0])

    groups = struct.unpack("!8H", address.packed)
    return ":".join(f"{group:04x}" for group in groups)
