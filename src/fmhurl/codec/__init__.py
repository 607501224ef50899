"""src/fmhurl/codec/__init__.py

Host codec for fmhurl.

This module converts URL hosts to and from their FMH-URL form, including
the canonical expansion of IPv6 literals.
"""

from .host import decode_host, encode_host
from .ipv6 import expand_ipv6

__all__ = ["encode_host", "decode_host", "expand_ipv6"]
