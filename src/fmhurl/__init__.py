"""src/fmhurl/__init__.py

fmhurl - Reversible flattening of URLs into hierarchical FMH-URL strings.

An FMH-URL lists the host most-general label first, then the scheme, port
and credentials as fixed segments ahead of the path, so URLs sort and group
like filesystem paths while staying convertible back to a standard URL.

Key Features:
    - Lossless URL <-> FMH-URL conversion
    - Reversed domain labels, kept IPv4 and expanded IPv6 literals
    - Default ports filled in from the scheme
    - IDNA and percent-encoding handled by yarl

Example:
    Forward and back::

        from fmhurl import convert, revert

        fmh = convert('https://sub.example.com/users/profile?b=123#top')
        # 'com.example.sub/https/443///users/profile?b=123#top'

        url = revert(fmh)
        # URL('https://sub.example.com/users/profile?b=123#top')
"""

import logging

from fmhurl.codec import decode_host, encode_host, expand_ipv6
from fmhurl.converter import FmhUrl, convert, revert
from fmhurl.exceptions import (
    FmhUrlError,
    InvalidFmhUrl,
    InvalidURLError,
    ReconstructionError,
)
from fmhurl.url import (
    HostKind,
    canonicalize,
    classify_host,
    default_port,
    parse_url,
    serialize_url,
)
from fmhurl.utils.validators import is_fmh_url
from fmhurl.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "convert",
    "revert",
    "FmhUrl",
    "encode_host",
    "decode_host",
    "expand_ipv6",
    "HostKind",
    "classify_host",
    "parse_url",
    "serialize_url",
    "canonicalize",
    "default_port",
    "is_fmh_url",
    "FmhUrlError",
    "InvalidFmhUrl",
    "InvalidURLError",
    "ReconstructionError",
    "__version__",
]
