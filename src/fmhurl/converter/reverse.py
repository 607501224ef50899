"""src/fmhurl/converter/reverse.py

FMH-URL to URL conversion.
"""

import logging

from fmhurl.codec.host import decode_host
from fmhurl.converter.fmh import FmhUrl
from fmhurl.exceptions import InvalidURLError, ReconstructionError
from fmhurl.url import URL, parse_url

logger = logging.getLogger(__name__)


def build_url_string(fields: FmhUrl) -> str:
    """Reassemble URL text from FMH-URL segments, without parsing it."""
    parts = [fields.scheme, ":"]
    if fields.has_authority:
        parts.append("//")

    if fields.userinfo:
        parts.extend((fields.userinfo, "@"))

    parts.append(decode_host(fields.host))

    if fields.port:
        parts.extend((":", fields.port))

    parts.append(fields.rest)
    return "".join(parts)


def revert(fmh_url: str) -> URL:
    """
    Convert an FMH-URL back to a URL.

    Args:
        fmh_url: ``host/scheme/port/userinfo/rest`` string.

    Returns:
        The parsed URL.

    Raises:
        InvalidFmhUrl: If the string does not have five segments.
        ReconstructionError: If the rebuilt URL text does not parse.
    """
    fields = FmhUrl.from_string(fmh_url)
    url = build_url_string(fields)
    logger.debug("reverted URL: %s", url)

    try:
        return parse_url(url)

    except InvalidURLError as exc:
        raise ReconstructionError(fmh_url, url, str(exc)) from exc
