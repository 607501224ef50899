"""src/fmhurl/exceptions.py

fmhurl Exceptions hierarchy.
"""

from typing import Optional


class FmhUrlError(Exception):
    """Base exception for all fmhurl errors."""


class InvalidURLError(FmhUrlError):
    """
    The URL parser rejected the given text, or the text is not an
    absolute URL.
    """


class InvalidFmhUrl(FmhUrlError):
    """
    The FMH-URL does not split into host, scheme, port, userinfo and rest.

    Attributes:
        fmh_url: The offending FMH-URL string.
    """

    def __init__(self, fmh_url: str):
        super().__init__(f"invalid FMH-URL: {fmh_url}")
        self.fmh_url = fmh_url


class ReconstructionError(FmhUrlError):
    """
    A URL rebuilt from FMH-URL fields was rejected by the URL parser.

    Attributes:
        fmh_url: The FMH-URL the URL was rebuilt from.
        url: The rebuilt URL string.
    """

    def __init__(self, fmh_url: str, url: str, reason: Optional[str] = None):
        message = f"could not rebuild a valid URL from FMH-URL {fmh_url!r}: {url!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.fmh_url = fmh_url
        self.url = url
