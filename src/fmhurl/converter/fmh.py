"""src/fmhurl/converter/fmh.py

FMH-URL segment layout.
"""

from dataclasses import dataclass

from fmhurl.exceptions import InvalidFmhUrl

SEPARATOR = "/"
SEGMENT_COUNT = 5


@dataclass(frozen=True)
class FmhUrl:
    """
    The five positional segments of an FMH-URL.

    Attributes:
        host: Encoded host, empty when the URL has no host.
        scheme: URL scheme.
        port: Explicit or default port, empty when there is none.
        userinfo: ``username``, ``:password``, ``username:password`` or empty.
        rest: Path, then optional ``?query`` and ``#fragment``. May contain
            further separators.
    """

    host: str = ""
    scheme: str = ""
    port: str = ""
    userinfo: str = ""
    rest: str = ""

    @classmethod
    def from_string(cls, fmh_url: str) -> "FmhUrl":
        """
        Split an FMH-URL on its first four separators.

        Raises:
            InvalidFmhUrl: If fewer than five segments result.
        """
        parts = fmh_url.split(SEPARATOR, SEGMENT_COUNT - 1)
        if len(parts) != SEGMENT_COUNT:
            raise InvalidFmhUrl(fmh_url)

        return cls(*parts)

    @property
    def has_authority(self) -> bool:
        """Whether the rebuilt URL needs a ``//`` authority."""
        return bool(self.host or self.port or self.userinfo)

    def __str__(self) -> str:
        return SEPARATOR.join(
            (self.host, self.scheme, self.port, self.userinfo, self.rest)
        )
