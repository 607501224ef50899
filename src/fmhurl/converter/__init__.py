"""src/fmhurl/converter/__init__.py"""

from .fmh import FmhUrl
from .forward import convert
from .reverse import revert

__all__ = ["FmhUrl", "convert", "revert"]
