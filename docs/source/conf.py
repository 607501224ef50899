import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

import fmhurl

project = "fmhurl"
release = fmhurl.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "myst_parser",
]

autodoc_member_order = "bysource"

html_theme = "furo"
