"""Sphinx configuration file for MultiSpell documentation."""

from datetime import datetime
import os
import sys

# Add the project root to the path so we can import multispell
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Project information
project = "MultiSpell"
copyright = f"{datetime.now().year}, MultiSpell contributors"
author = "MultiSpell contributors"

try:
    from multispell import __version__

    release = __version__
    version = ".".join(__version__.split(".")[:2])
except ImportError:
    release = "0.1.0"
    version = "0.1"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.viewcode",
    "sphinx.ext.napoleon",  # Google-style docstrings
    "myst_parser",
]

source_suffix = {
    ".rst": "restructuredtext",
    ".md": "markdown",
}

master_doc = "index"

html_theme = "sphinx_rtd_theme"
html_theme_options = {
    "collapse_navigation": False,
    "navigation_depth": 3,
}

autodoc_default_options = {
    "members": True,
    "undoc-members": True,
    "show-inheritance": True,
}
# Documentation builds must not need the native Enchant library
autodoc_mock_imports = ["enchant"]

napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_use_param = True
napoleon_use_rtype = True

exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]
