import os
import sys
from datetime import datetime

# -- Project information -----------------------------------------------------
project = "cssexp"
author = "cssexp contributors"
copyright = f"{datetime.now().year}, {author}"
version = "0.1.0"
release = version

# -- Path setup --------------------------------------------------------------
# Anchor on __file__ so 'src' is found regardless of CWD.
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

# -- General configuration ---------------------------------------------------
extensions = [
  "sphinx.ext.autodoc",
  "sphinx.ext.napoleon",
  "sphinx.ext.intersphinx",
  "autoapi.extension",
  "myst_parser",
]

# -- AutoAPI Configuration ---------------------------------------------------
autoapi_dirs = ["../src"]
autoapi_type = "python"
autoapi_root = "api"
autoapi_options = [
  "members",
  "undoc-members",
  "show-inheritance",
  "show-module-summary",
  "imported-members",
]
autoapi_ignore = ["*/tests/*", "*test_*.py"]

# -- MyST Parser Configuration -----------------------------------------------
myst_enable_extensions = [
  "colon_fence",
  "deflist",
  "fieldlist",
]
myst_heading_anchors = 3

# -- Theme Configuration -----------------------------------------------------
html_title = "cssexp"
html_short_title = "cssexp"

exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]
