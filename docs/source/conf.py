#!/usr/bin/env python3

# Copyright (C) 2024 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Configuration file for the Sphinx documentation builder.

For the full list of built-in configuration values, see the
documentation: https://www.sphinx-doc.org/en/master/usage/configuration.html
"""

# -- Project information -----------------------------------------------------

project = "ecgroup"
project_copyright = "2024 The ecgroup developers"
author = "The ecgroup developers"
release = "2024.10.1"

# -- General configuration ---------------------------------------------------

extensions = [
    "myst_parser",
    "sphinx.ext.autodoc",
    "sphinx.ext.doctest",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
]

source_suffix = [".rst", ".md"]

exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

# -- Options for HTML output -------------------------------------------------

html_theme = "sphinx_rtd_theme"
