# -*- coding: utf-8 -*-
"""Define project metadata
"""

__title__ = "filestore"
__summary__ = "A reference-counted, content-addressed file store."
__url__ = "https://github.com/optimalcomputing/filestore"

__version__ = "0.4.0"

__install_requires__ = ["fs>=2.4.16", "setuptools<81"]
__tests_require__ = ["pytest", "tox"]

__author__ = "Optimal Computing Limited"
__email__ = "dev@optimalcomputing.co.nz"

__license__ = "MIT License"
