"""
Test for _version.py
"""
# Related modules
from packaging.version import Version

# Local imports
from .._version import __version__


def test_semantic_version():
    Version(__version__)
