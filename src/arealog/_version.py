"""
Single source of the package version.

Hatch reads ``__version__`` from this file at build time; release tooling
rewrites it when tagging (vX.Y.Z).
"""

__version__ = "0.1.0"
