"""
pypublish - upload Python distributions to a package index on release.
"""

__version__ = "2.0.0"
