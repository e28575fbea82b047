"""
CLI module for pypublish.

Provides the command-line interface for publishing distributions.
"""
from pypublish.cli.app import app as _app

# Export app function for pyproject.toml entry point
def app():
    """Entry point function for pyproject.toml scripts."""
    _app()

__all__ = ['app']
