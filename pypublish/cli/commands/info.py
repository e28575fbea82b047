"""
Info command implementation.
"""
from pypublish.core.uploader import UploadService


def info_command():
    """Show plugin metadata."""
    UploadService().show_info()
