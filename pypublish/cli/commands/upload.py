"""
Upload command implementation.

Thin wrapper around UploadService that handles CLI argument parsing
and delegates business logic to the service layer.
"""
import sys
from typing import Optional

import typer

from pypublish.cli.commands.options import (
    ConfigPathOption,
    DistPathOption,
    PasswordOption,
    RepositoryOption,
    SkipExistingOption,
    UsernameOption,
    collect_overrides,
)
from pypublish.core.uploader import UploadService


def upload_command(
    version: str = typer.Option("", "--version", help="Release version, e.g. v1.2.3"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Report the upload without running twine"),
    config_path: Optional[str] = ConfigPathOption,
    repository: Optional[str] = RepositoryOption,
    dist_path: Optional[str] = DistPathOption,
    username: Optional[str] = UsernameOption,
    password: Optional[str] = PasswordOption,
    skip_existing: Optional[bool] = SkipExistingOption
):
    """Upload distributions to the package index."""

    # Delegate to service layer
    upload_service = UploadService()
    exit_code = upload_service.execute_upload(
        version=version,
        dry_run=dry_run,
        config_path=config_path,
        overrides=collect_overrides(repository, dist_path, username, password, skip_existing)
    )

    # Exit with appropriate code
    if exit_code != 0:
        sys.exit(exit_code)
