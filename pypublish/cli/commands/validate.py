"""
Validate command implementation.
"""
import sys
from typing import Optional

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


def validate_command(
    config_path: Optional[str] = ConfigPathOption,
    repository: Optional[str] = RepositoryOption,
    dist_path: Optional[str] = DistPathOption,
    username: Optional[str] = UsernameOption,
    password: Optional[str] = PasswordOption,
    skip_existing: Optional[bool] = SkipExistingOption
):
    """Check upload configuration without uploading anything."""

    upload_service = UploadService()
    exit_code = upload_service.validate_configuration(
        config_path=config_path,
        overrides=collect_overrides(repository, dist_path, username, password, skip_existing)
    )

    if exit_code != 0:
        sys.exit(exit_code)
