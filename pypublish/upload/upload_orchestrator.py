"""
Upload Orchestrator for PyPI

Validates the resolved configuration, then either reports the upload that
would happen (dry run) or runs twine once and translates its outcome.
Failed uploads are reported, never retried: a partially accepted release
needs a human to decide what to do next.
"""

import logging
from typing import Optional

from .command_builder import TWINE_COMMAND, build_twine_args, redact_args
from .exceptions import ConfigurationError
from .executor import CommandExecutor, SubprocessCommandExecutor
from .models import ExecuteResponse, RuntimeSettings, UploadConfig
from .path_validator import PathValidator
from .url_validator import Resolver, URLValidator


def normalize_version(version: str) -> str:
    """Strip a leading 'v' from a release version."""
    if version and version.startswith("v"):
        return version[1:]
    return version or ""


class UploadOrchestrator:
    """Coordinates validation and the twine upload for one release"""

    def __init__(
        self,
        executor: Optional[CommandExecutor] = None,
        resolver: Optional[Resolver] = None,
        settings: Optional[RuntimeSettings] = None
    ):
        self.executor = executor or SubprocessCommandExecutor()
        self.settings = settings or RuntimeSettings()
        self.url_validator = URLValidator(resolver=resolver, resolve_timeout=self.settings.resolve_timeout)
        self.path_validator = PathValidator()
        self.logger = logging.getLogger(__name__)

    def validate_config(self, config: UploadConfig) -> None:
        """Raise ConfigurationError for the first blocking violation"""
        url_result = self.url_validator.validate(config.repository)
        if not url_result.is_valid:
            raise ConfigurationError(
                f"invalid repository URL: {url_result.error_message}",
                field="repository",
                validation_type=url_result.validation_type
            )

        path_result = self.path_validator.validate(config.dist_path)
        if not path_result.is_valid:
            raise ConfigurationError(
                f"invalid dist path: {path_result.error_message}",
                field="dist_path",
                validation_type=path_result.validation_type
            )

        if not config.username:
            raise ConfigurationError("username is required", field="username")
        if not config.password:
            raise ConfigurationError("password is required", field="password")

    def upload_package(self, config: UploadConfig, version: str, dry_run: bool = False) -> ExecuteResponse:
        """Run the upload workflow and return a structured outcome"""
        try:
            return self._upload_package(config, version, dry_run)
        except Exception as e:
            self.logger.error(f"Unexpected error during upload: {e}")
            return ExecuteResponse(success=False, error=f"unexpected error: {e}")

    def _upload_package(self, config: UploadConfig, version: str, dry_run: bool) -> ExecuteResponse:
        try:
            self.validate_config(config)
        except ConfigurationError as e:
            self.logger.warning(f"Configuration rejected ({e.field}): {e.message}")
            return ExecuteResponse(
                success=False,
                error=f"configuration validation failed: {e.message}"
            )

        version = normalize_version(version)

        if dry_run:
            self.logger.info(f"Dry run: would upload {config.dist_path} to {config.repository}")
            return ExecuteResponse(
                success=True,
                message=f"Would upload package to {config.repository}",
                outputs={
                    "repository": config.repository,
                    "dist_path": config.dist_path,
                    "skip_existing": config.skip_existing,
                    "version": version,
                }
            )

        args = build_twine_args(config)
        self.logger.info(f"Uploading {config.dist_path} to {config.repository}")
        self.logger.debug(f"Running {TWINE_COMMAND} {' '.join(redact_args(args))}")

        result = self.executor.run(TWINE_COMMAND, args, timeout=self.settings.upload_timeout)
        output = result.text()

        if result.error is not None:
            self.logger.error(f"twine upload failed: {result.error}")
            return ExecuteResponse(
                success=False,
                error=f"twine upload failed: {result.error}\nOutput: {output}"
            )

        self.logger.info(f"Uploaded version {version} to {config.repository}")
        return ExecuteResponse(
            success=True,
            message=f"Successfully uploaded package to {config.repository}",
            outputs={
                "repository": config.repository,
                "dist_path": config.dist_path,
                "version": version,
                "output": output,
            }
        )
