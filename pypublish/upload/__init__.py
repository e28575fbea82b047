"""
pypublish Upload Module

Validates the upload destination and distribution path, then hands the
distributions to twine.

Repository URL: HTTPS only (HTTP for localhost), no private or metadata addresses
Dist path: relative POSIX glob, no traversal, no shell metacharacters
Upload: one twine invocation per release, never retried
"""

from .config_resolver import ConfigResolver
from .command_builder import TWINE_COMMAND, build_twine_args
from .executor import CommandExecutor, SubprocessCommandExecutor
from .ip_classifier import is_disallowed_ip
from .models import (
    ExecuteResponse,
    RuntimeSettings,
    SubprocessResult,
    UploadConfig,
    ValidationReport,
    ValidationResult
)
from .path_validator import PathValidator
from .plugin import ExecuteRequest, Hook, PluginInfo, PublishPlugin, ReleaseContext
from .upload_orchestrator import UploadOrchestrator
from .url_validator import URLValidator
from .exceptions import (
    UploadError,
    ConfigurationError,
    HostnameResolutionError,
    CommandExecutionError,
    CommandFailedError,
    CommandTimeoutError
)

__all__ = [
    'PublishPlugin',
    'ExecuteRequest',
    'ReleaseContext',
    'PluginInfo',
    'Hook',
    'UploadOrchestrator',
    'ConfigResolver',
    'URLValidator',
    'PathValidator',
    'is_disallowed_ip',
    'build_twine_args',
    'TWINE_COMMAND',
    'CommandExecutor',
    'SubprocessCommandExecutor',
    'UploadConfig',
    'RuntimeSettings',
    'ValidationResult',
    'ValidationReport',
    'SubprocessResult',
    'ExecuteResponse',
    'UploadError',
    'ConfigurationError',
    'HostnameResolutionError',
    'CommandExecutionError',
    'CommandFailedError',
    'CommandTimeoutError'
]
