"""
Exceptions for upload functionality.
"""


class UploadError(Exception):
    """Base upload error."""
    pass


class ConfigurationError(UploadError):
    """Configuration failed validation."""

    def __init__(self, message, **kwargs):
        super().__init__(message)
        self.message = message
        self.field = kwargs.get('field')
        self.validation_type = kwargs.get('validation_type')


class HostnameResolutionError(UploadError):
    """Repository hostname could not be resolved."""

    def __init__(self, message, **kwargs):
        super().__init__(message)
        self.hostname = kwargs.get('hostname')


class CommandExecutionError(UploadError):
    """External command did not complete successfully."""

    def __init__(self, message, **kwargs):
        super().__init__(message)
        self.command = kwargs.get('command')


class CommandFailedError(CommandExecutionError):
    """External command exited with a non-zero status."""

    def __init__(self, message, **kwargs):
        super().__init__(message, **kwargs)
        self.returncode = kwargs.get('returncode')


class CommandTimeoutError(CommandExecutionError):
    """External command exceeded its timeout."""

    def __init__(self, message, **kwargs):
        super().__init__(message, **kwargs)
        self.timeout = kwargs.get('timeout')
