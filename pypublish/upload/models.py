"""
Data Models for the PyPI Upload Workflow

Dataclasses passed between the resolver, validators, orchestrator and
plugin surface.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


DEFAULT_REPOSITORY = "https://upload.pypi.org/legacy/"
DEFAULT_DIST_PATH = "dist/*"


@dataclass(frozen=True)
class UploadConfig:
    """Resolved configuration for a single upload invocation"""
    username: str = ""
    password: str = ""
    repository: str = DEFAULT_REPOSITORY
    dist_path: str = DEFAULT_DIST_PATH
    skip_existing: bool = False


@dataclass(frozen=True)
class RuntimeSettings:
    """Timeouts applied to blocking calls"""
    upload_timeout: float = 300
    resolve_timeout: float = 10


@dataclass
class ValidationResult:
    """Outcome of a single validation check"""
    is_valid: bool
    error_message: Optional[str] = None
    field: Optional[str] = None
    validation_type: Optional[str] = None


@dataclass
class ValidationReport:
    """Per-field violations collected by the pre-flight validate entry point"""
    errors: Dict[str, List[str]] = field(default_factory=dict)

    def add_error(self, field_name: str, message: str) -> None:
        self.errors.setdefault(field_name, []).append(message)

    def add_result(self, field_name: str, result: ValidationResult) -> None:
        if not result.is_valid:
            self.add_error(field_name, result.error_message or "invalid value")

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass
class SubprocessResult:
    """Raw combined output and failure (if any) of one process run"""
    output: bytes = b""
    error: Optional[Exception] = None

    @property
    def success(self) -> bool:
        return self.error is None

    def text(self) -> str:
        return self.output.decode("utf-8", errors="replace")


@dataclass
class ExecuteResponse:
    """Structured outcome returned to the release host"""
    success: bool
    message: str = ""
    error: Optional[str] = None
    outputs: Dict[str, Any] = field(default_factory=dict)
