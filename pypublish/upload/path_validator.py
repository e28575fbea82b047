"""
Distribution Path Validator

Validates the distribution glob before it is handed to twine. Paths are
POSIX-style: the allowed character set excludes the backslash.
"""

import logging
import posixpath
import re

from .models import ValidationResult


logger = logging.getLogger(__name__)


class PathValidator:
    """Validates distribution path patterns passed to the upload command"""

    MAX_LENGTH = 256
    # Alphanumerics, dots, dashes, underscores, forward slashes and globs
    ALLOWED_PATTERN = re.compile(r"[a-zA-Z0-9._/*-]+")

    def validate(self, path: str) -> ValidationResult:
        """Validate that a distribution path is safe"""
        if not path:
            return self._reject("dist path cannot be empty", "empty")

        if len(path) > self.MAX_LENGTH:
            return self._reject(
                f"dist path too long (max {self.MAX_LENGTH} characters)",
                "length"
            )

        # Blocks shell metacharacters, whitespace and command substitution
        if not self.ALLOWED_PATTERN.fullmatch(path):
            logger.warning("Rejected dist path containing invalid characters")
            return self._reject("dist path contains invalid characters", "characters")

        if self.has_traversal(path):
            logger.warning(f"Rejected dist path with traversal: {path}")
            return self._reject(
                "path traversal detected: cannot use '..' to escape working directory",
                "traversal"
            )

        if posixpath.isabs(path):
            return self._reject("absolute paths are not allowed", "absolute")

        return ValidationResult(is_valid=True, field="dist_path")

    def has_traversal(self, path: str) -> bool:
        """Check the cleaned, glob-stripped path for '..' segments"""
        cleaned = posixpath.normpath(path)
        without_glob = cleaned.replace("*", "")
        return without_glob.startswith("..") or "/.." in without_glob

    def _reject(self, message: str, validation_type: str) -> ValidationResult:
        return ValidationResult(
            is_valid=False,
            error_message=message,
            field="dist_path",
            validation_type=validation_type
        )
