"""
Upload Configuration Resolver

Merges the raw plugin configuration with credential fallbacks from the
environment and baked-in defaults. Performs no validation.
"""

import math
import os
from typing import Any, Callable, Dict, Mapping, Optional

from .models import (
    DEFAULT_DIST_PATH,
    DEFAULT_REPOSITORY,
    RuntimeSettings,
    UploadConfig,
)


EnvLookup = Callable[[str], Optional[str]]


class ConfigResolver:
    """Resolves raw plugin configuration into an UploadConfig"""

    CREDENTIAL_VARS = {
        "username": "PYPI_USERNAME",
        "password": "PYPI_PASSWORD",
    }

    OPTIONAL_VARS = {
        "PYPUBLISH_UPLOAD_TIMEOUT": ("upload_timeout", float),
        "PYPUBLISH_RESOLVE_TIMEOUT": ("resolve_timeout", float),
    }

    def __init__(self, env_lookup: Optional[EnvLookup] = None):
        self.env_lookup = env_lookup or os.environ.get

    def resolve(self, raw: Optional[Mapping[str, Any]]) -> UploadConfig:
        """Explicit config wins, then environment, then defaults"""
        raw = raw or {}

        return UploadConfig(
            username=self._resolve_credential(raw, "username"),
            password=self._resolve_credential(raw, "password"),
            repository=self._string_or_default(raw.get("repository"), DEFAULT_REPOSITORY),
            dist_path=self._string_or_default(raw.get("dist_path"), DEFAULT_DIST_PATH),
            skip_existing=raw.get("skip_existing") is True,
        )

    def resolve_settings(self, settings: Optional[Mapping[str, Any]] = None) -> RuntimeSettings:
        """Resolve timeouts from the settings section and environment overrides"""
        settings = settings or {}
        defaults = RuntimeSettings()
        kwargs = {}

        for var_name, (param, var_type) in self.OPTIONAL_VARS.items():
            default_value = getattr(defaults, param)
            value = self.env_lookup(var_name) or settings.get(param)
            if value in (None, ""):
                kwargs[param] = default_value
                continue
            try:
                converted = var_type(value)
            except (TypeError, ValueError):
                # Use default if conversion fails
                converted = default_value
            if not math.isfinite(converted) or converted <= 0:
                converted = default_value
            kwargs[param] = converted

        return RuntimeSettings(**kwargs)

    def get_environment_summary(self) -> Dict[str, Any]:
        """Summary of credential variables for debugging, values masked"""
        summary = {}
        for field_name, var in self.CREDENTIAL_VARS.items():
            value = self.env_lookup(var)
            if not value:
                summary[var] = None
            elif field_name == "password":
                summary[var] = "****"
            else:
                summary[var] = value
        return summary

    def _resolve_credential(self, raw: Mapping[str, Any], field_name: str) -> str:
        value = raw.get(field_name)
        if isinstance(value, str) and value:
            return value

        env_value = self.env_lookup(self.CREDENTIAL_VARS[field_name])
        if env_value:
            return env_value

        return ""

    @staticmethod
    def _string_or_default(value: Any, default: str) -> str:
        if isinstance(value, str) and value:
            return value
        return default
