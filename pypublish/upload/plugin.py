"""
PyPI release plugin.

Entry points called by the release host: plugin metadata, hook execution
and pre-flight configuration validation.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pypublish import __version__

from .config_resolver import ConfigResolver, EnvLookup
from .executor import CommandExecutor
from .models import ExecuteResponse, RuntimeSettings, ValidationReport
from .upload_orchestrator import UploadOrchestrator
from .url_validator import Resolver


logger = logging.getLogger(__name__)


class Hook(Enum):
    """Release lifecycle events"""
    PRE_INIT = "pre-init"
    POST_INIT = "post-init"
    PRE_PLAN = "pre-plan"
    POST_PLAN = "post-plan"
    PRE_VERSION = "pre-version"
    POST_VERSION = "post-version"
    PRE_NOTES = "pre-notes"
    POST_NOTES = "post-notes"
    PRE_APPROVE = "pre-approve"
    POST_APPROVE = "post-approve"
    PRE_PUBLISH = "pre-publish"
    POST_PUBLISH = "post-publish"
    ON_SUCCESS = "on-success"
    ON_ERROR = "on-error"


@dataclass
class ReleaseContext:
    """Release information supplied by the host"""
    version: str = ""
    previous_version: Optional[str] = None
    tag_name: Optional[str] = None


@dataclass
class ExecuteRequest:
    """One hook invocation"""
    hook: Union[Hook, str]
    config: Dict[str, Any] = field(default_factory=dict)
    context: ReleaseContext = field(default_factory=ReleaseContext)
    dry_run: bool = False


@dataclass
class PluginInfo:
    """Plugin metadata advertised to the host"""
    name: str
    version: str
    description: str
    author: str
    hooks: List[Hook]
    config_schema: str


CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "username": {"type": "string", "description": "PyPI username (or use PYPI_USERNAME env)"},
        "password": {"type": "string", "description": "PyPI password or API token (or use PYPI_PASSWORD env)"},
        "repository": {"type": "string", "description": "Repository URL", "default": "https://upload.pypi.org/legacy/"},
        "dist_path": {"type": "string", "description": "Path to distribution files", "default": "dist/*"},
        "skip_existing": {"type": "boolean", "description": "Skip upload if version exists", "default": False},
    },
    "required": [],
}


class PublishPlugin:
    """Publishes packages to PyPI on the post-publish hook"""

    def __init__(
        self,
        executor: Optional[CommandExecutor] = None,
        resolver: Optional[Resolver] = None,
        env_lookup: Optional[EnvLookup] = None,
        settings: Optional[RuntimeSettings] = None
    ):
        self.config_resolver = ConfigResolver(env_lookup=env_lookup)
        self.settings = settings or self.config_resolver.resolve_settings()
        self.orchestrator = UploadOrchestrator(executor=executor, resolver=resolver, settings=self.settings)

    def get_info(self) -> PluginInfo:
        return PluginInfo(
            name="pypi",
            version=__version__,
            description="Publish packages to PyPI (Python Package Index)",
            author="pypublish maintainers",
            hooks=[Hook.POST_PUBLISH],
            config_schema=json.dumps(CONFIG_SCHEMA, indent=2),
        )

    def execute(self, request: ExecuteRequest) -> ExecuteResponse:
        """Run the plugin for a given hook"""
        try:
            hook = request.hook if isinstance(request.hook, Hook) else Hook(request.hook)
        except ValueError:
            logger.error(f"Unknown hook: {request.hook!r}")
            return ExecuteResponse(success=False, error=f"unknown hook: {request.hook}")

        config = self.config_resolver.resolve(request.config)

        if hook == Hook.POST_PUBLISH:
            return self.orchestrator.upload_package(config, request.context.version, request.dry_run)

        logger.debug(f"Ignoring hook {hook.value}")
        return ExecuteResponse(success=True, message=f"Hook {hook.value} not handled")

    def validate(self, raw_config: Optional[Dict[str, Any]]) -> ValidationReport:
        """Collect every configuration violation for user feedback"""
        report = ValidationReport()
        config = self.config_resolver.resolve(raw_config)

        if not config.username:
            report.add_error("username", "username is required (set via config or PYPI_USERNAME env var)")
        if not config.password:
            report.add_error("password", "password is required (set via config or PYPI_PASSWORD env var)")

        report.add_result("repository", self.orchestrator.url_validator.validate(config.repository))
        report.add_result("dist_path", self.orchestrator.path_validator.validate(config.dist_path))

        return report
