"""
Upload service for pypublish.

Bridges the CLI to the PyPI plugin: loads configuration, runs the
post-publish hook and maps the outcome to an exit code.
"""
import logging
from typing import Any, Dict, Optional

import yaml
from rich.console import Console

from pypublish.core.config_manager import ConfigManager
from pypublish.rich_utils.ui_helpers import (
    get_console,
    render_response,
    render_validation_report,
)
from pypublish.upload import (
    CommandExecutor,
    ConfigResolver,
    ExecuteRequest,
    Hook,
    PublishPlugin,
    ReleaseContext,
)
from pypublish.upload.config_resolver import EnvLookup
from pypublish.upload.url_validator import Resolver


logger = logging.getLogger(__name__)


class UploadService:
    """Service for publishing distributions from the command line."""

    def __init__(
        self,
        executor: Optional[CommandExecutor] = None,
        resolver: Optional[Resolver] = None,
        env_lookup: Optional[EnvLookup] = None,
        console: Optional[Console] = None
    ):
        self.config_manager = ConfigManager()
        self.executor = executor
        self.resolver = resolver
        self.env_lookup = env_lookup
        self.console = console or get_console()

    def build_plugin(self, config: dict) -> PublishPlugin:
        """Create the plugin with timeouts from the settings section."""
        settings = ConfigResolver(env_lookup=self.env_lookup).resolve_settings(config.get("settings"))
        logger.debug(f"Runtime settings: {settings}")
        return PublishPlugin(
            executor=self.executor,
            resolver=self.resolver,
            env_lookup=self.env_lookup,
            settings=settings
        )

    def load_configuration(self, config_path: Optional[str], overrides: Dict[str, Any]) -> dict:
        config = self.config_manager.discover_and_load_config(config_path)
        return self.config_manager.merge_config_and_args(config, overrides)

    def execute_upload(
        self,
        version: str = "",
        dry_run: bool = False,
        config_path: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None
    ) -> int:
        """Run the post-publish hook and return exit code."""
        try:
            config = self.load_configuration(config_path, overrides or {})
        except (OSError, ValueError, yaml.YAMLError) as e:
            self.console.print(f"❌ Could not load configuration: {e}", style="bold red")
            return 1

        plugin = self.build_plugin(config)
        request = ExecuteRequest(
            hook=Hook.POST_PUBLISH,
            config=config.get("pypi") or {},
            context=ReleaseContext(version=version),
            dry_run=dry_run
        )

        if dry_run:
            self.console.print("🔍 Dry run, nothing will be uploaded", style="cyan")
        else:
            self.console.print("🚀 Uploading distributions with twine...", style="bold blue")

        response = plugin.execute(request)
        render_response(self.console, response)

        if response.success and response.outputs.get("output"):
            self.console.print(response.outputs["output"], style="dim", markup=False, highlight=False)

        return 0 if response.success else 1

    def validate_configuration(
        self,
        config_path: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None
    ) -> int:
        """Report every configuration problem and return exit code."""
        try:
            config = self.load_configuration(config_path, overrides or {})
        except (OSError, ValueError, yaml.YAMLError) as e:
            self.console.print(f"❌ Could not load configuration: {e}", style="bold red")
            return 1

        plugin = self.build_plugin(config)
        report = plugin.validate(config.get("pypi") or {})
        render_validation_report(self.console, report)

        return 0 if report.is_valid else 1

    def show_info(self) -> int:
        """Print plugin metadata."""
        info = PublishPlugin(executor=self.executor, env_lookup=self.env_lookup).get_info()
        self.console.print(f"[bold]{info.name}[/bold] {info.version}")
        self.console.print(info.description)
        self.console.print(f"Hooks: {', '.join(hook.value for hook in info.hooks)}", style="dim")
        self.console.print(info.config_schema, markup=False, highlight=False)
        return 0
