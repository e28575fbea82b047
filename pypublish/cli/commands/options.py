"""
Shared option declarations for commands that take upload configuration.
"""
from typing import Any, Dict, Optional

import typer


ConfigPathOption = typer.Option(None, "-c", "--config", help="Path to config YAML")
RepositoryOption = typer.Option(None, "--repository", help="Repository upload URL")
DistPathOption = typer.Option(None, "--dist-path", help="Distribution files glob, e.g. dist/*")
UsernameOption = typer.Option(None, "--username", help="PyPI username (overrides PYPI_USERNAME)")
PasswordOption = typer.Option(None, "--password", help="PyPI password or API token (overrides PYPI_PASSWORD)")
SkipExistingOption = typer.Option(None, "--skip-existing/--no-skip-existing", help="Skip files already on the index")


def collect_overrides(
    repository: Optional[str],
    dist_path: Optional[str],
    username: Optional[str],
    password: Optional[str],
    skip_existing: Optional[bool]
) -> Dict[str, Any]:
    """Map CLI options onto plugin config keys."""
    return {
        "repository": repository,
        "dist_path": dist_path,
        "username": username,
        "password": password,
        "skip_existing": skip_existing,
    }
