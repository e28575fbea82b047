"""
Main CLI application for pypublish.

Defines the Typer application structure and command routing; commands are
thin wrappers over UploadService.
"""
import logging

import typer

from pypublish.cli.commands.info import info_command
from pypublish.cli.commands.upload import upload_command
from pypublish.cli.commands.validate import validate_command


app = typer.Typer(help="pypublish - publish Python distributions to PyPI on release")

app.command("upload", help="Upload distributions with twine (post-publish hook).")(upload_command)
app.command("validate", help="Check upload configuration and report every problem.")(validate_command)
app.command("info", help="Show plugin metadata and configuration schema.")(info_command)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging")
):
    """pypublish - publish Python distributions to PyPI.

    Run 'pypublish validate' to check configuration before a release.
    Run 'pypublish upload --dry-run' to see what would be uploaded.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )
