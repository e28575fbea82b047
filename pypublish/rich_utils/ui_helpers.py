import os
import sys

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pypublish.upload.models import ExecuteResponse, ValidationReport


def is_ci_environment():
    return (
        os.getenv('CI') is not None or
        os.getenv('GITHUB_ACTIONS') is not None or
        not sys.stdout.isatty()
    )


def get_console() -> Console:
    """Plain console in CI and pipes, full Rich output on a terminal."""
    if is_ci_environment():
        return Console(force_terminal=False, no_color=True)
    return Console()


def render_validation_report(console: Console, report: ValidationReport) -> None:
    """Print per-field violations as a table."""
    if report.is_valid:
        console.print("✅ Configuration is valid", style="bold green")
        return

    table = Table(title="Configuration errors", show_lines=False)
    table.add_column("Field", style="bold")
    table.add_column("Problem", style="red")

    for field_name, messages in report.errors.items():
        for message in messages:
            table.add_row(field_name, message)

    console.print(table)


def render_response(console: Console, response: ExecuteResponse) -> None:
    """Print the outcome of an upload invocation."""
    if not response.success:
        console.print(f"❌ {response.error}", style="bold red", markup=False, soft_wrap=True)
        return

    message_text = Text()
    message_text.append("📦 ", style="bold green")
    message_text.append(f"{response.message}\n", style="bold green")

    for key in ("repository", "dist_path", "skip_existing", "version"):
        if key in response.outputs:
            message_text.append(f"\n{key}: ", style="blue")
            message_text.append(str(response.outputs[key]), style="bold")

    console.print(Panel(message_text, title="🐍 PyPI", border_style="green", padding=(1, 2)))
