# steam_deploy/cli/utils/output.py
"""Output formatting utilities"""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ...models import PublishResult

console = Console(stderr=True)


def format_publish_result(result: PublishResult) -> None:
    """Format and display publish operation result"""
    if result.success:
        lines = [
            "[green]✓[/green] Publishing completed successfully!",
            "",
            f"[bold]Mode:[/bold] {result.mode.value if result.mode else 'N/A'}",
        ]

        if result.manifest_path:
            lines.append(f"[bold]Manifest:[/bold] {escape(str(result.manifest_path))}")

        lines.append(f"[bold]Duration:[/bold] {result.duration:.1f}s")

        panel = Panel(
            "\n".join(lines),
            title="Publish Result",
            border_style="green"
        )
        console.print(panel)

    else:
        lines = [f"[red]✗ Publish failed:[/red] {escape(str(result.error))}"]

        if result.exit_code is not None:
            lines.append(f"[bold]Exit code:[/bold] {result.exit_code}")

        if result.logs is not None:
            lines.append(f"[bold]Log files printed:[/bold] {len(result.logs.files)}")
            if result.logs.errors:
                lines.append(f"[yellow]Unreadable log files: {len(result.logs.errors)}[/yellow]")

        panel = Panel(
            "\n".join(lines),
            title="Publish Error",
            border_style="red"
        )
        console.print(panel)


def print_manifest_written(path: Path, content: Optional[str] = None) -> None:
    """Show the location and optionally the text of a generated manifest"""
    console.print(f"[green]✓[/green] Manifest written: {escape(str(path))}")
    if content:
        console.print(content, markup=False, highlight=False)


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red]Error:[/red] {escape(message)}: {escape(str(error))}")
    else:
        console.print(f"[red]Error:[/red] {escape(message)}")
