"""Rich UI components for the CLI.

This module provides terminal output for the CLI using the Rich library:
status messages, tables and a tree view of documented modules.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from coffeedoc.core.models import ClassDoc, FunctionDoc, ModuleDoc


class CoffeedocUI:
    """Rich terminal UI for coffeedoc.

    Status output goes to stderr by default so that documentation printed
    to stdout stays machine-readable.

    Attributes:
        console: Rich console instance
        verbose: Enable verbose output
        quiet: Suppress non-error output
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        verbose: bool = False,
        quiet: bool = False,
    ) -> None:
        """Initialize the UI.

        Args:
            console: Rich console (creates a non-wrapping stderr console if
                not provided)
            verbose: Enable verbose output
            quiet: Suppress non-error output
        """
        self.console = console or Console(stderr=True, soft_wrap=True)
        self.verbose = verbose
        self.quiet = quiet

    def print_info(self, message: str, **kwargs: Any) -> None:
        """Print an info message."""
        if not self.quiet:
            self.console.print(f"[blue]i[/blue] {escape(message)}", **kwargs)

    def print_success(self, message: str, **kwargs: Any) -> None:
        """Print a success message."""
        if not self.quiet:
            self.console.print(f"[green]✓[/green] {escape(message)}", **kwargs)

    def print_warning(self, message: str, **kwargs: Any) -> None:
        """Print a warning message."""
        if not self.quiet:
            self.console.print(f"[yellow]![/yellow] {escape(message)}", **kwargs)

    def print_error(self, message: str, **kwargs: Any) -> None:
        """Print an error message.

        Errors are shown even in quiet mode.
        """
        self.console.print(f"[red]✗[/red] {escape(message)}", **kwargs)

    def print_debug(self, message: str, **kwargs: Any) -> None:
        """Print a debug message (verbose mode only)."""
        if self.verbose:
            self.console.print(f"[dim]{escape(message)}[/dim]", **kwargs)

    def display_module_tree(
        self,
        doc: ModuleDoc,
        title: str,
        show_docstrings: bool = False,
    ) -> None:
        """Display a documented module as a tree.

        Args:
            doc: Documentation model to display
            title: Root label, usually the source file name
            show_docstrings: Include docstrings under each entry
        """
        if self.quiet:
            return

        tree = Tree(f"[bold cyan]{escape(title)}[/bold cyan]", guide_style="dim")

        if show_docstrings and doc.docstring:
            tree.add(f"[italic]{escape(doc.docstring)}[/italic]")

        if doc.classes:
            classes_node = tree.add("[bold]Classes[/bold]")
            for cls in doc.classes:
                class_node = classes_node.add(self._class_label(cls))
                if show_docstrings and cls.docstring:
                    class_node.add(f"[italic]{escape(cls.docstring)}[/italic]")
                for method in cls.methods:
                    self._add_function(class_node, method, show_docstrings)

        if doc.functions:
            functions_node = tree.add("[bold]Functions[/bold]")
            for func in doc.functions:
                self._add_function(functions_node, func, show_docstrings)

        if doc.is_empty:
            tree.add("[dim]nothing to document[/dim]")

        self.console.print(tree)

    def display_statistics(
        self,
        total_files: int,
        documented_count: int,
        class_count: int,
        function_count: int,
        error_count: int,
        duration_seconds: float,
    ) -> None:
        """Display overall statistics.

        Args:
            total_files: Number of files processed
            documented_count: Number of modules documented
            class_count: Classes found across all modules
            function_count: Top-level functions found across all modules
            error_count: Number of modules that failed
            duration_seconds: Total duration in seconds
        """
        if self.quiet:
            return

        table = Table(title="[bold cyan]Documentation Statistics[/bold cyan]", box=box.ROUNDED)
        table.add_column("Metric", style="cyan", no_wrap=True)
        table.add_column("Value", style="magenta", justify="right")

        table.add_row("Files Processed", str(total_files))
        table.add_row("Documented", f"[green]{documented_count}[/green]")
        table.add_row("Classes", str(class_count))
        table.add_row("Functions", str(function_count))
        table.add_row("Errors", f"[red]{error_count}[/red]" if error_count > 0 else "0")
        table.add_row("Duration", f"{duration_seconds:.2f}s")

        self.console.print(table)

    def display_config(self, config: dict[str, Any]) -> None:
        """Display configuration as a table."""
        if self.quiet:
            return

        table = Table(title="[bold cyan]Configuration[/bold cyan]", box=box.ROUNDED)
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="magenta")

        for key, value in sorted(config.items()):
            table.add_row(key, escape(str(value)))

        self.console.print(table)

    def display_file_list(
        self,
        files: list[Path],
        title: str = "Files to Process",
    ) -> None:
        """Display a list of files.

        Args:
            files: List of file paths
            title: Table title
        """
        if self.quiet:
            return

        table = Table(title=f"[bold cyan]{title}[/bold cyan]", box=box.ROUNDED)
        table.add_column("#", style="dim", width=4, justify="right")
        table.add_column("File Path", style="cyan")
        table.add_column("Size", style="magenta", justify="right")

        for idx, file in enumerate(files, 1):
            table.add_row(str(idx), escape(str(file)), self._format_size(file.stat().st_size))

        self.console.print(table)

    def _class_label(self, cls: ClassDoc) -> str:
        label = f"[bold]{escape(cls.name)}[/bold]"
        if cls.parent:
            label += f" [dim]extends[/dim] {escape(cls.parent)}"
        return label

    def _add_function(
        self, parent: Tree, func: FunctionDoc, show_docstrings: bool
    ) -> None:
        node = parent.add(escape(func.signature))
        if show_docstrings and func.docstring:
            node.add(f"[italic]{escape(func.docstring)}[/italic]")

    def _format_size(self, size_bytes: float) -> str:
        """Format file size in human-readable format."""
        for unit in ["B", "KB", "MB", "GB"]:
            if size_bytes < 1024:
                return f"{size_bytes:.1f} {unit}"
            size_bytes /= 1024
        return f"{size_bytes:.1f} TB"


# Global UI instance
_ui: Optional[CoffeedocUI] = None


def configure_ui(
    console: Optional[Console] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> CoffeedocUI:
    """Create the global UI instance, replacing any previous one.

    Args:
        console: Rich console
        verbose: Enable verbose output
        quiet: Suppress non-error output

    Returns:
        The new CoffeedocUI instance
    """
    global _ui
    _ui = CoffeedocUI(console=console, verbose=verbose, quiet=quiet)
    return _ui


def get_ui() -> CoffeedocUI:
    """Get the global UI instance, creating a default one if needed."""
    if _ui is None:
        return configure_ui()
    return _ui
