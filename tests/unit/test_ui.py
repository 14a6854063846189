"""Tests for the rich terminal UI.

Messages and documentation text may contain square brackets (CoffeeScript
array literals in docstrings, for example); these must be printed verbatim
rather than interpreted as Rich markup.
"""

from io import StringIO

import pytest
from rich.console import Console

from coffeedoc.cli.ui import CoffeedocUI, configure_ui, get_ui
from coffeedoc.core.models import ClassDoc, FunctionDoc, ModuleDoc


@pytest.fixture
def buffer() -> StringIO:
    """String buffer capturing console output."""
    return StringIO()


def _ui(buffer: StringIO, **kwargs) -> CoffeedocUI:
    console = Console(file=buffer, force_terminal=False, width=200)
    return CoffeedocUI(console=console, **kwargs)


class TestMessages:
    """Test status messages."""

    def test_error_with_square_brackets(self, buffer: StringIO) -> None:
        """Test that error messages with square brackets are not truncated."""
        _ui(buffer).print_error("Expected [bold] block in list [1, 2]")

        output = buffer.getvalue()
        assert "[bold]" in output
        assert "[1, 2]" in output

    def test_quiet_suppresses_all_but_errors(self, buffer: StringIO) -> None:
        """Test quiet mode."""
        ui = _ui(buffer, quiet=True)

        ui.print_info("info")
        ui.print_success("success")
        ui.print_warning("warning")
        ui.print_error("error")

        assert buffer.getvalue().strip().endswith("error")
        assert "info" not in buffer.getvalue()
        assert "warning" not in buffer.getvalue()

    def test_debug_only_when_verbose(self, buffer: StringIO) -> None:
        """Test that debug messages need verbose mode."""
        _ui(buffer).print_debug("hidden")
        _ui(buffer, verbose=True).print_debug("shown")

        assert "hidden" not in buffer.getvalue()
        assert "shown" in buffer.getvalue()


class TestModuleTree:
    """Test the tree view of documented modules."""

    @pytest.fixture
    def doc(self) -> ModuleDoc:
        """A documented module with bracketed docstrings."""
        return ModuleDoc(
            docstring="Uses [a, b] pairs",
            classes=[
                ClassDoc(
                    name="Foo",
                    parent="Base",
                    docstring="A [red]foo[/red]",
                    methods=[FunctionDoc(name="bar", params=["x", "y..."])],
                )
            ],
            functions=[FunctionDoc(name="a.b.run", params=["n"], docstring="Runs")],
        )

    def test_tree(self, buffer: StringIO, doc: ModuleDoc) -> None:
        """Test the tree structure."""
        _ui(buffer).display_module_tree(doc, title="mod.json")

        output = buffer.getvalue()
        assert "mod.json" in output
        assert "Foo extends Base" in output
        assert "bar(x, y...)" in output
        assert "a.b.run(n)" in output
        assert "Runs" not in output

    def test_tree_with_docstrings(self, buffer: StringIO, doc: ModuleDoc) -> None:
        """Test that docstrings are shown verbatim."""
        _ui(buffer).display_module_tree(doc, title="mod.json", show_docstrings=True)

        output = buffer.getvalue()
        assert "Uses [a, b] pairs" in output
        assert "A [red]foo[/red]" in output
        assert "Runs" in output

    def test_empty_module(self, buffer: StringIO) -> None:
        """Test the tree of an empty module."""
        _ui(buffer).display_module_tree(ModuleDoc(), title="empty.json")
        assert "nothing to document" in buffer.getvalue()

    def test_quiet(self, buffer: StringIO, doc: ModuleDoc) -> None:
        """Test that quiet mode prints no tree."""
        _ui(buffer, quiet=True).display_module_tree(doc, title="mod.json")
        assert buffer.getvalue() == ""


class TestTables:
    """Test tabular output."""

    def test_statistics(self, buffer: StringIO) -> None:
        """Test the statistics table."""
        _ui(buffer).display_statistics(
            total_files=3,
            documented_count=2,
            class_count=4,
            function_count=5,
            error_count=1,
            duration_seconds=0.5,
        )

        output = buffer.getvalue()
        assert "Documentation Statistics" in output
        assert "Files Processed" in output
        assert "0.50s" in output

    def test_file_list(self, buffer: StringIO, tmp_path) -> None:
        """Test the file list with sizes."""
        path = tmp_path / "m.json"
        path.write_text("[]")

        _ui(buffer).display_file_list([path])

        assert "m.json" in buffer.getvalue()
        assert "2.0 B" in buffer.getvalue()


class TestGlobalUI:
    """Test the module-level UI instance."""

    def test_configure_replaces_instance(self) -> None:
        """Test that configure_ui installs a new global UI."""
        first = configure_ui(quiet=True)
        assert get_ui() is first

        second = configure_ui(verbose=True)
        assert get_ui() is second
        assert second.verbose and not second.quiet
