"""File operations utilities for coffeedoc.

This module finds syntax tree files produced by the parser, loads them into
node models, and writes the resulting documentation models.
"""

from __future__ import annotations

import json
from pathlib import Path

import pathspec
import structlog

from coffeedoc.core.documenter import ModuleDocumenter
from coffeedoc.core.models import ModuleDoc
from coffeedoc.core.nodes import SourceNode, load_module_nodes

logger = structlog.get_logger(__name__)


class FileOperations:
    """Utilities for file operations.

    Attributes:
        encoding: Encoding of syntax tree and output files
        dry_run: If True, don't actually write files
    """

    def __init__(
        self,
        encoding: str = "utf-8",
        dry_run: bool = False,
    ) -> None:
        """Initialize file operations.

        Args:
            encoding: Encoding used for reading and writing files
            dry_run: If True, simulate writes without touching the disk
        """
        self.encoding = encoding
        self.dry_run = dry_run
        self._log = logger.bind(component="file_ops")

    def find_ast_files(
        self,
        root_path: Path,
        pattern: str = "**/*.json",
        exclude_patterns: list[str] | None = None,
    ) -> list[Path]:
        """Find syntax tree files matching pattern, excluding specified patterns.

        Args:
            root_path: Root directory to search
            pattern: Glob pattern for files to include
            exclude_patterns: Patterns to exclude (gitignore-style)

        Returns:
            Sorted list of matching file paths

        Raises:
            FileNotFoundError: If root_path doesn't exist
        """
        root_path = Path(root_path).resolve()

        if not root_path.exists():
            raise FileNotFoundError(f"Path not found: {root_path}")

        all_files = [f for f in root_path.glob(pattern) if f.is_file()]

        if exclude_patterns:
            spec = pathspec.GitIgnoreSpec.from_lines(exclude_patterns)
            filtered_files = [
                f
                for f in all_files
                if not spec.match_file(str(f.relative_to(root_path)))
            ]
        else:
            filtered_files = all_files

        self._log.info(
            "files_found",
            total=len(all_files),
            filtered=len(filtered_files),
            excluded=len(all_files) - len(filtered_files),
        )

        return sorted(filtered_files)

    def load_ast(self, file_path: Path) -> list[SourceNode]:
        """Load a module's top-level nodes from a syntax tree file.

        Args:
            file_path: JSON file written by the parser

        Returns:
            Top-level nodes in source order

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file is not valid JSON
            MalformedNodeError: If the JSON does not describe a module tree
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        try:
            data = json.loads(file_path.read_text(encoding=self.encoding))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid syntax tree file {file_path}: {e}") from e

        nodes = load_module_nodes(data)
        self._log.debug("ast_loaded", path=str(file_path), nodes=len(nodes))
        return nodes

    def document_file(
        self,
        file_path: Path,
        documenter: ModuleDocumenter | None = None,
    ) -> ModuleDoc:
        """Load a syntax tree file and document it.

        Args:
            file_path: JSON file written by the parser
            documenter: Documenter to use (a default one if not provided)

        Returns:
            ModuleDoc for the file's module
        """
        documenter = documenter or ModuleDocumenter()
        doc = documenter.document_module(self.load_ast(file_path))
        self._log.info(
            "file_documented",
            path=str(file_path),
            classes=len(doc.classes),
            functions=len(doc.functions),
        )
        return doc

    def output_path_for(
        self,
        source_path: Path,
        output_dir: Path,
        suffix: str = ".doc.json",
        root: Path | None = None,
    ) -> Path:
        """Get the output path for a syntax tree file.

        Files found under a scanned directory keep their position relative to
        that directory, so same-named modules in different packages do not
        share an output file.

        Args:
            source_path: Input syntax tree file
            output_dir: Directory for documentation files
            suffix: Replacement for the source file's suffix
            root: Directory source_path was found in (its parent if not given)

        Returns:
            Path inside output_dir, e.g. ``docs/geometry/module.doc.json``

        Raises:
            ValueError: If source_path is not inside root
        """
        source_path = Path(source_path)
        relative = source_path.relative_to(root) if root is not None else Path(source_path.name)
        return Path(output_dir) / relative.parent / f"{relative.stem}{suffix}"

    def write_doc(
        self,
        doc: ModuleDoc,
        output_path: Path,
        indent: int | None = 2,
        overwrite: bool = False,
    ) -> Path:
        """Write a documentation model as JSON.

        Args:
            doc: Documentation model to write
            output_path: Destination file
            indent: JSON indentation (None or 0 for compact output)
            overwrite: Replace an existing file

        Returns:
            The output path

        Raises:
            FileExistsError: If output_path exists and overwrite is False
        """
        output_path = Path(output_path)

        if output_path.exists() and not overwrite:
            raise FileExistsError(f"Output file already exists: {output_path}")

        if self.dry_run:
            self._log.info("dry_run_write", file=str(output_path))
            return output_path

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            doc.model_dump_json(indent=indent or None) + "\n",
            encoding=self.encoding,
        )
        self._log.info("doc_written", file=str(output_path))

        return output_path


def find_ast_files(
    root_path: Path | str,
    pattern: str = "**/*.json",
    exclude_patterns: list[str] | None = None,
) -> list[Path]:
    """Convenience function to find syntax tree files.

    Args:
        root_path: Root directory to search
        pattern: Glob pattern for files
        exclude_patterns: Patterns to exclude

    Returns:
        List of syntax tree file paths
    """
    ops = FileOperations()
    return ops.find_ast_files(Path(root_path), pattern, exclude_patterns)


def document_file(file_path: Path | str) -> ModuleDoc:
    """Convenience function to document a syntax tree file.

    Args:
        file_path: JSON file written by the parser

    Returns:
        ModuleDoc for the file's module
    """
    ops = FileOperations()
    return ops.document_file(Path(file_path))
