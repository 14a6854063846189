"""Utility functions and helpers for coffeedoc."""

from coffeedoc.utils.config import (
    CoffeedocConfig,
    create_default_config,
    find_config_file,
    load_config,
    load_config_file,
)
from coffeedoc.utils.file_ops import (
    FileOperations,
    document_file,
    find_ast_files,
)

__all__ = [
    "CoffeedocConfig",
    "load_config",
    "load_config_file",
    "find_config_file",
    "create_default_config",
    "FileOperations",
    "find_ast_files",
    "document_file",
]
