"""Core functionality for classifying syntax nodes and documenting modules."""

from coffeedoc.core.classifier import DefinitionKind, NodeClassifier, classify
from coffeedoc.core.docstrings import extract_docstring, normalize_docstring
from coffeedoc.core.documenter import (
    ModuleDocumenter,
    document_class,
    document_function,
    document_module,
)
from coffeedoc.core.models import ClassDoc, FunctionDoc, ModuleDoc
from coffeedoc.core.nodes import (
    Assignment,
    Block,
    ClassNode,
    Comment,
    FunctionValue,
    Identifier,
    MalformedNodeError,
    MemberAccess,
    ObjectLiteral,
    OtherNode,
    Param,
    SourceNode,
    load_module_nodes,
    load_node,
)

__all__ = [
    "DefinitionKind",
    "NodeClassifier",
    "classify",
    "extract_docstring",
    "normalize_docstring",
    "ModuleDocumenter",
    "document_module",
    "document_class",
    "document_function",
    "ModuleDoc",
    "ClassDoc",
    "FunctionDoc",
    "SourceNode",
    "Assignment",
    "Block",
    "ClassNode",
    "Comment",
    "FunctionValue",
    "Identifier",
    "MemberAccess",
    "ObjectLiteral",
    "OtherNode",
    "Param",
    "MalformedNodeError",
    "load_node",
    "load_module_nodes",
]
