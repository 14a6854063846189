"""Build documentation models from a module's syntax tree.

:class:`ModuleDocumenter` walks the top-level nodes of a module, picks out
class and function definitions, and turns each into a :class:`ClassDoc` or
:class:`FunctionDoc`. Class methods are documented one level deep; function
bodies are never searched for nested definitions.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

import structlog

from coffeedoc.core.classifier import DefinitionKind, NodeClassifier
from coffeedoc.core.docstrings import extract_docstring
from coffeedoc.core.models import ClassDoc, FunctionDoc, ModuleDoc
from coffeedoc.core.nodes import (
    Assignment,
    MalformedNodeError,
    base_identifier,
    body_members,
    first_body_expression,
    function_value,
    qualified_name,
    unwrap_class,
)

logger = structlog.get_logger(__name__)

VARIADIC_MARKER = "..."


class ModuleDocumenter:
    """Documents modules, classes and functions.

    Every ``document_*`` call is independent; the classifier used for a
    module pass lives only for that call.

    Attributes:
        variadic_marker: Suffix appended to rest parameter names
    """

    def __init__(self, variadic_marker: str = VARIADIC_MARKER) -> None:
        """Initialize the documenter.

        Args:
            variadic_marker: Suffix appended to rest parameter names
        """
        self.variadic_marker = variadic_marker
        self._log = logger.bind(component="documenter")

    def document_module(self, nodes: Sequence[Any]) -> ModuleDoc:
        """Document a module from its top-level nodes.

        Args:
            nodes: Top-level nodes in source order

        Returns:
            ModuleDoc with the module docstring, classes and functions

        Raises:
            MalformedNodeError: If a definition does not have the shape the
                parser promises
        """
        nodes = list(nodes)
        classifier = NodeClassifier()

        docstring = extract_docstring(nodes[0]) if nodes else None
        classes = [
            self.document_class(node, classifier)
            for node in classifier.classes_of(nodes)
        ]
        functions = [
            self.document_function(node, classifier)
            for node in classifier.functions_of(nodes)
        ]

        self._log.debug(
            "module_documented",
            nodes=len(nodes),
            classes=len(classes),
            functions=len(functions),
            has_docstring=docstring is not None,
        )

        return ModuleDoc(docstring=docstring, classes=classes, functions=functions)

    def document_class(
        self, node: Any, classifier: Optional[NodeClassifier] = None
    ) -> ClassDoc:
        """Document a class definition.

        Args:
            node: Class node, or an assignment whose value is a class
            classifier: Classifier of the current pass, if any

        Returns:
            ClassDoc for the class

        Raises:
            MalformedNodeError: If ``node`` is not a class definition or the
                class has no name to document it under
        """
        if classifier is None:
            classifier = NodeClassifier()
        self._require(node, DefinitionKind.CLASS_DEF, classifier)

        cls = unwrap_class(node)

        if isinstance(node, Assignment):
            name = base_identifier(node.target)
        elif cls.name is not None:
            name = base_identifier(cls.name)
        else:
            raise MalformedNodeError(
                "Anonymous class cannot be documented without an assignment",
                kind=cls.kind,
            )

        parent = base_identifier(cls.parent) if cls.parent is not None else None

        members = body_members(cls)
        docstring = extract_docstring(members[0]) if members else None
        methods = [
            self.document_function(member, classifier)
            for member in classifier.functions_of(members)
        ]

        self._log.debug(
            "class_documented", name=name, parent=parent, methods=len(methods)
        )

        return ClassDoc(name=name, docstring=docstring, parent=parent, methods=methods)

    def document_function(
        self, node: Any, classifier: Optional[NodeClassifier] = None
    ) -> FunctionDoc:
        """Document a function definition.

        Args:
            node: Assignment whose value is a function expression
            classifier: Classifier of the current pass, if any

        Returns:
            FunctionDoc for the function

        Raises:
            MalformedNodeError: If ``node`` is not a function definition
        """
        if classifier is None:
            classifier = NodeClassifier()
        self._require(node, DefinitionKind.FUNCTION_DEF, classifier)

        func = function_value(node)
        name = qualified_name(node.target)
        docstring = extract_docstring(first_body_expression(func))
        params = [
            param.name + self.variadic_marker if param.variadic else param.name
            for param in func.params
        ]

        self._log.debug("function_documented", name=name, params=len(params))

        return FunctionDoc(name=name, docstring=docstring, params=params)

    def _require(
        self, node: Any, expected: DefinitionKind, classifier: NodeClassifier
    ) -> None:
        actual = classifier.classify(node)
        if actual != expected:
            kind = getattr(node, "kind", None)
            raise MalformedNodeError(
                f"Expected a {expected.value} node, got {actual.value} "
                f"({kind or type(node).__name__})",
                kind=kind,
            )


def document_module(nodes: Sequence[Any]) -> ModuleDoc:
    """Convenience function to document a module's top-level nodes.

    Args:
        nodes: Top-level nodes in source order

    Returns:
        ModuleDoc for the module
    """
    return ModuleDocumenter().document_module(nodes)


def document_class(node: Any) -> ClassDoc:
    """Convenience function to document a single class definition."""
    return ModuleDocumenter().document_class(node)


def document_function(node: Any) -> FunctionDoc:
    """Convenience function to document a single function definition."""
    return ModuleDocumenter().document_function(node)
