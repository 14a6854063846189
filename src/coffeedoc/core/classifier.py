"""Classification of syntax nodes into documentable kinds."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable

from coffeedoc.core.nodes import Assignment, ClassNode, Comment, FunctionValue


class DefinitionKind(str, Enum):
    """What a node means to the documenters."""

    COMMENT = "comment"
    CLASS_DEF = "class_def"
    FUNCTION_DEF = "function_def"
    ASSIGNMENT = "assignment"
    OTHER = "other"


def classify(node: Any) -> DefinitionKind:
    """Determine the kind of a node without touching it.

    Rules apply in order: class constructs (bare or assigned) are class
    definitions, assignments of function expressions are function
    definitions, comments are comments, any remaining assignment is a plain
    assignment, and everything else is ``OTHER``.

    Args:
        node: Node to classify

    Returns:
        The node's DefinitionKind
    """
    if isinstance(node, ClassNode):
        return DefinitionKind.CLASS_DEF
    if isinstance(node, Assignment):
        if isinstance(node.value, ClassNode):
            return DefinitionKind.CLASS_DEF
        if isinstance(node.value, FunctionValue):
            return DefinitionKind.FUNCTION_DEF
        return DefinitionKind.ASSIGNMENT
    if isinstance(node, Comment):
        return DefinitionKind.COMMENT
    return DefinitionKind.OTHER


class NodeClassifier:
    """Memoizing classifier for one documentation pass.

    Results are kept in a side table keyed by node identity so the input
    tree stays untouched. Use a new instance per pass.
    """

    def __init__(self) -> None:
        self._kinds: dict[int, tuple[Any, DefinitionKind]] = {}

    def classify(self, node: Any) -> DefinitionKind:
        """Classify a node, reusing an earlier result for the same object."""
        entry = self._kinds.get(id(node))
        if entry is not None and entry[0] is node:
            return entry[1]

        kind = classify(node)
        # Holding the node keeps its id from being reused during the pass.
        self._kinds[id(node)] = (node, kind)
        return kind

    def filter(self, nodes: Iterable[Any], kind: DefinitionKind) -> list[Any]:
        """Return the nodes of the given kind in their original order."""
        return [node for node in nodes if self.classify(node) == kind]

    def classes_of(self, nodes: Iterable[Any]) -> list[Any]:
        """Return the class definitions among ``nodes``."""
        return self.filter(nodes, DefinitionKind.CLASS_DEF)

    def functions_of(self, nodes: Iterable[Any]) -> list[Any]:
        """Return the function definitions among ``nodes``."""
        return self.filter(nodes, DefinitionKind.FUNCTION_DEF)
