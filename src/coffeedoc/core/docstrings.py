"""Docstring extraction from leading block comments."""

from __future__ import annotations

from typing import Any, Optional

from coffeedoc.core.nodes import Comment


def normalize_docstring(text: str) -> Optional[str]:
    """Remove common indentation from comment text.

    Leading blank lines are dropped, then as many leading spaces as the first
    remaining line has are stripped from every line. Lines indented less
    than that lose only the spaces they have, so relative indentation is
    preserved. Applying this to its own output returns it unchanged.

    Args:
        text: Raw comment text

    Returns:
        Normalized text, or None if the comment holds only blank lines
    """
    lines = text.split("\n")

    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1
    lines = lines[start:]

    if not lines:
        return None

    first = lines[0]
    depth = len(first) - len(first.lstrip(" "))

    normalized = []
    for line in lines:
        present = len(line) - len(line.lstrip(" "))
        normalized.append(line[min(depth, present):])

    return "\n".join(normalized)


def extract_docstring(node: Any) -> Optional[str]:
    """Return the normalized docstring carried by a candidate node.

    Args:
        node: Leading node of a module, class body or function body

    Returns:
        Normalized comment text, or None if the node is absent or not a
        comment
    """
    if not isinstance(node, Comment):
        return None
    return normalize_docstring(node.text)
