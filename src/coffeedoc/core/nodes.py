"""Syntax tree node variants consumed by the documenters.

The external CoffeeScript parser hands over its tree as plain data (usually
JSON). This module fixes the set of node kinds at that boundary: every node
is validated once into one of the frozen pydantic models below, tagged by its
``kind`` field. Unknown kinds are kept as :class:`OtherNode` so ingestion and
classification never fail on syntax the documenters do not care about.

The accessor functions at the bottom hold the structural assumptions the
documenters rely on and raise :class:`MalformedNodeError` close to the cause
when the tree does not have the expected shape.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    ValidationError,
    field_validator,
)


class MalformedNodeError(ValueError):
    """Raised when a node violates the parser contract.

    Attributes:
        kind: Kind tag of the offending node, if known
    """

    def __init__(self, message: str, kind: Optional[str] = None) -> None:
        super().__init__(message)
        self.kind = kind


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class Identifier(_Node):
    """A bare identifier, e.g. ``Foo`` or ``run``."""

    kind: Literal["identifier"] = "identifier"
    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate that identifier name is not empty."""
        if not v or not v.strip():
            raise ValueError("Identifier name cannot be empty")
        return v.strip()


class MemberAccess(_Node):
    """A base identifier followed by a property path, e.g. ``a.b.run``.

    Attributes:
        base: Leading identifier
        properties: Property names in access order
    """

    kind: Literal["member_access"] = "member_access"
    base: Identifier
    properties: list[str] = Field(default_factory=list)


Reference = Annotated[Union[Identifier, MemberAccess], Field(discriminator="kind")]


class Comment(_Node):
    """A block comment with its raw, unnormalized text."""

    kind: Literal["comment"] = "comment"
    text: str = ""


class Param(_Node):
    """A declared function parameter.

    Attributes:
        name: Parameter identifier
        variadic: Whether this is a rest parameter (``args...``)
    """

    kind: Literal["param"] = "param"
    name: str
    variadic: bool = False

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate that parameter name is not empty."""
        if not v or not v.strip():
            raise ValueError("Parameter name cannot be empty")
        return v.strip()


class Block(_Node):
    """An ordered sequence of expressions."""

    kind: Literal["block"] = "block"
    expressions: list[SourceNode] = Field(default_factory=list)


class ObjectLiteral(_Node):
    """An object literal; a class body keeps its members in one."""

    kind: Literal["object"] = "object"
    members: list[SourceNode] = Field(default_factory=list)


class FunctionValue(_Node):
    """A function expression (``(a, b...) ->``).

    Attributes:
        params: Declared parameters in source order
        body: Function body, absent for an empty function
    """

    kind: Literal["code"] = "code"
    params: list[Param] = Field(default_factory=list)
    body: Optional[Block] = None


class ClassNode(_Node):
    """A class construct.

    Attributes:
        name: Name the class is declared with, absent for anonymous classes
        parent: Superclass reference from ``extends``
        body: Class body block
    """

    kind: Literal["class"] = "class"
    name: Optional[Reference] = None
    parent: Optional[Reference] = None
    body: Optional[Block] = None


class Assignment(_Node):
    """An assignment or object member, ``target = value`` / ``target: value``."""

    kind: Literal["assign"] = "assign"
    target: Reference
    value: SourceNode


class OtherNode(_Node):
    """Any node kind the documenters do not inspect.

    Extra fields supplied by the parser are kept as-is.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    kind: str = "other"
    type: Optional[str] = None


_KNOWN_KINDS = frozenset(
    {
        "identifier",
        "member_access",
        "comment",
        "param",
        "block",
        "object",
        "code",
        "class",
        "assign",
    }
)


def _node_tag(value: Any) -> str:
    if isinstance(value, dict):
        kind = value.get("kind")
    else:
        kind = getattr(value, "kind", None)
    if isinstance(kind, str) and kind in _KNOWN_KINDS:
        return kind
    return "other"


SourceNode = Annotated[
    Union[
        Annotated[Identifier, Tag("identifier")],
        Annotated[MemberAccess, Tag("member_access")],
        Annotated[Comment, Tag("comment")],
        Annotated[Param, Tag("param")],
        Annotated[Block, Tag("block")],
        Annotated[ObjectLiteral, Tag("object")],
        Annotated[FunctionValue, Tag("code")],
        Annotated[ClassNode, Tag("class")],
        Annotated[Assignment, Tag("assign")],
        Annotated[OtherNode, Tag("other")],
    ],
    Discriminator(_node_tag),
]

for _model in (Block, ObjectLiteral, FunctionValue, ClassNode, Assignment):
    _model.model_rebuild()

_node_adapter: TypeAdapter[Any] = TypeAdapter(SourceNode)
_node_list_adapter: TypeAdapter[Any] = TypeAdapter(list[SourceNode])


def load_node(data: Any) -> Any:
    """Validate parser output for a single node.

    Args:
        data: Node as plain data (dict) or an already built node

    Returns:
        The validated node model

    Raises:
        MalformedNodeError: If the data does not match any node shape
    """
    try:
        return _node_adapter.validate_python(data)
    except ValidationError as e:
        kind = data.get("kind") if isinstance(data, dict) else None
        raise MalformedNodeError(f"Invalid {kind or 'unknown'} node: {e}", kind=kind) from e


def load_module_nodes(data: Any) -> list[Any]:
    """Validate a module's top-level node sequence.

    The parser may hand over either a list of nodes or the module's root
    ``block`` node.

    Args:
        data: List of nodes or a block node, as plain data

    Returns:
        Top-level nodes in source order

    Raises:
        MalformedNodeError: If the data is not a node list or block
    """
    if isinstance(data, list):
        try:
            return list(_node_list_adapter.validate_python(data))
        except ValidationError as e:
            raise MalformedNodeError(f"Invalid module node list: {e}") from e

    root = load_node(data)
    if not isinstance(root, Block):
        raise MalformedNodeError(
            f"Module root must be a block or a node list, got {root.kind!r}",
            kind=root.kind,
        )
    return list(root.expressions)


def base_identifier(ref: Any) -> str:
    """Return the leading identifier of a name reference.

    Raises:
        MalformedNodeError: If ``ref`` is not an identifier or member access
    """
    if isinstance(ref, Identifier):
        return ref.name
    if isinstance(ref, MemberAccess):
        return ref.base.name
    raise MalformedNodeError(
        f"Expected an identifier reference, got {_kind_of(ref)!r}",
        kind=_kind_of(ref),
    )


def qualified_name(ref: Any) -> str:
    """Return the dot-joined name of a reference, e.g. ``a.b.run``."""
    name = base_identifier(ref)
    if isinstance(ref, MemberAccess) and ref.properties:
        name += "." + ".".join(ref.properties)
    return name


def unwrap_class(node: Any) -> ClassNode:
    """Return the class construct of a class definition.

    Args:
        node: A class node, or an assignment whose value is one

    Raises:
        MalformedNodeError: If no class construct is found
    """
    if isinstance(node, ClassNode):
        return node
    if isinstance(node, Assignment) and isinstance(node.value, ClassNode):
        return node.value
    raise MalformedNodeError(
        f"Expected a class definition, got {_kind_of(node)!r}",
        kind=_kind_of(node),
    )


def function_value(node: Any) -> FunctionValue:
    """Return the function expression assigned by a function definition.

    Raises:
        MalformedNodeError: If ``node`` is not an assignment of a function
    """
    if not isinstance(node, Assignment):
        raise MalformedNodeError(
            f"Expected a function assignment, got {_kind_of(node)!r}",
            kind=_kind_of(node),
        )
    if not isinstance(node.value, FunctionValue):
        raise MalformedNodeError(
            f"Assignment to {qualified_name(node.target)!r} does not hold a "
            f"function (value is {_kind_of(node.value)!r})",
            kind=node.kind,
        )
    return node.value


def body_members(class_node: ClassNode) -> list[Any]:
    """Return the member list of a class body.

    Members live in the object literal that opens the class body. A missing
    body, an empty body or a body of any other shape has no members.
    """
    if class_node.body is None or not class_node.body.expressions:
        return []
    first = class_node.body.expressions[0]
    if not isinstance(first, ObjectLiteral):
        return []
    return list(first.members)


def first_body_expression(function_node: FunctionValue) -> Optional[Any]:
    """Return the first expression of a function body, if any."""
    if function_node.body is None or not function_node.body.expressions:
        return None
    return function_node.body.expressions[0]


def _kind_of(node: Any) -> str:
    if node is None:
        return "nothing"
    return getattr(node, "kind", type(node).__name__)
