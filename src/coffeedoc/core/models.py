"""Pydantic models for the documentation extracted from a module.

These are the models handed to renderers. They are frozen, hold no
behaviour beyond read-only helpers, and serialize cleanly with
``model_dump()`` / ``model_dump_json()``.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FunctionDoc(BaseModel):
    """Documentation for a function or method.

    Attributes:
        name: Function name, dot-qualified for member-style definitions
        docstring: Normalized leading comment, if any
        params: Parameter names in declaration order; rest parameters
            carry a trailing ``...``
    """

    model_config = ConfigDict(frozen=True)

    name: str
    docstring: Optional[str] = None
    params: list[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate that function name is not empty."""
        if not v or not v.strip():
            raise ValueError("Function name cannot be empty")
        return v

    @property
    def has_docstring(self) -> bool:
        """Check if the function has a docstring."""
        return bool(self.docstring)

    @property
    def signature(self) -> str:
        """Get a display signature, e.g. ``bar(x, y...)``."""
        return f"{self.name}({', '.join(self.params)})"


class ClassDoc(BaseModel):
    """Documentation for a class.

    Attributes:
        name: Class name
        docstring: Normalized leading comment of the class body, if any
        parent: Name of the superclass, if the class extends one
        methods: Documented methods in declaration order
    """

    model_config = ConfigDict(frozen=True)

    name: str
    docstring: Optional[str] = None
    parent: Optional[str] = None
    methods: list[FunctionDoc] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate that class name is not empty."""
        if not v or not v.strip():
            raise ValueError("Class name cannot be empty")
        return v

    @property
    def has_docstring(self) -> bool:
        """Check if the class has a docstring."""
        return bool(self.docstring)

    def get_method(self, name: str) -> Optional[FunctionDoc]:
        """Get the first method with the given name.

        Args:
            name: Method name to search for

        Returns:
            FunctionDoc if found, None otherwise
        """
        for method in self.methods:
            if method.name == name:
                return method
        return None


class ModuleDoc(BaseModel):
    """Documentation for a whole module.

    Attributes:
        docstring: Normalized leading comment of the module, if any
        classes: Top-level classes in declaration order
        functions: Top-level functions in declaration order
    """

    model_config = ConfigDict(frozen=True)

    docstring: Optional[str] = None
    classes: list[ClassDoc] = Field(default_factory=list)
    functions: list[FunctionDoc] = Field(default_factory=list)

    @property
    def has_docstring(self) -> bool:
        """Check if the module has a docstring."""
        return bool(self.docstring)

    @property
    def is_empty(self) -> bool:
        """Check if nothing was documented."""
        return self.docstring is None and not self.classes and not self.functions

    def get_class(self, name: str) -> Optional[ClassDoc]:
        """Get the first class with the given name."""
        for cls in self.classes:
            if cls.name == name:
                return cls
        return None

    def get_function(self, name: str) -> Optional[FunctionDoc]:
        """Get the first top-level function with the given name."""
        for func in self.functions:
            if func.name == name:
                return func
        return None
