"""coffeedoc - documentation extraction for CoffeeScript syntax trees."""

__version__ = "0.1.0"
__author__ = "coffeedoc contributors"
__license__ = "MIT"

from coffeedoc.core.documenter import ModuleDocumenter, document_module
from coffeedoc.core.models import ClassDoc, FunctionDoc, ModuleDoc
from coffeedoc.core.nodes import MalformedNodeError, load_module_nodes

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "ModuleDocumenter",
    "document_module",
    "ModuleDoc",
    "ClassDoc",
    "FunctionDoc",
    "MalformedNodeError",
    "load_module_nodes",
]
