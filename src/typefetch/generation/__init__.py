from .components import add_components
from .declarations import FunctionDeclaration, JSDoc, Scope, TypeAliasDeclaration
from .emitter import Diagnostic, TypeEmitter, to_schema_type
from .paths import add_paths

__all__ = [
    "Diagnostic",
    "FunctionDeclaration",
    "JSDoc",
    "Scope",
    "TypeAliasDeclaration",
    "TypeEmitter",
    "add_components",
    "add_paths",
    "to_schema_type",
]
