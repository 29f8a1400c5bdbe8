"""Declarations collected into output scopes and rendered as TypeScript."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

INDENT = "  "


@dataclass(frozen=True)
class DocTag:
    name: str
    text: str | None = None


@dataclass(frozen=True)
class JSDoc:
    """A documentation comment: free-form description followed by tags."""

    description: str | None = None
    tags: tuple[DocTag, ...] = ()

    def is_empty(self) -> bool:
        return not self.description and not self.tags

    def render(self, indent: str = "") -> list[str]:
        if self.is_empty():
            return []
        lines = [f"{indent}/**"]
        if self.description:
            lines.extend(_comment_lines(self.description, indent))
        for tag in self.tags:
            text = f"@{tag.name}" if tag.text is None else f"@{tag.name} {tag.text}"
            lines.extend(_comment_lines(text, indent))
        lines.append(f"{indent} */")
        return lines


@dataclass(frozen=True)
class TypeParameter:
    name: str
    constraint: str | None = None
    default: str | None = None

    def render(self) -> str:
        text = self.name
        if self.constraint is not None:
            text += f" extends {self.constraint}"
        if self.default is not None:
            text += f" = {self.default}"
        return text


@dataclass(frozen=True)
class Parameter:
    name: str
    type: str
    optional: bool = False

    def render(self) -> str:
        return f"{self.name}{'?' if self.optional else ''}: {self.type}"


@dataclass(frozen=True)
class FunctionDeclaration:
    """One function overload signature without a body."""

    name: str
    parameters: tuple[Parameter, ...]
    return_type: str
    type_parameters: tuple[TypeParameter, ...] = ()
    doc: JSDoc = field(default_factory=JSDoc)

    def render(self, indent: str = "") -> list[str]:
        lines = self.doc.render(indent)
        generics = ""
        if self.type_parameters:
            generics = "<" + ", ".join(item.render() for item in self.type_parameters) + ">"
        lines.append(f"{indent}function {self.name}{generics}(")
        lines.extend(f"{indent}{INDENT}{parameter.render()}," for parameter in self.parameters)
        lines.append(f"{indent}): {self.return_type};")
        return lines


@dataclass(frozen=True)
class TypeAliasDeclaration:
    name: str
    type: str
    doc: JSDoc = field(default_factory=JSDoc)
    exported: bool = True

    def render(self, indent: str = "") -> list[str]:
        lines = self.doc.render(indent)
        export = "export " if self.exported else ""
        lines.append(f"{indent}{export}type {self.name} = {self.type};")
        return lines


Declaration = Union[FunctionDeclaration, TypeAliasDeclaration]


@dataclass
class Scope:
    """An ordered block of declarations.

    A scope with a ``header`` renders as a wrapping block (for example
    ``declare global``); a scope without one renders its declarations at the
    top level.
    """

    header: str | None = None
    declarations: list[Declaration] = field(default_factory=list)

    def add(self, declaration: Declaration) -> None:
        self.declarations.append(declaration)

    def extend(self, declarations: list[FunctionDeclaration] | list[TypeAliasDeclaration]) -> None:
        self.declarations.extend(declarations)

    def render(self) -> list[str]:
        indent = INDENT if self.header is not None else ""
        body: list[str] = []
        for declaration in self.declarations:
            if body:
                body.append("")
            body.extend(declaration.render(indent))
        if self.header is None:
            return body
        return [f"{self.header} {{", *body, "}"]


def _comment_lines(text: str, indent: str) -> list[str]:
    return [f"{indent} * {line}".rstrip() for line in text.split("\n")]
