"""ECMAScript module syntax provider backed by tree-sitter."""

from __future__ import annotations

from functools import cache
from pathlib import Path

import tree_sitter_javascript
from tree_sitter import Language, Node, Parser

from jsdoc_cli.exceptions import ModuleParseError
from jsdoc_cli.ingest.adapter_contract import (
    CommentBlock,
    DeclarationExport,
    DefaultExport,
    ExportConstruct,
    ExportList,
    ExportSpecifier,
    ImportedName,
    ParsedModule,
    ReExportAll,
)

_DECLARATION_NODES = frozenset(
    {
        "function_declaration",
        "generator_function_declaration",
        "class_declaration",
        "lexical_declaration",
        "variable_declaration",
    }
)
_NAMED_DECLARATION_NODES = frozenset(
    {
        "function_declaration",
        "generator_function_declaration",
        "class_declaration",
        "function_expression",
        "function",
        "generator_function",
        "class",
    }
)
_VARIABLE_NODES = frozenset({"lexical_declaration", "variable_declaration"})


@cache
def _language() -> Language:
    return Language(tree_sitter_javascript.language())


class ECMAScriptProvider:
    language_id = "javascript"
    file_extensions = (".mjs", ".js", ".cjs")

    def parse_module(self, text: str, *, path: Path | None = None) -> ParsedModule:
        source = text.encode("utf-8")
        tree = Parser(_language()).parse(source)
        root = tree.root_node
        if root.has_error:
            line, column = _first_error_point(root)
            raise ModuleParseError(path, line + 1, column + 1)
        return _ModuleCollector(source).collect(root)


class _ModuleCollector:
    def __init__(self, source: bytes) -> None:
        self._source = source
        self._exports: list[ExportConstruct] = []
        self._declarations: dict[str, int] = {}
        self._imports: dict[str, ImportedName] = {}

    def collect(self, root: Node) -> ParsedModule:
        for child in root.named_children:
            if child.type == "export_statement":
                self._export_statement(child)
            elif child.type == "import_statement":
                self._import_statement(child)
            elif child.type in _DECLARATION_NODES:
                self._declare(child)
        return ParsedModule(
            exports=tuple(self._exports),
            comments=tuple(self._comments(root)),
            declarations=dict(self._declarations),
            imports=dict(self._imports),
        )

    def _text(self, node: Node) -> str:
        return self._source[node.start_byte : node.end_byte].decode("utf-8")

    def _string_value(self, node: Node) -> str:
        return self._text(node)[1:-1]

    def _name_text(self, node: Node) -> str:
        if node.type == "string":
            return self._string_value(node)
        return self._text(node)

    def _declared_names(self, node: Node) -> list[str]:
        if node.type in _VARIABLE_NODES:
            names: list[str] = []
            for declarator in node.named_children:
                if declarator.type != "variable_declarator":
                    continue
                name = declarator.child_by_field_name("name")
                # Destructuring patterns bind nothing describable.
                if name is not None and name.type == "identifier":
                    names.append(self._text(name))
            return names
        if node.type in _NAMED_DECLARATION_NODES:
            name = node.child_by_field_name("name")
            return [self._text(name)] if name is not None else []
        return []

    def _declare(self, node: Node) -> list[str]:
        names = self._declared_names(node)
        for name in names:
            self._declarations.setdefault(name, node.start_byte)
        return names

    def _export_statement(self, node: Node) -> None:
        declaration = node.child_by_field_name("declaration")
        value = node.child_by_field_name("value")
        source = node.child_by_field_name("source")
        child_types = {child.type for child in node.children}

        if "default" in child_types:
            self._default_export(declaration, value)
            return
        if declaration is not None:
            for name in self._declare(declaration):
                self._exports.append(DeclarationExport(name=name, position=declaration.start_byte))
            return
        clause = next((c for c in node.named_children if c.type == "export_clause"), None)
        if clause is not None:
            specifiers = []
            for specifier in clause.named_children:
                if specifier.type != "export_specifier":
                    continue
                name = specifier.child_by_field_name("name")
                alias = specifier.child_by_field_name("alias")
                if name is None:
                    continue
                local = self._name_text(name)
                exported = self._name_text(alias) if alias is not None else local
                specifiers.append(ExportSpecifier(local=local, exported=exported))
            self._exports.append(
                ExportList(
                    specifiers=tuple(specifiers),
                    source=self._string_value(source) if source is not None else None,
                    start=node.start_byte,
                )
            )
            return
        if "*" in child_types and "namespace_export" not in child_types and source is not None:
            self._exports.append(ReExportAll(source=self._string_value(source), start=node.start_byte))

    def _default_export(self, declaration: Node | None, value: Node | None) -> None:
        if declaration is not None:
            names = self._declare(declaration)
            self._exports.append(
                DefaultExport(
                    position=declaration.start_byte,
                    local_name=names[0] if names else None,
                )
            )
            return
        if value is None:
            return
        local_name = self._text(value) if value.type == "identifier" else None
        self._exports.append(DefaultExport(position=value.start_byte, local_name=local_name))

    def _import_statement(self, node: Node) -> None:
        source = node.child_by_field_name("source")
        if source is None:
            return
        module = self._string_value(source)
        clause = next((c for c in node.named_children if c.type == "import_clause"), None)
        if clause is None:
            return
        for part in clause.named_children:
            if part.type == "identifier":
                self._imports[self._text(part)] = ImportedName(source=module, imported="default")
            elif part.type == "named_imports":
                for specifier in part.named_children:
                    if specifier.type != "import_specifier":
                        continue
                    name = specifier.child_by_field_name("name")
                    alias = specifier.child_by_field_name("alias")
                    if name is None:
                        continue
                    imported = self._name_text(name)
                    local = self._text(alias) if alias is not None else imported
                    self._imports[local] = ImportedName(source=module, imported=imported)

    def _comments(self, root: Node) -> list[CommentBlock]:
        comments: list[CommentBlock] = []
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == "comment":
                comments.append(
                    CommentBlock(start=node.start_byte, end=node.end_byte, text=self._text(node))
                )
                continue
            stack.extend(reversed(node.children))
        return comments


def _first_error_point(root: Node) -> tuple[int, int]:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node.start_point[0], node.start_point[1]
        if node.has_error:
            stack.extend(reversed(node.children))
    return root.start_point[0], root.start_point[1]
