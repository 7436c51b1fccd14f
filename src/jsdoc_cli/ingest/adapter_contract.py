from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Protocol, TypeAlias, runtime_checkable


@dataclass(frozen=True)
class CommentBlock:
    start: int
    end: int
    text: str

    @property
    def is_doc_block(self) -> bool:
        return self.text.startswith("/**") and not self.text.startswith("/**/")


@dataclass(frozen=True)
class ImportedName:
    source: str
    imported: str


@dataclass(frozen=True)
class ReExportAll:
    source: str
    start: int


@dataclass(frozen=True)
class DeclarationExport:
    name: str
    position: int


@dataclass(frozen=True)
class ExportSpecifier:
    local: str
    exported: str


@dataclass(frozen=True)
class ExportList:
    specifiers: tuple[ExportSpecifier, ...]
    source: str | None
    start: int


@dataclass(frozen=True)
class DefaultExport:
    position: int
    # Set when the default export is a named declaration or a bare identifier.
    local_name: str | None = None


ExportConstruct: TypeAlias = ReExportAll | DeclarationExport | ExportList | DefaultExport


@dataclass(frozen=True)
class ParsedModule:
    exports: tuple[ExportConstruct, ...] = ()
    comments: tuple[CommentBlock, ...] = ()
    declarations: Mapping[str, int] = field(default_factory=dict)
    imports: Mapping[str, ImportedName] = field(default_factory=dict)


@runtime_checkable
class SyntaxProvider(Protocol):
    language_id: str
    file_extensions: tuple[str, ...]

    def parse_module(self, text: str, *, path: Path | None = None) -> ParsedModule: ...
