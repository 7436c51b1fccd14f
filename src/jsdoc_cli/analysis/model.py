from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Tuple

from jsdoc_cli.ingest.adapter_contract import ParsedModule


@dataclass(frozen=True)
class ParameterTag:
    name: str
    type: str
    optional: bool = False
    default: str | None = None
    description: str = ""

    @property
    def top_level_name(self) -> str:
        return self.name.split(".", 1)[0]

    @property
    def is_dotted(self) -> bool:
        return "." in self.name


@dataclass(frozen=True)
class Documentation:
    description: str
    tags: Tuple[ParameterTag, ...] = ()

    @property
    def required(self) -> Tuple[ParameterTag, ...]:
        return tuple(tag for tag in self.tags if not tag.optional)

    @property
    def options(self) -> Tuple[ParameterTag, ...]:
        return tuple(tag for tag in self.tags if tag.optional)


@dataclass(frozen=True)
class SourceModule:
    path: Path
    text: str
    parsed: ParsedModule


@dataclass(frozen=True)
class ExportBinding:
    name: str
    defining_file: Path
    position: int | None = None
    documentation: Documentation | None = None

    def with_documentation(self, documentation: Documentation | None) -> ExportBinding:
        return replace(self, documentation=documentation)


@dataclass(frozen=True)
class CLIDescriptor:
    name: str
    entry_file: Path
    exports: Tuple[ExportBinding, ...] = field(default_factory=tuple)

    def export_named(self, name: str | None) -> ExportBinding | None:
        for binding in self.exports:
            if binding.name == name:
                return binding
        return None


@dataclass(frozen=True)
class BoundInvocation:
    target: ExportBinding
    arguments: Tuple[object, ...]
