"""Error taxonomy for export resolution and argument binding."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


class JsdocCliError(Exception):
    """Base class for all jsdoc-cli errors."""


class ResolutionError(JsdocCliError):
    pass


class SourceFileNotFoundError(ResolutionError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"File not found: {path}")


class NotAFileError(ResolutionError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Not a file: {path}")


class ExportNotFoundError(ResolutionError):
    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = path
        super().__init__(f"Export '{name}' not found in {path}")


class ModuleParseError(ResolutionError):
    def __init__(self, path: Path | None, line: int, column: int) -> None:
        self.path = path
        self.line = line
        self.column = column
        where = str(path) if path is not None else "<source>"
        super().__init__(f"Syntax error in {where} at line {line}, column {column}")


class UnsupportedModuleError(ResolutionError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"No syntax provider for '{path.suffix}' files: {path}")


class SpecifierError(ResolutionError):
    def __init__(self, specifier: str, importer: Path) -> None:
        self.specifier = specifier
        self.importer = importer
        super().__init__(f"Cannot resolve '{specifier}' imported from {importer}")


class ManifestError(JsdocCliError):
    pass


class NoExportsError(JsdocCliError):
    def __init__(self, name: str) -> None:
        super().__init__(f"{name} does not provide any executable exports.")


class InvocationError(JsdocCliError):
    pass


class BindingError(JsdocCliError, ValueError):
    pass


class UnknownCommandError(BindingError):
    def __init__(self, command: str | None) -> None:
        self.command = command
        super().__init__(f"Unknown task: {command}" if command else "No task given.")


class AmbiguousArgumentsError(BindingError):
    def __init__(self, values: Iterable[object]) -> None:
        rendered = " ".join("" if value is None else str(value) for value in values)
        super().__init__(
            "You likely passed an option before specifying all arguments. "
            f"Invalid arguments: {rendered}"
        )


class UnknownArgumentError(BindingError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Unknown argument: {text}")


class MissingArgumentsError(BindingError):
    def __init__(self, names: Iterable[str]) -> None:
        self.names = tuple(names)
        rendered = " ".join(f"<{name}>" for name in self.names)
        super().__init__(f"Missing required arguments: {rendered}")


class CoercionError(BindingError):
    pass


class InvalidBooleanError(CoercionError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid boolean: {text}")


class InvalidNumberError(CoercionError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid number: {text}")


class InvalidLiteralError(CoercionError):
    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Invalid literal: {text} ({reason})")
