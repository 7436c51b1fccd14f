from __future__ import annotations

import typer

from jsdoc_cli.analysis.model import CLIDescriptor, ExportBinding, ParameterTag
from jsdoc_cli.binding.coercion import is_boolean_type
from jsdoc_cli.exceptions import UnknownCommandError

HELP_FLAGS = ("-h", "--help")
_MIN_COLUMN = 24
_HELP_ROW = "-h, --help"


def _bold(text: str, styled: bool) -> str:
    return typer.style(text, bold=True) if styled else text


def _clean(description: str) -> str:
    return description.lstrip(" -").strip()


def _option_label(option: ParameterTag, options: list[ParameterTag]) -> str:
    conflict = any(
        other is not option and other.name[:1] == option.name[:1] for other in options
    )
    shortcut = "" if conflict else f"-{option.name[:1]}, "
    param = "" if is_boolean_type(option.type) else f" <{option.type}>"
    return f"{shortcut}--{option.name}{param}"


def render_manual(descriptor: CLIDescriptor, *, styled: bool = True) -> str:
    if len(descriptor.exports) == 1:
        return render_export_manual(descriptor, descriptor.exports[0].name, styled=styled)

    many = len(descriptor.exports) > 1
    lines = [
        f"Usage: {_bold(descriptor.name, styled)}{' <task>' if many else ''} [options]",
        "",
    ]
    width = max([len(binding.name) + 4 for binding in descriptor.exports] + [_MIN_COLUMN])
    if many:
        lines.append("Tasks:")
        for binding in descriptor.exports:
            documentation = binding.documentation
            description = documentation.description.strip() if documentation else ""
            description = description.replace("\n", "\n" + " " * (width + 3))
            lines.append(f"  {binding.name.ljust(width)} {description}".rstrip())
        lines.append("")
    lines.append("Options:")
    lines.append(f"  {_HELP_ROW.ljust(width)} Display this manual.")
    return "\n".join(lines)


def render_export_manual(
    descriptor: CLIDescriptor, name: str, *, styled: bool = True
) -> str:
    binding: ExportBinding | None = descriptor.export_named(name)
    if binding is None:
        raise UnknownCommandError(name)
    documentation = binding.documentation
    arguments = list(documentation.required) if documentation else []
    options = list(documentation.options) if documentation else []

    width = max(
        [len(tag.name) + 4 for tag in arguments]
        + [len(_option_label(tag, options)) + 4 for tag in options]
        + [_MIN_COLUMN]
    )
    task = f" {binding.name}" if len(descriptor.exports) > 1 else ""
    usage_args = "".join(f" <{tag.name}>" for tag in arguments)
    lines = [
        f"Usage: {_bold(descriptor.name, styled)}{task}{usage_args} [options]",
        "",
    ]
    if documentation and documentation.description.strip():
        lines.extend([documentation.description.strip(), ""])

    if arguments:
        lines.append("Arguments:")
        for tag in arguments:
            lines.append(f"  {f'<{tag.name}>'.ljust(width)} {_clean(tag.description)}".rstrip())
        lines.append("")

    lines.append("Options:")
    lines.append(f"  {_HELP_ROW.ljust(width)} Display this manual.")
    for tag in options:
        default = f" Defaults to {tag.default}." if tag.default else ""
        label = _option_label(tag, options)
        lines.append(f"  {label.ljust(width)} {_clean(tag.description)}{default}".rstrip())
    return "\n".join(lines)
