"""Bind raw command-line tokens to a documented export's parameters.

Required parameters are positional, in documentation order. Optional
parameters are set with flag keywords derived from their names; dotted names
(``opts.retries``) write into a nested options mapping. The bound values come
out in documentation order, which is the order the target function receives
them in.
"""

from __future__ import annotations

import logging
from typing import Sequence

from jsdoc_cli.analysis.model import (
    BoundInvocation,
    CLIDescriptor,
    ExportBinding,
    ParameterTag,
)
from jsdoc_cli.binding.coercion import get_value, is_array_type, is_boolean_type
from jsdoc_cli.binding.keywords import OptionKeyword, build_keyword_table, keyword_pattern
from jsdoc_cli.exceptions import (
    AmbiguousArgumentsError,
    MissingArgumentsError,
    UnknownArgumentError,
    UnknownCommandError,
)

logger = logging.getLogger(__name__)

FLAG_MARKER = "-"


def select_target(descriptor: CLIDescriptor, tokens: Sequence[str]) -> ExportBinding:
    if len(descriptor.exports) == 1:
        return descriptor.exports[0]
    command = tokens[0] if tokens else None
    target = descriptor.export_named(command)
    if target is None:
        raise UnknownCommandError(command)
    return target


def _bind_required(required: Sequence[ParameterTag], args: list[str]) -> list[object]:
    values: list[object] = []
    if len(required) == 1:
        words: list[str] = []
        while args and not args[0].startswith(FLAG_MARKER):
            words.append(args.pop(0))
        values.append(get_value(" ".join(words), required[0].type) if words else None)
    elif len(required) > 1:
        for tag in required:
            values.append(get_value(args.pop(0), tag.type) if args else None)
    return values


def _option_value(entry: OptionKeyword, raw: str) -> object:
    if not raw and is_boolean_type(entry.tag.type):
        # A bare flag reads its value from the keyword, e.g. "--no-verbose".
        return get_value(entry.keyword, entry.tag.type)
    return get_value(raw, entry.tag.type)


def _assign(options: dict[str, object], tag: ParameterTag, value: object) -> None:
    *parents, key = tag.name.split(".")
    context = options
    for segment in parents:
        child = context.get(segment)
        if not isinstance(child, dict):
            child = {}
            context[segment] = child
        context = child
    if is_array_type(tag.type):
        existing = context.get(key)
        if not isinstance(existing, list):
            existing = []
            context[key] = existing
        existing.extend(value if isinstance(value, list) else [value])
    else:
        context[key] = value


def parse_options(
    table: dict[str, OptionKeyword], args: Sequence[str]
) -> dict[str, object]:
    """Scan the joined remaining tokens for option keywords and their values."""
    text = " ".join(args)
    pattern = keyword_pattern(table)
    matches = list(pattern.finditer(text)) if pattern is not None else []
    if not matches:
        if text.strip():
            raise UnknownArgumentError(text.strip())
        return {}
    leading = text[: matches[0].start()].strip()
    if leading:
        raise UnknownArgumentError(leading)

    options: dict[str, object] = {}
    for index, match in enumerate(matches):
        stop = matches[index + 1].start() if index + 1 < len(matches) else len(text)
        raw = text[match.end() : stop]
        if raw.startswith("="):
            raw = raw[1:]
        entry = table[match.group(1)]
        _assign(options, entry.tag, _option_value(entry, raw.strip()))
    return options


def _top_level_order(
    options: Sequence[ParameterTag], required: Sequence[ParameterTag]
) -> list[str]:
    taken = {tag.name for tag in required}
    names: list[str] = []
    for tag in options:
        name = tag.top_level_name
        if name not in names and name not in taken:
            names.append(name)
    return names


def _fold_into_required(
    required: Sequence[ParameterTag], bound: list[object], options: dict[str, object]
) -> None:
    """Merge dotted options such as ``opts.retries`` into a required ``opts`` mapping."""
    for index, tag in enumerate(required):
        nested = options.pop(tag.name, None)
        value = bound[index] if index < len(bound) else None
        if isinstance(nested, dict) and isinstance(value, dict):
            bound[index] = {**value, **nested}


def bind_arguments(target: ExportBinding, tokens: Sequence[str]) -> list[object]:
    documentation = target.documentation
    tags = documentation.tags if documentation is not None else ()
    required = [tag for tag in tags if not tag.optional]
    optional = [tag for tag in tags if tag.optional]
    args = list(tokens)

    bound = _bind_required(required, args)
    table = build_keyword_table(optional)
    for value in bound:
        if isinstance(value, str) and any(value.startswith(keyword) for keyword in table):
            raise AmbiguousArgumentsError(bound)

    options = parse_options(table, args)
    _fold_into_required(required, bound, options)
    for name in _top_level_order(optional, required):
        bound.append(options.get(name))

    while bound and bound[-1] is None:
        bound.pop()
    missing = [
        tag.name
        for index, tag in enumerate(required)
        if index >= len(bound) or bound[index] is None
    ]
    if missing:
        raise MissingArgumentsError(missing)
    logger.debug("Bound %d argument(s) for '%s'", len(bound), target.name)
    return bound


def bind(descriptor: CLIDescriptor, tokens: Sequence[str]) -> BoundInvocation:
    args = list(tokens)
    target = select_target(descriptor, args)
    if len(descriptor.exports) > 1:
        args.pop(0)
    return BoundInvocation(target=target, arguments=tuple(bind_arguments(target, args)))
