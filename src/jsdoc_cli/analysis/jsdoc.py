"""Parse JSDoc comment blocks into descriptions and parameter tags.

Only the tag shape that describes call parameters is recognized::

    @param {type} name description
    @param {type} [name] description
    @param {type} [name=default] - description
    @param {type=} name description

Tag names may be dotted (``opts.retries``) to describe fields of an options
object. Other tags end the previous tag's text and are otherwise ignored.
"""

from __future__ import annotations

import re

from jsdoc_cli.analysis.model import Documentation, ParameterTag

PARAM_TAGS = frozenset({"param", "arg", "argument"})
ANY_TYPE = "*"

_TAG_START = re.compile(r"^@(?P<tag>[A-Za-z][\w-]*)(?:\s+(?P<body>.*))?$")
_NAME = re.compile(r"\S+")
_SEPARATOR = re.compile(r"^-(?:\s+|$)")


def _body_lines(text: str) -> list[str]:
    body = text[3:]
    if body.endswith("*/"):
        body = body[:-2]
    lines: list[str] = []
    for raw in body.splitlines():
        line = raw.strip()
        if line.startswith("*"):
            line = line[1:]
            if line.startswith(" "):
                line = line[1:]
        lines.append(line.rstrip())
    return lines


def _balanced_end(text: str, opener: str, closer: str) -> int | None:
    depth = 0
    for index, char in enumerate(text):
        if char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return index
    return None


def parse_param_tag(body: str) -> ParameterTag | None:
    rest = body.lstrip()
    type_name = ""
    if rest.startswith("{"):
        end = _balanced_end(rest, "{", "}")
        if end is None:
            return None
        type_name = rest[1:end].strip()
        rest = rest[end + 1 :].lstrip()

    optional = False
    if type_name.endswith("="):
        optional = True
        type_name = type_name[:-1].strip()

    default: str | None = None
    if rest.startswith("["):
        end = _balanced_end(rest, "[", "]")
        if end is None:
            return None
        name, separator, value = rest[1:end].partition("=")
        name = name.strip()
        if separator:
            default = value.strip()
        optional = True
        rest = rest[end + 1 :]
    else:
        match = _NAME.match(rest)
        if match is None:
            return None
        name = match.group(0)
        rest = rest[match.end() :]

    if not name:
        return None
    return ParameterTag(
        name=name,
        type=type_name or ANY_TYPE,
        optional=optional,
        default=default,
        description=_SEPARATOR.sub("", rest.strip(), count=1),
    )


def parse_doc_block(text: str) -> Documentation | None:
    if not text.startswith("/**") or text.startswith("/**/"):
        return None

    description_lines: list[str] = []
    sections: list[tuple[str, list[str]]] = []
    for line in _body_lines(text):
        match = _TAG_START.match(line.lstrip())
        if match is not None:
            sections.append((match.group("tag"), [match.group("body") or ""]))
        elif sections:
            sections[-1][1].append(line)
        else:
            description_lines.append(line)

    tags: list[ParameterTag] = []
    for tag, parts in sections:
        if tag not in PARAM_TAGS:
            continue
        parsed = parse_param_tag("\n".join(parts))
        if parsed is not None:
            tags.append(parsed)
    return Documentation(
        description="\n".join(description_lines).strip(),
        tags=tuple(tags),
    )
