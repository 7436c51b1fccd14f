from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Mapping

from jsdoc_cli.analysis.model import ParameterTag
from jsdoc_cli.binding.coercion import is_boolean_type


@dataclass(frozen=True)
class OptionKeyword:
    keyword: str
    tag: ParameterTag


def keyword_forms(tag: ParameterTag) -> list[str]:
    name = tag.name
    forms = [f"--{name}", f"-{name}", f"-{name[:1]}"]
    if is_boolean_type(tag.type):
        forms.extend([f"--no-{name}", f"-no-{name}"])
    # A single-character name yields "-x" twice; it still belongs to one tag.
    return list(dict.fromkeys(forms))


def build_keyword_table(options: Iterable[ParameterTag]) -> dict[str, OptionKeyword]:
    """Map each unambiguous flag keyword to the optional parameter it sets.

    Keywords claimed by more than one parameter are dropped entirely, so such
    a parameter can only be set through its longer forms.
    """
    claims: dict[str, list[OptionKeyword]] = {}
    for tag in options:
        if not tag.name:
            continue
        for keyword in keyword_forms(tag):
            claims.setdefault(keyword, []).append(OptionKeyword(keyword, tag))
    return {keyword: entries[0] for keyword, entries in claims.items() if len(entries) == 1}


def keyword_pattern(table: Mapping[str, OptionKeyword]) -> re.Pattern[str] | None:
    if not table:
        return None
    alternatives = "|".join(
        re.escape(keyword) for keyword in sorted(table, key=lambda value: (-len(value), value))
    )
    return re.compile(rf"(?:^|(?<=\s))({alternatives})(?=\s|=|$)")
