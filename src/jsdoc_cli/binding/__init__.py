"""Token binding and value coercion for resolved exports."""

from jsdoc_cli.binding.binder import bind, bind_arguments, parse_options, select_target
from jsdoc_cli.binding.coercion import get_value
from jsdoc_cli.binding.keywords import build_keyword_table

__all__ = [
    "bind",
    "bind_arguments",
    "build_keyword_table",
    "get_value",
    "parse_options",
    "select_target",
]
