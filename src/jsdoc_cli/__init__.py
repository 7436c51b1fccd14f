"""jsdoc-cli package root."""

from jsdoc_cli.analysis import CLIDescriptor, resolve, resolve_entry
from jsdoc_cli.binding import bind, get_value
from jsdoc_cli.exceptions import JsdocCliError

__all__ = [
    "__version__",
    "CLIDescriptor",
    "JsdocCliError",
    "bind",
    "get_value",
    "resolve",
    "resolve_entry",
]

__version__ = "0.1.0"
