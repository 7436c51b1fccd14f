from jsdoc_cli.commands.execute import execute
from jsdoc_cli.commands.help_text import render_export_manual, render_manual
from jsdoc_cli.commands.invoke import invoke

__all__ = ["execute", "invoke", "render_export_manual", "render_manual"]
