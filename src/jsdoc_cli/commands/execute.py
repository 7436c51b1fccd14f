from __future__ import annotations

from typing import Callable, Sequence

import typer

from jsdoc_cli.analysis.model import BoundInvocation, CLIDescriptor
from jsdoc_cli.binding.binder import bind, select_target
from jsdoc_cli.commands.help_text import HELP_FLAGS, render_export_manual, render_manual
from jsdoc_cli.commands.invoke import invoke
from jsdoc_cli.exceptions import BindingError, NoExportsError, UnknownCommandError

InvokeFn = Callable[[CLIDescriptor, BoundInvocation], int]
EchoFn = Callable[..., None]


def execute(
    descriptor: CLIDescriptor,
    tokens: Sequence[str],
    *,
    invoke_fn: InvokeFn = invoke,
    echo: EchoFn = typer.echo,
    styled: bool = True,
) -> int:
    """Run one generated-CLI command line and return its exit code."""
    if not descriptor.exports:
        raise NoExportsError(descriptor.name)
    tokens = list(tokens)
    if tokens and tokens[0] in HELP_FLAGS:
        echo(render_manual(descriptor, styled=styled))
        return 0
    if (
        tokens
        and descriptor.export_named(tokens[0]) is not None
        and any(token in HELP_FLAGS for token in tokens[1:])
    ):
        echo(render_export_manual(descriptor, tokens[0], styled=styled))
        return 0

    try:
        target = select_target(descriptor, tokens)
    except UnknownCommandError:
        if tokens:
            echo(f"Unknown task: {tokens[0]}", err=True)
        echo(render_manual(descriptor, styled=styled))
        return 1

    try:
        invocation = bind(descriptor, tokens)
    except BindingError as exc:
        echo(str(exc), err=True)
        echo(render_export_manual(descriptor, target.name, styled=styled))
        return 1
    return invoke_fn(descriptor, invocation)
