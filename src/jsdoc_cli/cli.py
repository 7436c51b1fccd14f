from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Callable, NoReturn, Optional
import logging

import typer

from jsdoc_cli.analysis.export_graph import resolve_entry
from jsdoc_cli.analysis.model import BoundInvocation, CLIDescriptor
from jsdoc_cli.binding.binder import bind
from jsdoc_cli.commands.execute import execute
from jsdoc_cli.commands.help_text import render_export_manual, render_manual
from jsdoc_cli.commands.invoke import invoke
from jsdoc_cli.config import (
    InvokeSettings,
    ResolveSettings,
    invoke_defaults,
    invoke_settings,
    merge_payload,
    resolve_defaults,
    resolve_settings,
)
from jsdoc_cli.exceptions import BindingError, JsdocCliError
from jsdoc_cli.manifest import find_entry_file
from jsdoc_cli.schema import BoundInvocationDTO, CLIDescriptorDTO

app = typer.Typer(add_completion=False)
InvokeFn = Callable[[CLIDescriptor, BoundInvocation], int]

_PASSTHROUGH_SETTINGS = {"allow_extra_args": True, "ignore_unknown_options": True}
_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=_LOG_FORMAT,
        force=True,
    )


def _fail(exc: Exception, *, code: int = 1) -> NoReturn:
    typer.secho(str(exc), err=True, fg=typer.colors.RED)
    raise typer.Exit(code=code) from exc


def _passthrough_tokens(ctx: typer.Context) -> list[str]:
    tokens = list(ctx.args)
    if tokens and tokens[0] == "--":
        tokens = tokens[1:]
    return tokens


def _load_settings(
    root: Path, config: Optional[Path], *, node: Optional[str] = None
) -> tuple[ResolveSettings, InvokeSettings]:
    invoke_section = merge_payload(
        {"node": node}, invoke_defaults(root=root, config_path=config)
    )
    return (
        resolve_settings(resolve_defaults(root=root, config_path=config)),
        invoke_settings(invoke_section),
    )


def _context_invoke_fn(ctx: typer.Context, settings: InvokeSettings) -> InvokeFn:
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    override = obj.get("invoke")
    if callable(override):
        return override
    run_process = obj.get("run_process")
    if callable(run_process):
        return partial(invoke, settings=settings, run_process=run_process)
    return partial(invoke, settings=settings)


def _resolve_or_exit(entry: Path, config: Optional[Path]) -> CLIDescriptor:
    resolve_cfg, _ = _load_settings(Path.cwd(), config)
    try:
        return resolve_entry(entry, settings=resolve_cfg)
    except JsdocCliError as exc:
        _fail(exc)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log resolution details to stderr."
    ),
) -> None:
    """Turn the JSDoc-documented exports of an ES module into a command line."""
    configure_logging(verbose)


@app.command("run", context_settings=_PASSTHROUGH_SETTINGS, add_help_option=False)
def run(
    ctx: typer.Context,
    cwd: Path = typer.Option(Path("."), "--cwd", help="Package directory holding package.json."),
    config: Optional[Path] = typer.Option(None, "--config"),
    node: Optional[str] = typer.Option(None, "--node", help="Node.js executable to run the task with."),
) -> None:
    """Run a task of the package in --cwd with the remaining tokens.

    Put task tokens after --. Before it, --cwd, --config and --node are read
    by run itself even when the task documents an option of the same name.
    """
    root = cwd.resolve()
    resolve_cfg, invoke_cfg = _load_settings(root, config, node=node)
    tokens = _passthrough_tokens(ctx)
    try:
        descriptor = resolve_entry(find_entry_file(root), settings=resolve_cfg)
        exit_code = execute(
            descriptor,
            tokens,
            invoke_fn=_context_invoke_fn(ctx, invoke_cfg),
        )
    except JsdocCliError as exc:
        typer.echo(f"> jsdoc-cli {root} -- {' '.join(tokens)}", err=True)
        _fail(exc)
    raise typer.Exit(code=exit_code)


@app.command("describe")
def describe(
    entry: Path = typer.Argument(..., help="Entry module to resolve."),
    json_output: bool = typer.Option(False, "--json", help="Emit the descriptor as JSON."),
    config: Optional[Path] = typer.Option(None, "--config"),
) -> None:
    """Print the documented exports reachable from ENTRY."""
    descriptor = _resolve_or_exit(entry, config)
    if json_output:
        typer.echo(CLIDescriptorDTO.from_model(descriptor).model_dump_json(indent=2))
        return
    typer.echo(f"{descriptor.name} ({descriptor.entry_file})")
    for binding in descriptor.exports:
        description = binding.documentation.description if binding.documentation else ""
        summary = next(iter(description.strip().splitlines()), "")
        typer.echo(f"  {binding.name}  {binding.defining_file}  {summary}".rstrip())


@app.command("bind", context_settings=_PASSTHROUGH_SETTINGS)
def bind_command(
    ctx: typer.Context,
    entry: Path = typer.Argument(..., help="Entry module to resolve."),
    config: Optional[Path] = typer.Option(None, "--config"),
) -> None:
    """Print the arguments the tokens after -- would be called with."""
    descriptor = _resolve_or_exit(entry, config)
    try:
        invocation = bind(descriptor, _passthrough_tokens(ctx))
    except BindingError as exc:
        _fail(exc, code=2)
    typer.echo(BoundInvocationDTO.from_model(invocation).model_dump_json(indent=2))


@app.command("usage")
def usage(
    entry: Path = typer.Argument(..., help="Entry module to resolve."),
    task: Optional[str] = typer.Argument(None, help="Export to describe."),
    config: Optional[Path] = typer.Option(None, "--config"),
) -> None:
    """Print the generated manual for ENTRY or one of its tasks."""
    descriptor = _resolve_or_exit(entry, config)
    try:
        text = (
            render_export_manual(descriptor, task)
            if task is not None
            else render_manual(descriptor)
        )
    except JsdocCliError as exc:
        _fail(exc)
    typer.echo(text)
