from __future__ import annotations

import json
import logging
import subprocess
from typing import Callable

from jsdoc_cli.analysis.model import BoundInvocation, CLIDescriptor
from jsdoc_cli.config import InvokeSettings
from jsdoc_cli.exceptions import InvocationError

logger = logging.getLogger(__name__)

# Imports the entry module, awaits the export with the bound arguments and
# prints any result. Unset arguments travel as JSON null and are passed as
# undefined so the function's own defaults apply.
NODE_BOOTSTRAP = """\
import { pathToFileURL } from 'node:url'
const [file, name, payload, timeout] = process.argv.slice(1)
const api = await import(pathToFileURL(file).href)
const args = JSON.parse(payload).map(value => value === null ? undefined : value)
const result = await api[name](...args)
if (typeof result !== 'undefined') console.log(result)
setTimeout(() => {
  console.error('Side-effects are keeping the process running. Exiting...')
  process.exit(1)
}, Number(timeout)).unref()
"""

ProcessRunner = Callable[..., subprocess.CompletedProcess]


def build_node_argv(
    descriptor: CLIDescriptor,
    invocation: BoundInvocation,
    *,
    settings: InvokeSettings,
) -> list[str]:
    return [
        settings.node,
        "--input-type=module",
        "-e",
        NODE_BOOTSTRAP,
        str(descriptor.entry_file),
        invocation.target.name,
        json.dumps(list(invocation.arguments)),
        str(int(settings.side_effect_timeout_seconds * 1000)),
    ]


def invoke(
    descriptor: CLIDescriptor,
    invocation: BoundInvocation,
    *,
    settings: InvokeSettings | None = None,
    run_process: ProcessRunner = subprocess.run,
) -> int:
    settings = settings or InvokeSettings()
    argv = build_node_argv(descriptor, invocation, settings=settings)
    logger.debug("Invoking %s.%s via %s", descriptor.name, invocation.target.name, settings.node)
    try:
        completed = run_process(argv, check=False)
    except FileNotFoundError as exc:
        raise InvocationError(f"Node.js executable not found: {settings.node}") from exc
    return completed.returncode
