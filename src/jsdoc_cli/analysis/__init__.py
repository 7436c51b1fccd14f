"""Export graph resolution and documentation matching."""

from jsdoc_cli.analysis.export_graph import (
    ExportGraphResolver,
    apply_collision_policy,
    resolve,
    resolve_entry,
)
from jsdoc_cli.analysis.model import (
    BoundInvocation,
    CLIDescriptor,
    Documentation,
    ExportBinding,
    ParameterTag,
    SourceModule,
)

__all__ = [
    "BoundInvocation",
    "CLIDescriptor",
    "Documentation",
    "ExportBinding",
    "ExportGraphResolver",
    "ParameterTag",
    "SourceModule",
    "apply_collision_policy",
    "resolve",
    "resolve_entry",
]
