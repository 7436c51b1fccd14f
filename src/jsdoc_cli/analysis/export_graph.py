"""Resolve the documented export surface of an ECMAScript entry module.

Every export construct of a module reserves one result slot. Recursive
resolutions of re-exported files run concurrently, and ``asyncio.gather``
fills the slots in construct order, so the flattened export list always follows
the textual order of the entry module regardless of which file finishes
parsing first.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from jsdoc_cli.analysis.model import CLIDescriptor, ExportBinding, SourceModule
from jsdoc_cli.analysis.sources import SourceCache, check_source_file
from jsdoc_cli.analysis.specifiers import resolve_specifier
from jsdoc_cli.config import ResolveSettings
from jsdoc_cli.exceptions import ExportNotFoundError
from jsdoc_cli.ingest.adapter_contract import (
    DeclarationExport,
    DefaultExport,
    ExportConstruct,
    ExportList,
    ReExportAll,
)

logger = logging.getLogger(__name__)

DEFAULT_EXPORT = "default"

_Location = tuple[Path, int | None]


def apply_collision_policy(
    bindings: Sequence[ExportBinding], *, root: Path
) -> list[ExportBinding]:
    """Keep one binding per export name.

    A single binding defined in ``root`` shadows every re-export of the same
    name; otherwise the binding that comes last in flattened order wins.
    Survivors keep their relative order.
    """
    indices_by_name: dict[str, list[int]] = {}
    for index, binding in enumerate(bindings):
        indices_by_name.setdefault(binding.name, []).append(index)

    keep: set[int] = set()
    for indices in indices_by_name.values():
        if len(indices) == 1:
            keep.add(indices[0])
            continue
        rooted = [index for index in indices if bindings[index].defining_file == root]
        if len(rooted) == 1:
            keep.add(rooted[0])
        elif indices:
            keep.add(indices[-1])
    return [binding for index, binding in enumerate(bindings) if index in keep]


def _pick(bindings: Sequence[ExportBinding], name: str, path: Path) -> ExportBinding:
    for binding in bindings:
        if binding.name == name:
            return binding
    raise ExportNotFoundError(name, path)


class ExportGraphResolver:
    def __init__(
        self,
        *,
        settings: ResolveSettings | None = None,
        sources: SourceCache | None = None,
    ) -> None:
        self._settings = settings or ResolveSettings()
        self._sources = sources or SourceCache()

    async def resolve(self, entry_file: Path) -> CLIDescriptor:
        entry = Path(entry_file).resolve()
        check_source_file(entry)
        bindings = await self.collect(entry)
        documented = await asyncio.gather(*(self._document(binding) for binding in bindings))

        exports: list[ExportBinding] = []
        for binding in documented:
            if binding.position is None or binding.documentation is None:
                logger.debug(
                    "Skipping export '%s' of %s: no documentation block",
                    binding.name,
                    binding.defining_file,
                )
                continue
            exports.append(binding)
        return CLIDescriptor(name=entry.stem, entry_file=entry, exports=tuple(exports))

    async def collect(
        self, path: Path, chain: tuple[Path, ...] = ()
    ) -> list[ExportBinding]:
        chain = (*chain, path)
        module = await self._sources.load(path)
        slots = await asyncio.gather(
            *(self._expand(module, construct, chain) for construct in module.parsed.exports)
        )
        flattened = [binding for slot in slots for binding in slot]
        return apply_collision_policy(flattened, root=path)

    def _target(self, specifier: str, importer: Path) -> Path:
        return resolve_specifier(specifier, importer=importer, settings=self._settings)

    async def _expand(
        self,
        module: SourceModule,
        construct: ExportConstruct,
        chain: tuple[Path, ...],
    ) -> list[ExportBinding]:
        if isinstance(construct, ReExportAll):
            target = self._target(construct.source, module.path)
            if target in chain:
                logger.warning("Ignoring re-export cycle: %s re-exports %s", module.path, target)
                return []
            logger.debug("Expanding 'export *' from %s into %s", target, module.path)
            return await self.collect(target, chain)
        if isinstance(construct, DeclarationExport):
            return [ExportBinding(construct.name, module.path, construct.position)]
        if isinstance(construct, ExportList):
            return await self._expand_list(module, construct, chain)
        if isinstance(construct, DefaultExport):
            return [await self._default_binding(module, construct, chain)]
        return []

    async def _expand_list(
        self,
        module: SourceModule,
        construct: ExportList,
        chain: tuple[Path, ...],
    ) -> list[ExportBinding]:
        if construct.source is not None:
            target = self._target(construct.source, module.path)
            exported = await self._exports_of(target, chain)
            return [
                replace(_pick(exported, specifier.local, target), name=specifier.exported)
                for specifier in construct.specifiers
            ]
        locations = await asyncio.gather(
            *(self._locate_local(module, specifier.local, chain) for specifier in construct.specifiers)
        )
        return [
            ExportBinding(specifier.exported, defining_file, position)
            for specifier, (defining_file, position) in zip(construct.specifiers, locations)
        ]

    async def _default_binding(
        self,
        module: SourceModule,
        construct: DefaultExport,
        chain: tuple[Path, ...],
    ) -> ExportBinding:
        local_name = construct.local_name
        if local_name is not None and (
            local_name in module.parsed.declarations or local_name in module.parsed.imports
        ):
            defining_file, position = await self._locate_local(module, local_name, chain)
            return ExportBinding(DEFAULT_EXPORT, defining_file, position)
        return ExportBinding(DEFAULT_EXPORT, module.path, construct.position)

    async def _locate_local(
        self,
        module: SourceModule,
        local: str,
        chain: tuple[Path, ...],
    ) -> _Location:
        position = module.parsed.declarations.get(local)
        if position is not None:
            return module.path, position
        imported = module.parsed.imports.get(local)
        if imported is not None:
            target = self._target(imported.source, module.path)
            binding = _pick(await self._exports_of(target, chain), imported.imported, target)
            return binding.defining_file, binding.position
        logger.warning("Export '%s' of %s has no local declaration", local, module.path)
        return module.path, None

    async def _exports_of(self, path: Path, chain: tuple[Path, ...]) -> list[ExportBinding]:
        if path not in chain:
            return await self.collect(path, chain)
        # Named re-export back into the current chain: only the file's own
        # declarations can be located without recursing.
        module = await self._sources.load(path)
        shallow: list[ExportBinding] = []
        for construct in module.parsed.exports:
            if isinstance(construct, DeclarationExport):
                shallow.append(ExportBinding(construct.name, path, construct.position))
            elif isinstance(construct, DefaultExport):
                shallow.append(ExportBinding(DEFAULT_EXPORT, path, construct.position))
            elif isinstance(construct, ExportList) and construct.source is None:
                for specifier in construct.specifiers:
                    position = module.parsed.declarations.get(specifier.local)
                    if position is not None:
                        shallow.append(ExportBinding(specifier.exported, path, position))
        return apply_collision_policy(shallow, root=path)

    async def _document(self, binding: ExportBinding) -> ExportBinding:
        if binding.position is None:
            return binding
        matcher = await self._sources.matcher(binding.defining_file)
        return binding.with_documentation(matcher.documentation_before(binding.position))


async def resolve(
    entry_file: Path | str, *, settings: ResolveSettings | None = None
) -> CLIDescriptor:
    return await ExportGraphResolver(settings=settings).resolve(Path(entry_file))


def resolve_entry(
    entry_file: Path | str, *, settings: ResolveSettings | None = None
) -> CLIDescriptor:
    return asyncio.run(resolve(entry_file, settings=settings))
