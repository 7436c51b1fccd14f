from __future__ import annotations

import urllib.parse
import urllib.request
from pathlib import Path

from jsdoc_cli.config import ResolveSettings
from jsdoc_cli.exceptions import ManifestError, SpecifierError
from jsdoc_cli.manifest import find_entry_file

_DEFAULT_SETTINGS = ResolveSettings()


def _split_package_specifier(specifier: str) -> tuple[str, str]:
    parts = specifier.split("/")
    if specifier.startswith("@") and len(parts) >= 2:
        return "/".join(parts[:2]), "/".join(parts[2:])
    return parts[0], "/".join(parts[1:])


def _with_extensions(path: Path, settings: ResolveSettings) -> Path:
    if path.is_file() or not settings.extensions:
        return path
    for extension in settings.extensions:
        candidate = path.with_name(path.name + extension)
        if candidate.is_file():
            return candidate
    if path.is_dir():
        for extension in settings.extensions:
            candidate = path / f"index{extension}"
            if candidate.is_file():
                return candidate
    return path


def _resolve_package(specifier: str, importer: Path) -> Path:
    package, subpath = _split_package_specifier(specifier)
    for directory in (importer.parent, *importer.parent.parents):
        package_dir = directory / "node_modules" / package
        if not package_dir.is_dir():
            continue
        if subpath:
            return package_dir.joinpath(*subpath.split("/"))
        try:
            return find_entry_file(package_dir)
        except ManifestError as exc:
            raise SpecifierError(specifier, importer) from exc
    raise SpecifierError(specifier, importer)


def resolve_specifier(
    specifier: str,
    *,
    importer: Path,
    settings: ResolveSettings = _DEFAULT_SETTINGS,
) -> Path:
    """Map an import specifier to the absolute path of the module it names."""
    if specifier.startswith("file:"):
        parsed = urllib.parse.urlparse(specifier)
        path = Path(urllib.request.url2pathname(parsed.path))
    elif specifier.startswith(("./", "../", "/")) or specifier in (".", ".."):
        path = (importer.parent / specifier).resolve()
    elif specifier.startswith("node:"):
        raise SpecifierError(specifier, importer)
    else:
        path = _resolve_package(specifier, importer)
    return _with_extensions(path.resolve(), settings)
