"""Locate a package's entry module from its ``package.json``."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Mapping

from jsdoc_cli.exceptions import ManifestError

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"
DEFAULT_ENTRY = "index.js"


def load_manifest(directory: Path) -> dict[str, object]:
    if not directory.exists():
        raise ManifestError(f"Directory not found: {directory}")
    if not directory.is_dir():
        raise ManifestError(f"Not a directory: {directory}")
    manifest_path = directory / MANIFEST_NAME
    if not manifest_path.exists():
        raise ManifestError(f"No {MANIFEST_NAME} found in {directory}")
    try:
        payload = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid JSON in {manifest_path}: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise ManifestError(f"{manifest_path} must contain a JSON object.")
    return dict(payload)


def _exports_entry(exports: object) -> str | None:
    if isinstance(exports, str):
        return exports
    if not isinstance(exports, Mapping):
        return None
    root = exports.get(".", exports)
    if isinstance(root, str):
        return root
    if isinstance(root, Mapping):
        for condition in ("import", "default", "node"):
            value = root.get(condition)
            if isinstance(value, str):
                return value
    return None


def entry_specifier(manifest: Mapping[str, object]) -> str:
    main = manifest.get("main")
    if isinstance(main, str) and main.strip():
        return main.strip()
    exported = _exports_entry(manifest.get("exports"))
    if exported:
        return exported
    return DEFAULT_ENTRY


def find_entry_file(directory: Path) -> Path:
    directory = directory.resolve()
    specifier = entry_specifier(load_manifest(directory))
    entry = directory.joinpath(*[part for part in specifier.split("/") if part not in ("", ".")])
    logger.debug("Entry module for %s is %s", directory, entry)
    return entry
