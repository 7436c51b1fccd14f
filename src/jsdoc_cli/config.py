from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, TypeAlias
import tomllib

DEFAULT_CONFIG_NAME = "jsdoc-cli.toml"
DEFAULT_NODE = "node"
DEFAULT_SIDE_EFFECT_TIMEOUT_SECONDS = 10.0

ConfigTable: TypeAlias = dict[str, object]


@dataclass(frozen=True)
class ResolveSettings:
    # Suffixes tried when a relative specifier names no existing file.
    extensions: tuple[str, ...] = ()


@dataclass(frozen=True)
class InvokeSettings:
    node: str = DEFAULT_NODE
    side_effect_timeout_seconds: float = DEFAULT_SIDE_EFFECT_TIMEOUT_SECONDS


def _read_table(path: Path) -> ConfigTable:
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_config(root: Path | None = None, config_path: Path | None = None) -> ConfigTable:
    """Read ``jsdoc-cli.toml`` from ``root`` (or an explicit path); missing or
    malformed files read as empty."""
    if config_path is None:
        config_path = (root or Path.cwd()) / DEFAULT_CONFIG_NAME
    return _read_table(config_path)


def _section(name: str, root: Path | None, config_path: Path | None) -> ConfigTable:
    section = load_config(root=root, config_path=config_path).get(name)
    return section if isinstance(section, dict) else {}


def resolve_defaults(root: Path | None = None, config_path: Path | None = None) -> ConfigTable:
    return _section("resolve", root, config_path)


def invoke_defaults(root: Path | None = None, config_path: Path | None = None) -> ConfigTable:
    return _section("invoke", root, config_path)


def _split_names(value: object) -> Iterator[str]:
    if isinstance(value, str):
        chunks: list[object] = [value]
    elif isinstance(value, (list, tuple)):
        chunks = list(value)
    else:
        return
    for chunk in chunks:
        if not isinstance(chunk, str):
            continue
        for name in chunk.split(","):
            if name.strip():
                yield name.strip()


def _as_extension(name: str) -> str:
    return name if name.startswith(".") else f".{name}"


def _positive_seconds(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return DEFAULT_SIDE_EFFECT_TIMEOUT_SECONDS
    try:
        seconds = float(value)
    except ValueError:
        return DEFAULT_SIDE_EFFECT_TIMEOUT_SECONDS
    return seconds if seconds > 0 else DEFAULT_SIDE_EFFECT_TIMEOUT_SECONDS


def resolve_settings(section: ConfigTable | None) -> ResolveSettings:
    if not isinstance(section, dict):
        return ResolveSettings()
    return ResolveSettings(
        extensions=tuple(_as_extension(name) for name in _split_names(section.get("extensions")))
    )


def invoke_settings(section: ConfigTable | None) -> InvokeSettings:
    if not isinstance(section, dict):
        return InvokeSettings()
    node = section.get("node")
    if not isinstance(node, str) or not node.strip():
        node = DEFAULT_NODE
    return InvokeSettings(
        node=node.strip(),
        side_effect_timeout_seconds=_positive_seconds(section.get("side_effect_timeout_seconds")),
    )


def merge_payload(payload: ConfigTable, defaults: ConfigTable) -> ConfigTable:
    """Overlay explicit values on file defaults; ``None`` leaves a default in place."""
    merged = dict(defaults)
    merged.update({key: value for key, value in payload.items() if value is not None})
    return merged
