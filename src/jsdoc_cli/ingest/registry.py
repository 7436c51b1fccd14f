from __future__ import annotations

from pathlib import Path

from jsdoc_cli.exceptions import UnsupportedModuleError
from jsdoc_cli.ingest.adapter_contract import SyntaxProvider
from jsdoc_cli.ingest.ecmascript_adapter import ECMAScriptProvider


_PROVIDERS_BY_LANGUAGE: dict[str, SyntaxProvider] = {}
_PROVIDERS_BY_EXTENSION: dict[str, SyntaxProvider] = {}


def register_provider(provider: SyntaxProvider) -> None:
    _PROVIDERS_BY_LANGUAGE[provider.language_id] = provider
    for extension in provider.file_extensions:
        _PROVIDERS_BY_EXTENSION[extension.lower()] = provider


def provider_for_language(language_id: str) -> SyntaxProvider | None:
    return _PROVIDERS_BY_LANGUAGE.get(language_id.lower())


def provider_for_extension(extension: str) -> SyntaxProvider | None:
    return _PROVIDERS_BY_EXTENSION.get(extension.lower())


def provider_for_path(path: Path) -> SyntaxProvider:
    provider = provider_for_extension(path.suffix)
    if provider is None:
        raise UnsupportedModuleError(path)
    return provider


register_provider(ECMAScriptProvider())
