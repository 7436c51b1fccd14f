from jsdoc_cli.ingest.adapter_contract import (
    CommentBlock,
    DeclarationExport,
    DefaultExport,
    ExportConstruct,
    ExportList,
    ExportSpecifier,
    ImportedName,
    ParsedModule,
    ReExportAll,
    SyntaxProvider,
)
from jsdoc_cli.ingest.registry import (
    provider_for_extension,
    provider_for_language,
    provider_for_path,
    register_provider,
)

__all__ = [
    "CommentBlock",
    "DeclarationExport",
    "DefaultExport",
    "ExportConstruct",
    "ExportList",
    "ExportSpecifier",
    "ImportedName",
    "ParsedModule",
    "ReExportAll",
    "SyntaxProvider",
    "provider_for_extension",
    "provider_for_language",
    "provider_for_path",
    "register_provider",
]
