from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel

from jsdoc_cli.analysis.model import (
    BoundInvocation,
    CLIDescriptor,
    Documentation,
    ExportBinding,
    ParameterTag,
)


class ParameterTagDTO(BaseModel):
    name: str
    type: str
    optional: bool = False
    default: Optional[str] = None
    description: str = ""

    @classmethod
    def from_model(cls, tag: ParameterTag) -> ParameterTagDTO:
        return cls(
            name=tag.name,
            type=tag.type,
            optional=tag.optional,
            default=tag.default,
            description=tag.description,
        )


class DocumentationDTO(BaseModel):
    description: str
    tags: List[ParameterTagDTO] = []

    @classmethod
    def from_model(cls, documentation: Documentation) -> DocumentationDTO:
        return cls(
            description=documentation.description,
            tags=[ParameterTagDTO.from_model(tag) for tag in documentation.tags],
        )


class ExportBindingDTO(BaseModel):
    name: str
    defining_file: str
    position: Optional[int] = None
    documentation: Optional[DocumentationDTO] = None

    @classmethod
    def from_model(cls, binding: ExportBinding) -> ExportBindingDTO:
        return cls(
            name=binding.name,
            defining_file=str(binding.defining_file),
            position=binding.position,
            documentation=DocumentationDTO.from_model(binding.documentation)
            if binding.documentation is not None
            else None,
        )


class CLIDescriptorDTO(BaseModel):
    name: str
    entry_file: str
    exports: List[ExportBindingDTO] = []

    @classmethod
    def from_model(cls, descriptor: CLIDescriptor) -> CLIDescriptorDTO:
        return cls(
            name=descriptor.name,
            entry_file=str(descriptor.entry_file),
            exports=[ExportBindingDTO.from_model(binding) for binding in descriptor.exports],
        )


class BoundInvocationDTO(BaseModel):
    task: str
    defining_file: str
    arguments: List[Any] = []

    @classmethod
    def from_model(cls, invocation: BoundInvocation) -> BoundInvocationDTO:
        return cls(
            task=invocation.target.name,
            defining_file=str(invocation.target.defining_file),
            arguments=list(invocation.arguments),
        )
