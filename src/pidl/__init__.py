# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Public import surface for program interface extraction."""

from pidl.assembler import ProgramInfoBuilder
from pidl.extractor import ERROR_CODE_BASE, ExtractionResult, ProgramExtractor
from pidl.model import (
    AccountInfo,
    ArgumentInfo,
    ErrorInfo,
    FieldInfo,
    InstructionInfo,
    ProgramInfo,
    StructInfo,
)
from pidl.patterns import PatternCompilationError
from pidl.serializer import to_json, to_payload
from pidl.source import read_source


def extract_program_info(source: str) -> ProgramInfo:
    """Extract and assemble the interface record of one source text."""
    return ProgramInfoBuilder().build(ProgramExtractor().extract(source))


__all__ = [
    "ERROR_CODE_BASE",
    "AccountInfo",
    "ArgumentInfo",
    "ErrorInfo",
    "ExtractionResult",
    "FieldInfo",
    "InstructionInfo",
    "PatternCompilationError",
    "ProgramExtractor",
    "ProgramInfo",
    "ProgramInfoBuilder",
    "StructInfo",
    "extract_program_info",
    "read_source",
    "to_json",
    "to_payload",
]
