# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Pattern-based extraction of program interface declarations."""

import logging
from dataclasses import dataclass, field

from pidl import patterns
from pidl.fields import ATTRIBUTE_MARKER, parse_arguments, parse_fields
from pidl.model import AccountInfo, ErrorInfo, InstructionInfo, StructInfo

logger = logging.getLogger(__name__)

ERROR_CODE_BASE = 6000


@dataclass
class ExtractionResult:
    """Collect the independent outputs of one extraction pass.

    Attributes:
        program_id: First declared identifier, empty when absent.
        instructions: Matched instruction handlers.
        accounts: Matched account bundle structs.
        errors: Matched error variants.
        structs: Matched plain structs.
    """

    program_id: str = ""
    instructions: list[InstructionInfo] = field(default_factory=list)
    accounts: list[AccountInfo] = field(default_factory=list)
    errors: list[ErrorInfo] = field(default_factory=list)
    structs: list[StructInfo] = field(default_factory=list)


class ProgramExtractor:
    """Extract interface declarations from program source text."""

    def __init__(self, error_code_base: int = ERROR_CODE_BASE) -> None:
        """Initialize extractor.

        Args:
            error_code_base: Code assigned to the first error variant.
        """
        self._error_code_base = error_code_base

    def extract(self, source: str) -> ExtractionResult:
        """Run every recognition rule over the source text.

        Rules share nothing but the input text. Declarations that do not match
        a rule are skipped without diagnostics.

        Args:
            source: Full program module source.

        Returns:
            Extraction result with lists in source order.
        """
        result = ExtractionResult(
            program_id=self.extract_program_id(source),
            instructions=self.extract_instructions(source),
            accounts=self.extract_accounts(source),
            errors=self.extract_errors(source),
            structs=self.extract_structs(source),
        )
        logger.debug(
            f"Extraction completed (program_id={result.program_id!r} "
            f"instructions={len(result.instructions)} accounts={len(result.accounts)} "
            f"errors={len(result.errors)} structs={len(result.structs)})"
        )
        return result

    def extract_program_id(self, source: str) -> str:
        """Return the first declared program identifier or an empty string."""
        match = patterns.PROGRAM_ID.search(source)
        if match is None:
            return ""
        return match.group(1) or ""

    def extract_instructions(self, source: str) -> list[InstructionInfo]:
        """Extract handlers whose first parameter is ``ctx: Context<...>``."""
        instructions: list[InstructionInfo] = []
        for match in patterns.INSTRUCTION.finditer(source):
            arguments = parse_arguments(match.group(3) or "")
            instructions.append(
                InstructionInfo(name=match.group(1) or "", arguments=tuple(arguments))
            )
        return instructions

    def extract_accounts(self, source: str) -> list[AccountInfo]:
        """Extract structs annotated with ``#[derive(Accounts)]``."""
        return [
            AccountInfo(
                name=match.group(1) or "",
                fields=tuple(parse_fields(match.group(2) or "")),
            )
            for match in patterns.ACCOUNT_STRUCT.finditer(source)
        ]

    def extract_structs(self, source: str) -> list[StructInfo]:
        """Extract every ``pub struct`` with a brace body."""
        return [
            StructInfo(
                name=match.group(1) or "",
                fields=tuple(parse_fields(match.group(2) or "")),
            )
            for match in patterns.PLAIN_STRUCT.finditer(source)
        ]

    def extract_errors(self, source: str) -> list[ErrorInfo]:
        """Extract variants of the first ``pub enum Error`` block.

        Only the leading token of each variant line is kept; the message is a
        copy of the name.
        """
        match = patterns.ERROR_ENUM.search(source)
        if match is None:
            return []
        errors: list[ErrorInfo] = []
        for raw_line in (match.group(1) or "").splitlines():
            line = raw_line.strip()
            if not line or line.startswith(ATTRIBUTE_MARKER):
                continue
            name = line.split()[0]
            errors.append(
                ErrorInfo(
                    name=name,
                    code=self._error_code_base + len(errors),
                    message=name,
                )
            )
        return errors
