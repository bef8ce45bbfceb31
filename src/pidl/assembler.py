# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Assembly of extraction results into the program interface record."""

import logging

from pidl.extractor import ExtractionResult
from pidl.model import ProgramInfo

logger = logging.getLogger(__name__)


class ProgramInfoBuilder:
    """Build immutable program records from extraction results."""

    def build(self, result: ExtractionResult) -> ProgramInfo:
        """Compose the aggregate without cross-validating the parts.

        Args:
            result: Output of one extraction pass.

        Returns:
            Frozen program record.
        """
        if not result.program_id:
            logger.warning("No program identifier declared in source")
        return ProgramInfo(
            program_id=result.program_id,
            instructions=tuple(result.instructions),
            accounts=tuple(result.accounts),
            errors=tuple(result.errors),
            structs=tuple(result.structs),
        )
