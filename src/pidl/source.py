# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Program source loading."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_source(source_path: Path) -> str:
    """Read a program source file.

    Args:
        source_path: File to read.

    Returns:
        File content, or an empty string when the file cannot be read.
    """
    try:
        return source_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(
            f"Could not read source file; continuing with empty source (path={source_path} error={exc})"
        )
        return ""
