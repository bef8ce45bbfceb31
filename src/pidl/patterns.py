# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Recognition patterns for program source declarations.

Patterns are plain regular expressions and are not nesting-aware: struct and
enum bodies end at the first closing brace and argument lists at the first
closing parenthesis.
"""

import logging
import re

logger = logging.getLogger(__name__)


class PatternCompilationError(RuntimeError):
    """Represent a defect in the fixed recognition pattern set."""


def _compile(name: str, pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        logger.critical(f"Pattern failed to compile (pattern={name} error={exc})")
        raise PatternCompilationError(f"Invalid pattern {name}: {exc}") from exc


PROGRAM_ID = _compile("program_id", r'declare_id!\("([^"]+)"\)')
INSTRUCTION = _compile(
    "instruction", r"pub fn (\w+)\(ctx: Context<([^>]+)>(?:, ([^)]+))?\)"
)
ACCOUNT_STRUCT = _compile(
    "account_struct",
    r"#\[derive\(Accounts\)\]\s+pub struct (\w+)<[^>]*>\s*\{([^}]+)\}",
)
PLAIN_STRUCT = _compile(
    "plain_struct", r"pub struct (\w+)(?:<[^>]*>)?\s*\{([^}]+)\}"
)
ERROR_ENUM = _compile("error_enum", r"pub enum Error\s*\{([^}]+)\}")
