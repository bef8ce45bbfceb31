# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""JSON rendering of program records."""

import json
from dataclasses import asdict
from typing import Any

from pidl.model import ProgramInfo


def to_payload(program_info: ProgramInfo) -> dict[str, Any]:
    """Convert a program record to JSON-compatible primitives.

    Args:
        program_info: Assembled program record.

    Returns:
        Nested dicts and lists in field declaration order.
    """
    return _as_lists(asdict(program_info))


def to_json(program_info: ProgramInfo) -> str:
    """Render a program record as pretty-printed JSON.

    Keys keep declaration order so output is stable across runs.
    """
    return json.dumps(to_payload(program_info), indent=2, ensure_ascii=False)


def _as_lists(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _as_lists(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_as_lists(item) for item in value]
    return value
