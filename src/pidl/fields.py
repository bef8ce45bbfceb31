# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Field and argument splitting for brace and parenthesis bodies."""

import logging

from pidl.model import ArgumentInfo, FieldInfo

logger = logging.getLogger(__name__)

ATTRIBUTE_MARKER = "#"


def parse_fields(body: str) -> list[FieldInfo]:
    """Parse a flat struct body into ordered fields.

    Attribute lines are buffered until the next non-attribute line and then
    dropped; fields never carry attribute text.

    Args:
        body: Text between the struct braces.

    Returns:
        Fields in source order.
    """
    fields: list[FieldInfo] = []
    pending_attributes: list[str] = []
    for raw_line in body.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        if line.startswith(ATTRIBUTE_MARKER):
            pending_attributes.append(line)
            continue
        name_part, colon, type_part = line.partition(":")
        if colon:
            tokens = name_part.split()
            fields.append(
                FieldInfo(
                    name=tokens[-1] if tokens else "",
                    type_name=type_part.strip(),
                )
            )
        pending_attributes.clear()
    return fields


def parse_arguments(arg_list: str) -> list[ArgumentInfo]:
    """Split an instruction argument list into name/type pairs.

    Commas inside generic brackets are not special: ``a: Map<K, V>`` splits
    into two fragments.

    Args:
        arg_list: Text after the context parameter, without the closing paren.

    Returns:
        Arguments in source order.
    """
    arguments: list[ArgumentInfo] = []
    if not arg_list:
        return arguments
    for fragment in arg_list.split(","):
        name_part, colon, type_part = fragment.strip().partition(":")
        if not colon:
            continue
        arguments.append(
            ArgumentInfo(name=name_part.strip(), type_name=type_part.strip())
        )
    return arguments
