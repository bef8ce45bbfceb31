# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for extracted program interfaces."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ArgumentInfo:
    """Represent one instruction argument.

    Attributes:
        name: Argument name as written in source.
        type_name: Argument type text as written in source.
    """

    name: str
    type_name: str


@dataclass(frozen=True)
class FieldInfo:
    """Represent one struct field.

    Attributes:
        name: Field name without visibility qualifier.
        type_name: Everything after the first colon, trimmed.
    """

    name: str
    type_name: str


@dataclass(frozen=True)
class InstructionInfo:
    """Represent one exported instruction handler."""

    name: str
    arguments: tuple[ArgumentInfo, ...] = ()


@dataclass(frozen=True)
class AccountInfo:
    """Represent one resource-account bundle struct."""

    name: str
    fields: tuple[FieldInfo, ...] = ()


@dataclass(frozen=True)
class StructInfo:
    """Represent one plain struct declaration."""

    name: str
    fields: tuple[FieldInfo, ...] = ()


@dataclass(frozen=True)
class ErrorInfo:
    """Represent one declared error variant.

    Attributes:
        name: Leading token of the variant line.
        code: Sequential numeric code.
        message: Copy of ``name``.
    """

    name: str
    code: int
    message: str


@dataclass(frozen=True)
class ProgramInfo:
    """Represent the complete interface record of one program module.

    Attributes:
        program_id: Declared program identifier, empty when absent.
        instructions: Instructions in source order.
        accounts: Account bundle structs in source order.
        errors: Error variants in declaration order.
        structs: Plain structs in source order.
    """

    program_id: str = ""
    instructions: tuple[InstructionInfo, ...] = ()
    accounts: tuple[AccountInfo, ...] = ()
    errors: tuple[ErrorInfo, ...] = ()
    structs: tuple[StructInfo, ...] = ()
