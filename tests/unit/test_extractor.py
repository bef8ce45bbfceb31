# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
import dataclasses

import pytest

from pidl import extract_program_info, to_json, to_payload
from pidl.assembler import ProgramInfoBuilder
from pidl.extractor import ExtractionResult, ProgramExtractor
from pidl.model import (
    AccountInfo,
    ArgumentInfo,
    ErrorInfo,
    FieldInfo,
    InstructionInfo,
    StructInfo,
)
from pidl.patterns import PatternCompilationError, _compile

SWAP_SOURCE = "\n".join(
    [
        "use anchor_lang::prelude::*;",
        "",
        'declare_id!("DAehvmx2vZoWCJi7Qo3Y4YF5vrEWHQRJ288kqKwDy5DV");',
        "",
        "#[program]",
        "pub mod swap {",
        "    use super::*;",
        "",
        "    pub fn make_offer(ctx: Context<MakeOffer>, id: u64, token_a_offered_amount: u64) -> Result<()> {",
        "        Ok(())",
        "    }",
        "",
        "    pub fn take_offer(ctx: Context<TakeOffer>) -> Result<()> {",
        "        Ok(())",
        "    }",
        "}",
        "",
        "#[derive(Accounts)]",
        "pub struct TakeOffer<'info> {",
        "    #[account(mut)]",
        "    pub taker: Signer<'info>,",
        "    pub token_program: Interface<'info, TokenInterface>,",
        "}",
        "",
        "#[account]",
        "pub struct Offer {",
        "    pub id: u64,",
        "    pub maker: Pubkey,",
        "}",
        "",
        "pub enum Error {",
        '    #[msg("Invalid amount")]',
        "    InvalidAmount,",
        "",
        "    OfferExpired, // offer has expired",
        "    Unauthorized,",
        "}",
    ]
)


def test_ext_001_program_id_is_first_declared_literal() -> None:
    extractor = ProgramExtractor()
    source = 'declare_id!("ABC123");\ndeclare_id!("XYZ789");'

    assert extractor.extract_program_id(source) == "ABC123"


def test_ext_002_program_id_is_empty_when_not_declared() -> None:
    assert ProgramExtractor().extract_program_id("pub mod swap {}") == ""


def test_ext_003_instruction_arguments_follow_context_in_order() -> None:
    source = "pub fn foo(ctx: Context<Bar>, id: u64, amount: u64) -> Result<()> {"

    instructions = ProgramExtractor().extract_instructions(source)

    assert instructions == [
        InstructionInfo(
            name="foo",
            arguments=(
                ArgumentInfo(name="id", type_name="u64"),
                ArgumentInfo(name="amount", type_name="u64"),
            ),
        )
    ]


def test_ext_004_instruction_without_arguments_has_empty_list() -> None:
    instructions = ProgramExtractor().extract_instructions(
        "pub fn baz(ctx: Context<Qux>) -> Result<()> {"
    )

    assert instructions == [InstructionInfo(name="baz", arguments=())]


def test_ext_005_instruction_requires_context_parameter_named_ctx() -> None:
    source = "\n".join(
        [
            "pub fn make_offer(context: Context<MakeOffer>, id: u64) -> Result<()> {",
            "pub fn take_offer(",
            "    ctx: Context<TakeOffer>,",
            ") -> Result<()> {",
            "pub fn helper(value: u64) -> u64 {",
        ]
    )

    assert ProgramExtractor().extract_instructions(source) == []


def test_ext_006_account_struct_fields_skip_attributes() -> None:
    accounts = ProgramExtractor().extract_accounts(SWAP_SOURCE)

    assert accounts == [
        AccountInfo(
            name="TakeOffer",
            fields=(
                FieldInfo(name="taker", type_name="Signer<'info>,"),
                FieldInfo(
                    name="token_program",
                    type_name="Interface<'info, TokenInterface>,",
                ),
            ),
        )
    ]


def test_ext_007_account_marker_must_directly_precede_struct() -> None:
    source = "\n".join(
        [
            "#[derive(Accounts)]",
            "#[instruction(id: u64)]",
            "pub struct MakeOffer<'info> {",
            "    pub maker: Signer<'info>,",
            "}",
        ]
    )

    extractor = ProgramExtractor()

    assert extractor.extract_accounts(source) == []
    assert extractor.extract_structs(source) == [
        StructInfo(
            name="MakeOffer",
            fields=(FieldInfo(name="maker", type_name="Signer<'info>,"),),
        )
    ]


def test_ext_008_struct_body_ends_at_first_closing_brace() -> None:
    source = "\n".join(
        [
            "pub struct Outer {",
            "    pub inner: Inner { x: u8 },",
            "    pub after: u64,",
            "}",
        ]
    )

    structs = ProgramExtractor().extract_structs(source)

    assert len(structs) == 1
    assert structs[0].name == "Outer"
    assert [field.name for field in structs[0].fields] == ["inner"]


def test_ext_009_account_struct_is_captured_by_both_rules() -> None:
    info = extract_program_info(SWAP_SOURCE)

    assert [account.name for account in info.accounts] == ["TakeOffer"]
    assert [struct.name for struct in info.structs] == ["TakeOffer", "Offer"]
    assert info.structs[0].fields == info.accounts[0].fields


def test_ext_010_error_codes_are_sequential_from_base() -> None:
    errors = ProgramExtractor().extract_errors(SWAP_SOURCE)

    assert errors == [
        ErrorInfo(name="InvalidAmount,", code=6000, message="InvalidAmount,"),
        ErrorInfo(name="OfferExpired,", code=6001, message="OfferExpired,"),
        ErrorInfo(name="Unauthorized,", code=6002, message="Unauthorized,"),
    ]


def test_ext_011_only_first_error_enum_is_read() -> None:
    source = "pub enum Error {\n    First\n}\npub enum Error {\n    Second\n}"

    errors = ProgramExtractor(error_code_base=100).extract_errors(source)

    assert errors == [ErrorInfo(name="First", code=100, message="First")]


def test_ext_012_error_enum_marker_is_exact() -> None:
    source = "pub enum ErrorCode {\n    InvalidAmount,\n}"

    assert ProgramExtractor().extract_errors(source) == []


def test_ext_013_full_source_assembles_every_section() -> None:
    info = extract_program_info(SWAP_SOURCE)

    assert info.program_id == "DAehvmx2vZoWCJi7Qo3Y4YF5vrEWHQRJ288kqKwDy5DV"
    assert [instruction.name for instruction in info.instructions] == [
        "make_offer",
        "take_offer",
    ]
    assert info.instructions[0].arguments == (
        ArgumentInfo(name="id", type_name="u64"),
        ArgumentInfo(name="token_a_offered_amount", type_name="u64"),
    )
    assert [error.code for error in info.errors] == [6000, 6001, 6002]
    assert info.structs[1] == StructInfo(
        name="Offer",
        fields=(
            FieldInfo(name="id", type_name="u64,"),
            FieldInfo(name="maker", type_name="Pubkey,"),
        ),
    )


def test_ext_014_empty_source_yields_empty_aggregate() -> None:
    info = extract_program_info("")

    assert to_payload(info) == {
        "program_id": "",
        "instructions": [],
        "accounts": [],
        "errors": [],
        "structs": [],
    }


def test_ext_015_assembled_record_is_immutable() -> None:
    result = ExtractionResult(program_id="ABC123")
    info = ProgramInfoBuilder().build(result)
    result.instructions.append(InstructionInfo(name="late"))

    assert info.instructions == ()
    with pytest.raises(dataclasses.FrozenInstanceError):
        info.program_id = "other"  # type: ignore[misc]


def test_ext_016_serialized_output_is_idempotent_and_ordered() -> None:
    first = to_json(extract_program_info(SWAP_SOURCE))
    second = to_json(extract_program_info(SWAP_SOURCE))

    assert first == second
    assert first.index('"program_id"') < first.index('"instructions"')
    assert first.index('"instructions"') < first.index('"accounts"')
    assert first.index('"accounts"') < first.index('"errors"')
    assert first.index('"errors"') < first.index('"structs"')
    assert '"type_name": "u64"' in first


def test_ext_017_invalid_pattern_is_fatal() -> None:
    with pytest.raises(PatternCompilationError):
        _compile("broken", "(unclosed")
