from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from vizlint.rules import (
    DEFAULT_RULES,
    ERR_METADATA_NOT_OBJECT,
    ERR_TARGET_HEIGHT_INVALID,
    ERR_TARGET_HEIGHT_UNDEFINED,
    ERR_TARGET_INVALID,
    ERR_TARGET_UNDEFINED,
    ERR_TARGET_WIDTH_INVALID,
    ERR_TARGET_WIDTH_UNDEFINED,
    ERR_TYPE_INVALID,
    ERR_TYPE_UNDEFINED,
    RuleOutcome,
    check_file_locations,
    check_target,
    check_target_height,
    check_target_width,
    check_type,
    check_type_inline,
    check_type_modal,
    check_type_popup,
    make_dimension_rule,
)

BASE = Path("/unused")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "metadata, expected",
    [
        ({}, (ERR_TYPE_UNDEFINED,)),
        ({"type": ""}, (ERR_TYPE_UNDEFINED,)),
        ({"type": "bogus"}, (ERR_TYPE_INVALID,)),
        ({"type": "Static"}, (ERR_TYPE_INVALID,)),
        ({"type": "static"}, ()),
        ({"type": "interactive"}, ()),
    ],
)
async def test_check_type(metadata, expected):
    outcome = await check_type(metadata, BASE)
    assert outcome.violations == expected
    assert outcome.ok is (not expected)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "metadata, expected",
    [
        ({}, (ERR_TARGET_UNDEFINED,)),
        ({"target": None}, (ERR_TARGET_UNDEFINED,)),
        ({"target": "sidebar"}, (ERR_TARGET_INVALID,)),
        ({"target": "popup"}, ()),
        ({"target": "inline"}, ()),
        ({"target": "modal"}, ()),
    ],
)
async def test_check_target(metadata, expected):
    outcome = await check_target(metadata, BASE)
    assert outcome.violations == expected


@pytest.mark.asyncio
async def test_check_target_ignores_current_target_field():
    outcome = await check_target({"target": "popup", "currentTarget": "bogus"}, BASE)
    assert outcome.ok is True


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "metadata, expected",
    [
        ({}, (ERR_TARGET_WIDTH_UNDEFINED,)),
        ({"targetWidth": "wide"}, (ERR_TARGET_WIDTH_INVALID,)),
        ({"targetWidth": 640}, (ERR_TARGET_WIDTH_INVALID,)),
        ({"targetWidth": "640px"}, ()),
    ],
)
async def test_check_target_width(metadata, expected):
    outcome = await check_target_width(metadata, BASE)
    assert outcome.violations == expected


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "metadata, expected",
    [
        ({}, (ERR_TARGET_HEIGHT_UNDEFINED,)),
        ({"targetHeight": "-5px"}, (ERR_TARGET_HEIGHT_INVALID,)),
        ({"targetHeight": "75%"}, ()),
    ],
)
async def test_check_target_height(metadata, expected):
    outcome = await check_target_height(metadata, BASE)
    assert outcome.violations == expected


@pytest.mark.asyncio
async def test_make_dimension_rule_for_new_field():
    rule = make_dimension_rule("thumbnailWidth", "missing thumbnail", "bad thumbnail")

    assert rule.__name__ == "check_thumbnailWidth"
    assert (await rule({}, BASE)).violations == ("missing thumbnail",)
    assert (await rule({"thumbnailWidth": "10 px"}, BASE)).violations == ("bad thumbnail",)
    assert (await rule({"thumbnailWidth": "10px"}, BASE)).ok is True


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "rule, message",
    [
        (check_file_locations, "file location tests not implemented"),
        (check_type_popup, "popup tests not implemented"),
        (check_type_inline, "inline tests not implemented"),
        (check_type_modal, "modal tests not implemented"),
    ],
)
async def test_placeholder_rules_always_pass(rule, message):
    outcome = await rule({}, BASE)
    assert outcome.ok is True
    assert outcome.message == message


def test_default_rule_order():
    assert DEFAULT_RULES == (
        check_type,
        check_target,
        check_target_width,
        check_target_height,
        check_file_locations,
        check_type_popup,
        check_type_inline,
        check_type_modal,
    )


def test_failed_outcome_requires_violations():
    with pytest.raises(ValidationError):
        RuleOutcome.failed([])


def test_passed_outcome_cannot_carry_violations():
    with pytest.raises(ValidationError):
        RuleOutcome(ok=True, violations=("nope",))


@pytest.mark.asyncio
@pytest.mark.parametrize("rule", [check_type, check_target, check_target_width, check_target_height])
@pytest.mark.parametrize("metadata", [["static"], "static", 42, None])
async def test_field_rules_reject_non_object_metadata(rule, metadata):
    outcome = await rule(metadata, BASE)
    assert outcome.violations == (ERR_METADATA_NOT_OBJECT,)
