"""
Metadata rules.

Every rule is an async callable taking the parsed metadata and the package base
path and returning a ``RuleOutcome``. A rule set is just an ordered sequence of
such callables; ``DEFAULT_RULES`` is the one used when a caller supplies none.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Awaitable, Callable, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator

from vizlint.dimensions import is_valid_dimension

Metadata = Any

VALID_TYPES = ("interactive", "static")
VALID_TARGETS = ("popup", "inline", "modal")

FIELDS_OK_MESSAGE = "All required fields are properly defined!"

ERR_METADATA_NOT_OBJECT = "The metadata must be a JSON object"
ERR_TYPE_UNDEFINED = 'The required field "type" was not defined'
ERR_TYPE_INVALID = 'The field "type" must be "interactive" or "static"'
ERR_TARGET_UNDEFINED = 'The required field "target" was not defined'
ERR_TARGET_INVALID = 'The field "target" must be "popup", "inline" or "modal"'
ERR_TARGET_WIDTH_UNDEFINED = 'The required field "targetWidth" was not defined'
ERR_TARGET_WIDTH_INVALID = 'The field "targetWidth" must be a whole number followed by "px" or "%"'
ERR_TARGET_HEIGHT_UNDEFINED = 'The required field "targetHeight" was not defined'
ERR_TARGET_HEIGHT_INVALID = 'The field "targetHeight" must be a whole number followed by "px" or "%"'


class RuleOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: bool
    message: str = ""
    violations: tuple[str, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def _check_shape(self) -> "RuleOutcome":
        if self.ok and self.violations:
            raise ValueError("a passing outcome cannot carry violations")
        if not self.ok and not self.violations:
            raise ValueError("a failing outcome needs at least one violation")
        return self

    @classmethod
    def passed(cls, message: str) -> "RuleOutcome":
        return cls(ok=True, message=message)

    @classmethod
    def failed(cls, violations: Sequence[str]) -> "RuleOutcome":
        return cls(ok=False, violations=tuple(violations))


Rule = Callable[[Metadata, Path], Awaitable[RuleOutcome]]


def _enum_field_violations(
    metadata: Metadata,
    field: str,
    allowed: Sequence[str],
    undefined_message: str,
    invalid_message: str,
) -> list[str]:
    if not isinstance(metadata, Mapping):
        return [ERR_METADATA_NOT_OBJECT]
    value = metadata.get(field)
    if not value:
        return [undefined_message]
    if value not in allowed:
        return [invalid_message]
    return []


def _outcome(violations: list[str], message: str = FIELDS_OK_MESSAGE) -> RuleOutcome:
    if violations:
        return RuleOutcome.failed(violations)
    return RuleOutcome.passed(message)


async def check_type(metadata: Metadata, base_path: Path) -> RuleOutcome:
    return _outcome(
        _enum_field_violations(metadata, "type", VALID_TYPES, ERR_TYPE_UNDEFINED, ERR_TYPE_INVALID)
    )


async def check_target(metadata: Metadata, base_path: Path) -> RuleOutcome:
    return _outcome(
        _enum_field_violations(metadata, "target", VALID_TARGETS, ERR_TARGET_UNDEFINED, ERR_TARGET_INVALID)
    )


def make_dimension_rule(field: str, undefined_message: str, invalid_message: str) -> Rule:
    """
    Builds a rule requiring ``field`` to hold a dimension string.

    New size-bearing fields get their own rule from this factory instead of a
    copy of the checking logic.
    """

    async def check_dimension(metadata: Metadata, base_path: Path) -> RuleOutcome:
        if not isinstance(metadata, Mapping):
            return RuleOutcome.failed([ERR_METADATA_NOT_OBJECT])
        value = metadata.get(field)
        if not value:
            return RuleOutcome.failed([undefined_message])
        if not is_valid_dimension(value):
            return RuleOutcome.failed([invalid_message])
        return RuleOutcome.passed(f'"{field}" is a valid dimension')

    check_dimension.__name__ = f"check_{field}"
    check_dimension.__qualname__ = check_dimension.__name__
    return check_dimension


check_target_width = make_dimension_rule("targetWidth", ERR_TARGET_WIDTH_UNDEFINED, ERR_TARGET_WIDTH_INVALID)
check_target_height = make_dimension_rule("targetHeight", ERR_TARGET_HEIGHT_UNDEFINED, ERR_TARGET_HEIGHT_INVALID)


# Placeholders until the structural checks for each package type are written.
# They always pass and check nothing.

async def check_file_locations(metadata: Metadata, base_path: Path) -> RuleOutcome:
    return RuleOutcome.passed("file location tests not implemented")


async def check_type_popup(metadata: Metadata, base_path: Path) -> RuleOutcome:
    return RuleOutcome.passed("popup tests not implemented")


async def check_type_inline(metadata: Metadata, base_path: Path) -> RuleOutcome:
    return RuleOutcome.passed("inline tests not implemented")


async def check_type_modal(metadata: Metadata, base_path: Path) -> RuleOutcome:
    return RuleOutcome.passed("modal tests not implemented")


DEFAULT_RULES: tuple[Rule, ...] = (
    check_type,
    check_target,
    check_target_width,
    check_target_height,
    check_file_locations,
    check_type_popup,
    check_type_inline,
    check_type_modal,
)
