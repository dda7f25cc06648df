"""
Payload validation against a JSON schema.

Runs a draft-7 jsonschema validator over an untyped payload and maps each
violation to an ErrorDescriptor. Every violation is reported; validation
never stops at the first error.

Descriptor messages follow the wire format clients already rely on:

    instance requires property "isbn"
    instance.author is not of a type(s) string

Ordering follows the schema: keywords in declaration order, then
properties in declaration order. The same payload always yields the same
descriptors in the same order.
"""

import json
import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional, Union

from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError

_IDENTIFIER = re.compile(r"^[a-z_$][a-z0-9_$]*$", re.IGNORECASE)

PathPart = Union[str, int]


@dataclass(frozen=True)
class ErrorDescriptor:
    """One schema violation.

    Attributes:
        field: Dotted location of the offending value, None for the root.
        rule: Schema keyword that failed (required, type, ...).
        message: Human-readable description sent to clients.
    """

    field: Optional[str]
    rule: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a payload: valid when there are no errors."""

    errors: tuple[ErrorDescriptor, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self.errors]


def instance_path(path: Iterable[PathPart]) -> str:
    """Render a location inside the payload, rooted at ``instance``."""
    rendered = "instance"
    for part in path:
        if isinstance(part, int):
            rendered += f"[{part}]"
        elif _IDENTIFIER.match(part):
            rendered += f".{part}"
        else:
            rendered += f"[{json.dumps(part)}]"
    return rendered


def _field_name(path: Sequence[PathPart]) -> Optional[str]:
    if not path:
        return None
    return ".".join(str(part) for part in path)


def _describe(errors: Iterable[ValidationError]) -> Iterator[ErrorDescriptor]:
    # jsonschema emits one "required" error per missing name, in the order
    # the names are listed, so each keyword gets a queue of missing names.
    missing: dict[tuple, Iterator[str]] = {}

    for error in errors:
        path = list(error.absolute_path)
        where = instance_path(path)

        if error.validator == "required":
            key = (tuple(path), tuple(error.absolute_schema_path))
            if key not in missing:
                missing[key] = iter(
                    [name for name in error.validator_value if name not in error.instance]
                )
            name = next(missing[key])
            yield ErrorDescriptor(
                field=_field_name(path + [name]),
                rule="required",
                message=f'{where} requires property "{name}"',
            )
        elif error.validator == "type":
            expected = error.validator_value
            if isinstance(expected, list):
                expected = ",".join(expected)
            yield ErrorDescriptor(
                field=_field_name(path),
                rule="type",
                message=f"{where} is not of a type(s) {expected}",
            )
        else:
            yield ErrorDescriptor(
                field=_field_name(path),
                rule=str(error.validator),
                message=f"{where} {error.message}",
            )


_validators: dict[int, tuple[dict, Draft7Validator]] = {}


def _validator_for(schema: dict) -> Draft7Validator:
    cached = _validators.get(id(schema))
    if cached is not None and cached[0] is schema:
        return cached[1]
    Draft7Validator.check_schema(schema)
    validator = Draft7Validator(schema)
    _validators[id(schema)] = (schema, validator)
    return validator


def validate(payload: Any, schema: dict) -> ValidationResult:
    """Validate a payload against a JSON schema.

    Args:
        payload: Arbitrary decoded JSON value. Never mutated.
        schema: Draft-7 JSON schema, treated as read-only.

    Returns:
        A ValidationResult listing every violation in schema order.
    """
    errors = _validator_for(schema).iter_errors(payload)
    return ValidationResult(errors=tuple(_describe(errors)))
