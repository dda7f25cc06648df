"""
Tests for the catalog domain layer.

Tests the validator, entities, errors and outcomes in isolation.
No external dependencies or IO required.
"""

import copy

import pytest

from bookstore.domain.catalog.entities import BOOK_FIELDS, Book
from bookstore.domain.catalog.errors import (
    ApplicationError,
    DuplicateBookError,
    book_already_exists,
    book_not_found,
)
from bookstore.domain.catalog.outcome import Failure, Success
from bookstore.domain.catalog.schema import BOOK_SCHEMA
from bookstore.domain.catalog.validation import (
    ErrorDescriptor,
    ValidationResult,
    instance_path,
    validate,
)


def _payload(**overrides) -> dict:
    data = {
        "isbn": "0691161518",
        "amazon_url": "http://a.co/eobPtX2",
        "author": "Matthew Lane",
        "language": "english",
        "pages": 264,
        "publisher": "Princeton University Press",
        "title": "Power-Up",
        "year": 2017,
    }
    data.update(overrides)
    return data


class TestValidator:
    """Tests for validate() against the book schema."""

    def test_valid_payload(self) -> None:
        result = validate(_payload(), BOOK_SCHEMA)
        assert result.valid
        assert result.errors == ()
        assert result.messages == []

    def test_missing_property(self) -> None:
        payload = _payload()
        del payload["isbn"]
        result = validate(payload, BOOK_SCHEMA)
        assert not result.valid
        assert result.errors == (
            ErrorDescriptor(
                field="isbn",
                rule="required",
                message='instance requires property "isbn"',
            ),
        )

    def test_wrong_type(self) -> None:
        result = validate(_payload(author=111), BOOK_SCHEMA)
        assert result.errors == (
            ErrorDescriptor(
                field="author",
                rule="type",
                message="instance.author is not of a type(s) string",
            ),
        )

    def test_empty_object_reports_every_field(self) -> None:
        result = validate({}, BOOK_SCHEMA)
        assert result.messages == [
            f'instance requires property "{name}"' for name in BOOK_SCHEMA["required"]
        ]

    @pytest.mark.parametrize("payload", [[], "book", 42, None])
    def test_non_object_payload(self, payload) -> None:
        result = validate(payload, BOOK_SCHEMA)
        assert result.errors == (
            ErrorDescriptor(
                field=None,
                rule="type",
                message="instance is not of a type(s) object",
            ),
        )

    def test_boolean_is_not_an_integer(self) -> None:
        result = validate(_payload(pages=True), BOOK_SCHEMA)
        assert result.messages == ["instance.pages is not of a type(s) integer"]

    def test_violations_accumulate_in_schema_order(self) -> None:
        payload = _payload(year="2017", isbn=12)
        del payload["author"]
        del payload["amazon_url"]
        result = validate(payload, BOOK_SCHEMA)
        assert result.messages == [
            'instance requires property "amazon_url"',
            'instance requires property "author"',
            "instance.isbn is not of a type(s) string",
            "instance.year is not of a type(s) integer",
        ]

    def test_extra_properties_are_allowed(self) -> None:
        assert validate(_payload(subtitle="x"), BOOK_SCHEMA).valid

    def test_deterministic(self) -> None:
        payload = _payload(pages="x", title=None)
        assert validate(payload, BOOK_SCHEMA) == validate(payload, BOOK_SCHEMA)

    def test_does_not_mutate_payload(self) -> None:
        payload = _payload(pages="x")
        snapshot = copy.deepcopy(payload)
        validate(payload, BOOK_SCHEMA)
        assert payload == snapshot

    def test_multiple_types_joined(self) -> None:
        schema = {"type": "object", "properties": {"year": {"type": ["integer", "null"]}}}
        result = validate({"year": "soon"}, schema)
        assert result.messages == ["instance.year is not of a type(s) integer,null"]

    def test_nested_required(self) -> None:
        schema = {
            "type": "object",
            "properties": {
                "publisher": {"type": "object", "required": ["name", "city"]},
            },
        }
        result = validate({"publisher": {}}, schema)
        assert result.errors == (
            ErrorDescriptor(
                field="publisher.name",
                rule="required",
                message='instance.publisher requires property "name"',
            ),
            ErrorDescriptor(
                field="publisher.city",
                rule="required",
                message='instance.publisher requires property "city"',
            ),
        )

    def test_integer_bounds(self) -> None:
        result = validate(_payload(pages=2**31, year=-(2**31) - 1), BOOK_SCHEMA)
        assert result.errors == (
            ErrorDescriptor(
                field="pages",
                rule="maximum",
                message="instance.pages 2147483648 is greater than the maximum of 2147483647",
            ),
            ErrorDescriptor(
                field="year",
                rule="minimum",
                message="instance.year -2147483649 is less than the minimum of -2147483648",
            ),
        )

    def test_wrong_type_skips_bounds(self) -> None:
        result = validate(_payload(pages="2147483648"), BOOK_SCHEMA)
        assert result.messages == ["instance.pages is not of a type(s) integer"]

    def test_other_keywords_use_library_message(self) -> None:
        schema = {"type": "object", "properties": {"pages": {"minimum": 1}}}
        result = validate({"pages": 0}, schema)
        assert result.errors == (
            ErrorDescriptor(
                field="pages",
                rule="minimum",
                message="instance.pages 0 is less than the minimum of 1",
            ),
        )


class TestInstancePath:
    def test_root(self) -> None:
        assert instance_path([]) == "instance"

    def test_mixed_parts(self) -> None:
        assert instance_path(["authors", 0, "first name"]) == 'instance.authors[0]["first name"]'


class TestValidationResult:
    def test_valid_when_empty(self) -> None:
        assert ValidationResult().valid

    def test_messages_follow_error_order(self) -> None:
        result = ValidationResult(
            errors=(
                ErrorDescriptor(field="a", rule="type", message="first"),
                ErrorDescriptor(field="b", rule="type", message="second"),
            )
        )
        assert not result.valid
        assert result.messages == ["first", "second"]


class TestBookEntity:
    """Tests for the Book entity."""

    def test_from_mapping_ignores_unknown_keys(self) -> None:
        book = Book.from_mapping(_payload(subtitle="ignored"))
        assert book.to_dict() == _payload()

    def test_field_order(self) -> None:
        assert BOOK_FIELDS == (
            "isbn",
            "amazon_url",
            "author",
            "language",
            "pages",
            "publisher",
            "title",
            "year",
        )

    def test_with_isbn(self) -> None:
        book = Book.from_mapping(_payload())
        moved = book.with_isbn("12")
        assert moved.isbn == "12"
        assert moved.title == book.title
        assert book.isbn == "0691161518"


class TestErrors:
    """Tests for ApplicationError and domain exceptions."""

    def test_application_error_carries_message_and_status(self) -> None:
        error = ApplicationError(["a", "b"], 400)
        assert error.to_dict() == {"message": ["a", "b"], "status": 400}

    def test_application_error_with_single_message(self) -> None:
        assert ApplicationError("gone", 404).to_dict() == {"message": "gone", "status": 404}

    def test_book_not_found(self) -> None:
        error = book_not_found("11111111")
        assert error.status == 404
        assert error.message == "There is no book with an isbn '11111111'"

    def test_book_already_exists(self) -> None:
        assert book_already_exists("12").status == 409

    def test_duplicate_book_error_message(self) -> None:
        exc = DuplicateBookError("12")
        assert exc.isbn == "12"
        assert "12" in str(exc)


class TestOutcome:
    def test_success_forwards_value(self) -> None:
        outcome = Success(2).then(lambda value: Success(value * 10))
        assert outcome == Success(20)
        assert outcome.ok

    def test_failure_short_circuits(self) -> None:
        error = ApplicationError("nope", 400)
        calls = []
        outcome = Failure(error).then(lambda value: calls.append(value))
        assert outcome == Failure(error)
        assert not outcome.ok
        assert calls == []
