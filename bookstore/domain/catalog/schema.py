"""
JSON schema for book payloads.

Declared once at import and passed explicitly to the validator.
Consumers must treat it as read-only.
"""

# Integer columns are 32-bit in PostgreSQL.
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1

_INT4 = {"type": "integer", "minimum": INT4_MIN, "maximum": INT4_MAX}

BOOK_SCHEMA: dict = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Book",
    "type": "object",
    "required": [
        "isbn",
        "amazon_url",
        "author",
        "language",
        "pages",
        "publisher",
        "title",
        "year",
    ],
    "properties": {
        "isbn": {"type": "string"},
        "amazon_url": {"type": "string"},
        "author": {"type": "string"},
        "language": {"type": "string"},
        "pages": _INT4,
        "publisher": {"type": "string"},
        "title": {"type": "string"},
        "year": _INT4,
    },
}
