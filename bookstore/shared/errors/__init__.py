"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that every failure
is rendered with the same response envelope.
"""
