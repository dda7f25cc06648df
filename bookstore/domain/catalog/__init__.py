"""
Catalog bounded context, domain layer.

This module contains all domain logic for the book catalog:
- The Book entity and its JSON schema
- Payload validation and error descriptors
- Application errors and tagged outcomes
- The BookRepository port
"""
