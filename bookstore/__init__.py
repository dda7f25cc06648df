"""
Bookstore: book catalog HTTP service.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - catalog: Book records, payload validation, CRUD operations.

Layers:
    - domain: Entities, book schema, validation, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (DB) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, request gate.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
