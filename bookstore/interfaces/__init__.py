"""
Interfaces layer package.

Contains FastAPI routers, Pydantic response schemas,
and the request gate. No business logic belongs here.
Routes call use cases and return responses.
"""
