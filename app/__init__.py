"""
User Service — CRUD HTTP API over a single users table.

Application package root, laid out as hexagonal architecture
(ports & adapters).

Bounded contexts:
    - users: Registration, lookup, full/partial update, deletion, paginated listing.

Layers:
    - domain: Entities, validation rules, ports (ABCs), errors.
    - application: The user service and its DTOs.
    - infrastructure: SQLAlchemy adapter implementing the repository port.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
