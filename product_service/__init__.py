"""
Product Service: CRUD REST API for store products.

Application package root. A small service laid out with hexagonal
architecture (ports & adapters).

Bounded contexts:
    - catalog: Products offered by stores (create, read, update, delete).

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (PostgreSQL) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
